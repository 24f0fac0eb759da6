"""
Queue 추상화 레이어

외부 워커(프록시 서버) 큐로 일괄 작업 전달.

사용 예:
    from libs.queue import get_queue_client

    queue = get_queue_client()
    queue.send_message("/api/consent/upload-queue", {"jobId": "...", "data": [...]})
"""

from .client import QueueClient, QueueUnavailableError, get_queue_client

__all__ = ["QueueClient", "QueueUnavailableError", "get_queue_client"]
