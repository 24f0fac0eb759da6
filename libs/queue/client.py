"""
Queue 클라이언트 추상화

대용량 일괄 작업은 외부 워커(알림톡 프록시 서버)의 큐에 HTTP 로 넘긴다.
전달 실패는 QueueUnavailableError 로 통일. 호출부가 in-process 처리로 fallback.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_PROXY_URL = "http://localhost:3005"


class QueueUnavailableError(Exception):
    """워커 큐 접근 불가 (연결 실패, 타임아웃, 2xx 가 아닌 응답)."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(message)


class QueueClient(ABC):
    """Queue 클라이언트 추상 인터페이스"""

    @abstractmethod
    def send_message(self, queue_name: str, message: Dict[str, Any]) -> Dict[str, Any]:
        """메시지 전송. 실패 시 QueueUnavailableError."""


class HttpProxyQueueClient(QueueClient):
    """
    프록시 서버 큐 (POST {base_url}{queue_name})
    queue_name 은 경로 (예: /api/consent/upload-queue)
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or proxy_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else proxy_timeout()

    def send_message(self, queue_name: str, message: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{queue_name}"
        try:
            resp = requests.post(url, json=message, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("queue send failed url=%s job_id=%s: %s", url, message.get("jobId"), e)
            raise QueueUnavailableError(f"Queue unavailable: {e}", cause=e) from e

        logger.info("queue send ok url=%s job_id=%s", url, message.get("jobId"))
        try:
            return resp.json()
        except ValueError:
            return {}


def proxy_base_url() -> str:
    return str(getattr(settings, "ALIMTALK_PROXY_URL", "") or DEFAULT_PROXY_URL)


def proxy_timeout() -> float:
    return float(getattr(settings, "ALIMTALK_PROXY_TIMEOUT", 10))


def get_queue_client() -> QueueClient:
    return HttpProxyQueueClient()
