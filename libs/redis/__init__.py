"""
Redis 보조 레이어 (선택)

SyncJob 진행률을 실시간 조회용으로 미러링.
Redis 미설정/장애 시 sync_jobs 테이블만 사용.
"""

from libs.redis.client import get_redis_client
from libs.redis.job_status import get_job_status, set_job_status

__all__ = [
    "get_redis_client",
    "get_job_status",
    "set_job_status",
]
