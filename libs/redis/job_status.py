"""
SyncJob 실시간 진행률 미러 (Redis)

- 키: job:{job_id}:status
- 값: JSON {status, progress, current_step, updated_at}
- TTL: 1시간, 최종 상태의 SSOT 는 sync_jobs 테이블
"""

from __future__ import annotations

import json
import logging
import time
from typing import Optional

import redis

from libs.redis.client import get_redis_client

logger = logging.getLogger(__name__)

STATUS_TTL_SECONDS = 3600


def _key(job_id: str) -> str:
    return f"job:{job_id}:status"


def set_job_status(
    job_id: str,
    *,
    status: str = "processing",
    progress: int = 0,
    current_step: str = "",
    extra: Optional[dict] = None,
) -> bool:
    client = get_redis_client()
    if client is None:
        return False

    data = {
        "status": status,
        "progress": min(100, max(0, int(progress))),
        "current_step": current_step or "",
        "updated_at": time.time(),
    }
    if extra:
        data.update(extra)

    try:
        client.set(_key(job_id), json.dumps(data, ensure_ascii=False), ex=STATUS_TTL_SECONDS)
        return True
    except redis.RedisError as e:
        logger.warning("Redis job status set failed job=%s: %s", job_id, e)
        return False


def get_job_status(job_id: str) -> Optional[dict]:
    client = get_redis_client()
    if client is None:
        return None
    try:
        raw = client.get(_key(job_id))
    except redis.RedisError as e:
        logger.warning("Redis job status get failed job=%s: %s", job_id, e)
        return None
    return json.loads(raw) if raw else None
