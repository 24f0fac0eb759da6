"""
Redis 클라이언트 (선택)

REDIS_HOST 미설정 또는 연결 실패 시 None 반환.
호출부는 None 이면 Redis 미러링을 건너뛰고 DB 만 사용.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import redis

logger = logging.getLogger(__name__)

_client: Optional[redis.Redis] = None
_disabled = False


def get_redis_client() -> Optional[redis.Redis]:
    global _client, _disabled

    if _disabled:
        return None
    if _client is not None:
        return _client

    host = os.getenv("REDIS_HOST")
    if not host:
        logger.debug("REDIS_HOST not set, job progress mirror disabled")
        _disabled = True
        return None

    port = int(os.getenv("REDIS_PORT", "6379"))
    db = int(os.getenv("REDIS_DB", "0"))
    try:
        client = redis.Redis(
            host=host,
            port=port,
            password=os.getenv("REDIS_PASSWORD") or None,
            db=db,
            decode_responses=True,
            socket_timeout=5,
            socket_connect_timeout=5,
        )
        client.ping()
    except redis.RedisError as e:
        logger.warning("Redis connection failed (DB only): %s", e)
        _disabled = True
        return None

    _client = client
    logger.info("Redis connected: %s:%s db=%s", host, port, db)
    return client


def reset_redis_state() -> None:
    """테스트용: 연결 상태 초기화"""
    global _client, _disabled
    _client = None
    _disabled = False
