"""History 저장소용 Redis 클라이언트 (프로세스 공유)"""

import logging

import redis

from transly.config import get_settings

logger = logging.getLogger(__name__)


class _RedisHolder:
    client: redis.Redis | None = None


def get_redis() -> redis.Redis:
    if _RedisHolder.client is None:
        _RedisHolder.client = redis.Redis.from_url(
            get_settings().redis_url,
            decode_responses=True,
        )
    return _RedisHolder.client


def ping_redis() -> bool:
    """연결 가능 여부 (health 체크용). 실패는 로그만 남기고 False."""
    try:
        return bool(get_redis().ping())
    except redis.RedisError as e:
        logger.warning(f"Redis 연결 실패: {e}")
        return False


def close_redis() -> None:
    if _RedisHolder.client is not None:
        _RedisHolder.client.close()
        _RedisHolder.client = None


def set_redis(client: redis.Redis | None) -> None:
    """클라이언트 교체 (테스트용, None이면 다음 호출 때 재생성)"""
    _RedisHolder.client = client
