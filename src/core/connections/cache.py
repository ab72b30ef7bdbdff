"""
Подключение к Redis для кэша представлений.
"""

import logging
from typing import Optional

from redis.asyncio import Redis

from src.core.settings import settings

logger = logging.getLogger(__name__)

_redis: Optional[Redis] = None


def get_redis_client() -> Optional[Redis]:
    """Клиент Redis или None, если REDIS_URL не задан."""
    global _redis
    if _redis is None and settings.cache.REDIS_URL:
        _redis = Redis.from_url(settings.cache.REDIS_URL, decode_responses=True)
        logger.info("Создан клиент Redis для кэша представлений")
    return _redis


async def close_redis_client() -> None:
    global _redis
    if _redis is not None:
        await _redis.aclose()
        logger.info("Соединение с Redis закрыто")
    _redis = None
