"""
Зависимость инвалидатора кэша представлений.

При заданном REDIS_URL ключи удаляются из Redis, иначе пути только
пишутся в лог.
"""

from typing import Annotated

from fastapi import Depends

from src.core.connections.cache import get_redis_client
from src.core.integrations.cache import (LoggingViewCacheInvalidator,
                                         RedisViewCacheInvalidator,
                                         ViewCacheInvalidator)


async def get_view_cache() -> ViewCacheInvalidator:
    redis = get_redis_client()
    if redis is None:
        return LoggingViewCacheInvalidator()
    return RedisViewCacheInvalidator(redis)


ViewCacheDep = Annotated[ViewCacheInvalidator, Depends(get_view_cache)]
