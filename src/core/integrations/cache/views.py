"""
Инвалидация кэша отрендеренных представлений проектов.

После изменения задач сбрасываются пути вида
/workspace/{slug}/project/{key}. Инвалидация - best-effort.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

from redis.asyncio import Redis

from src.core.messaging import SideEffectChannel
from src.core.settings import settings


def project_view_path(workspace_slug: str, project_key: str) -> str:
    """Путь представления проекта."""
    return f"/workspace/{workspace_slug}/project/{project_key}"


class ViewCacheInvalidator(ABC):
    """Контракт инвалидации кэша представлений."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def invalidate(self, paths: Iterable[str]) -> List[str]:
        """
        Сбрасывает кэш для путей.

        Returns:
            List[str]: Пути, для которых кэш сброшен.
        """


class LoggingViewCacheInvalidator(ViewCacheInvalidator):
    """Без внешнего кэша: только фиксирует пути в логе."""

    async def invalidate(self, paths: Iterable[str]) -> List[str]:
        invalidated = sorted(set(paths))
        for path in invalidated:
            self.logger.debug("Инвалидация представления %s", path)
        return invalidated


class RedisViewCacheInvalidator(ViewCacheInvalidator):
    """
    Удаляет ключи представлений из Redis.

    Ключ: "{VIEW_CACHE_PREFIX}:{path}".
    """

    def __init__(self, redis: Redis, prefix: str = settings.cache.VIEW_CACHE_PREFIX):
        super().__init__()
        self.redis = redis
        self.prefix = prefix

    async def invalidate(self, paths: Iterable[str]) -> List[str]:
        invalidated = sorted(set(paths))
        if not invalidated:
            return []
        keys = [f"{self.prefix}:{path}" for path in invalidated]
        removed = await self.redis.delete(*keys)
        self.logger.info(
            "Сброшен кэш представлений: %d путей, удалено ключей %d",
            len(invalidated),
            removed,
        )
        return invalidated


def enqueue_view_invalidation(
    channel: SideEffectChannel,
    invalidator: ViewCacheInvalidator,
    paths: Iterable[str],
) -> List[str]:
    """
    Ставит сброс кэша путей в канал побочных эффектов.

    Returns:
        List[str]: Уникальные пути в порядке сортировки.
    """
    unique = sorted(set(paths))
    if unique:
        channel.enqueue(
            "views:" + ",".join(unique),
            lambda _session: invalidator.invalidate(unique),
        )
    return unique
