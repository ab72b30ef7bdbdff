"""
Канал best-effort побочных эффектов.

Команда сначала фиксирует основное изменение, затем передаёт в канал
записи журнала активности, уведомления и инвалидацию кэша. Канал
выполняет каждый эффект в собственной сессии, с повторами, и никогда не
пробрасывает ошибку эффекта вызывающему: результат команды от эффектов
не зависит.

Usage:
    channel = SideEffectChannel(bind=session.bind)
    channel.enqueue("activity:STATUS_CHANGED", lambda s: ActivityService(s).record_activity(...))
    report = await channel.dispatch()
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.core.settings import settings

logger = logging.getLogger(__name__)

Effect = Callable[[AsyncSession], Awaitable[Any]]


@dataclass
class SideEffectReport:
    """
    Итог выполнения эффектов.

    Attributes:
        delivered: Метки выполненных эффектов.
        failed: Метки эффектов, не выполненных после всех попыток.
    """

    delivered: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


@dataclass
class _QueuedEffect:
    label: str
    effect: Effect


class SideEffectChannel:
    """
    Очередь эффектов одной команды.

    Эффекты выполняются конкурентно после фиксации основного изменения,
    каждый в своей сессии. Сбой или повторы одного эффекта не задерживают
    остальные.

    Args:
        bind: Движок, на котором открываются сессии эффектов.
        max_attempts: Попыток на эффект (по умолчанию из настроек).
        retry_delay: Пауза между попытками в секундах.
        concurrency: Сколько эффектов выполняется одновременно.
    """

    def __init__(
        self,
        bind: AsyncEngine,
        max_attempts: Optional[int] = None,
        retry_delay: Optional[float] = None,
        concurrency: Optional[int] = None,
    ):
        self.bind = bind
        self.max_attempts = max(
            1, max_attempts or settings.side_effects.SIDE_EFFECT_MAX_ATTEMPTS
        )
        self.retry_delay = (
            settings.side_effects.SIDE_EFFECT_RETRY_DELAY
            if retry_delay is None
            else retry_delay
        )
        self.concurrency = max(
            1, concurrency or settings.side_effects.SIDE_EFFECT_CONCURRENCY
        )
        self._queue: List[_QueuedEffect] = []

    def __len__(self) -> int:
        return len(self._queue)

    def enqueue(self, label: str, effect: Effect) -> None:
        """Добавляет эффект в очередь."""
        self._queue.append(_QueuedEffect(label=label, effect=effect))

    async def dispatch(self) -> SideEffectReport:
        """
        Выполняет все эффекты из очереди и очищает её.

        Returns:
            SideEffectReport: Какие эффекты выполнены, какие нет.
        """
        queued, self._queue = self._queue, []
        report = SideEffectReport()
        limiter = asyncio.Semaphore(self.concurrency)

        async def run_limited(item: _QueuedEffect) -> bool:
            async with limiter:
                return await self._run(item)

        outcomes = await asyncio.gather(*(run_limited(item) for item in queued))
        for item, delivered in zip(queued, outcomes):
            if delivered:
                report.delivered.append(item.label)
            else:
                report.failed.append(item.label)
        if report.failed:
            logger.warning(
                "Побочные эффекты не выполнены: %s",
                ", ".join(report.failed),
                extra={"delivered": len(report.delivered), "failed": len(report.failed)},
            )
        return report

    async def _run(self, item: _QueuedEffect) -> bool:
        for attempt in range(1, self.max_attempts + 1):
            try:
                async with AsyncSession(bind=self.bind, expire_on_commit=False) as session:
                    await item.effect(session)
                return True
            except Exception as e:  # эффект best-effort: ошибка не выходит за канал
                logger.error(
                    "Эффект %s: попытка %d/%d не удалась: %s",
                    item.label,
                    attempt,
                    self.max_attempts,
                    e,
                    exc_info=attempt == self.max_attempts,
                )
                if attempt < self.max_attempts and self.retry_delay > 0:
                    await asyncio.sleep(self.retry_delay)
        return False
