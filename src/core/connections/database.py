"""
Подключение к базе данных.

Движок и фабрика сессий создаются лениво при первом обращении и
закрываются в lifespan приложения.
"""

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from src.core.settings import settings

logger = logging.getLogger(__name__)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """Возвращает (и при необходимости создаёт) асинхронный движок SQLAlchemy."""
    global _engine
    if _engine is None:
        _engine = create_async_engine(
            settings.database.url, **settings.database.engine_params
        )
        logger.info("Создан движок базы данных")
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(), class_=AsyncSession, **settings.database.session_params
        )
    return _session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Выдаёт сессию на время запроса и закрывает её после.

    Raises:
        RuntimeError: Если не удалось открыть сессию.
    """
    try:
        session = get_session_factory()()
    except SQLAlchemyError as e:
        raise RuntimeError(f"Не удалось создать сессию БД: {e}") from e

    async with session:
        yield session


async def dispose_engine() -> None:
    """Закрывает пул соединений."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("Соединения с базой данных закрыты")
    _engine = None
    _session_factory = None
