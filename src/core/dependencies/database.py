"""
Зависимости для работы с базой данных в FastAPI.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.connections.database import get_db_session
from src.core.exceptions.dependencies import ServiceUnavailableException

logger = logging.getLogger("src.dependencies.database")


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Зависимость для получения асинхронной сессии базы данных.

    Yields:
        AsyncSession: Асинхронная сессия SQLAlchemy

    Raises:
        ServiceUnavailableException: Если не удается открыть сессию.
    """
    session_gen = get_db_session()
    try:
        session = await session_gen.__anext__()
    except RuntimeError as e:
        logger.error("Ошибка подключения к базе данных: %s", e)
        raise ServiceUnavailableException("Database (Postgres)") from e

    try:
        yield session
    finally:
        await session_gen.aclose()


# Типизированная зависимость
AsyncSessionDep = Annotated[AsyncSession, Depends(get_async_session)]
