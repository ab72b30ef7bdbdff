"""
Жизненный цикл приложения: закрытие пулов соединений при остановке.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.connections import close_redis_client, dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Запуск приложения %s", app.title)
    yield
    await close_redis_client()
    await dispose_engine()
    logger.info("Приложение остановлено")
