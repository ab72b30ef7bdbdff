"""
Модуль подключений.

Предоставляет подключения к внешним сервисам:
- database: движок и сессии SQLAlchemy
- storage: S3ContextManager для S3/MinIO
- cache: клиент Redis для кэша представлений
"""

from .cache import close_redis_client, get_redis_client
from .database import dispose_engine, get_db_session, get_engine
from .storage import S3ContextManager

__all__ = [
    "S3ContextManager",
    "close_redis_client",
    "dispose_engine",
    "get_db_session",
    "get_engine",
    "get_redis_client",
]
