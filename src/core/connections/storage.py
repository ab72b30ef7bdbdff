"""
Модуль для работы с облачным хранилищем.

S3ContextManager открывает клиент aioboto3 к S3-совместимому хранилищу
(AWS S3, MinIO) на время запроса.
"""

import logging
from typing import Any, Optional

from aioboto3 import Session
from botocore.config import Config as BotocoreConfig

from src.core.settings import settings


class S3ContextManager:
    """
    Контекстный менеджер клиента S3.

    Example:
        >>> async with S3ContextManager() as s3:
        ...     await s3.delete_object(Bucket="attachments", Key="a/b.png")
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        self._client_context: Optional[Any] = None

    async def __aenter__(self) -> Any:
        storage = settings.storage
        session = Session(
            aws_access_key_id=storage.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=(
                storage.AWS_SECRET_ACCESS_KEY.get_secret_value()
                if storage.AWS_SECRET_ACCESS_KEY
                else None
            ),
            region_name=storage.AWS_REGION,
        )
        self._client_context = session.client(
            "s3",
            endpoint_url=storage.AWS_ENDPOINT,
            config=BotocoreConfig(s3={"addressing_style": "path"}),
        )
        client = await self._client_context.__aenter__()
        self.logger.debug("Клиент S3 создан: %s", storage.AWS_ENDPOINT)
        return client

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._client_context is not None:
            await self._client_context.__aexit__(exc_type, exc_val, exc_tb)
            self._client_context = None
