"""
Зависимости хранилища файлов вложений.
"""

import logging
from typing import Annotated, Any, AsyncGenerator

from fastapi import Depends

from src.core.connections.storage import S3ContextManager
from src.core.exceptions.dependencies import ServiceUnavailableException
from src.core.integrations.storages import (AbstractStorageBackend,
                                            BaseS3Storage)

logger = logging.getLogger("src.dependencies.storage")


async def get_s3_client() -> AsyncGenerator[Any, None]:
    """
    Dependency для получения S3 клиента через контекстный менеджер.

    Raises:
        ServiceUnavailableException: если не удаётся подключиться к S3
    """
    try:
        async with S3ContextManager() as s3:
            logger.debug("S3 подключение установлено")
            yield s3
    except ServiceUnavailableException:
        raise
    except (OSError, RuntimeError) as e:
        logger.error("Ошибка подключения к S3: %s", e)
        raise ServiceUnavailableException("Storage (S3)") from e


S3ClientDep = Annotated[Any, Depends(get_s3_client)]


async def get_storage(s3_client: S3ClientDep) -> AbstractStorageBackend:
    return BaseS3Storage(s3_client)


StorageDep = Annotated[AbstractStorageBackend, Depends(get_storage)]
