"""
Хранилище байтов вложений.

AbstractStorageBackend описывает контракт, которым пользуется сервис
вложений (удаление по ссылке), BaseS3Storage реализует его для
S3-совместимых хранилищ (AWS S3, MinIO).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from botocore.exceptions import ClientError

from src.core.settings import settings


class AbstractStorageBackend(ABC):
    """
    Абстрактный интерфейс для работы с хранилищем файлов.
    """

    @abstractmethod
    async def delete_file(
        self, file_key: str, bucket_name: Optional[str] = None
    ) -> bool:
        """
        Удаляет файл из хранилища.

        Args:
            file_key: Ключ (путь) файла в хранилище
            bucket_name: Название бакета (опционально)

        Returns:
            bool: True если файл был удален, False если файл не существовал
        """

    @abstractmethod
    async def file_exists(
        self, file_key: str, bucket_name: Optional[str] = None
    ) -> bool:
        """Проверяет существование файла в хранилище."""


class BaseS3Storage(AbstractStorageBackend):
    """
    Реализация хранилища поверх клиента aioboto3.

    Attributes:
        _client: Клиент S3
        bucket_name: Название бакета по умолчанию
        logger: Логгер для класса
    """

    def __init__(self, s3_client: Any, bucket_name: Optional[str] = None):
        self._client = s3_client
        self.bucket_name = bucket_name or settings.storage.AWS_BUCKET_NAME
        self.logger = logging.getLogger(self.__class__.__name__)

    async def file_exists(
        self, file_key: str, bucket_name: Optional[str] = None
    ) -> bool:
        """
        Проверяет существование файла в S3.

        Raises:
            ValueError: При ошибке проверки файла
        """
        bucket_name = bucket_name or self.bucket_name
        try:
            await self._client.head_object(Bucket=bucket_name, Key=file_key)
            return True
        except ClientError as error:
            if error.response["Error"]["Code"] in ("404", "NoSuchKey"):
                return False
            error_message = f"Ошибка при проверке наличия файла: {error}"
            self.logger.error(error_message)
            raise ValueError(error_message) from error

    async def delete_file(
        self, file_key: str, bucket_name: Optional[str] = None
    ) -> bool:
        """
        Удаляет файл из S3.

        Raises:
            ValueError: При ошибке удаления
        """
        bucket_name = bucket_name or self.bucket_name
        if not await self.file_exists(file_key, bucket_name):
            self.logger.warning(
                "Файл %s отсутствует в бакете %s, удалять нечего", file_key, bucket_name
            )
            return False
        try:
            await self._client.delete_object(Bucket=bucket_name, Key=file_key)
            self.logger.info("Файл %s удалён из бакета %s", file_key, bucket_name)
            return True
        except ClientError as error:
            error_message = f"Ошибка при удалении файла {file_key}: {error}"
            self.logger.error(error_message)
            raise ValueError(error_message) from error
