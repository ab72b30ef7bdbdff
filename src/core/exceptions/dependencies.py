"""
Исключения уровня зависимостей (недоступность внешних сервисов).
"""

from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from src.core.exceptions.base import BaseAPIException
from src.core.result import ErrorKind


class ServiceUnavailableException(BaseAPIException):
    """Внешний сервис (БД, хранилище) недоступен."""

    error_kind = ErrorKind.INTERNAL

    def __init__(self, service_name: str):
        super().__init__(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Сервис {service_name} недоступен",
            error_type="service_unavailable",
            extra={"service": service_name},
        )
