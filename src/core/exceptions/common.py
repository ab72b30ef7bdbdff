"""
Общие исключения для API.

Содержит базовые классы ошибок по видам ErrorKind; доменные исключения
наследуются от них.
"""

from typing import Any, Dict, Optional

from starlette.status import (HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN,
                              HTTP_404_NOT_FOUND, HTTP_409_CONFLICT,
                              HTTP_422_UNPROCESSABLE_ENTITY,
                              HTTP_500_INTERNAL_SERVER_ERROR)

from src.core.exceptions.base import BaseAPIException
from src.core.result import ErrorKind


class UnauthorizedError(BaseAPIException):
    """
    Нет аутентифицированного пользователя.

    Attributes:
        status_code (int): HTTP_401_UNAUTHORIZED.
        error_type (str): "unauthorized".
    """

    error_kind = ErrorKind.UNAUTHORIZED

    def __init__(self, detail: str = "Требуется аутентификация"):
        super().__init__(
            status_code=HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_type="unauthorized",
        )


class NotFoundError(BaseAPIException):
    """
    Исключение для случая, когда запрашиваемый ресурс не найден.

    Attributes:
        status_code (int): HTTP_404_NOT_FOUND.
        detail (str): Подробное сообщение об ошибке.
        error_type (str): Тип ошибки "not_found".
    """

    error_kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        detail: str = "Ресурс не найден",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        error_type: str = "not_found",
        extra: Optional[Dict[Any, Any]] = None,
    ):
        """
        Инициализация исключения NotFoundError.

        Args:
            detail (str): Сообщение об ошибке.
            field (str, optional): Название поля, по которому искали.
            value (Any, optional): Значение, которое не было найдено.
            error_type (str): Код ошибки.
            extra (Dict, optional): Дополнительные данные.
        """
        if extra is None:
            extra = {}

        if field and value:
            extra.update({"field": field, "value": value})

        super().__init__(
            status_code=HTTP_404_NOT_FOUND,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class ValidationFailedError(BaseAPIException):
    """
    Входные данные не прошли валидацию. detail - сообщение первого поля с ошибкой.
    """

    error_kind = ErrorKind.VALIDATION

    def __init__(
        self,
        detail: str = "Некорректные данные",
        error_type: str = "validation_error",
        extra: Optional[Dict[Any, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class ConflictError(BaseAPIException):
    """
    Исключение для конфликтов данных (например, дублирование уникальных полей).

    Attributes:
        status_code (int): HTTP_409_CONFLICT.
        detail (str): Подробное сообщение об ошибке.
        error_type (str): Тип ошибки "conflict".
    """

    error_kind = ErrorKind.CONFLICT

    def __init__(
        self,
        detail: str = "Конфликт данных",
        error_type: str = "conflict",
        extra: Optional[Dict[Any, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_409_CONFLICT,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class ForbiddenError(BaseAPIException):
    """
    Исключение для случая, когда доступ запрещен.

    Attributes:
        status_code (int): HTTP_403_FORBIDDEN.
        detail (str): Подробное сообщение об ошибке.
        error_type (str): Тип ошибки "forbidden".
    """

    error_kind = ErrorKind.FORBIDDEN

    def __init__(
        self,
        detail: str = "Доступ запрещен",
        error_type: str = "forbidden",
        extra: Optional[Dict[Any, Any]] = None,
    ):
        super().__init__(
            status_code=HTTP_403_FORBIDDEN,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class InternalServiceError(BaseAPIException):
    """Непредвиденный сбой. Детали остаются в логах сервера."""

    error_kind = ErrorKind.INTERNAL

    def __init__(self, detail: str = "Внутренняя ошибка сервера"):
        super().__init__(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_type="internal_error",
        )
