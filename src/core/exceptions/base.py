"""
Базовое исключение API.

Все доменные исключения наследуются от BaseAPIException и объявляют
error_kind. На границе операции сервиса исключение превращается
в Err(OperationError) через to_error().
"""

from typing import Any, ClassVar, Dict, Optional

from fastapi import HTTPException

from src.core.result import ErrorKind, OperationError


class BaseAPIException(HTTPException):
    """
    Базовое исключение для доменных ошибок.

    Attributes:
        error_kind (ErrorKind): Класс ошибки для Result.
        status_code (int): HTTP статус.
        detail (str): Сообщение об ошибке.
        error_type (str): Машиночитаемый код ошибки.
        extra (Dict[str, Any]): Дополнительные данные.
    """

    error_kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_type: str,
        extra: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_type = error_type
        self.extra = extra or {}

    def to_error(self) -> OperationError:
        """Преобразует исключение в OperationError."""
        return OperationError(
            kind=self.error_kind,
            code=self.error_type,
            message=self.detail,
            extra={key: str(value) for key, value in self.extra.items()},
        )
