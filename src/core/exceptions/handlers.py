"""
Обработчики исключений FastAPI.

Единственное место, где вид ошибки (ErrorKind) сопоставляется HTTP статусу.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import (HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN,
                              HTTP_404_NOT_FOUND, HTTP_409_CONFLICT,
                              HTTP_422_UNPROCESSABLE_ENTITY,
                              HTTP_500_INTERNAL_SERVER_ERROR)

from src.core.exceptions.base import BaseAPIException
from src.core.result import ErrorKind, OperationError, OperationFailed

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.UNAUTHORIZED: HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.CONFLICT: HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(kind: ErrorKind) -> int:
    """
    HTTP статус для вида ошибки.

    Raises:
        KeyError: Если для вида ошибки нет статуса (новый ErrorKind без записи в таблице).
    """
    return ERROR_STATUS_CODES[kind]


def _error_body(
    kind: ErrorKind,
    code: str,
    message: str,
    extra: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "success": False,
        "message": message,
        "data": None,
        "error": {
            "kind": kind.value,
            "type": code,
            "detail": message,
            "extra": extra or {},
        },
    }


def error_response(error: OperationError) -> JSONResponse:
    """JSON ответ для OperationError."""
    return JSONResponse(
        status_code=status_code_for(error.kind),
        content=_error_body(error.kind, error.code, error.message, error.extra),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Регистрирует обработчики исключений приложения.

    Args:
        app: Экземпляр FastAPI.
    """

    @app.exception_handler(OperationFailed)
    async def operation_failed_handler(
        request: Request, exc: OperationFailed
    ) -> JSONResponse:
        logger.info(
            "Операция завершилась ошибкой %s: %s",
            exc.error.code,
            exc.error.message,
            extra={"path": request.url.path, "kind": exc.error.kind.value},
        )
        return error_response(exc.error)

    @app.exception_handler(BaseAPIException)
    async def api_exception_handler(
        request: Request, exc: BaseAPIException
    ) -> JSONResponse:
        return error_response(exc.to_error())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Некорректные данные"
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(ErrorKind.VALIDATION, "validation_error", message),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            "Необработанное исключение на %s: %s",
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                ErrorKind.INTERNAL, "internal_error", "Внутренняя ошибка сервера"
            ),
        )
