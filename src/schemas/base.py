"""
Базовые схемы API.

- CommonBaseSchema: общая конфигурация (from_attributes, populate_by_name)
- BaseSchema: сущность с id и метками времени
- BaseRequestSchema: входящие данные (лишние поля запрещены)
- BaseResponseSchema: обёртка ответа {success, message, data}
- ErrorSchema, ErrorResponseSchema: формат ошибки
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CommonBaseSchema(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=False,
    )


class BaseSchema(CommonBaseSchema):
    """Схема сущности из базы данных."""

    id: UUID = Field(description="Идентификатор")
    created_at: datetime = Field(description="Дата создания")
    updated_at: datetime = Field(description="Дата последнего изменения")


class BaseRequestSchema(CommonBaseSchema):
    """Базовая схема входящего запроса."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class BaseResponseSchema(CommonBaseSchema):
    """
    Обёртка ответа API.

    Attributes:
        success: Признак успешного выполнения.
        message: Сообщение для пользователя.
    """

    success: bool = Field(default=True, description="Успешность операции")
    message: Optional[str] = Field(default=None, description="Сообщение")


class ErrorSchema(CommonBaseSchema):
    kind: str = Field(description="Вид ошибки (unauthorized, forbidden, ...)")
    type: str = Field(description="Код ошибки")
    detail: str = Field(description="Описание ошибки")
    extra: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponseSchema(BaseResponseSchema):
    success: bool = False
    data: None = None
    error: ErrorSchema
