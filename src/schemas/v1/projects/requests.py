"""
Схемы запросов для проектов.

Ключ проекта: латинские заглавные буквы и цифры, начинается с буквы,
длина 2-10 символов (например, "CORE", "WEB2").
"""

import re
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from src.schemas.base import BaseRequestSchema

PROJECT_KEY_PATTERN = re.compile(r"^[A-Z][A-Z0-9]*$")


def validate_project_key(value: str) -> str:
    """
    Проверяет формат ключа проекта.

    Raises:
        PydanticCustomError: Если ключ не соответствует формату.
    """
    if not 2 <= len(value) <= 10:
        raise PydanticCustomError(
            "project_key_length", "Ключ проекта должен быть от 2 до 10 символов"
        )
    if not PROJECT_KEY_PATTERN.match(value):
        raise PydanticCustomError(
            "project_key_format",
            "Ключ проекта: заглавные латинские буквы и цифры, первой идёт буква",
        )
    return value


class ProjectCreateRequestSchema(BaseRequestSchema):
    """
    Example:
        {"name": "Core", "key": "CORE", "workspace_id": "..."}
    """

    name: str = Field(min_length=1, max_length=100)
    key: str = Field(description="Ключ проекта")
    description: Optional[str] = Field(default=None, max_length=1000)
    workspace_id: UUID

    @field_validator("key")
    @classmethod
    def check_key(cls, value: str) -> str:
        return validate_project_key(value)


class ProjectUpdateRequestSchema(BaseRequestSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    key: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("key")
    @classmethod
    def check_key(cls, value: Optional[str]) -> Optional[str]:
        return validate_project_key(value) if value is not None else value
