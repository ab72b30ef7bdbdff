"""
Схемы запросов для workspace.

Slug: строчные латинские буквы, цифры и дефис, длина 2-50. Если slug не
передан при создании, он строится из названия.
"""

import re
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from src.schemas.base import BaseRequestSchema

WORKSPACE_SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


def validate_workspace_slug(value: str) -> str:
    if not 2 <= len(value) <= 50:
        raise PydanticCustomError(
            "workspace_slug_length", "Slug должен быть от 2 до 50 символов"
        )
    if not WORKSPACE_SLUG_PATTERN.match(value):
        raise PydanticCustomError(
            "workspace_slug_format",
            "Slug: строчные латинские буквы, цифры и дефис",
        )
    return value


class WorkspaceCreateRequestSchema(BaseRequestSchema):
    """
    Example:
        {"name": "Marketing Team"}
        {"name": "Marketing Team", "slug": "marketing"}
    """

    name: str = Field(min_length=2, max_length=50, description="Название")
    slug: Optional[str] = Field(default=None, description="URL-идентификатор")

    @field_validator("slug")
    @classmethod
    def check_slug(cls, value: Optional[str]) -> Optional[str]:
        return validate_workspace_slug(value) if value is not None else value


class WorkspaceUpdateRequestSchema(BaseRequestSchema):
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    slug: Optional[str] = None

    @field_validator("slug")
    @classmethod
    def check_slug(cls, value: Optional[str]) -> Optional[str]:
        return validate_workspace_slug(value) if value is not None else value

    @model_validator(mode="after")
    def check_not_null(self) -> "WorkspaceUpdateRequestSchema":
        for field_name in ("name", "slug"):
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise PydanticCustomError(
                    "field_not_nullable",
                    "Поле {field} не может быть пустым",
                    {"field": field_name},
                )
        return self
