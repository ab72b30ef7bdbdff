"""
Схемы запросов для спринтов.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from src.models.v1.sprints import SprintStatus
from src.schemas.base import BaseRequestSchema


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Даты без зоны считаются UTC (так их возвращает SQLite)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class SprintCreateRequestSchema(BaseRequestSchema):
    """
    Example:
        {"name": "Sprint 1", "project_id": "...", "goal": "Импорт CSV"}
    """

    name: str = Field(min_length=1, max_length=100, description="Название")
    goal: Optional[str] = Field(default=None, max_length=1000, description="Цель")
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    project_id: UUID

    @model_validator(mode="after")
    def check_dates(self) -> "SprintCreateRequestSchema":
        start_date, end_date = as_utc(self.start_date), as_utc(self.end_date)
        if start_date and end_date and end_date < start_date:
            raise PydanticCustomError(
                "sprint_dates", "Дата окончания раньше даты начала"
            )
        return self


class SprintUpdateRequestSchema(BaseRequestSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    goal: Optional[str] = Field(default=None, max_length=1000)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[SprintStatus] = None

    @model_validator(mode="after")
    def check_not_null(self) -> "SprintUpdateRequestSchema":
        for field_name in ("name", "status"):
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise PydanticCustomError(
                    "field_not_nullable",
                    "Поле {field} не может быть пустым",
                    {"field": field_name},
                )
        return self
