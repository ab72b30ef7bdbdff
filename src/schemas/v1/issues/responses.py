"""
Схемы ответов для работы с задачами (Issues) в API v1.

Схемы:
    - IssueDetailSchema: Задача
    - IssueResponseSchema: Обёртка для одиночного ответа
    - IssueListResponseSchema: Обёртка для списка задач
    - BulkResultSchema, BulkResponseSchema: Итог массовой операции
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from src.models.v1.issues import IssuePriority, IssueStatus, IssueType
from src.schemas.base import BaseResponseSchema, BaseSchema, CommonBaseSchema


class IssueDetailSchema(BaseSchema):
    """
    Задача в ответах API.

    Example:
        {
            "id": "...",
            "key": "CORE-12",
            "title": "Падает импорт CSV",
            "status": "TODO",
            "priority": "HIGH",
            "type": "BUG",
            "order": 2.5,
            "project_id": "...",
            "reporter_id": "...",
            "assignee_id": null,
            "parent_id": null
        }
    """

    key: str
    number: int
    title: str
    description: Optional[str] = None
    status: IssueStatus
    priority: IssuePriority
    type: IssueType
    order: float
    project_id: UUID
    reporter_id: UUID
    assignee_id: Optional[UUID] = None
    parent_id: Optional[UUID] = None
    due_date: Optional[datetime] = None


class IssueResponseSchema(BaseResponseSchema):
    data: IssueDetailSchema


class IssueListResponseSchema(BaseResponseSchema):
    data: List[IssueDetailSchema]


class BulkResultSchema(CommonBaseSchema):
    """
    Итог массовой операции.

    Attributes:
        count: Сколько задач изменено.
        invalidated_paths: Пути представлений, кэш которых сброшен.
    """

    count: int = Field(description="Количество задач")
    invalidated_paths: List[str] = Field(default_factory=list)


class BulkResponseSchema(BaseResponseSchema):
    data: BulkResultSchema


class DeleteResultSchema(CommonBaseSchema):
    id: UUID
    deleted: bool = True


class DeleteResponseSchema(BaseResponseSchema):
    data: DeleteResultSchema
