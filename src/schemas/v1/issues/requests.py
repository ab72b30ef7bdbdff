"""
Схемы запросов для работы с задачами (Issues) в API v1.

Схемы:
    - IssueCreateRequestSchema: Создание задачи
    - IssueUpdateRequestSchema: Частичное обновление задачи
    - IssueMoveRequestSchema: Перемещение на доске
    - SubtaskCreateRequestSchema: Создание подзадачи
    - SubtaskStatusRequestSchema: Смена статуса подзадачи
    - BulkStatusRequestSchema, BulkAssignRequestSchema,
      BulkPriorityRequestSchema, BulkDeleteRequestSchema: Массовые операции

Note:
    IssueUpdateRequestSchema - частичный патч: сервис применяет только
    переданные поля (model_dump(exclude_unset=True)).
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from src.models.v1.issues import IssuePriority, IssueStatus, IssueType
from src.schemas.base import BaseRequestSchema

from .base import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, unique_issue_ids


class IssueCreateRequestSchema(BaseRequestSchema):
    """
    Схема для создания новой задачи.

    Note:
        Поля key, status, order, reporter_id устанавливаются автоматически:
        - key = "{project.key}-{номер}"
        - status = BACKLOG
        - order = max(order в BACKLOG проекта) + 1
        - reporter_id = текущий пользователь

    Example:
        POST /api/v1/issues
        {
            "title": "Падает импорт CSV",
            "type": "BUG",
            "priority": "HIGH",
            "project_id": "123e4567-e89b-12d3-a456-426614174000"
        }
    """

    title: str = Field(
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Заголовок задачи",
        examples=["Падает импорт CSV"],
    )
    description: Optional[str] = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Описание задачи",
    )
    type: IssueType = Field(default=IssueType.TASK, description="Тип задачи")
    priority: IssuePriority = Field(
        default=IssuePriority.MEDIUM, description="Приоритет"
    )
    project_id: UUID = Field(description="UUID проекта")
    assignee_id: Optional[UUID] = Field(default=None, description="UUID исполнителя")
    parent_id: Optional[UUID] = Field(
        default=None, description="UUID родительской задачи"
    )
    due_date: Optional[datetime] = Field(default=None, description="Срок")
    label_ids: Optional[List[UUID]] = Field(
        default=None, description="Метки проекта для задачи"
    )


class IssueUpdateRequestSchema(BaseRequestSchema):
    """
    Частичное обновление задачи. Передаются только изменяемые поля;
    assignee_id, description и due_date можно сбросить значением null.
    """

    title: Optional[str] = Field(
        default=None, min_length=1, max_length=TITLE_MAX_LENGTH
    )
    description: Optional[str] = Field(
        default=None, max_length=DESCRIPTION_MAX_LENGTH
    )
    type: Optional[IssueType] = None
    status: Optional[IssueStatus] = None
    priority: Optional[IssuePriority] = None
    assignee_id: Optional[UUID] = None
    due_date: Optional[datetime] = None
    label_ids: Optional[List[UUID]] = Field(
        default=None, description="Новый набор меток (заменяет текущий)"
    )

    @model_validator(mode="after")
    def check_not_null(self) -> "IssueUpdateRequestSchema":
        for field_name in ("title", "type", "status", "priority", "label_ids"):
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise PydanticCustomError(
                    "field_not_nullable",
                    "Поле {field} не может быть пустым",
                    {"field": field_name},
                )
        return self


class IssueMoveRequestSchema(BaseRequestSchema):
    """
    Перемещение задачи на доске.

    Позиция задаётся одним из способов:
    - order: готовое значение позиции;
    - destination_index: индекс в целевой колонке, позиция вычисляется
      между соседями.

    Example:
        {"status": "IN_PROGRESS", "destination_index": 1}
    """

    status: IssueStatus = Field(description="Целевая колонка")
    order: Optional[float] = Field(
        default=None, allow_inf_nan=False, description="Новая позиция"
    )
    destination_index: Optional[int] = Field(
        default=None, ge=0, description="Индекс в целевой колонке"
    )

    @model_validator(mode="after")
    def check_position(self) -> "IssueMoveRequestSchema":
        if (self.order is None) == (self.destination_index is None):
            raise PydanticCustomError(
                "move_position",
                "Укажите либо order, либо destination_index",
            )
        return self


class SubtaskCreateRequestSchema(BaseRequestSchema):
    """
    Создание подзадачи.

    Подзадача наследует проект родителя, создаётся в статусе TODO и
    встаёт последней среди подзадач родителя.
    """

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    parent_id: UUID = Field(description="UUID родительской задачи")
    type: IssueType = Field(default=IssueType.TASK, description="TASK или BUG")
    priority: IssuePriority = Field(default=IssuePriority.MEDIUM)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    assignee_id: Optional[UUID] = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: IssueType) -> IssueType:
        if value not in (IssueType.TASK, IssueType.BUG):
            raise PydanticCustomError(
                "subtask_type", "Подзадача может быть только TASK или BUG"
            )
        return value


class SubtaskStatusRequestSchema(BaseRequestSchema):
    status: IssueStatus


class _BulkRequestSchema(BaseRequestSchema):
    issue_ids: List[UUID] = Field(description="UUID задач")

    @field_validator("issue_ids")
    @classmethod
    def validate_issue_ids(cls, value: List[UUID]) -> List[UUID]:
        return unique_issue_ids(value)


class BulkStatusRequestSchema(_BulkRequestSchema):
    status: IssueStatus


class BulkAssignRequestSchema(_BulkRequestSchema):
    """assignee_id = null снимает исполнителя со всех задач."""

    assignee_id: Optional[UUID]


class BulkPriorityRequestSchema(_BulkRequestSchema):
    priority: IssuePriority


class BulkDeleteRequestSchema(_BulkRequestSchema):
    pass
