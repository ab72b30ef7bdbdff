"""
Схемы запросов для сохранённых фильтров.

IssueFilterCriteriaSchema описывает документ критериев, который хранится
в SavedFilterModel.filters как есть.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from src.models.v1.issues import IssuePriority, IssueStatus, IssueType
from src.schemas.base import BaseRequestSchema, CommonBaseSchema


class IssueFilterCriteriaSchema(CommonBaseSchema):
    search: Optional[str] = Field(default=None, max_length=200)
    status: List[IssueStatus] = Field(default_factory=list)
    priority: List[IssuePriority] = Field(default_factory=list)
    type: List[IssueType] = Field(default_factory=list)
    assignee_id: List[UUID] = Field(default_factory=list)
    label_ids: List[UUID] = Field(default_factory=list)


class SavedFilterCreateRequestSchema(BaseRequestSchema):
    """
    Example:
        {
            "name": "Мои баги",
            "project_id": "...",
            "filters": {"type": ["BUG"], "assignee_id": ["..."]},
            "is_default": true
        }
    """

    name: str = Field(min_length=1, max_length=50)
    project_id: UUID
    filters: IssueFilterCriteriaSchema = Field(
        default_factory=IssueFilterCriteriaSchema
    )
    is_default: bool = False


class SavedFilterUpdateRequestSchema(BaseRequestSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    filters: Optional[IssueFilterCriteriaSchema] = None
    is_default: Optional[bool] = None
