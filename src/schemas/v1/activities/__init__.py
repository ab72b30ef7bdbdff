"""
Схемы журнала активности задачи.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from src.models.v1.activities import ActivityAction
from src.schemas.base import BaseResponseSchema, BaseSchema


class ActivityDetailSchema(BaseSchema):
    issue_id: UUID
    actor_id: UUID
    action: ActivityAction
    details: Optional[Dict[str, Any]] = None


class ActivityListResponseSchema(BaseResponseSchema):
    data: List[ActivityDetailSchema]


__all__ = ["ActivityDetailSchema", "ActivityListResponseSchema"]
