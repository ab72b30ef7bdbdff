from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.models.v1.sprints import SprintStatus
from src.schemas.base import BaseResponseSchema, BaseSchema


class SprintDetailSchema(BaseSchema):
    name: str
    goal: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: SprintStatus
    project_id: UUID


class SprintResponseSchema(BaseResponseSchema):
    data: SprintDetailSchema


class SprintListResponseSchema(BaseResponseSchema):
    data: List[SprintDetailSchema]
