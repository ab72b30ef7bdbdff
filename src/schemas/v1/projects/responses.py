from typing import List, Optional
from uuid import UUID

from src.schemas.base import BaseResponseSchema, BaseSchema


class ProjectDetailSchema(BaseSchema):
    name: str
    key: str
    description: Optional[str] = None
    workspace_id: UUID


class ProjectResponseSchema(BaseResponseSchema):
    data: ProjectDetailSchema


class ProjectListResponseSchema(BaseResponseSchema):
    data: List[ProjectDetailSchema]
