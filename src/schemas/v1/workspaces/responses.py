from typing import List
from uuid import UUID

from src.schemas.base import BaseResponseSchema, BaseSchema


class WorkspaceDetailSchema(BaseSchema):
    name: str
    slug: str
    owner_id: UUID


class WorkspaceResponseSchema(BaseResponseSchema):
    data: WorkspaceDetailSchema


class WorkspaceListResponseSchema(BaseResponseSchema):
    data: List[WorkspaceDetailSchema]
