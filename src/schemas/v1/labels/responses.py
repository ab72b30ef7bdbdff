from typing import List
from uuid import UUID

from src.schemas.base import BaseResponseSchema, BaseSchema


class LabelDetailSchema(BaseSchema):
    name: str
    color: str
    project_id: UUID


class LabelResponseSchema(BaseResponseSchema):
    data: LabelDetailSchema


class LabelListResponseSchema(BaseResponseSchema):
    data: List[LabelDetailSchema]
