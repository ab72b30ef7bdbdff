"""
Схемы ответов для комментариев к задачам.
"""

from typing import List
from uuid import UUID

from src.schemas.base import BaseResponseSchema, BaseSchema


class CommentDetailSchema(BaseSchema):
    issue_id: UUID
    author_id: UUID
    content: str


class CommentResponseSchema(BaseResponseSchema):
    data: CommentDetailSchema


class CommentListResponseSchema(BaseResponseSchema):
    data: List[CommentDetailSchema]
