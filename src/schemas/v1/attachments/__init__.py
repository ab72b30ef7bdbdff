"""
Схемы вложений задач.
"""

from typing import List, Optional
from uuid import UUID

from src.schemas.base import BaseResponseSchema, BaseSchema


class AttachmentDetailSchema(BaseSchema):
    issue_id: UUID
    uploader_id: UUID
    file_name: str
    file_url: Optional[str] = None
    file_size: int
    mime_type: Optional[str] = None


class AttachmentListResponseSchema(BaseResponseSchema):
    data: List[AttachmentDetailSchema]


__all__ = ["AttachmentDetailSchema", "AttachmentListResponseSchema"]
