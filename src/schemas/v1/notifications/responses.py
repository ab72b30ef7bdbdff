"""
Схемы ответов для уведомлений.
"""

from typing import List, Optional
from uuid import UUID

from src.models.v1.notifications import NotificationType
from src.schemas.base import BaseResponseSchema, BaseSchema, CommonBaseSchema


class NotificationDetailSchema(BaseSchema):
    type: NotificationType
    title: str
    message: Optional[str] = None
    link: Optional[str] = None
    user_id: UUID
    actor_id: Optional[UUID] = None
    issue_id: Optional[UUID] = None
    is_read: bool


class NotificationListResponseSchema(BaseResponseSchema):
    data: List[NotificationDetailSchema]


class NotificationResponseSchema(BaseResponseSchema):
    data: NotificationDetailSchema


class UnreadCountSchema(CommonBaseSchema):
    count: int


class UnreadCountResponseSchema(BaseResponseSchema):
    data: UnreadCountSchema
