import enum
from typing import Optional
from uuid import UUID

from sqlalchemy import (Boolean, CheckConstraint, Enum as SQLEnum, ForeignKey,
                        String)
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class NotificationType(str, enum.Enum):
    ISSUE_ASSIGNED = "ISSUE_ASSIGNED"
    ISSUE_STATUS_CHANGED = "ISSUE_STATUS_CHANGED"
    COMMENT_ADDED = "COMMENT_ADDED"


class NotificationModel(BaseModel):
    """
    Уведомление пользователя.

    Attributes:
        type (NotificationType): Тип события.
        title (str): Заголовок.
        message (Optional[str]): Текст (обычно заголовок задачи).
        link (Optional[str]): Ссылка на доску проекта.
        user_id (UUID): Получатель.
        actor_id (Optional[UUID]): Инициатор; никогда не совпадает с получателем.
        issue_id (Optional[UUID]): Задача.
        is_read (bool): Прочитано ли.
    """

    __tablename__ = "notifications"
    __table_args__ = (
        CheckConstraint(
            "actor_id IS NULL OR actor_id <> user_id",
            name="actor_is_not_recipient",
        ),
    )

    type: Mapped[NotificationType] = mapped_column(
        SQLEnum(
            NotificationType,
            name="notification_type",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        comment="Тип уведомления",
    )
    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Заголовок",
    )
    message: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Текст уведомления",
    )
    link: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Ссылка",
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID получателя",
    )
    actor_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        comment="UUID инициатора",
    )
    issue_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=True,
        comment="UUID задачи",
    )
    is_read: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
        comment="Прочитано",
    )
