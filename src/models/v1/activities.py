import enum
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy import Enum as SQLEnum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class ActivityAction(str, enum.Enum):
    """Действие, записанное в журнал активности задачи."""

    CREATED = "CREATED"
    UPDATED = "UPDATED"
    STATUS_CHANGED = "STATUS_CHANGED"
    ASSIGNED = "ASSIGNED"
    PRIORITY_CHANGED = "PRIORITY_CHANGED"
    DELETED = "DELETED"
    COMMENT_ADDED = "COMMENT_ADDED"
    COMMENT_UPDATED = "COMMENT_UPDATED"
    COMMENT_DELETED = "COMMENT_DELETED"


class ActivityModel(BaseModel):
    """
    Запись журнала активности задачи.

    Журнал только дополняется: записи не изменяются и удаляются
    лишь каскадно вместе с задачей.

    Attributes:
        issue_id (UUID): Задача.
        actor_id (UUID): Кто выполнил действие.
        action (ActivityAction): Действие.
        details (Optional[dict]): {"field", "old_value", "new_value"} для
            изменений конкретного поля.
    """

    __tablename__ = "activities"

    issue_id: Mapped[UUID] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID задачи",
    )
    actor_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="UUID автора действия",
    )
    action: Mapped[ActivityAction] = mapped_column(
        SQLEnum(
            ActivityAction,
            name="activity_action",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        comment="Действие",
    )
    details: Mapped[Optional[Dict[str, Any]]] = mapped_column(
        nullable=True,
        comment="Изменённое поле и значения до/после",
    )

    def __repr__(self) -> str:
        return f"<ActivityModel(issue_id={self.issue_id}, action={self.action.value})>"
