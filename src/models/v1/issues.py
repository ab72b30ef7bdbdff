import enum
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import (Enum as SQLEnum, Float, ForeignKey, Index, Integer,
                        String, Text)
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class IssueStatus(str, enum.Enum):
    """
    Статус задачи (колонка доски).

    DONE - конечный статус: переход в него уведомляет автора задачи.
    """

    BACKLOG = "BACKLOG"
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    IN_REVIEW = "IN_REVIEW"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class IssuePriority(str, enum.Enum):
    URGENT = "URGENT"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    NONE = "NONE"


class IssueType(str, enum.Enum):
    EPIC = "EPIC"
    STORY = "STORY"
    TASK = "TASK"
    BUG = "BUG"


class IssueModel(BaseModel):
    """
    Задача проекта.

    Attributes:
        key (str): Ключ задачи "{project.key}-{number}".
        number (int): Порядковый номер задачи в проекте.
        title (str): Заголовок (до 200 символов).
        description (Optional[str]): Описание (до 10000 символов).
        status (IssueStatus): Колонка доски.
        priority (IssuePriority): Приоритет.
        type (IssueType): Тип задачи.
        order (float): Дробная позиция внутри пары (project_id, status).
        project_id (UUID): Проект.
        reporter_id (UUID): Автор задачи.
        assignee_id (Optional[UUID]): Исполнитель.
        parent_id (Optional[UUID]): Родительская задача; у родителя
            parent_id всегда пуст (вложенность не глубже одного уровня).
        due_date (Optional[datetime]): Срок.

    Note:
        Порядок хранится дробным числом: при перетаскивании новое значение
        берётся строго между соседями, остальные строки не перенумеровываются.
    """

    __tablename__ = "issues"
    __table_args__ = (
        Index("ix_issues_project_status_order", "project_id", "status", "order"),
    )

    key: Mapped[str] = mapped_column(
        String(32),
        unique=True,
        nullable=False,
        index=True,
        comment="Ключ задачи (PROJ-42)",
    )
    number: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Номер задачи в проекте",
    )
    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Заголовок задачи",
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Описание задачи",
    )
    status: Mapped[IssueStatus] = mapped_column(
        SQLEnum(
            IssueStatus,
            name="issue_status",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=IssueStatus.BACKLOG,
        comment="Статус задачи",
    )
    priority: Mapped[IssuePriority] = mapped_column(
        SQLEnum(
            IssuePriority,
            name="issue_priority",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=IssuePriority.MEDIUM,
        comment="Приоритет",
    )
    type: Mapped[IssueType] = mapped_column(
        SQLEnum(
            IssueType,
            name="issue_type",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=IssueType.TASK,
        comment="Тип задачи",
    )
    order: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        comment="Позиция в колонке",
    )
    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID проекта",
    )
    reporter_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID автора",
    )
    assignee_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="UUID исполнителя",
    )
    parent_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="UUID родительской задачи",
    )
    due_date: Mapped[Optional[datetime]] = mapped_column(
        nullable=True,
        comment="Срок выполнения",
    )

    @property
    def is_subtask(self) -> bool:
        return self.parent_id is not None

    def __repr__(self) -> str:
        return f"<IssueModel(id={self.id}, key='{self.key}', status={self.status.value})>"
