import enum
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Enum as SQLEnum, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class SprintStatus(str, enum.Enum):
    PLANNED = "PLANNED"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


class SprintModel(BaseModel):
    """
    Спринт проекта.

    Attributes:
        name (str): Название, уникальное в пределах проекта.
        goal (Optional[str]): Цель спринта.
        start_date (Optional[datetime]): Начало.
        end_date (Optional[datetime]): Окончание.
        status (SprintStatus): Состояние спринта.
        project_id (UUID): Проект.
    """

    __tablename__ = "sprints"
    __table_args__ = (
        UniqueConstraint("project_id", "name", name="uq_sprint_project_name"),
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Название спринта",
    )
    goal: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Цель спринта",
    )
    start_date: Mapped[Optional[datetime]] = mapped_column(
        nullable=True,
        comment="Дата начала",
    )
    end_date: Mapped[Optional[datetime]] = mapped_column(
        nullable=True,
        comment="Дата окончания",
    )
    status: Mapped[SprintStatus] = mapped_column(
        SQLEnum(
            SprintStatus,
            name="sprint_status",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=SprintStatus.PLANNED,
        comment="Статус спринта",
    )
    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID проекта",
    )

    def __repr__(self) -> str:
        return f"<SprintModel(id={self.id}, name='{self.name}', status={self.status.value})>"
