from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class LabelModel(BaseModel):
    """
    Метка проекта.

    Attributes:
        name (str): Имя, уникальное в пределах проекта.
        color (str): Цвет в формате #RRGGBB.
        project_id (UUID): Проект.
    """

    __tablename__ = "labels"
    __table_args__ = (
        UniqueConstraint("project_id", "name", name="uq_label_project_name"),
    )

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Имя метки",
    )
    color: Mapped[str] = mapped_column(
        String(7),
        nullable=False,
        default="#6B7280",
        comment="Цвет метки",
    )
    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID проекта",
    )

    def __repr__(self) -> str:
        return f"<LabelModel(id={self.id}, name='{self.name}')>"


class IssueLabelModel(BaseModel):
    """Метка, назначенная задаче."""

    __tablename__ = "issue_labels"
    __table_args__ = (
        UniqueConstraint("issue_id", "label_id", name="uq_issue_label"),
    )

    issue_id: Mapped[UUID] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID задачи",
    )
    label_id: Mapped[UUID] = mapped_column(
        ForeignKey("labels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID метки",
    )
