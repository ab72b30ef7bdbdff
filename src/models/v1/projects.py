from typing import Optional
from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class ProjectModel(BaseModel):
    """
    Проект внутри workspace.

    Attributes:
        name (str): Название.
        key (str): Ключ проекта, префикс ключей задач (например, "CORE").
        description (Optional[str]): Описание.
        workspace_id (UUID): Workspace проекта.
        issue_counter (int): Последний выданный номер задачи; только растёт,
            поэтому ключи задач не повторяются после удаления.
    """

    __tablename__ = "projects"
    __table_args__ = (
        UniqueConstraint("workspace_id", "key", name="uq_project_workspace_key"),
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Название проекта",
    )
    key: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Ключ проекта (префикс ключей задач)",
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Описание проекта",
    )
    workspace_id: Mapped[UUID] = mapped_column(
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID workspace",
    )
    issue_counter: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Последний выданный номер задачи",
    )

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, key='{self.key}')>"
