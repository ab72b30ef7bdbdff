from typing import Any, Dict
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class SavedFilterModel(BaseModel):
    """
    Сохранённый фильтр задач пользователя в проекте.

    Attributes:
        name (str): Имя, уникальное в паре (project_id, user_id).
        filters (dict): Критерии: search, status, priority, type, assignee_id, label_ids.
        is_default (bool): Фильтр по умолчанию; у пары (project_id, user_id)
            не больше одного.
        project_id (UUID): Проект.
        user_id (UUID): Владелец фильтра.
    """

    __tablename__ = "saved_filters"
    __table_args__ = (
        UniqueConstraint(
            "project_id", "user_id", "name", name="uq_saved_filter_name"
        ),
    )

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Имя фильтра",
    )
    filters: Mapped[Dict[str, Any]] = mapped_column(
        nullable=False,
        default=dict,
        comment="Критерии фильтра",
    )
    is_default: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Фильтр по умолчанию",
    )
    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID проекта",
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID владельца",
    )
