"""
Базовые классы моделей SQLAlchemy.

BaseModel добавляет каждой таблице UUID первичный ключ и метки
created_at / updated_at в UTC.
"""

from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID, uuid4

from sqlalchemy import JSON, DateTime, MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utcnow() -> datetime:
    """Текущее время в UTC (timezone-aware)."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
    type_annotation_map = {
        Dict[str, Any]: JSON,
        datetime: DateTime(timezone=True),
    }


class BaseModel(Base):
    """
    Абстрактная модель с общими полями.

    Attributes:
        id (UUID): Первичный ключ.
        created_at (datetime): Дата создания.
        updated_at (datetime): Дата последнего изменения.
    """

    __abstract__ = True

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    created_at: Mapped[datetime] = mapped_column(
        default=utcnow,
        nullable=False,
        comment="Дата создания",
    )
    updated_at: Mapped[datetime] = mapped_column(
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
        comment="Дата последнего изменения",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Значения колонок модели в виде словаря."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__mapper__.column_attrs
        }
