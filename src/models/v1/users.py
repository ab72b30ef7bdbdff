from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class UserModel(BaseModel):
    """
    Пользователь трекера.

    Учётные данные и сессии живут во внешнем провайдере идентификации;
    здесь хранится только то, на что ссылаются задачи и workspace.

    Attributes:
        email (str): Email (уникальный, в нижнем регистре).
        name (Optional[str]): Отображаемое имя.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Email пользователя",
    )
    name: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="Отображаемое имя",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email='{self.email}')>"
