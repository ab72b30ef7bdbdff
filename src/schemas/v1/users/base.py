"""
Схема текущего пользователя, полученная от провайдера идентификации.
"""

from uuid import UUID

from pydantic import Field

from src.schemas.base import CommonBaseSchema


class UserCurrentSchema(CommonBaseSchema):
    """
    Аутентифицированный пользователь запроса.

    Attributes:
        id: UUID пользователя.
        email: Email из сессии.
    """

    id: UUID = Field(description="UUID пользователя")
    email: str = Field(description="Email пользователя")
