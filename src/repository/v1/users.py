"""
Repository для работы с пользователями.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.users import UserModel
from src.repository.base import BaseRepository


class UserRepository(BaseRepository[UserModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=UserModel)

    async def get_by_email(self, email: str) -> Optional[UserModel]:
        """Пользователь по email (сравнение в нижнем регистре)."""
        return await self.get_item_by_field("email", email.lower())
