"""
Repository журнала активности.

Только добавление и чтение: методов изменения записей журнала нет.
"""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.activities import ActivityModel
from src.repository.base import BaseRepository


class ActivityRepository(BaseRepository[ActivityModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=ActivityModel)

    async def list_by_issue(self, issue_id: UUID) -> List[ActivityModel]:
        """Записи журнала задачи, новые первыми."""
        return await self.filter_by(
            order_by=[ActivityModel.created_at.desc()], issue_id=issue_id
        )
