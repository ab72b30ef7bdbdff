"""
Repository для спринтов.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.sprints import SprintModel
from src.repository.base import BaseRepository


class SprintRepository(BaseRepository[SprintModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=SprintModel)

    async def name_exists(
        self, project_id: UUID, name: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        filters = {"project_id": project_id, "name": name}
        if exclude_id:
            filters["id__ne"] = exclude_id
        return await self.exists(**filters)

    async def list_for_project(self, project_id: UUID) -> List[SprintModel]:
        """Спринты проекта, новые первыми."""
        return await self.filter_by(
            order_by=[SprintModel.created_at.desc()], project_id=project_id
        )
