"""
Repository для сохранённых фильтров.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.saved_filters import SavedFilterModel
from src.repository.base import BaseRepository


class SavedFilterRepository(BaseRepository[SavedFilterModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=SavedFilterModel)

    async def list_for_user(
        self, project_id: UUID, user_id: UUID
    ) -> List[SavedFilterModel]:
        """Фильтры пользователя в проекте: сначала по умолчанию, затем по имени."""
        return await self.filter_by(
            order_by=[SavedFilterModel.is_default.desc(), SavedFilterModel.name],
            project_id=project_id,
            user_id=user_id,
        )

    async def get_default(
        self, project_id: UUID, user_id: UUID
    ) -> Optional[SavedFilterModel]:
        items = await self.filter_by(
            limit=1, project_id=project_id, user_id=user_id, is_default=True
        )
        return items[0] if items else None

    async def clear_default(
        self, project_id: UUID, user_id: UUID, exclude_id: Optional[UUID] = None
    ) -> None:
        """
        Снимает флаг по умолчанию с фильтров пользователя в проекте.

        Не коммитит: вызывается в одной транзакции с сохранением нового
        фильтра по умолчанию.
        """
        conditions = [
            SavedFilterModel.project_id == project_id,
            SavedFilterModel.user_id == user_id,
            SavedFilterModel.is_default.is_(True),
        ]
        if exclude_id:
            conditions.append(SavedFilterModel.id != exclude_id)
        try:
            await self.session.execute(
                update(SavedFilterModel)
                .where(and_(*conditions))
                .values(is_default=False)
                .execution_options(synchronize_session="fetch")
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(
                "Ошибка сброса фильтра по умолчанию в проекте %s: %s", project_id, e
            )
            raise
