"""
Repository для уведомлений.
"""

from typing import List
from uuid import UUID

from sqlalchemy import and_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.notifications import NotificationModel
from src.repository.base import BaseRepository


class NotificationRepository(BaseRepository[NotificationModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=NotificationModel)

    async def list_for_user(
        self, user_id: UUID, limit: int = 20
    ) -> List[NotificationModel]:
        """Последние уведомления пользователя, новые первыми."""
        return await self.filter_by(
            order_by=[NotificationModel.created_at.desc()],
            limit=limit,
            user_id=user_id,
        )

    async def count_unread(self, user_id: UUID) -> int:
        return await self.count_items(user_id=user_id, is_read=False)

    async def mark_all_read(self, user_id: UUID) -> int:
        """
        Отмечает все непрочитанные уведомления пользователя прочитанными.

        Returns:
            int: Количество обновлённых уведомлений.
        """
        try:
            result = await self.session.execute(
                update(NotificationModel)
                .where(
                    and_(
                        NotificationModel.user_id == user_id,
                        NotificationModel.is_read.is_(False),
                    )
                )
                .values(is_read=True)
                .execution_options(synchronize_session=False)
            )
            await self.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(
                "Ошибка отметки уведомлений пользователя %s: %s", user_id, e
            )
            raise
