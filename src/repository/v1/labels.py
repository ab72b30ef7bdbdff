"""
Repository для меток проекта и меток задач.

Набор меток задачи заменяется целиком: старые связи удаляются, новые
добавляются в той же транзакции, что и изменение задачи.
"""

from typing import Iterable, List
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.labels import IssueLabelModel, LabelModel
from src.repository.base import BaseRepository


class LabelRepository(BaseRepository[LabelModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=LabelModel)

    async def list_for_project(self, project_id: UUID) -> List[LabelModel]:
        return await self.filter_by(order_by=[LabelModel.name], project_id=project_id)

    async def missing_in_project(
        self, project_id: UUID, label_ids: Iterable[UUID]
    ) -> List[UUID]:
        """ID из label_ids, которых нет среди меток проекта."""
        ids = list(dict.fromkeys(label_ids))
        if not ids:
            return []
        found = await self.filter_by(project_id=project_id, id__in=ids)
        known = {label.id for label in found}
        return [label_id for label_id in ids if label_id not in known]

    async def list_for_issue(self, issue_id: UUID) -> List[LabelModel]:
        try:
            statement = (
                select(LabelModel)
                .join(IssueLabelModel, IssueLabelModel.label_id == LabelModel.id)
                .where(IssueLabelModel.issue_id == issue_id)
                .order_by(LabelModel.name)
            )
            result = await self.session.execute(statement)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error("Ошибка получения меток задачи %s: %s", issue_id, e)
            raise

    async def replace_issue_labels(
        self, issue_id: UUID, label_ids: Iterable[UUID]
    ) -> None:
        """
        Заменяет метки задачи. Не коммитит.
        """
        try:
            await self.session.execute(
                delete(IssueLabelModel)
                .where(IssueLabelModel.issue_id == issue_id)
                .execution_options(synchronize_session=False)
            )
            self.session.add_all(
                IssueLabelModel(issue_id=issue_id, label_id=label_id)
                for label_id in dict.fromkeys(label_ids)
            )
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error("Ошибка замены меток задачи %s: %s", issue_id, e)
            raise
