"""
Repository для работы с проектами.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.projects import ProjectModel
from src.models.v1.workspaces import WorkspaceModel
from src.repository.base import BaseRepository


class ProjectRepository(BaseRepository[ProjectModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=ProjectModel)

    async def get_with_workspace(
        self, project_id: UUID
    ) -> Optional[tuple[ProjectModel, WorkspaceModel]]:
        """
        Проект вместе с его workspace одним запросом.

        Returns:
            Пара (проект, workspace) или None.
        """
        try:
            statement = (
                select(ProjectModel, WorkspaceModel)
                .join(WorkspaceModel, WorkspaceModel.id == ProjectModel.workspace_id)
                .where(ProjectModel.id == project_id)
            )
            result = await self.session.execute(statement)
            row = result.first()
            return (row[0], row[1]) if row else None
        except SQLAlchemyError as e:
            self.logger.error("Ошибка получения проекта %s: %s", project_id, e)
            raise

    async def key_exists(
        self, workspace_id: UUID, key: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        filters = {"workspace_id": workspace_id, "key": key}
        if exclude_id:
            filters["id__ne"] = exclude_id
        return await self.exists(**filters)

    async def reserve_issue_number(self, project_id: UUID) -> int:
        """
        Увеличивает счётчик задач проекта и возвращает новый номер.

        Изменение не коммитится: номер фиксируется вместе с созданием задачи.
        UPDATE берёт блокировку строки проекта до конца транзакции, поэтому
        параллельные создания получают разные номера.
        """
        try:
            await self.session.execute(
                update(ProjectModel)
                .where(ProjectModel.id == project_id)
                .values(issue_counter=ProjectModel.issue_counter + 1)
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(
                select(ProjectModel.issue_counter).where(ProjectModel.id == project_id)
            )
            return result.scalar_one()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(
                "Ошибка резервирования номера задачи в проекте %s: %s", project_id, e
            )
            raise
