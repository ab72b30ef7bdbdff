"""
Repository для работы с задачами (Issues).

Помимо CRUD из BaseRepository загружает задачи вместе с проектом и
workspace (контекст, нужный для проверки доступа и путей представлений)
и читает колонки доски в порядке позиций.
"""

from typing import Iterable, List, NamedTuple, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.integrations.cache import project_view_path
from src.models.v1.issues import IssueModel, IssueStatus
from src.models.v1.projects import ProjectModel
from src.models.v1.workspaces import WorkspaceModel
from src.repository.base import BaseRepository


class IssueContext(NamedTuple):
    """Задача с её проектом и workspace."""

    issue: IssueModel
    project: ProjectModel
    workspace: WorkspaceModel

    @property
    def view_path(self) -> str:
        return project_view_path(self.workspace.slug, self.project.key)


class IssueRepository(BaseRepository[IssueModel]):
    """
    Репозиторий для работы с задачами.

    Example:
        >>> repo = IssueRepository(session)
        >>> context = await repo.get_context(issue_id)
        >>> context.workspace.owner_id
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=IssueModel)

    def _context_statement(self):
        return (
            select(IssueModel, ProjectModel, WorkspaceModel)
            .join(ProjectModel, ProjectModel.id == IssueModel.project_id)
            .join(WorkspaceModel, WorkspaceModel.id == ProjectModel.workspace_id)
        )

    async def get_context(self, issue_id: UUID) -> Optional[IssueContext]:
        """
        Задача с проектом и workspace.

        Returns:
            Optional[IssueContext]: Контекст или None, если задачи нет.
        """
        try:
            result = await self.session.execute(
                self._context_statement().where(IssueModel.id == issue_id)
            )
            row = result.first()
            return IssueContext(*row) if row else None
        except SQLAlchemyError as e:
            self.logger.error("Ошибка получения задачи %s: %s", issue_id, e)
            raise

    async def get_contexts(self, issue_ids: Iterable[UUID]) -> List[IssueContext]:
        """
        Контексты набора задач одним запросом.

        Отсутствующие ID в результат не попадают; вызывающий сравнивает
        количество сам.
        """
        ids = list(issue_ids)
        if not ids:
            return []
        try:
            result = await self.session.execute(
                self._context_statement().where(IssueModel.id.in_(ids))
            )
            return [IssueContext(*row) for row in result.all()]
        except SQLAlchemyError as e:
            self.logger.error("Ошибка пакетного получения задач: %s", e)
            raise

    async def get_column(
        self,
        project_id: UUID,
        status: IssueStatus,
        exclude_id: Optional[UUID] = None,
    ) -> List[IssueModel]:
        """
        Задачи колонки (project_id, status) по возрастанию order.

        Args:
            exclude_id: Не включать эту задачу (перемещаемую).
        """
        filters = {"project_id": project_id, "status": status}
        if exclude_id:
            filters["id__ne"] = exclude_id
        return await self.filter_by(
            order_by=[IssueModel.order, IssueModel.created_at], **filters
        )

    async def get_max_order(
        self,
        project_id: UUID,
        status: IssueStatus,
        parent_id: Optional[UUID] = None,
    ) -> Optional[float]:
        """Максимальный order в колонке; для подзадач - среди подзадач родителя."""
        filters = {"project_id": project_id, "status": status}
        if parent_id:
            filters = {"parent_id": parent_id}
        return await self.get_max_value("order", **filters)

    async def list_subtasks(self, parent_id: UUID) -> List[IssueModel]:
        return await self.filter_by(
            order_by=[IssueModel.status, IssueModel.order], parent_id=parent_id
        )
