"""
Сервис меток проекта.

Метки создаются в проекте и назначаются задачам этого проекта при
создании и изменении задачи (label_ids).
"""

from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (IssueNotFoundError, LabelNameConflictError,
                                 LabelNotFoundError, ProjectNotFoundError)
from src.models.v1.labels import LabelModel
from src.models.v1.projects import ProjectModel
from src.models.v1.workspaces import WorkspaceModel
from src.repository.v1.issues import IssueRepository
from src.repository.v1.labels import LabelRepository
from src.repository.v1.projects import ProjectRepository
from src.schemas.v1.labels import LabelCreateRequestSchema
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService


class LabelService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = LabelRepository(session)
        self.project_repository = ProjectRepository(session)
        self.issue_repository = IssueRepository(session)
        self.access = AccessService(session)

    async def _get_project(
        self, user_id: UUID, project_id: UUID
    ) -> Tuple[ProjectModel, WorkspaceModel]:
        found = await self.project_repository.get_with_workspace(project_id)
        if found is None:
            raise ProjectNotFoundError(project_id)
        await self.access.require_access(user_id, found[1])
        return found

    @command("label.create")
    async def create_label(
        self,
        user: Optional[UserCurrentSchema],
        project_id: UUID,
        data: Union[LabelCreateRequestSchema, Dict[str, Any]],
    ) -> LabelModel:
        """
        Raises:
            LabelNameConflictError: Метка с таким именем уже есть в проекте.
        """
        user = self._require_user(user)
        request = self._validate(LabelCreateRequestSchema, data)
        project, _ = await self._get_project(user.id, project_id)

        if await self.repository.exists(project_id=project.id, name=request.name):
            raise LabelNameConflictError(request.name)
        try:
            return await self.repository.create_item(
                {**request.model_dump(exclude_none=True), "project_id": project.id}
            )
        except IntegrityError as e:
            raise LabelNameConflictError(request.name) from e

    @command("label.list")
    async def list_labels(
        self, user: Optional[UserCurrentSchema], project_id: UUID
    ) -> List[LabelModel]:
        user = self._require_user(user)
        await self._get_project(user.id, project_id)
        return await self.repository.list_for_project(project_id)

    @command("label.delete")
    async def delete_label(
        self, user: Optional[UserCurrentSchema], label_id: UUID
    ) -> UUID:
        """Удаляет метку и снимает её со всех задач проекта."""
        user = self._require_user(user)
        label = await self.repository.get_item_by_id(label_id)
        if label is None:
            raise LabelNotFoundError(label_id)
        await self._get_project(user.id, label.project_id)
        await self.repository.delete_item(label)
        return label_id

    @command("label.list_for_issue")
    async def list_issue_labels(
        self, user: Optional[UserCurrentSchema], issue_id: UUID
    ) -> List[LabelModel]:
        user = self._require_user(user)
        context = await self.issue_repository.get_context(issue_id)
        if context is None:
            raise IssueNotFoundError(issue_id)
        await self.access.require_access(user.id, context.workspace)
        return await self.repository.list_for_issue(issue_id)
