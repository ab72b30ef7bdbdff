"""
Сервис проектов.

Ключ проекта уникален в пределах workspace и служит префиксом ключей
задач. Удаление проекта доступно только владельцу и ADMIN.
"""

from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (ProjectKeyConflictError, ProjectNotFoundError,
                                 WorkspaceNotFoundError)
from src.models.v1.projects import ProjectModel
from src.models.v1.workspaces import WorkspaceModel
from src.repository.v1.projects import ProjectRepository
from src.repository.v1.workspaces import WorkspaceRepository
from src.schemas.v1.projects import (ProjectCreateRequestSchema,
                                     ProjectUpdateRequestSchema)
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService


class ProjectService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = ProjectRepository(session)
        self.workspace_repository = WorkspaceRepository(session)
        self.access = AccessService(session)

    async def _get_project(
        self, project_id: UUID
    ) -> Tuple[ProjectModel, WorkspaceModel]:
        found = await self.repository.get_with_workspace(project_id)
        if found is None:
            raise ProjectNotFoundError(project_id)
        return found

    @command("project.create")
    async def create_project(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[ProjectCreateRequestSchema, Dict[str, Any]],
    ) -> ProjectModel:
        """
        Raises:
            ProjectKeyConflictError: Ключ уже занят в workspace.
        """
        user = self._require_user(user)
        request = self._validate(ProjectCreateRequestSchema, data)
        workspace = await self.workspace_repository.get_item_by_id(request.workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(request.workspace_id)
        await self.access.require_access(user.id, workspace)

        if await self.repository.key_exists(workspace.id, request.key):
            raise ProjectKeyConflictError(request.key)
        try:
            project = await self.repository.create_item(request.model_dump())
        except IntegrityError as e:
            raise ProjectKeyConflictError(request.key) from e
        self.logger.info("Создан проект %s в workspace %s", project.key, workspace.slug)
        return project

    @command("project.list")
    async def list_projects(
        self, user: Optional[UserCurrentSchema], workspace_id: UUID
    ) -> List[ProjectModel]:
        user = self._require_user(user)
        workspace = await self.workspace_repository.get_item_by_id(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(workspace_id)
        await self.access.require_access(user.id, workspace)
        return await self.repository.filter_by(
            order_by=[ProjectModel.key], workspace_id=workspace_id
        )

    @command("project.update")
    async def update_project(
        self,
        user: Optional[UserCurrentSchema],
        project_id: UUID,
        data: Union[ProjectUpdateRequestSchema, Dict[str, Any]],
    ) -> ProjectModel:
        user = self._require_user(user)
        request = self._validate(ProjectUpdateRequestSchema, data)
        project, workspace = await self._get_project(project_id)
        await self.access.require_access(user.id, workspace)

        patch = request.model_dump(exclude_unset=True)
        if patch.get("name") is None:
            patch.pop("name", None)
        if patch.get("key") is None:
            patch.pop("key", None)
        elif patch["key"] != project.key and await self.repository.key_exists(
            workspace.id, patch["key"], exclude_id=project.id
        ):
            raise ProjectKeyConflictError(patch["key"])
        if not patch:
            return project

        try:
            return await self.repository.update_item(project, patch)
        except IntegrityError as e:
            raise ProjectKeyConflictError(patch.get("key", project.key)) from e

    @command("project.delete")
    async def delete_project(
        self, user: Optional[UserCurrentSchema], project_id: UUID
    ) -> UUID:
        user = self._require_user(user)
        project, workspace = await self._get_project(project_id)
        await self.access.require_elevated(user.id, workspace, "удаление проекта")

        await self.repository.delete_item(project)
        self.logger.info("Удалён проект %s из workspace %s", project.key, workspace.slug)
        return project_id
