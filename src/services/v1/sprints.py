"""
Сервис спринтов.

Имя спринта уникально в пределах проекта. Работать со спринтами может
любой, у кого есть доступ к workspace проекта.
"""

from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (ProjectNotFoundError, SprintNameConflictError,
                                 SprintNotFoundError, ValidationFailedError)
from src.models.v1.projects import ProjectModel
from src.models.v1.sprints import SprintModel
from src.models.v1.workspaces import WorkspaceModel
from src.repository.v1.projects import ProjectRepository
from src.repository.v1.sprints import SprintRepository
from src.schemas.v1.sprints import (SprintCreateRequestSchema,
                                    SprintUpdateRequestSchema, as_utc)
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService


class SprintService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = SprintRepository(session)
        self.project_repository = ProjectRepository(session)
        self.access = AccessService(session)

    async def _get_project(
        self, project_id: UUID
    ) -> Tuple[ProjectModel, WorkspaceModel]:
        found = await self.project_repository.get_with_workspace(project_id)
        if found is None:
            raise ProjectNotFoundError(project_id)
        return found

    async def _get_sprint(self, user_id: UUID, sprint_id: UUID) -> SprintModel:
        sprint = await self.repository.get_item_by_id(sprint_id)
        if sprint is None:
            raise SprintNotFoundError(sprint_id)
        _, workspace = await self._get_project(sprint.project_id)
        await self.access.require_access(user_id, workspace)
        return sprint

    @command("sprint.create")
    async def create_sprint(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[SprintCreateRequestSchema, Dict[str, Any]],
    ) -> SprintModel:
        """
        Создаёт спринт в статусе PLANNED.

        Raises:
            SprintNameConflictError: Имя уже занято в проекте.
        """
        user = self._require_user(user)
        request = self._validate(SprintCreateRequestSchema, data)
        project, workspace = await self._get_project(request.project_id)
        await self.access.require_access(user.id, workspace)

        if await self.repository.name_exists(project.id, request.name):
            raise SprintNameConflictError(request.name)
        try:
            sprint = await self.repository.create_item(request.model_dump())
        except IntegrityError as e:
            raise SprintNameConflictError(request.name) from e
        self.logger.info("Создан спринт '%s' в проекте %s", sprint.name, project.key)
        return sprint

    @command("sprint.list")
    async def list_sprints(
        self, user: Optional[UserCurrentSchema], project_id: UUID
    ) -> List[SprintModel]:
        user = self._require_user(user)
        _, workspace = await self._get_project(project_id)
        await self.access.require_access(user.id, workspace)
        return await self.repository.list_for_project(project_id)

    @command("sprint.update")
    async def update_sprint(
        self,
        user: Optional[UserCurrentSchema],
        sprint_id: UUID,
        data: Union[SprintUpdateRequestSchema, Dict[str, Any]],
    ) -> SprintModel:
        user = self._require_user(user)
        request = self._validate(SprintUpdateRequestSchema, data)
        sprint = await self._get_sprint(user.id, sprint_id)

        patch = request.model_dump(exclude_unset=True)
        start_date = as_utc(patch.get("start_date", sprint.start_date))
        end_date = as_utc(patch.get("end_date", sprint.end_date))
        if start_date and end_date and end_date < start_date:
            raise ValidationFailedError(
                detail="end_date: Дата окончания раньше даты начала",
                error_type="sprint_dates",
                extra={"field": "end_date"},
            )
        name = patch.get("name")
        if name and name != sprint.name and await self.repository.name_exists(
            sprint.project_id, name, exclude_id=sprint.id
        ):
            raise SprintNameConflictError(name)
        if not patch:
            return sprint

        try:
            return await self.repository.update_item(sprint, patch)
        except IntegrityError as e:
            raise SprintNameConflictError(patch.get("name", sprint.name)) from e

    @command("sprint.delete")
    async def delete_sprint(
        self, user: Optional[UserCurrentSchema], sprint_id: UUID
    ) -> UUID:
        user = self._require_user(user)
        sprint = await self._get_sprint(user.id, sprint_id)
        await self.repository.delete_item(sprint)
        self.logger.info("Удалён спринт '%s'", sprint.name)
        return sprint_id
