"""
Сервис workspace.

Создатель становится владельцем workspace; владелец не хранится среди
участников, его права следуют из owner_id. Slug уникален глобально и,
если не передан, строится из названия. Изменять workspace могут владелец
и ADMIN, удалять только владелец.
"""

import re
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (ValidationFailedError, WorkspaceNotFoundError,
                                 WorkspaceOwnerRequiredError,
                                 WorkspaceSlugConflictError)
from src.models.v1.workspaces import WorkspaceModel
from src.repository.v1.workspaces import WorkspaceRepository
from src.schemas.v1.users import UserCurrentSchema
from src.schemas.v1.workspaces import (WorkspaceCreateRequestSchema,
                                       WorkspaceUpdateRequestSchema,
                                       validate_workspace_slug)
from src.services.base import BaseService, command
from src.services.v1.access import AccessService

SLUG_SEPARATOR = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    "Marketing Team!" -> "marketing-team"
    """
    return SLUG_SEPARATOR.sub("-", name.lower()).strip("-")[:50].strip("-")


class WorkspaceService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = WorkspaceRepository(session)
        self.access = AccessService(session)

    async def _get_workspace(self, workspace_id: UUID) -> WorkspaceModel:
        workspace = await self.repository.get_item_by_id(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(workspace_id)
        return workspace

    def _slug_from_name(self, name: str) -> str:
        slug = slugify(name)
        try:
            return validate_workspace_slug(slug)
        except ValueError as e:
            raise ValidationFailedError(
                detail="slug: не удалось построить из названия, укажите slug",
                error_type="workspace_slug_required",
                extra={"field": "slug"},
            ) from e

    @command("workspace.create")
    async def create_workspace(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[WorkspaceCreateRequestSchema, Dict[str, Any]],
    ) -> WorkspaceModel:
        """
        Raises:
            WorkspaceSlugConflictError: Slug уже занят.
        """
        user = self._require_user(user)
        request = self._validate(WorkspaceCreateRequestSchema, data)
        slug = request.slug or self._slug_from_name(request.name)

        if await self.repository.slug_exists(slug):
            raise WorkspaceSlugConflictError(slug)
        try:
            workspace = await self.repository.create_item(
                {"name": request.name, "slug": slug, "owner_id": user.id}
            )
        except IntegrityError as e:
            raise WorkspaceSlugConflictError(slug) from e
        self.logger.info(
            "Создан workspace %s", workspace.slug, extra={"owner_id": str(user.id)}
        )
        return workspace

    @command("workspace.list")
    async def list_workspaces(
        self, user: Optional[UserCurrentSchema]
    ) -> List[WorkspaceModel]:
        """Workspace, где пользователь владелец или участник."""
        user = self._require_user(user)
        return await self.repository.list_for_user(user.id)

    @command("workspace.get")
    async def get_workspace(
        self, user: Optional[UserCurrentSchema], slug: str
    ) -> WorkspaceModel:
        user = self._require_user(user)
        workspace = await self.repository.get_by_slug(slug)
        if workspace is None:
            raise WorkspaceNotFoundError()
        await self.access.require_access(user.id, workspace)
        return workspace

    @command("workspace.update")
    async def update_workspace(
        self,
        user: Optional[UserCurrentSchema],
        workspace_id: UUID,
        data: Union[WorkspaceUpdateRequestSchema, Dict[str, Any]],
    ) -> WorkspaceModel:
        user = self._require_user(user)
        request = self._validate(WorkspaceUpdateRequestSchema, data)
        workspace = await self._get_workspace(workspace_id)
        await self.access.require_elevated(user.id, workspace, "изменение workspace")

        patch = request.model_dump(exclude_unset=True)
        slug = patch.get("slug")
        if slug and slug != workspace.slug and await self.repository.slug_exists(
            slug, exclude_id=workspace.id
        ):
            raise WorkspaceSlugConflictError(slug)
        if not patch:
            return workspace

        try:
            return await self.repository.update_item(workspace, patch)
        except IntegrityError as e:
            raise WorkspaceSlugConflictError(patch.get("slug", workspace.slug)) from e

    @command("workspace.delete")
    async def delete_workspace(
        self, user: Optional[UserCurrentSchema], workspace_id: UUID
    ) -> UUID:
        """
        Удаляет workspace вместе с проектами, задачами и участниками.

        Raises:
            WorkspaceOwnerRequiredError: Пользователь не владелец.
        """
        user = self._require_user(user)
        workspace = await self._get_workspace(workspace_id)
        if workspace.owner_id != user.id:
            await self.access.require_access(user.id, workspace)
            raise WorkspaceOwnerRequiredError(workspace.id, "удаление workspace")

        await self.repository.delete_item(workspace)
        self.logger.info("Удалён workspace %s", workspace.slug)
        return workspace_id
