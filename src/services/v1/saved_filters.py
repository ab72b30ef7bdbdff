"""
Сервис сохранённых фильтров доски.

Фильтры принадлежат пользователю в рамках проекта. Имя уникально для
пары (проект, пользователь); фильтр по умолчанию у пары не больше одного:
установка нового сбрасывает прежний в той же транзакции.
"""

from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (ProjectNotFoundError,
                                 SavedFilterAccessDeniedError,
                                 SavedFilterNameConflictError,
                                 SavedFilterNotFoundError)
from src.models.v1.projects import ProjectModel
from src.models.v1.saved_filters import SavedFilterModel
from src.models.v1.workspaces import WorkspaceModel
from src.repository.v1.projects import ProjectRepository
from src.repository.v1.saved_filters import SavedFilterRepository
from src.schemas.v1.saved_filters import (SavedFilterCreateRequestSchema,
                                          SavedFilterUpdateRequestSchema)
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService


class SavedFilterService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = SavedFilterRepository(session)
        self.project_repository = ProjectRepository(session)
        self.access = AccessService(session)

    async def _get_project(
        self, project_id: UUID
    ) -> Tuple[ProjectModel, WorkspaceModel]:
        found = await self.project_repository.get_with_workspace(project_id)
        if found is None:
            raise ProjectNotFoundError(project_id)
        return found

    async def _get_own(self, user_id: UUID, filter_id: UUID) -> SavedFilterModel:
        saved_filter = await self.repository.get_item_by_id(filter_id)
        if saved_filter is None:
            raise SavedFilterNotFoundError(filter_id)
        if saved_filter.user_id != user_id:
            raise SavedFilterAccessDeniedError(filter_id)
        return saved_filter

    async def _commit_or_conflict(self, name: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            raise SavedFilterNameConflictError(name) from e

    @command("saved_filter.create")
    async def create_saved_filter(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[SavedFilterCreateRequestSchema, Dict[str, Any]],
    ) -> SavedFilterModel:
        """
        Raises:
            SavedFilterNameConflictError: Фильтр с таким именем уже есть.
        """
        user = self._require_user(user)
        request = self._validate(SavedFilterCreateRequestSchema, data)
        _, workspace = await self._get_project(request.project_id)
        await self.access.require_access(user.id, workspace)

        if request.is_default:
            await self.repository.clear_default(request.project_id, user.id)
        try:
            saved_filter = await self.repository.create_item(
                {
                    "name": request.name,
                    "filters": request.filters.model_dump(mode="json"),
                    "is_default": request.is_default,
                    "project_id": request.project_id,
                    "user_id": user.id,
                },
                commit=False,
            )
        except IntegrityError as e:
            raise SavedFilterNameConflictError(request.name) from e
        await self._commit_or_conflict(request.name)
        return saved_filter

    @command("saved_filter.update")
    async def update_saved_filter(
        self,
        user: Optional[UserCurrentSchema],
        filter_id: UUID,
        data: Union[SavedFilterUpdateRequestSchema, Dict[str, Any]],
    ) -> SavedFilterModel:
        user = self._require_user(user)
        request = self._validate(SavedFilterUpdateRequestSchema, data)
        saved_filter = await self._get_own(user.id, filter_id)

        patch: Dict[str, Any] = {}
        if request.name is not None:
            patch["name"] = request.name
        if request.filters is not None:
            patch["filters"] = request.filters.model_dump(mode="json")
        if request.is_default is not None:
            patch["is_default"] = request.is_default
        if not patch:
            return saved_filter

        if patch.get("is_default"):
            await self.repository.clear_default(
                saved_filter.project_id, user.id, exclude_id=saved_filter.id
            )
        name = patch.get("name", saved_filter.name)
        try:
            saved_filter = await self.repository.update_item(
                saved_filter, patch, commit=False
            )
        except IntegrityError as e:
            raise SavedFilterNameConflictError(name) from e
        await self._commit_or_conflict(name)
        return saved_filter

    @command("saved_filter.delete")
    async def delete_saved_filter(
        self, user: Optional[UserCurrentSchema], filter_id: UUID
    ) -> UUID:
        user = self._require_user(user)
        saved_filter = await self._get_own(user.id, filter_id)
        await self.repository.delete_item(saved_filter)
        return filter_id

    @command("saved_filter.list")
    async def list_saved_filters(
        self, user: Optional[UserCurrentSchema], project_id: UUID
    ) -> List[SavedFilterModel]:
        user = self._require_user(user)
        _, workspace = await self._get_project(project_id)
        await self.access.require_access(user.id, workspace)
        return await self.repository.list_for_user(project_id, user.id)

    @command("saved_filter.get_default")
    async def get_default_filter(
        self, user: Optional[UserCurrentSchema], project_id: UUID
    ) -> Optional[SavedFilterModel]:
        user = self._require_user(user)
        _, workspace = await self._get_project(project_id)
        await self.access.require_access(user.id, workspace)
        return await self.repository.get_default(project_id, user.id)
