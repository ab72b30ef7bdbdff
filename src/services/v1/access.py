"""
Проверка доступа к workspace.

Доступ определяется в одном месте, resolve_access/derive_access:
владелец имеет полные права без обращения к участникам, участник
получает свою роль, остальные не имеют доступа. Все проверки прав
в сервисах идут через AccessService.

Предикаты:
    - has_access: владелец или участник с любой ролью (включая TESTER/GUEST)
    - is_elevated: владелец или ADMIN (приглашения, удаление участников,
      удаление чужих комментариев/вложений, удаление проектов)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (WorkspaceAccessDeniedError,
                                 WorkspacePermissionDeniedError)
from src.models.v1.workspaces import (WorkspaceMemberModel, WorkspaceModel,
                                      WorkspaceRole)
from src.repository.v1.workspaces import WorkspaceMemberRepository
from src.services.base import BaseService


class AccessKind(str, Enum):
    OWNER = "owner"
    MEMBER = "member"
    NONE = "none"


@dataclass(frozen=True)
class WorkspaceAccess:
    """
    Эффективный доступ пользователя к workspace.

    Attributes:
        kind: Владелец, участник или нет доступа.
        role: Роль участника (только для MEMBER).
    """

    kind: AccessKind
    role: Optional[WorkspaceRole] = None

    @property
    def is_owner(self) -> bool:
        return self.kind is AccessKind.OWNER

    @property
    def has_access(self) -> bool:
        return self.kind is not AccessKind.NONE

    @property
    def is_elevated(self) -> bool:
        return self.is_owner or self.role is WorkspaceRole.ADMIN


NO_ACCESS = WorkspaceAccess(kind=AccessKind.NONE)
OWNER_ACCESS = WorkspaceAccess(kind=AccessKind.OWNER)


def derive_access(
    workspace: WorkspaceModel,
    user_id: UUID,
    membership: Optional[WorkspaceMemberModel],
) -> WorkspaceAccess:
    """
    Доступ по владельцу workspace и записи участника.

    Запись участника учитывается, только если она относится к этому
    пользователю и этому workspace.
    """
    if workspace.owner_id == user_id:
        return OWNER_ACCESS
    if (
        membership is not None
        and membership.user_id == user_id
        and membership.workspace_id == workspace.id
    ):
        return WorkspaceAccess(kind=AccessKind.MEMBER, role=membership.role)
    return NO_ACCESS


class AccessService(BaseService):
    """
    Сервис проверки прав в workspace.

    Example:
        >>> access = await AccessService(session).require_access(user.id, workspace)
        >>> access.is_elevated
        False
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.member_repository = WorkspaceMemberRepository(session)

    async def resolve_access(
        self, user_id: UUID, workspace: WorkspaceModel
    ) -> WorkspaceAccess:
        # Владельцу запрос участника не нужен
        if workspace.owner_id == user_id:
            return OWNER_ACCESS
        membership = await self.member_repository.get_member(workspace.id, user_id)
        return derive_access(workspace, user_id, membership)

    async def resolve_many(
        self, user_id: UUID, workspaces: Iterable[WorkspaceModel]
    ) -> Dict[UUID, WorkspaceAccess]:
        """
        Доступ к нескольким workspace одним запросом участников.

        Returns:
            Dict[UUID, WorkspaceAccess]: Доступ по ID workspace.
        """
        unique = {workspace.id: workspace for workspace in workspaces}
        foreign_ids = [
            workspace_id
            for workspace_id, workspace in unique.items()
            if workspace.owner_id != user_id
        ]
        memberships = {
            member.workspace_id: member
            for member in await self.member_repository.get_memberships(
                user_id, foreign_ids
            )
        }
        return {
            workspace_id: derive_access(
                workspace, user_id, memberships.get(workspace_id)
            )
            for workspace_id, workspace in unique.items()
        }

    async def has_access(self, user_id: UUID, workspace: WorkspaceModel) -> bool:
        return (await self.resolve_access(user_id, workspace)).has_access

    async def is_elevated(self, user_id: UUID, workspace: WorkspaceModel) -> bool:
        return (await self.resolve_access(user_id, workspace)).is_elevated

    async def require_access(
        self, user_id: UUID, workspace: WorkspaceModel
    ) -> WorkspaceAccess:
        """
        Raises:
            WorkspaceAccessDeniedError: Пользователь не владелец и не участник.
        """
        access = await self.resolve_access(user_id, workspace)
        if not access.has_access:
            self.logger.info(
                "Отказ в доступе к workspace %s пользователю %s",
                workspace.id,
                user_id,
            )
            raise WorkspaceAccessDeniedError(workspace.id, user_id)
        return access

    async def require_elevated(
        self, user_id: UUID, workspace: WorkspaceModel, action: str
    ) -> WorkspaceAccess:
        """
        Raises:
            WorkspacePermissionDeniedError: Пользователь не владелец и не ADMIN.
        """
        access = await self.resolve_access(user_id, workspace)
        if not access.is_elevated:
            self.logger.info(
                "Действие '%s' в workspace %s запрещено пользователю %s (%s)",
                action,
                workspace.id,
                user_id,
                access.role.value if access.role else access.kind.value,
            )
            raise WorkspacePermissionDeniedError(workspace.id, action)
        return access
