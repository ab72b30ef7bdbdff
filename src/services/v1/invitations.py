"""
Приглашения в workspace и управление участниками.

Жизненный цикл приглашения: PENDING -> ACCEPTED | REJECTED | EXPIRED.
Все конечные статусы окончательные. Срок действия проверяется при ответе
на приглашение: просроченное приглашение сначала переводится в EXPIRED,
затем возвращается ошибка истечения срока.

Принятие атомарно: запись участника и статус ACCEPTED фиксируются одним
коммитом.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (AlreadyMemberError,
                                 InvitationCancelDeniedError,
                                 InvitationEmailMismatchError,
                                 InvitationExpiredError,
                                 InvitationNoLongerValidError,
                                 InvitationNotFoundError, MemberNotFoundError,
                                 OwnerRemovalError,
                                 PendingInvitationExistsError,
                                 WorkspaceNotFoundError)
from src.models.v1.invitations import InvitationModel, InvitationStatus
from src.models.v1.workspaces import WorkspaceModel
from src.repository.v1.invitations import InvitationRepository
from src.repository.v1.users import UserRepository
from src.repository.v1.workspaces import (WorkspaceMemberRepository,
                                          WorkspaceRepository)
from src.schemas.v1.invitations import (InvitationCreateRequestSchema,
                                        InvitationOutcomeSchema,
                                        InvitationRespondRequestSchema)
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService

TOKEN_BYTES = 32


def _as_utc(value: datetime) -> datetime:
    # SQLite возвращает naive datetime
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class InvitationService(BaseService):
    """
    Сервис приглашений.

    Example:
        >>> invitation = unwrap(await service.create_invitation(
        ...     owner, {"email": "bob@x.com", "workspace_id": workspace.id}
        ... ))
        >>> unwrap(await service.respond_to_invitation(
        ...     bob, invitation.token, {"accept": True}
        ... )).workspace_slug
        'marketing-team'
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = InvitationRepository(session)
        self.workspace_repository = WorkspaceRepository(session)
        self.member_repository = WorkspaceMemberRepository(session)
        self.user_repository = UserRepository(session)
        self.access = AccessService(session)

    async def _get_workspace(self, workspace_id: UUID) -> WorkspaceModel:
        workspace = await self.workspace_repository.get_item_by_id(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(workspace_id)
        return workspace

    async def _is_owner_email(self, workspace: WorkspaceModel, email: str) -> bool:
        owner = await self.user_repository.get_item_by_id(workspace.owner_id)
        return owner is not None and owner.email.lower() == email

    # ==================== CREATE ====================

    @command("invitation.create")
    async def create_invitation(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[InvitationCreateRequestSchema, Dict[str, Any]],
    ) -> InvitationModel:
        """
        Создаёт приглашение.

        Raises:
            WorkspacePermissionDeniedError: Пользователь не владелец и не ADMIN.
            AlreadyMemberError: Email уже принадлежит участнику.
            PendingInvitationExistsError: Приглашение на этот email уже ждёт ответа.
        """
        user = self._require_user(user)
        request = self._validate(InvitationCreateRequestSchema, data)
        email = request.email.lower()

        workspace = await self._get_workspace(request.workspace_id)
        await self.access.require_elevated(user.id, workspace, "приглашение участников")

        if await self.member_repository.is_member_email(
            workspace.id, email
        ) or await self._is_owner_email(workspace, email):
            raise AlreadyMemberError(email)
        if await self.repository.pending_exists(workspace.id, email):
            raise PendingInvitationExistsError(email)

        invitation = await self.repository.create_item(
            {
                "token": secrets.token_urlsafe(TOKEN_BYTES),
                "email": email,
                "role": request.role,
                "workspace_id": workspace.id,
                "invited_by_id": user.id,
                "status": InvitationStatus.PENDING,
                "expires_at": datetime.now(timezone.utc)
                + timedelta(days=self.settings.invitations.INVITATION_EXPIRE_DAYS),
            }
        )
        self.logger.info(
            "Приглашение в workspace %s отправлено на %s (%s)",
            workspace.slug,
            email,
            request.role.value,
        )
        return invitation

    # ==================== RESPOND ====================

    @command("invitation.respond")
    async def respond_to_invitation(
        self,
        user: Optional[UserCurrentSchema],
        token: str,
        data: Union[InvitationRespondRequestSchema, Dict[str, Any]],
    ) -> InvitationOutcomeSchema:
        """
        Принимает или отклоняет приглашение.

        Порядок проверок: приглашение существует, оно в статусе PENDING,
        срок не истёк, email совпадает (без учёта регистра).

        Raises:
            InvitationNotFoundError: Токен не найден.
            InvitationNoLongerValidError: Приглашение уже не в статусе PENDING.
            InvitationExpiredError: Срок истёк (статус становится EXPIRED).
            InvitationEmailMismatchError: Приглашение на другой email.
        """
        user = self._require_user(user)
        request = self._validate(InvitationRespondRequestSchema, data)

        invitation = await self.repository.get_by_token(token)
        if invitation is None:
            raise InvitationNotFoundError()
        if invitation.status is not InvitationStatus.PENDING:
            raise InvitationNoLongerValidError(invitation.status.value)

        if datetime.now(timezone.utc) > _as_utc(invitation.expires_at):
            await self.repository.update_item(
                invitation, {"status": InvitationStatus.EXPIRED}
            )
            self.logger.info("Приглашение %s истекло", invitation.id)
            raise InvitationExpiredError()

        if invitation.email.lower() != user.email.lower():
            raise InvitationEmailMismatchError()

        if not request.accept:
            await self.repository.update_item(
                invitation, {"status": InvitationStatus.REJECTED}
            )
            self.logger.info("Приглашение %s отклонено", invitation.id)
            return InvitationOutcomeSchema(rejected=True)

        workspace = await self._get_workspace(invitation.workspace_id)
        if workspace.owner_id == user.id or await self.member_repository.get_member(
            workspace.id, user.id
        ):
            raise AlreadyMemberError(user.email)

        try:
            await self.member_repository.create_item(
                {
                    "workspace_id": workspace.id,
                    "user_id": user.id,
                    "role": invitation.role,
                },
                commit=False,
            )
            await self.repository.update_item(
                invitation, {"status": InvitationStatus.ACCEPTED}, commit=False
            )
            await self.session.commit()
        except IntegrityError as e:
            raise AlreadyMemberError(user.email) from e

        self.logger.info(
            "Пользователь %s вступил в workspace %s", user.id, workspace.slug
        )
        return InvitationOutcomeSchema(workspace_slug=workspace.slug)

    # ==================== MANAGE ====================

    @command("invitation.cancel")
    async def cancel_invitation(
        self, user: Optional[UserCurrentSchema], invitation_id: UUID
    ) -> UUID:
        """
        Отменяет (удаляет) ожидающее приглашение.

        Отменить может отправитель, владелец или ADMIN workspace.
        """
        user = self._require_user(user)
        invitation = await self.repository.get_item_by_id(invitation_id)
        if invitation is None:
            raise InvitationNotFoundError()

        workspace = await self._get_workspace(invitation.workspace_id)
        if invitation.invited_by_id != user.id and not await self.access.is_elevated(
            user.id, workspace
        ):
            raise InvitationCancelDeniedError(invitation_id)
        if invitation.status is not InvitationStatus.PENDING:
            raise InvitationNoLongerValidError(invitation.status.value)

        await self.repository.delete_item(invitation)
        return invitation_id

    @command("invitation.list_pending")
    async def list_pending_invitations(
        self, user: Optional[UserCurrentSchema], workspace_id: UUID
    ) -> List[InvitationModel]:
        user = self._require_user(user)
        workspace = await self._get_workspace(workspace_id)
        await self.access.require_elevated(user.id, workspace, "просмотр приглашений")
        return await self.repository.list_pending(workspace.id)

    @command("workspace.remove_member")
    async def remove_member(
        self, user: Optional[UserCurrentSchema], member_id: UUID
    ) -> UUID:
        """
        Удаляет участника из workspace.

        Raises:
            MemberNotFoundError: Записи участника нет.
            WorkspacePermissionDeniedError: Пользователь не владелец и не ADMIN.
            OwnerRemovalError: Попытка удалить владельца.
        """
        user = self._require_user(user)
        member = await self.member_repository.get_item_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)

        workspace = await self._get_workspace(member.workspace_id)
        await self.access.require_elevated(user.id, workspace, "удаление участников")
        if member.user_id == workspace.owner_id:
            raise OwnerRemovalError(workspace.id)

        await self.member_repository.delete_item(member)
        self.logger.info(
            "Участник %s удалён из workspace %s", member.user_id, workspace.slug
        )
        return member_id
