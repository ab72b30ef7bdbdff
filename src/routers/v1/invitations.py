"""
Роутеры приглашений и участников workspace.

Endpoints:
    POST   /invitations                          - Пригласить по email
    POST   /invitations/{token}/respond          - Принять или отклонить
    DELETE /invitations/{invitation_id}          - Отменить ожидающее
    GET    /workspaces/{workspace_id}/invitations - Ожидающие приглашения
    DELETE /workspaces/members/{member_id}       - Удалить участника
"""

from uuid import UUID

from fastapi import status

from src.core.dependencies import InvitationServiceDep
from src.core.result import unwrap
from src.core.security import CurrentUserDep
from src.routers.base import ProtectedRouter
from src.schemas.v1.invitations import (InvitationCreateRequestSchema,
                                        InvitationDetailSchema,
                                        InvitationListResponseSchema,
                                        InvitationOutcomeResponseSchema,
                                        InvitationResponseSchema,
                                        InvitationRespondRequestSchema)
from src.schemas.v1.issues import DeleteResponseSchema, DeleteResultSchema


class InvitationProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="invitations", tags=["Invitations"])

    def configure(self):
        @self.router.post(
            path="",
            response_model=InvitationResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Пригласить пользователя

            Доступно владельцу и ADMIN. Приглашение действует 7 дней.

            ### Ошибки:
            * **403**: Недостаточно прав
            * **409**: Email уже участник или приглашение уже ожидает ответа
            """,
        )
        async def create_invitation(
            data: InvitationCreateRequestSchema,
            current_user: CurrentUserDep,
            service: InvitationServiceDep,
        ) -> InvitationResponseSchema:
            invitation = unwrap(await service.create_invitation(current_user, data))
            return InvitationResponseSchema(
                message=f"Приглашение отправлено на {invitation.email}",
                data=InvitationDetailSchema.model_validate(invitation),
            )

        @self.router.post(
            path="/{token}/respond",
            response_model=InvitationOutcomeResponseSchema,
            description="""
            ## Ответить на приглашение

            ### Ошибки:
            * **404**: Приглашение не найдено
            * **403**: Приглашение отправлено на другой email
            * **409**: Приглашение уже обработано, истекло или пользователь уже участник
            """,
        )
        async def respond_to_invitation(
            token: str,
            data: InvitationRespondRequestSchema,
            current_user: CurrentUserDep,
            service: InvitationServiceDep,
        ) -> InvitationOutcomeResponseSchema:
            outcome = unwrap(
                await service.respond_to_invitation(current_user, token, data)
            )
            return InvitationOutcomeResponseSchema(
                message="Приглашение отклонено" if outcome.rejected else "Приглашение принято",
                data=outcome,
            )

        @self.router.delete(path="/{invitation_id}", response_model=DeleteResponseSchema)
        async def cancel_invitation(
            invitation_id: UUID,
            current_user: CurrentUserDep,
            service: InvitationServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(
                await service.cancel_invitation(current_user, invitation_id)
            )
            return DeleteResponseSchema(
                message="Приглашение отменено", data=DeleteResultSchema(id=deleted_id)
            )


class WorkspaceMemberProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="workspaces", tags=["Workspaces"])

    def configure(self):
        @self.router.get(
            path="/{workspace_id}/invitations",
            response_model=InvitationListResponseSchema,
        )
        async def list_pending_invitations(
            workspace_id: UUID,
            current_user: CurrentUserDep,
            service: InvitationServiceDep,
        ) -> InvitationListResponseSchema:
            invitations = unwrap(
                await service.list_pending_invitations(current_user, workspace_id)
            )
            return InvitationListResponseSchema(
                data=[InvitationDetailSchema.model_validate(item) for item in invitations]
            )

        @self.router.delete(
            path="/members/{member_id}", response_model=DeleteResponseSchema
        )
        async def remove_member(
            member_id: UUID,
            current_user: CurrentUserDep,
            service: InvitationServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(await service.remove_member(current_user, member_id))
            return DeleteResponseSchema(
                message="Участник удалён", data=DeleteResultSchema(id=deleted_id)
            )
