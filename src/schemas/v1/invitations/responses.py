from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.models.v1.invitations import InvitationStatus
from src.models.v1.workspaces import WorkspaceRole
from src.schemas.base import BaseResponseSchema, BaseSchema, CommonBaseSchema


class InvitationDetailSchema(BaseSchema):
    token: str
    email: str
    role: WorkspaceRole
    workspace_id: UUID
    invited_by_id: UUID
    status: InvitationStatus
    expires_at: datetime


class InvitationResponseSchema(BaseResponseSchema):
    data: InvitationDetailSchema


class InvitationListResponseSchema(BaseResponseSchema):
    data: List[InvitationDetailSchema]


class InvitationOutcomeSchema(CommonBaseSchema):
    """
    Итог ответа на приглашение.

    При принятии заполнен workspace_slug, при отклонении rejected=True.
    """

    workspace_slug: Optional[str] = None
    rejected: bool = False


class InvitationOutcomeResponseSchema(BaseResponseSchema):
    data: InvitationOutcomeSchema
