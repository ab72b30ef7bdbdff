from .requests import (InvitationCreateRequestSchema,
                       InvitationRespondRequestSchema)
from .responses import (InvitationDetailSchema, InvitationListResponseSchema,
                        InvitationOutcomeResponseSchema,
                        InvitationOutcomeSchema, InvitationResponseSchema)

__all__ = [
    "InvitationCreateRequestSchema",
    "InvitationRespondRequestSchema",
    "InvitationDetailSchema",
    "InvitationResponseSchema",
    "InvitationListResponseSchema",
    "InvitationOutcomeSchema",
    "InvitationOutcomeResponseSchema",
]
