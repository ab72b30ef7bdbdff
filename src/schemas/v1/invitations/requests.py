"""
Схемы запросов для приглашений в workspace.
"""

from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from src.models.v1.workspaces import WorkspaceRole
from src.schemas.base import BaseRequestSchema


class InvitationCreateRequestSchema(BaseRequestSchema):
    """
    Example:
        {"email": "bob@x.com", "role": "DEVELOPER", "workspace_id": "..."}
    """

    email: EmailStr = Field(description="Email приглашённого")
    role: WorkspaceRole = Field(default=WorkspaceRole.DEVELOPER)
    workspace_id: UUID

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class InvitationRespondRequestSchema(BaseRequestSchema):
    accept: bool = Field(description="true - принять, false - отклонить")
