import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import Enum as SQLEnum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel
from .workspaces import WorkspaceRole


class InvitationStatus(str, enum.Enum):
    """
    Состояние приглашения.

    Переходы только из PENDING: в ACCEPTED, REJECTED или EXPIRED.
    Вернуться в PENDING нельзя.
    """

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    EXPIRED = "EXPIRED"


class InvitationModel(BaseModel):
    """
    Приглашение в workspace.

    Attributes:
        token (str): Непрозрачный уникальный токен для ссылки.
        email (str): Email приглашённого (нижний регистр).
        role (WorkspaceRole): Роль после принятия.
        workspace_id (UUID): Workspace.
        invited_by_id (UUID): Кто пригласил.
        status (InvitationStatus): Состояние.
        expires_at (datetime): Срок действия (создание + 7 дней).

    Note:
        Истечение проверяется лениво, при ответе на приглашение;
        фоновой задачи нет.
    """

    __tablename__ = "invitations"

    token: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
        comment="Токен приглашения",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Email приглашённого",
    )
    role: Mapped[WorkspaceRole] = mapped_column(
        SQLEnum(
            WorkspaceRole,
            name="workspace_role",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=WorkspaceRole.DEVELOPER,
        comment="Роль после принятия",
    )
    workspace_id: Mapped[UUID] = mapped_column(
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID workspace",
    )
    invited_by_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="UUID пригласившего",
    )
    status: Mapped[InvitationStatus] = mapped_column(
        SQLEnum(
            InvitationStatus,
            name="invitation_status",
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=InvitationStatus.PENDING,
        comment="Состояние приглашения",
    )
    expires_at: Mapped[datetime] = mapped_column(
        nullable=False,
        comment="Срок действия",
    )

    def __repr__(self) -> str:
        return (
            f"<InvitationModel(email='{self.email}', "
            f"workspace_id={self.workspace_id}, status={self.status.value})>"
        )
