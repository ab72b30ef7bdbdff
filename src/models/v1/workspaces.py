from enum import Enum
from uuid import UUID

from sqlalchemy import Enum as SQLEnum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..base import BaseModel


class WorkspaceRole(str, Enum):
    """
    Роль участника workspace.

    Attributes:
        ADMIN: Управление участниками, приглашения, удаление проектов и чужих комментариев.
        DEVELOPER: Работа с задачами.
        TESTER: Работа с задачами.
        GUEST: Работа с задачами.

    Note:
        Владелец workspace не хранится как участник: его права определяются
        полем WorkspaceModel.owner_id. Для изменения задач достаточно любой роли.
    """

    ADMIN = "ADMIN"
    DEVELOPER = "DEVELOPER"
    TESTER = "TESTER"
    GUEST = "GUEST"


class WorkspaceModel(BaseModel):
    """
    Workspace - граница арендатора трекера.

    Attributes:
        name (str): Название.
        slug (str): Уникальный URL-friendly идентификатор.
        owner_id (UUID): Владелец (ровно один, полные права).
    """

    __tablename__ = "workspaces"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Название workspace",
    )
    slug: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
        comment="Уникальный URL-friendly идентификатор",
    )
    owner_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID владельца workspace",
    )

    def __repr__(self) -> str:
        return f"<WorkspaceModel(id={self.id}, slug='{self.slug}')>"


class WorkspaceMemberModel(BaseModel):
    """
    Участие пользователя в workspace с ролью.

    Attributes:
        workspace_id (UUID): Workspace.
        user_id (UUID): Пользователь.
        role (WorkspaceRole): Роль участника.

    Constraints:
        Пара (workspace_id, user_id) уникальна.
    """

    __tablename__ = "workspace_members"
    __table_args__ = (
        UniqueConstraint("workspace_id", "user_id", name="uq_workspace_member"),
    )

    workspace_id: Mapped[UUID] = mapped_column(
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID workspace",
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID пользователя",
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
        comment="Роль участника",
    )

    def __repr__(self) -> str:
        return (
            f"<WorkspaceMemberModel(workspace_id={self.workspace_id}, "
            f"user_id={self.user_id}, role={self.role.value})>"
        )
