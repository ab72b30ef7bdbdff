"""
Исключения для работы с Workspace.

Модуль содержит domain-специфичные исключения для проверки доступа
к workspace и управления его участниками.
"""

from typing import Optional
from uuid import UUID

from src.core.exceptions.common import (ConflictError, ForbiddenError,
                                        NotFoundError)


class WorkspaceNotFoundError(NotFoundError):
    """
    Исключение при отсутствии workspace.

    Example:
        >>> raise WorkspaceNotFoundError(workspace_id=uuid)
    """

    def __init__(self, workspace_id: Optional[UUID] = None):
        super().__init__(
            detail="Workspace не найден",
            field="id" if workspace_id else None,
            value=workspace_id,
            error_type="workspace_not_found",
        )


class WorkspaceAccessDeniedError(ForbiddenError):
    """
    Пользователь не является ни владельцем, ни участником workspace.

    Attributes:
        workspace_id: UUID workspace
        user_id: UUID пользователя
    """

    def __init__(self, workspace_id: UUID, user_id: UUID):
        super().__init__(
            detail="Нет доступа к workspace",
            error_type="workspace_access_denied",
            extra={"workspace_id": workspace_id, "user_id": user_id},
        )


class WorkspacePermissionDeniedError(ForbiddenError):
    """
    Действие требует прав владельца или администратора workspace.

    Используется для приглашений, удаления участников, удаления чужих
    комментариев и вложений, удаления проектов.
    """

    def __init__(self, workspace_id: UUID, action: str):
        super().__init__(
            detail=f"Недостаточно прав: {action} доступно только владельцу или администратору",
            error_type="workspace_permission_denied",
            extra={"workspace_id": workspace_id, "action": action},
        )


class BulkAccessDeniedError(ForbiddenError):
    """Нет прав хотя бы на одну задачу из массовой операции."""

    def __init__(self):
        super().__init__(
            detail="Нет прав на изменение некоторых из этих задач",
            error_type="bulk_access_denied",
        )


class MemberNotFoundError(NotFoundError):
    """Участник workspace не найден."""

    def __init__(self, member_id: UUID):
        super().__init__(
            detail="Участник не найден",
            field="id",
            value=member_id,
            error_type="member_not_found",
        )


class OwnerRemovalError(ForbiddenError):
    """Владельца workspace удалить нельзя."""

    def __init__(self, workspace_id: UUID):
        super().__init__(
            detail="Нельзя удалить владельца workspace",
            error_type="owner_removal_forbidden",
            extra={"workspace_id": workspace_id},
        )


class WorkspaceSlugConflictError(ConflictError):
    """Slug workspace занят."""

    def __init__(self, slug: str):
        super().__init__(
            detail="Workspace с таким адресом уже существует",
            error_type="workspace_slug_conflict",
            extra={"slug": slug},
        )


class WorkspaceOwnerRequiredError(ForbiddenError):
    """Действие доступно только владельцу workspace."""

    def __init__(self, workspace_id: UUID, action: str):
        super().__init__(
            detail=f"Недостаточно прав: {action} доступно только владельцу",
            error_type="workspace_owner_required",
            extra={"workspace_id": workspace_id, "action": action},
        )
