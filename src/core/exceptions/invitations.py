"""
Исключения жизненного цикла приглашений в workspace.

Переходы: PENDING → ACCEPTED | REJECTED | EXPIRED. Все конечные состояния
отвечают ошибками "no longer valid" или "expired".
"""

from uuid import UUID

from src.core.exceptions.common import (ConflictError, ForbiddenError,
                                        NotFoundError)


class InvitationNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__(
            detail="Приглашение не найдено",
            error_type="invitation_not_found",
        )


class InvitationNoLongerValidError(ConflictError):
    """Приглашение уже принято, отклонено или истекло."""

    def __init__(self, status: str):
        super().__init__(
            detail="Приглашение больше не действительно",
            error_type="invitation_no_longer_valid",
            extra={"status": status},
        )


class InvitationExpiredError(ConflictError):
    """Срок действия приглашения истёк (статус уже переведён в EXPIRED)."""

    def __init__(self):
        super().__init__(
            detail="Срок действия приглашения истёк",
            error_type="invitation_expired",
        )


class InvitationEmailMismatchError(ForbiddenError):
    """Приглашение отправлено на другой email."""

    def __init__(self):
        super().__init__(
            detail="Это приглашение отправлено на другой email",
            error_type="invitation_email_mismatch",
        )


class AlreadyMemberError(ConflictError):
    def __init__(self, email: str):
        super().__init__(
            detail="Пользователь уже состоит в этом workspace",
            error_type="already_member",
            extra={"email": email},
        )


class PendingInvitationExistsError(ConflictError):
    def __init__(self, email: str):
        super().__init__(
            detail="Приглашение на этот email уже отправлено",
            error_type="pending_invitation_exists",
            extra={"email": email},
        )


class InvitationCancelDeniedError(ForbiddenError):
    """Отменить приглашение может владелец, администратор или отправитель."""

    def __init__(self, invitation_id: UUID):
        super().__init__(
            detail="Нет прав на отмену приглашения",
            error_type="invitation_cancel_denied",
            extra={"invitation_id": invitation_id},
        )
