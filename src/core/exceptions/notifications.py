"""
Исключения для уведомлений.
"""

from uuid import UUID

from src.core.exceptions.common import ForbiddenError, NotFoundError


class NotificationNotFoundError(NotFoundError):
    def __init__(self, notification_id: UUID):
        super().__init__(
            detail="Уведомление не найдено",
            field="id",
            value=notification_id,
            error_type="notification_not_found",
        )


class NotificationAccessDeniedError(ForbiddenError):
    def __init__(self, notification_id: UUID):
        super().__init__(
            detail="Это уведомление адресовано другому пользователю",
            error_type="notification_access_denied",
            extra={"notification_id": notification_id},
        )
