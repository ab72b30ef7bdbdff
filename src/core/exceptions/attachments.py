"""
Исключения для вложений задач.
"""

from uuid import UUID

from src.core.exceptions.common import ForbiddenError, NotFoundError


class AttachmentNotFoundError(NotFoundError):
    def __init__(self, attachment_id: UUID):
        super().__init__(
            detail="Вложение не найдено",
            field="id",
            value=attachment_id,
            error_type="attachment_not_found",
        )


class AttachmentAccessDeniedError(ForbiddenError):
    """Удалить вложение может загрузивший его, владелец или администратор."""

    def __init__(self, attachment_id: UUID):
        super().__init__(
            detail="Нет прав на удаление вложения",
            error_type="attachment_access_denied",
            extra={"attachment_id": attachment_id},
        )
