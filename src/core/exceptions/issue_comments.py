"""
Исключения для комментариев к задачам.
"""

from uuid import UUID

from src.core.exceptions.common import ForbiddenError, NotFoundError


class CommentNotFoundError(NotFoundError):
    def __init__(self, comment_id: UUID):
        super().__init__(
            detail="Комментарий не найден",
            field="id",
            value=comment_id,
            error_type="comment_not_found",
        )


class CommentAccessDeniedError(ForbiddenError):
    """
    Редактировать комментарий может только автор; удалять - автор,
    владелец или администратор workspace.
    """

    def __init__(self, comment_id: UUID, action: str = "edit"):
        detail = (
            "Редактировать можно только свои комментарии"
            if action == "edit"
            else "Нет прав на удаление комментария"
        )
        super().__init__(
            detail=detail,
            error_type="comment_access_denied",
            extra={"comment_id": comment_id, "action": action},
        )
