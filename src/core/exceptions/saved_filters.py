"""
Исключения для сохранённых фильтров.
"""

from uuid import UUID

from src.core.exceptions.common import (ConflictError, ForbiddenError,
                                        NotFoundError)


class SavedFilterNotFoundError(NotFoundError):
    def __init__(self, filter_id: UUID):
        super().__init__(
            detail="Фильтр не найден",
            field="id",
            value=filter_id,
            error_type="saved_filter_not_found",
        )


class SavedFilterNameConflictError(ConflictError):
    """Имя фильтра уникально в паре (проект, пользователь)."""

    def __init__(self, name: str):
        super().__init__(
            detail="Фильтр с таким именем уже существует",
            error_type="saved_filter_name_conflict",
            extra={"name": name},
        )


class SavedFilterAccessDeniedError(ForbiddenError):
    def __init__(self, filter_id: UUID):
        super().__init__(
            detail="Изменять можно только свои фильтры",
            error_type="saved_filter_access_denied",
            extra={"filter_id": filter_id},
        )
