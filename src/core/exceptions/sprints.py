"""
Исключения для спринтов.
"""

from uuid import UUID

from src.core.exceptions.common import ConflictError, NotFoundError


class SprintNotFoundError(NotFoundError):
    def __init__(self, sprint_id: UUID):
        super().__init__(
            detail="Спринт не найден",
            field="id",
            value=sprint_id,
            error_type="sprint_not_found",
        )


class SprintNameConflictError(ConflictError):
    """Имя спринта уникально в пределах проекта."""

    def __init__(self, name: str):
        super().__init__(
            detail=f"Спринт '{name}' уже есть в этом проекте",
            error_type="sprint_name_conflict",
            extra={"name": name},
        )
