"""
Исключения для проектов.
"""

from typing import Optional
from uuid import UUID

from src.core.exceptions.common import ConflictError, NotFoundError


class ProjectNotFoundError(NotFoundError):
    def __init__(self, project_id: Optional[UUID] = None):
        super().__init__(
            detail="Проект не найден",
            field="id" if project_id else None,
            value=project_id,
            error_type="project_not_found",
        )


class ProjectKeyConflictError(ConflictError):
    """Ключ проекта уже занят в этом workspace."""

    def __init__(self, key: str):
        super().__init__(
            detail=f"Проект с ключом '{key}' уже существует в этом workspace",
            error_type="project_key_conflict",
            extra={"key": key},
        )
