"""
Исключения для меток проекта.
"""

from typing import List
from uuid import UUID

from src.core.exceptions.common import (ConflictError, NotFoundError,
                                        ValidationFailedError)


class LabelNotFoundError(NotFoundError):
    def __init__(self, label_id: UUID):
        super().__init__(
            detail="Метка не найдена",
            field="id",
            value=label_id,
            error_type="label_not_found",
        )


class LabelNameConflictError(ConflictError):
    def __init__(self, name: str):
        super().__init__(
            detail=f"Метка '{name}' уже есть в этом проекте",
            error_type="label_name_conflict",
            extra={"name": name},
        )


class InvalidLabelsError(ValidationFailedError):
    """Метки задачи должны принадлежать её проекту."""

    def __init__(self, label_ids: List[UUID]):
        super().__init__(
            detail="label_ids: метки не найдены в проекте задачи",
            error_type="invalid_labels",
            extra={"label_ids": [str(label_id) for label_id in label_ids]},
        )
