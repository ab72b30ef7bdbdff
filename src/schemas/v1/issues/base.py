"""
Общие элементы схем задач.

Ограничения полей вынесены в константы: их используют и схемы
создания, и схемы обновления.
"""

from typing import List
from uuid import UUID

from pydantic_core import PydanticCustomError

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 10000


def unique_issue_ids(value: List[UUID]) -> List[UUID]:
    """
    Убирает повторы, сохраняя порядок. Пустой список - ошибка.

    Raises:
        PydanticCustomError: Если список пуст.
    """
    if not value:
        raise PydanticCustomError(
            "issue_ids_required", "Нужно выбрать хотя бы одну задачу"
        )
    return list(dict.fromkeys(value))
