"""
Исключения для работы с задачами (Issues) и подзадачами.
"""

from typing import Iterable, Optional
from uuid import UUID

from src.core.exceptions.common import NotFoundError, ValidationFailedError


class IssueNotFoundError(NotFoundError):
    """
    Задача не найдена.

    Example:
        >>> raise IssueNotFoundError(issue_id=uuid)
    """

    def __init__(self, issue_id: Optional[UUID] = None):
        super().__init__(
            detail="Задача не найдена",
            field="id" if issue_id else None,
            value=issue_id,
            error_type="issue_not_found",
        )


class IssuesNotFoundError(NotFoundError):
    """
    Часть задач из массовой операции не найдена.

    Проверка существования выполняется раньше проверки доступа,
    поэтому этот ответ не раскрывает, к каким workspace относятся задачи.
    """

    def __init__(self, missing_ids: Iterable[UUID] = ()):
        missing = [str(issue_id) for issue_id in missing_ids]
        super().__init__(
            detail="Некоторые задачи не найдены",
            error_type="issues_not_found",
            extra={"missing_count": len(missing)},
        )


class ParentIssueNotFoundError(NotFoundError):
    """Родительская задача не найдена."""

    def __init__(self, parent_id: UUID):
        super().__init__(
            detail="Родительская задача не найдена",
            field="parent_id",
            value=parent_id,
            error_type="parent_issue_not_found",
        )


class SubtaskNestingError(ValidationFailedError):
    """
    Попытка создать подзадачу у подзадачи (глубина вложенности не больше 1).
    """

    def __init__(self, parent_id: UUID):
        super().__init__(
            detail="Нельзя создать подзадачу у подзадачи",
            error_type="subtask_nesting",
            extra={"parent_id": parent_id},
        )


class ParentProjectMismatchError(ValidationFailedError):
    """Родительская задача принадлежит другому проекту."""

    def __init__(self, parent_id: UUID):
        super().__init__(
            detail="Родительская задача должна быть в том же проекте",
            error_type="parent_project_mismatch",
            extra={"parent_id": parent_id},
        )
