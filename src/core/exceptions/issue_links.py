"""
Исключения для связей задач.
"""

from uuid import UUID

from src.core.exceptions.common import (ConflictError, NotFoundError,
                                        ValidationFailedError)


class IssueLinkNotFoundError(NotFoundError):
    def __init__(self, link_id: UUID):
        super().__init__(
            detail="Связь не найдена",
            field="id",
            value=link_id,
            error_type="issue_link_not_found",
        )


class LinkTargetNotFoundError(NotFoundError):
    def __init__(self, issue_id: UUID):
        super().__init__(
            detail="Связываемая задача не найдена",
            field="to_issue_id",
            value=issue_id,
            error_type="link_target_not_found",
        )


class SelfLinkError(ValidationFailedError):
    def __init__(self):
        super().__init__(
            detail="Нельзя связать задачу саму с собой",
            error_type="issue_self_link",
        )


class IssueLinkConflictError(ConflictError):
    def __init__(self):
        super().__init__(
            detail="Такая связь уже существует",
            error_type="issue_link_conflict",
        )
