"""
Массовые операции над задачами.

Проверка доступа общая для всего набора: если хотя бы одна задача не
найдена или недоступна, не изменяется ни одна. После проверки выполняется
один пакетный UPDATE/DELETE. Журнал (по записи на задачу) и сброс кэша
представлений идут через канал побочных эффектов после фиксации:
пакетная запись и журнал не атомарны вместе.
"""

from typing import Any, Dict, List, Optional, Sequence, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import BulkAccessDeniedError, IssuesNotFoundError
from src.core.integrations.cache import (LoggingViewCacheInvalidator,
                                         ViewCacheInvalidator,
                                         enqueue_view_invalidation)
from src.models.v1.activities import ActivityAction
from src.repository.v1.issues import IssueContext, IssueRepository
from src.schemas.v1.issues import (BulkAssignRequestSchema,
                                   BulkDeleteRequestSchema,
                                   BulkPriorityRequestSchema,
                                   BulkResultSchema, BulkStatusRequestSchema)
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService
from src.services.v1.activities import ActivityService, field_change

# Поле задачи -> действие журнала для массового изменения
BULK_FIELD_ACTIONS: Dict[str, ActivityAction] = {
    "status": ActivityAction.STATUS_CHANGED,
    "assignee_id": ActivityAction.ASSIGNED,
    "priority": ActivityAction.PRIORITY_CHANGED,
}


class BulkIssueService(BaseService):
    """
    Сервис массовых операций.

    Example:
        >>> result = await service.bulk_update_status(
        ...     user, {"issue_ids": [a, b], "status": "DONE"}
        ... )
        >>> unwrap(result).count
        2
    """

    def __init__(
        self,
        session: AsyncSession,
        view_cache: Optional[ViewCacheInvalidator] = None,
    ):
        super().__init__(session)
        self.issue_repository = IssueRepository(session)
        self.access = AccessService(session)
        self.activities = ActivityService(session)
        self.view_cache = view_cache or LoggingViewCacheInvalidator()

    async def validate_bulk_access(
        self, issue_ids: Sequence[UUID], user_id: UUID
    ) -> List[IssueContext]:
        """
        Загружает задачи одним запросом и проверяет доступ ко всем сразу.

        Raises:
            IssuesNotFoundError: Часть задач не найдена (проверяется первой).
            BulkAccessDeniedError: Нет доступа хотя бы к одной задаче.
        """
        ids = list(dict.fromkeys(issue_ids))
        contexts = await self.issue_repository.get_contexts(ids)
        if len(contexts) < len(ids):
            found = {context.issue.id for context in contexts}
            raise IssuesNotFoundError(
                [issue_id for issue_id in ids if issue_id not in found]
            )

        access = await self.access.resolve_many(
            user_id, [context.workspace for context in contexts]
        )
        denied = [
            context.issue.id
            for context in contexts
            if not access[context.workspace.id].has_access
        ]
        if denied:
            self.logger.info(
                "Массовая операция отклонена: нет доступа к %d из %d задач",
                len(denied),
                len(ids),
                extra={"user_id": str(user_id)},
            )
            raise BulkAccessDeniedError()
        return contexts

    async def _bulk_update(
        self, user_id: UUID, issue_ids: List[UUID], field: str, value: Any
    ) -> BulkResultSchema:
        contexts = await self.validate_bulk_access(issue_ids, user_id)
        previous = {context.issue.id: getattr(context.issue, field) for context in contexts}

        count = await self.issue_repository.update_items_by_ids(
            previous.keys(), {field: value}
        )

        channel = self.side_channel()
        action = BULK_FIELD_ACTIONS[field]
        for issue_id, old_value in previous.items():
            self.activities.enqueue_activity(
                channel,
                action,
                issue_id,
                user_id,
                field_change(field, old_value, value),
            )
        paths = enqueue_view_invalidation(
            channel, self.view_cache, (context.view_path for context in contexts)
        )
        await channel.dispatch()
        return BulkResultSchema(count=count, invalidated_paths=paths)

    # ==================== COMMANDS ====================

    @command("issue.bulk_update_status")
    async def bulk_update_status(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[BulkStatusRequestSchema, Dict[str, Any]],
    ) -> BulkResultSchema:
        user = self._require_user(user)
        request = self._validate(BulkStatusRequestSchema, data)
        return await self._bulk_update(user.id, request.issue_ids, "status", request.status)

    @command("issue.bulk_assign")
    async def bulk_assign(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[BulkAssignRequestSchema, Dict[str, Any]],
    ) -> BulkResultSchema:
        user = self._require_user(user)
        request = self._validate(BulkAssignRequestSchema, data)
        return await self._bulk_update(
            user.id, request.issue_ids, "assignee_id", request.assignee_id
        )

    @command("issue.bulk_update_priority")
    async def bulk_update_priority(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[BulkPriorityRequestSchema, Dict[str, Any]],
    ) -> BulkResultSchema:
        user = self._require_user(user)
        request = self._validate(BulkPriorityRequestSchema, data)
        return await self._bulk_update(
            user.id, request.issue_ids, "priority", request.priority
        )

    @command("issue.bulk_delete")
    async def bulk_delete(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[BulkDeleteRequestSchema, Dict[str, Any]],
    ) -> BulkResultSchema:
        user = self._require_user(user)
        request = self._validate(BulkDeleteRequestSchema, data)
        contexts = await self.validate_bulk_access(request.issue_ids, user.id)

        count = await self.issue_repository.delete_items_by_ids(
            context.issue.id for context in contexts
        )

        channel = self.side_channel()
        paths = enqueue_view_invalidation(
            channel, self.view_cache, (context.view_path for context in contexts)
        )
        await channel.dispatch()
        return BulkResultSchema(count=count, invalidated_paths=paths)
