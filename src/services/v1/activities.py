"""
Журнал активности задач.

Записи журнала только добавляются. Изменения задачи сравниваются по
снимкам до/после, и на каждую категорию изменения пишется не больше
одной записи:
    1. status -> STATUS_CHANGED
    2. assignee_id -> ASSIGNED
    3. priority -> PRIORITY_CHANGED
    4. title/description/type -> UPDATED (без данных о поле)

Запись в журнал best-effort: она идёт через SideEffectChannel после
фиксации основного изменения и на результат команды не влияет.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import IssueNotFoundError
from src.core.messaging import SideEffectChannel
from src.models.v1.activities import ActivityAction, ActivityModel
from src.models.v1.issues import (IssueModel, IssuePriority, IssueStatus,
                                  IssueType)
from src.repository.v1.activities import ActivityRepository
from src.repository.v1.issues import IssueRepository
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService


@dataclass(frozen=True)
class IssueSnapshot:
    """Отслеживаемые поля задачи на момент времени."""

    status: IssueStatus
    priority: IssuePriority
    type: IssueType
    title: str
    description: Optional[str] = None
    assignee_id: Optional[UUID] = None

    @classmethod
    def from_model(cls, issue: IssueModel) -> "IssueSnapshot":
        return cls(
            status=issue.status,
            priority=issue.priority,
            type=issue.type,
            title=issue.title,
            description=issue.description,
            assignee_id=issue.assignee_id,
        )


@dataclass(frozen=True)
class ActivityDraft:
    """Запись журнала, ещё не сохранённая."""

    action: ActivityAction
    details: Optional[Dict[str, Any]] = None


def _plain(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    return str(value)


def field_change(field: str, old_value: Any, new_value: Any) -> Dict[str, Any]:
    return {
        "field": field,
        "old_value": _plain(old_value),
        "new_value": _plain(new_value),
    }


def diff_issue_snapshots(
    before: IssueSnapshot, after: IssueSnapshot
) -> List[ActivityDraft]:
    """
    Записи журнала для перехода before -> after.

    Example:
        >>> drafts = diff_issue_snapshots(before, after)
        >>> [draft.action for draft in drafts]
        [ActivityAction.STATUS_CHANGED, ActivityAction.ASSIGNED]
    """
    drafts: List[ActivityDraft] = []
    if before.status != after.status:
        drafts.append(
            ActivityDraft(
                ActivityAction.STATUS_CHANGED,
                field_change("status", before.status, after.status),
            )
        )
    if before.assignee_id != after.assignee_id:
        drafts.append(
            ActivityDraft(
                ActivityAction.ASSIGNED,
                field_change("assignee_id", before.assignee_id, after.assignee_id),
            )
        )
    if before.priority != after.priority:
        drafts.append(
            ActivityDraft(
                ActivityAction.PRIORITY_CHANGED,
                field_change("priority", before.priority, after.priority),
            )
        )
    if (
        before.title != after.title
        or before.description != after.description
        or before.type != after.type
    ):
        drafts.append(ActivityDraft(ActivityAction.UPDATED))
    return drafts


class ActivityService(BaseService):
    """
    Сервис журнала активности.

    record_activity пишет запись и пробрасывает ошибки (используется внутри
    эффекта канала). enqueue_* ставят запись в канал команды, log_activity и
    diff_and_log выполняют запись сразу, но тоже best-effort.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = ActivityRepository(session)
        self.issue_repository = IssueRepository(session)
        self.access = AccessService(session)

    async def record_activity(
        self,
        action: ActivityAction,
        issue_id: UUID,
        actor_id: UUID,
        details: Optional[Dict[str, Any]] = None,
    ) -> ActivityModel:
        return await self.repository.create_item(
            {
                "action": action,
                "issue_id": issue_id,
                "actor_id": actor_id,
                "details": details,
            }
        )

    def enqueue_activity(
        self,
        channel: SideEffectChannel,
        action: ActivityAction,
        issue_id: UUID,
        actor_id: UUID,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        channel.enqueue(
            f"activity:{action.value}:{issue_id}",
            lambda session: ActivityService(session).record_activity(
                action, issue_id, actor_id, details
            ),
        )

    def enqueue_diff(
        self,
        channel: SideEffectChannel,
        before: IssueSnapshot,
        after: IssueSnapshot,
        issue_id: UUID,
        actor_id: UUID,
    ) -> List[ActivityDraft]:
        drafts = diff_issue_snapshots(before, after)
        for draft in drafts:
            self.enqueue_activity(
                channel, draft.action, issue_id, actor_id, draft.details
            )
        return drafts

    async def log_activity(
        self,
        action: ActivityAction,
        issue_id: UUID,
        actor_id: UUID,
        details: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Пишет одну запись журнала. Ошибка логируется и не пробрасывается.

        Returns:
            bool: Запись сохранена.
        """
        channel = self.side_channel()
        self.enqueue_activity(channel, action, issue_id, actor_id, details)
        return (await channel.dispatch()).ok

    async def diff_and_log(
        self,
        before: IssueSnapshot,
        after: IssueSnapshot,
        issue_id: UUID,
        actor_id: UUID,
    ) -> List[ActivityDraft]:
        channel = self.side_channel()
        drafts = self.enqueue_diff(channel, before, after, issue_id, actor_id)
        await channel.dispatch()
        return drafts

    # ==================== QUERIES ====================

    @command("activity.list")
    async def list_activities(
        self, user: Optional[UserCurrentSchema], issue_id: UUID
    ) -> List[ActivityModel]:
        user = self._require_user(user)
        context = await self.issue_repository.get_context(issue_id)
        if context is None:
            raise IssueNotFoundError(issue_id)
        await self.access.require_access(user.id, context.workspace)
        return await self.repository.list_by_issue(issue_id)
