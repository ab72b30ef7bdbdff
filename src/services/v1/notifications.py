"""
Уведомления пользователей.

Рассылка (notify_*) ставит по одному эффекту на получателя в канал
команды: сбой записи одного уведомления не мешает остальным. Проверка
"инициатор не получает уведомление о своём действии" выполняется только
в create_notification.
"""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (NotificationAccessDeniedError,
                                 NotificationNotFoundError)
from src.core.messaging import SideEffectChannel
from src.models.v1.notifications import NotificationModel, NotificationType
from src.repository.v1.issues import IssueContext
from src.repository.v1.notifications import NotificationRepository
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command

DEFAULT_LIST_LIMIT = 20


@dataclass(frozen=True)
class IssueReference:
    """Данные задачи, нужные тексту и ссылке уведомления."""

    issue_id: UUID
    key: str
    title: str
    link: str

    @classmethod
    def from_context(cls, context: IssueContext) -> "IssueReference":
        return cls(
            issue_id=context.issue.id,
            key=context.issue.key,
            title=context.issue.title,
            link=f"{context.view_path}/board",
        )


def comment_recipients(
    author_id: UUID, reporter_id: UUID, assignee_id: Optional[UUID]
) -> List[UUID]:
    """
    Получатели уведомления о комментарии: автор задачи и исполнитель,
    без автора комментария и без повторов.
    """
    recipients: List[UUID] = []
    for user_id in (reporter_id, assignee_id):
        if user_id is None or user_id == author_id or user_id in recipients:
            continue
        recipients.append(user_id)
    return recipients


class NotificationService(BaseService):
    """
    Сервис уведомлений.

    Example:
        >>> channel = service.side_channel()
        >>> service.notify_assigned(channel, reference, assignee_id, actor_id)
        >>> await channel.dispatch()
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = NotificationRepository(session)

    async def create_notification(
        self,
        user_id: UUID,
        type: NotificationType,
        title: str,
        message: Optional[str] = None,
        link: Optional[str] = None,
        actor_id: Optional[UUID] = None,
        issue_id: Optional[UUID] = None,
    ) -> Optional[NotificationModel]:
        """
        Создаёт уведомление.

        Returns:
            Optional[NotificationModel]: None, если получатель и есть инициатор.
        """
        if actor_id is not None and actor_id == user_id:
            self.logger.debug(
                "Уведомление %s пропущено: получатель %s и есть инициатор",
                type.value,
                user_id,
            )
            return None
        return await self.repository.create_item(
            {
                "user_id": user_id,
                "type": type,
                "title": title,
                "message": message,
                "link": link,
                "actor_id": actor_id,
                "issue_id": issue_id,
            }
        )

    # ==================== FAN-OUT ====================

    def _enqueue(
        self,
        channel: SideEffectChannel,
        user_id: UUID,
        type: NotificationType,
        title: str,
        reference: IssueReference,
        actor_id: UUID,
    ) -> None:
        channel.enqueue(
            f"notification:{type.value}:{user_id}",
            lambda session: NotificationService(session).create_notification(
                user_id=user_id,
                type=type,
                title=title,
                message=reference.title,
                link=reference.link,
                actor_id=actor_id,
                issue_id=reference.issue_id,
            ),
        )

    def notify_assigned(
        self,
        channel: SideEffectChannel,
        reference: IssueReference,
        assignee_id: UUID,
        actor_id: UUID,
    ) -> None:
        self._enqueue(
            channel,
            assignee_id,
            NotificationType.ISSUE_ASSIGNED,
            f"Вам назначена задача {reference.key}",
            reference,
            actor_id,
        )

    def notify_completed(
        self,
        channel: SideEffectChannel,
        reference: IssueReference,
        reporter_id: UUID,
        actor_id: UUID,
    ) -> None:
        self._enqueue(
            channel,
            reporter_id,
            NotificationType.ISSUE_STATUS_CHANGED,
            f"Задача {reference.key} выполнена",
            reference,
            actor_id,
        )

    def notify_comment_added(
        self,
        channel: SideEffectChannel,
        reference: IssueReference,
        author_id: UUID,
        reporter_id: UUID,
        assignee_id: Optional[UUID],
    ) -> List[UUID]:
        """
        Returns:
            List[UUID]: Получатели, которым поставлены уведомления.
        """
        recipients = comment_recipients(author_id, reporter_id, assignee_id)
        for user_id in recipients:
            self._enqueue(
                channel,
                user_id,
                NotificationType.COMMENT_ADDED,
                f"Новый комментарий к задаче {reference.key}",
                reference,
                author_id,
            )
        return recipients

    # ==================== INBOX ====================

    async def _get_own(self, user_id: UUID, notification_id: UUID) -> NotificationModel:
        notification = await self.repository.get_item_by_id(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)
        if notification.user_id != user_id:
            raise NotificationAccessDeniedError(notification_id)
        return notification

    @command("notification.list")
    async def list_notifications(
        self, user: Optional[UserCurrentSchema], limit: int = DEFAULT_LIST_LIMIT
    ) -> List[NotificationModel]:
        user = self._require_user(user)
        return await self.repository.list_for_user(user.id, limit=limit)

    @command("notification.unread_count")
    async def unread_count(self, user: Optional[UserCurrentSchema]) -> int:
        user = self._require_user(user)
        return await self.repository.count_unread(user.id)

    @command("notification.mark_as_read")
    async def mark_as_read(
        self, user: Optional[UserCurrentSchema], notification_id: UUID
    ) -> NotificationModel:
        user = self._require_user(user)
        notification = await self._get_own(user.id, notification_id)
        if notification.is_read:
            return notification
        return await self.repository.update_item(notification, {"is_read": True})

    @command("notification.mark_all_as_read")
    async def mark_all_as_read(self, user: Optional[UserCurrentSchema]) -> int:
        user = self._require_user(user)
        updated = await self.repository.mark_all_read(user.id)
        self.logger.info(
            "Отмечено прочитанными %d уведомлений пользователя %s", updated, user.id
        )
        return updated

    @command("notification.delete")
    async def delete_notification(
        self, user: Optional[UserCurrentSchema], notification_id: UUID
    ) -> UUID:
        user = self._require_user(user)
        notification = await self._get_own(user.id, notification_id)
        await self.repository.delete_item(notification)
        return notification_id
