"""
Сервис комментариев к задачам.

Правила:
    - комментировать и читать может любой участник workspace
    - редактировать может только автор
    - удалить может автор, владелец или ADMIN workspace

Новый комментарий уведомляет автора задачи и исполнителя (кроме автора
комментария). Журнал и уведомления best-effort.
"""

from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (CommentAccessDeniedError, CommentNotFoundError,
                                 IssueNotFoundError)
from src.models.v1.activities import ActivityAction
from src.models.v1.issue_comments import IssueCommentModel
from src.repository.v1.issue_comments import IssueCommentRepository
from src.repository.v1.issues import IssueContext, IssueRepository
from src.schemas.v1.issue_comments import (CommentCreateRequestSchema,
                                           CommentUpdateRequestSchema)
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService
from src.services.v1.activities import ActivityService
from src.services.v1.notifications import IssueReference, NotificationService


class IssueCommentService(BaseService):
    """
    Сервис комментариев.

    Example:
        >>> comment = unwrap(await service.create_comment(
        ...     user, issue_id, {"content": "Воспроизводится на проде"}
        ... ))
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.comment_repository = IssueCommentRepository(session)
        self.issue_repository = IssueRepository(session)
        self.access = AccessService(session)
        self.activities = ActivityService(session)
        self.notifications = NotificationService(session)

    async def _get_issue_context(self, issue_id: UUID) -> IssueContext:
        context = await self.issue_repository.get_context(issue_id)
        if context is None:
            raise IssueNotFoundError(issue_id)
        return context

    async def _get_comment(
        self, comment_id: UUID
    ) -> Tuple[IssueCommentModel, IssueContext]:
        comment = await self.comment_repository.get_item_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)
        return comment, await self._get_issue_context(comment.issue_id)

    @staticmethod
    def _comment_details(comment: IssueCommentModel) -> Dict[str, Any]:
        return {"comment_id": str(comment.id)}

    @command("comment.create")
    async def create_comment(
        self,
        user: Optional[UserCurrentSchema],
        issue_id: UUID,
        data: Union[CommentCreateRequestSchema, Dict[str, Any]],
    ) -> IssueCommentModel:
        user = self._require_user(user)
        request = self._validate(CommentCreateRequestSchema, data)
        context = await self._get_issue_context(issue_id)
        await self.access.require_access(user.id, context.workspace)

        comment = await self.comment_repository.create_item(
            {"issue_id": issue_id, "author_id": user.id, "content": request.content}
        )

        channel = self.side_channel()
        self.activities.enqueue_activity(
            channel,
            ActivityAction.COMMENT_ADDED,
            issue_id,
            user.id,
            self._comment_details(comment),
        )
        self.notifications.notify_comment_added(
            channel,
            IssueReference.from_context(context),
            author_id=user.id,
            reporter_id=context.issue.reporter_id,
            assignee_id=context.issue.assignee_id,
        )
        await channel.dispatch()
        return comment

    @command("comment.list")
    async def list_comments(
        self, user: Optional[UserCurrentSchema], issue_id: UUID
    ) -> List[IssueCommentModel]:
        user = self._require_user(user)
        context = await self._get_issue_context(issue_id)
        await self.access.require_access(user.id, context.workspace)
        return await self.comment_repository.list_by_issue(issue_id)

    @command("comment.update")
    async def update_comment(
        self,
        user: Optional[UserCurrentSchema],
        comment_id: UUID,
        data: Union[CommentUpdateRequestSchema, Dict[str, Any]],
    ) -> IssueCommentModel:
        """
        Raises:
            CommentAccessDeniedError: Пользователь не автор комментария.
        """
        user = self._require_user(user)
        request = self._validate(CommentUpdateRequestSchema, data)
        comment, context = await self._get_comment(comment_id)
        await self.access.require_access(user.id, context.workspace)
        if comment.author_id != user.id:
            raise CommentAccessDeniedError(comment_id, action="edit")

        comment = await self.comment_repository.update_item(
            comment, {"content": request.content}
        )
        await self.activities.log_activity(
            ActivityAction.COMMENT_UPDATED,
            comment.issue_id,
            user.id,
            self._comment_details(comment),
        )
        return comment

    @command("comment.delete")
    async def delete_comment(
        self, user: Optional[UserCurrentSchema], comment_id: UUID
    ) -> UUID:
        """
        Raises:
            CommentAccessDeniedError: Не автор и не владелец/ADMIN workspace.
        """
        user = self._require_user(user)
        comment, context = await self._get_comment(comment_id)
        access = await self.access.require_access(user.id, context.workspace)
        if comment.author_id != user.id and not access.is_elevated:
            raise CommentAccessDeniedError(comment_id, action="delete")

        details = self._comment_details(comment)
        await self.comment_repository.delete_item(comment)
        await self.activities.log_activity(
            ActivityAction.COMMENT_DELETED, comment.issue_id, user.id, details
        )
        return comment_id
