"""
Сервис связей между задачами.

Связь направленная: from_issue -> to_issue с типом (BLOCKS, RELATES_TO
и т.д.). Тройка (from, to, type) уникальна, связь задачи с собой
запрещена. Создавать связь можно при доступе к workspace обеих задач.
"""

from typing import Any, Dict, List, NamedTuple, Optional, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (IssueLinkConflictError, IssueLinkNotFoundError,
                                 IssueNotFoundError, LinkTargetNotFoundError,
                                 SelfLinkError)
from src.models.v1.issue_links import IssueLinkModel
from src.repository.v1.issue_links import IssueLinkRepository
from src.repository.v1.issues import IssueContext, IssueRepository
from src.schemas.v1.issue_links import IssueLinkCreateRequestSchema
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService


class IssueLinks(NamedTuple):
    links_from: List[IssueLinkModel]
    links_to: List[IssueLinkModel]


class IssueLinkService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.repository = IssueLinkRepository(session)
        self.issue_repository = IssueRepository(session)
        self.access = AccessService(session)

    async def _get_context(self, user_id: UUID, issue_id: UUID) -> IssueContext:
        context = await self.issue_repository.get_context(issue_id)
        if context is None:
            raise IssueNotFoundError(issue_id)
        await self.access.require_access(user_id, context.workspace)
        return context

    @command("issue_link.create")
    async def create_issue_link(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[IssueLinkCreateRequestSchema, Dict[str, Any]],
    ) -> IssueLinkModel:
        """
        Raises:
            SelfLinkError: from_issue_id совпадает с to_issue_id.
            IssueNotFoundError: Исходная задача не найдена.
            LinkTargetNotFoundError: Связываемая задача не найдена.
            IssueLinkConflictError: Такая связь уже есть.
        """
        user = self._require_user(user)
        request = self._validate(IssueLinkCreateRequestSchema, data)
        if request.from_issue_id == request.to_issue_id:
            raise SelfLinkError()

        source = await self._get_context(user.id, request.from_issue_id)
        target = await self.issue_repository.get_context(request.to_issue_id)
        if target is None:
            raise LinkTargetNotFoundError(request.to_issue_id)
        if target.workspace.id != source.workspace.id:
            await self.access.require_access(user.id, target.workspace)

        if await self.repository.link_exists(
            request.from_issue_id, request.to_issue_id, request.type
        ):
            raise IssueLinkConflictError()
        try:
            link = await self.repository.create_item(request.model_dump())
        except IntegrityError as e:
            raise IssueLinkConflictError() from e
        self.logger.info(
            "Связь %s: %s -> %s", link.type.value, source.issue.key, target.issue.key
        )
        return link

    @command("issue_link.delete")
    async def delete_issue_link(
        self, user: Optional[UserCurrentSchema], link_id: UUID
    ) -> UUID:
        user = self._require_user(user)
        link = await self.repository.get_item_by_id(link_id)
        if link is None:
            raise IssueLinkNotFoundError(link_id)
        await self._get_context(user.id, link.from_issue_id)
        await self.repository.delete_item(link)
        return link_id

    @command("issue_link.list")
    async def list_issue_links(
        self, user: Optional[UserCurrentSchema], issue_id: UUID
    ) -> IssueLinks:
        """Исходящие и входящие связи задачи."""
        user = self._require_user(user)
        await self._get_context(user.id, issue_id)
        return IssueLinks(
            links_from=await self.repository.links_from(issue_id),
            links_to=await self.repository.links_to(issue_id),
        )
