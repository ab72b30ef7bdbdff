"""
Repository для работы с комментариями к задачам.
"""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.issue_comments import IssueCommentModel
from src.repository.base import BaseRepository


class IssueCommentRepository(BaseRepository[IssueCommentModel]):
    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=IssueCommentModel)

    async def list_by_issue(self, issue_id: UUID) -> List[IssueCommentModel]:
        """Комментарии задачи от старых к новым."""
        return await self.filter_by(
            order_by=[IssueCommentModel.created_at], issue_id=issue_id
        )
