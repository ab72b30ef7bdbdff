from typing import Annotated

from fastapi import Depends

from src.core.dependencies.database import AsyncSessionDep
from src.services.v1.issue_comments import IssueCommentService


async def get_issue_comment_service(session: AsyncSessionDep) -> IssueCommentService:
    return IssueCommentService(session=session)


IssueCommentServiceDep = Annotated[
    IssueCommentService, Depends(get_issue_comment_service)
]
