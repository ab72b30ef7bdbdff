"""
Зависимости сервисов задач.

Providers:
    - get_issue_service: IssueService
    - get_bulk_issue_service: BulkIssueService

Usage:
    ```python
    @router.patch("/issues/{issue_id}")
    async def update_issue(issue_id: UUID, service: IssueServiceDep, ...):
        issue = unwrap(await service.update_issue(current_user, issue_id, data))
    ```
"""

from typing import Annotated

from fastapi import Depends

from src.core.dependencies.cache import ViewCacheDep
from src.core.dependencies.database import AsyncSessionDep
from src.services.v1.bulk import BulkIssueService
from src.services.v1.issues import IssueService


async def get_issue_service(
    session: AsyncSessionDep, view_cache: ViewCacheDep
) -> IssueService:
    return IssueService(session=session, view_cache=view_cache)


async def get_bulk_issue_service(
    session: AsyncSessionDep, view_cache: ViewCacheDep
) -> BulkIssueService:
    return BulkIssueService(session=session, view_cache=view_cache)


IssueServiceDep = Annotated[IssueService, Depends(get_issue_service)]
BulkIssueServiceDep = Annotated[BulkIssueService, Depends(get_bulk_issue_service)]
