"""Массовые операции: всё или ничего, журнал на каждую задачу."""
import uuid

import pytest

from src.core.result import ErrorKind
from src.models.v1 import ActivityAction, IssuePriority, IssueStatus
from src.services.v1.bulk import BulkIssueService
from tests.conftest import activities_of, current, make_issue


@pytest.fixture
def service(db_session, view_cache):
    return BulkIssueService(db_session, view_cache=view_cache)


@pytest.mark.asyncio
async def test_bulk_status_updates_all_and_logs_each(service, db_session, project, owner, developer, view_cache):
    issues = [await make_issue(db_session, project, owner) for _ in range(3)]
    result = await service.bulk_update_status(
        current(developer),
        {"issue_ids": [issue.id for issue in issues], "status": "DONE"},
    )
    assert result.value.count == 3
    assert result.value.invalidated_paths == ["/workspace/marketing-team/project/CORE"]
    assert view_cache.calls == [["/workspace/marketing-team/project/CORE"]]

    for issue in issues:
        await db_session.refresh(issue)
        assert issue.status is IssueStatus.DONE
        rows = await activities_of(db_session, issue.id)
        assert [(row.action, row.details) for row in rows] == [
            (
                ActivityAction.STATUS_CHANGED,
                {"field": "status", "old_value": "TODO", "new_value": "DONE"},
            )
        ]


@pytest.mark.asyncio
async def test_one_forbidden_issue_blocks_whole_batch(service, db_session, project, foreign_project, owner, outsider):
    allowed = await make_issue(db_session, project, owner)
    foreign = await make_issue(db_session, foreign_project, outsider)

    result = await service.bulk_update_status(
        current(owner), {"issue_ids": [allowed.id, foreign.id], "status": "DONE"}
    )
    assert result.error.kind is ErrorKind.FORBIDDEN
    assert result.error.code == "bulk_access_denied"

    await db_session.refresh(allowed)
    await db_session.refresh(foreign)
    assert allowed.status is IssueStatus.TODO
    assert foreign.status is IssueStatus.TODO
    assert await activities_of(db_session, allowed.id) == []


@pytest.mark.asyncio
async def test_missing_issue_checked_before_access(service, db_session, foreign_project, owner, outsider):
    foreign = await make_issue(db_session, foreign_project, outsider)
    missing_id = uuid.uuid4()
    result = await service.bulk_update_priority(
        current(owner), {"issue_ids": [foreign.id, missing_id], "priority": "LOW"}
    )
    assert result.error.kind is ErrorKind.NOT_FOUND
    assert result.error.code == "issues_not_found"


@pytest.mark.asyncio
async def test_duplicate_ids_counted_once(service, db_session, project, owner):
    issue = await make_issue(db_session, project, owner)
    result = await service.bulk_update_priority(
        current(owner), {"issue_ids": [issue.id, issue.id], "priority": "URGENT"}
    )
    assert result.value.count == 1
    await db_session.refresh(issue)
    assert issue.priority is IssuePriority.URGENT
    assert len(await activities_of(db_session, issue.id)) == 1


@pytest.mark.asyncio
async def test_bulk_assign_and_unassign(service, db_session, project, owner, developer):
    issues = [await make_issue(db_session, project, owner) for _ in range(2)]
    ids = [issue.id for issue in issues]

    assigned = await service.bulk_assign(current(owner), {"issue_ids": ids, "assignee_id": developer.id})
    assert assigned.value.count == 2
    cleared = await service.bulk_assign(current(owner), {"issue_ids": ids, "assignee_id": None})
    assert cleared.value.count == 2

    for issue in issues:
        await db_session.refresh(issue)
        assert issue.assignee_id is None
        rows = await activities_of(db_session, issue.id)
        assert {row.action for row in rows} == {ActivityAction.ASSIGNED}
        assert len(rows) == 2


@pytest.mark.asyncio
async def test_bulk_delete_without_audit(service, db_session, project, owner, view_cache):
    issues = [await make_issue(db_session, project, owner) for _ in range(2)]
    result = await service.bulk_delete(
        current(owner), {"issue_ids": [issue.id for issue in issues]}
    )
    assert result.value.count == 2
    assert view_cache.calls == [["/workspace/marketing-team/project/CORE"]]
    for issue in issues:
        assert await activities_of(db_session, issue.id) == []


@pytest.mark.asyncio
async def test_bulk_requires_identity(service):
    result = await service.bulk_delete(None, {"issue_ids": [uuid.uuid4()]})
    assert result.error.kind is ErrorKind.UNAUTHORIZED


@pytest.mark.asyncio
async def test_paths_deduplicated_across_projects(service, db_session, project, workspace, owner):
    from tests.conftest import make_project

    second = await make_project(db_session, workspace, "WEB")
    issues = [
        await make_issue(db_session, project, owner),
        await make_issue(db_session, second, owner),
        await make_issue(db_session, project, owner),
    ]
    result = await service.bulk_update_status(
        current(owner), {"issue_ids": [issue.id for issue in issues], "status": "IN_PROGRESS"}
    )
    assert result.value.invalidated_paths == [
        "/workspace/marketing-team/project/CORE",
        "/workspace/marketing-team/project/WEB",
    ]
