"""Журнал активности: сравнение снимков и запись best-effort."""
import uuid

import pytest

from src.models.v1 import ActivityAction, IssuePriority, IssueStatus, IssueType
from src.services.v1.activities import (ActivityService, IssueSnapshot,
                                        diff_issue_snapshots, field_change)
from tests.conftest import activities_of, current, make_issue


def _snapshot(**overrides):
    values = dict(
        status=IssueStatus.TODO,
        priority=IssuePriority.MEDIUM,
        type=IssueType.TASK,
        title="Падает импорт CSV",
        description=None,
        assignee_id=None,
    )
    values.update(overrides)
    return IssueSnapshot(**values)


def test_no_changes_no_rows():
    assert diff_issue_snapshots(_snapshot(), _snapshot()) == []


def test_one_row_per_category_in_fixed_order():
    assignee = uuid.uuid4()
    before = _snapshot()
    after = _snapshot(
        status=IssueStatus.DONE,
        assignee_id=assignee,
        priority=IssuePriority.HIGH,
        title="Импорт CSV",
        description="Шаги воспроизведения",
        type=IssueType.BUG,
    )
    drafts = diff_issue_snapshots(before, after)
    assert [draft.action for draft in drafts] == [
        ActivityAction.STATUS_CHANGED,
        ActivityAction.ASSIGNED,
        ActivityAction.PRIORITY_CHANGED,
        ActivityAction.UPDATED,
    ]
    assert drafts[0].details == {"field": "status", "old_value": "TODO", "new_value": "DONE"}
    assert drafts[1].details == {
        "field": "assignee_id",
        "old_value": None,
        "new_value": str(assignee),
    }
    assert drafts[3].details is None


def test_status_assignee_and_title_give_three_rows():
    drafts = diff_issue_snapshots(
        _snapshot(),
        _snapshot(status=IssueStatus.IN_PROGRESS, assignee_id=uuid.uuid4(), title="Новое"),
    )
    assert [draft.action for draft in drafts] == [
        ActivityAction.STATUS_CHANGED,
        ActivityAction.ASSIGNED,
        ActivityAction.UPDATED,
    ]


def test_unassign_is_an_assignment_change():
    assignee = uuid.uuid4()
    drafts = diff_issue_snapshots(_snapshot(assignee_id=assignee), _snapshot())
    assert len(drafts) == 1
    assert drafts[0].details["old_value"] == str(assignee)
    assert drafts[0].details["new_value"] is None


def test_field_change_stringifies_values():
    assert field_change("priority", IssuePriority.LOW, None) == {
        "field": "priority",
        "old_value": "LOW",
        "new_value": None,
    }


@pytest.mark.asyncio
async def test_log_activity_appends_row(db_session, project, owner):
    issue = await make_issue(db_session, project, owner)
    logged = await ActivityService(db_session).log_activity(
        ActivityAction.COMMENT_ADDED, issue.id, owner.id, {"comment_id": "c1"}
    )
    assert logged is True
    rows = await activities_of(db_session, issue.id)
    assert [(row.action, row.details) for row in rows] == [
        (ActivityAction.COMMENT_ADDED, {"comment_id": "c1"})
    ]


@pytest.mark.asyncio
async def test_log_activity_failure_is_swallowed(db_session, owner):
    # Задачи нет: внешний ключ не даёт сохранить запись
    logged = await ActivityService(db_session).log_activity(
        ActivityAction.UPDATED, uuid.uuid4(), owner.id
    )
    assert logged is False


@pytest.mark.asyncio
async def test_diff_and_log_writes_drafts(db_session, project, owner, developer):
    issue = await make_issue(db_session, project, owner)
    before = IssueSnapshot.from_model(issue)
    after = _snapshot(status=IssueStatus.DONE, assignee_id=developer.id, title=issue.title)
    drafts = await ActivityService(db_session).diff_and_log(before, after, issue.id, owner.id)
    assert len(drafts) == 2
    rows = await activities_of(db_session, issue.id)
    assert {row.action for row in rows} == {
        ActivityAction.STATUS_CHANGED,
        ActivityAction.ASSIGNED,
    }


@pytest.mark.asyncio
async def test_list_activities_requires_access(db_session, project, owner, outsider):
    issue = await make_issue(db_session, project, owner)
    await ActivityService(db_session).log_activity(ActivityAction.CREATED, issue.id, owner.id)
    service = ActivityService(db_session)

    result = await service.list_activities(current(owner), issue.id)
    assert result.is_ok and len(result.value) == 1

    denied = await service.list_activities(current(outsider), issue.id)
    assert not denied.is_ok
    assert denied.error.code == "workspace_access_denied"
