"""Метки проекта и их назначение задачам."""
import uuid

import pytest
from sqlalchemy import func, select

from src.core.result import ErrorKind
from src.models.v1 import IssueModel
from src.services.v1.issues import IssueService
from src.services.v1.labels import LabelService
from tests.conftest import current, make_issue


@pytest.fixture
def service(db_session):
    return LabelService(db_session)


@pytest.fixture
def issues(db_session, view_cache):
    return IssueService(db_session, view_cache=view_cache)


async def make_labels(service, user, project, *names):
    labels = []
    for name in names:
        result = await service.create_label(current(user), project.id, {"name": name})
        labels.append(result.value)
    return labels


@pytest.mark.asyncio
async def test_create_label(service, project, developer):
    result = await service.create_label(current(developer), project.id, {"name": "frontend"})
    assert result.is_ok
    assert result.value.color == "#6B7280"

    colored = await service.create_label(
        current(developer), project.id, {"name": "backend", "color": "#3B82F6"}
    )
    assert colored.value.color == "#3B82F6"

    listed = await service.list_labels(current(developer), project.id)
    assert [item.name for item in listed.value] == ["backend", "frontend"]


@pytest.mark.asyncio
async def test_label_name_conflict_and_bad_color(service, project, developer):
    user = current(developer)
    assert (await service.create_label(user, project.id, {"name": "bug"})).is_ok
    duplicate = await service.create_label(user, project.id, {"name": "bug"})
    assert duplicate.error.kind is ErrorKind.CONFLICT

    bad_color = await service.create_label(user, project.id, {"name": "ui", "color": "blue"})
    assert bad_color.error.kind is ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_outsider_cannot_use_project_labels(service, project, outsider):
    result = await service.create_label(current(outsider), project.id, {"name": "bug"})
    assert result.error.kind is ErrorKind.FORBIDDEN


@pytest.mark.asyncio
async def test_create_issue_with_labels(service, issues, project, developer):
    frontend, backend = await make_labels(service, developer, project, "frontend", "backend")
    created = await issues.create_issue(
        current(developer),
        {
            "title": "Кнопка экспорта",
            "project_id": project.id,
            "label_ids": [frontend.id, backend.id],
        },
    )
    assert created.is_ok

    labels = await service.list_issue_labels(current(developer), created.value.id)
    assert [item.name for item in labels.value] == ["backend", "frontend"]


@pytest.mark.asyncio
async def test_update_replaces_labels(service, issues, db_session, project, owner, developer):
    first, second, third = await make_labels(service, developer, project, "a", "b", "c")
    issue = await make_issue(db_session, project, owner)
    user = current(developer)

    await issues.update_issue(user, issue.id, {"label_ids": [first.id, second.id]})
    updated = await issues.update_issue(user, issue.id, {"label_ids": [third.id]})
    assert updated.is_ok
    labels = await service.list_issue_labels(user, issue.id)
    assert [item.name for item in labels.value] == ["c"]

    await issues.update_issue(user, issue.id, {"label_ids": []})
    assert (await service.list_issue_labels(user, issue.id)).value == []


@pytest.mark.asyncio
async def test_foreign_label_is_rejected(service, issues, db_session, project, foreign_project, developer, outsider):
    (foreign,) = await make_labels(service, outsider, foreign_project, "theirs")
    result = await issues.create_issue(
        current(developer),
        {"title": "Задача", "project_id": project.id, "label_ids": [foreign.id]},
    )
    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.code == "invalid_labels"
    count = await db_session.scalar(
        select(func.count()).select_from(IssueModel).where(IssueModel.project_id == project.id)
    )
    assert count == 0

    issue = await make_issue(db_session, project, developer)
    unknown = await issues.update_issue(
        current(developer), issue.id, {"label_ids": [uuid.uuid4()]}
    )
    assert unknown.error.kind is ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_deleted_label_leaves_issues(service, issues, project, developer):
    (label,) = await make_labels(service, developer, project, "obsolete")
    created = await issues.create_issue(
        current(developer),
        {"title": "Задача", "project_id": project.id, "label_ids": [label.id]},
    )
    deleted = await service.delete_label(current(developer), label.id)
    assert deleted.value == label.id
    labels = await service.list_issue_labels(current(developer), created.value.id)
    assert labels.value == []
