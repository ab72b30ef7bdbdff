"""Связи между задачами."""
import uuid

import pytest

from src.core.result import ErrorKind
from src.models.v1 import LinkType
from src.services.v1.issue_links import IssueLinkService
from tests.conftest import current, make_issue


@pytest.fixture
def service(db_session):
    return IssueLinkService(db_session)


@pytest.mark.asyncio
async def test_link_is_listed_on_both_ends(service, db_session, project, owner, developer):
    blocker = await make_issue(db_session, project, owner)
    blocked = await make_issue(db_session, project, owner)
    created = await service.create_issue_link(
        current(developer),
        {"from_issue_id": blocker.id, "to_issue_id": blocked.id, "type": "BLOCKS"},
    )
    assert created.is_ok
    assert created.value.type is LinkType.BLOCKS

    outgoing = await service.list_issue_links(current(developer), blocker.id)
    assert [link.to_issue_id for link in outgoing.value.links_from] == [blocked.id]
    assert outgoing.value.links_to == []

    incoming = await service.list_issue_links(current(developer), blocked.id)
    assert [link.from_issue_id for link in incoming.value.links_to] == [blocker.id]


@pytest.mark.asyncio
async def test_self_link_is_rejected(service, db_session, project, owner):
    issue = await make_issue(db_session, project, owner)
    result = await service.create_issue_link(
        current(owner),
        {"from_issue_id": issue.id, "to_issue_id": issue.id, "type": "RELATES_TO"},
    )
    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.code == "issue_self_link"


@pytest.mark.asyncio
async def test_duplicate_link_is_conflict(service, db_session, project, owner):
    first = await make_issue(db_session, project, owner)
    second = await make_issue(db_session, project, owner)
    data = {"from_issue_id": first.id, "to_issue_id": second.id, "type": "DUPLICATES"}
    assert (await service.create_issue_link(current(owner), data)).is_ok

    duplicate = await service.create_issue_link(current(owner), data)
    assert duplicate.error.kind is ErrorKind.CONFLICT

    other_type = await service.create_issue_link(
        current(owner), {**data, "type": "RELATES_TO"}
    )
    assert other_type.is_ok


@pytest.mark.asyncio
async def test_missing_issues(service, db_session, project, owner):
    issue = await make_issue(db_session, project, owner)
    no_target = await service.create_issue_link(
        current(owner),
        {"from_issue_id": issue.id, "to_issue_id": uuid.uuid4(), "type": "BLOCKS"},
    )
    assert no_target.error.kind is ErrorKind.NOT_FOUND
    assert no_target.error.code == "link_target_not_found"

    no_source = await service.create_issue_link(
        current(owner),
        {"from_issue_id": uuid.uuid4(), "to_issue_id": issue.id, "type": "BLOCKS"},
    )
    assert no_source.error.kind is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_link_requires_access_to_both_workspaces(
    service, db_session, project, foreign_project, owner, outsider
):
    ours = await make_issue(db_session, project, owner)
    theirs = await make_issue(db_session, foreign_project, outsider)
    result = await service.create_issue_link(
        current(owner),
        {"from_issue_id": ours.id, "to_issue_id": theirs.id, "type": "RELATES_TO"},
    )
    assert result.error.kind is ErrorKind.FORBIDDEN


@pytest.mark.asyncio
async def test_delete_link(service, db_session, project, owner, outsider):
    first = await make_issue(db_session, project, owner)
    second = await make_issue(db_session, project, owner)
    link = await service.create_issue_link(
        current(owner),
        {"from_issue_id": first.id, "to_issue_id": second.id, "type": "BLOCKS"},
    )
    denied = await service.delete_issue_link(current(outsider), link.value.id)
    assert denied.error.kind is ErrorKind.FORBIDDEN

    deleted = await service.delete_issue_link(current(owner), link.value.id)
    assert deleted.value == link.value.id
    links = await service.list_issue_links(current(owner), first.id)
    assert links.value.links_from == []

    again = await service.delete_issue_link(current(owner), link.value.id)
    assert again.error.kind is ErrorKind.NOT_FOUND
