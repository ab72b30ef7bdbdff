"""Спринты проекта."""
import pytest

from src.core.result import ErrorKind
from src.models.v1 import SprintStatus
from src.services.v1.sprints import SprintService
from tests.conftest import current, make_project


@pytest.fixture
def service(db_session):
    return SprintService(db_session)


@pytest.mark.asyncio
async def test_create_sprint_is_planned(service, project, developer):
    result = await service.create_sprint(
        current(developer),
        {"name": "Sprint 1", "goal": "Импорт CSV", "project_id": project.id},
    )
    assert result.is_ok
    assert result.value.status is SprintStatus.PLANNED
    assert result.value.project_id == project.id


@pytest.mark.asyncio
async def test_duplicate_sprint_name_is_conflict(service, db_session, workspace, project, developer):
    data = {"name": "Sprint 1", "project_id": project.id}
    assert (await service.create_sprint(current(developer), data)).is_ok
    duplicate = await service.create_sprint(current(developer), data)
    assert duplicate.error.kind is ErrorKind.CONFLICT
    assert duplicate.error.code == "sprint_name_conflict"

    other = await make_project(db_session, workspace, "WEB")
    elsewhere = await service.create_sprint(
        current(developer), {"name": "Sprint 1", "project_id": other.id}
    )
    assert elsewhere.is_ok


@pytest.mark.asyncio
async def test_end_before_start_is_rejected(service, project, developer):
    result = await service.create_sprint(
        current(developer),
        {
            "name": "Sprint 1",
            "project_id": project.id,
            "start_date": "2026-03-10T00:00:00Z",
            "end_date": "2026-03-01T00:00:00Z",
        },
    )
    assert result.error.kind is ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_update_checks_dates_against_stored_values(service, project, developer):
    created = await service.create_sprint(
        current(developer),
        {"name": "Sprint 1", "project_id": project.id, "start_date": "2026-03-10T00:00:00Z"},
    )
    result = await service.update_sprint(
        current(developer), created.value.id, {"end_date": "2026-03-01T00:00:00Z"}
    )
    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.code == "sprint_dates"


@pytest.mark.asyncio
async def test_update_sprint(service, project, developer):
    user = current(developer)
    await service.create_sprint(user, {"name": "Sprint 1", "project_id": project.id})
    second = await service.create_sprint(user, {"name": "Sprint 2", "project_id": project.id})

    started = await service.update_sprint(user, second.value.id, {"status": "ACTIVE"})
    assert started.value.status is SprintStatus.ACTIVE

    renamed = await service.update_sprint(user, second.value.id, {"name": "Sprint 1"})
    assert renamed.error.kind is ErrorKind.CONFLICT

    cleared = await service.update_sprint(user, second.value.id, {"status": None})
    assert cleared.error.kind is ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_list_and_delete_sprints(service, project, developer):
    user = current(developer)
    first = await service.create_sprint(user, {"name": "Sprint 1", "project_id": project.id})
    await service.create_sprint(user, {"name": "Sprint 2", "project_id": project.id})

    listed = await service.list_sprints(user, project.id)
    assert sorted(item.name for item in listed.value) == ["Sprint 1", "Sprint 2"]

    deleted = await service.delete_sprint(user, first.value.id)
    assert deleted.value == first.value.id
    listed = await service.list_sprints(user, project.id)
    assert [item.name for item in listed.value] == ["Sprint 2"]

    missing = await service.delete_sprint(user, first.value.id)
    assert missing.error.kind is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_outsider_cannot_touch_sprints(service, project, developer, outsider):
    created = await service.create_sprint(
        current(developer), {"name": "Sprint 1", "project_id": project.id}
    )
    denied = await service.create_sprint(
        current(outsider), {"name": "Sprint 2", "project_id": project.id}
    )
    assert denied.error.kind is ErrorKind.FORBIDDEN
    assert (await service.list_sprints(current(outsider), project.id)).error.kind is ErrorKind.FORBIDDEN
    assert (await service.delete_sprint(current(outsider), created.value.id)).error.kind is ErrorKind.FORBIDDEN
