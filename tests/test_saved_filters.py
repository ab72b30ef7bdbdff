"""Сохранённые фильтры и проекты."""
import pytest

from src.core.result import ErrorKind
from src.services.v1.projects import ProjectService
from src.services.v1.saved_filters import SavedFilterService
from tests.conftest import current


@pytest.fixture
def service(db_session):
    return SavedFilterService(db_session)


@pytest.mark.asyncio
async def test_create_and_list_filters(service, project, developer):
    created = await service.create_saved_filter(
        current(developer),
        {
            "name": "Мои баги",
            "project_id": project.id,
            "filters": {"type": ["BUG"], "assignee_id": [str(developer.id)]},
        },
    )
    assert created.is_ok
    assert created.value.filters["type"] == ["BUG"]

    listed = await service.list_saved_filters(current(developer), project.id)
    assert [item.name for item in listed.value] == ["Мои баги"]


@pytest.mark.asyncio
async def test_duplicate_name_is_conflict(service, project, developer):
    data = {"name": "Срочное", "project_id": project.id, "filters": {"priority": ["URGENT"]}}
    assert (await service.create_saved_filter(current(developer), data)).is_ok
    duplicate = await service.create_saved_filter(current(developer), data)
    assert duplicate.error.kind is ErrorKind.CONFLICT
    assert duplicate.error.code == "saved_filter_name_conflict"


@pytest.mark.asyncio
async def test_same_name_for_other_user_is_allowed(service, project, developer, guest):
    data = {"name": "Срочное", "project_id": project.id, "filters": {}}
    assert (await service.create_saved_filter(current(developer), data)).is_ok
    assert (await service.create_saved_filter(current(guest), data)).is_ok


@pytest.mark.asyncio
async def test_single_default_filter(service, project, developer):
    user = current(developer)
    first = await service.create_saved_filter(
        user, {"name": "A", "project_id": project.id, "filters": {}, "is_default": True}
    )
    second = await service.create_saved_filter(
        user, {"name": "B", "project_id": project.id, "filters": {}, "is_default": True}
    )
    default = await service.get_default_filter(user, project.id)
    assert default.value.id == second.value.id

    await service.update_saved_filter(user, first.value.id, {"is_default": True})
    default = await service.get_default_filter(user, project.id)
    assert default.value.id == first.value.id


@pytest.mark.asyncio
async def test_rename_into_existing_name_conflicts(service, project, developer):
    user = current(developer)
    await service.create_saved_filter(user, {"name": "A", "project_id": project.id, "filters": {}})
    second = await service.create_saved_filter(user, {"name": "B", "project_id": project.id, "filters": {}})
    renamed = await service.update_saved_filter(user, second.value.id, {"name": "A"})
    assert renamed.error.kind is ErrorKind.CONFLICT


@pytest.mark.asyncio
async def test_only_owner_changes_filter(service, project, developer, admin):
    created = await service.create_saved_filter(
        current(developer), {"name": "A", "project_id": project.id, "filters": {}}
    )
    denied = await service.delete_saved_filter(current(admin), created.value.id)
    assert denied.error.kind is ErrorKind.FORBIDDEN
    assert (await service.delete_saved_filter(current(developer), created.value.id)).is_ok


@pytest.mark.asyncio
async def test_filter_name_length_validated(service, project, developer):
    result = await service.create_saved_filter(
        current(developer), {"name": "x" * 51, "project_id": project.id, "filters": {}}
    )
    assert result.error.kind is ErrorKind.VALIDATION


# ==================== PROJECTS ====================


@pytest.mark.asyncio
async def test_project_key_unique_in_workspace(db_session, workspace, developer):
    service = ProjectService(db_session)
    data = {"name": "Web", "key": "WEB", "workspace_id": workspace.id}
    created = await service.create_project(current(developer), data)
    assert created.value.key == "WEB"

    duplicate = await service.create_project(current(developer), {**data, "name": "Web 2"})
    assert duplicate.error.code == "project_key_conflict"


@pytest.mark.asyncio
async def test_project_key_format(db_session, workspace, developer):
    service = ProjectService(db_session)
    result = await service.create_project(
        current(developer), {"name": "Web", "key": "1web", "workspace_id": workspace.id}
    )
    assert result.error.kind is ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_delete_project_requires_elevated(db_session, project, developer, admin):
    service = ProjectService(db_session)
    denied = await service.delete_project(current(developer), project.id)
    assert denied.error.code == "workspace_permission_denied"
    assert (await service.delete_project(current(admin), project.id)).is_ok


@pytest.mark.asyncio
async def test_update_project_key_conflict(db_session, workspace, project, owner):
    service = ProjectService(db_session)
    other = await service.create_project(
        current(owner), {"name": "Web", "key": "WEB", "workspace_id": workspace.id}
    )
    result = await service.update_project(current(owner), other.value.id, {"key": "CORE"})
    assert result.error.code == "project_key_conflict"
    renamed = await service.update_project(current(owner), other.value.id, {"name": "Сайт"})
    assert renamed.value.name == "Сайт"
