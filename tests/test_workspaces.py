"""Workspace: создание, slug, права на изменение и удаление."""
import pytest
from sqlalchemy import func, select

from src.core.result import ErrorKind
from src.models.v1 import ProjectModel, WorkspaceMemberModel
from src.services.v1.workspaces import WorkspaceService, slugify
from tests.conftest import current


@pytest.fixture
def service(db_session):
    return WorkspaceService(db_session)


def test_slugify():
    assert slugify("Marketing Team!") == "marketing-team"
    assert slugify("  R&D / 2024 ") == "r-d-2024"
    assert slugify("Команда") == ""


@pytest.mark.asyncio
async def test_create_workspace_makes_creator_owner(service, db_session, outsider):
    result = await service.create_workspace(current(outsider), {"name": "Design Crew 2"})
    assert result.is_ok
    workspace = result.value
    assert workspace.slug == "design-crew-2"
    assert workspace.owner_id == outsider.id

    # Владелец не хранится среди участников
    members = await db_session.scalar(
        select(func.count())
        .select_from(WorkspaceMemberModel)
        .where(WorkspaceMemberModel.workspace_id == workspace.id)
    )
    assert members == 0
    listed = await service.list_workspaces(current(outsider))
    assert [item.slug for item in listed.value] == ["design-crew-2"]


@pytest.mark.asyncio
async def test_taken_slug_is_conflict(service, workspace, outsider):
    result = await service.create_workspace(
        current(outsider), {"name": "Marketing", "slug": "marketing-team"}
    )
    assert result.error.kind is ErrorKind.CONFLICT
    assert result.error.code == "workspace_slug_conflict"


@pytest.mark.asyncio
async def test_generated_slug_collision_is_conflict(service, workspace, outsider):
    result = await service.create_workspace(current(outsider), {"name": "Marketing Team"})
    assert result.error.kind is ErrorKind.CONFLICT


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "data, code",
    [
        ({"name": "Команда"}, "workspace_slug_required"),
        ({"name": "Design", "slug": "Bad Slug"}, "validation_error"),
        ({"name": "D"}, "validation_error"),
    ],
)
async def test_invalid_workspace_data(service, outsider, data, code):
    result = await service.create_workspace(current(outsider), data)
    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.code == code


@pytest.mark.asyncio
async def test_create_requires_user(service):
    result = await service.create_workspace(None, {"name": "Design"})
    assert result.error.kind is ErrorKind.UNAUTHORIZED


@pytest.mark.asyncio
async def test_members_see_workspace(service, workspace, developer, outsider):
    listed = await service.list_workspaces(current(developer))
    assert [item.slug for item in listed.value] == ["marketing-team"]
    assert (await service.list_workspaces(current(outsider))).value == []

    found = await service.get_workspace(current(developer), "marketing-team")
    assert found.value.id == workspace.id
    denied = await service.get_workspace(current(outsider), "marketing-team")
    assert denied.error.kind is ErrorKind.FORBIDDEN
    missing = await service.get_workspace(current(developer), "nowhere")
    assert missing.error.kind is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_admin_updates_workspace(service, workspace, admin, developer):
    updated = await service.update_workspace(
        current(admin), workspace.id, {"name": "Growth", "slug": "growth"}
    )
    assert updated.is_ok
    assert updated.value.slug == "growth"

    denied = await service.update_workspace(current(developer), workspace.id, {"name": "X1"})
    assert denied.error.kind is ErrorKind.FORBIDDEN


@pytest.mark.asyncio
async def test_update_into_taken_slug_conflicts(service, workspace, foreign_project, owner):
    result = await service.update_workspace(
        current(owner), workspace.id, {"slug": "other-team"}
    )
    assert result.error.kind is ErrorKind.CONFLICT

    same = await service.update_workspace(
        current(owner), workspace.id, {"slug": "marketing-team"}
    )
    assert same.is_ok


@pytest.mark.asyncio
async def test_only_owner_deletes_workspace(service, db_session, workspace, project, owner, admin, outsider):
    denied = await service.delete_workspace(current(admin), workspace.id)
    assert denied.error.kind is ErrorKind.FORBIDDEN
    assert denied.error.code == "workspace_owner_required"

    stranger = await service.delete_workspace(current(outsider), workspace.id)
    assert stranger.error.kind is ErrorKind.FORBIDDEN
    assert stranger.error.code == "workspace_access_denied"

    deleted = await service.delete_workspace(current(owner), workspace.id)
    assert deleted.value == workspace.id
    db_session.expunge_all()
    assert await db_session.get(ProjectModel, project.id) is None
