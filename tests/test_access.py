"""Доступ к workspace: владелец, участник по роли, посторонний."""
import uuid
from types import SimpleNamespace

import pytest

from src.core.exceptions import (WorkspaceAccessDeniedError,
                                 WorkspacePermissionDeniedError)
from src.models.v1 import WorkspaceRole
from src.services.v1.access import AccessKind, AccessService, derive_access


def _workspace(owner_id):
    return SimpleNamespace(id=uuid.uuid4(), owner_id=owner_id)


def _membership(workspace, user_id, role):
    return SimpleNamespace(workspace_id=workspace.id, user_id=user_id, role=role)


def test_owner_has_full_access_without_membership():
    owner_id = uuid.uuid4()
    access = derive_access(_workspace(owner_id), owner_id, None)
    assert access.kind is AccessKind.OWNER
    assert access.has_access and access.is_elevated


@pytest.mark.parametrize("role", list(WorkspaceRole))
def test_member_gets_stored_role(role):
    workspace = _workspace(uuid.uuid4())
    user_id = uuid.uuid4()
    access = derive_access(workspace, user_id, _membership(workspace, user_id, role))
    assert access.kind is AccessKind.MEMBER
    assert access.role is role
    assert access.has_access
    assert access.is_elevated is (role is WorkspaceRole.ADMIN)


def test_membership_of_other_workspace_is_ignored():
    workspace = _workspace(uuid.uuid4())
    user_id = uuid.uuid4()
    stray = _membership(_workspace(uuid.uuid4()), user_id, WorkspaceRole.ADMIN)
    access = derive_access(workspace, user_id, stray)
    assert access.kind is AccessKind.NONE
    assert not access.has_access


@pytest.mark.asyncio
async def test_resolve_access_matches_membership(
    db_session, workspace, owner, developer, admin, guest, outsider
):
    service = AccessService(db_session)

    assert (await service.resolve_access(owner.id, workspace)).is_owner
    assert (await service.resolve_access(developer.id, workspace)).role is WorkspaceRole.DEVELOPER
    assert (await service.resolve_access(admin.id, workspace)).role is WorkspaceRole.ADMIN
    assert (await service.resolve_access(guest.id, workspace)).role is WorkspaceRole.GUEST
    assert (await service.resolve_access(outsider.id, workspace)).kind is AccessKind.NONE


@pytest.mark.asyncio
async def test_guest_has_access_but_is_not_elevated(db_session, workspace, guest):
    service = AccessService(db_session)
    assert await service.has_access(guest.id, workspace)
    assert not await service.is_elevated(guest.id, workspace)
    with pytest.raises(WorkspacePermissionDeniedError):
        await service.require_elevated(guest.id, workspace, "удаление проекта")


@pytest.mark.asyncio
async def test_require_access_rejects_outsider(db_session, workspace, outsider):
    with pytest.raises(WorkspaceAccessDeniedError):
        await AccessService(db_session).require_access(outsider.id, workspace)


@pytest.mark.asyncio
async def test_resolve_many_covers_every_workspace(
    db_session, workspace, foreign_project, developer, outsider
):
    foreign = await db_session.get(type(workspace), foreign_project.workspace_id)
    access = await AccessService(db_session).resolve_many(
        developer.id, [workspace, foreign, workspace]
    )
    assert set(access) == {workspace.id, foreign.id}
    assert access[workspace.id].has_access
    assert not access[foreign.id].has_access

    access = await AccessService(db_session).resolve_many(outsider.id, [foreign])
    assert access[foreign.id].is_owner
