"""Жизненный цикл приглашений и управление участниками."""
import uuid
from datetime import timedelta

import pytest
from sqlalchemy import func, select

from src.core.result import ErrorKind
from src.models.v1 import (InvitationStatus, WorkspaceMemberModel,
                           WorkspaceRole)
from src.services.v1.invitations import InvitationService
from tests.conftest import current, make_invitation, make_user


@pytest.fixture
def service(db_session):
    return InvitationService(db_session)


async def _member_count(db_session, workspace_id, user_id) -> int:
    result = await db_session.execute(
        select(func.count())
        .select_from(WorkspaceMemberModel)
        .where(
            WorkspaceMemberModel.workspace_id == workspace_id,
            WorkspaceMemberModel.user_id == user_id,
        )
    )
    return result.scalar_one()


@pytest.mark.asyncio
async def test_invite_accept_then_reuse_token(service, db_session, workspace, owner):
    bob = await make_user(db_session, "bob@x.com")
    created = await service.create_invitation(
        current(owner),
        {"email": "bob@x.com", "role": "DEVELOPER", "workspace_id": workspace.id},
    )
    invitation = created.value
    assert invitation.status is InvitationStatus.PENDING
    assert invitation.role is WorkspaceRole.DEVELOPER

    accepted = await service.respond_to_invitation(current(bob), invitation.token, {"accept": True})
    assert accepted.value.workspace_slug == "marketing-team"
    assert await _member_count(db_session, workspace.id, bob.id) == 1

    again = await service.respond_to_invitation(current(bob), invitation.token, {"accept": True})
    assert again.error.code == "invitation_no_longer_valid"
    assert await _member_count(db_session, workspace.id, bob.id) == 1


@pytest.mark.asyncio
async def test_email_match_is_case_insensitive(service, db_session, workspace, owner):
    bob = await make_user(db_session, "Bob@X.com")
    created = await service.create_invitation(
        current(owner), {"email": "BOB@x.COM", "workspace_id": workspace.id}
    )
    assert created.value.email == "bob@x.com"
    accepted = await service.respond_to_invitation(current(bob), created.value.token, {"accept": True})
    assert accepted.is_ok


@pytest.mark.asyncio
async def test_expired_invitation_transitions_on_first_access(service, db_session, workspace, owner):
    bob = await make_user(db_session, "bob@x.com")
    invitation = await make_invitation(
        db_session, workspace, owner, "bob@x.com", expires_in=timedelta(minutes=-1)
    )

    result = await service.respond_to_invitation(current(bob), invitation.token, {"accept": True})
    assert result.error.code == "invitation_expired"
    await db_session.refresh(invitation)
    assert invitation.status is InvitationStatus.EXPIRED
    assert await _member_count(db_session, workspace.id, bob.id) == 0

    again = await service.respond_to_invitation(current(bob), invitation.token, {"accept": False})
    assert again.error.code == "invitation_no_longer_valid"


@pytest.mark.asyncio
async def test_reject_is_terminal(service, db_session, workspace, owner):
    bob = await make_user(db_session, "bob@x.com")
    invitation = await make_invitation(db_session, workspace, owner, "bob@x.com")

    rejected = await service.respond_to_invitation(current(bob), invitation.token, {"accept": False})
    assert rejected.value.rejected is True
    assert rejected.value.workspace_slug is None

    accept = await service.respond_to_invitation(current(bob), invitation.token, {"accept": True})
    assert accept.error.kind is ErrorKind.CONFLICT
    assert await _member_count(db_session, workspace.id, bob.id) == 0


@pytest.mark.asyncio
async def test_wrong_email_cannot_respond(service, db_session, workspace, owner, outsider):
    invitation = await make_invitation(db_session, workspace, owner, "bob@x.com")
    result = await service.respond_to_invitation(current(outsider), invitation.token, {"accept": True})
    assert result.error.code == "invitation_email_mismatch"
    await db_session.refresh(invitation)
    assert invitation.status is InvitationStatus.PENDING


@pytest.mark.asyncio
async def test_unknown_token(service, owner):
    result = await service.respond_to_invitation(current(owner), "missing", {"accept": True})
    assert result.error.kind is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_only_elevated_can_invite(service, workspace, developer, admin):
    denied = await service.create_invitation(
        current(developer), {"email": "new@x.com", "workspace_id": workspace.id}
    )
    assert denied.error.code == "workspace_permission_denied"

    allowed = await service.create_invitation(
        current(admin), {"email": "new@x.com", "workspace_id": workspace.id}
    )
    assert allowed.is_ok


@pytest.mark.asyncio
async def test_member_and_owner_emails_rejected(service, workspace, owner):
    member = await service.create_invitation(
        current(owner), {"email": "DEV@tracker.dev", "workspace_id": workspace.id}
    )
    assert member.error.code == "already_member"
    self_invite = await service.create_invitation(
        current(owner), {"email": "owner@tracker.dev", "workspace_id": workspace.id}
    )
    assert self_invite.error.code == "already_member"


@pytest.mark.asyncio
async def test_second_pending_invitation_conflicts(service, workspace, owner):
    data = {"email": "bob@x.com", "workspace_id": workspace.id}
    assert (await service.create_invitation(current(owner), data)).is_ok
    duplicate = await service.create_invitation(current(owner), data)
    assert duplicate.error.code == "pending_invitation_exists"


@pytest.mark.asyncio
async def test_invalid_email_is_validation_error(service, workspace, owner):
    result = await service.create_invitation(
        current(owner), {"email": "not-an-email", "workspace_id": workspace.id}
    )
    assert result.error.kind is ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_cancel_pending_invitation(service, db_session, workspace, owner, admin, developer):
    invitation = await make_invitation(db_session, workspace, admin, "bob@x.com")

    denied = await service.cancel_invitation(current(developer), invitation.id)
    assert denied.error.code == "invitation_cancel_denied"

    assert (await service.cancel_invitation(current(owner), invitation.id)).is_ok
    pending = await service.list_pending_invitations(current(owner), workspace.id)
    assert pending.value == []


@pytest.mark.asyncio
async def test_finished_invitation_cannot_be_cancelled(service, db_session, workspace, owner):
    invitation = await make_invitation(
        db_session, workspace, owner, "bob@x.com", status=InvitationStatus.ACCEPTED
    )
    result = await service.cancel_invitation(current(owner), invitation.id)
    assert result.error.code == "invitation_no_longer_valid"


# ==================== MEMBERS ====================


@pytest.mark.asyncio
async def test_remove_member_rules(service, db_session, workspace, owner, developer, admin):
    result = await db_session.execute(
        select(WorkspaceMemberModel).where(WorkspaceMemberModel.user_id == developer.id)
    )
    membership = result.scalar_one()

    denied = await service.remove_member(current(developer), membership.id)
    assert denied.error.kind is ErrorKind.FORBIDDEN

    assert (await service.remove_member(current(admin), membership.id)).is_ok
    assert await _member_count(db_session, workspace.id, developer.id) == 0

    missing = await service.remove_member(current(admin), uuid.uuid4())
    assert missing.error.code == "member_not_found"
