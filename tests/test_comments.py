"""Комментарии и вложения задач."""
import uuid

import pytest

from src.core.result import ErrorKind
from src.models.v1 import ActivityAction, AttachmentModel, NotificationType
from src.services.v1.attachments import AttachmentService
from src.services.v1.issue_comments import IssueCommentService
from tests.conftest import (FakeStorage, activities_of, current, make_issue,
                            notifications_for)


@pytest.fixture
def service(db_session):
    return IssueCommentService(db_session)


@pytest.mark.asyncio
async def test_comment_when_reporter_is_assignee_sends_one_notice(service, db_session, project, owner, developer):
    issue = await make_issue(db_session, project, owner, assignee=owner)
    result = await service.create_comment(
        current(developer), issue.id, {"content": "Воспроизводится на проде"}
    )
    assert result.is_ok

    received = await notifications_for(db_session, owner.id)
    assert [n.type for n in received] == [NotificationType.COMMENT_ADDED]
    assert await notifications_for(db_session, developer.id) == []

    rows = await activities_of(db_session, issue.id)
    assert [(row.action, row.details) for row in rows] == [
        (ActivityAction.COMMENT_ADDED, {"comment_id": str(result.value.id)})
    ]


@pytest.mark.asyncio
async def test_comment_notifies_reporter_and_assignee(service, db_session, project, owner, developer, admin):
    issue = await make_issue(db_session, project, owner, assignee=developer)
    await service.create_comment(current(admin), issue.id, {"content": "Проверьте"})
    assert len(await notifications_for(db_session, owner.id)) == 1
    assert len(await notifications_for(db_session, developer.id)) == 1
    assert await notifications_for(db_session, admin.id) == []


@pytest.mark.asyncio
async def test_only_author_edits_comment(service, db_session, project, owner, developer):
    issue = await make_issue(db_session, project, owner)
    comment = (await service.create_comment(current(developer), issue.id, {"content": "v1"})).value

    denied = await service.update_comment(current(owner), comment.id, {"content": "v2"})
    assert denied.error.kind is ErrorKind.FORBIDDEN

    updated = await service.update_comment(current(developer), comment.id, {"content": "v2"})
    assert updated.value.content == "v2"
    actions = {row.action for row in await activities_of(db_session, issue.id)}
    assert ActivityAction.COMMENT_UPDATED in actions


@pytest.mark.asyncio
async def test_delete_comment_by_author_or_elevated(service, db_session, project, owner, developer, admin, guest):
    issue = await make_issue(db_session, project, owner)
    first = (await service.create_comment(current(developer), issue.id, {"content": "a"})).value
    second = (await service.create_comment(current(developer), issue.id, {"content": "b"})).value

    denied = await service.delete_comment(current(guest), first.id)
    assert denied.error.code == "comment_access_denied"

    assert (await service.delete_comment(current(admin), first.id)).is_ok
    assert (await service.delete_comment(current(developer), second.id)).is_ok
    remaining = await service.list_comments(current(owner), issue.id)
    assert remaining.value == []


@pytest.mark.asyncio
async def test_empty_comment_rejected(service, db_session, project, owner):
    issue = await make_issue(db_session, project, owner)
    result = await service.create_comment(current(owner), issue.id, {"content": ""})
    assert result.error.kind is ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_comment_on_missing_issue(service, owner):
    result = await service.create_comment(current(owner), uuid.uuid4(), {"content": "x"})
    assert result.error.kind is ErrorKind.NOT_FOUND


# ==================== ATTACHMENTS ====================


async def _attach(db_session, issue, uploader, file_key="issues/a.png"):
    attachment = AttachmentModel(
        id=uuid.uuid4(),
        issue_id=issue.id,
        uploader_id=uploader.id,
        file_name="a.png",
        file_key=file_key,
        file_size=128,
        mime_type="image/png",
    )
    db_session.add(attachment)
    await db_session.commit()
    return attachment


@pytest.mark.asyncio
async def test_delete_attachment_removes_blob_then_row(db_session, project, owner, developer):
    issue = await make_issue(db_session, project, owner)
    attachment = await _attach(db_session, issue, developer)
    storage = FakeStorage(existing=[attachment.file_key])
    service = AttachmentService(db_session, storage)

    assert (await service.delete_attachment(current(developer), attachment.id)).is_ok
    assert storage.deleted == [attachment.file_key]
    assert (await service.list_attachments(current(owner), issue.id)).value == []


@pytest.mark.asyncio
async def test_foreign_attachment_needs_elevated_role(db_session, project, owner, developer, guest):
    issue = await make_issue(db_session, project, owner)
    attachment = await _attach(db_session, issue, developer)
    storage = FakeStorage(existing=[attachment.file_key])
    service = AttachmentService(db_session, storage)

    denied = await service.delete_attachment(current(guest), attachment.id)
    assert denied.error.kind is ErrorKind.FORBIDDEN
    assert storage.deleted == []

    assert (await service.delete_attachment(current(owner), attachment.id)).is_ok


@pytest.mark.asyncio
async def test_missing_blob_does_not_block_row_delete(db_session, project, owner):
    issue = await make_issue(db_session, project, owner)
    attachment = await _attach(db_session, issue, owner)
    service = AttachmentService(db_session, FakeStorage())
    assert (await service.delete_attachment(current(owner), attachment.id)).is_ok
