"""Рассылка уведомлений и входящие пользователя."""
import uuid

import pytest
from sqlalchemy import select

from src.core.result import ErrorKind
from src.models.v1 import NotificationModel, NotificationType
from src.services.v1.notifications import (IssueReference, NotificationService,
                                           comment_recipients)
from tests.conftest import current, make_issue, notifications_for


def test_comment_recipients_exclude_author_and_duplicates():
    reporter, assignee, author = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
    assert comment_recipients(author, reporter, assignee) == [reporter, assignee]
    assert comment_recipients(author, reporter, reporter) == [reporter]
    assert comment_recipients(reporter, reporter, assignee) == [assignee]
    assert comment_recipients(author, reporter, None) == [reporter]
    assert comment_recipients(reporter, reporter, reporter) == []


@pytest.mark.asyncio
async def test_create_notification_skips_actor(db_session, owner):
    service = NotificationService(db_session)
    skipped = await service.create_notification(
        owner.id, NotificationType.ISSUE_ASSIGNED, "Себе", actor_id=owner.id
    )
    assert skipped is None
    assert await notifications_for(db_session, owner.id) == []


@pytest.mark.asyncio
async def test_fanout_failure_does_not_block_other_recipients(db_session, project, owner, developer):
    issue = await make_issue(db_session, project, owner)
    reference = IssueReference(issue.id, issue.key, issue.title, "/board")
    service = NotificationService(db_session)
    channel = service.side_channel()

    # Получателя нет в users: запись падает на внешнем ключе
    service.notify_assigned(channel, reference, uuid.uuid4(), developer.id)
    service.notify_completed(channel, reference, owner.id, developer.id)
    report = await channel.dispatch()

    assert len(report.failed) == 1
    assert len(report.delivered) == 1
    assert len(await notifications_for(db_session, owner.id)) == 1


@pytest.mark.asyncio
async def test_no_notification_ever_targets_its_actor(db_session, project, owner, developer):
    issue = await make_issue(db_session, project, owner, assignee=owner)
    reference = IssueReference(issue.id, issue.key, issue.title, "/board")
    service = NotificationService(db_session)
    channel = service.side_channel()
    service.notify_assigned(channel, reference, owner.id, owner.id)
    service.notify_completed(channel, reference, owner.id, owner.id)
    service.notify_comment_added(channel, reference, owner.id, owner.id, owner.id)
    service.notify_comment_added(channel, reference, developer.id, owner.id, developer.id)
    await channel.dispatch()

    result = await db_session.execute(select(NotificationModel))
    rows = result.scalars().all()
    assert len(rows) == 1
    assert all(row.actor_id != row.user_id for row in rows)


# ==================== INBOX ====================


async def _seed(db_session, project, owner, developer, count=3):
    issue = await make_issue(db_session, project, owner)
    service = NotificationService(db_session)
    for number in range(count):
        await service.create_notification(
            developer.id,
            NotificationType.ISSUE_ASSIGNED,
            f"Уведомление {number}",
            actor_id=owner.id,
            issue_id=issue.id,
        )
    return service


@pytest.mark.asyncio
async def test_inbox_read_flow(db_session, project, owner, developer):
    service = await _seed(db_session, project, owner, developer)
    user = current(developer)

    listed = await service.list_notifications(user)
    assert len(listed.value) == 3
    assert (await service.unread_count(user)).value == 3

    marked = await service.mark_as_read(user, listed.value[0].id)
    assert marked.value.is_read
    assert (await service.unread_count(user)).value == 2

    assert (await service.mark_all_as_read(user)).value == 2
    assert (await service.unread_count(user)).value == 0


@pytest.mark.asyncio
async def test_list_respects_limit(db_session, project, owner, developer):
    service = await _seed(db_session, project, owner, developer, count=5)
    listed = await service.list_notifications(current(developer), limit=2)
    assert len(listed.value) == 2


@pytest.mark.asyncio
async def test_foreign_notification_is_not_accessible(db_session, project, owner, developer, guest):
    service = await _seed(db_session, project, owner, developer, count=1)
    notification = (await notifications_for(db_session, developer.id))[0]

    denied = await service.mark_as_read(current(guest), notification.id)
    assert denied.error.kind is ErrorKind.FORBIDDEN
    deleted = await service.delete_notification(current(guest), notification.id)
    assert deleted.error.kind is ErrorKind.FORBIDDEN

    assert (await service.delete_notification(current(developer), notification.id)).is_ok
    missing = await service.mark_as_read(current(developer), notification.id)
    assert missing.error.kind is ErrorKind.NOT_FOUND
