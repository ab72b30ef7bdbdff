"""HTTP слой: идентичность из заголовков и отображение ошибок в статусы."""
import uuid
from datetime import timedelta

import pytest

from tests.conftest import (identity_headers, make_invitation, make_issue,
                            make_user)


@pytest.mark.asyncio
async def test_missing_identity_is_401(client, project):
    resp = await client.post("/api/v1/issues", json={"title": "x", "project_id": str(project.id)})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_invalid_identity_header_is_401(client):
    resp = await client.get(
        "/api/v1/notifications", headers={"X-User-Id": "not-a-uuid", "X-User-Email": "a@b.c"}
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_create_and_update_issue(client, project, developer, owner):
    headers = identity_headers(developer)
    resp = await client.post(
        "/api/v1/issues",
        json={"title": "Падает импорт CSV", "project_id": str(project.id)},
        headers=headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    issue_id = body["data"]["id"]
    assert body["data"]["key"] == "CORE-1"

    resp = await client.patch(
        f"/api/v1/issues/{issue_id}",
        json={"status": "DONE", "assignee_id": str(owner.id)},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "DONE"

    resp = await client.get(f"/api/v1/issues/{issue_id}/activity", headers=headers)
    actions = sorted(item["action"] for item in resp.json()["data"])
    assert actions == ["ASSIGNED", "CREATED", "STATUS_CHANGED"]

    resp = await client.get("/api/v1/notifications/unread-count", headers=identity_headers(owner))
    assert resp.json()["data"]["count"] == 1


@pytest.mark.asyncio
async def test_outsider_gets_403_with_error_kind(client, db_session, project, owner, outsider):
    issue = await make_issue(db_session, project, owner)
    resp = await client.get(f"/api/v1/issues/{issue.id}", headers=identity_headers(outsider))
    assert resp.status_code == 403
    error = resp.json()["error"]
    assert error["kind"] == "forbidden"
    assert error["type"] == "workspace_access_denied"


@pytest.mark.asyncio
async def test_unknown_issue_is_404(client, owner):
    resp = await client.get(f"/api/v1/issues/{uuid.uuid4()}", headers=identity_headers(owner))
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_move_issue_endpoint(client, db_session, project, owner):
    for order in (0.0, 1.0, 2.0):
        await make_issue(db_session, project, owner, order=order)
    moving = await make_issue(db_session, project, owner, order=9.0)
    resp = await client.patch(
        f"/api/v1/issues/{moving.id}/move",
        json={"status": "TODO", "destination_index": 1},
        headers=identity_headers(owner),
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["order"] == 0.5

    resp = await client.get(
        f"/api/v1/projects/{project.id}/board",
        params={"status": "TODO"},
        headers=identity_headers(owner),
    )
    assert [item["order"] for item in resp.json()["data"]] == [0.0, 0.5, 1.0, 2.0]


@pytest.mark.asyncio
async def test_bulk_forbidden_leaves_issues_untouched(client, db_session, project, foreign_project, owner, outsider):
    allowed = await make_issue(db_session, project, owner)
    foreign = await make_issue(db_session, foreign_project, outsider)
    resp = await client.post(
        "/api/v1/issues/bulk/status",
        json={"issue_ids": [str(allowed.id), str(foreign.id)], "status": "DONE"},
        headers=identity_headers(owner),
    )
    assert resp.status_code == 403

    resp = await client.get(f"/api/v1/issues/{allowed.id}", headers=identity_headers(owner))
    assert resp.json()["data"]["status"] == "TODO"


@pytest.mark.asyncio
async def test_bulk_status_endpoint(client, db_session, project, owner, view_cache):
    issues = [await make_issue(db_session, project, owner) for _ in range(2)]
    resp = await client.post(
        "/api/v1/issues/bulk/status",
        json={"issue_ids": [str(issue.id) for issue in issues], "status": "IN_PROGRESS"},
        headers=identity_headers(owner),
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["count"] == 2
    assert view_cache.paths == ["/workspace/marketing-team/project/CORE"]


@pytest.mark.asyncio
async def test_invitation_flow(client, db_session, workspace, owner):
    bob = await make_user(db_session, "bob@x.com")
    resp = await client.post(
        "/api/v1/invitations",
        json={"email": "bob@x.com", "role": "DEVELOPER", "workspace_id": str(workspace.id)},
        headers=identity_headers(owner),
    )
    assert resp.status_code == 201
    token = resp.json()["data"]["token"]

    resp = await client.post(
        f"/api/v1/invitations/{token}/respond", json={"accept": True}, headers=identity_headers(bob)
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["workspace_slug"] == "marketing-team"

    resp = await client.post(
        f"/api/v1/invitations/{token}/respond", json={"accept": True}, headers=identity_headers(bob)
    )
    assert resp.status_code == 409
    assert resp.json()["error"]["type"] == "invitation_no_longer_valid"


@pytest.mark.asyncio
async def test_expired_invitation_is_conflict(client, db_session, workspace, owner):
    bob = await make_user(db_session, "bob@x.com")
    invitation = await make_invitation(
        db_session, workspace, owner, "bob@x.com", expires_in=timedelta(days=-1)
    )
    resp = await client.post(
        f"/api/v1/invitations/{invitation.token}/respond",
        json={"accept": True},
        headers=identity_headers(bob),
    )
    assert resp.status_code == 409
    assert resp.json()["error"]["type"] == "invitation_expired"


@pytest.mark.asyncio
async def test_comment_and_attachment_endpoints(client, db_session, project, owner, developer, storage):
    from src.models.v1 import AttachmentModel

    issue = await make_issue(db_session, project, owner)
    resp = await client.post(
        f"/api/v1/issues/{issue.id}/comments",
        json={"content": "Проверил, воспроизводится"},
        headers=identity_headers(developer),
    )
    assert resp.status_code == 201
    comment_id = resp.json()["data"]["id"]

    resp = await client.patch(
        f"/api/v1/comments/{comment_id}", json={"content": "x"}, headers=identity_headers(owner)
    )
    assert resp.status_code == 403

    attachment = AttachmentModel(
        id=uuid.uuid4(),
        issue_id=issue.id,
        uploader_id=developer.id,
        file_name="log.txt",
        file_key="issues/log.txt",
        file_size=10,
    )
    db_session.add(attachment)
    await db_session.commit()

    resp = await client.delete(f"/api/v1/attachments/{attachment.id}", headers=identity_headers(owner))
    assert resp.status_code == 200
    assert storage.deleted == ["issues/log.txt"]


@pytest.mark.asyncio
async def test_saved_filter_conflict_is_409(client, project, developer):
    data = {"name": "Мои", "project_id": str(project.id), "filters": {"status": ["TODO"]}}
    first = await client.post("/api/v1/filters", json=data, headers=identity_headers(developer))
    assert first.status_code == 201
    second = await client.post("/api/v1/filters", json=data, headers=identity_headers(developer))
    assert second.status_code == 409


@pytest.mark.asyncio
async def test_validation_error_is_422(client, developer):
    resp = await client.post(
        "/api/v1/projects",
        json={"name": "Web", "key": "w", "workspace_id": str(uuid.uuid4())},
        headers=identity_headers(developer),
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_workspace_lifecycle_over_http(client, workspace, outsider):
    headers = identity_headers(outsider)
    resp = await client.post("/api/v1/workspaces", json={"name": "Design Crew"}, headers=headers)
    assert resp.status_code == 201
    created = resp.json()["data"]
    assert created["slug"] == "design-crew"

    taken = await client.post(
        "/api/v1/workspaces", json={"name": "Marketing", "slug": "marketing-team"}, headers=headers
    )
    assert taken.status_code == 409
    assert taken.json()["error"]["type"] == "workspace_slug_conflict"

    resp = await client.get("/api/v1/workspaces/slug/design-crew", headers=headers)
    assert resp.json()["data"]["id"] == created["id"]

    resp = await client.delete(f"/api/v1/workspaces/{created['id']}", headers=headers)
    assert resp.status_code == 200
    resp = await client.get("/api/v1/workspaces/slug/design-crew", headers=headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_sprint_name_conflict_is_409(client, project, developer):
    data = {"name": "Sprint 1", "project_id": str(project.id)}
    first = await client.post("/api/v1/sprints", json=data, headers=identity_headers(developer))
    assert first.status_code == 201
    second = await client.post("/api/v1/sprints", json=data, headers=identity_headers(developer))
    assert second.status_code == 409

    resp = await client.get(f"/api/v1/projects/{project.id}/sprints", headers=identity_headers(developer))
    assert [item["name"] for item in resp.json()["data"]] == ["Sprint 1"]


@pytest.mark.asyncio
async def test_issue_links_and_labels_over_http(client, db_session, project, owner, developer):
    headers = identity_headers(developer)
    first = await make_issue(db_session, project, owner)
    second = await make_issue(db_session, project, owner)

    resp = await client.post(
        "/api/v1/issue-links",
        json={"from_issue_id": str(first.id), "to_issue_id": str(first.id), "type": "BLOCKS"},
        headers=headers,
    )
    assert resp.status_code == 422
    resp = await client.post(
        "/api/v1/issue-links",
        json={"from_issue_id": str(first.id), "to_issue_id": str(second.id), "type": "BLOCKS"},
        headers=headers,
    )
    assert resp.status_code == 201
    resp = await client.get(f"/api/v1/issues/{second.id}/links", headers=headers)
    assert [item["from_issue_id"] for item in resp.json()["data"]["links_to"]] == [str(first.id)]

    resp = await client.post(
        f"/api/v1/projects/{project.id}/labels", json={"name": "backend"}, headers=headers
    )
    assert resp.status_code == 201
    label_id = resp.json()["data"]["id"]
    resp = await client.patch(
        f"/api/v1/issues/{first.id}", json={"label_ids": [label_id]}, headers=headers
    )
    assert resp.status_code == 200
    resp = await client.get(f"/api/v1/issues/{first.id}/labels", headers=headers)
    assert [item["name"] for item in resp.json()["data"]] == ["backend"]
