# tests/conftest.py - общие фикстуры
import os
import uuid
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)

# SQLite вместо PostgreSQL
TEST_DB_URL = "sqlite+aiosqlite:///./test.db"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ.setdefault("SIDE_EFFECT_RETRY_DELAY", "0")

from src.core.dependencies import (get_async_session, get_storage,  # noqa: E402
                                   get_view_cache)
from src.core.integrations.cache import ViewCacheInvalidator  # noqa: E402
from src.core.integrations.storages import AbstractStorageBackend  # noqa: E402
from src.main import app  # noqa: E402
from src.models import Base  # noqa: E402
from src.models.v1 import (InvitationModel, InvitationStatus,  # noqa: E402
                           IssueModel, IssuePriority, IssueStatus, IssueType,
                           ProjectModel, UserModel, WorkspaceMemberModel,
                           WorkspaceModel, WorkspaceRole)
from src.schemas.v1.users import UserCurrentSchema  # noqa: E402


def _enable_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE CASCADE в SQLite работает только с включённым pragma
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class FakeStorage(AbstractStorageBackend):
    """Хранилище в памяти: запоминает удалённые ключи."""

    def __init__(self, existing: Iterable[str] = ()):
        self.files = set(existing)
        self.deleted: List[str] = []

    async def delete_file(self, file_key: str, bucket_name: Optional[str] = None) -> bool:
        self.deleted.append(file_key)
        if file_key in self.files:
            self.files.remove(file_key)
            return True
        return False

    async def file_exists(self, file_key: str, bucket_name: Optional[str] = None) -> bool:
        return file_key in self.files


class RecordingViewCache(ViewCacheInvalidator):
    """Инвалидатор, запоминающий сброшенные пути."""

    def __init__(self):
        super().__init__()
        self.calls: List[List[str]] = []

    async def invalidate(self, paths: Iterable[str]) -> List[str]:
        invalidated = sorted(set(paths))
        self.calls.append(invalidated)
        return invalidated

    @property
    def paths(self) -> List[str]:
        return [path for call in self.calls for path in call]


def current(user: UserModel) -> UserCurrentSchema:
    """Идентичность запроса для пользователя."""
    return UserCurrentSchema(id=user.id, email=user.email)


def identity_headers(user: UserModel) -> dict:
    """Заголовки идентичности для HTTP-запросов."""
    return {"X-User-Id": str(user.id), "X-User-Email": user.email}


# ==================== DATABASE ====================


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    engine = create_async_engine(TEST_DB_URL, echo=False)
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine):
    session_factory = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def view_cache():
    return RecordingViewCache()


@pytest_asyncio.fixture(scope="function")
async def client(db_engine, storage, view_cache):
    """HTTP клиент с подменёнными зависимостями БД, хранилища и кэша."""
    session_factory = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False
    )

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_session
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_view_cache] = lambda: view_cache
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ==================== FACTORIES ====================


async def make_user(session: AsyncSession, email: str, name: Optional[str] = None) -> UserModel:
    user = UserModel(id=uuid.uuid4(), email=email, name=name or email.split("@")[0])
    session.add(user)
    await session.commit()
    return user


async def make_workspace(session: AsyncSession, owner: UserModel, slug: str) -> WorkspaceModel:
    workspace = WorkspaceModel(id=uuid.uuid4(), name=slug.title(), slug=slug, owner_id=owner.id)
    session.add(workspace)
    await session.commit()
    return workspace


async def add_member(
    session: AsyncSession,
    workspace: WorkspaceModel,
    user: UserModel,
    role: WorkspaceRole = WorkspaceRole.DEVELOPER,
) -> WorkspaceMemberModel:
    member = WorkspaceMemberModel(
        id=uuid.uuid4(), workspace_id=workspace.id, user_id=user.id, role=role
    )
    session.add(member)
    await session.commit()
    return member


async def make_project(
    session: AsyncSession, workspace: WorkspaceModel, key: str = "CORE"
) -> ProjectModel:
    project = ProjectModel(
        id=uuid.uuid4(),
        name=f"Project {key}",
        key=key,
        workspace_id=workspace.id,
        issue_counter=0,
    )
    session.add(project)
    await session.commit()
    return project


async def make_issue(
    session: AsyncSession,
    project: ProjectModel,
    reporter: UserModel,
    status: IssueStatus = IssueStatus.TODO,
    order: float = 1.0,
    assignee: Optional[UserModel] = None,
    parent: Optional[IssueModel] = None,
    title: Optional[str] = None,
) -> IssueModel:
    await session.refresh(project)
    project.issue_counter += 1
    number = project.issue_counter
    issue = IssueModel(
        id=uuid.uuid4(),
        key=f"{project.key}-{number}",
        number=number,
        title=title or f"Задача {number}",
        status=status,
        priority=IssuePriority.MEDIUM,
        type=IssueType.TASK,
        order=order,
        project_id=project.id,
        reporter_id=reporter.id,
        assignee_id=assignee.id if assignee else None,
        parent_id=parent.id if parent else None,
    )
    session.add(issue)
    await session.commit()
    return issue


async def make_invitation(
    session: AsyncSession,
    workspace: WorkspaceModel,
    invited_by: UserModel,
    email: str,
    role: WorkspaceRole = WorkspaceRole.DEVELOPER,
    expires_in: timedelta = timedelta(days=7),
    status: InvitationStatus = InvitationStatus.PENDING,
) -> InvitationModel:
    invitation = InvitationModel(
        id=uuid.uuid4(),
        token=uuid.uuid4().hex,
        email=email,
        role=role,
        workspace_id=workspace.id,
        invited_by_id=invited_by.id,
        status=status,
        expires_at=datetime.now(timezone.utc) + expires_in,
    )
    session.add(invitation)
    await session.commit()
    return invitation


# ==================== SCENARIO FIXTURES ====================


@pytest_asyncio.fixture
async def owner(db_session):
    return await make_user(db_session, "owner@tracker.dev", "Owner")


@pytest_asyncio.fixture
async def developer(db_session):
    return await make_user(db_session, "dev@tracker.dev", "Developer")


@pytest_asyncio.fixture
async def admin(db_session):
    return await make_user(db_session, "admin@tracker.dev", "Admin")


@pytest_asyncio.fixture
async def guest(db_session):
    return await make_user(db_session, "guest@tracker.dev", "Guest")


@pytest_asyncio.fixture
async def outsider(db_session):
    return await make_user(db_session, "outsider@elsewhere.dev", "Outsider")


@pytest_asyncio.fixture
async def workspace(db_session, owner, developer, admin, guest):
    workspace = await make_workspace(db_session, owner, "marketing-team")
    await add_member(db_session, workspace, developer, WorkspaceRole.DEVELOPER)
    await add_member(db_session, workspace, admin, WorkspaceRole.ADMIN)
    await add_member(db_session, workspace, guest, WorkspaceRole.GUEST)
    return workspace


@pytest_asyncio.fixture
async def project(db_session, workspace):
    return await make_project(db_session, workspace, "CORE")


@pytest_asyncio.fixture
async def foreign_project(db_session, outsider):
    foreign = await make_workspace(db_session, outsider, "other-team")
    return await make_project(db_session, foreign, "OTH")


# ==================== QUERIES ====================


async def activities_of(session: AsyncSession, issue_id) -> list:
    from sqlalchemy import select

    from src.models.v1 import ActivityModel

    result = await session.execute(
        select(ActivityModel).where(ActivityModel.issue_id == issue_id)
    )
    return list(result.scalars().all())


async def notifications_for(session: AsyncSession, user_id) -> list:
    from sqlalchemy import select

    from src.models.v1 import NotificationModel

    result = await session.execute(
        select(NotificationModel).where(NotificationModel.user_id == user_id)
    )
    return list(result.scalars().all())
