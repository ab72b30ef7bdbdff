"""
Repository для работы с Workspace и WorkspaceMember.

Модуль предоставляет репозитории для работы с workspace и их участниками:
- WorkspaceRepository: CRUD операции для workspace
- WorkspaceMemberRepository: Участники workspace и их роли

Используется BaseRepository для стандартных CRUD операций.
"""

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import and_, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.v1.users import UserModel
from src.models.v1.workspaces import WorkspaceMemberModel, WorkspaceModel
from src.repository.base import BaseRepository


class WorkspaceRepository(BaseRepository[WorkspaceModel]):
    """
    Репозиторий для работы с Workspace.

    Example:
        >>> repo = WorkspaceRepository(session)
        >>> workspace = await repo.get_by_slug("marketing-team")
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=WorkspaceModel)

    async def get_by_slug(self, slug: str) -> Optional[WorkspaceModel]:
        return await self.get_item_by_field("slug", slug)

    async def slug_exists(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        filters = {"slug": slug}
        if exclude_id:
            filters["id__ne"] = exclude_id
        return await self.exists(**filters)

    async def list_for_user(self, user_id: UUID) -> List[WorkspaceModel]:
        """
        Workspace, где пользователь владелец или участник, по имени.
        """
        try:
            member_of = select(WorkspaceMemberModel.workspace_id).where(
                WorkspaceMemberModel.user_id == user_id
            )
            statement = (
                select(WorkspaceModel)
                .where(
                    or_(
                        WorkspaceModel.owner_id == user_id,
                        WorkspaceModel.id.in_(member_of),
                    )
                )
                .order_by(WorkspaceModel.name)
            )
            result = await self.session.execute(statement)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(
                "Ошибка получения workspace пользователя %s: %s", user_id, e
            )
            raise


class WorkspaceMemberRepository(BaseRepository[WorkspaceMemberModel]):
    """
    Репозиторий участников workspace.

    Methods:
        get_member: Участие пользователя в workspace
        get_memberships: Участия пользователя в нескольких workspace одним запросом
        is_member_email: Есть ли участник с таким email
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session=session, model=WorkspaceMemberModel)

    async def get_member(
        self, workspace_id: UUID, user_id: UUID
    ) -> Optional[WorkspaceMemberModel]:
        """
        Получить участие пользователя в workspace.

        Returns:
            Optional[WorkspaceMemberModel]: Запись участника или None
        """
        try:
            statement = select(WorkspaceMemberModel).where(
                and_(
                    WorkspaceMemberModel.workspace_id == workspace_id,
                    WorkspaceMemberModel.user_id == user_id,
                )
            )
            result = await self.session.execute(statement)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(
                "Ошибка получения участника workspace %s: %s", workspace_id, e
            )
            raise

    async def get_memberships(
        self, user_id: UUID, workspace_ids: Iterable[UUID]
    ) -> List[WorkspaceMemberModel]:
        """
        Участия пользователя в наборе workspace одним запросом.

        Используется массовыми операциями, где задачи могут принадлежать
        разным workspace.
        """
        ids = list(workspace_ids)
        if not ids:
            return []
        return await self.filter_by(user_id=user_id, workspace_id__in=ids)

    async def is_member_email(self, workspace_id: UUID, email: str) -> bool:
        """
        Проверить, состоит ли в workspace пользователь с этим email.

        Email сравнивается без учёта регистра.
        """
        try:
            statement = (
                select(func.count())
                .select_from(WorkspaceMemberModel)
                .join(UserModel, UserModel.id == WorkspaceMemberModel.user_id)
                .where(
                    and_(
                        WorkspaceMemberModel.workspace_id == workspace_id,
                        func.lower(UserModel.email) == email.lower(),
                    )
                )
            )
            result = await self.session.execute(statement)
            return (result.scalar() or 0) > 0
        except SQLAlchemyError as e:
            self.logger.error(
                "Ошибка проверки участника %s в workspace %s: %s",
                email,
                workspace_id,
                e,
            )
            raise

    async def list_members(self, workspace_id: UUID) -> List[WorkspaceMemberModel]:
        return await self.filter_by(
            order_by=[WorkspaceMemberModel.created_at], workspace_id=workspace_id
        )
