"""
Сервис задач и подзадач.

Каждая команда: пользователь -> входные данные -> доступ к workspace ->
запись в хранилище -> побочные эффекты (журнал, уведомления, сброс кэша
представлений) через SideEffectChannel. Результат команды от побочных
эффектов не зависит.

Вложенность задач не глубже одного уровня: родитель подзадачи сам не
может иметь родителя. Проверка выполняется при записи в
validate_parent_reference.
"""

from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (InvalidLabelsError, IssueNotFoundError,
                                 ParentIssueNotFoundError,
                                 ParentProjectMismatchError,
                                 ProjectNotFoundError, SubtaskNestingError)
from src.core.integrations.cache import (LoggingViewCacheInvalidator,
                                         ViewCacheInvalidator,
                                         enqueue_view_invalidation)
from src.core.messaging import SideEffectChannel
from src.models.v1.activities import ActivityAction
from src.models.v1.issues import IssueModel, IssueStatus
from src.models.v1.projects import ProjectModel
from src.models.v1.workspaces import WorkspaceModel
from src.repository.v1.issues import IssueContext, IssueRepository
from src.repository.v1.labels import LabelRepository
from src.repository.v1.projects import ProjectRepository
from src.schemas.v1.issues import (IssueCreateRequestSchema,
                                   IssueMoveRequestSchema,
                                   IssueUpdateRequestSchema,
                                   SubtaskCreateRequestSchema,
                                   SubtaskStatusRequestSchema)
from src.schemas.v1.users import UserCurrentSchema
from src.services.base import BaseService, command
from src.services.v1.access import AccessService
from src.services.v1.activities import (ActivityService, IssueSnapshot,
                                        field_change)
from src.services.v1.notifications import IssueReference, NotificationService
from src.services.v1.ordering import compute_insertion_order

ORDER_STEP = 1.0


def validate_parent_reference(parent: IssueModel, project_id: UUID) -> IssueModel:
    """
    Проверяет, что задача может быть родителем в проекте project_id.

    Raises:
        ParentProjectMismatchError: Родитель из другого проекта.
        SubtaskNestingError: У родителя уже есть родитель.
    """
    if parent.project_id != project_id:
        raise ParentProjectMismatchError(parent.id)
    if parent.parent_id is not None:
        raise SubtaskNestingError(parent.id)
    return parent


def next_order(max_order: Optional[float]) -> float:
    """Позиция в конце колонки."""
    return (max_order or 0.0) + ORDER_STEP


class IssueService(BaseService):
    """
    Сервис задач.

    Attributes:
        issue_repository: Задачи.
        project_repository: Проекты и счётчик номеров задач.
        label_repository: Метки проекта и метки задач.
        access: Проверка прав в workspace.
        activities: Журнал активности.
        notifications: Рассылка уведомлений.
        view_cache: Сброс кэша представлений проектов.

    Example:
        >>> result = await service.update_issue(
        ...     user, issue_id, {"status": "DONE", "assignee_id": str(u2)}
        ... )
        >>> issue = unwrap(result)
    """

    def __init__(
        self,
        session: AsyncSession,
        view_cache: Optional[ViewCacheInvalidator] = None,
    ):
        super().__init__(session)
        self.issue_repository = IssueRepository(session)
        self.project_repository = ProjectRepository(session)
        self.label_repository = LabelRepository(session)
        self.access = AccessService(session)
        self.activities = ActivityService(session)
        self.notifications = NotificationService(session)
        self.view_cache = view_cache or LoggingViewCacheInvalidator()

    # ==================== HELPERS ====================

    async def _get_context(self, issue_id: UUID) -> IssueContext:
        context = await self.issue_repository.get_context(issue_id)
        if context is None:
            raise IssueNotFoundError(issue_id)
        return context

    async def _get_project(
        self, project_id: UUID
    ) -> Tuple[ProjectModel, WorkspaceModel]:
        found = await self.project_repository.get_with_workspace(project_id)
        if found is None:
            raise ProjectNotFoundError(project_id)
        return found

    async def _get_parent(self, parent_id: UUID, project_id: UUID) -> IssueModel:
        parent = await self.issue_repository.get_item_by_id(parent_id)
        if parent is None:
            raise ParentIssueNotFoundError(parent_id)
        return validate_parent_reference(parent, project_id)

    async def _check_labels(self, project_id: UUID, label_ids: List[UUID]) -> None:
        missing = await self.label_repository.missing_in_project(project_id, label_ids)
        if missing:
            raise InvalidLabelsError(missing)

    async def _insert_issue(
        self,
        project: ProjectModel,
        reporter_id: UUID,
        status: IssueStatus,
        fields: Dict[str, Any],
        parent_id: Optional[UUID] = None,
        among_siblings: bool = False,
        label_ids: Optional[List[UUID]] = None,
    ) -> IssueModel:
        """
        Вставляет задачу последней: в колонке (project_id, status) или,
        при among_siblings, среди подзадач родителя. Метки записываются
        в той же транзакции.
        """
        # Номер резервируется в той же транзакции, что и вставка
        number = await self.project_repository.reserve_issue_number(project.id)
        max_order = await self.issue_repository.get_max_order(
            project.id, status, parent_id=parent_id if among_siblings else None
        )
        issue = await self.issue_repository.create_item(
            {
                **fields,
                "key": f"{project.key}-{number}",
                "number": number,
                "status": status,
                "order": next_order(max_order),
                "project_id": project.id,
                "reporter_id": reporter_id,
                "parent_id": parent_id,
            },
            commit=not label_ids,
        )
        if label_ids:
            await self.label_repository.replace_issue_labels(issue.id, label_ids)
            await self.session.commit()
            await self.session.refresh(issue)
        return issue

    async def _after_create(self, context: IssueContext, actor_id: UUID) -> None:
        channel = self.side_channel()
        issue = context.issue
        self.activities.enqueue_activity(
            channel, ActivityAction.CREATED, issue.id, actor_id
        )
        if issue.assignee_id is not None:
            self.notifications.notify_assigned(
                channel, IssueReference.from_context(context), issue.assignee_id, actor_id
            )
        enqueue_view_invalidation(channel, self.view_cache, [context.view_path])
        await channel.dispatch()

    def _enqueue_status_change(
        self,
        channel: SideEffectChannel,
        context: IssueContext,
        previous: IssueStatus,
        actor_id: UUID,
    ) -> None:
        issue = context.issue
        self.activities.enqueue_activity(
            channel,
            ActivityAction.STATUS_CHANGED,
            issue.id,
            actor_id,
            field_change("status", previous, issue.status),
        )
        if issue.status is IssueStatus.DONE:
            self.notifications.notify_completed(
                channel, IssueReference.from_context(context), issue.reporter_id, actor_id
            )

    # ==================== CREATE ====================

    @command("issue.create")
    async def create_issue(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[IssueCreateRequestSchema, Dict[str, Any]],
    ) -> IssueModel:
        """
        Создаёт задачу в BACKLOG последней в колонке.

        Raises:
            ProjectNotFoundError: Проект не найден.
            WorkspaceAccessDeniedError: Нет доступа к workspace проекта.
            ParentIssueNotFoundError, ParentProjectMismatchError,
            SubtaskNestingError: Некорректный parent_id.
            InvalidLabelsError: Метки не из проекта задачи.
        """
        user = self._require_user(user)
        request = self._validate(IssueCreateRequestSchema, data)
        project, workspace = await self._get_project(request.project_id)
        await self.access.require_access(user.id, workspace)
        if request.parent_id is not None:
            await self._get_parent(request.parent_id, project.id)
        if request.label_ids:
            await self._check_labels(project.id, request.label_ids)

        issue = await self._insert_issue(
            project,
            user.id,
            IssueStatus.BACKLOG,
            request.model_dump(exclude={"project_id", "parent_id", "label_ids"}),
            parent_id=request.parent_id,
            label_ids=request.label_ids,
        )
        self.logger.info("Создана задача %s", issue.key, extra={"issue_id": str(issue.id)})
        await self._after_create(IssueContext(issue, project, workspace), user.id)
        return issue

    @command("subtask.create")
    async def create_subtask(
        self,
        user: Optional[UserCurrentSchema],
        data: Union[SubtaskCreateRequestSchema, Dict[str, Any]],
    ) -> IssueModel:
        """
        Создаёт подзадачу в TODO последней среди подзадач родителя.

        Raises:
            ParentIssueNotFoundError: Родитель не найден.
            SubtaskNestingError: Родитель сам является подзадачей.
        """
        user = self._require_user(user)
        request = self._validate(SubtaskCreateRequestSchema, data)
        parent_context = await self.issue_repository.get_context(request.parent_id)
        if parent_context is None:
            raise ParentIssueNotFoundError(request.parent_id)
        await self.access.require_access(user.id, parent_context.workspace)
        parent = validate_parent_reference(
            parent_context.issue, parent_context.project.id
        )

        issue = await self._insert_issue(
            parent_context.project,
            user.id,
            IssueStatus.TODO,
            request.model_dump(exclude={"parent_id"}),
            parent_id=parent.id,
            among_siblings=True,
        )
        self.logger.info("Создана подзадача %s для %s", issue.key, parent.key)
        await self._after_create(
            IssueContext(issue, parent_context.project, parent_context.workspace),
            user.id,
        )
        return issue

    # ==================== READ ====================

    @command("issue.get")
    async def get_issue(
        self, user: Optional[UserCurrentSchema], issue_id: UUID
    ) -> IssueModel:
        user = self._require_user(user)
        context = await self._get_context(issue_id)
        await self.access.require_access(user.id, context.workspace)
        return context.issue

    @command("issue.list_column")
    async def list_column(
        self, user: Optional[UserCurrentSchema], project_id: UUID, status: IssueStatus
    ) -> List[IssueModel]:
        user = self._require_user(user)
        _, workspace = await self._get_project(project_id)
        await self.access.require_access(user.id, workspace)
        return await self.issue_repository.get_column(project_id, status)

    @command("subtask.list")
    async def list_subtasks(
        self, user: Optional[UserCurrentSchema], parent_id: UUID
    ) -> List[IssueModel]:
        user = self._require_user(user)
        context = await self._get_context(parent_id)
        await self.access.require_access(user.id, context.workspace)
        return await self.issue_repository.list_subtasks(parent_id)

    # ==================== UPDATE ====================

    @command("issue.update")
    async def update_issue(
        self,
        user: Optional[UserCurrentSchema],
        issue_id: UUID,
        data: Union[IssueUpdateRequestSchema, Dict[str, Any]],
    ) -> IssueModel:
        """
        Частично обновляет задачу.

        Журнал получает по записи на категорию изменения. Переход в DONE
        уведомляет автора задачи, смена исполнителя уведомляет нового
        исполнителя.
        """
        user = self._require_user(user)
        request = self._validate(IssueUpdateRequestSchema, data)
        context = await self._get_context(issue_id)
        await self.access.require_access(user.id, context.workspace)

        patch = request.model_dump(exclude_unset=True)
        label_ids = patch.pop("label_ids", None)
        if not patch and label_ids is None:
            return context.issue
        if label_ids:
            await self._check_labels(context.project.id, label_ids)

        before = IssueSnapshot.from_model(context.issue)
        if label_ids is not None:
            await self.label_repository.replace_issue_labels(
                context.issue.id, label_ids
            )
        issue = await self.issue_repository.update_item(context.issue, patch)
        after = IssueSnapshot.from_model(issue)

        channel = self.side_channel()
        self.activities.enqueue_diff(channel, before, after, issue.id, user.id)
        reference = IssueReference.from_context(context)
        if before.status is not IssueStatus.DONE and after.status is IssueStatus.DONE:
            self.notifications.notify_completed(
                channel, reference, issue.reporter_id, user.id
            )
        if after.assignee_id is not None and after.assignee_id != before.assignee_id:
            self.notifications.notify_assigned(
                channel, reference, after.assignee_id, user.id
            )
        enqueue_view_invalidation(channel, self.view_cache, [context.view_path])
        await channel.dispatch()
        return issue

    @command("issue.move")
    async def move_issue(
        self,
        user: Optional[UserCurrentSchema],
        issue_id: UUID,
        data: Union[IssueMoveRequestSchema, Dict[str, Any]],
    ) -> IssueModel:
        """
        Перемещает задачу на доске: колонка и позиция.

        При destination_index позиция считается между соседями в целевой
        колонке (без учёта самой задачи). Конкурирующие перемещения одной
        задачи разрешаются последней записью.
        """
        user = self._require_user(user)
        request = self._validate(IssueMoveRequestSchema, data)
        context = await self._get_context(issue_id)
        await self.access.require_access(user.id, context.workspace)
        issue = context.issue

        if request.order is not None:
            order = request.order
        else:
            column = await self.issue_repository.get_column(
                issue.project_id, request.status, exclude_id=issue.id
            )
            order = compute_insertion_order(
                [item.order for item in column], request.destination_index
            )

        previous_status = issue.status
        issue = await self.issue_repository.update_item(
            issue, {"status": request.status, "order": order}
        )

        channel = self.side_channel()
        if previous_status is not issue.status:
            self._enqueue_status_change(channel, context, previous_status, user.id)
        enqueue_view_invalidation(channel, self.view_cache, [context.view_path])
        await channel.dispatch()
        return issue

    @command("subtask.update_status")
    async def update_subtask_status(
        self,
        user: Optional[UserCurrentSchema],
        subtask_id: UUID,
        data: Union[SubtaskStatusRequestSchema, Dict[str, Any]],
    ) -> IssueModel:
        user = self._require_user(user)
        request = self._validate(SubtaskStatusRequestSchema, data)
        context = await self._get_context(subtask_id)
        if not context.issue.is_subtask:
            raise IssueNotFoundError(subtask_id)
        await self.access.require_access(user.id, context.workspace)

        previous_status = context.issue.status
        if previous_status is request.status:
            return context.issue
        issue = await self.issue_repository.update_item(
            context.issue, {"status": request.status}
        )

        channel = self.side_channel()
        self.activities.enqueue_activity(
            channel,
            ActivityAction.STATUS_CHANGED,
            issue.id,
            user.id,
            field_change("status", previous_status, issue.status),
        )
        enqueue_view_invalidation(channel, self.view_cache, [context.view_path])
        await channel.dispatch()
        return issue

    # ==================== DELETE ====================

    @command("issue.delete")
    async def delete_issue(
        self, user: Optional[UserCurrentSchema], issue_id: UUID
    ) -> UUID:
        """Удаляет задачу; журнал и подзадачи удаляются каскадно."""
        user = self._require_user(user)
        context = await self._get_context(issue_id)
        await self.access.require_access(user.id, context.workspace)

        await self.issue_repository.delete_item(context.issue)
        self.logger.info("Удалена задача %s", context.issue.key)

        channel = self.side_channel()
        enqueue_view_invalidation(channel, self.view_cache, [context.view_path])
        await channel.dispatch()
        return issue_id
