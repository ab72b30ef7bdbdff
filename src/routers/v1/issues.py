"""
Роутеры задач.

IssueProtectedRouter:
    POST   /issues                       - Создать задачу
    GET    /issues/{issue_id}            - Получить задачу
    PATCH  /issues/{issue_id}            - Частично обновить задачу
    PATCH  /issues/{issue_id}/move       - Переместить на доске
    DELETE /issues/{issue_id}            - Удалить задачу
    GET    /issues/{issue_id}/activity   - Журнал активности
    GET    /issues/{issue_id}/subtasks   - Подзадачи
    GET    /issues/{issue_id}/links      - Исходящие и входящие связи
    GET    /issues/{issue_id}/labels     - Метки задачи
    POST   /issues/subtasks              - Создать подзадачу
    PATCH  /issues/subtasks/{id}/status  - Статус подзадачи

IssueBulkRouter:
    POST /issues/bulk/status | assign | priority | delete

Сервисы возвращают Result; unwrap() превращает Err в OperationFailed,
который глобальный обработчик отображает в HTTP статус.
"""

from uuid import UUID

from fastapi import status

from src.core.dependencies import (ActivityServiceDep, BulkIssueServiceDep,
                                   IssueLinkServiceDep, IssueServiceDep,
                                   LabelServiceDep)
from src.core.result import unwrap
from src.core.security import CurrentUserDep
from src.routers.base import ProtectedRouter
from src.schemas.v1.activities import (ActivityDetailSchema,
                                       ActivityListResponseSchema)
from src.schemas.v1.issues import (BulkAssignRequestSchema,
                                   BulkDeleteRequestSchema,
                                   BulkPriorityRequestSchema,
                                   BulkResponseSchema, BulkStatusRequestSchema,
                                   DeleteResponseSchema, DeleteResultSchema,
                                   IssueCreateRequestSchema, IssueDetailSchema,
                                   IssueListResponseSchema,
                                   IssueMoveRequestSchema, IssueResponseSchema,
                                   IssueUpdateRequestSchema,
                                   SubtaskCreateRequestSchema,
                                   SubtaskStatusRequestSchema)
from src.schemas.v1.issue_links import (IssueLinkDetailSchema,
                                        IssueLinksResponseSchema,
                                        IssueLinksSchema)
from src.schemas.v1.labels import LabelDetailSchema, LabelListResponseSchema


class IssueProtectedRouter(ProtectedRouter):
    """
    Защищённый роутер задач и подзадач.

    Проверка прав (участник workspace проекта) выполняется в IssueService.
    """

    def __init__(self):
        super().__init__(prefix="issues", tags=["Issues"])

    def configure(self):
        """Настройка endpoint'ов роутера."""

        # ==================== CREATE ====================

        @self.router.post(
            path="",
            response_model=IssueResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Создать задачу

            Задача создаётся в BACKLOG последней в колонке. Ключ формируется
            из ключа проекта и счётчика: `CORE-12`.

            ### Ошибки:
            * **403**: Пользователь не участник workspace проекта
            * **404**: Проект или родительская задача не найдены
            * **422**: Некорректные данные или родитель сам является подзадачей
            """,
        )
        async def create_issue(
            data: IssueCreateRequestSchema,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
        ) -> IssueResponseSchema:
            issue = unwrap(await service.create_issue(current_user, data))
            return IssueResponseSchema(
                message=f"Задача {issue.key} создана",
                data=IssueDetailSchema.model_validate(issue),
            )

        @self.router.post(
            path="/subtasks",
            response_model=IssueResponseSchema,
            status_code=status.HTTP_201_CREATED,
        )
        async def create_subtask(
            data: SubtaskCreateRequestSchema,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
        ) -> IssueResponseSchema:
            issue = unwrap(await service.create_subtask(current_user, data))
            return IssueResponseSchema(
                message=f"Подзадача {issue.key} создана",
                data=IssueDetailSchema.model_validate(issue),
            )

        # ==================== READ ====================

        @self.router.get(path="/{issue_id}", response_model=IssueResponseSchema)
        async def get_issue(
            issue_id: UUID,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
        ) -> IssueResponseSchema:
            issue = unwrap(await service.get_issue(current_user, issue_id))
            return IssueResponseSchema(data=IssueDetailSchema.model_validate(issue))

        @self.router.get(
            path="/{issue_id}/subtasks", response_model=IssueListResponseSchema
        )
        async def list_subtasks(
            issue_id: UUID,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
        ) -> IssueListResponseSchema:
            subtasks = unwrap(await service.list_subtasks(current_user, issue_id))
            return IssueListResponseSchema(
                data=[IssueDetailSchema.model_validate(item) for item in subtasks]
            )

        @self.router.get(
            path="/{issue_id}/activity", response_model=ActivityListResponseSchema
        )
        async def list_activities(
            issue_id: UUID,
            current_user: CurrentUserDep,
            service: ActivityServiceDep,
        ) -> ActivityListResponseSchema:
            activities = unwrap(await service.list_activities(current_user, issue_id))
            return ActivityListResponseSchema(
                data=[ActivityDetailSchema.model_validate(item) for item in activities]
            )

        @self.router.get(
            path="/{issue_id}/links", response_model=IssueLinksResponseSchema
        )
        async def list_issue_links(
            issue_id: UUID,
            current_user: CurrentUserDep,
            service: IssueLinkServiceDep,
        ) -> IssueLinksResponseSchema:
            links = unwrap(await service.list_issue_links(current_user, issue_id))
            return IssueLinksResponseSchema(
                data=IssueLinksSchema(
                    links_from=[
                        IssueLinkDetailSchema.model_validate(item)
                        for item in links.links_from
                    ],
                    links_to=[
                        IssueLinkDetailSchema.model_validate(item)
                        for item in links.links_to
                    ],
                )
            )

        @self.router.get(
            path="/{issue_id}/labels", response_model=LabelListResponseSchema
        )
        async def list_issue_labels(
            issue_id: UUID,
            current_user: CurrentUserDep,
            service: LabelServiceDep,
        ) -> LabelListResponseSchema:
            labels = unwrap(await service.list_issue_labels(current_user, issue_id))
            return LabelListResponseSchema(
                data=[LabelDetailSchema.model_validate(item) for item in labels]
            )

        # ==================== UPDATE ====================

        @self.router.patch(
            path="/{issue_id}",
            response_model=IssueResponseSchema,
            description="""
            ## Обновить задачу

            Передаются только изменяемые поля. В журнал пишется не больше
            одной записи на категорию изменения (статус, исполнитель,
            приоритет, остальные поля).
            """,
        )
        async def update_issue(
            issue_id: UUID,
            data: IssueUpdateRequestSchema,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
        ) -> IssueResponseSchema:
            issue = unwrap(await service.update_issue(current_user, issue_id, data))
            return IssueResponseSchema(
                message="Задача обновлена",
                data=IssueDetailSchema.model_validate(issue),
            )

        @self.router.patch(
            path="/{issue_id}/move",
            response_model=IssueResponseSchema,
            description="""
            ## Переместить задачу на доске

            Укажите `status` и либо `order`, либо `destination_index`
            (позиция вычисляется между соседями в целевой колонке).
            """,
        )
        async def move_issue(
            issue_id: UUID,
            data: IssueMoveRequestSchema,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
        ) -> IssueResponseSchema:
            issue = unwrap(await service.move_issue(current_user, issue_id, data))
            return IssueResponseSchema(data=IssueDetailSchema.model_validate(issue))

        @self.router.patch(
            path="/subtasks/{subtask_id}/status", response_model=IssueResponseSchema
        )
        async def update_subtask_status(
            subtask_id: UUID,
            data: SubtaskStatusRequestSchema,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
        ) -> IssueResponseSchema:
            issue = unwrap(
                await service.update_subtask_status(current_user, subtask_id, data)
            )
            return IssueResponseSchema(data=IssueDetailSchema.model_validate(issue))

        # ==================== DELETE ====================

        @self.router.delete(path="/{issue_id}", response_model=DeleteResponseSchema)
        async def delete_issue(
            issue_id: UUID,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(await service.delete_issue(current_user, issue_id))
            return DeleteResponseSchema(
                message="Задача удалена", data=DeleteResultSchema(id=deleted_id)
            )


class IssueBulkRouter(ProtectedRouter):
    """
    Массовые операции над задачами.

    Доступ проверяется для всего набора: при отсутствии хотя бы одной
    задачи или доступа к ней не изменяется ни одна.
    """

    def __init__(self):
        super().__init__(prefix="issues/bulk", tags=["Issues: bulk"])

    def configure(self):
        @self.router.post(path="/status", response_model=BulkResponseSchema)
        async def bulk_update_status(
            data: BulkStatusRequestSchema,
            current_user: CurrentUserDep,
            service: BulkIssueServiceDep,
        ) -> BulkResponseSchema:
            result = unwrap(await service.bulk_update_status(current_user, data))
            return BulkResponseSchema(
                message=f"Обновлено задач: {result.count}", data=result
            )

        @self.router.post(path="/assign", response_model=BulkResponseSchema)
        async def bulk_assign(
            data: BulkAssignRequestSchema,
            current_user: CurrentUserDep,
            service: BulkIssueServiceDep,
        ) -> BulkResponseSchema:
            result = unwrap(await service.bulk_assign(current_user, data))
            return BulkResponseSchema(
                message=f"Обновлено задач: {result.count}", data=result
            )

        @self.router.post(path="/priority", response_model=BulkResponseSchema)
        async def bulk_update_priority(
            data: BulkPriorityRequestSchema,
            current_user: CurrentUserDep,
            service: BulkIssueServiceDep,
        ) -> BulkResponseSchema:
            result = unwrap(await service.bulk_update_priority(current_user, data))
            return BulkResponseSchema(
                message=f"Обновлено задач: {result.count}", data=result
            )

        @self.router.post(path="/delete", response_model=BulkResponseSchema)
        async def bulk_delete(
            data: BulkDeleteRequestSchema,
            current_user: CurrentUserDep,
            service: BulkIssueServiceDep,
        ) -> BulkResponseSchema:
            result = unwrap(await service.bulk_delete(current_user, data))
            return BulkResponseSchema(
                message=f"Удалено задач: {result.count}", data=result
            )
