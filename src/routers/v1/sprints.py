"""
Роутеры спринтов, меток и связей задач.

Endpoints:
    POST   /sprints                  - Создать спринт
    PATCH  /sprints/{sprint_id}      - Изменить спринт
    DELETE /sprints/{sprint_id}      - Удалить спринт
    DELETE /labels/{label_id}        - Удалить метку
    POST   /issue-links              - Связать задачи
    DELETE /issue-links/{link_id}    - Удалить связь

Списки спринтов и меток проекта: /projects/{project_id}/sprints|labels,
связи и метки задачи: /issues/{issue_id}/links|labels.
"""

from uuid import UUID

from fastapi import status

from src.core.dependencies import (IssueLinkServiceDep, LabelServiceDep,
                                   SprintServiceDep)
from src.core.result import unwrap
from src.core.security import CurrentUserDep
from src.routers.base import ProtectedRouter
from src.schemas.v1.issue_links import (IssueLinkCreateRequestSchema,
                                        IssueLinkDetailSchema,
                                        IssueLinkResponseSchema)
from src.schemas.v1.issues import DeleteResponseSchema, DeleteResultSchema
from src.schemas.v1.sprints import (SprintCreateRequestSchema,
                                    SprintDetailSchema, SprintResponseSchema,
                                    SprintUpdateRequestSchema)


class SprintProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="sprints", tags=["Sprints"])

    def configure(self):
        @self.router.post(
            path="",
            response_model=SprintResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Создать спринт

            ### Ошибки:
            * **409**: Спринт с таким именем уже есть в проекте
            """,
        )
        async def create_sprint(
            data: SprintCreateRequestSchema,
            current_user: CurrentUserDep,
            service: SprintServiceDep,
        ) -> SprintResponseSchema:
            sprint = unwrap(await service.create_sprint(current_user, data))
            return SprintResponseSchema(
                message=f"Спринт {sprint.name} создан",
                data=SprintDetailSchema.model_validate(sprint),
            )

        @self.router.patch(path="/{sprint_id}", response_model=SprintResponseSchema)
        async def update_sprint(
            sprint_id: UUID,
            data: SprintUpdateRequestSchema,
            current_user: CurrentUserDep,
            service: SprintServiceDep,
        ) -> SprintResponseSchema:
            sprint = unwrap(await service.update_sprint(current_user, sprint_id, data))
            return SprintResponseSchema(
                message="Спринт обновлён",
                data=SprintDetailSchema.model_validate(sprint),
            )

        @self.router.delete(path="/{sprint_id}", response_model=DeleteResponseSchema)
        async def delete_sprint(
            sprint_id: UUID,
            current_user: CurrentUserDep,
            service: SprintServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(await service.delete_sprint(current_user, sprint_id))
            return DeleteResponseSchema(
                message="Спринт удалён", data=DeleteResultSchema(id=deleted_id)
            )


class LabelProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="labels", tags=["Labels"])

    def configure(self):
        @self.router.delete(path="/{label_id}", response_model=DeleteResponseSchema)
        async def delete_label(
            label_id: UUID,
            current_user: CurrentUserDep,
            service: LabelServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(await service.delete_label(current_user, label_id))
            return DeleteResponseSchema(
                message="Метка удалена", data=DeleteResultSchema(id=deleted_id)
            )


class IssueLinkProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="issue-links", tags=["Issue Links"])

    def configure(self):
        @self.router.post(
            path="",
            response_model=IssueLinkResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Связать задачи

            ### Ошибки:
            * **404**: Одна из задач не найдена
            * **409**: Такая связь уже есть
            * **422**: Связь задачи с собой
            """,
        )
        async def create_issue_link(
            data: IssueLinkCreateRequestSchema,
            current_user: CurrentUserDep,
            service: IssueLinkServiceDep,
        ) -> IssueLinkResponseSchema:
            link = unwrap(await service.create_issue_link(current_user, data))
            return IssueLinkResponseSchema(
                message="Связь создана",
                data=IssueLinkDetailSchema.model_validate(link),
            )

        @self.router.delete(path="/{link_id}", response_model=DeleteResponseSchema)
        async def delete_issue_link(
            link_id: UUID,
            current_user: CurrentUserDep,
            service: IssueLinkServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(await service.delete_issue_link(current_user, link_id))
            return DeleteResponseSchema(
                message="Связь удалена", data=DeleteResultSchema(id=deleted_id)
            )
