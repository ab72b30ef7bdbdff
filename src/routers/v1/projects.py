"""
Роутеры проектов, их спринтов и меток, сохранённых фильтров.

Endpoints:
    POST   /projects                          - Создать проект
    GET    /projects?workspace_id=...         - Проекты workspace
    PATCH  /projects/{project_id}             - Изменить проект
    DELETE /projects/{project_id}             - Удалить (владелец, ADMIN)
    GET    /projects/{project_id}/board       - Колонка доски (?status=)
    GET    /projects/{project_id}/sprints     - Спринты проекта
    GET    /projects/{project_id}/labels      - Метки проекта
    POST   /projects/{project_id}/labels      - Создать метку
    GET    /projects/{project_id}/filters     - Фильтры пользователя
    GET    /projects/{project_id}/filters/default
    POST   /filters, PATCH|DELETE /filters/{filter_id}
"""

from uuid import UUID

from fastapi import Query, status

from src.core.dependencies import (IssueServiceDep, LabelServiceDep,
                                   ProjectServiceDep, SavedFilterServiceDep,
                                   SprintServiceDep)
from src.core.result import unwrap
from src.core.security import CurrentUserDep
from src.models.v1.issues import IssueStatus
from src.routers.base import ProtectedRouter
from src.schemas.v1.issues import (DeleteResponseSchema, DeleteResultSchema,
                                   IssueDetailSchema, IssueListResponseSchema)
from src.schemas.v1.labels import (LabelCreateRequestSchema,
                                  LabelDetailSchema, LabelListResponseSchema,
                                  LabelResponseSchema)
from src.schemas.v1.projects import (ProjectCreateRequestSchema,
                                     ProjectDetailSchema,
                                     ProjectListResponseSchema,
                                     ProjectResponseSchema,
                                     ProjectUpdateRequestSchema)
from src.schemas.v1.saved_filters import (OptionalSavedFilterResponseSchema,
                                          SavedFilterCreateRequestSchema,
                                          SavedFilterDetailSchema,
                                          SavedFilterListResponseSchema,
                                          SavedFilterResponseSchema,
                                          SavedFilterUpdateRequestSchema)
from src.schemas.v1.sprints import SprintDetailSchema, SprintListResponseSchema


class ProjectProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="projects", tags=["Projects"])

    def configure(self):
        # ==================== PROJECTS ====================

        @self.router.post(
            path="",
            response_model=ProjectResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Создать проект

            Ключ: 2-10 символов, заглавные латинские буквы и цифры,
            первой идёт буква. Уникален в пределах workspace.

            ### Ошибки:
            * **409**: Ключ уже занят
            """,
        )
        async def create_project(
            data: ProjectCreateRequestSchema,
            current_user: CurrentUserDep,
            service: ProjectServiceDep,
        ) -> ProjectResponseSchema:
            project = unwrap(await service.create_project(current_user, data))
            return ProjectResponseSchema(
                message=f"Проект {project.key} создан",
                data=ProjectDetailSchema.model_validate(project),
            )

        @self.router.get(path="", response_model=ProjectListResponseSchema)
        async def list_projects(
            current_user: CurrentUserDep,
            service: ProjectServiceDep,
            workspace_id: UUID = Query(description="UUID workspace"),
        ) -> ProjectListResponseSchema:
            projects = unwrap(await service.list_projects(current_user, workspace_id))
            return ProjectListResponseSchema(
                data=[ProjectDetailSchema.model_validate(item) for item in projects]
            )

        @self.router.patch(path="/{project_id}", response_model=ProjectResponseSchema)
        async def update_project(
            project_id: UUID,
            data: ProjectUpdateRequestSchema,
            current_user: CurrentUserDep,
            service: ProjectServiceDep,
        ) -> ProjectResponseSchema:
            project = unwrap(
                await service.update_project(current_user, project_id, data)
            )
            return ProjectResponseSchema(
                message="Проект обновлён",
                data=ProjectDetailSchema.model_validate(project),
            )

        @self.router.delete(path="/{project_id}", response_model=DeleteResponseSchema)
        async def delete_project(
            project_id: UUID,
            current_user: CurrentUserDep,
            service: ProjectServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(await service.delete_project(current_user, project_id))
            return DeleteResponseSchema(
                message="Проект удалён", data=DeleteResultSchema(id=deleted_id)
            )

        # ==================== BOARD ====================

        @self.router.get(
            path="/{project_id}/board", response_model=IssueListResponseSchema
        )
        async def list_column(
            project_id: UUID,
            current_user: CurrentUserDep,
            service: IssueServiceDep,
            status: IssueStatus = Query(description="Колонка доски"),
        ) -> IssueListResponseSchema:
            issues = unwrap(await service.list_column(current_user, project_id, status))
            return IssueListResponseSchema(
                data=[IssueDetailSchema.model_validate(item) for item in issues]
            )

        # ==================== SPRINTS ====================

        @self.router.get(
            path="/{project_id}/sprints", response_model=SprintListResponseSchema
        )
        async def list_sprints(
            project_id: UUID,
            current_user: CurrentUserDep,
            service: SprintServiceDep,
        ) -> SprintListResponseSchema:
            sprints = unwrap(await service.list_sprints(current_user, project_id))
            return SprintListResponseSchema(
                data=[SprintDetailSchema.model_validate(item) for item in sprints]
            )

        # ==================== LABELS ====================

        @self.router.get(
            path="/{project_id}/labels", response_model=LabelListResponseSchema
        )
        async def list_labels(
            project_id: UUID,
            current_user: CurrentUserDep,
            service: LabelServiceDep,
        ) -> LabelListResponseSchema:
            labels = unwrap(await service.list_labels(current_user, project_id))
            return LabelListResponseSchema(
                data=[LabelDetailSchema.model_validate(item) for item in labels]
            )

        @self.router.post(
            path="/{project_id}/labels",
            response_model=LabelResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Создать метку проекта

            ### Ошибки:
            * **409**: Метка с таким именем уже есть
            """,
        )
        async def create_label(
            project_id: UUID,
            data: LabelCreateRequestSchema,
            current_user: CurrentUserDep,
            service: LabelServiceDep,
        ) -> LabelResponseSchema:
            label = unwrap(await service.create_label(current_user, project_id, data))
            return LabelResponseSchema(
                message=f"Метка {label.name} создана",
                data=LabelDetailSchema.model_validate(label),
            )

        # ==================== SAVED FILTERS ====================

        @self.router.get(
            path="/{project_id}/filters", response_model=SavedFilterListResponseSchema
        )
        async def list_saved_filters(
            project_id: UUID,
            current_user: CurrentUserDep,
            service: SavedFilterServiceDep,
        ) -> SavedFilterListResponseSchema:
            filters = unwrap(await service.list_saved_filters(current_user, project_id))
            return SavedFilterListResponseSchema(
                data=[SavedFilterDetailSchema.model_validate(item) for item in filters]
            )

        @self.router.get(
            path="/{project_id}/filters/default",
            response_model=OptionalSavedFilterResponseSchema,
        )
        async def get_default_filter(
            project_id: UUID,
            current_user: CurrentUserDep,
            service: SavedFilterServiceDep,
        ) -> OptionalSavedFilterResponseSchema:
            saved_filter = unwrap(
                await service.get_default_filter(current_user, project_id)
            )
            return OptionalSavedFilterResponseSchema(
                data=(
                    SavedFilterDetailSchema.model_validate(saved_filter)
                    if saved_filter
                    else None
                )
            )


class SavedFilterProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="filters", tags=["Saved Filters"])

    def configure(self):
        @self.router.post(
            path="",
            response_model=SavedFilterResponseSchema,
            status_code=status.HTTP_201_CREATED,
        )
        async def create_saved_filter(
            data: SavedFilterCreateRequestSchema,
            current_user: CurrentUserDep,
            service: SavedFilterServiceDep,
        ) -> SavedFilterResponseSchema:
            saved_filter = unwrap(await service.create_saved_filter(current_user, data))
            return SavedFilterResponseSchema(
                message="Фильтр сохранён",
                data=SavedFilterDetailSchema.model_validate(saved_filter),
            )

        @self.router.patch(
            path="/{filter_id}", response_model=SavedFilterResponseSchema
        )
        async def update_saved_filter(
            filter_id: UUID,
            data: SavedFilterUpdateRequestSchema,
            current_user: CurrentUserDep,
            service: SavedFilterServiceDep,
        ) -> SavedFilterResponseSchema:
            saved_filter = unwrap(
                await service.update_saved_filter(current_user, filter_id, data)
            )
            return SavedFilterResponseSchema(
                message="Фильтр обновлён",
                data=SavedFilterDetailSchema.model_validate(saved_filter),
            )

        @self.router.delete(path="/{filter_id}", response_model=DeleteResponseSchema)
        async def delete_saved_filter(
            filter_id: UUID,
            current_user: CurrentUserDep,
            service: SavedFilterServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(
                await service.delete_saved_filter(current_user, filter_id)
            )
            return DeleteResponseSchema(
                message="Фильтр удалён", data=DeleteResultSchema(id=deleted_id)
            )
