"""
Роутер workspace.

Endpoints:
    POST   /workspaces                  - Создать workspace
    GET    /workspaces                  - Workspace пользователя
    GET    /workspaces/slug/{slug}      - Workspace по slug
    PATCH  /workspaces/{workspace_id}   - Изменить (владелец, ADMIN)
    DELETE /workspaces/{workspace_id}   - Удалить (только владелец)
"""

from uuid import UUID

from fastapi import status

from src.core.dependencies import WorkspaceServiceDep
from src.core.result import unwrap
from src.core.security import CurrentUserDep
from src.routers.base import ProtectedRouter
from src.schemas.v1.issues import DeleteResponseSchema, DeleteResultSchema
from src.schemas.v1.workspaces import (WorkspaceCreateRequestSchema,
                                       WorkspaceDetailSchema,
                                       WorkspaceListResponseSchema,
                                       WorkspaceResponseSchema,
                                       WorkspaceUpdateRequestSchema)


class WorkspaceProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="workspaces", tags=["Workspaces"])

    def configure(self):
        @self.router.post(
            path="",
            response_model=WorkspaceResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Создать workspace

            Создатель становится владельцем. Если slug не передан, он
            строится из названия.

            ### Ошибки:
            * **409**: Slug уже занят
            """,
        )
        async def create_workspace(
            data: WorkspaceCreateRequestSchema,
            current_user: CurrentUserDep,
            service: WorkspaceServiceDep,
        ) -> WorkspaceResponseSchema:
            workspace = unwrap(await service.create_workspace(current_user, data))
            return WorkspaceResponseSchema(
                message=f"Workspace {workspace.slug} создан",
                data=WorkspaceDetailSchema.model_validate(workspace),
            )

        @self.router.get(path="", response_model=WorkspaceListResponseSchema)
        async def list_workspaces(
            current_user: CurrentUserDep,
            service: WorkspaceServiceDep,
        ) -> WorkspaceListResponseSchema:
            workspaces = unwrap(await service.list_workspaces(current_user))
            return WorkspaceListResponseSchema(
                data=[WorkspaceDetailSchema.model_validate(item) for item in workspaces]
            )

        @self.router.get(path="/slug/{slug}", response_model=WorkspaceResponseSchema)
        async def get_workspace(
            slug: str,
            current_user: CurrentUserDep,
            service: WorkspaceServiceDep,
        ) -> WorkspaceResponseSchema:
            workspace = unwrap(await service.get_workspace(current_user, slug))
            return WorkspaceResponseSchema(
                data=WorkspaceDetailSchema.model_validate(workspace)
            )

        @self.router.patch(
            path="/{workspace_id}", response_model=WorkspaceResponseSchema
        )
        async def update_workspace(
            workspace_id: UUID,
            data: WorkspaceUpdateRequestSchema,
            current_user: CurrentUserDep,
            service: WorkspaceServiceDep,
        ) -> WorkspaceResponseSchema:
            workspace = unwrap(
                await service.update_workspace(current_user, workspace_id, data)
            )
            return WorkspaceResponseSchema(
                message="Workspace обновлён",
                data=WorkspaceDetailSchema.model_validate(workspace),
            )

        @self.router.delete(path="/{workspace_id}", response_model=DeleteResponseSchema)
        async def delete_workspace(
            workspace_id: UUID,
            current_user: CurrentUserDep,
            service: WorkspaceServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(
                await service.delete_workspace(current_user, workspace_id)
            )
            return DeleteResponseSchema(
                message="Workspace удалён", data=DeleteResultSchema(id=deleted_id)
            )
