"""
Роутеры комментариев и вложений задач.

Endpoints:
    GET    /issues/{issue_id}/comments     - Комментарии задачи
    POST   /issues/{issue_id}/comments     - Добавить комментарий
    PATCH  /comments/{comment_id}          - Изменить (только автор)
    DELETE /comments/{comment_id}          - Удалить (автор, владелец, ADMIN)
    GET    /issues/{issue_id}/attachments  - Вложения задачи
    DELETE /attachments/{attachment_id}    - Удалить вложение и файл
"""

from uuid import UUID

from fastapi import status

from src.core.dependencies import AttachmentServiceDep, IssueCommentServiceDep
from src.core.result import unwrap
from src.core.security import CurrentUserDep
from src.routers.base import ProtectedRouter
from src.schemas.v1.attachments import (AttachmentDetailSchema,
                                        AttachmentListResponseSchema)
from src.schemas.v1.issue_comments import (CommentCreateRequestSchema,
                                           CommentDetailSchema,
                                           CommentListResponseSchema,
                                           CommentResponseSchema,
                                           CommentUpdateRequestSchema)
from src.schemas.v1.issues import DeleteResponseSchema, DeleteResultSchema


class IssueCommentProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(tags=["Issue Comments"])

    def configure(self):
        @self.router.get(
            path="/issues/{issue_id}/comments",
            response_model=CommentListResponseSchema,
        )
        async def list_comments(
            issue_id: UUID,
            current_user: CurrentUserDep,
            service: IssueCommentServiceDep,
        ) -> CommentListResponseSchema:
            comments = unwrap(await service.list_comments(current_user, issue_id))
            return CommentListResponseSchema(
                data=[CommentDetailSchema.model_validate(item) for item in comments]
            )

        @self.router.post(
            path="/issues/{issue_id}/comments",
            response_model=CommentResponseSchema,
            status_code=status.HTTP_201_CREATED,
            description="""
            ## Добавить комментарий

            Автор задачи и исполнитель получают уведомление (кроме автора
            комментария; при совпадении автора и исполнителя уведомление одно).
            """,
        )
        async def create_comment(
            issue_id: UUID,
            data: CommentCreateRequestSchema,
            current_user: CurrentUserDep,
            service: IssueCommentServiceDep,
        ) -> CommentResponseSchema:
            comment = unwrap(await service.create_comment(current_user, issue_id, data))
            return CommentResponseSchema(
                message="Комментарий добавлен",
                data=CommentDetailSchema.model_validate(comment),
            )

        @self.router.patch(
            path="/comments/{comment_id}", response_model=CommentResponseSchema
        )
        async def update_comment(
            comment_id: UUID,
            data: CommentUpdateRequestSchema,
            current_user: CurrentUserDep,
            service: IssueCommentServiceDep,
        ) -> CommentResponseSchema:
            comment = unwrap(
                await service.update_comment(current_user, comment_id, data)
            )
            return CommentResponseSchema(
                message="Комментарий обновлён",
                data=CommentDetailSchema.model_validate(comment),
            )

        @self.router.delete(
            path="/comments/{comment_id}", response_model=DeleteResponseSchema
        )
        async def delete_comment(
            comment_id: UUID,
            current_user: CurrentUserDep,
            service: IssueCommentServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(await service.delete_comment(current_user, comment_id))
            return DeleteResponseSchema(
                message="Комментарий удалён", data=DeleteResultSchema(id=deleted_id)
            )


class AttachmentProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(tags=["Attachments"])

    def configure(self):
        @self.router.get(
            path="/issues/{issue_id}/attachments",
            response_model=AttachmentListResponseSchema,
        )
        async def list_attachments(
            issue_id: UUID,
            current_user: CurrentUserDep,
            service: AttachmentServiceDep,
        ) -> AttachmentListResponseSchema:
            attachments = unwrap(await service.list_attachments(current_user, issue_id))
            return AttachmentListResponseSchema(
                data=[AttachmentDetailSchema.model_validate(item) for item in attachments]
            )

        @self.router.delete(
            path="/attachments/{attachment_id}", response_model=DeleteResponseSchema
        )
        async def delete_attachment(
            attachment_id: UUID,
            current_user: CurrentUserDep,
            service: AttachmentServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(
                await service.delete_attachment(current_user, attachment_id)
            )
            return DeleteResponseSchema(
                message="Вложение удалено", data=DeleteResultSchema(id=deleted_id)
            )
