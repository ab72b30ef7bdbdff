"""
Роутер уведомлений текущего пользователя.

Endpoints:
    GET    /notifications                       - Последние уведомления
    GET    /notifications/unread-count          - Количество непрочитанных
    PATCH  /notifications/{notification_id}/read
    POST   /notifications/read-all
    DELETE /notifications/{notification_id}
"""

from uuid import UUID

from fastapi import Query

from src.core.dependencies import NotificationServiceDep
from src.core.result import unwrap
from src.core.security import CurrentUserDep
from src.routers.base import ProtectedRouter
from src.schemas.v1.issues import DeleteResponseSchema, DeleteResultSchema
from src.schemas.v1.notifications import (NotificationDetailSchema,
                                          NotificationListResponseSchema,
                                          NotificationResponseSchema,
                                          UnreadCountResponseSchema,
                                          UnreadCountSchema)


class NotificationProtectedRouter(ProtectedRouter):
    def __init__(self):
        super().__init__(prefix="notifications", tags=["Notifications"])

    def configure(self):
        @self.router.get(path="", response_model=NotificationListResponseSchema)
        async def list_notifications(
            current_user: CurrentUserDep,
            service: NotificationServiceDep,
            limit: int = Query(default=20, ge=1, le=100),
        ) -> NotificationListResponseSchema:
            notifications = unwrap(
                await service.list_notifications(current_user, limit=limit)
            )
            return NotificationListResponseSchema(
                data=[
                    NotificationDetailSchema.model_validate(item)
                    for item in notifications
                ]
            )

        @self.router.get(path="/unread-count", response_model=UnreadCountResponseSchema)
        async def unread_count(
            current_user: CurrentUserDep, service: NotificationServiceDep
        ) -> UnreadCountResponseSchema:
            count = unwrap(await service.unread_count(current_user))
            return UnreadCountResponseSchema(data=UnreadCountSchema(count=count))

        @self.router.patch(
            path="/{notification_id}/read", response_model=NotificationResponseSchema
        )
        async def mark_as_read(
            notification_id: UUID,
            current_user: CurrentUserDep,
            service: NotificationServiceDep,
        ) -> NotificationResponseSchema:
            notification = unwrap(
                await service.mark_as_read(current_user, notification_id)
            )
            return NotificationResponseSchema(
                data=NotificationDetailSchema.model_validate(notification)
            )

        @self.router.post(path="/read-all", response_model=UnreadCountResponseSchema)
        async def mark_all_as_read(
            current_user: CurrentUserDep, service: NotificationServiceDep
        ) -> UnreadCountResponseSchema:
            updated = unwrap(await service.mark_all_as_read(current_user))
            return UnreadCountResponseSchema(
                message=f"Отмечено прочитанными: {updated}",
                data=UnreadCountSchema(count=0),
            )

        @self.router.delete(
            path="/{notification_id}", response_model=DeleteResponseSchema
        )
        async def delete_notification(
            notification_id: UUID,
            current_user: CurrentUserDep,
            service: NotificationServiceDep,
        ) -> DeleteResponseSchema:
            deleted_id = unwrap(
                await service.delete_notification(current_user, notification_id)
            )
            return DeleteResponseSchema(
                message="Уведомление удалено", data=DeleteResultSchema(id=deleted_id)
            )
