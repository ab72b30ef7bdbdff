from .responses import (NotificationDetailSchema,
                        NotificationListResponseSchema,
                        NotificationResponseSchema, UnreadCountResponseSchema,
                        UnreadCountSchema)

__all__ = [
    "NotificationDetailSchema",
    "NotificationListResponseSchema",
    "NotificationResponseSchema",
    "UnreadCountSchema",
    "UnreadCountResponseSchema",
]
