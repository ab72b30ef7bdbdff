from .requests import (SprintCreateRequestSchema, SprintUpdateRequestSchema,
                       as_utc)
from .responses import (SprintDetailSchema, SprintListResponseSchema,
                        SprintResponseSchema)

__all__ = [
    "SprintCreateRequestSchema",
    "SprintUpdateRequestSchema",
    "as_utc",
    "SprintDetailSchema",
    "SprintResponseSchema",
    "SprintListResponseSchema",
]
