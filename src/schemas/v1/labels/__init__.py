from .requests import LabelCreateRequestSchema
from .responses import (LabelDetailSchema, LabelListResponseSchema,
                        LabelResponseSchema)

__all__ = [
    "LabelCreateRequestSchema",
    "LabelDetailSchema",
    "LabelResponseSchema",
    "LabelListResponseSchema",
]
