from .requests import CommentCreateRequestSchema, CommentUpdateRequestSchema
from .responses import (CommentDetailSchema, CommentListResponseSchema,
                        CommentResponseSchema)

__all__ = [
    "CommentCreateRequestSchema",
    "CommentUpdateRequestSchema",
    "CommentDetailSchema",
    "CommentResponseSchema",
    "CommentListResponseSchema",
]
