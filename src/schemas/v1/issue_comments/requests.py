"""
Схемы запросов для комментариев к задачам.
"""

from pydantic import Field

from src.schemas.base import BaseRequestSchema

CONTENT_MAX_LENGTH = 10000


class CommentCreateRequestSchema(BaseRequestSchema):
    """
    Создание комментария.

    Example:
        POST /api/v1/issues/{issue_id}/comments
        {"content": "Воспроизводится только на больших файлах"}
    """

    content: str = Field(
        min_length=1,
        max_length=CONTENT_MAX_LENGTH,
        description="Текст комментария",
    )


class CommentUpdateRequestSchema(BaseRequestSchema):
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
