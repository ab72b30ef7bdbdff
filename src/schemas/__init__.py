"""
Схемы API.

Экспортирует базовые схемы и схему текущего пользователя.
"""

# Common (из base.py)
from .base import (BaseRequestSchema, BaseResponseSchema, BaseSchema,
                   CommonBaseSchema, ErrorResponseSchema, ErrorSchema)
from .v1.users import UserCurrentSchema

__all__ = [
    # Common
    "CommonBaseSchema",
    "BaseSchema",
    "BaseRequestSchema",
    "BaseResponseSchema",
    "ErrorSchema",
    "ErrorResponseSchema",
    # V1 Users
    "UserCurrentSchema",
]
