from typing import Any, Dict, List, Optional
from uuid import UUID

from src.schemas.base import BaseResponseSchema, BaseSchema


class SavedFilterDetailSchema(BaseSchema):
    name: str
    filters: Dict[str, Any]
    is_default: bool
    project_id: UUID
    user_id: UUID


class SavedFilterResponseSchema(BaseResponseSchema):
    data: SavedFilterDetailSchema


class OptionalSavedFilterResponseSchema(BaseResponseSchema):
    data: Optional[SavedFilterDetailSchema] = None


class SavedFilterListResponseSchema(BaseResponseSchema):
    data: List[SavedFilterDetailSchema]
