from typing import Optional

from pydantic import Field

from src.schemas.base import BaseRequestSchema


class LabelCreateRequestSchema(BaseRequestSchema):
    """
    Example:
        {"name": "frontend", "color": "#3B82F6"}
    """

    name: str = Field(min_length=1, max_length=50, description="Название метки")
    color: Optional[str] = Field(
        default=None, pattern=r"^#[0-9A-Fa-f]{6}$", description="Цвет в HEX"
    )
