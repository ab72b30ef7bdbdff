from uuid import UUID

from pydantic import Field

from src.models.v1.issue_links import LinkType
from src.schemas.base import BaseRequestSchema


class IssueLinkCreateRequestSchema(BaseRequestSchema):
    """
    Example:
        {"from_issue_id": "...", "to_issue_id": "...", "type": "BLOCKS"}
    """

    from_issue_id: UUID = Field(description="Исходная задача")
    to_issue_id: UUID = Field(description="Связанная задача")
    type: LinkType = Field(description="Тип связи")
