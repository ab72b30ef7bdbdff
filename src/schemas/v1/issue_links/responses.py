from typing import List
from uuid import UUID

from src.models.v1.issue_links import LinkType
from src.schemas.base import BaseResponseSchema, BaseSchema, CommonBaseSchema


class IssueLinkDetailSchema(BaseSchema):
    type: LinkType
    from_issue_id: UUID
    to_issue_id: UUID


class IssueLinksSchema(CommonBaseSchema):
    """Связи задачи: исходящие (links_from) и входящие (links_to)."""

    links_from: List[IssueLinkDetailSchema]
    links_to: List[IssueLinkDetailSchema]


class IssueLinkResponseSchema(BaseResponseSchema):
    data: IssueLinkDetailSchema


class IssueLinksResponseSchema(BaseResponseSchema):
    data: IssueLinksSchema
