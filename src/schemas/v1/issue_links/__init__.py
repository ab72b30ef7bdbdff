from .requests import IssueLinkCreateRequestSchema
from .responses import (IssueLinkDetailSchema, IssueLinkResponseSchema,
                        IssueLinksResponseSchema, IssueLinksSchema)

__all__ = [
    "IssueLinkCreateRequestSchema",
    "IssueLinkDetailSchema",
    "IssueLinksSchema",
    "IssueLinkResponseSchema",
    "IssueLinksResponseSchema",
]
