from .requests import (BulkAssignRequestSchema, BulkDeleteRequestSchema,
                       BulkPriorityRequestSchema, BulkStatusRequestSchema,
                       IssueCreateRequestSchema, IssueMoveRequestSchema,
                       IssueUpdateRequestSchema, SubtaskCreateRequestSchema,
                       SubtaskStatusRequestSchema)
from .responses import (BulkResponseSchema, BulkResultSchema,
                        DeleteResponseSchema, DeleteResultSchema,
                        IssueDetailSchema, IssueListResponseSchema,
                        IssueResponseSchema)

__all__ = [
    # Requests
    "IssueCreateRequestSchema",
    "IssueUpdateRequestSchema",
    "IssueMoveRequestSchema",
    "SubtaskCreateRequestSchema",
    "SubtaskStatusRequestSchema",
    "BulkStatusRequestSchema",
    "BulkAssignRequestSchema",
    "BulkPriorityRequestSchema",
    "BulkDeleteRequestSchema",
    # Responses
    "IssueDetailSchema",
    "IssueResponseSchema",
    "IssueListResponseSchema",
    "BulkResultSchema",
    "BulkResponseSchema",
    "DeleteResultSchema",
    "DeleteResponseSchema",
]
