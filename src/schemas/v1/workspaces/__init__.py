from .requests import (WorkspaceCreateRequestSchema,
                       WorkspaceUpdateRequestSchema, validate_workspace_slug)
from .responses import (WorkspaceDetailSchema, WorkspaceListResponseSchema,
                        WorkspaceResponseSchema)

__all__ = [
    "WorkspaceCreateRequestSchema",
    "WorkspaceUpdateRequestSchema",
    "validate_workspace_slug",
    "WorkspaceDetailSchema",
    "WorkspaceResponseSchema",
    "WorkspaceListResponseSchema",
]
