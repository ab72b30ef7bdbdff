from .requests import (ProjectCreateRequestSchema, ProjectUpdateRequestSchema,
                       validate_project_key)
from .responses import (ProjectDetailSchema, ProjectListResponseSchema,
                        ProjectResponseSchema)

__all__ = [
    "ProjectCreateRequestSchema",
    "ProjectUpdateRequestSchema",
    "validate_project_key",
    "ProjectDetailSchema",
    "ProjectResponseSchema",
    "ProjectListResponseSchema",
]
