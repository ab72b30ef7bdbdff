from .requests import (IssueFilterCriteriaSchema,
                       SavedFilterCreateRequestSchema,
                       SavedFilterUpdateRequestSchema)
from .responses import (OptionalSavedFilterResponseSchema,
                        SavedFilterDetailSchema,
                        SavedFilterListResponseSchema,
                        SavedFilterResponseSchema)

__all__ = [
    "IssueFilterCriteriaSchema",
    "SavedFilterCreateRequestSchema",
    "SavedFilterUpdateRequestSchema",
    "SavedFilterDetailSchema",
    "SavedFilterResponseSchema",
    "OptionalSavedFilterResponseSchema",
    "SavedFilterListResponseSchema",
]
