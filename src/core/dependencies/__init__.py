"""
Модуль зависимостей FastAPI.

Содержит все зависимости для внедрения в роуты и сервисы приложения.
Организован по категориям соответствующим src.core.connections.
"""

# Database dependencies
from .database import AsyncSessionDep, get_async_session
# Cache dependencies
from .cache import ViewCacheDep, get_view_cache
# Storage dependencies
from .storage import S3ClientDep, StorageDep, get_storage
# Issue Service dependencies
from .issues import BulkIssueServiceDep, IssueServiceDep
# Comment / Attachment Service dependencies
from .issue_comments import IssueCommentServiceDep
from .attachments import AttachmentServiceDep
# Workspace-level Service dependencies
from .governance import (ActivityServiceDep, InvitationServiceDep,
                         IssueLinkServiceDep, LabelServiceDep,
                         NotificationServiceDep, ProjectServiceDep,
                         SavedFilterServiceDep, SprintServiceDep,
                         WorkspaceServiceDep)

__all__ = [
    "AsyncSessionDep",
    "get_async_session",
    "ViewCacheDep",
    "get_view_cache",
    "S3ClientDep",
    "StorageDep",
    "get_storage",
    "BulkIssueServiceDep",
    "IssueServiceDep",
    "IssueCommentServiceDep",
    "AttachmentServiceDep",
    "ActivityServiceDep",
    "InvitationServiceDep",
    "IssueLinkServiceDep",
    "LabelServiceDep",
    "NotificationServiceDep",
    "ProjectServiceDep",
    "SavedFilterServiceDep",
    "SprintServiceDep",
    "WorkspaceServiceDep",
]
