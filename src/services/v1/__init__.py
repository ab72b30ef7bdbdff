"""
Модуль с сервисами для API версии 1.

Exports:
    AccessService: Проверка прав в workspace.
    ActivityService: Журнал активности задач.
    NotificationService: Уведомления.
    BulkIssueService: Массовые операции над задачами.
    InvitationService: Приглашения и участники workspace.
    IssueService: Задачи и подзадачи.
    IssueLinkService: Связи между задачами.
    LabelService: Метки проекта.
    IssueCommentService: Комментарии.
    AttachmentService: Вложения.
    ProjectService: Проекты.
    SavedFilterService: Сохранённые фильтры.
    SprintService: Спринты.
    WorkspaceService: Workspace.
"""

from .access import AccessKind, AccessService, WorkspaceAccess, derive_access
from .activities import ActivityService, IssueSnapshot, diff_issue_snapshots
from .attachments import AttachmentService
from .bulk import BulkIssueService
from .invitations import InvitationService
from .issue_comments import IssueCommentService
from .issue_links import IssueLinks, IssueLinkService
from .issues import IssueService
from .labels import LabelService
from .notifications import NotificationService
from .ordering import compute_insertion_order
from .projects import ProjectService
from .saved_filters import SavedFilterService
from .sprints import SprintService
from .workspaces import WorkspaceService, slugify

__all__ = [
    "AccessKind",
    "AccessService",
    "WorkspaceAccess",
    "derive_access",
    "ActivityService",
    "IssueSnapshot",
    "diff_issue_snapshots",
    "AttachmentService",
    "BulkIssueService",
    "InvitationService",
    "IssueCommentService",
    "IssueLinks",
    "IssueLinkService",
    "IssueService",
    "LabelService",
    "NotificationService",
    "compute_insertion_order",
    "ProjectService",
    "SavedFilterService",
    "SprintService",
    "WorkspaceService",
    "slugify",
]
