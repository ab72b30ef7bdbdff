"""
Модуль v1 содержит все модели данных версии 1 API.

Экспортируемые модели:
    - UserModel (пользователи)
    - WorkspaceModel, WorkspaceMemberModel, WorkspaceRole (workspace и участники)
    - ProjectModel (проекты)
    - IssueModel, IssueStatus, IssuePriority, IssueType (задачи)
    - IssueCommentModel (комментарии)
    - AttachmentModel (вложения)
    - ActivityModel, ActivityAction (журнал активности)
    - NotificationModel, NotificationType (уведомления)
    - InvitationModel, InvitationStatus (приглашения)
    - SavedFilterModel (сохранённые фильтры)
    - SprintModel, SprintStatus (спринты)
    - IssueLinkModel, LinkType (связи задач)
    - LabelModel, IssueLabelModel (метки)
"""

from .activities import ActivityAction, ActivityModel
from .attachments import AttachmentModel
from .invitations import InvitationModel, InvitationStatus
from .issue_comments import IssueCommentModel
from .issue_links import IssueLinkModel, LinkType
from .issues import IssueModel, IssuePriority, IssueStatus, IssueType
from .labels import IssueLabelModel, LabelModel
from .notifications import NotificationModel, NotificationType
from .projects import ProjectModel
from .saved_filters import SavedFilterModel
from .sprints import SprintModel, SprintStatus
from .users import UserModel
from .workspaces import WorkspaceMemberModel, WorkspaceModel, WorkspaceRole

__all__ = [
    # Users
    "UserModel",
    # Workspaces
    "WorkspaceModel",
    "WorkspaceMemberModel",
    "WorkspaceRole",
    # Projects
    "ProjectModel",
    # Issues
    "IssueModel",
    "IssueStatus",
    "IssuePriority",
    "IssueType",
    # Comments
    "IssueCommentModel",
    # Attachments
    "AttachmentModel",
    # Activity
    "ActivityModel",
    "ActivityAction",
    # Notifications
    "NotificationModel",
    "NotificationType",
    # Invitations
    "InvitationModel",
    "InvitationStatus",
    # Saved filters
    "SavedFilterModel",
    # Sprints
    "SprintModel",
    "SprintStatus",
    # Issue links
    "IssueLinkModel",
    "LinkType",
    # Labels
    "LabelModel",
    "IssueLabelModel",
]
