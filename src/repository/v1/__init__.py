"""
Модуль v1 репозиториев для работы с базой данных.

Экспортируемые репозитории:
    - UserRepository: Пользователи
    - WorkspaceRepository, WorkspaceMemberRepository: Workspace и участники
    - ProjectRepository: Проекты и счётчик номеров задач
    - IssueRepository, IssueContext: Задачи и их контекст (проект, workspace)
    - IssueCommentRepository: Комментарии
    - IssueLinkRepository: Связи между задачами
    - LabelRepository: Метки проекта и метки задач
    - SprintRepository: Спринты
    - AttachmentRepository: Вложения
    - ActivityRepository: Журнал активности
    - NotificationRepository: Уведомления
    - InvitationRepository: Приглашения
    - SavedFilterRepository: Сохранённые фильтры
"""

from .activities import ActivityRepository
from .attachments import AttachmentRepository
from .invitations import InvitationRepository
from .issue_comments import IssueCommentRepository
from .issue_links import IssueLinkRepository
from .issues import IssueContext, IssueRepository
from .labels import LabelRepository
from .notifications import NotificationRepository
from .projects import ProjectRepository
from .saved_filters import SavedFilterRepository
from .sprints import SprintRepository
from .users import UserRepository
from .workspaces import WorkspaceMemberRepository, WorkspaceRepository

__all__ = [
    "ActivityRepository",
    "AttachmentRepository",
    "InvitationRepository",
    "IssueCommentRepository",
    "IssueContext",
    "IssueLinkRepository",
    "IssueRepository",
    "LabelRepository",
    "NotificationRepository",
    "ProjectRepository",
    "SavedFilterRepository",
    "SprintRepository",
    "UserRepository",
    "WorkspaceMemberRepository",
    "WorkspaceRepository",
]
