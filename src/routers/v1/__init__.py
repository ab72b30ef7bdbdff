"""
Модуль APIv1 - роутер версии 1 API.

Агрегирует все роутеры версии 1 и предоставляет единую точку входа.
"""

from src.routers.base import BaseRouter

from .invitations import InvitationProtectedRouter, WorkspaceMemberProtectedRouter
from .issue_comments import AttachmentProtectedRouter, IssueCommentProtectedRouter
from .issues import IssueBulkRouter, IssueProtectedRouter
from .notifications import NotificationProtectedRouter
from .projects import ProjectProtectedRouter, SavedFilterProtectedRouter
from .sprints import (IssueLinkProtectedRouter, LabelProtectedRouter,
                      SprintProtectedRouter)
from .workspaces import WorkspaceProtectedRouter


class APIv1(BaseRouter):
    """
    Главный роутер для API версии 1.

    IssueBulkRouter подключается раньше IssueProtectedRouter, чтобы
    /issues/bulk/* не перехватывались маршрутами /issues/{issue_id}.
    """

    def configure(self):
        """Настраивает все роутеры версии 1."""
        self.router.include_router(IssueBulkRouter().get_router())
        self.router.include_router(IssueProtectedRouter().get_router())
        self.router.include_router(IssueLinkProtectedRouter().get_router())
        self.router.include_router(IssueCommentProtectedRouter().get_router())
        self.router.include_router(AttachmentProtectedRouter().get_router())
        self.router.include_router(ProjectProtectedRouter().get_router())
        self.router.include_router(SavedFilterProtectedRouter().get_router())
        self.router.include_router(SprintProtectedRouter().get_router())
        self.router.include_router(LabelProtectedRouter().get_router())
        self.router.include_router(NotificationProtectedRouter().get_router())
        self.router.include_router(InvitationProtectedRouter().get_router())
        self.router.include_router(WorkspaceMemberProtectedRouter().get_router())
        self.router.include_router(WorkspaceProtectedRouter().get_router())
