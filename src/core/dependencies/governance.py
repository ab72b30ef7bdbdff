"""
Зависимости сервисов workspace-уровня: workspace, проекты, спринты,
метки, связи задач, приглашения, уведомления, журнал активности,
сохранённые фильтры.
"""

from typing import Annotated

from fastapi import Depends

from src.core.dependencies.database import AsyncSessionDep
from src.services.v1.activities import ActivityService
from src.services.v1.invitations import InvitationService
from src.services.v1.issue_links import IssueLinkService
from src.services.v1.labels import LabelService
from src.services.v1.notifications import NotificationService
from src.services.v1.projects import ProjectService
from src.services.v1.saved_filters import SavedFilterService
from src.services.v1.sprints import SprintService
from src.services.v1.workspaces import WorkspaceService


async def get_workspace_service(session: AsyncSessionDep) -> WorkspaceService:
    return WorkspaceService(session=session)


async def get_project_service(session: AsyncSessionDep) -> ProjectService:
    return ProjectService(session=session)


async def get_sprint_service(session: AsyncSessionDep) -> SprintService:
    return SprintService(session=session)


async def get_label_service(session: AsyncSessionDep) -> LabelService:
    return LabelService(session=session)


async def get_issue_link_service(session: AsyncSessionDep) -> IssueLinkService:
    return IssueLinkService(session=session)


async def get_invitation_service(session: AsyncSessionDep) -> InvitationService:
    return InvitationService(session=session)


async def get_notification_service(session: AsyncSessionDep) -> NotificationService:
    return NotificationService(session=session)


async def get_activity_service(session: AsyncSessionDep) -> ActivityService:
    return ActivityService(session=session)


async def get_saved_filter_service(session: AsyncSessionDep) -> SavedFilterService:
    return SavedFilterService(session=session)


WorkspaceServiceDep = Annotated[WorkspaceService, Depends(get_workspace_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
SprintServiceDep = Annotated[SprintService, Depends(get_sprint_service)]
LabelServiceDep = Annotated[LabelService, Depends(get_label_service)]
IssueLinkServiceDep = Annotated[IssueLinkService, Depends(get_issue_link_service)]
InvitationServiceDep = Annotated[InvitationService, Depends(get_invitation_service)]
NotificationServiceDep = Annotated[
    NotificationService, Depends(get_notification_service)
]
ActivityServiceDep = Annotated[ActivityService, Depends(get_activity_service)]
SavedFilterServiceDep = Annotated[SavedFilterService, Depends(get_saved_filter_service)]
