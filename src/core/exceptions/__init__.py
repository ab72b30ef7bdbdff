from .base import BaseAPIException
from .common import (ConflictError, ForbiddenError, InternalServiceError,
                     NotFoundError, UnauthorizedError, ValidationFailedError)
from .dependencies import ServiceUnavailableException
from .handlers import (ERROR_STATUS_CODES, error_response,
                       register_exception_handlers, status_code_for)
from .issues import (IssueNotFoundError, IssuesNotFoundError,
                     ParentIssueNotFoundError, ParentProjectMismatchError,
                     SubtaskNestingError)
from .workspaces import (BulkAccessDeniedError, MemberNotFoundError,
                         OwnerRemovalError, WorkspaceAccessDeniedError,
                         WorkspaceNotFoundError,
                         WorkspaceOwnerRequiredError,
                         WorkspacePermissionDeniedError,
                         WorkspaceSlugConflictError)
from .projects import ProjectKeyConflictError, ProjectNotFoundError
from .invitations import (AlreadyMemberError, InvitationCancelDeniedError,
                          InvitationEmailMismatchError, InvitationExpiredError,
                          InvitationNoLongerValidError,
                          InvitationNotFoundError,
                          PendingInvitationExistsError)
from .issue_comments import CommentAccessDeniedError, CommentNotFoundError
from .attachments import AttachmentAccessDeniedError, AttachmentNotFoundError
from .notifications import (NotificationAccessDeniedError,
                            NotificationNotFoundError)
from .saved_filters import (SavedFilterAccessDeniedError,
                            SavedFilterNameConflictError,
                            SavedFilterNotFoundError)
from .sprints import SprintNameConflictError, SprintNotFoundError
from .issue_links import (IssueLinkConflictError, IssueLinkNotFoundError,
                          LinkTargetNotFoundError, SelfLinkError)
from .labels import (InvalidLabelsError, LabelNameConflictError,
                     LabelNotFoundError)

__all__ = [
    # Base
    "BaseAPIException",
    # Common
    "ConflictError",
    "ForbiddenError",
    "InternalServiceError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationFailedError",
    # Dependencies
    "ServiceUnavailableException",
    # Handlers
    "ERROR_STATUS_CODES",
    "error_response",
    "register_exception_handlers",
    "status_code_for",
    # Issues
    "IssueNotFoundError",
    "IssuesNotFoundError",
    "ParentIssueNotFoundError",
    "ParentProjectMismatchError",
    "SubtaskNestingError",
    # Workspaces
    "BulkAccessDeniedError",
    "MemberNotFoundError",
    "OwnerRemovalError",
    "WorkspaceAccessDeniedError",
    "WorkspaceNotFoundError",
    "WorkspaceOwnerRequiredError",
    "WorkspacePermissionDeniedError",
    "WorkspaceSlugConflictError",
    # Projects
    "ProjectKeyConflictError",
    "ProjectNotFoundError",
    # Invitations
    "AlreadyMemberError",
    "InvitationCancelDeniedError",
    "InvitationEmailMismatchError",
    "InvitationExpiredError",
    "InvitationNoLongerValidError",
    "InvitationNotFoundError",
    "PendingInvitationExistsError",
    # Comments
    "CommentAccessDeniedError",
    "CommentNotFoundError",
    # Attachments
    "AttachmentAccessDeniedError",
    "AttachmentNotFoundError",
    # Notifications
    "NotificationAccessDeniedError",
    "NotificationNotFoundError",
    # Saved filters
    "SavedFilterAccessDeniedError",
    "SavedFilterNameConflictError",
    "SavedFilterNotFoundError",
    # Sprints
    "SprintNameConflictError",
    "SprintNotFoundError",
    # Issue links
    "IssueLinkConflictError",
    "IssueLinkNotFoundError",
    "LinkTargetNotFoundError",
    "SelfLinkError",
    # Labels
    "InvalidLabelsError",
    "LabelNameConflictError",
    "LabelNotFoundError",
]
