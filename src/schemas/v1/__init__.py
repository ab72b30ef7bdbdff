"""
Схемы API версии 1.

Модули:
    activities: Журнал активности
    attachments: Вложения
    invitations: Приглашения в workspace
    issue_comments: Комментарии
    issues: Задачи, подзадачи, массовые операции
    issue_links: Связи между задачами
    labels: Метки
    notifications: Уведомления
    projects: Проекты
    saved_filters: Сохранённые фильтры
    sprints: Спринты
    users: Текущий пользователь
    workspaces: Workspace
"""

from .activities import *  # noqa: F401, F403
from .attachments import *  # noqa: F401, F403
from .invitations import *  # noqa: F401, F403
from .issue_comments import *  # noqa: F401, F403
from .issue_links import *  # noqa: F401, F403
from .issues import *  # noqa: F401, F403
from .labels import *  # noqa: F401, F403
from .notifications import *  # noqa: F401, F403
from .projects import *  # noqa: F401, F403
from .saved_filters import *  # noqa: F401, F403
from .sprints import *  # noqa: F401, F403
from .users import *  # noqa: F401, F403
from .workspaces import *  # noqa: F401, F403
