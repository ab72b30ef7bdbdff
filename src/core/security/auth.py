"""
Идентификация пользователя запроса.

Сессию проверяет внешний провайдер идентификации (шлюз перед сервисом)
и передаёт результат в доверенных заголовках:
    X-User-Id: UUID пользователя
    X-User-Email: email из сессии

Имена заголовков задаются в IdentitySettings.

Примеры использования:

1. Обязательная идентификация:
    ```
    @router.get("/notifications")
    async def list_notifications(current_user: CurrentUserDep): ...
    ```

2. Пользователь передаётся в сервис как есть, сервис сам вернёт
   Err(UNAUTHORIZED) для None:
    ```
    async def create_issue(current_user: OptionalUserDep, ...): ...
    ```
"""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from src.core.exceptions import UnauthorizedError
from src.core.settings import settings
from src.schemas.v1.users import UserCurrentSchema

logger = logging.getLogger(__name__)

# Схема безопасности для документации OpenAPI
identity_scheme = APIKeyHeader(
    name=settings.identity.USER_ID_HEADER,
    scheme_name="TrustedIdentityHeader",
    description="UUID пользователя от провайдера идентификации",
    auto_error=False,
)


class AuthenticationManager:
    """
    Чтение идентичности из доверенных заголовков.

    Методы:
        extract_identity: UserCurrentSchema или None
    """

    @staticmethod
    def extract_identity(request: Request) -> Optional[UserCurrentSchema]:
        raw_id = request.headers.get(settings.identity.USER_ID_HEADER)
        email = request.headers.get(settings.identity.USER_EMAIL_HEADER)
        if not raw_id or not email:
            logger.debug("Заголовки идентичности отсутствуют")
            return None
        try:
            user_id = UUID(raw_id)
        except ValueError:
            logger.warning("Некорректный %s: %s", settings.identity.USER_ID_HEADER, raw_id)
            return None
        return UserCurrentSchema(id=user_id, email=email.strip())


async def get_current_user_optional(
    request: Request,
    _header: Optional[str] = Depends(identity_scheme),
) -> Optional[UserCurrentSchema]:
    """
    Текущий пользователь или None, если идентичности нет.

    Returns:
        Optional[UserCurrentSchema]: Пользователь запроса.
    """
    return AuthenticationManager.extract_identity(request)


async def get_current_user(
    user: Optional[UserCurrentSchema] = Depends(get_current_user_optional),
) -> UserCurrentSchema:
    """
    Текущий пользователь.

    Raises:
        UnauthorizedError: Идентичность не передана.
    """
    if user is None:
        raise UnauthorizedError()
    return user


# Type annotation для dependency injection
CurrentUserDep = Annotated[UserCurrentSchema, Depends(get_current_user)]
OptionalUserDep = Annotated[Optional[UserCurrentSchema], Depends(get_current_user_optional)]
