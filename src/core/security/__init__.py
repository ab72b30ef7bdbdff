"""
Модуль идентификации пользователя запроса.

Пользователь приходит от внешнего провайдера идентификации
в доверенных заголовках.
"""

from .auth import (AuthenticationManager, CurrentUserDep, OptionalUserDep,
                   get_current_user, get_current_user_optional)

__all__ = [
    "AuthenticationManager",
    "CurrentUserDep",
    "OptionalUserDep",
    "get_current_user",
    "get_current_user_optional",
]
