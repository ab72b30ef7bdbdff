"""
Результат команды: успех (Ok) или типизированная ошибка (Err).

Публичные операции сервисов не пробрасывают исключения наружу, а возвращают
Result. Вызывающая сторона разбирает его через isinstance или unwrap():

    >>> result = await issue_service.update_issue(user, issue_id, data)
    >>> if isinstance(result, Err):
    ...     status_code = ERROR_STATUS_CODES[result.error.kind]
    >>> issue = unwrap(result)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """
    Классы ошибок, различимые вызывающей стороной.

    Attributes:
        UNAUTHORIZED: Нет аутентифицированного пользователя.
        FORBIDDEN: Пользователь есть, но прав недостаточно.
        NOT_FOUND: Идентификатор сущности не найден.
        VALIDATION: Входные данные не прошли проверку схемы.
        CONFLICT: Нарушена уникальность или состояние не допускает операцию.
        INTERNAL: Непредвиденный сбой хранилища или ввода-вывода.
    """

    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass(frozen=True)
class OperationError:
    """
    Ошибка операции.

    Attributes:
        kind: Класс ошибки.
        code: Машиночитаемый код (например, "invitation_expired").
        message: Сообщение для пользователя.
        extra: Дополнительные данные.
    """

    kind: ErrorKind
    code: str
    message: str
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: OperationError

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


class OperationFailed(Exception):
    """Поднимается unwrap() для Err; обрабатывается на транспортном уровне."""

    def __init__(self, error: OperationError):
        super().__init__(error.message)
        self.error = error


def unwrap(result: "Result[T]") -> T:
    """
    Возвращает значение Ok или поднимает OperationFailed для Err.

    Raises:
        OperationFailed: Если result - Err.
        TypeError: Если передан не Result.
    """
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise OperationFailed(result.error)
    raise TypeError(f"Ожидался Result, получено {type(result).__name__}")
