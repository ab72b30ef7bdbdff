"""
Базовый сервис и граница команд.

Публичные операции сервисов оборачиваются декоратором command(): доменные
исключения внутри операции превращаются в Err, непредвиденные ошибки
логируются с трассировкой и возвращаются как Err(INTERNAL) без подробностей.
"""

import logging
from functools import wraps
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel as PydanticModel
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import (BaseAPIException, InternalServiceError,
                                 UnauthorizedError, ValidationFailedError)
from src.core.messaging import SideEffectChannel
from src.core.result import Err, Ok, Result
from src.core.settings import settings
from src.schemas.v1.users import UserCurrentSchema

S = TypeVar("S", bound=PydanticModel)


class SessionMixin:
    """
    Миксин для предоставления экземпляра сессии базы данных.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session


class BaseService(SessionMixin):
    """
    Базовый класс для сервисов приложения.

    Порядок проверок в команде: пользователь, затем входные данные,
    затем доступ к хранилищу.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.settings = settings

    def _require_user(self, user: Optional[UserCurrentSchema]) -> UserCurrentSchema:
        if user is None:
            raise UnauthorizedError()
        return user

    def _validate(self, schema_cls: Type[S], data: Union[S, Dict[str, Any]]) -> S:
        """
        Проверяет входные данные схемой.

        Raises:
            ValidationFailedError: С сообщением первого поля с ошибкой.
        """
        if isinstance(data, schema_cls):
            return data
        try:
            return schema_cls.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"{location}: {first['msg']}" if location else first["msg"]
            raise ValidationFailedError(
                detail=message, extra={"field": location}
            ) from e

    def side_channel(self) -> SideEffectChannel:
        """Канал best-effort эффектов на движке текущей сессии."""
        return SideEffectChannel(bind=self.session.bind)

    async def _rollback_quietly(self) -> None:
        if self.session.in_transaction():
            await self.session.rollback()


def command(operation: str) -> Callable[
    [Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Result]]
]:
    """
    Декоратор публичной операции сервиса.

    Возвращаемое значение оборачивается в Ok. BaseAPIException становится
    Err своего вида; любое другое исключение логируется и становится
    Err(INTERNAL) с общим сообщением. Транзакция сессии откатывается.

    Args:
        operation: Имя операции для логов.

    Example:
        >>> class IssueService(BaseService):
        ...     @command("issue.delete")
        ...     async def delete_issue(self, user, issue_id): ...
    """

    def decorator(func: Callable[..., Awaitable[Any]]):
        @wraps(func)
        async def wrapper(self: BaseService, *args, **kwargs) -> Result:
            try:
                return Ok(await func(self, *args, **kwargs))
            except BaseAPIException as e:
                await self._rollback_quietly()
                self.logger.info(
                    "Операция %s отклонена: %s",
                    operation,
                    e.detail,
                    extra={"operation": operation, "error_type": e.error_type},
                )
                return Err(e.to_error())
            except Exception as e:  # граница операции: детали только в лог
                await self._rollback_quietly()
                self.logger.error(
                    "Операция %s завершилась ошибкой: %s",
                    operation,
                    e,
                    exc_info=True,
                    extra={"operation": operation},
                )
                return Err(InternalServiceError().to_error())

        return wrapper

    return decorator
