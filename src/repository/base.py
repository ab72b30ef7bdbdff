"""
Базовый репозиторий.

Обобщённый CRUD поверх AsyncSession плюс пакетные операции по множеству
идентификаторов и агрегат максимума для вычисления позиций.
"""

# pylint: disable=not-callable  # func.count() is callable in SQLAlchemy
import logging
from typing import (Any, Dict, Generic, Iterable, List, Optional, Sequence,
                    Type, TypeVar)
from uuid import UUID

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.base import BaseModel

M = TypeVar("M", bound=BaseModel)


class SessionMixin:
    """
    Миксин для предоставления экземпляра сессии базы данных.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session


class BaseRepository(SessionMixin, Generic[M]):
    """
    Базовый класс для репозиториев.

    Ошибки SQLAlchemy логируются и пробрасываются: сервис сам решает,
    чем они станут для вызывающей стороны. Операции записи по умолчанию
    коммитят транзакцию; commit=False оставляет изменения в текущей
    транзакции для атомарных сценариев.

    Attributes:
        session (AsyncSession): Асинхронная сессия базы данных.
        model (Type[M]): Тип SQLAlchemy модели.
    """

    def __init__(self, session: AsyncSession, model: Type[M]):
        super().__init__(session)
        self.model = model
        self.logger = logging.getLogger(self.__class__.__name__)

    # ==================== CREATE ====================

    async def create_item(self, data: Dict[str, Any], commit: bool = True) -> M:
        """
        Создает новую запись в базе данных.

        Args:
            data: Данные для создания записи.
            commit: Зафиксировать транзакцию сразу.

        Returns:
            M: Созданная SQLAlchemy модель.

        Raises:
            SQLAlchemyError: Если произошла ошибка при создании.
        """
        try:
            instance = self.model(**data)
            self.session.add(instance)
            if commit:
                await self.session.commit()
                await self.session.refresh(instance)
            else:
                await self.session.flush()
            self.logger.debug(
                "Создана запись %s",
                self.model.__name__,
                extra={"model": self.model.__name__, "id": str(instance.id)},
            )
            return instance
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error("Ошибка при создании %s: %s", self.model.__name__, e)
            raise

    # ==================== READ ====================

    async def get_item_by_id(self, item_id: UUID) -> Optional[M]:
        """
        Получает запись по ID.

        Returns:
            Optional[M]: SQLAlchemy модель или None, если не найдена.
        """
        try:
            statement = select(self.model).where(self.model.id == item_id)
            result = await self.session.execute(statement)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(
                "Ошибка при получении %s по ID %s: %s", self.model.__name__, item_id, e
            )
            raise

    async def get_item_by_field(self, field_name: str, field_value: Any) -> Optional[M]:
        """
        Получает первую запись по значению поля.

        Raises:
            ValueError: Если поля нет в модели.
        """
        field = self._get_field(field_name)
        try:
            statement = select(self.model).where(field == field_value).limit(1)
            result = await self.session.execute(statement)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(
                "Ошибка при получении %s по полю %s=%s: %s",
                self.model.__name__,
                field_name,
                field_value,
                e,
            )
            raise

    async def get_items_by_ids(self, item_ids: Iterable[UUID]) -> List[M]:
        """
        Получает записи по множеству ID одним запросом.

        Порядок результата не гарантирован; отсутствующие ID просто не попадают
        в результат.
        """
        ids = list(item_ids)
        if not ids:
            return []
        try:
            statement = select(self.model).where(self.model.id.in_(ids))
            result = await self.session.execute(statement)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(
                "Ошибка при пакетном получении %s (%d ID): %s",
                self.model.__name__,
                len(ids),
                e,
            )
            raise

    async def filter_by(
        self,
        order_by: Optional[Sequence[Any]] = None,
        limit: Optional[int] = None,
        **filters,
    ) -> List[M]:
        """
        Фильтрует записи с поддержкой операторов.

        Операторы: eq, ne, gt, lt, gte, lte, in, not_in, is_null
        (field__operator=value).

        Example:
            >>> await repo.filter_by(
            ...     order_by=[IssueModel.order],
            ...     project_id=project_id,
            ...     status=IssueStatus.TODO,
            ...     id__ne=moved_id,
            ... )
        """
        try:
            statement = select(self.model)
            conditions = self._build_filter_conditions(**filters)
            if conditions:
                statement = statement.where(and_(*conditions))
            if order_by:
                statement = statement.order_by(*order_by)
            if limit is not None:
                statement = statement.limit(limit)
            result = await self.session.execute(statement)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(
                "Ошибка при фильтрации %s: %s", self.model.__name__, e
            )
            raise

    async def count_items(self, **filters) -> int:
        """Подсчитывает количество записей с фильтрами."""
        try:
            statement = select(func.count()).select_from(self.model)
            conditions = self._build_filter_conditions(**filters)
            if conditions:
                statement = statement.where(and_(*conditions))
            result = await self.session.execute(statement)
            return result.scalar() or 0
        except SQLAlchemyError as e:
            self.logger.error("Ошибка при подсчете %s: %s", self.model.__name__, e)
            raise

    async def exists(self, **filters) -> bool:
        return await self.count_items(**filters) > 0

    async def get_max_value(self, field_name: str, **filters) -> Optional[Any]:
        """
        Максимальное значение поля среди отфильтрованных записей.

        Returns:
            Значение или None, если записей нет.

        Example:
            >>> await repo.get_max_value("order", project_id=pid, status=IssueStatus.BACKLOG)
            3.0
        """
        field = self._get_field(field_name)
        try:
            statement = select(func.max(field))
            conditions = self._build_filter_conditions(**filters)
            if conditions:
                statement = statement.where(and_(*conditions))
            result = await self.session.execute(statement)
            return result.scalar()
        except SQLAlchemyError as e:
            self.logger.error(
                "Ошибка при вычислении max(%s) для %s: %s",
                field_name,
                self.model.__name__,
                e,
            )
            raise

    # ==================== UPDATE ====================

    async def update_item(
        self, instance: M, data: Dict[str, Any], commit: bool = True
    ) -> M:
        """
        Обновляет поля загруженной записи.

        Args:
            instance: Запись, полученная в этой сессии.
            data: Новые значения полей.
            commit: Зафиксировать транзакцию сразу.

        Raises:
            SQLAlchemyError: Если произошла ошибка при обновлении.
        """
        try:
            for key, value in data.items():
                if hasattr(instance, key) and key != "id":
                    setattr(instance, key, value)
            if commit:
                await self.session.commit()
                await self.session.refresh(instance)
            else:
                await self.session.flush()
            self.logger.debug(
                "Обновлена запись %s",
                self.model.__name__,
                extra={"model": self.model.__name__, "id": str(instance.id)},
            )
            return instance
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(
                "Ошибка при обновлении %s с ID %s: %s",
                self.model.__name__,
                instance.id,
                e,
            )
            raise

    async def update_items_by_ids(
        self, item_ids: Iterable[UUID], data: Dict[str, Any]
    ) -> int:
        """
        Одним UPDATE выставляет одинаковые значения всем записям из множества ID.

        Returns:
            int: Количество обновлённых строк.
        """
        ids = list(item_ids)
        if not ids:
            return 0
        try:
            statement = (
                update(self.model)
                .where(self.model.id.in_(ids))
                .values(**data)
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(statement)
            await self.session.commit()
            self.logger.info(
                "Пакетно обновлено %d записей %s",
                result.rowcount,
                self.model.__name__,
                extra={"model": self.model.__name__, "fields": sorted(data)},
            )
            return result.rowcount
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(
                "Ошибка при пакетном обновлении %s: %s", self.model.__name__, e
            )
            raise

    # ==================== DELETE ====================

    async def delete_item(self, instance: M, commit: bool = True) -> None:
        """
        Удаляет загруженную запись.

        Raises:
            SQLAlchemyError: Если произошла ошибка при удалении.
        """
        try:
            await self.session.delete(instance)
            if commit:
                await self.session.commit()
            else:
                await self.session.flush()
            self.logger.debug(
                "Удалена запись %s",
                self.model.__name__,
                extra={"model": self.model.__name__, "id": str(instance.id)},
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(
                "Ошибка при удалении %s с ID %s: %s",
                self.model.__name__,
                instance.id,
                e,
            )
            raise

    async def delete_items_by_ids(self, item_ids: Iterable[UUID]) -> int:
        """
        Одним DELETE удаляет записи из множества ID.

        Returns:
            int: Количество удалённых строк.
        """
        ids = list(item_ids)
        if not ids:
            return 0
        try:
            statement = (
                delete(self.model)
                .where(self.model.id.in_(ids))
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(statement)
            await self.session.commit()
            self.logger.info(
                "Пакетно удалено %d записей %s", result.rowcount, self.model.__name__
            )
            return result.rowcount
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(
                "Ошибка при пакетном удалении %s: %s", self.model.__name__, e
            )
            raise

    # ==================== FILTERS ====================

    def _get_field(self, field_name: str):
        if not hasattr(self.model, field_name):
            raise ValueError(
                f"Поле '{field_name}' не существует в модели {self.model.__name__}"
            )
        return getattr(self.model, field_name)

    def _apply_filter_condition(self, field, operator: str, value):
        """
        Применяет условие фильтрации к полю.

        Returns:
            SQLAlchemy условие.

        Raises:
            ValueError: Для неизвестного оператора.
        """
        if operator == "eq":
            return field == value
        if operator == "ne":
            return field != value
        if operator == "gt":
            return field > value
        if operator == "lt":
            return field < value
        if operator == "gte":
            return field >= value
        if operator == "lte":
            return field <= value
        if operator == "in":
            return field.in_(value)
        if operator == "not_in":
            return ~field.in_(value)
        if operator == "is_null":
            return field.is_(None) if value else field.isnot(None)
        raise ValueError(f"Неизвестный оператор фильтра '{operator}'")

    def _build_filter_conditions(self, **kwargs) -> List:
        """
        Строит список условий WHERE из параметров вида field__operator=value.
        """
        conditions = []
        for key, value in kwargs.items():
            if "__" in key:
                field_name, operator = key.rsplit("__", 1)
            else:
                field_name, operator = key, "eq"
            field = self._get_field(field_name)
            conditions.append(self._apply_filter_condition(field, operator, value))
        return conditions
