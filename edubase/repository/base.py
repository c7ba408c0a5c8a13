# -*- coding: utf-8 -*-
"""
edubase/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~
Базовый репозиторий: абстракция хранилища записей и её реализация на SQLAlchemy.

Сервисы получают хранилище при создании и не знают о сессии напрямую, поэтому
в тестах его можно подменить in-memory реализацией с тем же протоколом.
"""

from __future__ import annotations

from typing import Any, Generic, List, Optional, Protocol, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from edubase.config.logger import configure_logger
from edubase.domain.models import MAX_INTEGER, Base, utcnow
from edubase.utils.exceptions import (ConflictError, NotFoundError,
                                      ValidationError)

T = TypeVar("T", bound=Base)

logger = configure_logger("repository")

# SQLSTATE unique_violation в PostgreSQL
UNIQUE_VIOLATION_SQLSTATE = "23505"


class RecordStore(Protocol[T]):
    """Протокол хранилища записей одного типа сущности."""

    async def find_many(self, order_by: Sequence[str] = ()) -> List[T]: ...

    async def find_unique(self, **criteria: Any) -> Optional[T]: ...

    async def create(self, **fields: Any) -> T: ...

    async def update(self, record_id: int, **fields: Any) -> T: ...

    async def delete(self, record_id: int) -> None: ...


def is_unique_violation(exc: IntegrityError) -> bool:
    """Определить, что IntegrityError вызван нарушением уникальности."""
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        if getattr(orig, attr, None) == UNIQUE_VIOLATION_SQLSTATE:
            return True
    return "unique" in str(orig).lower()


def fits_integer_column(value: Any) -> bool:
    """Проверить, что целое значение помещается в колонку Integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        return True
    return -MAX_INTEGER - 1 <= value <= MAX_INTEGER


class SQLAlchemyRecordStore(Generic[T]):
    """Хранилище записей поверх AsyncSession (SQLAlchemy 2.0 async ORM)."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    @property
    def model_name(self) -> str:
        return self.model.__name__

    async def find_many(self, order_by: Sequence[str] = ()) -> List[T]:
        """
        Получить все записи в заданном порядке.

        Args:
            order_by: Имена полей; префикс "-" означает сортировку по убыванию.
        """
        stmt = select(self.model)
        for field in order_by:
            column = getattr(self.model, field.lstrip("-"))
            stmt = stmt.order_by(column.desc() if field.startswith("-") else column.asc())
        result = await self.session.execute(stmt)
        items = list(result.scalars().all())
        logger.debug(f"Получено {len(items)} записей {self.model_name}")
        return items

    async def find_unique(self, **criteria: Any) -> Optional[T]:
        """Найти запись по уникальному критерию (id, statement, name...)."""
        if not all(fits_integer_column(v) for v in criteria.values()):
            return None
        stmt = select(self.model).filter_by(**criteria)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create(self, **fields: Any) -> T:
        """Создать новую запись."""
        instance = self.model(**fields)
        self.session.add(instance)
        await self._commit()
        await self.session.refresh(instance)
        return instance

    async def update(self, record_id: int, **fields: Any) -> T:
        """Обновить запись; updated_at обновляется даже при пустом патче."""
        instance = await self.find_unique(id=record_id)
        if instance is None:
            raise NotFoundError(resource_type=self.model_name, resource_id=record_id)
        for key, value in fields.items():
            setattr(instance, key, value)
        instance.updated_at = utcnow()
        await self._commit()
        await self.session.refresh(instance)
        return instance

    async def delete(self, record_id: int) -> None:
        """Удалить запись навсегда."""
        instance = await self.find_unique(id=record_id)
        if instance is None:
            raise NotFoundError(resource_type=self.model_name, resource_id=record_id)
        await self.session.delete(instance)
        await self._commit()
        logger.info(f"Удален {self.model_name} с ID {record_id}")

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning(
                f"Нарушение ограничения целостности для {self.model_name}: {exc.orig}"
            )
            if is_unique_violation(exc):
                raise ConflictError(
                    f"{self.model_name} с такими данными уже существует"
                ) from exc
            raise ValidationError(
                f"Данные {self.model_name} нарушают ограничения целостности"
            ) from exc
        except DataError as exc:
            await self.session.rollback()
            logger.warning(f"Некорректные данные для {self.model_name}: {exc.orig}")
            raise ValidationError(
                f"Данные {self.model_name} не помещаются в поля хранилища"
            ) from exc
