# -*- coding: utf-8 -*-
"""
edubase/service/subjects.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисный слой для работы с дисциплинами.
"""

from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from edubase.config.logger import configure_logger
from edubase.domain.models import Subject
from edubase.domain.schemas import SubjectReadSchema
from edubase.repository.base import RecordStore, SQLAlchemyRecordStore
from edubase.service.validation import (FieldKind, as_payload, clean_payload,
                                        parse_record_id, require_fields)
from edubase.utils.exceptions import ConflictError, NotFoundError

logger = configure_logger("subjects")

SUBJECT_FIELDS = {
    "name": FieldKind.TEXT,
    "instructor_id": FieldKind.POSITIVE_INTEGER,
    "active": FieldKind.BOOLEAN,
}
REQUIRED_FIELDS = ("name", "instructor_id")
DEFAULT_ORDERING = ("-created_at", "-id")


class SubjectService:
    """Сервис для работы с дисциплинами."""

    def __init__(self, store: RecordStore[Subject]):
        self.store = store

    async def _name_exists(self, name: str) -> bool:
        return await self.store.find_unique(name=name) is not None

    async def list_all(self) -> List[SubjectReadSchema]:
        """Получить все дисциплины, новые первыми."""
        subjects = await self.store.find_many(order_by=DEFAULT_ORDERING)
        return [SubjectReadSchema.model_validate(s) for s in subjects]

    async def get_by_id(self, subject_id: Any) -> Optional[SubjectReadSchema]:
        """Получить дисциплину по ID; None, если её нет."""
        record_id = parse_record_id(subject_id)
        subject = await self.store.find_unique(id=record_id)
        if subject is None:
            return None
        return SubjectReadSchema.model_validate(subject)

    async def create(self, data: Any) -> SubjectReadSchema:
        """Создать новую дисциплину."""
        payload = as_payload(data)
        require_fields(
            payload, REQUIRED_FIELDS, "Название и ID преподавателя обязательны"
        )
        fields = clean_payload(payload, SUBJECT_FIELDS)

        if await self._name_exists(fields["name"]):
            logger.warning(f"Дисциплина '{fields['name']}' уже существует")
            raise ConflictError("Название дисциплины уже зарегистрировано в системе")

        fields.setdefault("active", True)
        subject = await self.store.create(**fields)
        logger.info(f"Создана дисциплина '{subject.name}' с ID {subject.id}")
        return SubjectReadSchema.model_validate(subject)

    async def update(self, subject_id: Any, data: Any) -> SubjectReadSchema:
        """Частично обновить дисциплину."""
        record_id = parse_record_id(subject_id)
        existing = await self.store.find_unique(id=record_id)
        if existing is None:
            logger.warning(f"Обновление: дисциплина с ID {record_id} не найдена")
            raise NotFoundError(resource_type="Subject", resource_id=record_id)

        patch = clean_payload(as_payload(data), SUBJECT_FIELDS)

        name = patch.get("name")
        if name is not None and name != existing.name and await self._name_exists(name):
            logger.warning(f"Обновление дисциплины {record_id}: название '{name}' занято")
            raise ConflictError("Название уже используется другой дисциплиной")

        subject = await self.store.update(record_id, **patch)
        logger.info(f"Обновлена дисциплина {record_id}")
        return SubjectReadSchema.model_validate(subject)

    async def delete(self, subject_id: Any) -> SubjectReadSchema:
        """Удалить дисциплину навсегда и вернуть её состояние до удаления."""
        record_id = parse_record_id(subject_id)
        existing = await self.store.find_unique(id=record_id)
        if existing is None:
            logger.warning(f"Удаление: дисциплина с ID {record_id} не найдена")
            raise NotFoundError(resource_type="Subject", resource_id=record_id)

        snapshot = SubjectReadSchema.model_validate(existing)
        await self.store.delete(record_id)
        logger.info(f"Удалена дисциплина {record_id}")
        return snapshot


def get_subject_service(session: AsyncSession) -> SubjectService:
    """Собрать сервис дисциплин поверх сессии SQLAlchemy."""
    return SubjectService(SQLAlchemyRecordStore(session, Subject))
