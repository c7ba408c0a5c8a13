# -*- coding: utf-8 -*-
"""
edubase/service/questions.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисный слой для работы с вопросами.

Каждая операция линейна: проверка входных данных, при необходимости
предварительная проверка уникальности формулировки, затем обращение к
хранилищу. Предварительная проверка не защищает от гонки двух параллельных
запросов; окончательное решение принимает уникальный индекс в БД, нарушение
которого хранилище превращает в ConflictError.
"""

from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from edubase.config.logger import configure_logger
from edubase.domain.models import MAX_DIFFICULTY, MIN_DIFFICULTY, Question
from edubase.domain.schemas import QuestionReadSchema
from edubase.repository.base import RecordStore, SQLAlchemyRecordStore
from edubase.service.validation import (FieldKind, as_payload, clean_payload,
                                        parse_record_id, require_fields)
from edubase.utils.exceptions import (ConflictError, NotFoundError,
                                      ValidationError)

logger = configure_logger("questions")

QUESTION_FIELDS = {
    "statement": FieldKind.TEXT,
    "difficulty": FieldKind.INTEGER,
    "correct_answer": FieldKind.TEXT,
    "subject_id": FieldKind.POSITIVE_INTEGER,
    "author_id": FieldKind.POSITIVE_INTEGER,
    "active": FieldKind.BOOLEAN,
}
REQUIRED_FIELDS = ("statement", "difficulty", "correct_answer", "subject_id", "author_id")
DEFAULT_ORDERING = ("-created_at", "-id")


def _validate_difficulty(difficulty: int) -> None:
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValidationError(
            f"Сложность должна быть от {MIN_DIFFICULTY} до {MAX_DIFFICULTY}"
        )


class QuestionService:
    """Сервис для работы с вопросами."""

    def __init__(self, store: RecordStore[Question]):
        self.store = store

    async def _statement_exists(self, statement: str) -> bool:
        return await self.store.find_unique(statement=statement) is not None

    async def list_all(self) -> List[QuestionReadSchema]:
        """Получить все вопросы, новые первыми."""
        questions = await self.store.find_many(order_by=DEFAULT_ORDERING)
        logger.debug(f"Получено {len(questions)} вопросов")
        return [QuestionReadSchema.model_validate(q) for q in questions]

    async def get_by_id(self, question_id: Any) -> Optional[QuestionReadSchema]:
        """Получить вопрос по ID; для отсутствующего вопроса возвращает None."""
        record_id = parse_record_id(question_id)
        question = await self.store.find_unique(id=record_id)
        if question is None:
            logger.debug(f"Вопрос с ID {record_id} не найден")
            return None
        return QuestionReadSchema.model_validate(question)

    async def create(self, data: Any) -> QuestionReadSchema:
        """Создать новый вопрос."""
        payload = as_payload(data)
        require_fields(
            payload,
            REQUIRED_FIELDS,
            "Формулировка, сложность, правильный ответ, ID дисциплины и ID автора обязательны",
        )
        fields = clean_payload(payload, QUESTION_FIELDS)
        _validate_difficulty(fields["difficulty"])

        if await self._statement_exists(fields["statement"]):
            logger.warning("Попытка создать вопрос с уже существующей формулировкой")
            raise ConflictError("Формулировка вопроса уже зарегистрирована в системе")

        fields.setdefault("active", True)
        question = await self.store.create(**fields)
        logger.info(f"Создан вопрос с ID {question.id}")
        return QuestionReadSchema.model_validate(question)

    async def update(self, question_id: Any, data: Any) -> QuestionReadSchema:
        """
        Частично обновить вопрос.

        Применяются только явно переданные поля; ``active=False`` применяется,
        отсутствие ключа оставляет значение без изменений.
        """
        record_id = parse_record_id(question_id)
        existing = await self.store.find_unique(id=record_id)
        if existing is None:
            logger.warning(f"Обновление: вопрос с ID {record_id} не найден")
            raise NotFoundError(resource_type="Question", resource_id=record_id)

        patch = clean_payload(as_payload(data), QUESTION_FIELDS)

        statement = patch.get("statement")
        if statement is not None and statement != existing.statement:
            if await self._statement_exists(statement):
                logger.warning(
                    f"Обновление вопроса {record_id}: формулировка уже занята"
                )
                raise ConflictError("Формулировка уже используется другим вопросом")

        if "difficulty" in patch:
            _validate_difficulty(patch["difficulty"])

        question = await self.store.update(record_id, **patch)
        logger.info(f"Обновлен вопрос {record_id}, поля: {sorted(patch)}")
        return QuestionReadSchema.model_validate(question)

    async def delete(self, question_id: Any) -> QuestionReadSchema:
        """Удалить вопрос навсегда и вернуть его состояние до удаления."""
        record_id = parse_record_id(question_id)
        existing = await self.store.find_unique(id=record_id)
        if existing is None:
            logger.warning(f"Удаление: вопрос с ID {record_id} не найден")
            raise NotFoundError(resource_type="Question", resource_id=record_id)

        snapshot = QuestionReadSchema.model_validate(existing)
        await self.store.delete(record_id)
        logger.info(f"Удален вопрос {record_id}")
        return snapshot


def get_question_service(session: AsyncSession) -> QuestionService:
    """Собрать сервис вопросов поверх сессии SQLAlchemy."""
    return QuestionService(SQLAlchemyRecordStore(session, Question))
