# -*- coding: utf-8 -*-
"""
Фикстуры для тестирования каталога вопросов
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from edubase.domain.models import Question, Subject
from edubase.repository.base import SQLAlchemyRecordStore


async def create_test_subject(
    session: AsyncSession,
    name: str = "Algebra",
    instructor_id: int = 7,
    active: bool = True,
) -> Subject:
    """Создать тестовую дисциплину напрямую через хранилище"""
    store = SQLAlchemyRecordStore(session, Subject)
    return await store.create(name=name, instructor_id=instructor_id, active=active)


async def create_test_questions(
    session: AsyncSession,
    subject_id: int,
    count: int = 3,
    author_id: int = 3,
) -> List[Question]:
    """Создать тестовые вопросы дисциплины"""
    store = SQLAlchemyRecordStore(session, Question)
    questions = []
    for i in range(count):
        question = await store.create(
            statement=f"Test question {i + 1}",
            difficulty=(i % 5) + 1,
            correct_answer=f"Answer {i + 1}",
            subject_id=subject_id,
            author_id=author_id,
            active=True,
        )
        questions.append(question)
    return questions


def question_payload(subject_id: int | None = None, /, **overrides) -> dict:
    """Корректные данные для создания вопроса"""
    payload = {
        "statement": "2+2=?",
        "difficulty": 1,
        "correct_answer": "4",
        "subject_id": subject_id,
        "author_id": 3,
    }
    payload.update(overrides)
    return payload
