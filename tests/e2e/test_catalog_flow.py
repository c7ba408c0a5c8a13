# -*- coding: utf-8 -*-
"""
E2E тест: дисциплина и вопрос от создания до удаления
"""

import pytest

from edubase.utils.exceptions import ConflictError, ValidationError


@pytest.mark.asyncio
async def test_subject_and_question_lifecycle(subject_service, question_service):
    # Дисциплина
    subject = await subject_service.create({"name": "Algebra", "instructor_id": 7})
    assert subject.id > 0
    assert subject.active is True

    # Вопрос в этой дисциплине
    question = await question_service.create(
        {
            "statement": "2+2=?",
            "difficulty": 1,
            "correct_answer": "4",
            "subject_id": subject.id,
            "author_id": 3,
        }
    )
    assert question.subject_id == subject.id

    # Повтор формулировки
    with pytest.raises(ConflictError):
        await question_service.create(
            {
                "statement": "2+2=?",
                "difficulty": 2,
                "correct_answer": "four",
                "subject_id": subject.id,
                "author_id": 3,
            }
        )

    # Сложность вне диапазона
    with pytest.raises(ValidationError):
        await question_service.update(question.id, {"difficulty": 9})

    # Удаление дисциплины
    snapshot = await subject_service.delete(subject.id)
    assert snapshot.id == subject.id
    assert await subject_service.get_by_id(subject.id) is None


@pytest.mark.asyncio
async def test_lifecycle_over_http(async_client):
    subject = (
        await async_client.post(
            "/api/v1/subjects", json={"name": "Algebra", "instructor_id": 7}
        )
    ).json()

    payload = {
        "statement": "2+2=?",
        "difficulty": 1,
        "correct_answer": "4",
        "subject_id": subject["id"],
        "author_id": 3,
    }
    created = await async_client.post("/api/v1/questions", json=payload)
    assert created.status_code == 201

    duplicate = await async_client.post("/api/v1/questions", json=payload)
    assert duplicate.status_code == 409

    too_hard = await async_client.patch(
        f"/api/v1/questions/{created.json()['id']}", json={"difficulty": 9}
    )
    assert too_hard.status_code == 422

    deleted = await async_client.delete(f"/api/v1/subjects/{subject['id']}")
    assert deleted.status_code == 200
    gone = await async_client.get(f"/api/v1/subjects/{subject['id']}")
    assert gone.status_code == 404
