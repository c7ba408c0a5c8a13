# -*- coding: utf-8 -*-
"""
edubase/api/v1/questions/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
HTTP-обёртка над QuestionService.

Идентификатор из пути передаётся в сервис строкой: проверку ("abc", 0, -1)
выполняет сервис, ошибки сервиса сами являются HTTPException.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from edubase.clients.database_client import get_db
from edubase.domain.schemas import (QuestionCreateSchema, QuestionReadSchema,
                                    QuestionUpdateSchema)
from edubase.service.questions import QuestionService, get_question_service
from edubase.utils.exceptions import NotFoundError

router = APIRouter(
    prefix="/questions",
    tags=["❓ Вопросы"],
)


def question_service(session: AsyncSession = Depends(get_db)) -> QuestionService:
    return get_question_service(session)


@router.get("", response_model=List[QuestionReadSchema])
async def list_questions_endpoint(
    service: QuestionService = Depends(question_service),
):
    """Получить все вопросы, новые первыми."""
    return await service.list_all()


@router.get("/{question_id}", response_model=QuestionReadSchema)
async def get_question_endpoint(
    question_id: str,
    service: QuestionService = Depends(question_service),
):
    """Получить вопрос по идентификатору."""
    question = await service.get_by_id(question_id)
    if question is None:
        raise NotFoundError(resource_type="Question", resource_id=question_id)
    return question


@router.post(
    "",
    response_model=QuestionReadSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_question_endpoint(
    payload: QuestionCreateSchema,
    service: QuestionService = Depends(question_service),
):
    """Создать вопрос."""
    return await service.create(payload)


@router.patch("/{question_id}", response_model=QuestionReadSchema)
async def update_question_endpoint(
    question_id: str,
    payload: QuestionUpdateSchema,
    service: QuestionService = Depends(question_service),
):
    """Частично обновить вопрос: применяются только переданные поля."""
    return await service.update(question_id, payload)


@router.delete("/{question_id}", response_model=QuestionReadSchema)
async def delete_question_endpoint(
    question_id: str,
    service: QuestionService = Depends(question_service),
):
    """Удалить вопрос навсегда; в ответе состояние вопроса до удаления."""
    return await service.delete(question_id)
