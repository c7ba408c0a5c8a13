# -*- coding: utf-8 -*-
"""
edubase/api/v1/subjects/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
HTTP-обёртка над SubjectService.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from edubase.clients.database_client import get_db
from edubase.domain.schemas import (SubjectCreateSchema, SubjectReadSchema,
                                    SubjectUpdateSchema)
from edubase.service.subjects import SubjectService, get_subject_service
from edubase.utils.exceptions import NotFoundError

router = APIRouter(
    prefix="/subjects",
    tags=["📚 Дисциплины"],
)


def subject_service(session: AsyncSession = Depends(get_db)) -> SubjectService:
    return get_subject_service(session)


@router.get("", response_model=List[SubjectReadSchema])
async def list_subjects_endpoint(
    service: SubjectService = Depends(subject_service),
):
    """Получить все дисциплины, новые первыми."""
    return await service.list_all()


@router.get("/{subject_id}", response_model=SubjectReadSchema)
async def get_subject_endpoint(
    subject_id: str,
    service: SubjectService = Depends(subject_service),
):
    """Получить дисциплину по идентификатору."""
    subject = await service.get_by_id(subject_id)
    if subject is None:
        raise NotFoundError(resource_type="Subject", resource_id=subject_id)
    return subject


@router.post(
    "",
    response_model=SubjectReadSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_subject_endpoint(
    payload: SubjectCreateSchema,
    service: SubjectService = Depends(subject_service),
):
    """Создать дисциплину."""
    return await service.create(payload)


@router.patch("/{subject_id}", response_model=SubjectReadSchema)
async def update_subject_endpoint(
    subject_id: str,
    payload: SubjectUpdateSchema,
    service: SubjectService = Depends(subject_service),
):
    """Частично обновить дисциплину."""
    return await service.update(subject_id, payload)


@router.delete("/{subject_id}", response_model=SubjectReadSchema)
async def delete_subject_endpoint(
    subject_id: str,
    service: SubjectService = Depends(subject_service),
):
    """Удалить дисциплину навсегда; в ответе состояние до удаления."""
    return await service.delete(subject_id)
