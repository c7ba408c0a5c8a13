# -*- coding: utf-8 -*-
"""
edubase/domain/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic-схемы дисциплин и вопросов.

Read-схемы задают фиксированную проекцию полей, которую возвращают сервисы.
Update-схемы состоят только из необязательных полей: сервисы применяют лишь
те ключи, которые были переданы явно (``model_dump(exclude_unset=True)``).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from edubase.domain.models import MAX_DIFFICULTY, MIN_DIFFICULTY

# ---------------------------------------------------------------------------
# Subjects
# ---------------------------------------------------------------------------


class SubjectCreateSchema(BaseModel):
    """Схема создания дисциплины."""

    name: str = Field(..., description="Название дисциплины")
    instructor_id: int = Field(..., description="Идентификатор преподавателя")
    active: Optional[bool] = Field(
        default=None, description="Признак активности (по умолчанию true)"
    )


class SubjectUpdateSchema(BaseModel):
    """Схема частичного обновления дисциплины."""

    name: Optional[str] = Field(None, description="Название дисциплины")
    instructor_id: Optional[int] = Field(
        None, description="Идентификатор преподавателя"
    )
    active: Optional[bool] = Field(None, description="Признак активности")


class SubjectReadSchema(BaseModel):
    """Схема чтения дисциплины."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    active: bool
    instructor_id: int
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------


class QuestionCreateSchema(BaseModel):
    """Схема создания вопроса."""

    statement: str = Field(..., description="Формулировка вопроса")
    difficulty: int = Field(
        ...,
        description=f"Сложность от {MIN_DIFFICULTY} до {MAX_DIFFICULTY}",
    )
    correct_answer: str = Field(..., description="Правильный ответ")
    subject_id: int = Field(..., description="Идентификатор дисциплины")
    author_id: int = Field(..., description="Идентификатор автора")
    active: Optional[bool] = Field(
        default=None, description="Признак активности (по умолчанию true)"
    )


class QuestionUpdateSchema(BaseModel):
    """Схема частичного обновления вопроса."""

    statement: Optional[str] = Field(None, description="Формулировка вопроса")
    difficulty: Optional[int] = Field(None, description="Сложность")
    correct_answer: Optional[str] = Field(None, description="Правильный ответ")
    subject_id: Optional[int] = Field(None, description="Идентификатор дисциплины")
    author_id: Optional[int] = Field(None, description="Идентификатор автора")
    active: Optional[bool] = Field(None, description="Признак активности")


class QuestionReadSchema(BaseModel):
    """Схема чтения вопроса."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    statement: str
    difficulty: int
    correct_answer: str
    subject_id: int
    author_id: int
    active: bool
    created_at: datetime
    updated_at: datetime
