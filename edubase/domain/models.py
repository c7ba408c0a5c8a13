# -*- coding: utf-8 -*-
"""
edubase/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~
ORM-модели предметной области: дисциплины и вопросы.

Уникальность названия дисциплины и формулировки вопроса, а также диапазон
сложности продублированы ограничениями на уровне базы данных.
"""

from datetime import datetime, timezone

from sqlalchemy import (Boolean, CheckConstraint, DateTime, ForeignKey,
                        Integer, Text)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

# Верхняя граница колонок Integer (int4 в PostgreSQL)
MAX_INTEGER = 2_147_483_647


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """Поля created_at / updated_at, заполняемые на стороне приложения."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )


class Subject(TimestampMixin, Base):
    """Учебная дисциплина."""

    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    instructor_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Subject id={self.id} name={self.name!r}>"


class Question(TimestampMixin, Base):
    """Вопрос банка заданий, привязанный к дисциплине и автору."""

    __tablename__ = "questions"
    __table_args__ = (
        CheckConstraint(
            f"difficulty BETWEEN {MIN_DIFFICULTY} AND {MAX_DIFFICULTY}",
            name="ck_questions_difficulty_range",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    statement: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    difficulty: Mapped[int] = mapped_column(Integer, nullable=False)
    correct_answer: Mapped[str] = mapped_column(Text, nullable=False)
    subject_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("subjects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Question id={self.id} subject_id={self.subject_id}>"
