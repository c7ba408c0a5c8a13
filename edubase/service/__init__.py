# -*- coding: utf-8 -*-
"""
Сервисы каталога: вопросы и дисциплины.
"""

from .questions import QuestionService, get_question_service
from .subjects import SubjectService, get_subject_service

__all__ = [
    "QuestionService",
    "SubjectService",
    "get_question_service",
    "get_subject_service",
]
