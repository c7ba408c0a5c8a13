# -*- coding: utf-8 -*-
"""
edubase/service/validation.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие проверки входных данных для сервисов дисциплин и вопросов.

Проверки явные: наличие ключа, тип и значение поля. Пустая строка и ``0``
не считаются "отсутствующими", а отклоняются как некорректные значения.
"""

from __future__ import annotations

import enum
from typing import Any, Dict, Iterable, Mapping

from pydantic import BaseModel

from edubase.domain.models import MAX_INTEGER
from edubase.utils.exceptions import InvalidArgumentError, ValidationError


class FieldKind(str, enum.Enum):
    """Виды полей, которые умеют проверять сервисы."""

    TEXT = "text"
    INTEGER = "integer"
    POSITIVE_INTEGER = "positive_integer"
    BOOLEAN = "boolean"


def parse_record_id(value: Any) -> int:
    """
    Проверить и привести идентификатор записи.

    Принимаются положительные целые числа и строки с такими числами
    (например, параметр пути "42"). Булевы значения, дробные числа,
    нечисловые строки, ноль и отрицательные значения отклоняются.
    Идентификатор больше MAX_INTEGER корректен, просто такой записи нет.

    Raises:
        InvalidArgumentError: если идентификатор некорректен.
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError()

    if isinstance(value, int):
        record_id = value
    elif isinstance(value, float) and value.is_integer():
        record_id = int(value)
    elif isinstance(value, str):
        try:
            record_id = int(value.strip())
        except ValueError:
            raise InvalidArgumentError() from None
    else:
        raise InvalidArgumentError()

    if record_id <= 0:
        raise InvalidArgumentError()
    return record_id


def as_payload(data: Any) -> Dict[str, Any]:
    """
    Привести входные данные к словарю.

    Для pydantic-схем учитываются только явно переданные поля, что позволяет
    отличать "поле не передано" от "поле передано со значением".
    """
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    if isinstance(data, Mapping):
        return dict(data)
    raise ValidationError("Данные запроса должны быть объектом")


def require_fields(payload: Mapping[str, Any], fields: Iterable[str], message: str) -> None:
    """Убедиться, что все обязательные поля переданы и не равны None."""
    if any(payload.get(name) is None for name in fields):
        raise ValidationError(message)


def clean_field(name: str, kind: FieldKind, value: Any) -> Any:
    """
    Проверить значение одного поля и вернуть его нормализованным.

    Строки обрезаются по краям; пустая строка после обрезки недопустима.
    """
    if value is None:
        raise ValidationError(f"Поле {name} не может быть null")

    if kind is FieldKind.TEXT:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"Поле {name} должно быть непустой строкой")
        return value.strip()

    if kind is FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            raise ValidationError(f"Поле {name} должно быть логическим значением")
        return value

    # bool является подклассом int, поэтому отсекаем его явно
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"Поле {name} должно быть целым числом")
    if abs(value) > MAX_INTEGER:
        raise ValidationError(f"Поле {name} выходит за допустимый диапазон")
    if kind is FieldKind.POSITIVE_INTEGER and value <= 0:
        raise ValidationError(f"Поле {name} должно быть положительным числом")
    return value


def clean_payload(
    payload: Mapping[str, Any], schema: Mapping[str, FieldKind]
) -> Dict[str, Any]:
    """
    Оставить только известные поля и проверить каждое из них.

    Неизвестные ключи отбрасываются.
    """
    return {
        name: clean_field(name, kind, payload[name])
        for name, kind in schema.items()
        if name in payload
    }
