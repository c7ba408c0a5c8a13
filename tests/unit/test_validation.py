# -*- coding: utf-8 -*-
"""
Unit тесты для проверок входных данных
"""

import pytest

from edubase.domain.models import MAX_INTEGER
from edubase.domain.schemas import QuestionUpdateSchema
from edubase.service.validation import (FieldKind, as_payload, clean_field,
                                        parse_record_id)
from edubase.utils.exceptions import InvalidArgumentError, ValidationError


@pytest.mark.parametrize("value, expected", [(1, 1), (42, 42), ("7", 7), (" 8 ", 8), (3.0, 3)])
def test_parse_record_id_accepts_positive_integers(value, expected):
    assert parse_record_id(value) == expected


@pytest.mark.parametrize("value", [None, 0, -1, "abc", "", "0", "-4", 2.5, True, False, [1]])
def test_parse_record_id_rejects(value):
    with pytest.raises(InvalidArgumentError):
        parse_record_id(value)


def test_as_payload_keeps_only_explicit_schema_fields():
    payload = as_payload(QuestionUpdateSchema(active=False))

    assert payload == {"active": False}


def test_as_payload_keeps_explicit_none():
    payload = as_payload(QuestionUpdateSchema(statement=None))

    assert payload == {"statement": None}


def test_clean_field_zero_is_a_value_not_missing():
    assert clean_field("difficulty", FieldKind.INTEGER, 0) == 0
    with pytest.raises(ValidationError):
        clean_field("subject_id", FieldKind.POSITIVE_INTEGER, 0)


def test_clean_field_rejects_bool_as_integer():
    with pytest.raises(ValidationError):
        clean_field("author_id", FieldKind.POSITIVE_INTEGER, True)


@pytest.mark.parametrize("value", [2**31 - 1, 3000000000, 2**63])
def test_parse_record_id_accepts_large_ids(value):
    assert parse_record_id(value) == value
    assert parse_record_id(str(value)) == value


def test_clean_field_accepts_column_maximum():
    assert clean_field("author_id", FieldKind.POSITIVE_INTEGER, MAX_INTEGER) == MAX_INTEGER


@pytest.mark.parametrize(
    "kind, value",
    [
        (FieldKind.POSITIVE_INTEGER, MAX_INTEGER + 1),
        (FieldKind.POSITIVE_INTEGER, 2**63),
        (FieldKind.INTEGER, -(2**40)),
    ],
)
def test_clean_field_rejects_values_beyond_column(kind, value):
    with pytest.raises(ValidationError, match="диапазон"):
        clean_field("author_id", kind, value)
