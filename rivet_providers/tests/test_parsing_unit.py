"""Unit tests for JSON parsing with schema validation."""
from __future__ import annotations

import pytest
from pydantic import BaseModel, TypeAdapter

from rivet_providers.base.errors import JSONParseError, TypeValidationError
from rivet_providers.base.parsing import (
    ParseFailure,
    ParseSuccess,
    as_validator,
    is_parsable_json,
    parse_json,
    safe_parse_json,
)


class Point(BaseModel):
    x: int
    y: int


def test_parse_json_without_schema_returns_raw_value():
    assert parse_json('{"a": [1, null]}') == {"a": [1, None]}  # nosec B101 - pytest assert in tests


def test_parse_json_with_model():
    assert parse_json('{"x": 1, "y": 2}', Point) == Point(x=1, y=2)  # nosec B101 - pytest assert in tests


def test_parse_json_with_type_adapter():
    assert parse_json("[1, 2]", TypeAdapter(list[int])) == [1, 2]  # nosec B101 - pytest assert in tests


def test_parse_json_raises_on_syntax_error():
    with pytest.raises(JSONParseError) as excinfo:
        parse_json("{oops")
    assert excinfo.value.text == "{oops"  # nosec B101 - pytest assert in tests


def test_parse_json_raises_on_schema_mismatch():
    with pytest.raises(TypeValidationError) as excinfo:
        parse_json('{"x": "no"}', Point)
    assert excinfo.value.value == {"x": "no"}  # nosec B101 - pytest assert in tests


def test_safe_parse_json_success_keeps_raw_value():
    result = safe_parse_json('{"x": 1, "y": 2}', Point)
    assert isinstance(result, ParseSuccess) and result.success  # nosec B101 - pytest assert in tests
    assert result.raw_value == {"x": 1, "y": 2}  # nosec B101 - pytest assert in tests


@pytest.mark.parametrize("text,error_type", [("", JSONParseError), ("[1]", TypeValidationError)])
def test_safe_parse_json_never_raises(text, error_type):
    result = safe_parse_json(text, Point)
    assert isinstance(result, ParseFailure) and not result.success  # nosec B101 - pytest assert in tests
    assert isinstance(result.error, error_type)  # nosec B101 - pytest assert in tests
    assert result.raw_text == text  # nosec B101 - pytest assert in tests


def test_callable_schema():
    def positive(value):
        if value <= 0:
            raise ValueError("must be positive")
        return value

    assert safe_parse_json("3", positive).value == 3  # nosec B101 - pytest assert in tests
    assert not safe_parse_json("-3", positive).success  # nosec B101 - pytest assert in tests


def test_unsupported_schema_type():
    with pytest.raises(TypeError):
        as_validator(42)
    assert not safe_parse_json("1", 42).success  # nosec B101 - pytest assert in tests


def test_is_parsable_json():
    assert is_parsable_json("null")  # nosec B101 - pytest assert in tests
    assert not is_parsable_json("{")  # nosec B101 - pytest assert in tests
