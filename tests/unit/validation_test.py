"""Tests for the input validation helpers."""

import pytest

from coolify_mcp.core.errors import ValidationError
from coolify_mcp.core.validation import (
    parse_json_body,
    parse_json_query,
    validate_coolify_id,
    validate_integer,
    validate_operation,
    validate_path_segment,
    validate_required_params,
    validate_string,
    validate_uuid,
)

# -- required params --


def test_required_params_names_every_missing_field() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_required_params({"id": None, "body": "", "name": "x"}, ["id", "body", "name"])
    assert exc_info.value.message == "Missing required parameters: id, body"
    assert exc_info.value.status_code == 400
    assert exc_info.value.context["missing"] == ["id", "body"]


def test_required_params_passes_when_all_present() -> None:
    validate_required_params({"id": "abc"}, ["id"])


# -- JSON body --


def test_parse_json_body_returns_object() -> None:
    assert parse_json_body('{"name": "app"}') == {"name": "app"}


def test_parse_json_body_returns_array() -> None:
    assert parse_json_body('[{"key": "A"}]') == [{"key": "A"}]


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_json_body_rejects_empty(raw: str | None) -> None:
    with pytest.raises(ValidationError, match="cannot be empty"):
        parse_json_body(raw)


def test_parse_json_body_rejects_invalid_json() -> None:
    with pytest.raises(ValidationError, match="Invalid JSON") as exc_info:
        parse_json_body("not json")
    assert exc_info.value.context["body"] == "not json"
    assert "parseError" in exc_info.value.context


def test_parse_json_body_truncates_echo() -> None:
    raw = "{" + "x" * 500
    with pytest.raises(ValidationError) as exc_info:
        parse_json_body(raw)
    echo = exc_info.value.context["body"]
    assert echo == raw[:200] + "..."


@pytest.mark.parametrize("raw", ["42", '"text"', "null", "true"])
def test_parse_json_body_rejects_scalars(raw: str) -> None:
    with pytest.raises(ValidationError, match="valid JSON object"):
        parse_json_body(raw)


# -- query parameters --


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_json_query_blank_is_absent(raw: str | None) -> None:
    assert parse_json_query(raw) is None


def test_parse_json_query_returns_object() -> None:
    assert parse_json_query('{"lines": 20}') == {"lines": 20}


@pytest.mark.parametrize("raw", ["[1, 2]", "42", "null", '"text"'])
def test_parse_json_query_rejects_non_objects(raw: str) -> None:
    with pytest.raises(ValidationError, match="Parameter 'query' must be a JSON object"):
        parse_json_query(raw)


def test_parse_json_query_names_the_parameter() -> None:
    with pytest.raises(ValidationError, match="Invalid JSON in parameter 'body'") as exc_info:
        parse_json_query("{", "body")
    assert exc_info.value.context["paramName"] == "body"


# -- identifiers --


@pytest.mark.parametrize("value", ["abcd1234efgh5678", "A" * 40, "x1" * 12])
def test_coolify_id_accepts_alphanumeric(value: str) -> None:
    validate_coolify_id(value, "id")


@pytest.mark.parametrize("value", ["short", "a" * 41, "abcd-1234-efgh-5678", "abcd1234efgh567!"])
def test_coolify_id_rejects_bad_format(value: str) -> None:
    with pytest.raises(ValidationError, match="Invalid Coolify ID format for parameter 'id'"):
        validate_coolify_id(value, "id")


@pytest.mark.parametrize("value", [None, "", 123])
def test_coolify_id_rejects_missing(value: object) -> None:
    with pytest.raises(ValidationError, match="is required"):
        validate_coolify_id(value, "id")


def test_uuid_accepts_rfc4122() -> None:
    validate_uuid("123e4567-e89b-12d3-a456-426614174000", "id")


def test_uuid_rejects_coolify_id() -> None:
    with pytest.raises(ValidationError, match="Invalid UUID format"):
        validate_uuid("abcd1234efgh5678", "id")


# -- operation --


def test_operation_error_lists_allowed() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_operation("explode", ["list", "get"])
    assert exc_info.value.message == "Invalid operation 'explode'. Allowed operations: list, get"
    assert exc_info.value.context["allowedOperations"] == ["list", "get"]


# -- strings and integers --


def test_string_optional_none_returns_empty() -> None:
    assert validate_string(None, "name") == ""


def test_string_required_none_raises() -> None:
    with pytest.raises(ValidationError, match="'name' is required"):
        validate_string(None, "name", required=True)


def test_string_type_and_bounds() -> None:
    with pytest.raises(ValidationError, match="must be a string"):
        validate_string(5, "name")
    with pytest.raises(ValidationError, match="at least 3"):
        validate_string("ab", "name", min_length=3)
    with pytest.raises(ValidationError, match="must not exceed 3"):
        validate_string("abcd", "name", max_length=3)


def test_string_pattern() -> None:
    assert validate_string("prod", "env", pattern=r"^[a-z]+$") == "prod"
    with pytest.raises(ValidationError, match="does not match"):
        validate_string("Prod!", "env", pattern=r"^[a-z]+$")


@pytest.mark.parametrize(("value", "expected"), [(5, 5), ("42", 42), (3.0, 3), (None, None)])
def test_integer_coerces(value: object, expected: int | None) -> None:
    assert validate_integer(value, "lines") == expected


@pytest.mark.parametrize("value", ["abc", 2.5, True, [1]])
def test_integer_rejects_non_integers(value: object) -> None:
    with pytest.raises(ValidationError, match="must be a valid integer"):
        validate_integer(value, "lines")


def test_integer_bounds() -> None:
    with pytest.raises(ValidationError, match="at least 1"):
        validate_integer(0, "lines", min=1)
    with pytest.raises(ValidationError, match="must not exceed 10"):
        validate_integer(11, "lines", max=10)
    with pytest.raises(ValidationError, match="is required"):
        validate_integer(None, "lines", required=True)


# -- path segments --


@pytest.mark.parametrize("value", ["production", "staging-2", "qa_env", "v1.2", "..."])
def test_path_segment_accepts_names(value: str) -> None:
    assert validate_path_segment(value, "secondary_id") == value


@pytest.mark.parametrize("value", [".", "..", "a/b", "a b", "x?y=1", "%2e%2e", ""])
def test_path_segment_rejects_unsafe(value: str) -> None:
    with pytest.raises(ValidationError, match="secondary_id"):
        validate_path_segment(value, "secondary_id")


def test_path_segment_required() -> None:
    with pytest.raises(ValidationError, match="is required"):
        validate_path_segment(None, "secondary_id")
