import json
import re
from collections.abc import Iterable, Mapping
from typing import Any

from coolify_mcp.core.errors import ValidationError

_COOLIFY_ID_RE = re.compile(r"^[a-z0-9]{16,40}$", re.IGNORECASE)
_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE)
_PATH_SEGMENT_RE = re.compile(r"^(?!\.{1,2}$)[A-Za-z0-9._-]+$")
_BODY_ECHO_LIMIT = 200


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def validate_required_params(params: Mapping[str, Any], required: Iterable[str]) -> None:
    """Raise if any of *required* is absent, ``None`` or empty, naming all of them."""
    missing = [name for name in required if _is_missing(params.get(name))]
    if missing:
        raise ValidationError(
            f"Missing required parameters: {', '.join(missing)}",
            {"missing": missing, "provided": [k for k, v in params.items() if v is not None]},
        )


def parse_json_body(raw: str | None) -> dict[str, Any] | list[Any]:
    """Decode a raw JSON request body.

    Scalars and ``null`` are rejected; objects and arrays are returned as-is.
    On a decode failure only the first 200 characters are echoed back.
    """
    if raw is None or raw.strip() == "":
        raise ValidationError("Request body is required and cannot be empty")

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        echo = raw[:_BODY_ECHO_LIMIT] + ("..." if len(raw) > _BODY_ECHO_LIMIT else "")
        raise ValidationError("Invalid JSON in request body", {"body": echo, "parseError": str(exc)}) from exc

    if not isinstance(parsed, dict | list):
        raise ValidationError("Request body must be a valid JSON object")
    return parsed


def parse_json_query(raw: str | None, param_name: str = "query") -> dict[str, Any] | None:
    """Decode optional query parameters; blank means none, anything but an object is rejected."""
    if raw is None or raw.strip() == "":
        return None

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        echo = raw[:_BODY_ECHO_LIMIT] + ("..." if len(raw) > _BODY_ECHO_LIMIT else "")
        raise ValidationError(
            f"Invalid JSON in parameter '{param_name}'",
            {"paramName": param_name, param_name: echo, "parseError": str(exc)},
        ) from exc

    if not isinstance(parsed, dict):
        raise ValidationError(
            f"Parameter '{param_name}' must be a JSON object",
            {"paramName": param_name, "actualType": type(parsed).__name__},
        )
    return parsed


def validate_path_segment(value: Any, param_name: str) -> str:
    """Accept a name used verbatim as one URL path segment; ``.``/``..`` and separators are rejected."""
    return validate_string(value, param_name, required=True, min_length=1, max_length=255, pattern=_PATH_SEGMENT_RE)


def validate_coolify_id(value: Any, param_name: str) -> None:
    if not value or not isinstance(value, str):
        raise ValidationError(
            f"Parameter '{param_name}' is required and must be a valid Coolify ID",
            {"paramName": param_name, "value": value},
        )
    if not _COOLIFY_ID_RE.match(value):
        raise ValidationError(
            f"Invalid Coolify ID format for parameter '{param_name}'. Expected alphanumeric string of 16-40 characters",
            {"paramName": param_name, "value": value},
        )


def validate_uuid(value: Any, param_name: str) -> None:
    """Canonical RFC 4122 check. Coolify identifiers are not UUIDs; prefer ``validate_coolify_id``."""
    if not isinstance(value, str) or not _UUID_RE.match(value):
        raise ValidationError(
            f"Invalid UUID format for parameter '{param_name}'. Expected format: xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx",
            {"paramName": param_name, "value": value},
        )


def validate_operation(operation: Any, allowed: Iterable[str]) -> None:
    allowed = list(allowed)
    if operation not in allowed:
        raise ValidationError(
            f"Invalid operation '{operation}'. Allowed operations: {', '.join(allowed)}",
            {"operation": operation, "allowedOperations": allowed},
        )


def validate_string(
    value: Any,
    param_name: str,
    *,
    required: bool = False,
    min_length: int | None = None,
    max_length: int | None = None,
    pattern: re.Pattern[str] | str | None = None,
) -> str:
    if value is None:
        if required:
            raise ValidationError(f"Parameter '{param_name}' is required")
        return ""

    if not isinstance(value, str):
        raise ValidationError(
            f"Parameter '{param_name}' must be a string",
            {"paramName": param_name, "actualType": type(value).__name__, "value": value},
        )

    if min_length is not None and len(value) < min_length:
        raise ValidationError(
            f"Parameter '{param_name}' must be at least {min_length} characters long",
            {"paramName": param_name, "value": value, "minLength": min_length, "actualLength": len(value)},
        )

    if max_length is not None and len(value) > max_length:
        raise ValidationError(
            f"Parameter '{param_name}' must not exceed {max_length} characters",
            {"paramName": param_name, "value": value[:50] + "...", "maxLength": max_length, "actualLength": len(value)},
        )

    if pattern is not None:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        if not compiled.search(value):
            raise ValidationError(
                f"Parameter '{param_name}' does not match required pattern",
                {"paramName": param_name, "value": value, "pattern": compiled.pattern},
            )

    return value


def validate_integer(
    value: Any,
    param_name: str,
    *,
    required: bool = False,
    min: int | None = None,  # noqa: A002
    max: int | None = None,  # noqa: A002
) -> int | None:
    if value is None:
        if required:
            raise ValidationError(f"Parameter '{param_name}' is required")
        return None

    number: int | None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if value.is_integer() else None
    elif isinstance(value, str):
        try:
            number = int(value.strip(), 10)
        except ValueError:
            number = None
    else:
        number = None

    if number is None:
        raise ValidationError(
            f"Parameter '{param_name}' must be a valid integer",
            {"paramName": param_name, "value": value, "actualType": type(value).__name__},
        )

    if min is not None and number < min:
        raise ValidationError(
            f"Parameter '{param_name}' must be at least {min}",
            {"paramName": param_name, "value": number, "min": min},
        )

    if max is not None and number > max:
        raise ValidationError(
            f"Parameter '{param_name}' must not exceed {max}",
            {"paramName": param_name, "value": number, "max": max},
        )

    return number
