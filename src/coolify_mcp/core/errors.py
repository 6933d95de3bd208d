"""Error taxonomy shared by the handlers and both front ends."""

from __future__ import annotations

import json
import logging
from typing import Any, NoReturn

import httpx

logger = logging.getLogger(__name__)

_NO_RESPONSE_MESSAGE = (
    "No response received from Coolify API server. Please check your connection and server availability."
)


class CoolifyError(Exception):
    """Base error carrying an optional status code and structured context."""

    def __init__(self, message: str, status_code: int | None = None, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.context = context

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "statusCode": self.status_code,
            "context": self.context,
        }


class ValidationError(CoolifyError):
    """Caller input failed a local precondition; never reaches the network."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, 400, context)


class ApiError(CoolifyError):
    """The Coolify API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, status_code, context)


class ConfigurationError(CoolifyError):
    """COOLIFY_API_URL / COOLIFY_API_TOKEN are missing or invalid."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, 0, context)


def _response_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _upstream_message(payload: Any) -> str:
    if isinstance(payload, dict):
        message = payload.get("message") or payload.get("error")
        if message:
            return str(message)
    return "Unknown API error"


def handle_api_error(exc: BaseException) -> NoReturn:
    """Classify *exc* into the taxonomy and raise it. Never returns."""
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        payload = _response_payload(response)
        status = response.status_code
        logger.debug("Coolify API returned %s for %s %s", status, exc.request.method, exc.request.url)
        raise ApiError(
            f"API Error ({status}): {_upstream_message(payload)}",
            status,
            {"response": payload, "url": str(exc.request.url), "method": exc.request.method},
        ) from exc
    if isinstance(exc, httpx.RequestError):
        try:
            request: httpx.Request | None = exc.request
        except RuntimeError:
            request = None
        raise CoolifyError(_NO_RESPONSE_MESSAGE, 0, {"request": request}) from exc
    if isinstance(exc, CoolifyError):
        raise exc
    raise CoolifyError(f"Request setup error: {exc}", 0, {"originalError": repr(exc)}) from exc


def _jsonable(value: Any) -> Any:
    return json.loads(json.dumps(value, default=str))


def format_error_for_mcp(exc: BaseException) -> dict[str, Any]:
    """Render any exception as the ``{error, details}`` envelope."""
    if isinstance(exc, CoolifyError):
        return {
            "error": exc.message,
            "details": {
                "type": exc.name,
                "statusCode": exc.status_code,
                "context": _jsonable(exc.context),
            },
        }
    return {"error": str(exc), "details": {"type": "UnknownError"}}
