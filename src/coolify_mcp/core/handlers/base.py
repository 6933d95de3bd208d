"""Operation routing shared by every resource family."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from coolify_mcp.core.api_wrapper import safe_api_call
from coolify_mcp.core.errors import CoolifyError
from coolify_mcp.core.ports.platform import CoolifyPlatform
from coolify_mcp.core.validation import (
    parse_json_body,
    parse_json_query,
    validate_coolify_id,
    validate_operation,
    validate_path_segment,
    validate_required_params,
)

logger = logging.getLogger(__name__)

Envelope = dict[str, Any]


@dataclass(frozen=True)
class OperationRequest:
    operation: str
    id: str | None = None
    secondary_id: str | None = None
    body: str | None = None
    query: str | None = None


@dataclass(frozen=True)
class Route:
    """Which client coroutine an operation calls and what it needs.

    ``path`` names the path parameters filled from ``id`` and then
    ``secondary_id``; each one present makes the matching field required.
    """

    endpoint: str
    path: tuple[str, ...] = ()
    body: bool = False
    optional_body_as_query: bool = False
    query: bool = False
    secondary_is_name: bool = False


class ResourceHandler:
    """Validates an ``OperationRequest`` and dispatches it to one endpoint."""

    resource: ClassVar[str]
    operations: ClassVar[type[StrEnum]]
    routes: ClassVar[Mapping[str, Route]]

    def __init__(self, api: CoolifyPlatform) -> None:
        self._api = api

    @classmethod
    def allowed_operations(cls) -> list[str]:
        return [op.value for op in cls.operations]

    async def handle(self, request: OperationRequest) -> Envelope:
        try:
            validate_operation(request.operation, self.allowed_operations())
            operation = self.operations(request.operation)
            logger.debug("%s: dispatching %s", self.resource, operation.value)
            route = self.routes.get(operation)
            if route is None:
                return await self.handle_local(operation, request)
            return await self._dispatch(route, request)
        except CoolifyError:
            raise
        except Exception as exc:
            raise CoolifyError(
                f"{self.resource.replace('_', ' ').capitalize()} tool error: {exc}",
                500,
                {"operation": request.operation},
            ) from exc

    async def handle_local(self, operation: StrEnum, request: OperationRequest) -> Envelope:
        """Answer operations that have no route. Subclasses override."""
        raise CoolifyError(f"Unhandled operation: {operation.value}", 500, {"operation": operation.value})

    async def _dispatch(self, route: Route, request: OperationRequest) -> Envelope:
        fields = {"id": request.id, "secondary_id": request.secondary_id}
        required = list(fields)[: len(route.path)]
        if route.body:
            required.append("body")
        validate_required_params({**fields, "body": request.body}, required)

        kwargs: dict[str, Any] = {}
        if route.path:
            kwargs["path"] = self._path_params(route, request)
        if route.body:
            kwargs["body"] = parse_json_body(request.body)
        if route.optional_body_as_query and request.body:
            kwargs["query"] = parse_json_query(request.body, "body")
        if route.query:
            kwargs["query"] = parse_json_query(request.query)

        endpoint = getattr(self._api, route.endpoint)
        data = await safe_api_call(lambda: endpoint(**kwargs))
        return {"data": data}

    def _path_params(self, route: Route, request: OperationRequest) -> dict[str, str]:
        values = (request.id, request.secondary_id)
        params: dict[str, str] = {}
        for position, name in enumerate(route.path):
            value = values[position]
            field = "id" if position == 0 else "secondary_id"
            if position == 1 and route.secondary_is_name:
                params[name] = validate_path_segment(value, field)
            else:
                validate_coolify_id(value, field)
                params[name] = value  # type: ignore[assignment]
        return params
