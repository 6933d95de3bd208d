"""FastMCP server exposing one tool per Coolify resource family."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from coolify_mcp.core.errors import CoolifyError, format_error_for_mcp
from coolify_mcp.core.handlers import (
    HANDLER_TYPES,
    ApplicationOperation,
    DatabaseOperation,
    DeploymentOperation,
    OperationRequest,
    PrivateKeyOperation,
    ProjectOperation,
    ServerOperation,
    ServiceOperation,
    SystemOperation,
    build_handler,
)
from coolify_mcp.core.ports.commands import CommandRunner
from coolify_mcp.core.ports.platform import CoolifyPlatform

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = (
    "Coolify MCP server is running but not configured. Please set COOLIFY_API_URL and "
    "COOLIFY_API_TOKEN environment variables to enable Coolify API access."
)


def _redacted(request: OperationRequest) -> dict[str, Any]:
    return {
        "operation": request.operation,
        "id": request.id,
        "secondary_id": request.secondary_id,
        "body": "<redacted>" if request.body else None,
        "query": request.query,
    }


def create_mcp_server(
    api: CoolifyPlatform | None,
    command_runner: CommandRunner | None = None,
    config_error: str | None = None,
) -> FastMCP:
    """Create a FastMCP server wired to the given Coolify client.

    Without a client only ``ping`` and ``config_status`` are registered.
    """

    mcp = FastMCP(
        "coolify-mcp",
        instructions="Manage a Coolify instance: applications, databases, services, projects, servers, "
        "deployments, private keys and system endpoints. Request bodies are JSON strings.",
    )

    @mcp.tool()
    async def ping(random_string: str | None = None) -> str:
        """Check that the server is up. The argument is ignored."""
        return "Coolify MCP server is running and connected!"

    if api is None:

        @mcp.tool()
        async def config_status() -> str:
            """Explain why Coolify tools are unavailable."""
            if config_error:
                return f"{NOT_CONFIGURED_MESSAGE}\n\n{config_error}"
            return NOT_CONFIGURED_MESSAGE

        return mcp

    handlers = {name: build_handler(name, api, command_runner) for name in HANDLER_TYPES}

    async def _invoke(resource: str, request: OperationRequest) -> str:
        logger.debug("%s tool received %s", resource, _redacted(request))
        try:
            envelope = await handlers[resource].handle(request)
        except CoolifyError as exc:
            logger.debug("%s tool failed: %s", resource, exc.message)
            raise ToolError(json.dumps(format_error_for_mcp(exc), indent=2)) from exc
        return json.dumps(envelope, indent=2, default=str)

    @mcp.tool()
    async def applications(
        operation: ApplicationOperation,
        id: str | None = None,
        secondary_id: str | None = None,
        body: str | None = None,
        query: str | None = None,
    ) -> str:
        """Manage applications: create from git, Dockerfile, image or compose; update, delete, logs,
        lifecycle, environment variables and container commands.

        id: application UUID. secondary_id: environment variable UUID for update_env/delete_env.
        body: JSON request body; for execute_command use {"command": "..."}.
        query: JSON query for get_logs, e.g. {"lines": 100}.
        """
        return await _invoke(
            "applications",
            OperationRequest(operation, id=id, secondary_id=secondary_id, body=body, query=query),
        )

    @mcp.tool()
    async def databases(
        operation: DatabaseOperation,
        id: str | None = None,
        body: str | None = None,
    ) -> str:
        """Manage databases (PostgreSQL, MySQL, MariaDB, MongoDB, Redis, KeyDB, ClickHouse, Dragonfly).

        id: database UUID, required for all operations except list, create_* and get_database_types.
        body: JSON request body for create_* and update.
        """
        return await _invoke("databases", OperationRequest(operation, id=id, body=body))

    @mcp.tool()
    async def services(
        operation: ServiceOperation,
        id: str | None = None,
        secondary_id: str | None = None,
        body: str | None = None,
    ) -> str:
        """Manage one-click services such as WordPress, Ghost or MinIO, including environment variables.

        id: service UUID. secondary_id: environment variable UUID for update_env/delete_env.
        body: JSON request body; optional for delete, where it carries cleanup flags.
        """
        return await _invoke(
            "services",
            OperationRequest(operation, id=id, secondary_id=secondary_id, body=body),
        )

    @mcp.tool()
    async def projects(
        operation: ProjectOperation,
        id: str | None = None,
        secondary_id: str | None = None,
        body: str | None = None,
    ) -> str:
        """Manage projects that group applications, databases and services.

        id: project UUID. secondary_id: environment name or UUID for the environment operation.
        """
        return await _invoke(
            "projects",
            OperationRequest(operation, id=id, secondary_id=secondary_id, body=body),
        )

    @mcp.tool()
    async def servers(
        operation: ServerOperation,
        id: str | None = None,
        body: str | None = None,
    ) -> str:
        """Manage servers, validate connectivity and inspect resources and domains."""
        return await _invoke("servers", OperationRequest(operation, id=id, body=body))

    @mcp.tool()
    async def deployments(
        operation: DeploymentOperation,
        id: str | None = None,
        query: str | None = None,
    ) -> str:
        """Inspect deployments and trigger new ones.

        id: deployment UUID for get, application UUID for list_by_app.
        query: JSON for deploy, e.g. {"uuid": "...", "force": true} or {"tag": "..."}.
        """
        return await _invoke("deployments", OperationRequest(operation, id=id, query=query))

    @mcp.tool()
    async def private_keys(
        operation: PrivateKeyOperation,
        id: str | None = None,
        body: str | None = None,
    ) -> str:
        """Manage SSH private keys used for servers and repository access."""
        return await _invoke("private_keys", OperationRequest(operation, id=id, body=body))

    @mcp.tool()
    async def system(operation: SystemOperation) -> str:
        """Version, health check, API enable/disable and the global resource list."""
        return await _invoke("system", OperationRequest(operation))

    return mcp
