"""Tests for the MCP server tool definitions."""

from __future__ import annotations

import inspect
import json
from unittest.mock import AsyncMock

import pytest
from fastmcp.exceptions import ToolError

from coolify_mcp.core.handlers import ApplicationOperation, DatabaseOperation, ServiceOperation, SystemOperation
from coolify_mcp.mcp.server import NOT_CONFIGURED_MESSAGE, create_mcp_server

APP_UUID = "abcd1234efgh5678"

FAMILY_TOOLS = {
    "applications",
    "databases",
    "services",
    "projects",
    "servers",
    "deployments",
    "private_keys",
    "system",
}


def _tool(server, name: str):  # type: ignore[no-untyped-def]
    return server._tool_manager._tools[name].fn  # type: ignore[attr-defined]


class TestMcpServerCreation:
    def test_creates_server(self, api: AsyncMock, command_runner: AsyncMock) -> None:
        server = create_mcp_server(api, command_runner)
        assert server.name == "coolify-mcp"

    def test_server_has_family_tools(self, api: AsyncMock) -> None:
        server = create_mcp_server(api)
        tool_names = {t.name for t in server._tool_manager._tools.values()}
        assert tool_names == FAMILY_TOOLS | {"ping"}

    def test_unconfigured_server_only_reports_status(self) -> None:
        server = create_mcp_server(None, config_error="COOLIFY_API_URL: Field required")
        tool_names = {t.name for t in server._tool_manager._tools.values()}
        assert tool_names == {"ping", "config_status"}

    def test_operation_parameter_is_enumerated(self, api: AsyncMock) -> None:
        server = create_mcp_server(api)
        sig = inspect.signature(_tool(server, "applications"))
        assert sig.parameters["operation"].annotation in (ApplicationOperation, "ApplicationOperation")
        assert sig.parameters["id"].default is None


class TestToolCalls:
    @pytest.mark.asyncio
    async def test_ping(self, api: AsyncMock) -> None:
        server = create_mcp_server(api)
        assert "running" in await _tool(server, "ping")()

    @pytest.mark.asyncio
    async def test_success_returns_pretty_envelope(self, api: AsyncMock) -> None:
        api.list_applications.return_value = [{"uuid": APP_UUID}]
        server = create_mcp_server(api)

        text = await _tool(server, "applications")(ApplicationOperation.LIST)

        assert json.loads(text) == {"data": [{"uuid": APP_UUID}]}
        assert "\n  " in text

    @pytest.mark.asyncio
    async def test_body_is_forwarded(self, api: AsyncMock) -> None:
        server = create_mcp_server(api)
        await _tool(server, "databases")(DatabaseOperation.CREATE_REDIS, body='{"name": "cache"}')
        api.create_database_redis.assert_awaited_once_with(body={"name": "cache"})

    @pytest.mark.asyncio
    async def test_catalog_operation(self, api: AsyncMock) -> None:
        server = create_mcp_server(api)
        text = await _tool(server, "services")(ServiceOperation.GET_SERVICE_TYPES)
        assert json.loads(text)["data"]["count"] > 70

    @pytest.mark.asyncio
    async def test_failure_raises_tool_error_with_envelope(self, api: AsyncMock) -> None:
        server = create_mcp_server(api)

        with pytest.raises(ToolError) as exc_info:
            await _tool(server, "applications")(ApplicationOperation.GET)

        envelope = json.loads(str(exc_info.value))
        assert "required" in envelope["error"]
        assert envelope["details"]["type"] == "ValidationError"
        assert envelope["details"]["statusCode"] == 400
        api.get_application_by_uuid.assert_not_called()

    @pytest.mark.asyncio
    async def test_execute_command_uses_runner(self, api: AsyncMock, command_runner: AsyncMock) -> None:
        server = create_mcp_server(api, command_runner)
        text = await _tool(server, "applications")(
            ApplicationOperation.EXECUTE_COMMAND, id=APP_UUID, body='{"command": "ls"}'
        )
        assert json.loads(text) == {"data": {"output": "ok"}}
        command_runner.execute.assert_awaited_once_with(APP_UUID, "ls")

    @pytest.mark.asyncio
    async def test_system_tool(self, api: AsyncMock) -> None:
        api.version.return_value = "4.0.0-beta.380"
        server = create_mcp_server(api)
        assert json.loads(await _tool(server, "system")(SystemOperation.VERSION)) == {"data": "4.0.0-beta.380"}

    @pytest.mark.asyncio
    async def test_config_status_explains_problem(self) -> None:
        server = create_mcp_server(None, config_error="COOLIFY_API_URL: Field required")
        text = await _tool(server, "config_status")()
        assert text.startswith(NOT_CONFIGURED_MESSAGE)
        assert "COOLIFY_API_URL: Field required" in text
