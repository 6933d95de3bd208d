"""Tests for the typer CLI: help flags, dispatch, output and exit codes."""

from __future__ import annotations

import json
from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from typer.testing import CliRunner

from coolify_mcp.cli.app import app
from coolify_mcp.cli.common import set_json_output
from coolify_mcp.client.commands import UNSUPPORTED_MESSAGE
from coolify_mcp.core.errors import ApiError, ConfigurationError

runner = CliRunner()

APP_UUID = "abcd1234efgh5678"
ENV_UUID = "zyxw9876vuts5432"


@pytest.fixture
def clients(api: AsyncMock, command_runner: AsyncMock) -> Iterator[tuple[AsyncMock, AsyncMock]]:
    with patch("coolify_mcp.cli.common._get_clients", return_value=(api, command_runner)):
        yield api, command_runner
    set_json_output(False)


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["apps"],
        ["apps", "envs"],
        ["apps", "create-public"],
        ["databases"],
        ["databases", "create-postgresql"],
        ["services"],
        ["services", "envs"],
        ["servers"],
        ["projects"],
        ["deployments"],
        ["private-keys"],
        ["system"],
        ["serve"],
        ["config"],
    ],
    ids=lambda args: "-".join(args) or "root",
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_databases_register_every_engine() -> None:
    result = runner.invoke(app, ["databases", "-h"])
    for engine in ("postgresql", "mysql", "mariadb", "mongodb", "redis", "keydb", "clickhouse", "dragonfly"):
        assert f"create-{engine}" in result.output


class TestOutput:
    def test_list_renders_table(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        api.list_applications.return_value = [{"uuid": APP_UUID, "name": "web", "status": "running"}]

        result = runner.invoke(app, ["apps", "list"])

        assert result.exit_code == 0
        assert "web" in result.output
        assert "(1 rows)" in result.output
        api.aclose.assert_awaited_once()

    def test_json_flag_prints_raw_json(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        api.list_servers.return_value = [{"uuid": APP_UUID, "name": "edge"}]

        result = runner.invoke(app, ["--json", "servers", "list"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [{"uuid": APP_UUID, "name": "edge"}]

    def test_get_prints_object(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        api.get_project_by_uuid.return_value = {"uuid": APP_UUID, "name": "shop"}

        result = runner.invoke(app, ["projects", "get", APP_UUID])

        assert result.exit_code == 0
        assert '"shop"' in result.output
        api.get_project_by_uuid.assert_awaited_once_with(path={"uuid": APP_UUID})


class TestBodies:
    def test_create_public_builds_body_from_flags(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        api.create_public_application.return_value = {"uuid": APP_UUID}

        result = runner.invoke(
            app,
            [
                "apps",
                "create-public",
                "--name",
                "web",
                "--repository",
                "https://github.com/acme/web",
                "--project",
                APP_UUID,
                "--body",
                '{"ports_exposes": "3000"}',
            ],
        )

        assert result.exit_code == 0, result.output
        api.create_public_application.assert_awaited_once_with(
            body={
                "name": "web",
                "git_repository": "https://github.com/acme/web",
                "git_branch": "main",
                "project_uuid": APP_UUID,
                "environment_name": "production",
                "ports_exposes": "3000",
            }
        )

    def test_database_create_maps_engine_fields(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        result = runner.invoke(
            app,
            [
                "databases",
                "create-postgresql",
                "--name",
                "main",
                "--project",
                APP_UUID,
                "--server",
                ENV_UUID,
                "--user",
                "app",
                "--database",
                "shop",
            ],
        )

        assert result.exit_code == 0, result.output
        body = api.create_database_postgresql.await_args.kwargs["body"]
        assert body["postgres_user"] == "app"
        assert body["postgres_db"] == "shop"
        assert body["server_uuid"] == ENV_UUID

    def test_database_create_rejects_foreign_flags(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        result = runner.invoke(
            app,
            ["databases", "create-redis", "--name", "c", "--project", APP_UUID, "--server", APP_UUID, "--user", "x"],
        )

        assert result.exit_code == 1
        assert "--user not supported for redis" in result.output
        api.create_database_redis.assert_not_called()

    def test_env_update_passes_env_id(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        result = runner.invoke(app, ["services", "envs", "update", APP_UUID, "--env-id", ENV_UUID, "--value", "2"])

        assert result.exit_code == 0, result.output
        api.update_env_by_service_uuid.assert_awaited_once_with(
            path={"uuid": APP_UUID, "env_uuid": ENV_UUID}, body={"value": "2"}
        )

    def test_logs_send_line_count(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        api.get_application_logs_by_uuid.return_value = {"logs": "line one\nline two"}

        result = runner.invoke(app, ["apps", "logs", APP_UUID, "--lines", "20"])

        assert result.exit_code == 0
        assert "line two" in result.output
        api.get_application_logs_by_uuid.assert_awaited_once_with(path={"uuid": APP_UUID}, query={"lines": 20})

    def test_deploy_requires_target(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        result = runner.invoke(app, ["deployments", "deploy"])
        assert result.exit_code == 1
        api.deploy_by_tag_or_uuid.assert_not_called()

    def test_service_types_need_no_client(self) -> None:
        with patch("coolify_mcp.cli.common._get_clients", side_effect=AssertionError("no client expected")):
            result = runner.invoke(app, ["services", "types"])
        assert result.exit_code == 0
        assert "wordpress-with-mysql" in result.output


class TestConfirmation:
    def test_delete_asks_and_can_cancel(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        result = runner.invoke(app, ["apps", "delete", APP_UUID], input="n\n")

        assert result.exit_code == 0
        assert "Deletion cancelled." in result.output
        api.delete_application_by_uuid.assert_not_called()

    def test_delete_proceeds_on_yes(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        result = runner.invoke(app, ["databases", "delete", APP_UUID], input="y\n")

        assert result.exit_code == 0
        api.delete_database_by_uuid.assert_awaited_once_with(path={"uuid": APP_UUID})

    def test_force_skips_prompt(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        result = runner.invoke(app, ["apps", "envs", "delete", APP_UUID, "--env-id", ENV_UUID, "--force"])

        assert result.exit_code == 0
        assert "Are you sure" not in result.output
        api.delete_env_by_application_uuid.assert_awaited_once_with(path={"uuid": APP_UUID, "env_uuid": ENV_UUID})


class TestErrors:
    def test_validation_error_exits_1(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        result = runner.invoke(app, ["apps", "get", "nope"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Invalid Coolify ID" in result.output
        api.get_application_by_uuid.assert_not_called()

    def test_api_error_exits_1(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        api, _ = clients
        request = httpx.Request("GET", "https://coolify.example.com/api/v1/servers")
        response = httpx.Response(401, json={"message": "Unauthenticated."}, request=request)
        api.list_servers.side_effect = httpx.HTTPStatusError("401", request=request, response=response)

        result = runner.invoke(app, ["servers", "list"])

        assert result.exit_code == 1
        assert "API Error (401): Unauthenticated." in result.output

    def test_missing_configuration_exits_1(self) -> None:
        error = ConfigurationError("Invalid configuration: api_url: Field required")
        with patch("coolify_mcp.cli.common._get_clients", side_effect=error):
            result = runner.invoke(app, ["system", "version"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_exec_404_suggests_alternatives(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        _, command_runner = clients
        command_runner.execute.side_effect = ApiError(UNSUPPORTED_MESSAGE, 404)

        result = runner.invoke(app, ["apps", "exec", APP_UUID, "ls -la"])

        assert result.exit_code == 1
        assert "may not be supported" in result.output
        assert "docker exec" in result.output

    def test_exec_success(self, clients: tuple[AsyncMock, AsyncMock]) -> None:
        _, command_runner = clients
        command_runner.execute.return_value = "total 0"

        result = runner.invoke(app, ["apps", "exec", APP_UUID, "ls"])

        assert result.exit_code == 0
        assert "total 0" in result.output
        command_runner.execute.assert_awaited_once_with(APP_UUID, "ls")


@pytest.mark.usefixtures("coolify_env")
def test_config_masks_token() -> None:
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "https://coolify.example.com/api/v1" in result.output
    assert "token-1234567890" not in result.output


@pytest.mark.usefixtures("no_coolify_env")
def test_config_reports_missing_settings() -> None:
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 1
    assert "COOLIFY_API_TOKEN" in result.output
