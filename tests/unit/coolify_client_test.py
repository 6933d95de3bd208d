"""Tests for the httpx-based Coolify client against a mock transport."""

import json
from collections.abc import Callable

import httpx
import pytest

from coolify_mcp.client.coolify import CoolifyApi
from coolify_mcp.client.settings import CoolifySettings

APP_UUID = "abcd1234efgh5678"
ENV_UUID = "zyxw9876vuts5432"


def _settings() -> CoolifySettings:
    return CoolifySettings(api_url="https://coolify.example.com", api_token="token-1234567890")  # type: ignore[arg-type]


def _api(handler: Callable[[httpx.Request], httpx.Response], seen: list[httpx.Request]) -> CoolifyApi:
    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return CoolifyApi.from_settings(_settings(), transport=httpx.MockTransport(record))


@pytest.mark.asyncio
async def test_list_sends_auth_header_to_versioned_path() -> None:
    seen: list[httpx.Request] = []
    async with _api(lambda _: httpx.Response(200, json=[{"uuid": APP_UUID}]), seen) as api:
        assert await api.list_applications() == [{"uuid": APP_UUID}]
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "https://coolify.example.com/api/v1/applications"
    assert seen[0].headers["Authorization"] == "Bearer token-1234567890"


@pytest.mark.asyncio
async def test_lifecycle_actions_post() -> None:
    seen: list[httpx.Request] = []
    async with _api(lambda _: httpx.Response(200, json={"message": "Restart request queued."}), seen) as api:
        await api.restart_application_by_uuid(path={"uuid": APP_UUID})
        await api.stop_database_by_uuid(path={"uuid": APP_UUID})
    assert [(r.method, r.url.path) for r in seen] == [
        ("POST", f"/api/v1/applications/{APP_UUID}/restart"),
        ("POST", f"/api/v1/databases/{APP_UUID}/stop"),
    ]


@pytest.mark.asyncio
async def test_env_update_targets_variable_path_with_json_body() -> None:
    seen: list[httpx.Request] = []
    async with _api(lambda _: httpx.Response(201, json={"uuid": ENV_UUID}), seen) as api:
        await api.update_env_by_application_uuid(path={"uuid": APP_UUID, "env_uuid": ENV_UUID}, body={"value": "2"})
    assert seen[0].method == "PATCH"
    assert seen[0].url.path == f"/api/v1/applications/{APP_UUID}/envs/{ENV_UUID}"
    assert json.loads(seen[0].content) == {"value": "2"}


@pytest.mark.asyncio
async def test_path_values_are_escaped() -> None:
    seen: list[httpx.Request] = []
    async with _api(lambda _: httpx.Response(200, json={}), seen) as api:
        await api.get_environment_by_name_or_uuid(
            path={"uuid": APP_UUID, "environment_name_or_uuid": "staging/eu"}
        )
    assert seen[0].url.raw_path.decode() == f"/api/v1/projects/{APP_UUID}/staging%2Feu"


@pytest.mark.asyncio
async def test_query_parameters_are_sent() -> None:
    seen: list[httpx.Request] = []
    async with _api(lambda _: httpx.Response(200, json={"deployments": []}), seen) as api:
        await api.deploy_by_tag_or_uuid(query={"tag": "prod"})
        await api.get_application_logs_by_uuid(path={"uuid": APP_UUID}, query={"lines": 10})
    assert seen[0].url.path == "/api/v1/deploy"
    assert seen[0].url.params["tag"] == "prod"
    assert seen[1].url.params["lines"] == "10"


@pytest.mark.asyncio
async def test_empty_and_text_responses() -> None:
    seen: list[httpx.Request] = []
    responses = iter([httpx.Response(204), httpx.Response(200, text="v4.0.0-beta.380")])
    async with _api(lambda _: next(responses), seen) as api:
        assert await api.delete_private_key_by_uuid(path={"uuid": APP_UUID}) is None
        assert await api.version() == "v4.0.0-beta.380"


@pytest.mark.asyncio
async def test_error_status_raises_http_status_error() -> None:
    seen: list[httpx.Request] = []
    async with _api(lambda _: httpx.Response(404, json={"message": "Not found."}), seen) as api:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await api.get_server_by_uuid(path={"uuid": APP_UUID})
    assert exc_info.value.response.status_code == 404
