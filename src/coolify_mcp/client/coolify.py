"""Async httpx client with one coroutine per Coolify API endpoint."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from coolify_mcp.client.settings import CoolifySettings
from coolify_mcp.core.ports.platform import Body, PathParams, QueryParams

logger = logging.getLogger(__name__)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class CoolifyApi:
    """Thin async client for ``/api/v1``.

    Every endpoint method raises ``httpx.HTTPStatusError`` on a non-2xx
    status and ``httpx.RequestError`` when no response arrives; callers
    classify those through ``handle_api_error``.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: CoolifySettings, transport: httpx.AsyncBaseTransport | None = None) -> CoolifyApi:
        client = httpx.AsyncClient(
            base_url=settings.base_url,
            headers=settings.headers,
            timeout=settings.timeout,
            transport=transport,
        )
        return cls(client)

    async def __aenter__(self) -> CoolifyApi:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        url: str,
        *,
        path: PathParams | None = None,
        query: QueryParams | None = None,
        body: Body | None = None,
    ) -> Any:
        if path:
            url = url.format(**{name: quote(str(value), safe="") for name, value in path.items()})
        logger.debug("%s %s", method, url)
        response = await self._client.request(method, url, params=query, json=body)
        response.raise_for_status()
        return _decode(response)

    # -- applications --

    async def list_applications(self) -> Any:
        return await self._request("GET", "/applications")

    async def get_application_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/applications/{uuid}", path=path)

    async def create_public_application(self, *, body: Body) -> Any:
        return await self._request("POST", "/applications/public", body=body)

    async def create_private_github_app_application(self, *, body: Body) -> Any:
        return await self._request("POST", "/applications/private-github-app", body=body)

    async def create_private_deploy_key_application(self, *, body: Body) -> Any:
        return await self._request("POST", "/applications/private-deploy-key", body=body)

    async def create_dockerfile_application(self, *, body: Body) -> Any:
        return await self._request("POST", "/applications/dockerfile", body=body)

    async def create_dockerimage_application(self, *, body: Body) -> Any:
        return await self._request("POST", "/applications/dockerimage", body=body)

    async def create_dockercompose_application(self, *, body: Body) -> Any:
        return await self._request("POST", "/applications/dockercompose", body=body)

    async def update_application_by_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/applications/{uuid}", path=path, body=body)

    async def delete_application_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("DELETE", "/applications/{uuid}", path=path)

    async def get_application_logs_by_uuid(self, *, path: PathParams, query: QueryParams | None = None) -> Any:
        return await self._request("GET", "/applications/{uuid}/logs", path=path, query=query)

    async def start_application_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/applications/{uuid}/start", path=path)

    async def stop_application_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/applications/{uuid}/stop", path=path)

    async def restart_application_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/applications/{uuid}/restart", path=path)

    async def list_envs_by_application_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/applications/{uuid}/envs", path=path)

    async def create_env_by_application_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("POST", "/applications/{uuid}/envs", path=path, body=body)

    async def update_env_by_application_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/applications/{uuid}/envs/{env_uuid}", path=path, body=body)

    async def update_envs_by_application_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/applications/{uuid}/envs/bulk", path=path, body=body)

    async def delete_env_by_application_uuid(self, *, path: PathParams) -> Any:
        return await self._request("DELETE", "/applications/{uuid}/envs/{env_uuid}", path=path)

    # -- databases --

    async def list_databases(self) -> Any:
        return await self._request("GET", "/databases")

    async def get_database_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/databases/{uuid}", path=path)

    async def update_database_by_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/databases/{uuid}", path=path, body=body)

    async def delete_database_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("DELETE", "/databases/{uuid}", path=path)

    async def create_database_postgresql(self, *, body: Body) -> Any:
        return await self._request("POST", "/databases/postgresql", body=body)

    async def create_database_clickhouse(self, *, body: Body) -> Any:
        return await self._request("POST", "/databases/clickhouse", body=body)

    async def create_database_dragonfly(self, *, body: Body) -> Any:
        return await self._request("POST", "/databases/dragonfly", body=body)

    async def create_database_redis(self, *, body: Body) -> Any:
        return await self._request("POST", "/databases/redis", body=body)

    async def create_database_keydb(self, *, body: Body) -> Any:
        return await self._request("POST", "/databases/keydb", body=body)

    async def create_database_mariadb(self, *, body: Body) -> Any:
        return await self._request("POST", "/databases/mariadb", body=body)

    async def create_database_mysql(self, *, body: Body) -> Any:
        return await self._request("POST", "/databases/mysql", body=body)

    async def create_database_mongodb(self, *, body: Body) -> Any:
        return await self._request("POST", "/databases/mongodb", body=body)

    async def start_database_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/databases/{uuid}/start", path=path)

    async def stop_database_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/databases/{uuid}/stop", path=path)

    async def restart_database_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/databases/{uuid}/restart", path=path)

    # -- services --

    async def list_services(self) -> Any:
        return await self._request("GET", "/services")

    async def get_service_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/services/{uuid}", path=path)

    async def create_service(self, *, body: Body) -> Any:
        return await self._request("POST", "/services", body=body)

    async def update_service_by_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/services/{uuid}", path=path, body=body)

    async def delete_service_by_uuid(self, *, path: PathParams, query: QueryParams | None = None) -> Any:
        return await self._request("DELETE", "/services/{uuid}", path=path, query=query)

    async def start_service_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/services/{uuid}/start", path=path)

    async def stop_service_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/services/{uuid}/stop", path=path)

    async def restart_service_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("POST", "/services/{uuid}/restart", path=path)

    async def list_envs_by_service_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/services/{uuid}/envs", path=path)

    async def create_env_by_service_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("POST", "/services/{uuid}/envs", path=path, body=body)

    async def update_env_by_service_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/services/{uuid}/envs/{env_uuid}", path=path, body=body)

    async def update_envs_by_service_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/services/{uuid}/envs/bulk", path=path, body=body)

    async def delete_env_by_service_uuid(self, *, path: PathParams) -> Any:
        return await self._request("DELETE", "/services/{uuid}/envs/{env_uuid}", path=path)

    # -- projects --

    async def list_projects(self) -> Any:
        return await self._request("GET", "/projects")

    async def get_project_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/projects/{uuid}", path=path)

    async def create_project(self, *, body: Body) -> Any:
        return await self._request("POST", "/projects", body=body)

    async def update_project_by_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/projects/{uuid}", path=path, body=body)

    async def delete_project_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("DELETE", "/projects/{uuid}", path=path)

    async def get_environment_by_name_or_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/projects/{uuid}/{environment_name_or_uuid}", path=path)

    async def list_resources(self) -> Any:
        return await self._request("GET", "/resources")

    # -- servers --

    async def list_servers(self) -> Any:
        return await self._request("GET", "/servers")

    async def get_server_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/servers/{uuid}", path=path)

    async def create_server(self, *, body: Body) -> Any:
        return await self._request("POST", "/servers", body=body)

    async def update_server_by_uuid(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/servers/{uuid}", path=path, body=body)

    async def delete_server_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("DELETE", "/servers/{uuid}", path=path)

    async def validate_server_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/servers/{uuid}/validate", path=path)

    async def get_resources_by_server_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/servers/{uuid}/resources", path=path)

    async def get_domains_by_server_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/servers/{uuid}/domains", path=path)

    # -- deployments --

    async def list_deployments(self) -> Any:
        return await self._request("GET", "/deployments")

    async def get_deployment_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/deployments/{uuid}", path=path)

    async def deploy_by_tag_or_uuid(self, *, query: QueryParams | None = None) -> Any:
        return await self._request("GET", "/deploy", query=query)

    async def list_deployments_by_app_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/deployments/applications/{uuid}", path=path)

    # -- private keys --

    async def list_private_keys(self) -> Any:
        return await self._request("GET", "/security/keys")

    async def get_private_key_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("GET", "/security/keys/{uuid}", path=path)

    async def create_private_key(self, *, body: Body) -> Any:
        return await self._request("POST", "/security/keys", body=body)

    async def update_private_key(self, *, path: PathParams, body: Body) -> Any:
        return await self._request("PATCH", "/security/keys/{uuid}", path=path, body=body)

    async def delete_private_key_by_uuid(self, *, path: PathParams) -> Any:
        return await self._request("DELETE", "/security/keys/{uuid}", path=path)

    # -- system --

    async def version(self) -> Any:
        return await self._request("GET", "/version")

    async def healthcheck(self) -> Any:
        return await self._request("GET", "/health")

    async def enable_api(self) -> Any:
        return await self._request("GET", "/enable")

    async def disable_api(self) -> Any:
        return await self._request("GET", "/disable")
