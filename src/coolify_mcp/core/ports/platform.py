from typing import Any, Protocol

PathParams = dict[str, str]
QueryParams = dict[str, Any]
Body = dict[str, Any] | list[Any]


class CoolifyPlatform(Protocol):
    """One coroutine per Coolify API endpoint; raises on non-2xx responses."""

    # applications
    async def list_applications(self) -> Any: ...

    async def get_application_by_uuid(self, *, path: PathParams) -> Any: ...

    async def create_public_application(self, *, body: Body) -> Any: ...

    async def create_private_github_app_application(self, *, body: Body) -> Any: ...

    async def create_private_deploy_key_application(self, *, body: Body) -> Any: ...

    async def create_dockerfile_application(self, *, body: Body) -> Any: ...

    async def create_dockerimage_application(self, *, body: Body) -> Any: ...

    async def create_dockercompose_application(self, *, body: Body) -> Any: ...

    async def update_application_by_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def delete_application_by_uuid(self, *, path: PathParams) -> Any: ...

    async def get_application_logs_by_uuid(self, *, path: PathParams, query: QueryParams | None = None) -> Any: ...

    async def start_application_by_uuid(self, *, path: PathParams) -> Any: ...

    async def stop_application_by_uuid(self, *, path: PathParams) -> Any: ...

    async def restart_application_by_uuid(self, *, path: PathParams) -> Any: ...

    async def list_envs_by_application_uuid(self, *, path: PathParams) -> Any: ...

    async def create_env_by_application_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def update_env_by_application_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def update_envs_by_application_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def delete_env_by_application_uuid(self, *, path: PathParams) -> Any: ...

    # databases
    async def list_databases(self) -> Any: ...

    async def get_database_by_uuid(self, *, path: PathParams) -> Any: ...

    async def update_database_by_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def delete_database_by_uuid(self, *, path: PathParams) -> Any: ...

    async def create_database_postgresql(self, *, body: Body) -> Any: ...

    async def create_database_clickhouse(self, *, body: Body) -> Any: ...

    async def create_database_dragonfly(self, *, body: Body) -> Any: ...

    async def create_database_redis(self, *, body: Body) -> Any: ...

    async def create_database_keydb(self, *, body: Body) -> Any: ...

    async def create_database_mariadb(self, *, body: Body) -> Any: ...

    async def create_database_mysql(self, *, body: Body) -> Any: ...

    async def create_database_mongodb(self, *, body: Body) -> Any: ...

    async def start_database_by_uuid(self, *, path: PathParams) -> Any: ...

    async def stop_database_by_uuid(self, *, path: PathParams) -> Any: ...

    async def restart_database_by_uuid(self, *, path: PathParams) -> Any: ...

    # services
    async def list_services(self) -> Any: ...

    async def get_service_by_uuid(self, *, path: PathParams) -> Any: ...

    async def create_service(self, *, body: Body) -> Any: ...

    async def update_service_by_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def delete_service_by_uuid(self, *, path: PathParams, query: QueryParams | None = None) -> Any: ...

    async def start_service_by_uuid(self, *, path: PathParams) -> Any: ...

    async def stop_service_by_uuid(self, *, path: PathParams) -> Any: ...

    async def restart_service_by_uuid(self, *, path: PathParams) -> Any: ...

    async def list_envs_by_service_uuid(self, *, path: PathParams) -> Any: ...

    async def create_env_by_service_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def update_env_by_service_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def update_envs_by_service_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def delete_env_by_service_uuid(self, *, path: PathParams) -> Any: ...

    # projects
    async def list_projects(self) -> Any: ...

    async def get_project_by_uuid(self, *, path: PathParams) -> Any: ...

    async def create_project(self, *, body: Body) -> Any: ...

    async def update_project_by_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def delete_project_by_uuid(self, *, path: PathParams) -> Any: ...

    async def get_environment_by_name_or_uuid(self, *, path: PathParams) -> Any: ...

    async def list_resources(self) -> Any: ...

    # servers
    async def list_servers(self) -> Any: ...

    async def get_server_by_uuid(self, *, path: PathParams) -> Any: ...

    async def create_server(self, *, body: Body) -> Any: ...

    async def update_server_by_uuid(self, *, path: PathParams, body: Body) -> Any: ...

    async def delete_server_by_uuid(self, *, path: PathParams) -> Any: ...

    async def validate_server_by_uuid(self, *, path: PathParams) -> Any: ...

    async def get_resources_by_server_uuid(self, *, path: PathParams) -> Any: ...

    async def get_domains_by_server_uuid(self, *, path: PathParams) -> Any: ...

    # deployments
    async def list_deployments(self) -> Any: ...

    async def get_deployment_by_uuid(self, *, path: PathParams) -> Any: ...

    async def deploy_by_tag_or_uuid(self, *, query: QueryParams | None = None) -> Any: ...

    async def list_deployments_by_app_uuid(self, *, path: PathParams) -> Any: ...

    # private keys
    async def list_private_keys(self) -> Any: ...

    async def get_private_key_by_uuid(self, *, path: PathParams) -> Any: ...

    async def create_private_key(self, *, body: Body) -> Any: ...

    async def update_private_key(self, *, path: PathParams, body: Body) -> Any: ...

    async def delete_private_key_by_uuid(self, *, path: PathParams) -> Any: ...

    # system
    async def version(self) -> Any: ...

    async def healthcheck(self) -> Any: ...

    async def enable_api(self) -> Any: ...

    async def disable_api(self) -> Any: ...

    async def aclose(self) -> None: ...
