from enum import StrEnum

from coolify_mcp.core.catalog import SERVICE_TYPES
from coolify_mcp.core.handlers.base import Envelope, OperationRequest, ResourceHandler, Route


class ServiceOperation(StrEnum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    LIST_ENVS = "list_envs"
    CREATE_ENV = "create_env"
    UPDATE_ENV = "update_env"
    UPDATE_ENVS_BULK = "update_envs_bulk"
    DELETE_ENV = "delete_env"
    GET_SERVICE_TYPES = "get_service_types"


_UUID = ("uuid",)
_ENV = ("uuid", "env_uuid")

# delete takes an optional body of cleanup flags (delete_volumes, docker_cleanup, ...)
# which Coolify reads from the query string.
ROUTES: dict[str, Route] = {
    ServiceOperation.LIST: Route("list_services"),
    ServiceOperation.GET: Route("get_service_by_uuid", _UUID),
    ServiceOperation.CREATE: Route("create_service", body=True),
    ServiceOperation.UPDATE: Route("update_service_by_uuid", _UUID, body=True),
    ServiceOperation.DELETE: Route("delete_service_by_uuid", _UUID, optional_body_as_query=True),
    ServiceOperation.START: Route("start_service_by_uuid", _UUID),
    ServiceOperation.STOP: Route("stop_service_by_uuid", _UUID),
    ServiceOperation.RESTART: Route("restart_service_by_uuid", _UUID),
    ServiceOperation.LIST_ENVS: Route("list_envs_by_service_uuid", _UUID),
    ServiceOperation.CREATE_ENV: Route("create_env_by_service_uuid", _UUID, body=True),
    ServiceOperation.UPDATE_ENV: Route("update_env_by_service_uuid", _ENV, body=True),
    ServiceOperation.UPDATE_ENVS_BULK: Route("update_envs_by_service_uuid", _UUID, body=True),
    ServiceOperation.DELETE_ENV: Route("delete_env_by_service_uuid", _ENV),
}


class ServicesHandler(ResourceHandler):
    resource = "services"
    operations = ServiceOperation
    routes = ROUTES

    async def handle_local(self, operation: StrEnum, request: OperationRequest) -> Envelope:
        if operation is ServiceOperation.GET_SERVICE_TYPES:
            return {
                "data": {
                    "service_types": list(SERVICE_TYPES),
                    "count": len(SERVICE_TYPES),
                    "description": "All available one-click service types supported by Coolify",
                }
            }
        return await super().handle_local(operation, request)
