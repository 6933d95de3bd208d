from enum import StrEnum

from coolify_mcp.core.handlers.base import ResourceHandler, Route


class ServerOperation(StrEnum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    VALIDATE = "validate"
    RESOURCES = "resources"
    DOMAINS = "domains"


_UUID = ("uuid",)

ROUTES: dict[str, Route] = {
    ServerOperation.LIST: Route("list_servers"),
    ServerOperation.GET: Route("get_server_by_uuid", _UUID),
    ServerOperation.CREATE: Route("create_server", body=True),
    ServerOperation.UPDATE: Route("update_server_by_uuid", _UUID, body=True),
    ServerOperation.DELETE: Route("delete_server_by_uuid", _UUID),
    ServerOperation.VALIDATE: Route("validate_server_by_uuid", _UUID),
    ServerOperation.RESOURCES: Route("get_resources_by_server_uuid", _UUID),
    ServerOperation.DOMAINS: Route("get_domains_by_server_uuid", _UUID),
}


class ServersHandler(ResourceHandler):
    resource = "servers"
    operations = ServerOperation
    routes = ROUTES
