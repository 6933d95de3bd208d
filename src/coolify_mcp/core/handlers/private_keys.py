from enum import StrEnum

from coolify_mcp.core.handlers.base import ResourceHandler, Route


class PrivateKeyOperation(StrEnum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


_UUID = ("uuid",)

ROUTES: dict[str, Route] = {
    PrivateKeyOperation.LIST: Route("list_private_keys"),
    PrivateKeyOperation.GET: Route("get_private_key_by_uuid", _UUID),
    PrivateKeyOperation.CREATE: Route("create_private_key", body=True),
    PrivateKeyOperation.UPDATE: Route("update_private_key", _UUID, body=True),
    PrivateKeyOperation.DELETE: Route("delete_private_key_by_uuid", _UUID),
}


class PrivateKeysHandler(ResourceHandler):
    resource = "private_keys"
    operations = PrivateKeyOperation
    routes = ROUTES
