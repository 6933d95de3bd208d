from enum import StrEnum

from coolify_mcp.core.handlers.base import ResourceHandler, Route


class SystemOperation(StrEnum):
    VERSION = "version"
    HEALTH = "health"
    ENABLE_API = "enable_api"
    DISABLE_API = "disable_api"
    RESOURCES = "resources"


ROUTES: dict[str, Route] = {
    SystemOperation.VERSION: Route("version"),
    SystemOperation.HEALTH: Route("healthcheck"),
    SystemOperation.ENABLE_API: Route("enable_api"),
    SystemOperation.DISABLE_API: Route("disable_api"),
    SystemOperation.RESOURCES: Route("list_resources"),
}


class SystemHandler(ResourceHandler):
    resource = "system"
    operations = SystemOperation
    routes = ROUTES
