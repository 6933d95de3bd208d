from enum import StrEnum

from coolify_mcp.core.handlers.base import ResourceHandler, Route


class ProjectOperation(StrEnum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ENVIRONMENT = "environment"
    RESOURCES = "resources"


_UUID = ("uuid",)

ROUTES: dict[str, Route] = {
    ProjectOperation.LIST: Route("list_projects"),
    ProjectOperation.GET: Route("get_project_by_uuid", _UUID),
    ProjectOperation.CREATE: Route("create_project", body=True),
    ProjectOperation.UPDATE: Route("update_project_by_uuid", _UUID, body=True),
    ProjectOperation.DELETE: Route("delete_project_by_uuid", _UUID),
    ProjectOperation.ENVIRONMENT: Route(
        "get_environment_by_name_or_uuid",
        ("uuid", "environment_name_or_uuid"),
        secondary_is_name=True,
    ),
    ProjectOperation.RESOURCES: Route("list_resources"),
}


class ProjectsHandler(ResourceHandler):
    resource = "projects"
    operations = ProjectOperation
    routes = ROUTES
