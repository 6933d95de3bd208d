from coolify_mcp.core.errors import ValidationError
from coolify_mcp.core.handlers.applications import ApplicationOperation, ApplicationsHandler
from coolify_mcp.core.handlers.base import Envelope, OperationRequest, ResourceHandler, Route
from coolify_mcp.core.handlers.databases import DatabaseOperation, DatabasesHandler
from coolify_mcp.core.handlers.deployments import DeploymentOperation, DeploymentsHandler
from coolify_mcp.core.handlers.private_keys import PrivateKeyOperation, PrivateKeysHandler
from coolify_mcp.core.handlers.projects import ProjectOperation, ProjectsHandler
from coolify_mcp.core.handlers.servers import ServerOperation, ServersHandler
from coolify_mcp.core.handlers.services import ServiceOperation, ServicesHandler
from coolify_mcp.core.handlers.system import SystemHandler, SystemOperation
from coolify_mcp.core.ports.commands import CommandRunner
from coolify_mcp.core.ports.platform import CoolifyPlatform

HANDLER_TYPES: dict[str, type[ResourceHandler]] = {
    "applications": ApplicationsHandler,
    "databases": DatabasesHandler,
    "services": ServicesHandler,
    "projects": ProjectsHandler,
    "servers": ServersHandler,
    "deployments": DeploymentsHandler,
    "private_keys": PrivateKeysHandler,
    "system": SystemHandler,
}


def build_handler(
    resource: str,
    api: CoolifyPlatform,
    command_runner: CommandRunner | None = None,
) -> ResourceHandler:
    """Return the handler for *resource* bound to *api*."""
    if resource == "applications":
        return ApplicationsHandler(api, command_runner)
    try:
        handler_type = HANDLER_TYPES[resource]
    except KeyError:
        raise ValidationError(
            f"Unknown resource '{resource}'. Known resources: {', '.join(HANDLER_TYPES)}",
            {"resource": resource},
        ) from None
    return handler_type(api)


__all__ = [
    "HANDLER_TYPES",
    "ApplicationOperation",
    "ApplicationsHandler",
    "DatabaseOperation",
    "DatabasesHandler",
    "DeploymentOperation",
    "DeploymentsHandler",
    "Envelope",
    "OperationRequest",
    "PrivateKeyOperation",
    "PrivateKeysHandler",
    "ProjectOperation",
    "ProjectsHandler",
    "ResourceHandler",
    "Route",
    "ServerOperation",
    "ServersHandler",
    "ServiceOperation",
    "ServicesHandler",
    "SystemHandler",
    "SystemOperation",
    "build_handler",
]
