from enum import StrEnum

from coolify_mcp.core.handlers.base import ResourceHandler, Route


class DeploymentOperation(StrEnum):
    LIST = "list"
    GET = "get"
    DEPLOY = "deploy"
    LIST_BY_APP = "list_by_app"


# deploy reads tag/uuid/force/pr from a JSON ``query``; list_by_app takes the
# application's identifier as ``id``.
ROUTES: dict[str, Route] = {
    DeploymentOperation.LIST: Route("list_deployments"),
    DeploymentOperation.GET: Route("get_deployment_by_uuid", ("uuid",)),
    DeploymentOperation.DEPLOY: Route("deploy_by_tag_or_uuid", query=True),
    DeploymentOperation.LIST_BY_APP: Route("list_deployments_by_app_uuid", ("uuid",)),
}


class DeploymentsHandler(ResourceHandler):
    resource = "deployments"
    operations = DeploymentOperation
    routes = ROUTES
