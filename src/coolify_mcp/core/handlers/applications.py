from enum import StrEnum
from typing import Any

from coolify_mcp.core.api_wrapper import safe_api_call
from coolify_mcp.core.errors import CoolifyError, ValidationError
from coolify_mcp.core.handlers.base import Envelope, OperationRequest, ResourceHandler, Route
from coolify_mcp.core.ports.commands import CommandRunner
from coolify_mcp.core.ports.platform import CoolifyPlatform
from coolify_mcp.core.validation import parse_json_body, validate_coolify_id, validate_required_params


class ApplicationOperation(StrEnum):
    LIST = "list"
    GET = "get"
    CREATE_PUBLIC = "create_public"
    CREATE_PRIVATE_GH = "create_private_gh"
    CREATE_PRIVATE_KEY = "create_private_key"
    CREATE_DOCKERFILE = "create_dockerfile"
    CREATE_DOCKER_IMAGE = "create_docker_image"
    CREATE_DOCKER_COMPOSE = "create_docker_compose"
    UPDATE = "update"
    DELETE = "delete"
    GET_LOGS = "get_logs"
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    LIST_ENVS = "list_envs"
    CREATE_ENV = "create_env"
    UPDATE_ENV = "update_env"
    UPDATE_ENVS_BULK = "update_envs_bulk"
    DELETE_ENV = "delete_env"
    EXECUTE_COMMAND = "execute_command"


_UUID = ("uuid",)
_ENV = ("uuid", "env_uuid")

ROUTES: dict[str, Route] = {
    ApplicationOperation.LIST: Route("list_applications"),
    ApplicationOperation.GET: Route("get_application_by_uuid", _UUID),
    ApplicationOperation.CREATE_PUBLIC: Route("create_public_application", body=True),
    ApplicationOperation.CREATE_PRIVATE_GH: Route("create_private_github_app_application", body=True),
    ApplicationOperation.CREATE_PRIVATE_KEY: Route("create_private_deploy_key_application", body=True),
    ApplicationOperation.CREATE_DOCKERFILE: Route("create_dockerfile_application", body=True),
    ApplicationOperation.CREATE_DOCKER_IMAGE: Route("create_dockerimage_application", body=True),
    ApplicationOperation.CREATE_DOCKER_COMPOSE: Route("create_dockercompose_application", body=True),
    ApplicationOperation.UPDATE: Route("update_application_by_uuid", _UUID, body=True),
    ApplicationOperation.DELETE: Route("delete_application_by_uuid", _UUID),
    ApplicationOperation.GET_LOGS: Route("get_application_logs_by_uuid", _UUID, query=True),
    ApplicationOperation.START: Route("start_application_by_uuid", _UUID),
    ApplicationOperation.STOP: Route("stop_application_by_uuid", _UUID),
    ApplicationOperation.RESTART: Route("restart_application_by_uuid", _UUID),
    ApplicationOperation.LIST_ENVS: Route("list_envs_by_application_uuid", _UUID),
    ApplicationOperation.CREATE_ENV: Route("create_env_by_application_uuid", _UUID, body=True),
    ApplicationOperation.UPDATE_ENV: Route("update_env_by_application_uuid", _ENV, body=True),
    ApplicationOperation.UPDATE_ENVS_BULK: Route("update_envs_by_application_uuid", _UUID, body=True),
    ApplicationOperation.DELETE_ENV: Route("delete_env_by_application_uuid", _ENV),
}


class ApplicationsHandler(ResourceHandler):
    resource = "applications"
    operations = ApplicationOperation
    routes = ROUTES

    def __init__(self, api: CoolifyPlatform, command_runner: CommandRunner | None = None) -> None:
        super().__init__(api)
        self._command_runner = command_runner

    async def handle_local(self, operation: StrEnum, request: OperationRequest) -> Envelope:
        if operation is ApplicationOperation.EXECUTE_COMMAND:
            return await self._execute_command(request)
        return await super().handle_local(operation, request)

    async def _execute_command(self, request: OperationRequest) -> Envelope:
        validate_required_params({"id": request.id, "body": request.body}, ["id", "body"])
        validate_coolify_id(request.id, "id")
        payload: Any = parse_json_body(request.body)
        command = payload.get("command") if isinstance(payload, dict) else None
        if not isinstance(command, str) or not command.strip():
            raise ValidationError("Request body must contain a non-empty 'command' string", {"field": "command"})
        if self._command_runner is None:
            raise CoolifyError("Command execution is not configured for this client", 0)

        runner = self._command_runner
        uuid: str = request.id  # type: ignore[assignment]
        data = await safe_api_call(lambda: runner.execute(uuid, command))
        return {"data": data}
