import json
from typing import Annotated

import typer

from coolify_mcp.cli.common import (
    build_body,
    confirm_deletion,
    done,
    fail,
    parse_json_option,
    run_operation,
    show,
)
from coolify_mcp.core.errors import ValidationError

ENV_COLUMNS = [("id", "uuid"), ("key", "key"), ("value", "value"), ("is_secret", "is_secret")]


def create_envs_app(resource: str, label: str) -> typer.Typer:
    """Build the ``envs`` subgroup for a resource that carries environment variables."""
    envs_app = typer.Typer(help=f"Manage {label} environment variables.", no_args_is_help=True)

    @envs_app.command("list")
    def list_envs(
        id: Annotated[str, typer.Argument(help=f"{label.capitalize()} UUID.")],
    ) -> None:
        """List environment variables."""
        data = run_operation(resource, "list_envs", id=id)
        show(data, f"Environment variables for {label} {id}:", ENV_COLUMNS)

    @envs_app.command("create")
    def create_env(
        id: Annotated[str, typer.Argument(help=f"{label.capitalize()} UUID.")],
        key: Annotated[str, typer.Option(help="Variable name.")],
        value: Annotated[str, typer.Option(help="Variable value.")],
        is_secret: Annotated[bool, typer.Option("--is-secret", help="Mark as secret.")] = False,
        body: Annotated[str | None, typer.Option(help="Extra JSON fields merged into the request.")] = None,
    ) -> None:
        """Create an environment variable."""
        payload = build_body({"key": key, "value": value, "is_secret": is_secret}, body)
        show(run_operation(resource, "create_env", id=id, body=payload), "Environment variable created:")

    @envs_app.command("update")
    def update_env(
        id: Annotated[str, typer.Argument(help=f"{label.capitalize()} UUID.")],
        env_id: Annotated[str, typer.Option("--env-id", help="Environment variable UUID.")],
        key: Annotated[str | None, typer.Option(help="Variable name.")] = None,
        value: Annotated[str | None, typer.Option(help="Variable value.")] = None,
        is_secret: Annotated[bool | None, typer.Option("--is-secret/--not-secret", help="Secret flag.")] = None,
        body: Annotated[str | None, typer.Option(help="Extra JSON fields merged into the request.")] = None,
    ) -> None:
        """Update one environment variable."""
        payload = build_body({"key": key, "value": value, "is_secret": is_secret}, body)
        data = run_operation(resource, "update_env", id=id, secondary_id=env_id, body=payload)
        show(data, "Environment variable updated:")

    @envs_app.command("update-bulk")
    def update_envs_bulk(
        id: Annotated[str, typer.Argument(help=f"{label.capitalize()} UUID.")],
        env_vars: Annotated[str, typer.Option("--env-vars", help="JSON array of {key, value} objects.")],
    ) -> None:
        """Replace several environment variables at once."""
        variables = parse_json_option(env_vars, "--env-vars")
        if not isinstance(variables, list):
            fail(ValidationError("--env-vars must be a JSON array", {"option": "--env-vars"}))
        data = run_operation(resource, "update_envs_bulk", id=id, body=json.dumps(variables))
        show(data, "Environment variables updated in bulk:")

    @envs_app.command("delete")
    def delete_env(
        id: Annotated[str, typer.Argument(help=f"{label.capitalize()} UUID.")],
        env_id: Annotated[str, typer.Option("--env-id", help="Environment variable UUID.")],
        force: Annotated[bool, typer.Option("--force", help="Skip the confirmation prompt.")] = False,
    ) -> None:
        """Delete an environment variable."""
        confirm_deletion(f"Are you sure you want to delete environment variable {env_id}?", force)
        data = run_operation(resource, "delete_env", id=id, secondary_id=env_id)
        done(f"Environment variable {env_id} deleted successfully.", data)

    return envs_app
