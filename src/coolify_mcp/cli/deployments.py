import json
from typing import Annotated

import typer

from coolify_mcp.cli.common import fail, run_operation, show
from coolify_mcp.core.errors import ValidationError

deployments_app = typer.Typer(help="Inspect and trigger deployments.", no_args_is_help=True)

DEPLOYMENT_COLUMNS = [
    ("id", "deployment_uuid"),
    ("application", "application_name"),
    ("status", "status"),
    ("commit", "commit"),
    ("created", "created_at"),
]


@deployments_app.command("list")
def list_deployments() -> None:
    """List running deployments."""
    show(run_operation("deployments", "list"), "Deployments:", DEPLOYMENT_COLUMNS)


@deployments_app.command("get")
def get(id: Annotated[str, typer.Argument(help="Deployment UUID.")]) -> None:
    """Show deployment details."""
    show(run_operation("deployments", "get", id=id), "Deployment details:")


@deployments_app.command("deploy")
def deploy(
    uuid: Annotated[str | None, typer.Option(help="Resource UUID(s), comma-separated.")] = None,
    tag: Annotated[str | None, typer.Option(help="Tag name(s), comma-separated.")] = None,
    force: Annotated[bool, typer.Option("--force", help="Rebuild without cache.")] = False,
) -> None:
    """Deploy resources by UUID or tag."""
    if not uuid and not tag:
        fail(ValidationError("Pass --uuid or --tag", {}))
    query = {key: value for key, value in (("uuid", uuid), ("tag", tag)) if value}
    if force:
        query["force"] = True
    show(run_operation("deployments", "deploy", query=json.dumps(query)), "Deployment queued:")


@deployments_app.command("list-by-app")
def list_by_app(id: Annotated[str, typer.Argument(help="Application UUID.")]) -> None:
    """List deployments of one application."""
    data = run_operation("deployments", "list_by_app", id=id)
    show(data, f"Deployments for application {id}:", DEPLOYMENT_COLUMNS)
