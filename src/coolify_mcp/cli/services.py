from typing import Annotated

import typer

from coolify_mcp.cli.common import (
    build_body,
    confirm_deletion,
    console,
    done,
    fail,
    json_output,
    parse_json_option,
    run_operation,
    show,
)
from coolify_mcp.cli.envs import create_envs_app
from coolify_mcp.core.catalog import SERVICE_TYPES, group_service_types
from coolify_mcp.core.errors import ValidationError

services_app = typer.Typer(help="Manage one-click services (WordPress, Ghost, MinIO, etc.).", no_args_is_help=True)
services_app.add_typer(create_envs_app("services", "service"), name="envs")

SERVICE_COLUMNS = [
    ("id", "uuid"),
    ("name", "name"),
    ("type", "service_type"),
    ("status", "status"),
    ("description", "description"),
]

Id = Annotated[str, typer.Argument(help="Service UUID.")]
Body = Annotated[str | None, typer.Option(help="Extra JSON fields merged into the request.")]


def _domains(value: str | None) -> str | None:
    if value is None:
        return None
    return ",".join(part.strip() for part in value.split(",") if part.strip())


@services_app.command("list")
def list_services() -> None:
    """List all services."""
    show(run_operation("services", "list"), "Services:", SERVICE_COLUMNS)


@services_app.command("get")
def get(id: Id) -> None:
    """Show service details."""
    show(run_operation("services", "get", id=id), "Service details:")


@services_app.command("types")
def types() -> None:
    """List the one-click service types, grouped by category."""
    if json_output():
        show(list(SERVICE_TYPES))
        return
    console.print(f"[green]Available service types ({len(SERVICE_TYPES)}):[/green]")
    for category, members in group_service_types().items():
        console.print(f"\n[bold]{category}[/bold]")
        console.print("  " + ", ".join(members), highlight=False)
    console.print('\nCreate one with: coolify services create --type <type> --name <name> --project <uuid>')


@services_app.command("create")
def create(
    name: Annotated[str, typer.Option(help="Service name.")],
    type: Annotated[str, typer.Option("--type", help='Service type; see "coolify services types".')],
    project: Annotated[str, typer.Option("--project", help="Project UUID.")],
    server: Annotated[str, typer.Option("--server", help="Server UUID.")],
    environment: Annotated[str, typer.Option("--environment", help="Environment name.")] = "production",
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
    instant_deploy: Annotated[bool, typer.Option("--instant-deploy", help="Start right after creation.")] = False,
    body: Body = None,
) -> None:
    """Create a one-click service."""
    if type not in SERVICE_TYPES:
        message = f"Unknown service type '{type}'. Run 'coolify services types' to see the options."
        fail(ValidationError(message, {"type": type}))
    fields = {
        "name": name,
        "type": type,
        "project_uuid": project,
        "server_uuid": server,
        "environment_name": environment,
        "description": description,
        "instant_deploy": instant_deploy,
    }
    show(run_operation("services", "create", body=build_body(fields, body)), "Service created:")


@services_app.command("update")
def update(
    id: Id,
    name: Annotated[str | None, typer.Option(help="Service name.")] = None,
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
    domains: Annotated[str | None, typer.Option(help="Comma-separated list of domains.")] = None,
    docker_compose: Annotated[str | None, typer.Option("--docker-compose", help="docker-compose.yml contents.")] = None,
    body: Body = None,
) -> None:
    """Update a service."""
    fields = {
        "name": name,
        "description": description,
        "domains": _domains(domains),
        "docker_compose_raw": docker_compose,
    }
    show(run_operation("services", "update", id=id, body=build_body(fields, body)), "Service updated:")


@services_app.command("delete")
def delete(
    id: Id,
    force: Annotated[bool, typer.Option("--force", help="Skip the confirmation prompt.")] = False,
    options: Annotated[
        str | None,
        typer.Option(help='Cleanup flags as JSON, e.g. {"delete_volumes": false}.'),
    ] = None,
) -> None:
    """Delete a service."""
    confirm_deletion(f"Are you sure you want to delete service {id}?", force)
    if options is not None and not isinstance(parse_json_option(options, "--options"), dict):
        fail(ValidationError("--options must be a JSON object", {"option": "--options"}))
    done(f"Service {id} deleted successfully.", run_operation("services", "delete", id=id, body=options))


@services_app.command("start")
def start(id: Id) -> None:
    """Start a service."""
    done(f"Service {id} started successfully.", run_operation("services", "start", id=id))


@services_app.command("stop")
def stop(id: Id) -> None:
    """Stop a service."""
    done(f"Service {id} stopped successfully.", run_operation("services", "stop", id=id))


@services_app.command("restart")
def restart(id: Id) -> None:
    """Restart a service."""
    done(f"Service {id} restarted successfully.", run_operation("services", "restart", id=id))
