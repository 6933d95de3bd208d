from typing import Annotated

import typer

from coolify_mcp.cli.common import build_body, confirm_deletion, done, run_operation, show

servers_app = typer.Typer(help="Manage servers.", no_args_is_help=True)

SERVER_COLUMNS = [
    ("id", "uuid"),
    ("name", "name"),
    ("ip", "ip"),
    ("port", "port"),
    ("user", "user"),
    ("reachable", "settings.is_reachable"),
]
RESOURCE_COLUMNS = [("id", "uuid"), ("name", "name"), ("type", "type"), ("status", "status")]

Id = Annotated[str, typer.Argument(help="Server UUID.")]
Body = Annotated[str | None, typer.Option(help="Extra JSON fields merged into the request.")]


@servers_app.command("list")
def list_servers() -> None:
    """List all servers."""
    show(run_operation("servers", "list"), "Servers:", SERVER_COLUMNS)


@servers_app.command("get")
def get(id: Id) -> None:
    """Show server details."""
    show(run_operation("servers", "get", id=id), "Server details:")


@servers_app.command("create")
def create(
    name: Annotated[str, typer.Option(help="Server name.")],
    ip: Annotated[str, typer.Option(help="IP address or hostname.")],
    private_key: Annotated[str, typer.Option("--private-key", help="Private key UUID for SSH.")],
    port: Annotated[int, typer.Option(help="SSH port.")] = 22,
    user: Annotated[str, typer.Option(help="SSH user.")] = "root",
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
    validate: Annotated[bool, typer.Option("--validate", help="Validate the connection right away.")] = False,
    body: Body = None,
) -> None:
    """Register a server."""
    fields = {
        "name": name,
        "ip": ip,
        "port": port,
        "user": user,
        "private_key_uuid": private_key,
        "description": description,
        "instant_validate": validate,
    }
    show(run_operation("servers", "create", body=build_body(fields, body)), "Server created:")


@servers_app.command("update")
def update(
    id: Id,
    name: Annotated[str | None, typer.Option(help="Server name.")] = None,
    ip: Annotated[str | None, typer.Option(help="IP address or hostname.")] = None,
    port: Annotated[int | None, typer.Option(help="SSH port.")] = None,
    user: Annotated[str | None, typer.Option(help="SSH user.")] = None,
    private_key: Annotated[str | None, typer.Option("--private-key", help="Private key UUID for SSH.")] = None,
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
    body: Body = None,
) -> None:
    """Update a server."""
    fields = {
        "name": name,
        "ip": ip,
        "port": port,
        "user": user,
        "private_key_uuid": private_key,
        "description": description,
    }
    show(run_operation("servers", "update", id=id, body=build_body(fields, body)), "Server updated:")


@servers_app.command("delete")
def delete(
    id: Id,
    force: Annotated[bool, typer.Option("--force", help="Skip the confirmation prompt.")] = False,
) -> None:
    """Delete a server."""
    confirm_deletion(f"Are you sure you want to delete server {id}?", force)
    done(f"Server {id} deleted successfully.", run_operation("servers", "delete", id=id))


@servers_app.command("validate")
def validate(id: Id) -> None:
    """Check that Coolify can reach the server."""
    done(f"Validation started for server {id}.", run_operation("servers", "validate", id=id))


@servers_app.command("resources")
def resources(id: Id) -> None:
    """List resources running on a server."""
    show(run_operation("servers", "resources", id=id), f"Resources on server {id}:", RESOURCE_COLUMNS)


@servers_app.command("domains")
def domains(id: Id) -> None:
    """List domains served by a server."""
    show(run_operation("servers", "domains", id=id), f"Domains on server {id}:")
