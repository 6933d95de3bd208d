from pathlib import Path
from typing import Annotated

import typer

from coolify_mcp.cli.common import build_body, confirm_deletion, done, run_operation, show

private_keys_app = typer.Typer(help="Manage SSH private keys.", no_args_is_help=True)

KEY_COLUMNS = [("id", "uuid"), ("name", "name"), ("description", "description"), ("git", "is_git_related")]

Id = Annotated[str, typer.Argument(help="Private key UUID.")]
KeyFile = Annotated[
    Path | None,
    typer.Option("--key-file", exists=True, dir_okay=False, readable=True, help="PEM file with the private key."),
]


@private_keys_app.command("list")
def list_keys() -> None:
    """List private keys."""
    show(run_operation("private_keys", "list"), "Private keys:", KEY_COLUMNS)


@private_keys_app.command("get")
def get(id: Id) -> None:
    """Show private key details."""
    show(run_operation("private_keys", "get", id=id), "Private key details:")


@private_keys_app.command("create")
def create(
    name: Annotated[str, typer.Option(help="Key name.")],
    key_file: Annotated[
        Path,
        typer.Option("--key-file", exists=True, dir_okay=False, readable=True, help="PEM file with the private key."),
    ],
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
) -> None:
    """Upload a private key."""
    fields = {"name": name, "description": description, "private_key": key_file.read_text()}
    show(run_operation("private_keys", "create", body=build_body(fields)), "Private key created:")


@private_keys_app.command("update")
def update(
    id: Id,
    name: Annotated[str | None, typer.Option(help="Key name.")] = None,
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
    key_file: KeyFile = None,
) -> None:
    """Update a private key."""
    fields = {"name": name, "description": description, "private_key": key_file.read_text() if key_file else None}
    show(run_operation("private_keys", "update", id=id, body=build_body(fields)), "Private key updated:")


@private_keys_app.command("delete")
def delete(
    id: Id,
    force: Annotated[bool, typer.Option("--force", help="Skip the confirmation prompt.")] = False,
) -> None:
    """Delete a private key."""
    confirm_deletion(f"Are you sure you want to delete private key {id}?", force)
    done(f"Private key {id} deleted successfully.", run_operation("private_keys", "delete", id=id))
