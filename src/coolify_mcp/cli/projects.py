from collections import defaultdict
from typing import Annotated, Any

import typer

from coolify_mcp.cli.common import build_body, confirm_deletion, console, done, json_output, run_operation, show

projects_app = typer.Typer(help="Manage projects.", no_args_is_help=True)

PROJECT_COLUMNS = [("id", "uuid"), ("name", "name"), ("description", "description")]
RESOURCE_COLUMNS = [("id", "uuid"), ("name", "name"), ("status", "status")]

Id = Annotated[str, typer.Argument(help="Project UUID.")]


def _show_grouped(resources: list[dict[str, Any]]) -> None:
    grouped: dict[str, list[dict[str, Any]]] = defaultdict(list)
    for resource in resources:
        grouped[resource.get("type") or "unknown"].append(resource)
    for resource_type, members in grouped.items():
        console.print(f"\n[blue]{resource_type}[/blue]")
        show(members, columns=RESOURCE_COLUMNS)


@projects_app.command("list")
def list_projects() -> None:
    """List all projects."""
    show(run_operation("projects", "list"), "Projects:", PROJECT_COLUMNS)


@projects_app.command("get")
def get(id: Id) -> None:
    """Show project details."""
    show(run_operation("projects", "get", id=id), "Project details:")


@projects_app.command("create")
def create(
    name: Annotated[str, typer.Option(help="Project name.")],
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
) -> None:
    """Create a project."""
    body = build_body({"name": name, "description": description})
    show(run_operation("projects", "create", body=body), "Project created:")


@projects_app.command("update")
def update(
    id: Id,
    name: Annotated[str | None, typer.Option(help="Project name.")] = None,
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
) -> None:
    """Update a project."""
    body = build_body({"name": name, "description": description})
    show(run_operation("projects", "update", id=id, body=body), "Project updated:")


@projects_app.command("delete")
def delete(
    id: Id,
    force: Annotated[bool, typer.Option("--force", help="Skip the confirmation prompt.")] = False,
) -> None:
    """Delete a project."""
    confirm_deletion(f"Are you sure you want to delete project {id}?", force)
    done(f"Project {id} deleted successfully.", run_operation("projects", "delete", id=id))


@projects_app.command("environment")
def environment(
    id: Id,
    name: Annotated[str, typer.Argument(help="Environment name or UUID.")],
) -> None:
    """Show one environment of a project."""
    data = run_operation("projects", "environment", id=id, secondary_id=name)
    show(data, f"Environment {name} in project {id}:")


@projects_app.command("resources")
def resources() -> None:
    """List all resources across projects, grouped by type."""
    data = run_operation("projects", "resources")
    if json_output() or not isinstance(data, list):
        show(data, "All resources:")
        return
    console.print("[green]All resources:[/green]")
    _show_grouped(data)
