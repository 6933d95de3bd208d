import json
from typing import Annotated

import typer
from rich.markup import escape

from coolify_mcp.cli.common import (
    build_body,
    confirm_deletion,
    console,
    done,
    err_console,
    invoke,
    run_operation,
    show,
)
from coolify_mcp.cli.envs import create_envs_app
from coolify_mcp.core.errors import CoolifyError

apps_app = typer.Typer(help="Manage applications.", no_args_is_help=True)
apps_app.add_typer(create_envs_app("applications", "application"), name="envs")

APP_COLUMNS = [
    ("id", "uuid"),
    ("name", "name"),
    ("status", "status"),
    ("type", "build_pack"),
    ("repository", "git_repository"),
    ("branch", "git_branch"),
]

EXEC_ALTERNATIVES = (
    "Alternatives:\n"
    "1. SSH into your server and run: docker exec <container_name> <command>\n"
    "2. Use Coolify's web interface if available\n"
    "3. Update to a newer Coolify version that supports this feature"
)

Id = Annotated[str, typer.Argument(help="Application UUID.")]
Name = Annotated[str, typer.Option(help="Application name.")]
Project = Annotated[str, typer.Option("--project", help="Project UUID.")]
Server = Annotated[str | None, typer.Option("--server", help="Server UUID.")]
Environment = Annotated[str, typer.Option("--environment", help="Environment name.")]
Repository = Annotated[str, typer.Option(help="Git repository URL.")]
Branch = Annotated[str, typer.Option(help="Git branch.")]
BuildCommand = Annotated[str | None, typer.Option("--build-command", help="Build command.")]
StartCommand = Annotated[str | None, typer.Option("--start-command", help="Start command.")]
Body = Annotated[str | None, typer.Option(help="Extra JSON fields merged into the request.")]


def _create(operation: str, title: str, fields: dict[str, object], body: str | None) -> None:
    data = run_operation("applications", operation, body=build_body(fields, body))
    show(data, title)


@apps_app.command("list")
def list_apps() -> None:
    """List all applications."""
    show(run_operation("applications", "list"), "Applications:", APP_COLUMNS)


@apps_app.command("get")
def get(id: Id) -> None:
    """Show application details."""
    show(run_operation("applications", "get", id=id), "Application details:")


@apps_app.command("create-public")
def create_public(
    name: Name,
    repository: Repository,
    project: Project,
    server: Server = None,
    environment: Environment = "production",
    branch: Branch = "main",
    build_command: BuildCommand = None,
    start_command: StartCommand = None,
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
    body: Body = None,
) -> None:
    """Create an application from a public git repository."""
    fields = {
        "name": name,
        "git_repository": repository,
        "git_branch": branch,
        "project_uuid": project,
        "server_uuid": server,
        "environment_name": environment,
        "build_command": build_command,
        "start_command": start_command,
        "description": description,
    }
    _create("create_public", "Public application created:", fields, body)


@apps_app.command("create-private-github")
def create_private_github(
    name: Name,
    repository: Repository,
    project: Project,
    github_app: Annotated[str, typer.Option("--github-app", help="GitHub App UUID.")],
    server: Server = None,
    environment: Environment = "production",
    branch: Branch = "main",
    build_command: BuildCommand = None,
    start_command: StartCommand = None,
    body: Body = None,
) -> None:
    """Create an application from a private repository through a GitHub App."""
    fields = {
        "name": name,
        "git_repository": repository,
        "git_branch": branch,
        "project_uuid": project,
        "server_uuid": server,
        "environment_name": environment,
        "github_app_uuid": github_app,
        "build_command": build_command,
        "start_command": start_command,
    }
    _create("create_private_gh", "Private GitHub application created:", fields, body)


@apps_app.command("create-private-key")
def create_private_key(
    name: Name,
    repository: Repository,
    project: Project,
    private_key: Annotated[str, typer.Option("--private-key", help="Deploy key UUID.")],
    server: Server = None,
    environment: Environment = "production",
    branch: Branch = "main",
    build_command: BuildCommand = None,
    start_command: StartCommand = None,
    body: Body = None,
) -> None:
    """Create an application from a private repository using a deploy key."""
    fields = {
        "name": name,
        "git_repository": repository,
        "git_branch": branch,
        "project_uuid": project,
        "server_uuid": server,
        "environment_name": environment,
        "private_key_uuid": private_key,
        "build_command": build_command,
        "start_command": start_command,
    }
    _create("create_private_key", "Private key application created:", fields, body)


@apps_app.command("create-dockerfile")
def create_dockerfile(
    name: Name,
    project: Project,
    dockerfile: Annotated[str, typer.Option(help="Dockerfile contents.")],
    server: Server = None,
    environment: Environment = "production",
    body: Body = None,
) -> None:
    """Create an application from a Dockerfile."""
    fields = {
        "name": name,
        "dockerfile": dockerfile,
        "project_uuid": project,
        "server_uuid": server,
        "environment_name": environment,
    }
    _create("create_dockerfile", "Dockerfile application created:", fields, body)


@apps_app.command("create-docker-image")
def create_docker_image(
    name: Name,
    image: Annotated[str, typer.Option(help="Image name, e.g. nginx.")],
    project: Project,
    tag: Annotated[str, typer.Option(help="Image tag.")] = "latest",
    server: Server = None,
    environment: Environment = "production",
    ports: Annotated[str | None, typer.Option(help="Exposed ports, e.g. 80,443.")] = None,
    body: Body = None,
) -> None:
    """Create an application from a Docker image."""
    fields = {
        "name": name,
        "docker_registry_image_name": image,
        "docker_registry_image_tag": tag,
        "ports_exposes": ports,
        "project_uuid": project,
        "server_uuid": server,
        "environment_name": environment,
    }
    _create("create_docker_image", "Docker image application created:", fields, body)


@apps_app.command("create-docker-compose")
def create_docker_compose(
    name: Name,
    project: Project,
    compose: Annotated[str, typer.Option(help="docker-compose.yml contents.")],
    server: Server = None,
    environment: Environment = "production",
    body: Body = None,
) -> None:
    """Create an application from a Docker Compose file."""
    fields = {
        "name": name,
        "docker_compose_raw": compose,
        "project_uuid": project,
        "server_uuid": server,
        "environment_name": environment,
    }
    _create("create_docker_compose", "Docker Compose application created:", fields, body)


@apps_app.command("update")
def update(
    id: Id,
    name: Annotated[str | None, typer.Option(help="Application name.")] = None,
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
    build_command: BuildCommand = None,
    start_command: StartCommand = None,
    install_command: Annotated[str | None, typer.Option("--install-command", help="Install command.")] = None,
    ports: Annotated[str | None, typer.Option(help="Exposed ports, e.g. 3000.")] = None,
    body: Body = None,
) -> None:
    """Update an application."""
    fields = {
        "name": name,
        "description": description,
        "build_command": build_command,
        "start_command": start_command,
        "install_command": install_command,
        "ports_exposes": ports,
    }
    data = run_operation("applications", "update", id=id, body=build_body(fields, body))
    show(data, "Application updated:")


@apps_app.command("delete")
def delete(
    id: Id,
    force: Annotated[bool, typer.Option("--force", help="Skip the confirmation prompt.")] = False,
) -> None:
    """Delete an application."""
    confirm_deletion(f"Are you sure you want to delete application {id}?", force)
    done(f"Application {id} deleted successfully.", run_operation("applications", "delete", id=id))


@apps_app.command("start")
def start(id: Id) -> None:
    """Start an application."""
    done(f"Application {id} started successfully.", run_operation("applications", "start", id=id))


@apps_app.command("stop")
def stop(id: Id) -> None:
    """Stop an application."""
    done(f"Application {id} stopped successfully.", run_operation("applications", "stop", id=id))


@apps_app.command("restart")
def restart(id: Id) -> None:
    """Restart an application."""
    done(f"Application {id} restarted successfully.", run_operation("applications", "restart", id=id))


@apps_app.command("logs")
def logs(
    id: Id,
    lines: Annotated[int, typer.Option(help="Number of log lines to fetch.", min=1)] = 100,
) -> None:
    """Fetch application logs."""
    data = run_operation("applications", "get_logs", id=id, query=json.dumps({"lines": lines}))
    if isinstance(data, dict) and isinstance(data.get("logs"), str):
        data = data["logs"]
    show(data, f"Logs for application {id}:")


@apps_app.command("exec")
def exec_command(
    id: Id,
    command: Annotated[str, typer.Argument(help="Command to run inside the container.")],
) -> None:
    """Run a command inside the application container."""
    try:
        data = invoke("applications", "execute_command", id=id, body=json.dumps({"command": command}))
    except CoolifyError as exc:
        err_console.print(f"[red]Error:[/red] {escape(exc.message)}", highlight=False)
        if exc.status_code == 404:
            console.print("[yellow]Note: this feature may not be supported in your Coolify version.[/yellow]")
            console.print(f"[yellow]{EXEC_ALTERNATIVES}[/yellow]")
        raise typer.Exit(1) from exc
    show(data, f"Command executed in application {id}:")

