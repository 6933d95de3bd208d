from typing import Annotated

import typer
from rich.table import Table

from coolify_mcp.cli.apps import apps_app
from coolify_mcp.cli.common import console, fail, set_json_output
from coolify_mcp.cli.databases import databases_app
from coolify_mcp.cli.deployments import deployments_app
from coolify_mcp.cli.private_keys import private_keys_app
from coolify_mcp.cli.projects import projects_app
from coolify_mcp.cli.serve import serve
from coolify_mcp.cli.servers import servers_app
from coolify_mcp.cli.services import services_app
from coolify_mcp.cli.system import system_app
from coolify_mcp.client.settings import load_settings
from coolify_mcp.core.errors import ConfigurationError
from coolify_mcp.logging_config import configure_logging

app = typer.Typer(
    name="coolify",
    help="Coolify CLI: manage applications, databases, services and servers.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main_options(
    json_output: Annotated[bool, typer.Option("--json", help="Print raw JSON instead of tables.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    set_json_output(json_output)
    configure_logging("DEBUG" if verbose else None)


@app.command("config")
def config() -> None:
    """Show the active Coolify configuration."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        fail(exc)
    table = Table(show_header=False)
    table.add_row("API URL", str(settings.api_url))
    table.add_row("Base URL", settings.base_url)
    table.add_row("API token", f"{settings.api_token[:4]}...{settings.api_token[-4:]}")
    table.add_row("Timeout", f"{settings.timeout:g}s")
    console.print(table)


app.add_typer(apps_app, name="apps")
app.add_typer(databases_app, name="databases")
app.add_typer(services_app, name="services")
app.add_typer(servers_app, name="servers")
app.add_typer(projects_app, name="projects")
app.add_typer(deployments_app, name="deployments")
app.add_typer(private_keys_app, name="private-keys")
app.add_typer(system_app, name="system")
app.command("serve")(serve)


def main() -> None:
    app()
