import typer

from coolify_mcp.cli.common import done, run_operation, show

system_app = typer.Typer(help="Instance-wide operations.", no_args_is_help=True)

RESOURCE_COLUMNS = [("id", "uuid"), ("name", "name"), ("type", "type"), ("status", "status")]


@system_app.command("info")
def info() -> None:
    """Show the Coolify version and health."""
    data = {
        "version": run_operation("system", "version"),
        "health": run_operation("system", "health"),
    }
    show(data, "System information:")


@system_app.command("version")
def version() -> None:
    """Show the Coolify version."""
    show(run_operation("system", "version"), "Coolify version:")


@system_app.command("health")
def health() -> None:
    """Run the instance health check."""
    show(run_operation("system", "health"), "Health check:")


@system_app.command("enable-api")
def enable_api() -> None:
    """Enable the Coolify API."""
    done("API enabled.", run_operation("system", "enable_api"))


@system_app.command("disable-api")
def disable_api() -> None:
    """Disable the Coolify API."""
    done("API disabled.", run_operation("system", "disable_api"))


@system_app.command("resources")
def resources() -> None:
    """List every resource on the instance."""
    show(run_operation("system", "resources"), "Resources:", RESOURCE_COLUMNS)
