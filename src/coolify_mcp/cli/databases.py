from typing import Annotated

import typer

from coolify_mcp.cli.common import (
    build_body,
    confirm_deletion,
    console,
    done,
    fail,
    json_output,
    run_operation,
    show,
)
from coolify_mcp.core.catalog import DATABASE_TYPES
from coolify_mcp.core.errors import ValidationError

databases_app = typer.Typer(
    help="Manage databases (PostgreSQL, MySQL, MongoDB, Redis, etc.).",
    no_args_is_help=True,
)

DATABASE_COLUMNS = [
    ("id", "uuid"),
    ("name", "name"),
    ("type", "database_type"),
    ("status", "status"),
    ("image", "image"),
]

# Request field each generic flag maps to, per engine. A missing key means the
# engine has no such setting.
ENGINE_FIELDS: dict[str, dict[str, str]] = {
    "postgresql": {"user": "postgres_user", "password": "postgres_password", "database": "postgres_db"},
    "mysql": {
        "user": "mysql_user",
        "password": "mysql_password",
        "database": "mysql_database",
        "root_password": "mysql_root_password",
    },
    "mariadb": {
        "user": "mariadb_user",
        "password": "mariadb_password",
        "database": "mariadb_database",
        "root_password": "mariadb_root_password",
    },
    "mongodb": {
        "user": "mongo_initdb_root_username",
        "password": "mongo_initdb_root_password",
        "database": "mongo_initdb_database",
    },
    "redis": {"password": "redis_password"},
    "keydb": {"password": "keydb_password"},
    "clickhouse": {"user": "clickhouse_admin_user", "password": "clickhouse_admin_password"},
    "dragonfly": {"password": "dragonfly_password"},
}

Id = Annotated[str, typer.Argument(help="Database UUID.")]


def _engine_fields(engine: str, options: dict[str, str | None]) -> dict[str, str | None]:
    mapping = ENGINE_FIELDS[engine]
    unsupported = [flag for flag, value in options.items() if value is not None and flag not in mapping]
    if unsupported:
        flags = ", ".join(f"--{flag.replace('_', '-')}" for flag in unsupported)
        fail(ValidationError(f"{flags} not supported for {engine}", {"engine": engine}))
    return {mapping[flag]: value for flag, value in options.items() if flag in mapping}


def _register_create(engine: str) -> None:
    def create(
        name: Annotated[str, typer.Option(help="Database name.")],
        project: Annotated[str, typer.Option("--project", help="Project UUID.")],
        server: Annotated[str, typer.Option("--server", help="Server UUID.")],
        environment: Annotated[str, typer.Option("--environment", help="Environment name.")] = "production",
        description: Annotated[str | None, typer.Option(help="Description.")] = None,
        image: Annotated[str | None, typer.Option(help="Docker image, e.g. postgres:16-alpine.")] = None,
        user: Annotated[str | None, typer.Option(help="Database user.")] = None,
        password: Annotated[str | None, typer.Option(help="Password; generated when omitted.")] = None,
        database: Annotated[str | None, typer.Option(help="Initial database name.")] = None,
        root_password: Annotated[str | None, typer.Option("--root-password", help="Root password.")] = None,
        instant_deploy: Annotated[bool, typer.Option("--instant-deploy", help="Start right after creation.")] = False,
        body: Annotated[str | None, typer.Option(help="Extra JSON fields merged into the request.")] = None,
    ) -> None:
        fields = {
            "name": name,
            "project_uuid": project,
            "server_uuid": server,
            "environment_name": environment,
            "description": description,
            "image": image,
            "instant_deploy": instant_deploy,
            **_engine_fields(
                engine,
                {"user": user, "password": password, "database": database, "root_password": root_password},
            ),
        }
        data = run_operation("databases", f"create_{engine}", body=build_body(fields, body))
        show(data, f"{engine.capitalize()} database created:")

    create.__doc__ = f"Create a {engine} database."
    databases_app.command(f"create-{engine}")(create)


@databases_app.command("list")
def list_databases() -> None:
    """List all databases."""
    show(run_operation("databases", "list"), "Databases:", DATABASE_COLUMNS)


@databases_app.command("get")
def get(id: Id) -> None:
    """Show database details."""
    show(run_operation("databases", "get", id=id), "Database details:")


for _engine in DATABASE_TYPES:
    _register_create(_engine)


@databases_app.command("update")
def update(
    id: Id,
    name: Annotated[str | None, typer.Option(help="Database name.")] = None,
    description: Annotated[str | None, typer.Option(help="Description.")] = None,
    image: Annotated[str | None, typer.Option(help="Docker image.")] = None,
    is_public: Annotated[bool | None, typer.Option("--public/--private", help="Expose the port publicly.")] = None,
    public_port: Annotated[int | None, typer.Option("--public-port", help="Public port.")] = None,
    body: Annotated[str | None, typer.Option(help="Extra JSON fields merged into the request.")] = None,
) -> None:
    """Update a database."""
    fields = {
        "name": name,
        "description": description,
        "image": image,
        "is_public": is_public,
        "public_port": public_port,
    }
    show(run_operation("databases", "update", id=id, body=build_body(fields, body)), "Database updated:")


@databases_app.command("delete")
def delete(
    id: Id,
    force: Annotated[bool, typer.Option("--force", help="Skip the confirmation prompt.")] = False,
) -> None:
    """Delete a database."""
    confirm_deletion(f"Are you sure you want to delete database {id}?", force)
    done(f"Database {id} deleted successfully.", run_operation("databases", "delete", id=id))


@databases_app.command("start")
def start(id: Id) -> None:
    """Start a database."""
    done(f"Database {id} started successfully.", run_operation("databases", "start", id=id))


@databases_app.command("stop")
def stop(id: Id) -> None:
    """Stop a database."""
    done(f"Database {id} stopped successfully.", run_operation("databases", "stop", id=id))


@databases_app.command("restart")
def restart(id: Id) -> None:
    """Restart a database."""
    done(f"Database {id} restarted successfully.", run_operation("databases", "restart", id=id))


@databases_app.command("types")
def types() -> None:
    """List the database engines that can be created."""
    show(list(DATABASE_TYPES), "Available database types:")
    if not json_output():
        console.print("Create one with: coolify databases create-<type> --name <name> --project <uuid> --server <uuid>")
