"""Helpers shared by every command group: client factory, dispatch and rendering."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping, Sequence
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from coolify_mcp.client.commands import HttpCommandRunner
from coolify_mcp.client.coolify import CoolifyApi
from coolify_mcp.client.settings import load_settings
from coolify_mcp.core.errors import CoolifyError, ValidationError
from coolify_mcp.core.handlers import OperationRequest, build_handler
from coolify_mcp.core.validation import parse_json_body

console = Console()
err_console = Console(stderr=True)

_MAX_CELL_WIDTH = 50
_output = {"json": False}

Column = tuple[str, str]


def set_json_output(enabled: bool) -> None:
    _output["json"] = enabled


def json_output() -> bool:
    return _output["json"]


def _get_clients() -> tuple[CoolifyApi, HttpCommandRunner]:
    settings = load_settings()
    return CoolifyApi.from_settings(settings), HttpCommandRunner(settings)


def invoke(
    resource: str,
    operation: str,
    *,
    id: str | None = None,
    secondary_id: str | None = None,
    body: str | None = None,
    query: str | None = None,
) -> Any:
    """Run one operation against a fresh client and return the envelope's ``data``.

    Raises ``CoolifyError``; use ``run_operation`` to turn it into an exit code.
    """

    async def _run() -> Any:
        api, runner = _get_clients()
        try:
            handler = build_handler(resource, api, runner)
            request = OperationRequest(operation, id=id, secondary_id=secondary_id, body=body, query=query)
            envelope = await handler.handle(request)
            return envelope["data"]
        finally:
            await api.aclose()

    return asyncio.run(_run())


def run_operation(resource: str, operation: str, **fields: str | None) -> Any:
    try:
        return invoke(resource, operation, **fields)
    except CoolifyError as exc:
        fail(exc)


def fail(exc: CoolifyError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(exc.message)}", highlight=False)
    raise typer.Exit(1)


def build_body(fields: Mapping[str, Any], body: str | None = None) -> str:
    """Serialize flag values, dropping unset ones; ``body`` JSON is merged on top."""
    payload = {key: value for key, value in fields.items() if value is not None}
    if body:
        try:
            extra = parse_json_body(body)
        except CoolifyError as exc:
            fail(exc)
        if not isinstance(extra, dict):
            fail(ValidationError("--body must be a JSON object", {"body": body[:200]}))
        payload.update(extra)
    return json.dumps(payload)


def parse_json_option(value: str | None, option: str) -> Any:
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        fail(ValidationError(f"{option} must be valid JSON: {exc.msg}", {"option": option}))


def confirm_deletion(message: str, force: bool) -> None:
    if force:
        return
    if not typer.confirm(message, default=False):
        console.print("[yellow]Deletion cancelled.[/yellow]")
        raise typer.Exit(0)


def _lookup(item: Mapping[str, Any], key: str) -> Any:
    value: Any = item
    for part in key.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    return value


def _cell(value: Any) -> str:
    if value is None or value == "":
        return "N/A"
    text = str(value)
    if len(text) > _MAX_CELL_WIDTH:
        return text[: _MAX_CELL_WIDTH - 3] + "..."
    return text


def show(data: Any, title: str | None = None, columns: Sequence[Column] | None = None) -> None:
    """Print ``data``: raw JSON with ``--json``, a table for lists of objects, pretty JSON otherwise."""
    if _output["json"]:
        typer.echo(json.dumps(data, indent=2, default=str))
        return

    if title:
        console.print(f"[green]{title}[/green]")

    if columns and isinstance(data, list) and all(isinstance(item, Mapping) for item in data):
        table = Table(show_lines=False)
        for header, _ in columns:
            table.add_column(header)
        for item in data:
            table.add_row(*(_cell(_lookup(item, key)) for _, key in columns))
        console.print(table)
        console.print(f"({len(data)} rows)")
    elif isinstance(data, str):
        console.out(data, highlight=False)
    elif data is not None:
        console.print_json(json.dumps(data, default=str))


def done(message: str, data: Any = None) -> None:
    """Report a lifecycle or delete result, echoing any payload the API returned."""
    if _output["json"]:
        typer.echo(json.dumps(data, indent=2, default=str))
        return
    console.print(f"[green]{message}[/green]")
    if data:
        console.print_json(json.dumps(data, default=str))
