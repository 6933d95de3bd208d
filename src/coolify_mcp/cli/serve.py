import asyncio
import logging
from typing import Annotated

import typer

from coolify_mcp.cli.common import err_console
from coolify_mcp.client.commands import HttpCommandRunner
from coolify_mcp.client.coolify import CoolifyApi
from coolify_mcp.client.settings import load_settings
from coolify_mcp.core.errors import ConfigurationError
from coolify_mcp.mcp.server import create_mcp_server

logger = logging.getLogger(__name__)


def run_server(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the MCP server until the transport closes.

    Without valid configuration the server still starts, exposing only
    ``ping`` and ``config_status``.
    """
    transport_kwargs = {} if transport == "stdio" else {"host": host, "port": port}

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.warning("Coolify is not configured: %s", exc.message)
        server = create_mcp_server(None, config_error=exc.message)
        asyncio.run(server.run_async(transport=transport, **transport_kwargs))  # type: ignore[arg-type]
        return

    api = CoolifyApi.from_settings(settings)
    server = create_mcp_server(api, HttpCommandRunner(settings))

    async def _run() -> None:
        async with api:
            await server.run_async(transport=transport, **transport_kwargs)  # type: ignore[arg-type]

    asyncio.run(_run())


def serve(
    transport: Annotated[str, typer.Option(help="stdio, sse or streamable-http.")] = "stdio",
    host: Annotated[str, typer.Option(help="Bind address for HTTP transports.")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port for HTTP transports.")] = 8000,
) -> None:
    """Start the MCP server."""
    err_console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    run_server(transport, host, port)
