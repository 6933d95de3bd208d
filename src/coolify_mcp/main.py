"""``coolify-mcp`` entry point: MCP server for MCP clients, CLI for humans.

An MCP client spawns the process with piped stdin and no arguments, so that
case (or an explicit ``--server``/``--mcp``) starts the server. ``--cli``
forces the CLI even when stdin is not a terminal.
"""

import sys
from collections.abc import Sequence

from coolify_mcp.cli.app import app as cli_app
from coolify_mcp.cli.serve import run_server
from coolify_mcp.logging_config import configure_logging

SERVER_FLAGS = frozenset({"--server", "--mcp"})
CLI_FLAG = "--cli"


def wants_server(args: Sequence[str], interactive: bool) -> bool:
    if CLI_FLAG in args:
        return False
    if SERVER_FLAGS.intersection(args):
        return True
    return not args and not interactive


def main(argv: Sequence[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)

    if wants_server(args, sys.stdin.isatty()):
        configure_logging()
        run_server()
        return

    cli_app(args=[arg for arg in args if arg != CLI_FLAG], prog_name="coolify-mcp")


if __name__ == "__main__":
    main()
