import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LEVEL = "WARNING"


def configure_logging(level: str | None = None) -> None:
    """Route ``coolify_mcp`` logs to stderr; stdout carries CLI output and the MCP stdio transport."""
    resolved = (level or os.getenv("COOLIFY_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)
    logger = logging.getLogger("coolify_mcp")
    logger.handlers = [handler]
    logger.setLevel(getattr(logging, resolved, logging.WARNING))
    logger.propagate = False
