from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from coolify_mcp.core.errors import format_error_for_mcp, handle_api_error

T = TypeVar("T")


async def safe_api_call(api_call: Callable[[], Awaitable[T]]) -> T:
    """Await *api_call*, classifying any failure through ``handle_api_error``."""
    try:
        return await api_call()
    except Exception as exc:
        handle_api_error(exc)


async def safe_api_call_for_mcp(api_call: Callable[[], Awaitable[T]]) -> dict[str, Any]:
    """Like ``safe_api_call`` but returns the ``{data}`` / ``{error, details}`` envelope."""
    try:
        data = await safe_api_call(api_call)
    except Exception as exc:
        return format_error_for_mcp(exc)
    return {"data": data}
