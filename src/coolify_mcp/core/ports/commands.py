from typing import Any, Protocol


class CommandRunner(Protocol):
    """Runs a shell command inside an application's container.

    The Coolify API has no documented endpoint for this, so implementations
    must turn a 404 into an ``ApiError`` saying the capability may not be
    supported in this version rather than a generic API error.
    """

    async def execute(self, application_uuid: str, command: str) -> Any: ...
