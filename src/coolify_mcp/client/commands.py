from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from coolify_mcp.client.settings import CoolifySettings
from coolify_mcp.core.errors import ApiError

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = (
    "Command execution is not available in this Coolify version (404). "
    "This capability may not be supported in this version."
)


class HttpCommandRunner:
    """Runs container commands through the undocumented ``/applications/{uuid}/execute`` endpoint.

    Bypasses ``CoolifyApi`` because the documented API has no such endpoint.
    Swap this out once Coolify ships first-class support.
    """

    def __init__(self, settings: CoolifySettings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    async def execute(self, application_uuid: str, command: str) -> Any:
        url = f"{self._settings.base_url}/applications/{quote(application_uuid, safe='')}/execute"
        logger.debug("POST %s", url)
        async with httpx.AsyncClient(
            headers=self._settings.headers,
            timeout=self._settings.timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(url, json={"command": command})

        if response.status_code == 404:
            raise ApiError(UNSUPPORTED_MESSAGE, 404, {"url": url, "method": "POST"})
        response.raise_for_status()

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
