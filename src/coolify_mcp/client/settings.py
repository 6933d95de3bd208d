"""Coolify connection settings.

Read from ``COOLIFY_*`` environment variables or a ``.env`` file in the
working directory, e.g. ``COOLIFY_API_URL=https://coolify.example.com``.
"""

from __future__ import annotations

from pydantic import AnyHttpUrl, Field
from pydantic import ValidationError as SettingsValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from coolify_mcp.core.errors import ConfigurationError

REMEDIATION = (
    "Please set COOLIFY_API_URL (your Coolify instance URL, e.g. https://coolify.example.com) "
    "and COOLIFY_API_TOKEN (an API token from Keys & Tokens), or add them to a .env file."
)


class CoolifySettings(BaseSettings):
    api_url: AnyHttpUrl
    api_token: str = Field(min_length=10, repr=False)
    timeout: float = Field(default=30.0, gt=0)

    model_config = SettingsConfigDict(env_prefix="COOLIFY_", env_file=".env", extra="ignore")

    @property
    def base_url(self) -> str:
        return f"{str(self.api_url).rstrip('/')}/api/v1"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }


def load_settings() -> CoolifySettings:
    """Load and validate settings, raising ``ConfigurationError`` with a remediation hint."""
    try:
        return CoolifySettings()  # type: ignore[call-arg]
    except SettingsValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(
            f"Invalid configuration: {problems}. {REMEDIATION}",
            {"fields": [".".join(str(p) for p in err["loc"]) for err in exc.errors()]},
        ) from exc
