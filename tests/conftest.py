"""Shared fixtures and helpers for tests."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from coolify_mcp.client.coolify import CoolifyApi

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def api() -> AsyncMock:
    """A Coolify client whose endpoints are AsyncMocks; unknown attributes raise."""
    return AsyncMock(spec=CoolifyApi)


@pytest.fixture
def command_runner() -> AsyncMock:
    runner = AsyncMock()
    runner.execute.return_value = {"output": "ok"}
    return runner


@pytest.fixture
def coolify_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Valid connection settings, isolated from any ``.env`` in the working tree."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COOLIFY_API_URL", "https://coolify.example.com/")
    monkeypatch.setenv("COOLIFY_API_TOKEN", "token-1234567890")
    monkeypatch.delenv("COOLIFY_TIMEOUT", raising=False)


@pytest.fixture
def no_coolify_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("COOLIFY_API_URL", "COOLIFY_API_TOKEN", "COOLIFY_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
