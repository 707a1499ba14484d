"""Shared test fixtures for tidalkit.

Provides an isolated environment (no ``TIDAL_*`` variables, a temporary
working directory without ``tidalkit.json``) and a configuration that
points at non-routable test hosts. These fixtures are automatically
discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tidalkit.config import ENV_VARS
from tidalkit.models import ClientConfig

API_URL = "https://api.tidal.test"
AUTH_URL = "https://auth.tidal.test"


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear all TIDAL_* variables and run each test from an empty directory."""
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> ClientConfig:
    """A configuration without fallback credentials."""
    return ClientConfig(api_url=API_URL, auth_url=AUTH_URL, timeout=5)
