"""Configuration resolution with a precedence chain.

:func:`resolve_config` merges, from high to low precedence:

1. Explicit keyword overrides passed by the caller.
2. Environment variables (``TIDAL_API_URL``, ``TIDAL_AUTH_URL``,
   ``TIDAL_COUNTRY_CODE``, ``TIDAL_TIMEOUT``, ``TIDAL_VERIFY_SSL``,
   ``TIDAL_CLIENT_ID``, ``TIDAL_ACCESS_TOKEN``).
3. Project config (``./tidalkit.json`` in the working directory).
4. The defaults declared on :class:`~tidalkit.models.ClientConfig`.

Nothing is ever written back; tokens are not persisted by this library.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

import pydantic

from tidalkit.exceptions import ConfigurationError
from tidalkit.models import ClientConfig

_PROJECT_CONFIG_FILENAME = "tidalkit.json"

ENV_VARS: dict[str, str] = {
    "api_url": "TIDAL_API_URL",
    "auth_url": "TIDAL_AUTH_URL",
    "country_code": "TIDAL_COUNTRY_CODE",
    "timeout": "TIDAL_TIMEOUT",
    "verify_ssl": "TIDAL_VERIFY_SSL",
    "client_id": "TIDAL_CLIENT_ID",
    "access_token": "TIDAL_ACCESS_TOKEN",
}
"""Mapping of :class:`~tidalkit.models.ClientConfig` fields to environment variables."""


def load_project_config(directory: Optional[Path] = None) -> Optional[dict[str, Any]]:
    """Load ``tidalkit.json`` from *directory* (default: the working directory).

    Returns:
        The parsed JSON object, or ``None`` when the file does not exist.

    Raises:
        ConfigurationError: If the file is not valid JSON or not an object.
    """
    path = (directory or Path.cwd()) / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError) as exc:
        raise ConfigurationError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid project config at {path}: expected a JSON object")
    return data


def _env_values() -> dict[str, str]:
    """Collect non-empty environment overrides keyed by config field name."""
    values: dict[str, str] = {}
    for field_name, var_name in ENV_VARS.items():
        value = os.environ.get(var_name, "")
        if value:
            values[field_name] = value
    return values


def resolve_config(**overrides: Any) -> ClientConfig:
    """Resolve the effective :class:`~tidalkit.models.ClientConfig`.

    Args:
        **overrides: Field values with the highest precedence. ``None``
            values are ignored so callers can forward optional arguments.

    Returns:
        The merged configuration.

    Raises:
        ConfigurationError: If a value from any layer fails validation.
    """
    merged: dict[str, Any] = {}

    project = load_project_config()
    if project is not None:
        merged.update(project)

    merged.update(_env_values())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ClientConfig.model_validate(merged)
    except pydantic.ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
