"""Tests for tidalkit.config -- precedence of overrides, environment and project file."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tidalkit.api import TidalAPI
from tidalkit.config import load_project_config, resolve_config
from tidalkit.exceptions import ConfigurationError
from tidalkit.models import DEFAULT_API_URL, DEFAULT_AUTH_URL, ClientConfig


def _write_project_config(directory: Path, data: object) -> None:
    (directory / "tidalkit.json").write_text(json.dumps(data), encoding="utf-8")


class TestDefaults:
    def test_defaults(self) -> None:
        config = resolve_config()
        assert config == ClientConfig()
        assert config.api_url == DEFAULT_API_URL
        assert config.auth_url == DEFAULT_AUTH_URL
        assert config.country_code == "US"
        assert config.client_id is None
        assert config.access_token is None

    def test_facade_resolves_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIDAL_COUNTRY_CODE", "FR")
        assert TidalAPI().config.country_code == "FR"


class TestProjectConfig:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_project_config(tmp_path) is None

    def test_loaded(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, {"country_code": "NO", "timeout": 10})
        config = resolve_config()
        assert config.country_code == "NO"
        assert config.timeout == 10

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / "tidalkit.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid project config"):
            resolve_config()

    def test_not_utf8(self, tmp_path: Path) -> None:
        (tmp_path / "tidalkit.json").write_bytes(b'{"country_code": "\xff\xfe"}')
        with pytest.raises(ConfigurationError, match="Invalid project config"):
            resolve_config()

    def test_not_an_object(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, ["US"])
        with pytest.raises(ConfigurationError, match="expected a JSON object"):
            load_project_config(tmp_path)


class TestPrecedence:
    def test_env_beats_project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_project_config(tmp_path, {"country_code": "NO", "api_url": "https://project"})
        monkeypatch.setenv("TIDAL_COUNTRY_CODE", "SE")
        config = resolve_config()
        assert config.country_code == "SE"
        assert config.api_url == "https://project"

    def test_override_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIDAL_CLIENT_ID", "env-cid")
        assert resolve_config(client_id="arg-cid").client_id == "arg-cid"

    def test_none_override_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIDAL_CLIENT_ID", "env-cid")
        assert resolve_config(client_id=None).client_id == "env-cid"

    def test_env_types_are_coerced(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIDAL_TIMEOUT", "2.5")
        monkeypatch.setenv("TIDAL_VERIFY_SSL", "false")
        config = resolve_config()
        assert config.timeout == 2.5
        assert config.verify_ssl is False

    def test_empty_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIDAL_AUTH_URL", "")
        assert resolve_config().auth_url == DEFAULT_AUTH_URL

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIDAL_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            resolve_config()
