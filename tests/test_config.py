"""
Tests for configuration management.
"""

import json

import pytest

from telemost_cli.config import (
    DEFAULT_API_URL,
    ConfigManager,
    TelemostConfig,
)
from telemost_cli.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TELEMOST_TOKEN", raising=False)
    monkeypatch.delenv("TELEMOST_API_URL", raising=False)


class TestTelemostConfig:
    """Tests for TelemostConfig."""

    def test_defaults(self):
        config = TelemostConfig()
        assert config.api_url == DEFAULT_API_URL
        assert config.timeout == 30
        assert config.verify_ssl is True
        assert config.is_configured() is False

    def test_is_configured(self):
        assert TelemostConfig(token="abc").is_configured() is True

    def test_from_dict_ignores_unknown_keys(self):
        config = TelemostConfig.from_dict({"token": "abc", "legacy": 1})
        assert config.token == "abc"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("TELEMOST_TOKEN", "env-token")
        monkeypatch.setenv("TELEMOST_API_URL", "http://localhost:8080")

        config = TelemostConfig(token="file-token").apply_env()

        assert config.token == "env-token"
        assert config.api_url == "http://localhost:8080"


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_missing_file_gives_defaults(self, tmp_path):
        manager = ConfigManager(tmp_path)
        assert manager.get() == TelemostConfig()

    def test_update_persists(self, tmp_path):
        manager = ConfigManager(tmp_path)
        manager.update(token="abc", timeout=60)

        data = json.loads((tmp_path / "config.json").read_text())
        assert data["token"] == "abc"
        assert data["timeout"] == 60

        assert ConfigManager(tmp_path).get().token == "abc"

    def test_update_unknown_option(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigManager(tmp_path).update(colour="blue")

    def test_invalid_file(self, tmp_path):
        (tmp_path / "config.json").write_text("not json")

        with pytest.raises(ConfigError) as exc_info:
            ConfigManager(tmp_path).get()

        assert "Cannot read configuration file" in str(exc_info.value)

    def test_env_applied_on_get(self, tmp_path, monkeypatch):
        manager = ConfigManager(tmp_path)
        manager.update(token="file-token")
        monkeypatch.setenv("TELEMOST_TOKEN", "env-token")

        assert manager.get().token == "env-token"

    def test_clear(self, tmp_path):
        manager = ConfigManager(tmp_path)
        manager.update(token="abc")
        manager.clear()

        assert not manager.get_config_path().exists()
        assert manager.get().token == ""
