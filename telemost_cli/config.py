"""
Configuration management for Telemost CLI.

Settings are stored as JSON in the user's config directory and can be
overridden with environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Dict, Any

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://cloud-api.yandex.net/v1/telemost-api/conferences"
DEFAULT_TIMEOUT = 30
DEFAULT_CONFIG_DIR = Path.home() / ".telemost"
CONFIG_FILE_NAME = "config.json"

ENV_TOKEN = "TELEMOST_TOKEN"
ENV_API_URL = "TELEMOST_API_URL"


@dataclass
class TelemostConfig:
    """Telemost client configuration."""

    token: str = ""
    api_url: str = DEFAULT_API_URL
    timeout: int = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    app_name: str = ""
    app_version: str = ""

    def is_configured(self) -> bool:
        """Check whether an OAuth token is available."""
        return bool(self.token)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TelemostConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def apply_env(self) -> "TelemostConfig":
        """Override values with environment variables, if set."""
        token = os.environ.get(ENV_TOKEN)
        if token:
            self.token = token

        api_url = os.environ.get(ENV_API_URL)
        if api_url:
            self.api_url = api_url

        return self


class ConfigManager:
    """Loads and persists the configuration file."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
        self._config: Optional[TelemostConfig] = None

    def get_config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def load(self) -> TelemostConfig:
        """
        Load configuration from disk.

        Returns:
            Stored configuration, or defaults if nothing is stored yet

        Raises:
            ConfigError: If the file exists but cannot be parsed
        """
        path = self.get_config_path()

        if not path.exists():
            return TelemostConfig()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read configuration file {path}", details=str(e))

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid configuration file {path}")

        return TelemostConfig.from_dict(data)

    def get(self) -> TelemostConfig:
        """Get current configuration (file values with environment overrides)."""
        if self._config is None:
            self._config = self.load().apply_env()
        return self._config

    def save(self, config: TelemostConfig) -> None:
        path = self.get_config_path()

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
            os.chmod(path, 0o600)
        except OSError as e:
            raise ConfigError(f"Cannot write configuration file {path}", details=str(e))

        logger.debug("Configuration saved to %s", path)
        self._config = config

    def update(self, **kwargs: Any) -> TelemostConfig:
        """Update stored configuration with the given values."""
        config = self.load()

        for key, value in kwargs.items():
            if not hasattr(config, key):
                raise ConfigError(f"Unknown configuration option: {key}")
            setattr(config, key, value)

        self.save(config)
        self._config = None
        return config

    def clear(self) -> None:
        """Remove the configuration file."""
        path = self.get_config_path()
        if path.exists():
            path.unlink()
        self._config = None


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get the shared config manager, creating it if needed."""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config() -> TelemostConfig:
    """Get current configuration."""
    return get_config_manager().get()
