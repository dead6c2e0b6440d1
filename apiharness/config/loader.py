"""Configuration loader for the API test harness.

This module loads the YAML configuration files from a config/ directory
and exposes them through a Config object with dot-notation lookup.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml

from ..exceptions import ConfigurationError
from ..http_client import HttpClient
from ..logging_config import get_module_logger

logger = get_module_logger("config")

CONFIG_DIR_ENV_VAR = "APIHARNESS_CONFIG_DIR"


class Config:
    """Configuration manager that loads and provides access to all config files."""

    def __init__(
        self, config_dict: dict[str, Any] | None = None, config_dir: str | Path | None = None
    ):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
            config_dir: Directory holding the YAML files. Falls back to
                        $APIHARNESS_CONFIG_DIR, then ./config.
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = dict(config_dict)
            self._config_dir = None
        else:
            self._configs = {}
            self._config_dir = self._find_config_dir(config_dir)
            self._load_all_configs()

    def _find_config_dir(self, config_dir: str | Path | None) -> Path:
        """Resolve the config directory from the argument, environment or cwd."""
        if config_dir is None:
            config_dir = os.environ.get(CONFIG_DIR_ENV_VAR, "config")

        resolved = Path(config_dir).resolve()
        if not resolved.exists():
            raise FileNotFoundError(
                f"Config directory not found at {resolved}. "
                f"Create it or point {CONFIG_DIR_ENV_VAR} at an existing directory."
            )

        return resolved

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        config_files = {
            "app": "app.yaml",
            "api": "api.yaml",
        }

        for key, filename in config_files.items():
            config_path = self._config_dir / filename
            if config_path.exists():
                with open(config_path, encoding="utf-8") as f:
                    loaded_config = yaml.safe_load(f)

                if not isinstance(loaded_config, dict):
                    logger.warning(
                        f"Config file {filename} must contain a dictionary, "
                        f"got {type(loaded_config).__name__}. Using empty config."
                    )
                    self._configs[key] = {}
                else:
                    self._configs[key] = loaded_config
            else:
                logger.warning(f"Config file {filename} not found at {config_path}")
                self._configs[key] = {}

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "api.timeouts.request")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("app.host")
            "http://localhost:3000"
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @property
    def app(self) -> dict[str, Any]:
        """Get application-under-test configuration."""
        return cast(dict[str, Any], self._configs.get("app", {}))

    @property
    def api(self) -> dict[str, Any]:
        """Get API client configuration."""
        return cast(dict[str, Any], self._configs.get("api", {}))

    @property
    def app_host(self) -> str:
        """Base URL of the application under test."""
        host = self.get("app.host")
        if not host:
            raise ConfigurationError("base URL of the application is not set", "app.host")
        return str(host)

    @property
    def request_timeout(self) -> float | None:
        """Per-request timeout in seconds, or None to let requests wait forever."""
        return self.get("api.timeouts.request")

    def build_http_client(self) -> HttpClient:
        """Create the default transport using the configured timeout."""
        return HttpClient(timeout=self.request_timeout)

    def reload(self):
        """Reload all configuration files. A dict-backed Config has nothing to reload."""
        if self._config_dir is None:
            return
        self._configs.clear()
        self._load_all_configs()
