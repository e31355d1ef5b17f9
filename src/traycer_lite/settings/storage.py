"""
Settings loading for Traycer Lite.

Reads an optional YAML file (~/.traycer-lite/config.yaml by default) and then
applies environment overrides. The API key comes only from
HUGGINGFACE_API_KEY.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .models import Settings

logger = logging.getLogger(__name__)

API_KEY_ENV = "HUGGINGFACE_API_KEY"

ENV_OVERRIDES = {
    "model": "TRAYCER_LITE_MODEL",
    "base_url": "TRAYCER_LITE_BASE_URL",
    "timeout": "TRAYCER_LITE_TIMEOUT",
    "log_level": "TRAYCER_LITE_LOG_LEVEL",
}


class SettingsStorage:
    """
    Settings loader.

    Attributes:
        config_dir: Directory holding the configuration file.
        config_file: Path to the YAML configuration file.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        """
        Initialize the settings storage.

        Args:
            config_dir: Optional configuration directory.
                       Defaults to ~/.traycer-lite/
        """
        self.config_dir = config_dir or Path.home() / ".traycer-lite"
        self.config_file = self.config_dir / "config.yaml"

    def load(self, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Load settings from the config file and the environment.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Settings with file values, then environment overrides applied.
        """
        env = os.environ if environ is None else environ

        data = self._read_file()
        for key, var in ENV_OVERRIDES.items():
            value = env.get(var, "").strip()
            if value:
                data[key] = value

        settings = self._dict_to_settings(data)
        settings.api_key = env.get(API_KEY_ENV) or None
        return settings

    def _read_file(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable %s: %s", self.config_file, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a mapping", self.config_file)
            return {}

        if "api_key" in data:
            logger.warning("Ignoring api_key in %s; set %s instead", self.config_file, API_KEY_ENV)
            data.pop("api_key")
        return data

    def _dict_to_settings(self, data: dict[str, Any]) -> Settings:
        """
        Convert a raw dictionary to Settings, keeping defaults for bad values.

        Args:
            data: Merged file and environment values.

        Returns:
            Settings object.
        """
        settings = Settings()

        if data.get("model"):
            settings.model = str(data["model"])
        if data.get("base_url"):
            settings.base_url = str(data["base_url"]).rstrip("/")
        if data.get("log_level"):
            settings.log_level = str(data["log_level"]).upper()

        if "timeout" in data:
            try:
                timeout = float(data["timeout"])
            except (TypeError, ValueError):
                logger.warning("Invalid timeout %r, using %s", data["timeout"], settings.timeout)
            else:
                if timeout > 0:
                    settings.timeout = timeout
                else:
                    logger.warning("Timeout must be positive, using %s", settings.timeout)

        return settings


def load_settings(config_dir: Path | None = None) -> Settings:
    """Load settings from the default locations."""
    return SettingsStorage(config_dir).load()
