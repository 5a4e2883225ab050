"""Configuration management for hostparts."""

import json
import logging
from pathlib import Path
from typing import Any

from .constants import CONFIG_FILE, CONFIG_VERSION, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

# Setting name -> accepted types
_SETTING_TYPES: dict[str, tuple[type, ...]] = {
    "include_private": (bool,),
    "suffix_list_path": (str, type(None)),
    "log_file": (str, type(None)),
}


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


class ConfigManager:
    """Manages application configuration loading, validation, and persistence."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else CONFIG_FILE
        self._config: dict[str, Any] = {}
        self.load()

    def _create_default_config(self) -> dict[str, Any]:
        """Generate default configuration."""
        return {
            "version": CONFIG_VERSION,
            "settings": DEFAULT_SETTINGS.copy(),
        }

    def _validate_setting(self, name: str, value: Any) -> str | None:
        """Validate a single setting and return an error message, if any."""
        expected = _SETTING_TYPES.get(name)
        if expected is None:
            return f"Unknown setting '{name}'"
        if not isinstance(value, expected):
            names = " or ".join("null" if t is type(None) else t.__name__ for t in expected)
            return f"Setting '{name}' must be {names}"
        return None

    def _validate_config(self, config: Any) -> list[str]:
        """Validate configuration and return list of errors."""
        if not isinstance(config, dict):
            return ["Configuration must be a JSON object"]

        errors = []

        if not isinstance(config.get("version"), int):
            errors.append("Missing or invalid 'version' field")

        settings = config.get("settings")
        if not isinstance(settings, dict):
            errors.append("Missing or invalid 'settings' field")
        else:
            for name, value in settings.items():
                error = self._validate_setting(name, value)
                if error:
                    errors.append(error)

        return errors

    def load(self) -> None:
        """Load configuration from file, falling back to defaults if absent."""
        if not self.config_path.exists():
            logger.info("Config file not found at %s, using defaults", self.config_path)
            self._config = self._create_default_config()
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config file {self.config_path}: {e}") from e

        errors = self._validate_config(loaded_config)
        if errors:
            for error in errors:
                logger.error("Config validation error: %s", error)
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

        # Settings missing from the file keep their defaults
        settings = DEFAULT_SETTINGS.copy()
        settings.update(loaded_config["settings"])
        self._config = {"version": loaded_config["version"], "settings": settings}
        logger.debug("Configuration loaded from %s", self.config_path)

    def save(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2)
        logger.debug("Configuration saved to %s", self.config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Return a copy of the current configuration."""
        return {"version": self._config["version"], "settings": self.settings}

    @property
    def settings(self) -> dict[str, Any]:
        """Return application settings."""
        return self._config.get("settings", {}).copy()

    def update_settings(self, **kwargs: Any) -> None:
        """Update settings with provided values after validation."""
        for name, value in kwargs.items():
            error = self._validate_setting(name, value)
            if error:
                raise ConfigError(error)
        self._config.setdefault("settings", {}).update(kwargs)
