"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

OUTPUT_FORMATS = ("table", "json", "markdown")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".dailycal"


def default_config_path() -> Path:
    """Return the default config.yaml path."""
    return _default_config_dir() / "config.yaml"


@dataclass
class ApiConfig:
    """HTTP API server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Main application settings."""

    api: ApiConfig = field(default_factory=ApiConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.dailycal/config.yaml

        Returns:
            Settings instance

        Raises:
            ValueError: If the file is not valid YAML or holds an invalid value
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must contain a mapping of settings")

        settings = cls()

        if "api" in data:
            api_data = data["api"] or {}
            if "host" in api_data:
                settings.api.host = str(api_data["host"])
            if "port" in api_data:
                try:
                    settings.api.port = int(api_data["port"])
                except (TypeError, ValueError):
                    raise ValueError(
                        f"api.port must be an integer, got '{api_data['port']}'"
                    ) from None

        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "output_format" in def_data:
                output_format = def_data["output_format"]
                if output_format not in OUTPUT_FORMATS:
                    raise ValueError(
                        f"output_format must be one of {OUTPUT_FORMATS}, got '{output_format}'"
                    )
                settings.defaults.output_format = output_format

        if "logging" in data:
            log_data = data["logging"] or {}
            if "level" in log_data:
                level = str(log_data["level"]).upper()
                if level not in LOG_LEVELS:
                    raise ValueError(f"logging.level must be one of {LOG_LEVELS}, got '{level}'")
                settings.logging.level = level

        return settings

    def to_dict(self) -> dict:
        """Convert to the dictionary written to config.yaml."""
        return {
            "api": {
                "host": self.api.host,
                "port": self.api.port,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
            "logging": {
                "level": self.logging.level,
            },
        }

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.dailycal/config.yaml

        Returns:
            Path the settings were written to
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

        return config_path


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
