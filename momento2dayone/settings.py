"""
Global application settings and configuration management.

This module provides centralized configuration management using Pydantic Settings
with support for environment variables, YAML configuration files, and validation.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml
from dotenv import load_dotenv

from .core.exceptions import ConfigurationError


class MomentoSettings(BaseSettings):
    """Momento export configuration."""

    media_dir: Optional[Path] = Field(
        default=None,
        description="Attachments directory (default: 'Attachments' next to the export file)"
    )
    expected_moments: Optional[int] = Field(
        default=None,
        ge=0,
        description="Moment count reported by Momento, used as a sanity check"
    )

    model_config = SettingsConfigDict(env_prefix="MOMENTO_")


class DayOneSettings(BaseSettings):
    """Day One command line tool configuration."""

    executable: str = Field(default="dayone2", description="dayone2 executable name or path")
    time_zone: str = Field(default="UTC", description="Time zone passed with every entry")
    journal: Optional[str] = Field(default=None, description="Target journal name")
    photo_extension: str = Field(
        default=".jpg",
        description="Attachment extension imported as photos"
    )
    batch_size: int = Field(
        default=100,
        ge=1,
        description="Entries imported between rate-limit pauses"
    )
    batch_pause_seconds: float = Field(
        default=10.0,
        ge=0.0,
        description="Pause after each batch"
    )
    command_timeout: float = Field(
        default=60.0,
        gt=0.0,
        description="Timeout for a single dayone2 invocation"
    )
    require_macos: bool = Field(default=True, description="Refuse to import off macOS")

    model_config = SettingsConfigDict(env_prefix="DAYONE_")

    @field_validator("photo_extension")
    @classmethod
    def validate_photo_extension(cls, v: str) -> str:
        """Normalize the extension to start with a dot."""
        v = v.strip()
        if not v:
            raise ValueError("photo_extension must not be empty")
        return v if v.startswith(".") else f".{v}"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    file: Optional[Path] = Field(
        default=Path("logs/momento2dayone.log"),
        description="Log file path"
    )

    model_config = SettingsConfigDict(env_prefix="LOG_")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v

    @field_validator("file")
    @classmethod
    def validate_log_file(cls, v: Optional[Path]) -> Optional[Path]:
        """Resolve the log file path."""
        if v is None:
            return None
        if isinstance(v, str):
            v = Path(v)
        return v.resolve()


class AppSettings(BaseSettings):
    """Main application settings."""

    name: str = Field(default="momento2dayone", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Sub-configurations
    momento: MomentoSettings = Field(default_factory=MomentoSettings)
    dayone: DayOneSettings = Field(default_factory=DayOneSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "AppSettings":
        """Load settings from YAML file."""
        if not yaml_path.exists():
            raise FileNotFoundError(f"Settings file not found: {yaml_path}")

        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping: {yaml_path}"
            )

        # Convert nested dict to settings objects
        settings_data = {}
        for key, value in data.items():
            if key == "momento" and isinstance(value, dict):
                settings_data["momento"] = MomentoSettings(**value)
            elif key == "dayone" and isinstance(value, dict):
                settings_data["dayone"] = DayOneSettings(**value)
            elif key == "logging" and isinstance(value, dict):
                settings_data["logging"] = LoggingSettings(**value)
            elif key == "app" and isinstance(value, dict):
                settings_data.update(value)
            else:
                settings_data[key] = value

        return cls(**settings_data)


def load_settings(
    yaml_path: Optional[Path] = None,
    env_file: Optional[Path] = None
) -> AppSettings:
    """
    Load application settings from multiple sources.

    Priority order:
    1. Environment variables
    2. YAML configuration file
    3. Default values

    Args:
        yaml_path: Path to YAML configuration file
        env_file: Path to environment file (.env)

    Returns:
        Configured AppSettings instance
    """
    # Load .env file explicitly
    if env_file and env_file.exists():
        load_dotenv(env_file)
    else:
        # Try to load from default .env location
        load_dotenv()

    # Start with defaults and environment variables
    settings = AppSettings()

    # Override with YAML configuration if provided
    if yaml_path and yaml_path.exists():
        yaml_settings = AppSettings.from_yaml(yaml_path)
        merged = yaml_settings.model_dump()

        # Values set from the environment win over the YAML file, field by field
        sections = {"momento": MomentoSettings, "dayone": DayOneSettings, "logging": LoggingSettings}
        merged.update(settings.model_dump(include=settings.model_fields_set - set(sections)))
        for key, section_cls in sections.items():
            env_section = section_cls()
            merged[key].update(env_section.model_dump(include=env_section.model_fields_set))

        settings = AppSettings(**merged)

    return settings


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        # Try to load from default locations
        yaml_path = Path("configs/settings.yaml")
        env_path = Path(".env")
        _settings = load_settings(
            yaml_path=yaml_path if yaml_path.exists() else None,
            env_file=env_path if env_path.exists() else None
        )
    return _settings


def reload_settings(
    yaml_path: Optional[Path] = None,
    env_file: Optional[Path] = None
) -> AppSettings:
    """Reload settings from files (useful for testing or runtime config changes)."""
    global _settings
    _settings = load_settings(yaml_path=yaml_path, env_file=env_file)
    return _settings
