"""
Configuration loader — reads devlibguide.yml into the AppConfig model.

The config file is optional: with no file every setting takes its
default.  When a file is present it is parsed with PyYAML and validated
against the Pydantic schema.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "devlibguide.yml"

DEFAULT_LANGUAGES = ["c", "cpp", "java", "javascript", "python", "rust", "swift"]


class ConfigError(Exception):
    """Raised when the configuration file is invalid or unreadable."""


class ServerConfig(BaseModel):
    """HTTP server settings."""

    host: str = "127.0.0.1"
    port: int = 5000
    base_url: str = "http://127.0.0.1:5000"  # used in embed instructions


class AppConfig(BaseModel):
    """Application settings loaded from devlibguide.yml."""

    languages: list[str] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    data_dir: Path | None = None          # override for the JSON catalogs
    warn_unknown_tags: bool = False       # log tags outside the taxonomy at WARNING
    server: ServerConfig = Field(default_factory=ServerConfig)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for devlibguide.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to devlibguide.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None, search: bool = True) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Explicit path to devlibguide.yml.
        search: When no path is given, search upward from cwd.  If nothing
            is found the defaults are returned.

    Returns:
        Validated AppConfig model.

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid.
    """
    if path is None and search:
        path = find_config_file()

    if path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILE)
        return AppConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = AppConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    # Relative data_dir is resolved against the config file's directory
    if config.data_dir is not None and not config.data_dir.is_absolute():
        config.data_dir = (path.parent / config.data_dir).resolve()

    logger.info("Loaded config from %s (%d languages)", path, len(config.languages))
    return config
