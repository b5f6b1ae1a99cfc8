"""
Launcher configuration.

Settings are layered, lowest to highest precedence:

1. Built-in defaults
2. ``tailwindkit.yaml`` in the current working directory (optional)
3. Environment variables

Example ``tailwindkit.yaml``::

    version: v4.0.0
    debug: false
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from tailwindkit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tailwindkit.yaml"

VERSION_ENV = "TAILWINDCSS_VERSION"
DEBUG_ENV = "TAILWINDKIT_DEBUG"
LEGACY_DEBUG_ENV = "GOTAILWINDCSS_DEBUG"

KNOWN_KEYS = ("version", "debug")


@dataclass(frozen=True)
class LauncherConfig:
    """
    Effective launcher settings.

    Attributes:
        version: Pinned tailwindcss release tag, or None to track the latest
        debug: Enable debug logging
    """

    version: Optional[str] = None
    debug: bool = False

    @property
    def is_pinned(self) -> bool:
        return self.version is not None


def load_yaml_config(config_file: Path) -> Dict[str, Any]:
    """
    Load and parse the YAML configuration file.

    Args:
        config_file: Path to YAML configuration file

    Returns:
        Configuration dictionary (empty dict if the file doesn't exist)

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or is not a mapping
    """
    if not config_file.exists():
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Expected a mapping in {config_file}, got {type(config).__name__}"
        )

    for key in config:
        if key not in KNOWN_KEYS:
            logger.debug(f"Ignoring unknown configuration key: {key}")

    return config


def _coerce_version(value: Any, source: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(
            f"'version' in {source} must be a quoted string such as \"v4.0.0\""
        )
    return value


def _coerce_debug(value: Any, source: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"'debug' in {source} must be true or false")
    return value


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    config_file: Optional[Path] = None,
) -> LauncherConfig:
    """
    Build the effective configuration.

    Args:
        environ: Environment mapping (defaults to ``os.environ``)
        config_file: YAML file to read (defaults to ./tailwindkit.yaml)

    Returns:
        LauncherConfig with environment values overriding file values

    Raises:
        ConfigurationError: If the configuration file is invalid
    """
    if environ is None:
        environ = os.environ
    if config_file is None:
        config_file = Path.cwd() / CONFIG_FILENAME

    file_config = load_yaml_config(config_file)
    version = _coerce_version(file_config.get("version"), str(config_file))
    debug = _coerce_debug(file_config.get("debug"), str(config_file))

    # Presence alone pins the version; the value is used verbatim.
    if VERSION_ENV in environ:
        version = environ[VERSION_ENV]
        logger.debug(f"Using tailwindcss version from {VERSION_ENV}: {version}")

    if DEBUG_ENV in environ or LEGACY_DEBUG_ENV in environ:
        debug = True

    return LauncherConfig(version=version, debug=debug)


__all__ = [
    "CONFIG_FILENAME",
    "VERSION_ENV",
    "DEBUG_ENV",
    "LEGACY_DEBUG_ENV",
    "LauncherConfig",
    "load_yaml_config",
    "load_config",
]
