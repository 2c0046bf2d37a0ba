"""YAML configuration parser for vstoolsets.

This module provides parsing and validation for vstoolsets.yaml configuration
files. Every setting is optional; an absent file means "use the machine's
defaults".
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional
import logging

import yaml

from ..core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "vstoolsets.yaml"
DEFAULT_LEGACY_ENV_VAR = "VS140COMNTOOLS"

_DISCOVERY_KEYS = {"program_files_x86", "vswhere_path", "legacy_env_var"}


@dataclass(frozen=True)
class DiscoveryConfig:
    """Settings that influence where discovery looks."""

    program_files_x86: Optional[Path] = None  # overrides ProgramFiles(x86)
    vswhere_path: Optional[Path] = None  # overrides <program files>/.../vswhere.exe
    legacy_env_var: str = DEFAULT_LEGACY_ENV_VAR

    def with_overrides(
        self,
        program_files_x86: Optional[Path] = None,
        vswhere_path: Optional[Path] = None,
    ) -> "DiscoveryConfig":
        """Return a copy with any non-None argument replacing the stored value."""
        changes = {}
        if program_files_x86 is not None:
            changes["program_files_x86"] = Path(program_files_x86)
        if vswhere_path is not None:
            changes["vswhere_path"] = Path(vswhere_path)
        return replace(self, **changes) if changes else self


def parse_config(config_path: Path) -> DiscoveryConfig:
    """
    Parse a vstoolsets.yaml configuration file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If the file is missing or invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        logger.debug(f"Configuration file is empty: {config_path}")
        return DiscoveryConfig()

    return _parse_and_validate(data)


def load_config(
    config_path: Optional[Path] = None, search_dir: Optional[Path] = None
) -> DiscoveryConfig:
    """
    Load configuration from an explicit file or the default location.

    Args:
        config_path: Explicit configuration file (must exist)
        search_dir: Directory searched for vstoolsets.yaml (default: cwd)

    Returns:
        Parsed configuration, or defaults if no file is present
    """
    if config_path is not None:
        return parse_config(Path(config_path))

    default_file = (search_dir or Path.cwd()) / DEFAULT_CONFIG_NAME
    if default_file.exists():
        logger.debug(f"Loading configuration from {default_file}")
        return parse_config(default_file)

    logger.debug("No configuration file found, using defaults")
    return DiscoveryConfig()


def _parse_and_validate(data) -> DiscoveryConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")

    if "version" in data and data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    unknown = set(data) - {"version", "discovery"}
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    discovery = data.get("discovery") or {}
    if not isinstance(discovery, dict):
        raise ConfigError("discovery must be a dictionary")

    unknown = set(discovery) - _DISCOVERY_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown discovery keys: {', '.join(sorted(unknown))} "
            f"(expected one of {sorted(_DISCOVERY_KEYS)})"
        )

    legacy_env_var = discovery.get("legacy_env_var", DEFAULT_LEGACY_ENV_VAR)
    if not isinstance(legacy_env_var, str) or not legacy_env_var:
        raise ConfigError("discovery.legacy_env_var must be a non-empty string")

    return DiscoveryConfig(
        program_files_x86=_parse_path(discovery, "program_files_x86"),
        vswhere_path=_parse_path(discovery, "vswhere_path"),
        legacy_env_var=legacy_env_var,
    )


def _parse_path(data: dict, key: str) -> Optional[Path]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f"discovery.{key} must be a non-empty string")
    return Path(value)
