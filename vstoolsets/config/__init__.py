"""Configuration module for vstoolsets.

This module provides YAML configuration parsing and validation for
vstoolsets.yaml.
"""

from vstoolsets.core.exceptions import ConfigError
from vstoolsets.config.parser import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_LEGACY_ENV_VAR,
    DiscoveryConfig,
    load_config,
    parse_config,
)

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_LEGACY_ENV_VAR",
    "DiscoveryConfig",
    "load_config",
    "parse_config",
]
