"""
Shared utilities for CLI commands.

Provides common functionality used across CLI commands to ensure consistent
configuration loading and output formatting.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from vstoolsets.config.parser import DiscoveryConfig, load_config
from vstoolsets.toolchain.discovery import ToolsetDiscovery

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def build_discovery(args) -> ToolsetDiscovery:
    """
    Build a ToolsetDiscovery from parsed CLI arguments.

    Loads the configuration file (``--config`` or ./vstoolsets.yaml) and
    applies ``--program-files`` / ``--vswhere`` overrides.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configured ToolsetDiscovery

    Raises:
        ConfigError: If the configuration file is invalid
    """
    config: DiscoveryConfig = load_config(getattr(args, "config", None))
    config = config.with_overrides(
        program_files_x86=getattr(args, "program_files", None),
        vswhere_path=getattr(args, "vswhere", None),
    )
    logger.debug(f"Discovery configuration: {config}")
    return ToolsetDiscovery(config)


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def print_json(data: Any):
    """Print data as indented JSON to stdout."""
    print(json.dumps(data, indent=2))


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def print_warning(message: str):
    """Print warning message to stderr."""
    print(f"WARNING: {message}", file=sys.stderr)


def format_paths(paths: List[Path], indent: str = "    ") -> str:
    """Format one path per line."""
    return "\n".join(f"{indent}{path}" for path in paths)


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Installation paths can contain characters the console code page cannot
    encode; those are replaced instead of failing.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        stream = file or sys.stdout
        encoding = getattr(stream, "encoding", None) or "ascii"
        print(message.encode(encoding, errors="replace").decode(encoding), file=file)
