"""
Platform details needed for Visual Studio discovery.

This module provides:
- CPU architecture identifiers used by toolset architecture options
- Resolution of the 32-bit Program Files directory, the root under which
  vswhere and legacy Visual Studio installations live

Usage:
    from vstoolsets.core.platform import CPUArchitecture, get_program_files_32_bit

    root = get_program_files_32_bit(environment)
    vswhere = root / "Microsoft Visual Studio" / "Installer" / "vswhere.exe"
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from .exceptions import EnvironmentConfigurationError
from .interfaces import EnvironmentReader

logger = logging.getLogger(__name__)


class CPUArchitecture(Enum):
    """CPU architecture a toolset can run on or produce code for."""

    X86 = "x86"
    X64 = "x64"
    ARM = "arm"
    ARM64 = "arm64"

    def __str__(self) -> str:
        return self.value


def parse_architecture(name: str) -> CPUArchitecture:
    """
    Normalize an architecture name.

    Args:
        name: Architecture name (e.g. 'amd64', 'x86_64', 'aarch64', 'i686')

    Returns:
        Matching CPUArchitecture

    Raises:
        ValueError: If the name is not a known architecture

    Example:
        >>> parse_architecture("AMD64")
        <CPUArchitecture.X64: 'x64'>
    """
    machine = name.lower()

    if machine in ("x86_64", "amd64", "x64"):
        return CPUArchitecture.X64
    elif machine in ("aarch64", "arm64"):
        return CPUArchitecture.ARM64
    elif machine in ("i386", "i686", "x86"):
        return CPUArchitecture.X86
    elif machine.startswith("arm"):
        return CPUArchitecture.ARM
    else:
        raise ValueError(f"Unknown CPU architecture: {name}")


def get_program_files_32_bit(
    environment: EnvironmentReader, override: Optional[Path] = None
) -> Path:
    """
    Resolve the 32-bit Program Files directory.

    Lookup order: explicit override, ``ProgramFiles(x86)`` (64-bit Windows),
    then ``ProgramFiles`` (32-bit Windows).

    Args:
        environment: Environment reader
        override: Explicit directory from configuration

    Returns:
        Path to the 32-bit Program Files directory

    Raises:
        EnvironmentConfigurationError: If no candidate is available
    """
    if override is not None:
        logger.debug(f"Using configured Program Files (x86): {override}")
        return Path(override)

    for variable in ("ProgramFiles(x86)", "ProgramFiles"):
        value = environment.get(variable)
        if value:
            logger.debug(f"Resolved Program Files (x86) from {variable}: {value}")
            return Path(value)

    raise EnvironmentConfigurationError(
        "Could not determine the Program Files (x86) directory: "
        "neither ProgramFiles(x86) nor ProgramFiles is set"
    )


__all__ = [
    "CPUArchitecture",
    "parse_architecture",
    "get_program_files_32_bit",
]
