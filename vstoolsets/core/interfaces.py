"""
Core interfaces for vstoolsets.

Discovery depends on three ambient inputs: the filesystem, the ability to run
the vswhere locator, and the process environment. They are expressed as
abstract interfaces so the locator and validator can be driven by canned
implementations in tests without spawning processes or touching the disk.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class ProcessResult:
    """Exit code and combined output of a finished process."""

    exit_code: int
    output: str


class Filesystem(ABC):
    """Read-only view of the filesystem used during discovery."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """
        Check if path exists.

        Args:
            path: Path to check

        Returns:
            True if path exists (as file or directory)
        """
        pass

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """
        Check if path is a directory.

        Args:
            path: Path to check

        Returns:
            True if path exists and is a directory
        """
        pass

    @abstractmethod
    def get_files_non_recursive(self, path: Path) -> List[Path]:
        """
        List the immediate children of a directory.

        Args:
            path: Directory to list

        Returns:
            Child paths (files and directories), empty if path is not a directory
        """
        pass


class ProcessRunner(ABC):
    """Runs an external command synchronously and captures its output."""

    @abstractmethod
    def run(self, command: Sequence[str]) -> ProcessResult:
        """
        Run a command to completion.

        Args:
            command: Executable followed by its arguments

        Returns:
            ProcessResult with exit code and captured output
        """
        pass


class EnvironmentReader(ABC):
    """Reads environment variables."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Variable name

        Returns:
            Variable value, or None if unset
        """
        pass


__all__ = [
    "ProcessResult",
    "Filesystem",
    "ProcessRunner",
    "EnvironmentReader",
]
