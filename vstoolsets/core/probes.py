"""
Local implementations of the discovery probe interfaces.

These talk to the real machine: pathlib for filesystem checks, subprocess for
running vswhere and os.environ for environment variables.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .interfaces import EnvironmentReader, Filesystem, ProcessResult, ProcessRunner

logger = logging.getLogger(__name__)


class LocalFilesystem(Filesystem):
    """Filesystem probe backed by pathlib."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def get_files_non_recursive(self, path: Path) -> List[Path]:
        path = Path(path)
        if not path.is_dir():
            return []
        return list(path.iterdir())


class SubprocessRunner(ProcessRunner):
    """
    Process runner backed by subprocess.run.

    No timeout is applied: a hanging command blocks the caller.
    """

    def run(self, command: Sequence[str]) -> ProcessResult:
        args = [str(part) for part in command]
        logger.debug(f"Running: {' '.join(args)}")

        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )

        output = (result.stdout or "") + (result.stderr or "")
        logger.debug(f"{args[0]} exited with {result.returncode}")
        return ProcessResult(exit_code=result.returncode, output=output)


class OsEnvironment(EnvironmentReader):
    """
    Environment reader backed by os.environ.

    Args:
        environ: Mapping to read from (defaults to os.environ)
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, name: str) -> Optional[str]:
        return self._environ.get(name)


__all__ = [
    "LocalFilesystem",
    "SubprocessRunner",
    "OsEnvironment",
]
