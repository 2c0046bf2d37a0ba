"""
Centralized exception hierarchy for vstoolsets.

Discovery distinguishes invariant violations (the vswhere report is malformed,
vswhere itself failed) from the ordinary "nothing usable was found" outcome so
that callers can decide whether to abort a larger process or just fail one
discovery call.
"""

from pathlib import Path
from typing import List, Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class VsToolsetsError(Exception):
    """Base exception for all vstoolsets errors."""

    pass


class ConfigError(VsToolsetsError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Discovery Exceptions
# ============================================================================


class DiscoveryError(VsToolsetsError):
    """Base exception for toolset discovery errors."""

    pass


class LocatorProcessError(DiscoveryError):
    """Raised when the vswhere locator exits with a non-zero status."""

    def __init__(self, exit_code: int, output: str = ""):
        self.exit_code = exit_code
        self.output = output
        super().__init__(
            f"Running vswhere.exe failed with exit code {exit_code}:\n{output}"
        )


class ReportFormatError(DiscoveryError):
    """Raised when the vswhere report does not have the expected shape."""

    pass


class EnvironmentConfigurationError(DiscoveryError):
    """Raised when a required environment location cannot be resolved."""

    pass


class NoUsableToolsetError(DiscoveryError):
    """Raised when discovery finishes without a single complete toolset."""

    def __init__(
        self,
        paths_examined: Optional[List[Path]] = None,
        excluded: Optional[list] = None,
    ):
        self.paths_examined = list(paths_examined or [])
        self.excluded = list(excluded or [])
        super().__init__(
            f"Could not locate a complete toolset "
            f"({len(self.paths_examined)} paths examined)"
        )
