"""
Core functionality for vstoolsets.

This package contains the foundational modules that discovery depends on.
"""

from .exceptions import (
    VsToolsetsError,
    ConfigError,
    DiscoveryError,
    LocatorProcessError,
    ReportFormatError,
    EnvironmentConfigurationError,
    NoUsableToolsetError,
)

from .interfaces import (
    ProcessResult,
    Filesystem,
    ProcessRunner,
    EnvironmentReader,
)

from .probes import (
    LocalFilesystem,
    SubprocessRunner,
    OsEnvironment,
)

from .platform import (
    CPUArchitecture,
    parse_architecture,
    get_program_files_32_bit,
)

from .tags import (
    find_all_enclosed,
    find_at_most_one_enclosed,
    find_exactly_one_enclosed,
)

__all__ = [
    "VsToolsetsError",
    "ConfigError",
    "DiscoveryError",
    "LocatorProcessError",
    "ReportFormatError",
    "EnvironmentConfigurationError",
    "NoUsableToolsetError",
    "ProcessResult",
    "Filesystem",
    "ProcessRunner",
    "EnvironmentReader",
    "LocalFilesystem",
    "SubprocessRunner",
    "OsEnvironment",
    "CPUArchitecture",
    "parse_architecture",
    "get_program_files_32_bit",
    "find_all_enclosed",
    "find_at_most_one_enclosed",
    "find_exactly_one_enclosed",
]
