"""
vstoolsets - locate complete Visual Studio C++ toolsets.

Finds Visual Studio 2013/2015/2017 installations, ranks them by preference and
returns the toolsets (vcvarsall.bat, dumpbin.exe, supported architectures)
that a build can use.
"""

__version__ = "0.1.0"

from vstoolsets.toolchain import (
    Toolset,
    ToolsetArchOption,
    DiscoveryResult,
    ToolsetDiscovery,
    find_toolset_instances_preferred_first,
)

__all__ = [
    "__version__",
    "Toolset",
    "ToolsetArchOption",
    "DiscoveryResult",
    "ToolsetDiscovery",
    "find_toolset_instances_preferred_first",
]
