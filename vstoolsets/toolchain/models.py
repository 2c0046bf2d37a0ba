"""
vstoolsets/toolchain/models.py

Records produced during one discovery run. All of them are immutable and
live only for the duration of the run.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Tuple

from ..core.platform import CPUArchitecture

V_120 = "v120"
V_140 = "v140"
V_141 = "v141"

MISSING_LANGUAGE_PACK = "missing language pack"


class ReleaseType(Enum):
    """Release channel of a Visual Studio installation."""

    STABLE = "stable"
    PRERELEASE = "prerelease"
    LEGACY = "legacy"


@dataclass(frozen=True)
class VisualStudioInstance:
    """
    An installation candidate that has not been validated yet.

    Attributes:
        root_path: Installation root directory
        version: Installation version string (e.g. '15.9.28307.1300')
        release_type: Release channel, used as the primary ranking key
    """

    root_path: Path
    version: str
    release_type: ReleaseType

    def major_version(self) -> str:
        """Generation tag: the first two characters of the version."""
        return self.version[:2]

    def __str__(self) -> str:
        return f"{self.version} ({self.release_type.value}) at {self.root_path}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root_path": str(self.root_path),
            "version": self.version,
            "release_type": self.release_type.value,
        }


@dataclass(frozen=True)
class ToolsetArchOption:
    """One host/target combination a toolset supports."""

    name: str
    host_arch: CPUArchitecture
    target_arch: CPUArchitecture

    def __str__(self) -> str:
        return f"{self.name} ({self.host_arch}->{self.target_arch})"


@dataclass(frozen=True)
class Toolset:
    """
    A validated, usable compiler environment.

    Attributes:
        visual_studio_root_path: Root of the owning installation
        dumpbin: Path to dumpbin.exe, used to inspect build outputs
        vcvarsall: Path to vcvarsall.bat, the environment-setup script
        vcvarsall_options: Extra arguments for vcvarsall.bat
        version: Platform toolset identifier ('v120', 'v140', 'v141')
        supported_architectures: Architecture options in probing order
    """

    visual_studio_root_path: Path
    dumpbin: Path
    vcvarsall: Path
    vcvarsall_options: Tuple[str, ...] = ()
    version: str = V_141
    supported_architectures: Tuple[ToolsetArchOption, ...] = ()

    def __str__(self) -> str:
        return f"{self.version} at {self.visual_studio_root_path}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON output.

        Returns:
            Dictionary representation suitable for serialization
        """
        return {
            "version": self.version,
            "visual_studio_root_path": str(self.visual_studio_root_path),
            "dumpbin": str(self.dumpbin),
            "vcvarsall": str(self.vcvarsall),
            "vcvarsall_options": list(self.vcvarsall_options),
            "supported_architectures": [
                {
                    "name": option.name,
                    "host": option.host_arch.value,
                    "target": option.target_arch.value,
                }
                for option in self.supported_architectures
            ],
        }


@dataclass(frozen=True)
class ExcludedToolset:
    """A toolset that was structurally present but rejected."""

    toolset: Toolset
    reason: str = MISSING_LANGUAGE_PACK


@dataclass(frozen=True)
class DiscoveryResult:
    """
    Outcome of one discovery run.

    Attributes:
        found: Usable toolsets, preferred first
        excluded: Rejected toolsets with their reasons
        paths_examined: Every path checked, in the order it was checked
    """

    found: List[Toolset] = field(default_factory=list)
    excluded: List[ExcludedToolset] = field(default_factory=list)
    paths_examined: List[Path] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return bool(self.found)
