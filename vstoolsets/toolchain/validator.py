"""
vstoolsets/toolchain/validator.py

Toolset validation - decides whether an installation candidate provides a
complete, usable toolset.

The on-disk layout differs per generation:
- VS 2017 (15): VC/Auxiliary/Build/vcvarsall.bat and versioned toolchains under
  VC/Tools/MSVC/<version>/bin/HostX86/x86
- VS 2015 (14) and VS 2013 (12): VC/vcvarsall.bat and VC/bin/dumpbin.exe

In both cases the English language pack (a "1033" directory next to
dumpbin.exe) must be installed for a toolset to be accepted.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ..core.interfaces import Filesystem
from ..core.platform import CPUArchitecture
from .models import (
    MISSING_LANGUAGE_PACK,
    V_120,
    V_140,
    V_141,
    ExcludedToolset,
    Toolset,
    ToolsetArchOption,
    VisualStudioInstance,
)

logger = logging.getLogger(__name__)

CPU = CPUArchitecture

ENGLISH_LANGUAGE_PACK = "1033"
V140_PINNING_OPTION = "-vcvars_ver=14.0"

# (script relative to VC/Auxiliary/Build, option), in probing order
VS2017_ARCH_SCRIPTS: Tuple[Tuple[str, ToolsetArchOption], ...] = (
    ("vcvars32.bat", ToolsetArchOption("x86", CPU.X86, CPU.X86)),
    ("vcvars64.bat", ToolsetArchOption("x64", CPU.X64, CPU.X64)),
    ("vcvarsx86_amd64.bat", ToolsetArchOption("x86_amd64", CPU.X86, CPU.X64)),
    ("vcvarsx86_arm.bat", ToolsetArchOption("x86_arm", CPU.X86, CPU.ARM)),
    ("vcvarsx86_arm64.bat", ToolsetArchOption("x86_arm64", CPU.X86, CPU.ARM64)),
    ("vcvarsamd64_x86.bat", ToolsetArchOption("amd64_x86", CPU.X64, CPU.X86)),
    ("vcvarsamd64_arm.bat", ToolsetArchOption("amd64_arm", CPU.X64, CPU.ARM)),
    ("vcvarsamd64_arm64.bat", ToolsetArchOption("amd64_arm64", CPU.X64, CPU.ARM64)),
)

# (script relative to VC/bin, option), in probing order
VS2015_ARCH_SCRIPTS: Tuple[Tuple[Tuple[str, ...], ToolsetArchOption], ...] = (
    (("vcvars32.bat",), ToolsetArchOption("x86", CPU.X86, CPU.X86)),
    (("amd64", "vcvars64.bat"), ToolsetArchOption("x64", CPU.X64, CPU.X64)),
    (
        ("x86_amd64", "vcvarsx86_amd64.bat"),
        ToolsetArchOption("x86_amd64", CPU.X86, CPU.X64),
    ),
    (("x86_arm", "vcvarsx86_arm.bat"), ToolsetArchOption("x86_arm", CPU.X86, CPU.ARM)),
    (
        ("amd64_x86", "vcvarsamd64_x86.bat"),
        ToolsetArchOption("amd64_x86", CPU.X64, CPU.X86),
    ),
    (
        ("amd64_arm", "vcvarsamd64_arm.bat"),
        ToolsetArchOption("amd64_arm", CPU.X64, CPU.ARM),
    ),
)


@dataclass
class ValidationOutcome:
    """
    What validating one instance produced.

    Attributes:
        found: Accepted toolsets, in emission order
        excluded: Rejected toolset, if any
        paths_examined: Paths checked while validating
        halt: True if discovery must not examine any further instance
    """

    found: List[Toolset] = field(default_factory=list)
    excluded: Optional[ExcludedToolset] = None
    paths_examined: List[Path] = field(default_factory=list)
    halt: bool = False


class ToolsetValidator:
    """
    Applies generation-specific completeness rules to installation candidates.

    Generations other than 12, 14 and 15 are ignored.
    """

    def __init__(self, filesystem: Filesystem):
        self.filesystem = filesystem

    def validate(
        self, instance: VisualStudioInstance, v140_available: bool = False
    ) -> ValidationOutcome:
        """
        Validate one installation candidate.

        Args:
            instance: Candidate to validate
            v140_available: Whether any generation-14 candidate exists in the
                whole ranked set; enables the pinned v140 toolset of a VS 2017
                installation

        Returns:
            ValidationOutcome describing the accepted/excluded toolsets
        """
        major_version = instance.major_version()

        if major_version == "15":
            return self._validate_vs2017(instance, v140_available)
        if major_version in ("14", "12"):
            return self._validate_vs2015(instance)

        logger.debug(f"Ignoring unsupported Visual Studio generation: {instance}")
        return ValidationOutcome()

    def _validate_vs2017(
        self, instance: VisualStudioInstance, v140_available: bool
    ) -> ValidationOutcome:
        outcome = ValidationOutcome()
        vc_dir = instance.root_path / "VC"

        vcvarsall_dir = vc_dir / "Auxiliary" / "Build"
        vcvarsall_bat = vcvarsall_dir / "vcvarsall.bat"
        outcome.paths_examined.append(vcvarsall_bat)
        if not self.filesystem.exists(vcvarsall_bat):
            logger.debug(f"Skipping {instance}: no vcvarsall.bat")
            return outcome

        supported_architectures = tuple(
            option
            for script, option in VS2017_ARCH_SCRIPTS
            if self.filesystem.exists(vcvarsall_dir / script)
        )

        for subdir in self._msvc_toolchain_dirs(vc_dir / "Tools" / "MSVC"):
            dumpbin_path = subdir / "bin" / "HostX86" / "x86" / "dumpbin.exe"
            outcome.paths_examined.append(dumpbin_path)
            if not self.filesystem.exists(dumpbin_path):
                continue

            v141_toolset = Toolset(
                visual_studio_root_path=instance.root_path,
                dumpbin=dumpbin_path,
                vcvarsall=vcvarsall_bat,
                vcvarsall_options=(),
                version=V_141,
                supported_architectures=supported_architectures,
            )

            if not self._has_language_pack(dumpbin_path):
                logger.debug(
                    f"Excluding {v141_toolset}: English language pack not installed"
                )
                outcome.excluded = ExcludedToolset(v141_toolset, MISSING_LANGUAGE_PACK)
                break

            outcome.found.append(v141_toolset)
            logger.info(f"Found toolset {v141_toolset}")

            if v140_available:
                v140_toolset = Toolset(
                    visual_studio_root_path=instance.root_path,
                    dumpbin=dumpbin_path,
                    vcvarsall=vcvarsall_bat,
                    vcvarsall_options=(V140_PINNING_OPTION,),
                    version=V_140,
                    supported_architectures=supported_architectures,
                )
                outcome.found.append(v140_toolset)
                logger.info(f"Found toolset {v140_toolset} (pinned)")

            break

        return outcome

    def _validate_vs2015(self, instance: VisualStudioInstance) -> ValidationOutcome:
        outcome = ValidationOutcome()

        vcvarsall_bat = instance.root_path / "VC" / "vcvarsall.bat"
        outcome.paths_examined.append(vcvarsall_bat)
        if not self.filesystem.exists(vcvarsall_bat):
            logger.debug(f"Skipping {instance}: no vcvarsall.bat")
            return outcome

        dumpbin_path = instance.root_path / "VC" / "bin" / "dumpbin.exe"
        outcome.paths_examined.append(dumpbin_path)
        if not self.filesystem.exists(dumpbin_path):
            logger.debug(f"Skipping {instance}: no dumpbin.exe")
            return outcome

        bin_dir = vcvarsall_bat.parent / "bin"
        supported_architectures = tuple(
            option
            for parts, option in VS2015_ARCH_SCRIPTS
            if self.filesystem.exists(bin_dir.joinpath(*parts))
        )

        toolset = Toolset(
            visual_studio_root_path=instance.root_path,
            dumpbin=dumpbin_path,
            vcvarsall=vcvarsall_bat,
            vcvarsall_options=(),
            version=V_140 if instance.major_version() == "14" else V_120,
            supported_architectures=supported_architectures,
        )

        if not self._has_language_pack(dumpbin_path):
            # Unlike VS 2017, this stops the whole scan.
            logger.debug(f"Excluding {toolset}: English language pack not installed")
            outcome.excluded = ExcludedToolset(toolset, MISSING_LANGUAGE_PACK)
            outcome.halt = True
            return outcome

        outcome.found.append(toolset)
        logger.info(f"Found toolset {toolset}")
        return outcome

    def _msvc_toolchain_dirs(self, msvc_path: Path) -> List[Path]:
        """List toolchain version directories, latest (by name) first."""
        subdirs = [
            path
            for path in self.filesystem.get_files_non_recursive(msvc_path)
            if self.filesystem.is_directory(path)
        ]
        return sorted(subdirs, key=lambda path: path.name, reverse=True)

    def _has_language_pack(self, dumpbin_path: Path) -> bool:
        return self.filesystem.exists(dumpbin_path.parent / ENGLISH_LANGUAGE_PACK)
