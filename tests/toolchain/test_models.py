"""
Tests for vstoolsets.toolchain.models module.
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from vstoolsets.core.platform import CPUArchitecture
from vstoolsets.toolchain.models import (
    DiscoveryResult,
    ReleaseType,
    Toolset,
    ToolsetArchOption,
    VisualStudioInstance,
)


def test_major_version():
    """Test generation tag is the first two characters."""
    instance = VisualStudioInstance(Path("C:/VS"), "15.9.28307.1300", ReleaseType.STABLE)

    assert instance.major_version() == "15"


def test_records_are_immutable():
    """Test discovery records cannot be modified."""
    toolset = Toolset(Path("C:/VS"), Path("C:/VS/dumpbin.exe"), Path("C:/VS/v.bat"))

    with pytest.raises(FrozenInstanceError):
        toolset.version = "v140"


def test_arch_option_str():
    """Test architecture option rendering."""
    option = ToolsetArchOption("amd64_arm", CPUArchitecture.X64, CPUArchitecture.ARM)

    assert str(option) == "amd64_arm (x64->arm)"


def test_toolset_to_dict():
    """Test JSON-friendly rendering of a toolset."""
    toolset = Toolset(
        visual_studio_root_path=Path("C:/VS"),
        dumpbin=Path("C:/VS/dumpbin.exe"),
        vcvarsall=Path("C:/VS/vcvarsall.bat"),
        vcvarsall_options=("-vcvars_ver=14.0",),
        version="v140",
        supported_architectures=(
            ToolsetArchOption("x86", CPUArchitecture.X86, CPUArchitecture.X86),
        ),
    )

    assert toolset.to_dict() == {
        "version": "v140",
        "visual_studio_root_path": str(Path("C:/VS")),
        "dumpbin": str(Path("C:/VS/dumpbin.exe")),
        "vcvarsall": str(Path("C:/VS/vcvarsall.bat")),
        "vcvarsall_options": ["-vcvars_ver=14.0"],
        "supported_architectures": [{"name": "x86", "host": "x86", "target": "x86"}],
    }


def test_discovery_result_succeeded():
    toolset = Toolset(Path("C:/VS"), Path("d.exe"), Path("v.bat"))

    assert not DiscoveryResult().succeeded
    assert DiscoveryResult(found=[toolset]).succeeded
