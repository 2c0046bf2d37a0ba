"""
Discovery against installation layouts built on the real filesystem.
"""

import pytest

from tests.fixtures.installations import (
    VS2017_ARCH_SCRIPTS,
    DiskTree,
    install_vs2015,
    install_vs2017,
    msvc_dumpbin,
    vswhere_instance,
    vswhere_report,
)
from tests.mocks import FakeEnvironment, FakeProcessRunner
from vstoolsets.config.parser import DiscoveryConfig
from vstoolsets.core.probes import LocalFilesystem
from vstoolsets.toolchain.discovery import ToolsetDiscovery

pytestmark = pytest.mark.on_disk


@pytest.fixture
def program_files(tmp_path):
    path = tmp_path / "Program Files (x86)"
    path.mkdir()
    return path


def make_discovery(program_files, runner, variables=None) -> ToolsetDiscovery:
    return ToolsetDiscovery(
        config=DiscoveryConfig(program_files_x86=program_files),
        filesystem=LocalFilesystem(),
        runner=runner,
        environment=FakeEnvironment(variables),
    )


def test_vs2017_and_vs2015(program_files):
    """Test a machine with VS 2017 and VS 2015 side by side."""
    tree = DiskTree()
    vs2017 = program_files / "Microsoft Visual Studio" / "2017" / "Community"
    vs2015 = program_files / "Microsoft Visual Studio 14.0"
    install_vs2017(tree, vs2017, msvc_versions=["14.11.25503", "14.16.27023"])
    install_vs2015(tree, vs2015)
    tree.touch(program_files / "Microsoft Visual Studio" / "Installer" / "vswhere.exe")
    runner = FakeProcessRunner(vswhere_report(vswhere_instance(vs2017, "15.9.1")))

    result = make_discovery(program_files, runner).discover()

    assert [(t.version, t.visual_studio_root_path) for t in result.found] == [
        ("v141", vs2017),
        ("v140", vs2017),
        ("v140", vs2015),
    ]
    assert result.found[0].dumpbin == msvc_dumpbin(vs2017, "14.16.27023")
    assert len(result.found[0].supported_architectures) == len(VS2017_ARCH_SCRIPTS)
    assert len(result.found[2].supported_architectures) == 6


def test_environment_variable_with_trailing_separator(program_files, tmp_path):
    """Test VS140COMNTOOLS pointing at Common7/Tools/ finds the root."""
    root = tmp_path / "VS14"
    install_vs2015(DiskTree(), root)
    tools_dir = root / "Common7" / "Tools"
    tools_dir.mkdir(parents=True)
    runner = FakeProcessRunner()

    result = make_discovery(
        program_files, runner, {"VS140COMNTOOLS": f"{tools_dir}/"}
    ).discover()

    assert [t.visual_studio_root_path for t in result.found] == [root]
    assert runner.commands == []


def test_missing_language_pack(program_files):
    """Test a VS 2017 without the 1033 directory is reported as excluded."""
    vs2017 = program_files / "Microsoft Visual Studio" / "2017" / "Community"
    install_vs2017(DiskTree(), vs2017, language_pack=False)
    DiskTree().touch(
        program_files / "Microsoft Visual Studio" / "Installer" / "vswhere.exe"
    )
    runner = FakeProcessRunner(vswhere_report(vswhere_instance(vs2017, "15.9.1")))

    result = make_discovery(program_files, runner).discover()

    assert result.found == []
    assert [e.toolset.visual_studio_root_path for e in result.excluded] == [vs2017]
