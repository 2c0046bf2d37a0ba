"""
vstoolsets/toolchain/instances.py

Visual Studio installation discovery - gathers installation candidates without
judging whether they are complete.

Three independent sources are consulted and their results concatenated:
- vswhere.exe, which knows about every VS 2017+ installation and, with
  ``-legacy``, about older ones too
- the VS140COMNTOOLS environment variable set by VS 2015
- the default VS 2015 installation directory
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..config.parser import DiscoveryConfig
from ..core.exceptions import LocatorProcessError, ReportFormatError
from ..core.interfaces import EnvironmentReader, Filesystem, ProcessRunner
from ..core.platform import get_program_files_32_bit
from ..core.tags import (
    find_all_enclosed,
    find_at_most_one_enclosed,
    find_exactly_one_enclosed,
)
from .models import ReleaseType, VisualStudioInstance

logger = logging.getLogger(__name__)

VSWHERE_ARGS = ("-prerelease", "-legacy", "-products", "*", "-format", "xml")
LEGACY_VERSION = "14.0"
LEGACY_INSTALL_DIR = "Microsoft Visual Studio 14.0"


def vswhere_default_path(program_files_32_bit: Path) -> Path:
    return program_files_32_bit / "Microsoft Visual Studio" / "Installer" / "vswhere.exe"


def parse_vswhere_output(output: str) -> List[VisualStudioInstance]:
    """
    Parse the XML report printed by ``vswhere -format xml``.

    Each ``<instance>`` block must carry exactly one ``<installationPath>`` and
    one ``<installationVersion>``. ``<isPrerelease>`` is optional: absent means
    a legacy product, "0" a stable release, "1" a prerelease.

    Args:
        output: vswhere standard output

    Returns:
        Instances in report order

    Raises:
        ReportFormatError: If a block violates the expected shape
    """
    instances = []

    for block in find_all_enclosed(output, "<instance>", "</instance>"):
        is_prerelease = find_at_most_one_enclosed(
            block, "<isPrerelease>", "</isPrerelease>"
        )

        if is_prerelease is None:
            release_type = ReleaseType.LEGACY
        elif is_prerelease == "0":
            release_type = ReleaseType.STABLE
        elif is_prerelease == "1":
            release_type = ReleaseType.PRERELEASE
        else:
            raise ReportFormatError(
                f"Unexpected isPrerelease value in vswhere output: {is_prerelease!r}"
            )

        root_path = find_exactly_one_enclosed(
            block, "<installationPath>", "</installationPath>"
        )
        version = find_exactly_one_enclosed(
            block, "<installationVersion>", "</installationVersion>"
        )

        instance = VisualStudioInstance(Path(root_path), version, release_type)
        logger.debug(f"vswhere reported instance: {instance}")
        instances.append(instance)

    return instances


class InstanceLocator:
    """
    Gathers Visual Studio installation candidates from every known source.

    Results are additive: the same installation may appear more than once.
    Validation downstream is idempotent per candidate, so duplicates are
    harmless.
    """

    def __init__(
        self,
        filesystem: Filesystem,
        runner: ProcessRunner,
        environment: EnvironmentReader,
        config: Optional[DiscoveryConfig] = None,
    ):
        """
        Initialize locator.

        Args:
            filesystem: Filesystem probe
            runner: Runs vswhere
            environment: Environment variable reader
            config: Discovery configuration (defaults if None)
        """
        self.filesystem = filesystem
        self.runner = runner
        self.environment = environment
        self.config = config or DiscoveryConfig()

    def locate(self, paths_examined: List[Path]) -> List[VisualStudioInstance]:
        """
        Gather installation candidates.

        Args:
            paths_examined: Diagnostic trail; every probed path is appended

        Returns:
            Candidates in source order: vswhere, environment, default directory

        Raises:
            LocatorProcessError: If vswhere exits non-zero
            ReportFormatError: If the vswhere report is malformed
            EnvironmentConfigurationError: If Program Files cannot be resolved
        """
        program_files = get_program_files_32_bit(
            self.environment, self.config.program_files_x86
        )

        instances = []
        instances.extend(self._search_with_vswhere(program_files, paths_examined))
        instances.extend(self._search_environment(paths_examined))
        instances.extend(
            self._search_default_location(program_files, paths_examined)
        )

        logger.debug(f"Located {len(instances)} Visual Studio instance(s)")
        return instances

    def _search_with_vswhere(
        self, program_files: Path, paths_examined: List[Path]
    ) -> List[VisualStudioInstance]:
        vswhere_exe = self.config.vswhere_path or vswhere_default_path(program_files)
        paths_examined.append(vswhere_exe)

        if not self.filesystem.exists(vswhere_exe):
            logger.debug(f"vswhere not found at {vswhere_exe}")
            return []

        logger.debug(f"Using vswhere to find Visual Studio installations: {vswhere_exe}")
        result = self.runner.run([str(vswhere_exe), *VSWHERE_ARGS])
        if result.exit_code != 0:
            raise LocatorProcessError(result.exit_code, result.output)

        return parse_vswhere_output(result.output)

    def _search_environment(
        self, paths_examined: List[Path]
    ) -> List[VisualStudioInstance]:
        value = self.environment.get(self.config.legacy_env_var)
        if not value:
            logger.debug(f"{self.config.legacy_env_var} is not set")
            return []

        # Common7\Tools may or may not carry a trailing separator, so the root
        # is either two or three levels up. Probe both.
        tools_dir = Path(value)
        instances = []
        for root in (tools_dir.parent.parent, tools_dir.parent.parent.parent):
            instance = self._legacy_instance_if_has_cl(root, paths_examined)
            if instance:
                instances.append(instance)
        return instances

    def _search_default_location(
        self, program_files: Path, paths_examined: List[Path]
    ) -> List[VisualStudioInstance]:
        instance = self._legacy_instance_if_has_cl(
            program_files / LEGACY_INSTALL_DIR, paths_examined
        )
        return [instance] if instance else []

    def _legacy_instance_if_has_cl(
        self, root: Path, paths_examined: List[Path]
    ) -> Optional[VisualStudioInstance]:
        cl_exe = root / "VC" / "bin" / "cl.exe"
        vcvarsall_bat = root / "VC" / "vcvarsall.bat"
        paths_examined.append(cl_exe)
        paths_examined.append(vcvarsall_bat)

        if self.filesystem.exists(cl_exe) and self.filesystem.exists(vcvarsall_bat):
            logger.debug(f"Found legacy Visual Studio {LEGACY_VERSION} at {root}")
            return VisualStudioInstance(root, LEGACY_VERSION, ReleaseType.LEGACY)

        logger.debug(f"No cl.exe/vcvarsall.bat under {root}")
        return None
