"""
vstoolsets/toolchain/discovery.py

Toolset discovery - drives location, ranking and validation of Visual Studio
installations and reports the usable toolsets, preferred first.

Usage:
    from vstoolsets.toolchain.discovery import ToolsetDiscovery

    discovery = ToolsetDiscovery()
    result = discovery.discover()
    for toolset in result.found:
        print(toolset.version, toolset.vcvarsall)
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config.parser import DiscoveryConfig
from ..core.exceptions import NoUsableToolsetError
from ..core.interfaces import EnvironmentReader, Filesystem, ProcessRunner
from ..core.probes import LocalFilesystem, OsEnvironment, SubprocessRunner
from .instances import InstanceLocator
from .models import DiscoveryResult, ExcludedToolset, Toolset, VisualStudioInstance
from .ranking import rank_instances
from .validator import ToolsetValidator

logger = logging.getLogger(__name__)


def format_exclusion_warning(excluded: List[ExcludedToolset]) -> str:
    """Format the warning listing installations excluded for a missing language pack."""
    lines = [
        "The following VS instances are excluded because the English language "
        "pack is unavailable."
    ]
    for entry in excluded:
        lines.append(f"    {entry.toolset.visual_studio_root_path}")
    lines.append("Please install the English language pack.")
    return "\n".join(lines)


def format_failure_report(paths_examined: List[Path]) -> str:
    """Format the error listing every path examined by a failed discovery."""
    lines = [
        "Could not locate a complete toolset.",
        "The following paths were examined:",
    ]
    for path in paths_examined:
        lines.append(f"    {path}")
    return "\n".join(lines)


class ToolsetDiscovery:
    """
    Finds complete Visual Studio toolsets on this machine.

    Pipeline:
    - InstanceLocator gathers candidates (vswhere, VS140COMNTOOLS, default dir)
    - candidates are ranked preferred first
    - ToolsetValidator checks each ranked candidate in order

    A missing English language pack on a VS 2015/2013 candidate stops the
    scan: candidates ranked after it are not examined.
    """

    def __init__(
        self,
        config: Optional[DiscoveryConfig] = None,
        filesystem: Optional[Filesystem] = None,
        runner: Optional[ProcessRunner] = None,
        environment: Optional[EnvironmentReader] = None,
    ):
        """
        Initialize discovery.

        Args:
            config: Discovery configuration (defaults if None)
            filesystem: Filesystem probe (local filesystem if None)
            runner: Process runner for vswhere (subprocess if None)
            environment: Environment reader (os.environ if None)
        """
        self.config = config or DiscoveryConfig()
        self.filesystem = filesystem or LocalFilesystem()
        self.locator = InstanceLocator(
            self.filesystem,
            runner or SubprocessRunner(),
            environment or OsEnvironment(),
            self.config,
        )
        self.validator = ToolsetValidator(self.filesystem)

    def ranked_instances(
        self, paths_examined: Optional[List[Path]] = None
    ) -> List[VisualStudioInstance]:
        """
        Locate and rank installation candidates without validating them.

        Args:
            paths_examined: Optional diagnostic trail to append to

        Returns:
            Candidates, preferred first
        """
        if paths_examined is None:
            paths_examined = []
        return rank_instances(self.locator.locate(paths_examined))

    def discover(self) -> DiscoveryResult:
        """
        Run the full discovery pipeline.

        Returns:
            DiscoveryResult with found toolsets (preferred first), excluded
            toolsets and the diagnostic path trail. ``found`` may be empty.

        Raises:
            LocatorProcessError: If vswhere exits non-zero
            ReportFormatError: If the vswhere report is malformed
            EnvironmentConfigurationError: If Program Files cannot be resolved
        """
        paths_examined: List[Path] = []
        found: List[Toolset] = []
        excluded: List[ExcludedToolset] = []

        logger.info("Starting Visual Studio toolset discovery")

        ranked = self.ranked_instances(paths_examined)
        v140_available = any(
            instance.major_version() == "14" for instance in ranked
        )

        for instance in ranked:
            logger.debug(f"Validating {instance}")
            outcome = self.validator.validate(instance, v140_available)

            paths_examined.extend(outcome.paths_examined)
            found.extend(outcome.found)
            if outcome.excluded is not None:
                excluded.append(outcome.excluded)

            if outcome.halt:
                logger.debug(f"Stopping discovery after excluding {instance}")
                break

        logger.info(
            f"Discovered {len(found)} toolset(s), {len(excluded)} excluded, "
            f"{len(paths_examined)} path(s) examined"
        )
        return DiscoveryResult(
            found=found, excluded=excluded, paths_examined=paths_examined
        )

    def find_toolsets_preferred_first(self, stream=None) -> List[Toolset]:
        """
        Run discovery and report diagnostics.

        Exclusions are reported as a warning; an empty result is reported with
        every examined path.

        Args:
            stream: Where diagnostics are written (default: stderr)

        Returns:
            Found toolsets, preferred first (never empty)

        Raises:
            NoUsableToolsetError: If no complete toolset was found
        """
        stream = stream if stream is not None else sys.stderr
        result = self.discover()

        if result.excluded:
            print(f"WARNING: {format_exclusion_warning(result.excluded)}", file=stream)

        if not result.succeeded:
            print(f"ERROR: {format_failure_report(result.paths_examined)}", file=stream)
            raise NoUsableToolsetError(result.paths_examined, result.excluded)

        return result.found


def find_toolset_instances_preferred_first(
    config: Optional[DiscoveryConfig] = None,
) -> List[Toolset]:
    """
    Find usable toolsets, terminating the process if there are none.

    This is the entry point for build scripts that cannot continue without a
    toolset. Library callers that want to handle failure themselves should use
    ToolsetDiscovery.discover() instead.

    Args:
        config: Discovery configuration (defaults if None)

    Returns:
        Found toolsets, preferred first
    """
    try:
        return ToolsetDiscovery(config).find_toolsets_preferred_first()
    except NoUsableToolsetError:
        sys.exit(1)
