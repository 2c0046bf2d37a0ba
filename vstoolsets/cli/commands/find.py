"""
Find command implementation.

Runs the full discovery pipeline and prints the usable toolsets, preferred
first.
"""

import logging
from typing import List, Optional

from vstoolsets.cli.utils import (
    build_discovery,
    format_paths,
    print_error,
    print_json,
    print_warning,
    safe_print,
)
from vstoolsets.core.platform import CPUArchitecture, parse_architecture
from vstoolsets.toolchain.discovery import format_exclusion_warning
from vstoolsets.toolchain.models import Toolset

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the find command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if at least one toolset was found)
    """
    discovery = build_discovery(args)
    result = discovery.discover()

    if result.excluded:
        print_warning(format_exclusion_warning(result.excluded))

    if not result.succeeded:
        print_error(
            "Could not locate a complete toolset.",
            "The following paths were examined:\n"
            + format_paths(result.paths_examined),
        )
        return 1

    target_arch: Optional[CPUArchitecture] = None
    if getattr(args, "target_arch", None):
        target_arch = parse_architecture(args.target_arch)

    toolsets = filter_by_target(result.found, target_arch)
    if not toolsets:
        print_error(f"No toolset can target {target_arch}")
        return 1

    if args.format == "json":
        print_json([toolset.to_dict() for toolset in toolsets])
    else:
        for toolset in toolsets:
            safe_print(format_toolset(toolset))

    return 0


def filter_by_target(
    toolsets: List[Toolset], target_arch: Optional[CPUArchitecture]
) -> List[Toolset]:
    """Keep toolsets with at least one architecture option producing target_arch."""
    if target_arch is None:
        return list(toolsets)
    return [
        toolset
        for toolset in toolsets
        if any(
            option.target_arch == target_arch
            for option in toolset.supported_architectures
        )
    ]


def format_toolset(toolset: Toolset) -> str:
    lines = [
        f"{toolset.version}  {toolset.visual_studio_root_path}",
        f"  vcvarsall: {toolset.vcvarsall}",
    ]
    if toolset.vcvarsall_options:
        lines.append(f"  options:   {' '.join(toolset.vcvarsall_options)}")
    lines.append(f"  dumpbin:   {toolset.dumpbin}")
    architectures = ", ".join(str(option) for option in toolset.supported_architectures)
    lines.append(f"  architectures: {architectures or '(none)'}")
    return "\n".join(lines)
