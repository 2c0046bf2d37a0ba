"""
Instances command implementation.

Lists the Visual Studio installation candidates in ranked order without
validating them.
"""

import logging

from vstoolsets.cli.utils import build_discovery, print_json, safe_print

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the instances command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    discovery = build_discovery(args)
    instances = discovery.ranked_instances()

    if args.format == "json":
        print_json([instance.to_dict() for instance in instances])
        return 0

    if not instances:
        safe_print("No Visual Studio installations found")
        return 0

    for instance in instances:
        safe_print(
            f"{instance.version:<20} {instance.release_type.value:<11} "
            f"{instance.root_path}"
        )

    return 0
