"""
Toolset discovery module for vstoolsets.

This module provides functionality for:
- Locating Visual Studio installation candidates
- Ranking candidates by release channel and version
- Validating candidates into usable toolsets
"""

from vstoolsets.toolchain.models import (
    V_120,
    V_140,
    V_141,
    MISSING_LANGUAGE_PACK,
    ReleaseType,
    VisualStudioInstance,
    ToolsetArchOption,
    Toolset,
    ExcludedToolset,
    DiscoveryResult,
)
from vstoolsets.toolchain.instances import InstanceLocator, parse_vswhere_output
from vstoolsets.toolchain.ranking import (
    preference_weight,
    preferred_first_comparator,
    rank_instances,
)
from vstoolsets.toolchain.validator import ToolsetValidator, ValidationOutcome
from vstoolsets.toolchain.discovery import (
    ToolsetDiscovery,
    find_toolset_instances_preferred_first,
    format_exclusion_warning,
    format_failure_report,
)

__all__ = [
    "V_120",
    "V_140",
    "V_141",
    "MISSING_LANGUAGE_PACK",
    "ReleaseType",
    "VisualStudioInstance",
    "ToolsetArchOption",
    "Toolset",
    "ExcludedToolset",
    "DiscoveryResult",
    "InstanceLocator",
    "parse_vswhere_output",
    "preference_weight",
    "preferred_first_comparator",
    "rank_instances",
    "ToolsetValidator",
    "ValidationOutcome",
    "ToolsetDiscovery",
    "find_toolset_instances_preferred_first",
    "format_exclusion_warning",
    "format_failure_report",
]
