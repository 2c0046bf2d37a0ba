"""
Preference ordering of Visual Studio installation candidates.

Stable releases beat prereleases, which beat legacy installations. Within the
same release type the greater version string wins. Versions are compared as
plain strings, so '15.10' sorts before '15.9'.
"""

import functools
from typing import Iterable, List

from .models import ReleaseType, VisualStudioInstance

_PREFERENCE_WEIGHTS = {
    ReleaseType.STABLE: 3,
    ReleaseType.PRERELEASE: 2,
    ReleaseType.LEGACY: 1,
}


def preference_weight(release_type: ReleaseType) -> int:
    return _PREFERENCE_WEIGHTS[release_type]


def preferred_first_comparator(
    left: VisualStudioInstance, right: VisualStudioInstance
) -> int:
    """
    Compare two instances, preferred first.

    Returns:
        Negative if ``left`` is preferred, positive if ``right`` is, 0 if tied
    """
    left_weight = preference_weight(left.release_type)
    right_weight = preference_weight(right.release_type)
    if left_weight != right_weight:
        return -1 if left_weight > right_weight else 1

    if left.version != right.version:
        return -1 if left.version > right.version else 1

    return 0


def rank_instances(
    instances: Iterable[VisualStudioInstance],
) -> List[VisualStudioInstance]:
    """
    Sort instances preferred first.

    The sort is stable: tied instances keep their discovery order.
    """
    return sorted(instances, key=functools.cmp_to_key(preferred_first_comparator))
