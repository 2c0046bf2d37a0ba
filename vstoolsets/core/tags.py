"""
Enclosed-substring extraction for the vswhere XML report.

The report produced by ``vswhere -format xml`` has a small, fixed shape, so
instead of a structured document parser this module offers three primitives
that pull the text found between an opening and a closing marker. The text is
never validated as well-formed beyond marker matching.

Usage:
    from vstoolsets.core.tags import find_all_enclosed, find_exactly_one_enclosed

    for block in find_all_enclosed(report, "<instance>", "</instance>"):
        path = find_exactly_one_enclosed(
            block, "<installationPath>", "</installationPath>"
        )
"""

from typing import List, Optional

from .exceptions import ReportFormatError


def find_all_enclosed(text: str, open_tag: str, close_tag: str) -> List[str]:
    """
    Find every disjoint span enclosed by ``open_tag`` and ``close_tag``.

    Scanning proceeds left to right; each match resumes after its closing
    marker. An opening marker without a matching closing marker ends the scan.

    Args:
        text: Text to search
        open_tag: Opening marker (e.g. "<instance>")
        close_tag: Closing marker (e.g. "</instance>")

    Returns:
        Enclosed spans in order of appearance (markers excluded)

    Example:
        >>> find_all_enclosed("<a>1</a><a>2</a>", "<a>", "</a>")
        ['1', '2']
    """
    results = []
    position = 0

    while True:
        start = text.find(open_tag, position)
        if start == -1:
            break
        start += len(open_tag)

        end = text.find(close_tag, start)
        if end == -1:
            break

        results.append(text[start:end])
        position = end + len(close_tag)

    return results


def find_at_most_one_enclosed(
    text: str, open_tag: str, close_tag: str
) -> Optional[str]:
    """
    Find zero or one span enclosed by the given markers.

    Args:
        text: Text to search
        open_tag: Opening marker
        close_tag: Closing marker

    Returns:
        The enclosed span, or None if there is none

    Raises:
        ReportFormatError: If more than one span exists
    """
    matches = find_all_enclosed(text, open_tag, close_tag)
    if len(matches) > 1:
        raise ReportFormatError(
            f"Expected at most one {open_tag}...{close_tag}, found {len(matches)}"
        )
    return matches[0] if matches else None


def find_exactly_one_enclosed(text: str, open_tag: str, close_tag: str) -> str:
    """
    Find the single span enclosed by the given markers.

    Args:
        text: Text to search
        open_tag: Opening marker
        close_tag: Closing marker

    Returns:
        The enclosed span

    Raises:
        ReportFormatError: If the number of spans is not exactly one
    """
    matches = find_all_enclosed(text, open_tag, close_tag)
    if len(matches) != 1:
        raise ReportFormatError(
            f"Expected exactly one {open_tag}...{close_tag}, found {len(matches)}"
        )
    return matches[0]


__all__ = [
    "find_all_enclosed",
    "find_at_most_one_enclosed",
    "find_exactly_one_enclosed",
]
