"""Update strategy classification.

Maps a version requirement to the kind of upgrade that is considered
breaking for it under Cargo's semver rules: the leftmost nonzero
component of a requirement is the one whose bump is incompatible.
"""

from __future__ import annotations

from enum import Enum

from .versions import VersionReq, parse_requirement


class UpdateStrategy(str, Enum):
    """Which version bumps are worth a notification for a dependency."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


def classify(req: VersionReq) -> UpdateStrategy:
    """Classify a parsed requirement by its first comparator.

    Only the first comparator is consulted, so ">=1.0, <2.0" is classified
    by its lower bound alone. A requirement without comparators ("*") is
    treated like "0.0.x" and classified as PATCH.

    Examples:
        "1.2.3" → MAJOR
        "0.5.2" → MINOR
        "0.0.3" → PATCH
        "0.0" → PATCH
        "2" → MAJOR
    """
    if not req.comparators:
        return UpdateStrategy.PATCH
    comp = req.comparators[0]
    if comp.major > 0:
        return UpdateStrategy.MAJOR
    if comp.minor is not None and comp.minor > 0:
        return UpdateStrategy.MINOR
    return UpdateStrategy.PATCH


def classify_requirement(text: str) -> UpdateStrategy:
    """Parse and classify a requirement string.

    Raises:
        RequirementParseError: If the string is not valid requirement syntax.
    """
    return classify(parse_requirement(text))
