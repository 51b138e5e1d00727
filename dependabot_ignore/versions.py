"""Cargo version requirement parsing.

Parses requirement strings as written in Cargo.toml ("1.2", "^0.4.1",
">=1.0, <2.0", "0.3.*") into a list of comparators. Numeric components
are validated with semver after padding incomplete versions with zeros
(e.g. "1.2" → "1.2.0"), so leading zeros and malformed pre-release tags
are rejected the same way they would be for a full version.
"""

from __future__ import annotations

import re
from enum import Enum

import semver
from pydantic import BaseModel, ConfigDict

from .errors import RequirementParseError

_VERSION_RE = re.compile(
    r"(?P<major>\d+)"
    r"(?:\.(?P<minor>\d+|[*xX])"
    r"(?:\.(?P<patch>\d+|[*xX])"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?"
    r")?)?"
)
_WILDCARDS = ("*", "x", "X")


class Op(str, Enum):
    """Comparison operator of a single comparator."""

    EXACT = "="
    GREATER = ">"
    GREATER_EQ = ">="
    LESS = "<"
    LESS_EQ = "<="
    TILDE = "~"
    CARET = "^"
    WILDCARD = "*"


# Two-character operators must be tried before their one-character prefixes.
_OPERATORS = (
    Op.GREATER_EQ,
    Op.LESS_EQ,
    Op.EXACT,
    Op.GREATER,
    Op.LESS,
    Op.TILDE,
    Op.CARET,
)


class Comparator(BaseModel):
    """One comparator of a version requirement.

    Attributes:
        op: Comparison operator. A bare version ("1.2") is a caret
            requirement, as in Cargo.
        major: Major component, always present.
        minor: Minor component, or None when omitted or a wildcard.
        patch: Patch component, or None when omitted or a wildcard.
        pre: Pre-release tag, only allowed with a full version.
    """

    model_config = ConfigDict(frozen=True)

    op: Op
    major: int
    minor: int | None = None
    patch: int | None = None
    pre: str | None = None

    def __str__(self) -> str:
        parts = [str(self.major)]
        for component in (self.minor, self.patch):
            if component is None:
                if self.op is Op.WILDCARD:
                    parts.append("*")
                break
            parts.append(str(component))
        version = ".".join(parts)
        if self.pre:
            version += f"-{self.pre}"
        if self.op is Op.WILDCARD:
            return version
        return f"{self.op.value}{version}"


class VersionReq(BaseModel):
    """A parsed version requirement.

    An empty comparator tuple means "any version" (the bare "*" requirement).
    """

    model_config = ConfigDict(frozen=True)

    comparators: tuple[Comparator, ...] = ()

    def __str__(self) -> str:
        if not self.comparators:
            return "*"
        return ", ".join(str(c) for c in self.comparators)


def parse_requirement(text: str) -> VersionReq:
    """Parse a Cargo version requirement string.

    Examples:
        "1.2.3" → [^1.2.3]
        ">=1.0, <2.0" → [>=1.0, <2.0]
        "*" → []

    Raises:
        RequirementParseError: If the string is not valid requirement syntax.
    """
    stripped = text.strip()
    if not stripped:
        raise RequirementParseError("empty requirement", text)
    if stripped in _WILDCARDS:
        return VersionReq()
    comparators = tuple(
        _parse_comparator(part.strip(), text) for part in stripped.split(",")
    )
    return VersionReq(comparators=comparators)


def _parse_comparator(part: str, text: str) -> Comparator:
    """Parse one comma-separated piece of a requirement."""
    if not part:
        raise RequirementParseError("unexpected end of input", text)

    op: Op | None = None
    for candidate in _OPERATORS:
        if part.startswith(candidate.value):
            op = candidate
            part = part[len(candidate.value) :].lstrip()
            break

    match = _VERSION_RE.fullmatch(part)
    if match is None:
        raise RequirementParseError(f"unexpected version syntax {part!r}", text)

    major, minor, patch, pre = match.group("major", "minor", "patch", "pre")
    minor_wild = minor in _WILDCARDS
    patch_wild = patch in _WILDCARDS

    if minor_wild and patch is not None and not patch_wild:
        raise RequirementParseError("unexpected version number after wildcard", text)
    if pre is not None and patch_wild:
        raise RequirementParseError("pre-release requires a full version", text)
    if minor_wild or patch_wild:
        if op not in (None, Op.EXACT):
            raise RequirementParseError(
                f"wildcard cannot be combined with {op.value!r}", text
            )
        op = Op.WILDCARD

    numbers = [major] + [
        c for c in (minor, patch) if c is not None and c not in _WILDCARDS
    ]
    padded = numbers + ["0"] * (3 - len(numbers))
    body = ".".join(padded) + (f"-{pre}" if pre else "")
    try:
        version = semver.Version.parse(body)
    except ValueError as exc:
        raise RequirementParseError(f"invalid version {part!r}", text) from exc

    has_minor = minor is not None and not minor_wild
    has_patch = patch is not None and not patch_wild
    return Comparator(
        op=op or Op.CARET,
        major=version.major,
        minor=version.minor if has_minor else None,
        patch=version.patch if has_patch else None,
        pre=version.prerelease,
    )
