"""Exceptions raised while building the Dependabot configuration.

Every failure in dependabot-ignore is fatal. The CLI catches
DependabotIgnoreError and reports the message along with the file that
caused it, so each exception carries the offending path where known.
"""

from __future__ import annotations

from pathlib import Path


class DependabotIgnoreError(Exception):
    """Base class for all dependabot-ignore errors.

    Args:
        message: Human-readable description of the failure.
        path: File or directory involved, if any.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class ManifestError(DependabotIgnoreError):
    """A Cargo.toml is missing, unreadable or structurally invalid."""


class RequirementParseError(DependabotIgnoreError):
    """A version requirement string is not valid Cargo syntax.

    Raised bare by the parser; the dependency collector re-raises it with
    the dependency name and manifest path attached.
    """

    def __init__(
        self,
        message: str,
        requirement: str,
        *,
        dependency: str | None = None,
        path: Path | str | None = None,
    ) -> None:
        self.requirement = requirement
        self.dependency = dependency
        super().__init__(message, path)

    def __str__(self) -> str:
        text = f"Invalid version requirement {self.requirement!r}"
        if self.dependency:
            text += f" for {self.dependency}"
        text += f" ({self.message})"
        if self.path is not None:
            text += f" in {self.path}"
        return text


class ConfigError(DependabotIgnoreError):
    """An existing Dependabot config could not be parsed."""


class WriteError(DependabotIgnoreError):
    """The Dependabot config could not be written to disk."""
