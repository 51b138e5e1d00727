"""Tests for dependabot_ignore.errors."""

from __future__ import annotations

from pathlib import Path

from dependabot_ignore.errors import (
    ConfigError,
    DependabotIgnoreError,
    ManifestError,
    RequirementParseError,
    WriteError,
)


class TestDependabotIgnoreError:
    def test_message_only(self) -> None:
        assert str(DependabotIgnoreError("boom")) == "boom"

    def test_appends_path(self) -> None:
        err = ManifestError("Failed to parse manifest", "crates/a/Cargo.toml")
        assert err.path == Path("crates/a/Cargo.toml")
        assert str(err) == "Failed to parse manifest: crates/a/Cargo.toml"

    def test_hierarchy(self) -> None:
        for cls in (ManifestError, RequirementParseError, ConfigError, WriteError):
            assert issubclass(cls, DependabotIgnoreError)


class TestRequirementParseError:
    def test_bare(self) -> None:
        err = RequirementParseError("empty requirement", "")
        assert str(err) == "Invalid version requirement '' (empty requirement)"

    def test_with_context(self) -> None:
        err = RequirementParseError(
            "unexpected version syntax", "1.x.2", dependency="serde", path="Cargo.toml"
        )
        assert str(err) == (
            "Invalid version requirement '1.x.2' for serde "
            "(unexpected version syntax) in Cargo.toml"
        )
