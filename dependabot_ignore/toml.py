"""Cargo.toml reading utilities.

Uses tomlkit, which parses into dict-like containers, so the helpers
below can treat tables as plain mappings.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .errors import ManifestError

MANIFEST_NAME = "Cargo.toml"

# Scanned in this order; a later table overrides an earlier one on name clash.
DEPENDENCY_TABLES = ("dependencies", "dev-dependencies", "build-dependencies")


def load_manifest(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a Cargo.toml file.

    Raises:
        ManifestError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Failed to read manifest ({exc.strerror})", path) from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(
            f"Manifest is not valid UTF-8 ({exc.reason})", path
        ) from exc
    try:
        return tomlkit.parse(text)
    except TOMLKitError as exc:
        raise ManifestError(f"Failed to parse manifest ({exc})", path) from exc


def get_workspace(doc: tomlkit.TOMLDocument) -> Mapping[str, Any] | None:
    """Return the [workspace] table, or None for a single-crate manifest."""
    workspace = doc.get("workspace")
    return workspace if isinstance(workspace, Mapping) else None


def get_workspace_members(doc: tomlkit.TOMLDocument) -> list[str]:
    """Extract member paths or glob patterns from [workspace].members."""
    workspace = get_workspace(doc) or {}
    return [str(m) for m in workspace.get("members", [])]


def get_workspace_excludes(doc: tomlkit.TOMLDocument) -> list[str]:
    """Extract paths listed in [workspace].exclude."""
    workspace = get_workspace(doc) or {}
    return [str(m) for m in workspace.get("exclude", [])]


def get_workspace_dependencies(doc: tomlkit.TOMLDocument) -> Mapping[str, Any]:
    """Return [workspace.dependencies], the table members inherit from."""
    workspace = get_workspace(doc) or {}
    deps = workspace.get("dependencies", {})
    return deps if isinstance(deps, Mapping) else {}


def iter_dependencies(
    doc: tomlkit.TOMLDocument, path: Path
) -> Iterator[tuple[str, Any]]:
    """Yield (name, specification) for every runtime, dev and build dependency.

    Target-specific tables ([target.'cfg(...)'.dependencies]) are not read.

    Raises:
        ManifestError: If a dependency section is not a table.
    """
    for table in DEPENDENCY_TABLES:
        deps = doc.get(table, {})
        if not isinstance(deps, Mapping):
            raise ManifestError(f"[{table}] must be a table", path)
        for name, spec in deps.items():
            yield str(name), spec
