"""Dependency collection.

Turns the dependency tables of one or more Cargo manifests into a map of
crate name → UpdateStrategy. Path dependencies are skipped since they
have no registry version for Dependabot to track.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import tomlkit

from .errors import ManifestError, RequirementParseError
from .strategy import UpdateStrategy, classify
from .versions import parse_requirement
from .toml import iter_dependencies

logger = logging.getLogger(__name__)

# Requirement used for detailed specs without a version key (git deps).
ANY_VERSION = "*"


def dependency_requirement(
    name: str,
    spec: Any,
    workspace_deps: Mapping[str, Any],
    manifest_path: Path,
) -> str | None:
    """Return the version requirement of a dependency, or None to skip it.

    Handles the three forms a dependency can take:
    - shorthand string: serde = "1.0"
    - detailed table: serde = { version = "1.0", features = [...] }
    - workspace inheritance: serde = { workspace = true }, resolved against
      the root manifest's [workspace.dependencies]

    A detailed table carrying a path key returns None, whether or not it
    also declares a version.

    Raises:
        ManifestError: If the specification is malformed, or inherits an
            entry the workspace does not declare.
    """
    if isinstance(spec, str):
        return str(spec)
    if not isinstance(spec, Mapping):
        raise ManifestError(
            f"Invalid specification for dependency {name!r}", manifest_path
        )

    if spec.get("workspace") is True:
        if name not in workspace_deps:
            raise ManifestError(
                f"Dependency {name!r} is inherited from the workspace, "
                "but [workspace.dependencies] does not declare it",
                manifest_path,
            )
        # Inherited entries may not inherit again.
        return dependency_requirement(name, workspace_deps[name], {}, manifest_path)

    if "path" in spec:
        return None
    version = spec.get("version")
    if version is None:
        return ANY_VERSION
    if not isinstance(version, str):
        raise ManifestError(
            f"Version of dependency {name!r} must be a string", manifest_path
        )
    return str(version)


def collect_tiers(
    manifests: Iterable[tuple[Path, tomlkit.TOMLDocument]],
    workspace_deps: Mapping[str, Any] | None = None,
) -> dict[str, UpdateStrategy]:
    """Classify every registry dependency across the given manifests.

    When the same name appears more than once (in different tables or
    different workspace members) the last occurrence wins.

    Args:
        manifests: (path, parsed document) pairs, in scan order.
        workspace_deps: [workspace.dependencies] of the root manifest.

    Raises:
        RequirementParseError: If any requirement is malformed. The error
            names the dependency and the manifest it came from.
        ManifestError: If a dependency specification is malformed.
    """
    workspace_deps = workspace_deps or {}
    tiers: dict[str, UpdateStrategy] = {}
    for path, doc in manifests:
        for name, spec in iter_dependencies(doc, path):
            req = dependency_requirement(name, spec, workspace_deps, path)
            if req is None:
                logger.debug("%s: skipping path dependency", name)
                continue
            try:
                parsed = parse_requirement(req)
            except RequirementParseError as exc:
                raise RequirementParseError(
                    exc.message, exc.requirement, dependency=name, path=path
                ) from exc
            strategy = classify(parsed)
            logger.debug("%s %s → %s", name, parsed, strategy.value)
            tiers[name] = strategy
    return tiers
