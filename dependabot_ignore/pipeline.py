"""Pipeline: discover → classify → build rules → merge → print or write.

This module ties the pieces together:
1. Read the root Cargo.toml, and every member manifest for a workspace
2. Classify each registry dependency's version requirement
3. Turn the classification into Dependabot ignore rules
4. Merge the rules into .github/dependabot.yaml (or a fresh config)
5. Print the result, or write it back to disk

Every manifest is read and classified before the Dependabot config is
touched, so a bad requirement never leaves a half-updated config behind.
"""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path

import click
import tomlkit

from .config import dump_config, find_config_path, load_config, write_config
from .deps import collect_tiers
from .merge import ECOSYSTEM, build_ignore_rules, merge_config
from .models import Dependabot
from .toml import (
    MANIFEST_NAME,
    get_workspace,
    get_workspace_dependencies,
    get_workspace_excludes,
    get_workspace_members,
    load_manifest,
)

logger = logging.getLogger(__name__)

_GLOB_CHARS = frozenset("*?[")


def find_member_manifests(root: Path, doc: tomlkit.TOMLDocument) -> list[Path]:
    """Resolve [workspace].members to manifest paths.

    Glob patterns ("crates/*") are expanded and only matches holding a
    Cargo.toml are kept. Literal members are returned as-is, so a missing
    manifest surfaces as an error when it is loaded. Members listed in
    [workspace].exclude are dropped.
    """
    excluded = {os.path.normpath(p) for p in get_workspace_excludes(doc)}
    manifests: list[Path] = []
    for pattern in get_workspace_members(doc):
        if _GLOB_CHARS & set(pattern):
            member_dirs = [Path(m) for m in sorted(glob.glob(str(root / pattern)))]
            member_dirs = [d for d in member_dirs if (d / MANIFEST_NAME).is_file()]
        else:
            member_dirs = [root / pattern]

        for member_dir in member_dirs:
            if os.path.normpath(os.path.relpath(member_dir, root)) in excluded:
                logger.info("Skipping excluded member %s", member_dir)
                continue
            manifest = member_dir / MANIFEST_NAME
            if manifest not in manifests:
                manifests.append(manifest)
    return manifests


def discover_manifests(
    root: Path,
) -> tuple[tomlkit.TOMLDocument, list[tuple[Path, tomlkit.TOMLDocument]]]:
    """Load the manifests whose dependencies should be classified.

    For a single crate this is the root manifest. For a workspace it is
    every member manifest; the root's own [dependencies] are not scanned.

    Returns:
        Tuple of (root document, list of (path, document) to scan).

    Raises:
        ManifestError: If any manifest is missing or unparseable.
    """
    root_manifest = root / MANIFEST_NAME
    logger.info("Reading %s", root_manifest)
    root_doc = load_manifest(root_manifest)

    if get_workspace(root_doc) is None:
        return root_doc, [(root_manifest, root_doc)]

    manifests: list[tuple[Path, tomlkit.TOMLDocument]] = []
    for path in find_member_manifests(root, root_doc):
        logger.info("Reading %s", path)
        manifests.append((path, load_manifest(path)))
    return root_doc, manifests


def build_config(root: Path) -> tuple[Path, Dependabot]:
    """Compute the updated Dependabot config for a repository.

    Returns:
        Tuple of (config path, merged configuration).

    Raises:
        DependabotIgnoreError: On any manifest, requirement or config error.
    """
    root_doc, manifests = discover_manifests(root)
    tiers = collect_tiers(manifests, get_workspace_dependencies(root_doc))
    logger.info("Classified %d dependencies", len(tiers))
    rules = build_ignore_rules(tiers)

    config_path = find_config_path(root)
    existing = load_config(config_path)
    return config_path, merge_config(existing, ECOSYSTEM, rules)


def run(root: Path, write: bool = False) -> str:
    """Run the whole pipeline for a repository root.

    Args:
        root: Directory holding the root Cargo.toml.
        write: Write the result to disk instead of printing it.

    Returns:
        The serialized configuration.
    """
    config_path, config = build_config(root)
    text = dump_config(config)
    if write:
        click.echo(f"Writing to {config_path}")
        write_config(config_path, config)
    else:
        click.echo(text, nl=False)
    return text
