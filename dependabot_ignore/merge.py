"""Ignore rule generation and config merging.

build_ignore_rules() turns a tier map into Dependabot ignore rules, and
merge_config() swaps those rules into an existing configuration without
touching anything else in it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .models import (
    Dependabot,
    Ignore,
    Interval,
    PackageEcosystem,
    Schedule,
    Update,
    UpdateType,
)
from .strategy import UpdateStrategy

ECOSYSTEM = PackageEcosystem.CARGO
DEFAULT_DIRECTORY = "/"
DEFAULT_INTERVAL = Interval.WEEKLY
WILDCARD = "*"

# Bump kinds suppressed per strategy. PATCH suppresses nothing, so no
# per-dependency rule is emitted for it.
SUPPRESSED_UPDATE_TYPES: dict[UpdateStrategy, tuple[UpdateType, ...]] = {
    UpdateStrategy.MAJOR: (UpdateType.SEMVER_MINOR, UpdateType.SEMVER_PATCH),
    UpdateStrategy.MINOR: (UpdateType.SEMVER_PATCH,),
    UpdateStrategy.PATCH: (),
}


def build_ignore_rules(tiers: Mapping[str, UpdateStrategy]) -> list[Ignore]:
    """Build the ignore list for a tier map.

    Rules are emitted in dependency-name order, followed by a catch-all
    "*" rule that ignores patch bumps. The catch-all is always present
    and always last, even for an empty map.

    Example:
        {"serde": MAJOR, "rand": MINOR, "bitflags": PATCH} →
            rand: [semver-patch]
            serde: [semver-minor, semver-patch]
            *: [semver-patch]
    """
    rules: list[Ignore] = []
    for name, strategy in sorted(tiers.items()):
        update_types = SUPPRESSED_UPDATE_TYPES[strategy]
        if not update_types:
            continue
        rules.append(Ignore(dependency_name=name, update_types=list(update_types)))
    rules.append(
        Ignore(dependency_name=WILDCARD, update_types=[UpdateType.SEMVER_PATCH])
    )
    return rules


def default_update(ecosystem: PackageEcosystem) -> Update:
    """Create a weekly update entry for the repository root."""
    return Update(
        package_ecosystem=ecosystem,
        directory=DEFAULT_DIRECTORY,
        schedule=Schedule(interval=DEFAULT_INTERVAL),
    )


def merge_config(
    existing: Dependabot | None,
    ecosystem: PackageEcosystem,
    rules: Sequence[Ignore],
) -> Dependabot:
    """Replace the ignore list of one ecosystem's update entry.

    The first entry for the ecosystem keeps its position and every other
    setting; only its ignore list is replaced. If there is no such entry,
    a default one is appended. Entries for other ecosystems are left
    untouched. The existing config is not modified.

    Args:
        existing: Loaded configuration, or None to start from scratch.
        ecosystem: Ecosystem whose entry receives the rules.
        rules: The complete new ignore list.

    Returns:
        A new configuration object.
    """
    config = existing.model_copy(deep=True) if existing is not None else Dependabot()
    ignore = [rule.model_copy(deep=True) for rule in rules]

    for update in config.updates:
        if update.package_ecosystem == ecosystem:
            update.ignore = ignore
            break
    else:
        update = default_update(ecosystem)
        update.ignore = ignore
        config.updates.append(update)

    return config
