"""Data models for the Dependabot v2 configuration file.

These Pydantic models cover the parts of .github/dependabot.yaml that
dependabot-ignore reads or writes. Every model allows extra keys, so
settings it does not know about (registries, labels, groups, ...) survive
a load/dump round trip unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PackageEcosystem(str, Enum):
    BUNDLER = "bundler"
    CARGO = "cargo"
    COMPOSER = "composer"
    DEVCONTAINERS = "devcontainers"
    DOCKER = "docker"
    DOCKER_COMPOSE = "docker-compose"
    DOTNET_SDK = "dotnet-sdk"
    ELM = "elm"
    GITHUB_ACTIONS = "github-actions"
    GITSUBMODULE = "gitsubmodule"
    GOMOD = "gomod"
    GRADLE = "gradle"
    HELM = "helm"
    MAVEN = "maven"
    MIX = "mix"
    NPM = "npm"
    NUGET = "nuget"
    PIP = "pip"
    PUB = "pub"
    SWIFT = "swift"
    TERRAFORM = "terraform"
    UV = "uv"


class Interval(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUALLY = "semiannually"
    YEARLY = "yearly"
    CRON = "cron"


class UpdateType(str, Enum):
    """Kinds of version bump an ignore rule can suppress."""

    SEMVER_MAJOR = "version-update:semver-major"
    SEMVER_MINOR = "version-update:semver-minor"
    SEMVER_PATCH = "version-update:semver-patch"


class _DependabotModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Schedule(_DependabotModel):
    interval: Interval
    day: str | None = None
    time: str | None = None
    timezone: str | None = None

    @field_validator("time", mode="before")
    @classmethod
    def _sexagesimal_time(cls, value: object) -> object:
        # YAML 1.1 reads an unquoted 10:30 as the base-60 integer 630.
        if isinstance(value, int) and not isinstance(value, bool):
            return f"{value // 60:02d}:{value % 60:02d}"
        return value


class Ignore(_DependabotModel):
    """An ignore rule for one dependency, or "*" for all of them.

    Attributes:
        dependency_name: Dependency the rule applies to; "*" matches all.
        versions: Version ranges to ignore entirely.
        update_types: Kinds of bump to ignore.
    """

    dependency_name: str = Field(alias="dependency-name")
    versions: list[str] | str | None = None
    update_types: list[UpdateType] | None = Field(default=None, alias="update-types")


class Update(_DependabotModel):
    """Update settings for one package ecosystem in one directory.

    Attributes:
        package_ecosystem: Package manager Dependabot should use.
        directory: Location of the manifests, relative to the repo root.
        schedule: How often to check for updates.
        ignore: Dependencies or bump kinds to leave alone.
    """

    # Ecosystems missing from the enum load as plain strings and pass through.
    package_ecosystem: PackageEcosystem | str = Field(
        alias="package-ecosystem", union_mode="left_to_right"
    )
    directory: str | None = None
    directories: list[str] | None = None
    schedule: Schedule
    ignore: list[Ignore] | None = None


class Dependabot(_DependabotModel):
    """Top-level document of .github/dependabot.yaml."""

    version: Literal[2] = 2
    updates: list[Update] = Field(default_factory=list)
