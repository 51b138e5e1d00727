"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
import tomlkit


def write_manifest(directory: Path, content: str) -> Path:
    """Write a Cargo.toml into directory, creating it if needed."""
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / "Cargo.toml"
    manifest.write_text(content)
    return manifest


@pytest.fixture(name="write_manifest")
def write_manifest_fixture() -> Callable[[Path, str], Path]:
    """Expose write_manifest to tests that build their own layouts."""
    return write_manifest


@pytest.fixture
def crate_root(tmp_path: Path) -> Path:
    """Create a single-crate repository."""
    write_manifest(
        tmp_path,
        """\
[package]
name = "my-crate"
version = "0.1.0"

[dependencies]
serde = "1.0"
rand = { version = "0.8.5", features = ["small_rng"] }
bitflags = "0.0.3"
local-helper = { path = "../helper" }

[dev-dependencies]
proptest = "1"

[build-dependencies]
cc = "^0.2"
""",
    )
    return tmp_path


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """Create a workspace repository with two member crates."""
    write_manifest(
        tmp_path,
        """\
[workspace]
members = ["crates/*"]

[workspace.dependencies]
tokio = { version = "1.35", features = ["full"] }
core-types = { path = "crates/core" }
""",
    )
    write_manifest(
        tmp_path / "crates" / "core",
        """\
[package]
name = "core-types"
version = "0.1.0"

[dependencies]
serde = "1.0"
tokio = { workspace = true }
""",
    )
    write_manifest(
        tmp_path / "crates" / "app",
        """\
[package]
name = "app"
version = "0.1.0"

[dependencies]
core-types = { workspace = true }
clap = "0.4"
""",
    )
    return tmp_path


@pytest.fixture
def sample_manifest_doc() -> tomlkit.TOMLDocument:
    """Create a sample Cargo.toml document."""
    content = """\
[package]
name = "my-crate"
version = "2.0.0"

[dependencies]
serde = "1.0"
anyhow = { version = "1" }

[dev-dependencies]
insta = "1.34"

[build-dependencies]
cc = "1.0"

[workspace]
members = ["crates/*", "tools/gen"]
exclude = ["crates/legacy"]

[workspace.dependencies]
log = "0.4"
"""
    return tomlkit.parse(content)
