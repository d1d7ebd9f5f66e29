"""Shared pytest fixtures for the cargo-me test suite.

Provides reusable fixtures for:
- Profile files on disk (valid, partial, malformed)
- Resolved configurations with and without a profile
- A crate directory laid out the way ``cargo new`` leaves it
- A fixed render timestamp
"""

from __future__ import annotations

import textwrap
from datetime import datetime, timezone
from pathlib import Path

import pytest

from cargo_me.config import Profile, ResolvedConfig, resolve_config


CARGO_NEW_MANIFEST = textwrap.dedent("""\
    [package]
    name = "{name}"
    version = "0.1.0"
    edition = "2021"

    [dependencies]
""")


def write_fake_crate(root: Path, name: str, is_binary: bool = False) -> Path:
    """Lay out *root* the way ``cargo new`` does and return it."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "Cargo.toml").write_text(
        CARGO_NEW_MANIFEST.format(name=name), encoding="utf-8"
    )
    src = root / "src"
    src.mkdir(exist_ok=True)
    if is_binary:
        (src / "main.rs").write_text(
            'fn main() {\n    println!("Hello, world!");\n}\n', encoding="utf-8"
        )
    else:
        (src / "lib.rs").write_text("pub fn add(left: u64, right: u64) -> u64 {\n    left + right\n}\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_now() -> datetime:
    """A deterministic render timestamp."""
    return datetime(2031, 3, 14, 9, 26, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

@pytest.fixture
def profile_file(tmp_path: Path) -> Path:
    """A complete ``.cargo-me.toml`` profile."""
    path = tmp_path / ".cargo-me.toml"
    path.write_text(
        textwrap.dedent("""\
            name = "Alice Example"
            email = "alice@example.com"
            github = "alice"
            license = "Apache-2.0"
            organization = "Example Org"
        """),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def alice_profile() -> Profile:
    """The profile from the ``profile_file`` fixture, as a model."""
    return Profile(
        name="Alice Example",
        email="alice@example.com",
        github="alice",
        license="Apache-2.0",
        organization="Example Org",
    )


# ---------------------------------------------------------------------------
# Resolved configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def bare_config() -> ResolvedConfig:
    """``foo`` library with no profile and no overrides."""
    return resolve_config("foo", is_binary=False, cli_license=None, profile=None)


@pytest.fixture
def alice_config(alice_profile: Profile) -> ResolvedConfig:
    """``widget`` binary resolved against Alice's profile."""
    return resolve_config("widget", is_binary=True, cli_license=None, profile=alice_profile)


# ---------------------------------------------------------------------------
# Crate directories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_crate():
    """Factory fixture: ``make_crate(root, name, is_binary=False)``."""
    return write_fake_crate


@pytest.fixture
def fresh_crate(tmp_path: Path) -> Path:
    """A library crate directory exactly as ``cargo new foo --lib`` leaves it."""
    return write_fake_crate(tmp_path / "foo", "foo")
