"""Artifact renderers.

Each artifact kind maps to a pure function of ``(ResolvedConfig, now)``.
Parameterised artifacts go through the Jinja2 templates in
``templates/``; the CI workflow and the test/bench stubs are fixed
constants so their content never varies between invocations.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from cargo_me.config import ResolvedConfig

from .models import ArtifactAction, ArtifactKind, PlannedArtifact
from .templates import TemplateRenderer


PLACEHOLDER_VCS_HANDLE = "your-github"


# ---------------------------------------------------------------------------
# Static content
# ---------------------------------------------------------------------------

CI_WORKFLOW = """\
name: CI

on:
  push:
    branches: [ "main" ]
  pull_request:

jobs:
  test:
    name: Test on ${{ matrix.os }}
    runs-on: ${{ matrix.os }}
    strategy:
      matrix:
        os: [ubuntu-latest, macos-latest, windows-latest]

    steps:
      - uses: actions/checkout@v4

      - name: Install Rust
        uses: dtolnay/rust-toolchain@stable
        with:
          components: rustfmt, clippy

      - name: Build
        run: cargo build --verbose

      - name: Run tests
        run: cargo test --verbose

      - name: Check formatting
        run: cargo fmt -- --check

      - name: Run clippy
        run: cargo clippy -- -D warnings
"""

TEST_STUB = """\
#[test]
fn it_works() {
    assert_eq!(2 + 2, 4);
}
"""

BENCH_STUB = """\
// Placeholder benchmark. No harness is wired up yet: add `criterion` as a
// dev-dependency and a [[bench]] entry with `harness = false` to use it.
fn main() {
    println!("Run with cargo bench");
}
"""


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

_renderer = TemplateRenderer()


def _context(config: ResolvedConfig, now: datetime) -> dict[str, Any]:
    """Build the Jinja2 context shared by every templated artifact."""
    return {
        "project_name": config.project_name,
        "is_binary": config.is_binary,
        "license": config.license,
        "author_name": config.author_name,
        "author_email": config.author_email or "",
        "vcs_handle": config.vcs_handle,
        "badge_handle": config.vcs_handle or PLACEHOLDER_VCS_HANDLE,
        "organization": config.organization,
        "year": now.year,
    }


def _template(name: str) -> Callable[[ResolvedConfig, datetime], str]:
    def _render(config: ResolvedConfig, now: datetime) -> str:
        return _renderer.render(name, _context(config, now))

    return _render


def _constant(text: str) -> Callable[[ResolvedConfig, datetime], str]:
    def _render(config: ResolvedConfig, now: datetime) -> str:
        return text

    return _render


RENDERERS: dict[ArtifactKind, Callable[[ResolvedConfig, datetime], str]] = {
    ArtifactKind.MANIFEST_PATCH: _template("Cargo.toml.patch.j2"),
    ArtifactKind.README: _template("README.md.j2"),
    ArtifactKind.LICENSE: _template("LICENSE.j2"),
    ArtifactKind.CHANGELOG: _template("CHANGELOG.md.j2"),
    ArtifactKind.CI_WORKFLOW: _constant(CI_WORKFLOW),
    ArtifactKind.TEST_STUB: _constant(TEST_STUB),
    ArtifactKind.BENCH_STUB: _constant(BENCH_STUB),
}


def render(kind: ArtifactKind, config: ResolvedConfig, now: datetime) -> str:
    """Render the content of one artifact.

    Args:
        kind: Which artifact to render.
        config: The resolved invocation settings.
        now: Render timestamp; only the year is used (license copyright).

    Returns:
        The artifact text.  For the manifest patch this is the block of
        fields to append, not the whole manifest.
    """
    return RENDERERS[kind](config, now)


def render_plan(
    entries: Iterable[PlannedArtifact],
    config: ResolvedConfig,
    now: datetime,
) -> dict[ArtifactKind, str]:
    """Render every planned artifact that will actually be written."""
    return {
        entry.kind: render(entry.kind, config, now)
        for entry in entries
        if entry.action is not ArtifactAction.SKIP
    }
