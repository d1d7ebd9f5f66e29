"""cargo-me scaffolder -- enriches a freshly created crate.

Takes a ``ResolvedConfig`` and the crate directory created by ``cargo new``
and adds the manifest metadata, README, LICENSE, CHANGELOG, CI workflow and
test/bench stubs.  Existing files are never overwritten.

Quick usage::

    from cargo_me.config import load_profile, resolve_config
    from cargo_me.scaffolder import enrich

    config = resolve_config("my-crate", profile=load_profile())
    report = enrich("my-crate", config)
"""

from cargo_me.scaffolder.driver import ArtifactWriteError, apply, enrich
from cargo_me.scaffolder.models import (
    ARTIFACT_PATHS,
    ArtifactAction,
    ArtifactKind,
    PlannedArtifact,
    ScaffoldReport,
)
from cargo_me.scaffolder.planner import plan
from cargo_me.scaffolder.renderers import render, render_plan
from cargo_me.scaffolder.templates import TemplateRenderer

__all__ = [
    "ARTIFACT_PATHS",
    "ArtifactAction",
    "ArtifactKind",
    "ArtifactWriteError",
    "PlannedArtifact",
    "ScaffoldReport",
    "TemplateRenderer",
    "apply",
    "enrich",
    "plan",
    "render",
    "render_plan",
]
