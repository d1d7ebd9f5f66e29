"""Pydantic models for artifact planning and reporting."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArtifactKind(str, Enum):
    """A generated file (or manifest patch) the scaffolder knows about."""
    MANIFEST_PATCH = "manifest_patch"
    README = "readme"
    LICENSE = "license"
    CHANGELOG = "changelog"
    CI_WORKFLOW = "ci_workflow"
    TEST_STUB = "test_stub"
    BENCH_STUB = "bench_stub"


class ArtifactAction(str, Enum):
    """What the driver does with a planned artifact."""
    CREATE = "create"
    SKIP = "skip"
    APPEND_FIELDS = "append_fields"


# Plan order.  The manifest comes first; the rest are order-independent.
ARTIFACT_PATHS: dict[ArtifactKind, str] = {
    ArtifactKind.MANIFEST_PATCH: "Cargo.toml",
    ArtifactKind.README: "README.md",
    ArtifactKind.LICENSE: "LICENSE",
    ArtifactKind.CHANGELOG: "CHANGELOG.md",
    ArtifactKind.CI_WORKFLOW: ".github/workflows/ci.yml",
    ArtifactKind.TEST_STUB: "tests/basic.rs",
    ArtifactKind.BENCH_STUB: "benches/bench.rs",
}


# ---------------------------------------------------------------------------
# Plan & report
# ---------------------------------------------------------------------------

class PlannedArtifact(BaseModel):
    """One planner decision."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    action: ArtifactAction
    path: str = Field(..., description="Path relative to the crate root")


class ScaffoldReport(BaseModel):
    """Outcome of applying a plan, for the caller to display."""

    project_name: str
    license: str
    created: list[ArtifactKind] = Field(default_factory=list)
    skipped: list[ArtifactKind] = Field(default_factory=list)
    appended: list[ArtifactKind] = Field(default_factory=list)

    def as_rows(self) -> dict[str, str]:
        """Return ``{artifact path: outcome}`` for summary tables."""
        rows: dict[str, str] = {}
        for kind in ARTIFACT_PATHS:
            if kind in self.created:
                rows[ARTIFACT_PATHS[kind]] = "created"
            elif kind in self.appended:
                rows[ARTIFACT_PATHS[kind]] = "fields appended"
            elif kind in self.skipped:
                rows[ARTIFACT_PATHS[kind]] = "skipped (exists)"
        return rows
