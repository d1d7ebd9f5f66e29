"""Artifact planner.

Decides, per artifact kind, whether the driver should create the file,
leave an existing one alone, or append metadata fields to the manifest.
Planning only reads the filesystem (existence checks).
"""

from __future__ import annotations

from pathlib import Path

from cargo_me.config import ResolvedConfig

from .models import ARTIFACT_PATHS, ArtifactAction, ArtifactKind, PlannedArtifact


def plan(target_dir: str | Path, config: ResolvedConfig) -> list[PlannedArtifact]:
    """Build the ordered artifact plan for *target_dir*.

    The manifest patch is always ``APPEND_FIELDS``: ``cargo new`` has just
    written the manifest, so it cannot already hold the appended fields.
    Every other artifact is ``SKIP`` when its path already exists and
    ``CREATE`` otherwise, which keeps re-runs non-destructive.

    *config* is accepted so future artifact kinds can depend on it (e.g.
    binary-only files); no current decision uses it.
    """
    root = Path(target_dir)
    entries: list[PlannedArtifact] = []
    for kind, rel_path in ARTIFACT_PATHS.items():
        if kind is ArtifactKind.MANIFEST_PATCH:
            action = ArtifactAction.APPEND_FIELDS
        elif (root / rel_path).exists():
            action = ArtifactAction.SKIP
        else:
            action = ArtifactAction.CREATE
        entries.append(PlannedArtifact(kind=kind, action=action, path=rel_path))
    return entries
