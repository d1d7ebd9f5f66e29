"""Execution driver.

Turns a plan plus rendered contents into filesystem writes under the crate
root.  Writes are sequential and blocking; the first I/O error stops the
run and earlier artifacts stay on disk.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from pathlib import Path

from cargo_me.config import ResolvedConfig
from cargo_me.errors import ScaffoldError

from .models import ArtifactAction, ArtifactKind, PlannedArtifact, ScaffoldReport
from .planner import plan
from .renderers import render_plan


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ArtifactWriteError(ScaffoldError):
    """Raised when writing a specific artifact fails."""

    def __init__(self, kind: ArtifactKind, path: Path, reason: str) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"Failed to write {kind.value} ({path}): {reason}")


# ---------------------------------------------------------------------------
# Manifest patching
# ---------------------------------------------------------------------------

_TABLE_HEADER = re.compile(r"^\s*\[\[?[^\]\n]+\]\]?\s*(#.*)?$", re.MULTILINE)


def append_to_package_table(manifest: str, patch: str) -> str:
    """Append *patch* to the end of the ``[package]`` table of *manifest*.

    ``cargo new`` writes ``[package]`` followed by an empty
    ``[dependencies]`` table, so appending at end of file would put the
    fields in the wrong table.  When there is no table after ``[package]``
    (or no ``[package]`` at all) the patch goes at the end of the file.
    """
    if not patch:
        return manifest

    package = re.search(r"^\s*\[package\]\s*(#.*)?$", manifest, re.MULTILINE)
    next_table = _TABLE_HEADER.search(manifest, package.end()) if package else None
    if next_table is None:
        if manifest and not manifest.endswith("\n"):
            manifest += "\n"
        return manifest + patch

    head = manifest[: next_table.start()].rstrip("\n")
    tail = manifest[next_table.start():].lstrip("\n")
    fields = patch.rstrip("\n")
    return f"{head}\n{fields}\n\n{tail}"


# ---------------------------------------------------------------------------
# Apply
# ---------------------------------------------------------------------------


def _create(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _append_fields(path: Path, content: str) -> None:
    current = path.read_text(encoding="utf-8")
    path.write_text(append_to_package_table(current, content), encoding="utf-8")


def apply(
    target_dir: str | Path,
    entries: Iterable[PlannedArtifact],
    rendered: Mapping[ArtifactKind, str],
    *,
    project_name: str,
    license: str,
) -> ScaffoldReport:
    """Execute *entries* against *target_dir*.

    Args:
        target_dir: The crate root created by ``cargo new``.
        entries: The plan, in order.
        rendered: Content per artifact kind for every non-skipped entry.
        project_name: Echoed into the report.
        license: The resolved license, echoed into the report.

    Returns:
        A ``ScaffoldReport`` listing created, skipped and appended artifacts.

    Raises:
        ArtifactWriteError: On the first artifact that cannot be written.
            Nothing already written is rolled back.
    """
    root = Path(target_dir)
    report = ScaffoldReport(project_name=project_name, license=license)

    for entry in entries:
        if entry.action is ArtifactAction.SKIP:
            report.skipped.append(entry.kind)
            continue

        path = root / entry.path
        content = rendered[entry.kind]
        try:
            if entry.action is ArtifactAction.APPEND_FIELDS:
                _append_fields(path, content)
            else:
                _create(path, content)
        except OSError as exc:
            raise ArtifactWriteError(entry.kind, path, exc.strerror or str(exc)) from exc

        if entry.action is ArtifactAction.APPEND_FIELDS:
            report.appended.append(entry.kind)
        else:
            report.created.append(entry.kind)

    return report


def enrich(
    target_dir: str | Path,
    config: ResolvedConfig,
    now: datetime | None = None,
) -> ScaffoldReport:
    """Plan, render and apply every artifact for a freshly created crate."""
    now = now or datetime.now(timezone.utc)
    entries = plan(target_dir, config)
    rendered = render_plan(entries, config, now)
    return apply(
        target_dir,
        entries,
        rendered,
        project_name=config.project_name,
        license=config.license,
    )
