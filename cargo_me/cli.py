"""cargo-me command line entry point.

Runs ``cargo new`` and then enriches the new crate with a license,
README, changelog, CI workflow and test/bench stubs, filling in metadata
from ``~/.cargo-me.toml``.

Usage::

    cargo setup my-crate                 # via cargo's external subcommand lookup
    cargo-setup setup my-crate --bin
    python -m cargo_me.cli setup my-crate --license Apache-2.0
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from cargo_me.config import load_profile, resolve_config
from cargo_me.errors import InvalidProjectName, ScaffoldError, ToolFailure
from cargo_me.scaffolder import ArtifactWriteError, ScaffoldReport, enrich
from cargo_me.utils import (
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
)


# ---------------------------------------------------------------------------
# cargo new
# ---------------------------------------------------------------------------


async def create_crate(path: str, is_binary: bool, cwd: str | Path | None = None) -> Path:
    """Run ``cargo new`` and return the created crate directory.

    cargo runs without a timeout; the invocation completes or fails as a
    whole.

    Raises:
        ToolFailure: If cargo is missing or exits non-zero.  Nothing has
            been written by cargo-me at that point.
    """
    cmd = ["cargo", "new", path, "--bin" if is_binary else "--lib"]
    try:
        returncode, _, stderr = await run_command(cmd, cwd=cwd, timeout=None, capture=False)
    except FileNotFoundError as exc:
        raise ToolFailure(cmd, 127, "cargo executable not found") from exc
    if returncode != 0:
        raise ToolFailure(cmd, returncode, stderr)
    return Path(cwd or ".") / path


async def setup(
    path: str,
    is_binary: bool = False,
    license: str | None = None,
    *,
    cwd: str | Path | None = None,
    profile_path: str | Path | None = None,
) -> ScaffoldReport:
    """Create a crate with ``cargo new`` and enrich it.

    The profile is read once, before cargo runs, and passed down
    explicitly.  The crate name is the last component of *path*, matching
    how cargo names the package.

    Raises:
        InvalidProjectName: If *path* has no final name component (``""``,
            ``"."``).  Checked before cargo runs.
    """
    profile = load_profile(profile_path)
    try:
        config = resolve_config(
            project_name=Path(path).name,
            is_binary=is_binary,
            cli_license=license,
            profile=profile,
        )
    except ValidationError as exc:
        raise InvalidProjectName(path) from exc
    crate_dir = await create_crate(path, is_binary, cwd=cwd)
    return enrich(crate_dir, config)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cargo",
        description="cargo-me -- scaffold a new crate with profile-based extras",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cargo setup my-crate\n"
            "  cargo setup my-tool --bin\n"
            "  cargo setup my-crate --license Apache-2.0\n"
            "\n"
            "Defaults are read from ~/.cargo-me.toml (name, email, github,\n"
            "license, organization).\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser(
        "setup",
        help="Scaffold a new crate with profile-based extras",
    )
    setup_parser.add_argument(
        "name",
        help="Name (or path) of the new crate",
    )
    setup_parser.add_argument(
        "--bin",
        action="store_true",
        help="Create a binary crate (default is library)",
    )
    setup_parser.add_argument(
        "--license",
        default=None,
        help="License override, e.g. MIT or Apache-2.0 (default: profile, then MIT)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``cargo-setup`` and ``python -m cargo_me.cli``."""
    args = build_parser().parse_args(argv)

    try:
        report = asyncio.run(setup(args.name, is_binary=args.bin, license=args.license))
    except ToolFailure as exc:
        print_error(f"Error: cargo new failed ({exc})")
        sys.exit(exc.returncode or 1)
    except ArtifactWriteError as exc:
        print_error(f"Error: {exc}")
        print_warning("Artifacts written before the failure were left in place.")
        sys.exit(1)
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    print_summary_table(report.as_rows(), title=f"cargo-me: {report.project_name}")
    if report.skipped:
        print_warning(f"Skipped {len(report.skipped)} artifact(s) that already existed.")
    print_success(
        f"✅ Scaffolded project `{report.project_name}` with license "
        f"`{report.license}` and extras."
    )


if __name__ == "__main__":
    main()
