"""cargo-me configuration.

Typed models for the user profile and the per-invocation resolved
configuration.  Both use Pydantic v2 so field constraints are checked at
construction time.  The profile is read once at the top of an invocation
and passed explicitly to :func:`resolve_config`; nothing here keeps global
state.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

PROFILE_FILENAME = ".cargo-me.toml"

DEFAULT_LICENSE = "MIT"
DEFAULT_ORGANIZATION = "Your Org"


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


class Profile(BaseModel):
    """User-level defaults read from ``~/.cargo-me.toml``.

    The file uses ``github`` for the VCS handle; the model exposes it as
    ``vcs_handle``.  Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str | None = None
    email: str | None = None
    vcs_handle: str | None = Field(default=None, alias="github")
    license: str | None = None
    organization: str | None = None


def default_profile_path() -> Path:
    """Return the well-known profile location in the user's home directory."""
    return Path.home() / PROFILE_FILENAME


def load_profile(path: str | Path | None = None) -> Profile | None:
    """Load the user profile.

    Args:
        path: Profile file to read.  Defaults to ``~/.cargo-me.toml``.

    Returns:
        The parsed ``Profile``, or ``None`` when the file is missing,
        unreadable, not valid TOML, or holds values of the wrong type.
        A broken profile never aborts scaffolding.
    """
    profile_path = Path(path) if path is not None else default_profile_path()
    if not profile_path.is_file():
        return None
    try:
        raw = profile_path.read_text(encoding="utf-8")
        data = tomllib.loads(raw)
        return Profile.model_validate(data)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError):
        return None


# ---------------------------------------------------------------------------
# Option merging
# ---------------------------------------------------------------------------


def resolve_field(
    explicit: str | None,
    profile_value: str | None,
    default: str | None = None,
) -> str | None:
    """Pick the first usable value: explicit, then profile, then *default*.

    Blank strings count as absent so a resolved value is never empty.
    """
    for candidate in (explicit, profile_value):
        if candidate is not None and candidate.strip():
            return candidate
    return default


def resolve_license(cli_license: str | None, profile: Profile | None) -> str:
    """Resolve the license identifier (CLI override > profile > ``MIT``)."""
    profile_license = profile.license if profile else None
    return resolve_field(cli_license, profile_license, DEFAULT_LICENSE)


class ResolvedConfig(BaseModel):
    """Fully merged settings for a single scaffolding invocation."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1, description="Crate name passed to cargo new")
    is_binary: bool = Field(default=False, description="Binary crate instead of library")
    license: str = Field(default=DEFAULT_LICENSE, min_length=1)
    author_name: str | None = None
    author_email: str | None = None
    vcs_handle: str | None = Field(default=None, description="GitHub user or organisation")
    organization: str = Field(default=DEFAULT_ORGANIZATION, min_length=1)


def resolve_config(
    project_name: str,
    is_binary: bool = False,
    cli_license: str | None = None,
    profile: Profile | None = None,
) -> ResolvedConfig:
    """Merge CLI options with the profile into a ``ResolvedConfig``.

    Every optional field goes through :func:`resolve_field`, so all of them
    share the same precedence.  Only the license has a CLI override today.
    """
    p = profile or Profile()
    return ResolvedConfig(
        project_name=project_name,
        is_binary=is_binary,
        license=resolve_license(cli_license, profile),
        author_name=resolve_field(None, p.name),
        author_email=resolve_field(None, p.email),
        vcs_handle=resolve_field(None, p.vcs_handle),
        organization=resolve_field(None, p.organization, DEFAULT_ORGANIZATION),
    )
