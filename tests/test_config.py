"""Unit tests for profile loading and option merging (cargo_me.config).

Tests cover:
- Profile model aliases and unknown keys
- load_profile: missing, valid, partial, malformed, wrong types, default path
- resolve_field precedence and blank handling
- resolve_license precedence
- resolve_config field-by-field resolution and immutability
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from cargo_me.config import (
    DEFAULT_LICENSE,
    DEFAULT_ORGANIZATION,
    PROFILE_FILENAME,
    Profile,
    ResolvedConfig,
    default_profile_path,
    load_profile,
    resolve_config,
    resolve_field,
    resolve_license,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


class TestProfile:
    def test_github_alias_maps_to_vcs_handle(self):
        profile = Profile.model_validate({"github": "alice"})
        assert profile.vcs_handle == "alice"

    def test_field_name_also_accepted(self):
        assert Profile(vcs_handle="bob").vcs_handle == "bob"

    def test_all_fields_optional(self):
        profile = Profile()
        assert profile.name is None
        assert profile.email is None
        assert profile.vcs_handle is None
        assert profile.license is None
        assert profile.organization is None

    def test_unknown_keys_ignored(self):
        profile = Profile.model_validate({"name": "Alice", "editor": "vim"})
        assert profile.name == "Alice"
        assert not hasattr(profile, "editor")

    def test_frozen(self):
        profile = Profile(name="Alice")
        with pytest.raises(ValidationError):
            profile.name = "Mallory"


# ---------------------------------------------------------------------------
# load_profile
# ---------------------------------------------------------------------------


class TestLoadProfile:
    def test_missing_file_returns_none(self, tmp_path: Path):
        assert load_profile(tmp_path / "nope.toml") is None

    def test_valid_file(self, profile_file: Path, alice_profile: Profile):
        assert load_profile(profile_file) == alice_profile

    def test_partial_file(self, tmp_path: Path):
        path = tmp_path / PROFILE_FILENAME
        path.write_text('github = "alice"\n', encoding="utf-8")
        profile = load_profile(path)
        assert profile is not None
        assert profile.vcs_handle == "alice"
        assert profile.license is None

    def test_empty_file_is_empty_profile(self, tmp_path: Path):
        path = tmp_path / PROFILE_FILENAME
        path.write_text("", encoding="utf-8")
        assert load_profile(path) == Profile()

    def test_malformed_toml_returns_none(self, tmp_path: Path):
        path = tmp_path / PROFILE_FILENAME
        path.write_text('name = "unterminated\n', encoding="utf-8")
        assert load_profile(path) is None

    def test_wrong_value_type_returns_none(self, tmp_path: Path):
        path = tmp_path / PROFILE_FILENAME
        path.write_text("license = 42\n", encoding="utf-8")
        assert load_profile(path) is None

    def test_invalid_utf8_returns_none(self, tmp_path: Path):
        path = tmp_path / PROFILE_FILENAME
        path.write_bytes(b'name = "\xff\xfe"\n')
        assert load_profile(path) is None

    def test_directory_instead_of_file_returns_none(self, tmp_path: Path):
        path = tmp_path / PROFILE_FILENAME
        path.mkdir()
        assert load_profile(path) is None

    def test_default_path_is_in_home(self, tmp_path: Path):
        with patch("cargo_me.config.Path.home", return_value=tmp_path):
            assert default_profile_path() == tmp_path / ".cargo-me.toml"

    def test_default_path_used_when_none(self, tmp_path: Path, profile_file: Path):
        with patch("cargo_me.config.Path.home", return_value=profile_file.parent):
            profile = load_profile()
        assert profile is not None
        assert profile.vcs_handle == "alice"


# ---------------------------------------------------------------------------
# resolve_field / resolve_license
# ---------------------------------------------------------------------------


class TestResolveField:
    def test_explicit_wins(self):
        assert resolve_field("cli", "profile", "default") == "cli"

    def test_profile_beats_default(self):
        assert resolve_field(None, "profile", "default") == "profile"

    def test_default_last(self):
        assert resolve_field(None, None, "default") == "default"

    def test_no_default_gives_none(self):
        assert resolve_field(None, None) is None

    def test_blank_explicit_treated_as_absent(self):
        assert resolve_field("  ", "profile", "default") == "profile"

    def test_blank_profile_treated_as_absent(self):
        assert resolve_field(None, "", "default") == "default"


class TestResolveLicense:
    def test_no_profile_defaults_to_mit(self):
        assert resolve_license(None, None) == "MIT"
        assert DEFAULT_LICENSE == "MIT"

    def test_profile_license(self):
        assert resolve_license(None, Profile(license="Apache-2.0")) == "Apache-2.0"

    def test_cli_override_beats_profile(self):
        assert resolve_license("GPL-3.0", Profile(license="Apache-2.0")) == "GPL-3.0"

    def test_profile_without_license(self):
        assert resolve_license(None, Profile(name="Alice")) == "MIT"

    @pytest.mark.parametrize(
        ("cli", "profile_license", "expected"),
        [
            (None, None, "MIT"),
            (None, "BSD-3-Clause", "BSD-3-Clause"),
            ("MPL-2.0", None, "MPL-2.0"),
            ("MPL-2.0", "BSD-3-Clause", "MPL-2.0"),
            ("", "BSD-3-Clause", "BSD-3-Clause"),
        ],
    )
    def test_precedence_table(self, cli, profile_license, expected):
        result = resolve_license(cli, Profile(license=profile_license))
        assert result == expected
        assert result


# ---------------------------------------------------------------------------
# resolve_config
# ---------------------------------------------------------------------------


class TestResolveConfig:
    def test_without_profile(self, bare_config: ResolvedConfig):
        assert bare_config.project_name == "foo"
        assert bare_config.is_binary is False
        assert bare_config.license == "MIT"
        assert bare_config.author_name is None
        assert bare_config.author_email is None
        assert bare_config.vcs_handle is None
        assert bare_config.organization == DEFAULT_ORGANIZATION

    def test_with_profile(self, alice_config: ResolvedConfig):
        assert alice_config.is_binary is True
        assert alice_config.license == "Apache-2.0"
        assert alice_config.author_name == "Alice Example"
        assert alice_config.author_email == "alice@example.com"
        assert alice_config.vcs_handle == "alice"
        assert alice_config.organization == "Example Org"

    def test_cli_license_override(self, alice_profile: Profile):
        config = resolve_config("widget", cli_license="MIT-0", profile=alice_profile)
        assert config.license == "MIT-0"

    def test_empty_project_name_rejected(self):
        with pytest.raises(ValidationError):
            resolve_config("")

    def test_immutable(self, bare_config: ResolvedConfig):
        with pytest.raises(ValidationError):
            bare_config.license = "GPL-3.0"

    def test_blank_organization_falls_back(self):
        config = resolve_config("foo", profile=Profile(organization="   "))
        assert config.organization == DEFAULT_ORGANIZATION
