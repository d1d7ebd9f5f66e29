"""Jinja2 template rendering for crate artifacts.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``cargo_me/scaffolder/templates/`` directory and renders them with the
resolved configuration as context.  Only the parameterised artifacts
(manifest patch, readme, license, changelog) live here; fixed content is
kept as constants in :mod:`cargo_me.scaffolder.renderers`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the ``.j2`` templates shipped with the scaffolder.

    Undefined variables raise instead of rendering as empty text, so a
    template typo fails loudly in tests rather than producing a silently
    broken file.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["toml_string"] = _toml_string_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"README.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _toml_string_filter(value: str) -> str:
    """Escape a value for use inside a double-quoted TOML basic string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')
