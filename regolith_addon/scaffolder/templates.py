"""Jinja2 template rendering for the text stubs of a generated add-on.

Provides the TemplateRenderer class, which loads Jinja2 templates from the
``regolith_addon/scaffolder/templates/`` directory.  Templates are stored
without a trailing newline and rendered with ``keep_trailing_newline`` so the
output matches the template byte for byte.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .documents import to_json


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders the ``.j2`` stub templates shipped with the package."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["to_json"] = to_json

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"gitignore.j2"``).
            context: Variables available inside the template.

        Returns:
            The rendered template content.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))
