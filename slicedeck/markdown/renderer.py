"""Thin wrapper around mistune so the rest of the package sees one pure function."""
from __future__ import annotations

import mistune

from ..errors import RenderError

_markdown = mistune.create_markdown(
    escape=False,
    plugins=["strikethrough", "table", "url"],
)


def render_markdown(text: str) -> str:
    """Render one section of markdown to HTML."""
    try:
        return _markdown(text)
    except (ValueError, RecursionError) as exc:  # deep nesting exhausts the parser
        raise RenderError(f"Failed to render markdown: {exc}") from exc
