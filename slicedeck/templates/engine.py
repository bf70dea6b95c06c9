"""Jinja2 rendering of template fragments."""
from __future__ import annotations

from typing import Any, Mapping

from jinja2 import BaseLoader, Environment, TemplateError

from ..errors import RenderError

# Slides and resources are already markup; nothing is escaped on the way in.
_env = Environment(
    loader=BaseLoader(),
    autoescape=False,
    keep_trailing_newline=True,
)


def render_template(template: str, context: Mapping[str, Any], name: str = "template") -> str:
    """Render *template* text with *context*.

    Raises:
        RenderError: If the template does not compile or fails while rendering
    """
    try:
        return _env.from_string(template).render(dict(context))
    except TemplateError as exc:
        raise RenderError(f"Failed to render {name} template: {exc}") from exc
