"""Template fragments: which ones a document needs, and how they render."""

from .engine import render_template
from .resolver import TemplateSet, resolve_templates

__all__ = ["TemplateSet", "render_template", "resolve_templates"]
