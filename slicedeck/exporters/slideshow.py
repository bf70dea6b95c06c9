#!/usr/bin/env python3
"""
HTML slideshow exporter.

Composes the final document in two passes: the slides template wraps the
rendered slides and the navigation script, then the layout template wraps
that with the page title, encoding and stylesheets.
"""
import logging
from pathlib import Path
from typing import List, Optional

from ..assets.resources import ResourceSet
from ..document.metadata import Metadata
from ..templates.engine import render_template
from ..templates.resolver import TemplateSet
from .base import BaseExporter

logger = logging.getLogger(__name__)


class SlideshowExporter(BaseExporter):
    """Export rendered slides to a self-contained HTML slideshow."""

    def __init__(self, slides: List[str], metadata: Metadata, templates: TemplateSet,
                 resources: ResourceSet, source: Path, output_path: Optional[Path] = None):
        """
        Initialize the slideshow exporter.

        Args:
            slides: Rendered slide markup, in display order
            metadata: Parsed document metadata
            templates: Loaded layout and slides templates
            resources: Loaded stylesheet, navigation script and external stylesheet
            source: Path of the input document
            output_path: Explicit output location, overriding metadata
        """
        super().__init__(slides, metadata, source, output_path)
        self.templates = templates
        self.resources = resources

    def render(self) -> str:
        """Render the complete HTML document."""
        logger.info(f"Composing {len(self.slides)} slides into '{self.metadata.title}'")
        return render_template(self.templates.layout, self._layout_context(), name="layout")

    def render_slideshow(self) -> str:
        """Render the slide deck body."""
        return render_template(self.templates.slides, {
            "slides": self.slides,
            "controls": self.metadata.controls,
            "navigation": self.resources.navigation,
        }, name="slides")

    def _layout_context(self) -> dict:
        return {
            "slideshow": self.render_slideshow(),
            "title": self.metadata.title,
            "encoding": self.metadata.encoding,
            "style": self.resources.style,
            "externalStyle": self.resources.external_style,
        }

