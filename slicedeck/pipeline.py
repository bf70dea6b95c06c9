"""
Main orchestration pipeline for slicedeck.

Pipeline stages:
1. Read and slice the document, parse its metadata header
2. Load the templates the metadata calls for (and an external stylesheet)
3. Render content sections and synthesize agenda/author slides
4. Compose everything into one HTML document and write it

Stages 1-3 run concurrently with loading the bundled resources; composition
waits for both. Any failure aborts the run before anything is written.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import partial
from pathlib import Path
from typing import List, Optional

from .assets.loader import AssetLoader
from .assets.resources import ResourceSet, load_external_style, load_resources
from .config import Settings
from .document.metadata import Metadata, extract_metadata
from .document.slicer import slice_document
from .errors import MissingInputError
from .exporters.base import RenderedDocument, save
from .exporters.slideshow import SlideshowExporter
from .slides.builder import build_slides
from .templates.resolver import TemplateSet, resolve_templates
from .utils import run_concurrently

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedDocument:
    """Everything derived from the input document itself."""

    sections: List[str]
    metadata: Metadata
    templates: TemplateSet
    slides: List[str]
    external_style: Optional[str] = None


class Slicedeck:
    """Converts one markdown document into one HTML slideshow."""

    def __init__(
        self,
        source: Optional[Path],
        settings: Optional[Settings] = None,
        loader: Optional[AssetLoader] = None,
        output_path: Optional[Path] = None,
        input_encoding: str = "utf-8",
    ):
        """
        Initialize pipeline.

        Args:
            source: Path of the document to convert
            settings: Runtime settings; read from the environment when omitted
            loader: Asset loader; built from settings when omitted
            output_path: Explicit output location, overriding metadata
            input_encoding: Encoding the document is read with
        """
        if not source:
            raise MissingInputError("Please specify a file to parse")

        self.source = Path(source)
        self.settings = settings or Settings.from_env()
        self.loader = loader or AssetLoader(
            override_dir=self.settings.asset_dir,
            http_timeout=self.settings.http_timeout,
        )
        self.output_path = output_path
        self.input_encoding = input_encoding

    @property
    def base_dir(self) -> Path:
        """Directory external identifiers in metadata are relative to."""
        return self.source.parent

    def parse_document(self) -> ParsedDocument:
        """Read, slice and parse the document, load its templates and render its slides."""
        text = self.loader.load_document(self.source, self.input_encoding)
        sections = slice_document(text)
        logger.info(f"Read {self.source}: {len(sections)} sections")

        metadata = extract_metadata(sections[0])

        loaded = run_concurrently({
            "templates": partial(resolve_templates, metadata, self.loader, self.base_dir,
                                 self.settings.max_workers),
            "external_style": partial(load_external_style, metadata, self.loader, self.base_dir),
        }, max_workers=2)

        templates = loaded["templates"]
        slides = build_slides(sections, metadata, templates)
        return ParsedDocument(sections, metadata, templates, slides, loaded["external_style"])

    def load_assets(self) -> ResourceSet:
        """Load the bundled stylesheet and navigation script."""
        return load_resources(self.loader, self.settings.max_workers)

    def render(self) -> RenderedDocument:
        """Run every stage and return the composed document without writing it."""
        results = run_concurrently({
            "document": self.parse_document,
            "resources": self.load_assets,
        }, max_workers=2)

        parsed: ParsedDocument = results["document"]
        resources = replace(results["resources"], external_style=parsed.external_style)

        exporter = SlideshowExporter(
            parsed.slides, parsed.metadata, parsed.templates, resources,
            source=self.source, output_path=self.output_path,
        )
        return exporter.compose()

    def run(self) -> Path:
        """Convert the document and write the slideshow.

        Returns:
            Path of the written HTML file
        """
        document = self.render()
        save(document)
        return document.output_path
