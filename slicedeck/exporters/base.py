#!/usr/bin/env python3
"""
Base class for presentation exporters.

An exporter turns the rendered slides into one document and writes it out.
Subclasses implement render(); export() only writes once render() returned.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import logging

from ..document.metadata import Metadata
from ..errors import OutputWriteError, RenderError

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "-slicedeck.html"


@dataclass(frozen=True)
class RenderedDocument:
    """Final output text, its encoded bytes and where they go."""

    text: str
    data: bytes
    output_path: Path
    encoding: str


def default_output_path(source: Path) -> Path:
    """``docs/talk.md`` -> ``talk-slicedeck.html``, in the working directory."""
    source = Path(source)
    return Path(source.stem + OUTPUT_SUFFIX)


class BaseExporter(ABC):
    """Abstract base class for presentation exporters."""

    def __init__(self, slides: List[str], metadata: Metadata, source: Path,
                 output_path: Optional[Path] = None):
        """
        Initialize the exporter.

        Args:
            slides: Rendered slide markup, in display order
            metadata: Parsed document metadata
            source: Path of the input document
            output_path: Explicit output location, overriding metadata
        """
        self.slides = slides
        self.metadata = metadata
        self.source = Path(source)
        self.output_path = output_path

    def resolve_output_path(self) -> Path:
        """Explicit path first, then ``output`` metadata, then the default name."""
        if self.output_path:
            return Path(self.output_path)
        if self.metadata.output:
            return self.metadata.output
        return default_output_path(self.source)

    @abstractmethod
    def render(self) -> str:
        """
        Render the complete output document.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement render()")

    def compose(self) -> RenderedDocument:
        """Render the document and encode it for its output location.

        Raises:
            RenderError: If the output encoding is unknown or cannot represent the text
        """
        text = self.render()
        encoding = self.metadata.encoding
        try:
            data = text.encode(encoding)
        except LookupError as exc:
            raise RenderError(f"Unknown output encoding '{encoding}'") from exc
        except UnicodeEncodeError as exc:
            raise RenderError(f"Slideshow cannot be encoded as {encoding}: {exc}") from exc

        return RenderedDocument(
            text=text,
            data=data,
            output_path=self.resolve_output_path(),
            encoding=encoding,
        )

    def export(self) -> Path:
        """
        Render the presentation and write it to disk.

        Returns:
            Path to the generated file
        """
        document = self.compose()
        save(document)
        return document.output_path


def save(document: RenderedDocument) -> None:
    """Write an already-encoded document to its output location."""
    path = document.output_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(document.data)
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {path}: {exc}") from exc
    logger.info(f"Slideshow saved to: {path}")
    logger.info(f"   Open in browser to view: file://{path.absolute()}")
