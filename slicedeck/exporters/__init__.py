"""Compose rendered slides into the final presentation file."""

from .base import OUTPUT_SUFFIX, BaseExporter, RenderedDocument, default_output_path, save
from .slideshow import SlideshowExporter

__all__ = [
    'BaseExporter',
    'RenderedDocument',
    'SlideshowExporter',
    'OUTPUT_SUFFIX',
    'default_output_path',
    'save',
]
