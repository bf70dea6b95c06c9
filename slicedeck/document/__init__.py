"""Splitting the raw document and reading its metadata header."""

from .metadata import Metadata, extract_metadata
from .slicer import slice_document

__all__ = ["Metadata", "extract_metadata", "slice_document"]
