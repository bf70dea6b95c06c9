#!/usr/bin/env python3
"""
Metadata header parsing.

The first section of a document is YAML. Every default the rest of the
pipeline relies on is resolved here, once, into a frozen ``Metadata``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml

from ..errors import MetadataParseError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"
DEFAULT_ENCODING = "utf-8"

KNOWN_KEYS = ("title", "author", "agenda", "controls", "style", "template", "output", "encoding")


@dataclass(frozen=True)
class Metadata:
    """Fully-defaulted document metadata."""

    title: str = DEFAULT_TITLE
    encoding: str = DEFAULT_ENCODING
    controls: bool = True
    agenda: bool = False
    author: Any = None
    style: Optional[str] = None
    template: Optional[str] = None
    output: Optional[Path] = None
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Metadata":
        """Apply defaults to a parsed header mapping."""
        # absent means on; a present value is taken for its truthiness
        controls = bool(raw["controls"]) if "controls" in raw else True
        output = raw.get("output")

        return cls(
            title=str(raw.get("title") or DEFAULT_TITLE),
            encoding=str(raw.get("encoding") or DEFAULT_ENCODING),
            controls=controls,
            agenda=bool(raw.get("agenda")),
            author=raw.get("author") or None,
            style=_identifier(raw.get("style")),
            template=_identifier(raw.get("template")),
            output=Path(str(output)) if output else None,
            extra=MappingProxyType({k: v for k, v in raw.items() if k not in KNOWN_KEYS}),
        )


def _identifier(value: Any) -> Optional[str]:
    return str(value) if value else None


def extract_metadata(section: str) -> Metadata:
    """Parse the metadata section of a document.

    Args:
        section: The trimmed first section of the document

    Returns:
        Metadata with all defaults applied

    Raises:
        MetadataParseError: If the section is not a YAML mapping
    """
    try:
        raw = yaml.safe_load(section)
    except yaml.YAMLError as exc:
        raise MetadataParseError(f"Metadata section is not valid YAML: {exc}") from exc

    if raw is None:
        logger.debug("Empty metadata section, using defaults")
        raw = {}

    if not isinstance(raw, dict):
        raise MetadataParseError(
            f"Metadata section must be a mapping, got {type(raw).__name__}"
        )

    metadata = Metadata.from_mapping(raw)
    if metadata.extra:
        logger.debug("Ignoring unknown metadata keys: %s", ", ".join(map(str, metadata.extra)))
    return metadata
