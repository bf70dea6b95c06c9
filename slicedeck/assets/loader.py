#!/usr/bin/env python3
"""
Asset loading for slicedeck.

Resolves template and resource names to their text. Bundled defaults ship
inside the package; a user override directory can shadow any of them by
file name. External identifiers named in document metadata are either
``http(s)://`` URLs or file paths relative to the input document.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Type

import requests

from ..errors import ResourceLoadError, TemplateLoadError

LOGGER = logging.getLogger(__name__)

BUNDLED_DIR = Path(__file__).parent / "bundled"

TEMPLATES = "templates"
RESOURCES = "resources"

# Logical name -> bundled file name
TEMPLATE_FILES = {
    "layout": "layout.html",
    "slides": "default.html",
    "agenda": "agenda.html",
    "author": "author.html",
}

RESOURCE_FILES = {
    "style": "default.css",
    "navigation": "navigation.js",
}

_KINDS = {
    TEMPLATES: (TEMPLATE_FILES, TemplateLoadError),
    RESOURCES: (RESOURCE_FILES, ResourceLoadError),
}


def is_url(identifier: str) -> bool:
    return identifier.startswith(("http://", "https://"))


class AssetLoader:
    """Loads bundled, overridden and external assets as text."""

    def __init__(self, override_dir: Optional[Path] = None, http_timeout: float = 10.0,
                 bundled_dir: Path = BUNDLED_DIR):
        """
        Args:
            override_dir: Directory whose files shadow bundled assets of the same name
            http_timeout: Seconds to wait for a URL before giving up
            bundled_dir: Root holding the ``templates`` and ``resources`` folders
        """
        self.override_dir = Path(override_dir) if override_dir else None
        self.http_timeout = http_timeout
        self.bundled_dir = bundled_dir

    def locate(self, name: str, kind: str) -> Path:
        """Return the file that backs the logical asset *name* of *kind*."""
        try:
            files, error = _KINDS[kind]
        except KeyError:
            raise ValueError(f"Unknown asset kind: {kind}") from None

        if name not in files:
            raise error(f"Unknown {kind[:-1]} '{name}'")

        filename = files[name]
        if self.override_dir:
            candidate = self.override_dir / filename
            if candidate.is_file():
                LOGGER.debug(f"Using override {candidate} for {kind[:-1]} '{name}'")
                return candidate

        return self.bundled_dir / kind / filename

    def load_bundled(self, name: str, kind: str) -> str:
        """Load a template or resource by logical name."""
        path = self.locate(name, kind)
        _, error = _KINDS[kind]
        return self._read_file(path, error)

    def load_external(self, identifier: str, base_dir: Optional[Path] = None,
                      error: Type[ResourceLoadError] = ResourceLoadError) -> str:
        """Load an asset named by document metadata.

        Args:
            identifier: URL or file path
            base_dir: Directory relative paths are resolved against
            error: Exception type raised on failure

        Returns:
            The asset text
        """
        if is_url(identifier):
            return self._fetch(identifier, error)

        path = Path(identifier).expanduser()
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        return self._read_file(path, error)

    def load_document(self, path: Path, encoding: str = "utf-8") -> str:
        """Read the input document."""
        return self._read_file(Path(path), ResourceLoadError, encoding)

    def _read_file(self, path: Path, error: Type[ResourceLoadError], encoding: str = "utf-8") -> str:
        LOGGER.debug(f"Reading {path}")
        try:
            return path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise error(f"Cannot read {path}: {exc}") from exc

    def _fetch(self, url: str, error: Type[ResourceLoadError]) -> str:
        LOGGER.info(f"Downloading {url}")
        try:
            response = requests.get(url, timeout=self.http_timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise error(f"Cannot fetch {url}: {exc}") from exc
        return response.text
