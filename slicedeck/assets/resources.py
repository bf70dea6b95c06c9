"""Stylesheet and script resources merged into the final document."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..document.metadata import Metadata
from ..utils import run_concurrently
from .loader import RESOURCE_FILES, RESOURCES, AssetLoader

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceSet:
    style: str
    navigation: str
    external_style: Optional[str] = None


def load_resources(loader: AssetLoader, max_workers: int = 4) -> ResourceSet:
    """Load every bundled resource concurrently."""
    loaded = run_concurrently(
        {name: (lambda name=name: loader.load_bundled(name, RESOURCES)) for name in RESOURCE_FILES},
        max_workers=max_workers,
    )
    LOGGER.debug(f"Loaded resources: {', '.join(sorted(loaded))}")
    return ResourceSet(**loaded)


def load_external_style(metadata: Metadata, loader: AssetLoader,
                        base_dir: Optional[Path] = None) -> Optional[str]:
    """Load the stylesheet named by ``metadata.style``, if any."""
    if not metadata.style:
        return None
    LOGGER.info(f"Loading external stylesheet {metadata.style}")
    return loader.load_external(metadata.style, base_dir)
