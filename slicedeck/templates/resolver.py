#!/usr/bin/env python3
"""
Template resolution.

Works out from document metadata which template fragments a run needs and
loads them all at once:

- ``layout`` always
- ``slides``: the document's own template if metadata names one, otherwise
  the bundled default (never both)
- ``agenda`` when metadata asks for an agenda
- ``author`` when metadata carries an author
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Dict, Optional

from ..assets.loader import TEMPLATES, AssetLoader
from ..document.metadata import Metadata
from ..errors import TemplateLoadError
from ..utils import run_concurrently

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateSet:
    layout: str
    slides: str
    agenda: Optional[str] = None
    author: Optional[str] = None


def required_templates(metadata: Metadata) -> list[str]:
    """Names of the template slots *metadata* calls for."""
    names = ["layout", "slides"]
    if metadata.agenda:
        names.append("agenda")
    if metadata.author:
        names.append("author")
    return names


def resolve_templates(metadata: Metadata, loader: AssetLoader,
                      base_dir: Optional[Path] = None, max_workers: int = 4) -> TemplateSet:
    """Load every template *metadata* requires.

    Args:
        metadata: Parsed document metadata
        loader: Asset loader to read templates with
        base_dir: Directory an external ``template`` path is relative to
        max_workers: Thread pool size for the concurrent loads

    Returns:
        TemplateSet holding exactly the required slots

    Raises:
        TemplateLoadError: If any required template cannot be read
    """
    tasks: Dict[str, Callable[[], str]] = {}
    for name in required_templates(metadata):
        if name == "slides" and metadata.template:
            LOGGER.info(f"Using slide template {metadata.template}")
            tasks[name] = partial(loader.load_external, metadata.template, base_dir, TemplateLoadError)
        else:
            tasks[name] = partial(loader.load_bundled, name, TEMPLATES)

    loaded = run_concurrently(tasks, max_workers=max_workers)
    LOGGER.debug(f"Loaded templates: {', '.join(sorted(loaded))}")
    return TemplateSet(**loaded)
