#!/usr/bin/env python3
"""Build the ordered list of slides from document sections.

Content sections become slides in document order. Two slides can be
synthesized from metadata: an author slide, appended last, and an agenda
slide listing the level-3+ headings that open content sections, inserted
at index 1 once everything else is in place.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Sequence

from ..document.metadata import Metadata
from ..markdown import render_markdown
from ..templates.engine import render_template
from ..templates.resolver import TemplateSet

LOGGER = logging.getLogger(__name__)

AGENDA_POSITION = 1

LINE_BREAKS = re.compile(r"[\n\r]+")
AGENDA_HEADING = re.compile(r"^(#{3,})\s+(.+)$")


def collect_agenda_titles(sections: Sequence[str]) -> List[str]:
    """Return agenda entries for the content sections of a document.

    Only sections whose first line is a heading of level 3 or deeper count.
    A title equal to the one captured just before it is skipped; a title
    that comes back later is listed again.

    Args:
        sections: All document sections; section 0 (metadata) is ignored
    """
    titles: List[str] = []
    last_title = None

    for section in sections[1:]:
        first_line = LINE_BREAKS.split(section, maxsplit=1)[0]
        match = AGENDA_HEADING.match(first_line)
        if not match:
            continue

        title = match.group(2)
        if title != last_title:
            last_title = title
            titles.append(title)

    return titles


def author_context(author: Any) -> Dict[str, Any]:
    """Template context for the author slide.

    A mapping exposes its keys directly; the raw value is always available
    as ``author``.
    """
    context: Dict[str, Any] = {}
    if isinstance(author, Mapping):
        context.update(author)
    context["author"] = author
    return context


def render_author_slide(author: Any, template: str) -> str:
    return render_template(template, author_context(author), name="author")


def render_agenda_slide(sections: Sequence[str], template: str) -> str:
    titles = collect_agenda_titles(sections)
    LOGGER.debug(f"Agenda has {len(titles)} entries")
    return render_template(template, {"titles": titles}, name="agenda")


def build_slides(sections: Sequence[str], metadata: Metadata, templates: TemplateSet) -> List[str]:
    """Render every slide of the presentation, in display order.

    Args:
        sections: All document sections, metadata first
        metadata: Parsed document metadata
        templates: Loaded templates; must hold ``agenda``/``author`` when
            metadata asks for them

    Returns:
        List of rendered slide HTML
    """
    slides = [render_markdown(section) for section in sections[1:]]

    if metadata.author:
        slides.append(render_author_slide(metadata.author, templates.author))

    # Absolute index, also when an author slide was already appended.
    if metadata.agenda:
        slides.insert(AGENDA_POSITION, render_agenda_slide(sections, templates.agenda))

    LOGGER.info(f"Built {len(slides)} slides from {max(len(sections) - 1, 0)} sections")
    return slides
