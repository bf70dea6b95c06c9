"""
Tests for slide building and agenda/author synthesis.
"""

import pytest

from slicedeck.document.metadata import extract_metadata
from slicedeck.slides.builder import author_context, build_slides, collect_agenda_titles
from slicedeck.templates.resolver import TemplateSet

TEMPLATES = TemplateSet(
    layout="{{ slideshow }}",
    slides="{{ slides|join('|') }}",
    agenda="AGENDA:{{ titles|join(',') }}",
    author="AUTHOR:{{ name or author }}",
)


def test_consecutive_duplicate_titles_collapse():
    sections = ["meta: 1", "### A\nfirst", "### A\nsecond", "### B", "paragraph text"]
    assert collect_agenda_titles(sections) == ["A", "B"]


def test_non_consecutive_duplicates_repeat():
    sections = ["meta: 1", "### A", "### B", "### A"]
    assert collect_agenda_titles(sections) == ["A", "B", "A"]


def test_only_level_three_or_deeper_headings_count():
    sections = ["### Meta heading", "# One", "## Two", "#### Four", "###NoSpace", "text\n### Late"]
    assert collect_agenda_titles(sections) == ["Four"]


def test_first_line_split_on_carriage_returns():
    assert collect_agenda_titles(["m: 1", "### Title\r\nbody"]) == ["Title"]
    assert collect_agenda_titles(["m: 1", "### Title\rbody"]) == ["Title"]


def test_plain_sections_give_one_slide_each():
    metadata = extract_metadata("title: x")
    slides = build_slides(["title: x", "# One", "# Two", "three"], metadata, TEMPLATES)
    assert len(slides) == 3
    assert "<h1>One</h1>" in slides[0]
    assert "<p>three</p>" in slides[2]


def test_metadata_only_document_has_no_slides():
    metadata = extract_metadata("title: x")
    assert build_slides(["title: x"], metadata, TEMPLATES) == []


def test_author_slide_is_last():
    metadata = extract_metadata("author: Jo")
    slides = build_slides(["author: Jo", "# One", "# Two"], metadata, TEMPLATES)
    assert len(slides) == 3
    assert slides[-1] == "AUTHOR:Jo"


def test_agenda_slide_is_second():
    metadata = extract_metadata("agenda: true")
    slides = build_slides(["agenda: true", "# One", "### A", "### B"], metadata, TEMPLATES)
    assert len(slides) == 4
    assert slides[1] == "AGENDA:A,B"


@pytest.mark.parametrize("content", [
    ["# One"],
    ["# One", "### A"],
    ["# One", "### A", "### B", "### C"],
])
def test_agenda_and_author_positions(content):
    header = "agenda: true\nauthor: Jo"
    metadata = extract_metadata(header)
    slides = build_slides([header] + content, metadata, TEMPLATES)

    assert len(slides) == len(content) + 2
    assert slides[1].startswith("AGENDA:")
    assert slides[-1] == "AUTHOR:Jo"


def test_author_mapping_context():
    author = {"name": "Jo", "email": "jo@example.com"}
    context = author_context(author)
    assert context["name"] == "Jo"
    assert context["email"] == "jo@example.com"
    assert context["author"] is author

    metadata = extract_metadata("author:\n  name: Jo\n")
    slides = build_slides(["author:\n  name: Jo", "# One"], metadata, TEMPLATES)
    assert slides[-1] == "AUTHOR:Jo"
