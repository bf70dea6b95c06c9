"""
Tests for composing the final document.
"""

from pathlib import Path

import pytest

from slicedeck.assets.resources import ResourceSet
from slicedeck.document.metadata import extract_metadata
from slicedeck.errors import OutputWriteError, RenderError
from slicedeck.exporters import SlideshowExporter, default_output_path, save
from slicedeck.templates.resolver import TemplateSet

TEMPLATES = TemplateSet(
    layout=("[{{ title }}|{{ encoding }}|{{ style }}|{{ externalStyle or 'none' }}]"
            "{{ slideshow }}"),
    slides="{{ slides|join(',') }};controls={{ controls }};{{ navigation }}",
)
RESOURCES = ResourceSet(style="CSS", navigation="NAV")


def make_exporter(header="", slides=("a", "b"), resources=RESOURCES, templates=TEMPLATES,
                  source=Path("talk.md"), output_path=None):
    return SlideshowExporter(list(slides), extract_metadata(header), templates, resources,
                             source=source, output_path=output_path)


def test_render_nests_slides_in_layout():
    html = make_exporter().render()
    assert html == "[Untitled|utf-8|CSS|none]a,b;controls=True;NAV"


def test_title_encoding_and_external_style():
    resources = ResourceSet(style="CSS", navigation="NAV", external_style="EXT")
    html = make_exporter("title: Talk\nencoding: latin-1", resources=resources).render()
    assert html.startswith("[Talk|latin-1|CSS|EXT]")


@pytest.mark.parametrize("header, expected", [
    ("title: x", "controls=True"),
    ("controls: true", "controls=True"),
    ("controls: false", "controls=False"),
])
def test_controls(header, expected):
    assert expected in make_exporter(header).render()


def test_default_output_path():
    assert default_output_path(Path("talk.md")) == Path("talk-slicedeck.html")
    assert default_output_path(Path("decks/intro.markdown")) == Path("intro-slicedeck.html")
    assert make_exporter(source=Path("docs/talk.md")).resolve_output_path() == Path("talk-slicedeck.html")


def test_output_from_metadata_and_explicit_override():
    assert make_exporter("output: out/deck.html").resolve_output_path() == Path("out/deck.html")
    exporter = make_exporter("output: out/deck.html", output_path=Path("cli.html"))
    assert exporter.resolve_output_path() == Path("cli.html")


def test_compose_pairs_text_and_location():
    document = make_exporter("encoding: latin-1", slides=("café",)).compose()
    assert document.output_path == Path("talk-slicedeck.html")
    assert document.encoding == "latin-1"
    assert document.text.endswith("NAV")
    assert document.data == document.text.encode("latin-1")


def test_export_writes_into_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    docs = tmp_path / "docs"
    docs.mkdir()

    path = make_exporter(source=docs / "talk.md").export()

    assert path == Path("talk-slicedeck.html")
    assert (tmp_path / "talk-slicedeck.html").read_text(encoding="utf-8").startswith("[Untitled")
    assert list(docs.iterdir()) == []


@pytest.mark.parametrize("header", [
    "encoding: ascii",
    "encoding: nonsense-charset",
])
def test_unencodable_output_raises_before_writing(header, tmp_path):
    target = tmp_path / "deck.html"
    exporter = make_exporter(header, slides=("Café",), output_path=target)
    with pytest.raises(RenderError):
        exporter.export()
    assert not target.exists()


def test_broken_template_raises_render_error(tmp_path):
    templates = TemplateSet(layout="{% if %}", slides="x")
    exporter = make_exporter(templates=templates, output_path=tmp_path / "deck.html")
    with pytest.raises(RenderError):
        exporter.export()
    assert list(tmp_path.iterdir()) == []


def test_save_failure_is_wrapped(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    document = make_exporter(output_path=blocker / "deck.html").compose()
    with pytest.raises(OutputWriteError):
        save(document)
