"""Shared fixtures for slicedeck tests."""

from pathlib import Path

import pytest

from slicedeck.assets.loader import AssetLoader
from slicedeck.config import Settings


@pytest.fixture
def settings():
    return Settings(max_workers=2)


@pytest.fixture
def loader():
    return AssetLoader()


@pytest.fixture
def write_doc(tmp_path):
    """Write a document under tmp_path and return its path."""

    def _write(text: str, name: str = "talk.md") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


SIMPLE_DOC = """\
title: Basic Example

--

# slicedeck
## A quick way to make slides

--

### Why?

* No build step
"""


@pytest.fixture
def simple_doc():
    return SIMPLE_DOC
