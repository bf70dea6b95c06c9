"""slicedeck: turn a single markdown document into a self-contained HTML slideshow."""

from .errors import (
    ConfigurationError,
    MetadataParseError,
    MissingInputError,
    OutputWriteError,
    RenderError,
    ResourceLoadError,
    SlicedeckError,
    TemplateLoadError,
)
from .pipeline import Slicedeck

__version__ = "0.1.0"

__all__ = [
    "Slicedeck",
    "SlicedeckError",
    "MissingInputError",
    "MetadataParseError",
    "ResourceLoadError",
    "TemplateLoadError",
    "RenderError",
    "OutputWriteError",
    "ConfigurationError",
]
