"""Exceptions raised by the slicedeck pipeline.

Every failure is fatal: nothing below the CLI catches these.
"""


class SlicedeckError(Exception):
    """Base class for all slicedeck errors."""


class MissingInputError(SlicedeckError):
    """No document path was supplied."""


class MetadataParseError(SlicedeckError):
    """The metadata section is not a well-formed YAML mapping."""


class ResourceLoadError(SlicedeckError):
    """A stylesheet, script or other resource could not be read."""


class TemplateLoadError(ResourceLoadError):
    """A template fragment could not be read."""


class RenderError(SlicedeckError):
    """A template or markdown section failed to render."""


class OutputWriteError(SlicedeckError):
    """The finished slideshow could not be written."""


class ConfigurationError(SlicedeckError):
    """An environment setting holds an invalid value."""
