"""Bundled templates, stylesheets and scripts, and the loader that reads them."""

from .loader import RESOURCES, TEMPLATES, AssetLoader
from .resources import ResourceSet, load_resources

__all__ = ["AssetLoader", "ResourceSet", "load_resources", "TEMPLATES", "RESOURCES"]
