"""Turning document sections into rendered slides."""

from .builder import build_slides, collect_agenda_titles

__all__ = ["build_slides", "collect_agenda_titles"]
