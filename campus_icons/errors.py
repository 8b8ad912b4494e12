"""Exceptions raised by the icon pipeline."""

from __future__ import annotations


class CampusIconsError(Exception):
    """Base class for pipeline errors."""


class NoSlugsFoundError(CampusIconsError):
    """The listing page produced no campus slugs; nothing can be processed."""


class GraphicError(CampusIconsError):
    """A single graphic could not be processed; the run continues."""


class InvalidGraphicError(GraphicError):
    """Markup does not contain an <svg> element."""


class DegenerateGraphicError(GraphicError):
    """The staged graphic rendered with zero width or height."""


class InvalidRasterError(GraphicError):
    """Captured screenshot is not a transparent image of the canvas size."""
