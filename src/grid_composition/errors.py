"""Exceptions raised while planning a grid composition."""

from __future__ import annotations

from image_io.errors import TileGridError


class EmptyInputError(TileGridError, ValueError):
    """No images were supplied to a grid composition."""


class GeometryError(TileGridError, ValueError):
    """The canvas cannot fit the grid with the requested padding."""
