"""Exceptions shared by the image input and codec helpers."""

from __future__ import annotations


class TileGridError(Exception):
    pass


class InvalidInputError(TileGridError, TypeError):
    """An input is neither a file path nor a byte buffer."""
