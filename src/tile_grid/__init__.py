"""Compose image grids and square thumbnails."""

from grid_composition import (
    EmptyInputError,
    GeometryError,
    GridOptions,
    GridResult,
    compose_grid,
    resize_square,
)
from image_io import BufferInput, InvalidInputError, PathInput, TileGridError, as_input

__version__ = "0.1.0"

__all__ = [
    "BufferInput",
    "EmptyInputError",
    "GeometryError",
    "GridOptions",
    "GridResult",
    "InvalidInputError",
    "PathInput",
    "TileGridError",
    "as_input",
    "compose_grid",
    "resize_square",
    "__version__",
]
