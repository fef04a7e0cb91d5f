"""Package for grid composition components."""

from .composer import GridOptions, GridResult, compose_grid
from .errors import EmptyInputError, GeometryError
from .geometry import GridGeometry, grid_size_for, plan_grid, tile_size_for
from .resizer import resize_square

__all__ = [
    "EmptyInputError",
    "GeometryError",
    "GridGeometry",
    "GridOptions",
    "GridResult",
    "compose_grid",
    "grid_size_for",
    "plan_grid",
    "resize_square",
    "tile_size_for",
]
