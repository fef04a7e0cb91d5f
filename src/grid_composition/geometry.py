"""Square grid geometry: grid side, tile side and tile positions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import EmptyInputError, GeometryError


def grid_size_for(count: int) -> int:
    """Smallest side length whose square holds ``count`` tiles (ceil of sqrt)."""

    if count <= 0:
        raise EmptyInputError("No images provided.")
    root = math.isqrt(count)
    return root if root * root == count else root + 1


def tile_size_for(output: int, padding: int, grid_size: int) -> int:
    return (output - padding * (grid_size + 1)) // grid_size


@dataclass(frozen=True)
class GridGeometry:
    count: int
    grid_size: int
    tile_size: int
    padding: int

    def position(self, index: int) -> Tuple[int, int]:
        """Top-left canvas coordinate (left, top) of the tile at ``index``."""

        row, col = divmod(index, self.grid_size)
        step = self.tile_size + self.padding
        return self.padding + col * step, self.padding + row * step

    def positions(self) -> Iterator[Tuple[int, int]]:
        for index in range(self.count):
            yield self.position(index)


def plan_grid(count: int, output: int, padding: int = 0) -> GridGeometry:
    """Compute the layout for ``count`` tiles on an ``output`` px square canvas."""

    grid_size = grid_size_for(count)
    tile_size = tile_size_for(output, padding, grid_size)
    if tile_size <= 0:
        raise GeometryError("Output size is too small for the number of images and padding.")
    return GridGeometry(count=count, grid_size=grid_size, tile_size=tile_size, padding=padding)
