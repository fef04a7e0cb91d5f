"""Compose many images into one square grid image with Pillow."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Sequence

from image_io.codec import decode_image, encode_image, new_canvas, paste_tile, render_cover
from image_io.inputs import Input, resolve_input

from .errors import EmptyInputError
from .geometry import GridGeometry, plan_grid
from .settings import default_background, default_max_workers


@dataclass(frozen=True)
class GridOptions:
    """Canvas settings for a grid composition.

    Args:
        output: canvas width and height in pixels.
        background: color string for the canvas (``#rrggbb``, a CSS name,
            or ``transparent``).
        padding: gap in pixels between tiles and around the canvas edge.
    """

    output: int
    background: str = field(default_factory=default_background)
    padding: int = 0

    def __post_init__(self) -> None:
        if self.output <= 0:
            raise ValueError("output must be > 0")
        if self.padding < 0:
            raise ValueError("padding must be >= 0")


@dataclass(frozen=True)
class GridResult:
    buffer: bytes
    grid_size: int
    count: int


def _render_tile(item: Input, tile_size: int) -> bytes:
    return render_cover(resolve_input(item), tile_size)


def _render_tiles(items: Sequence[Input], tile_size: int, max_workers: int | None) -> List[bytes]:
    """Render every tile on a thread pool and return them in input order.

    The first failure in input order is re-raised after cancelling tasks
    that have not started yet.
    """

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="tile") as pool:
        futures: List[Future] = [pool.submit(_render_tile, item, tile_size) for item in items]
        try:
            return [future.result() for future in futures]
        except BaseException:
            for future in futures:
                future.cancel()
            raise


def _composite(tiles: Sequence[bytes], geometry: GridGeometry, options: GridOptions) -> bytes:
    canvas = new_canvas(options.output, options.background)
    for tile_bytes, position in zip(tiles, geometry.positions()):
        paste_tile(canvas, decode_image(tile_bytes), position)
    return encode_image(canvas)


def compose_grid(
    images: Sequence[Input],
    options: GridOptions,
    *,
    max_workers: int | None = None,
) -> GridResult:
    """Lay ``images`` out on a square grid and return the encoded canvas.

    Args:
        images: path or buffer inputs, placed row-major in the given order.
        options: canvas size, background and padding.
        max_workers: tile worker threads; defaults to TILEGRID_MAX_WORKERS.

    Returns:
        GridResult with PNG bytes, the grid side length and the image count.
    """

    items = list(images)
    if not items:
        raise EmptyInputError("No images provided.")

    geometry = plan_grid(len(items), options.output, options.padding)
    workers = max_workers if max_workers is not None else default_max_workers()
    tiles = _render_tiles(items, geometry.tile_size, workers)

    return GridResult(
        buffer=_composite(tiles, geometry, options),
        grid_size=geometry.grid_size,
        count=len(items),
    )
