"""File-based helpers that run the grid and resize operations and save PNGs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable

from grid_composition import GridOptions, compose_grid, plan_grid, resize_square
from image_io import PathInput


def compose_files(
    image_paths: Iterable[Path],
    *,
    output_size: int,
    out_path: Path,
    padding: int = 0,
    background: str | None = None,
    max_workers: int | None = None,
) -> Dict[str, Any]:
    """Compose the images at ``image_paths`` into a grid PNG at ``out_path``.

    Returns a summary dict with the output path, grid size, tile size and count.
    """

    inputs = [PathInput(path=Path(p), id=Path(p).stem) for p in image_paths]
    overrides = {"background": background} if background is not None else {}
    options = GridOptions(output=output_size, padding=padding, **overrides)

    print(f"[compose] {len(inputs)} images -> {output_size}x{output_size} (padding={padding}, background={options.background})")
    result = compose_grid(inputs, options, max_workers=max_workers)
    tile_size = plan_grid(result.count, options.output, options.padding).tile_size

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(result.buffer)
    print(f"[compose] done -> {out_path} ({result.grid_size}x{result.grid_size} grid, tile {tile_size}px)")

    return {
        "output": str(out_path),
        "grid_size": result.grid_size,
        "tile_size": tile_size,
        "count": result.count,
    }


def resize_file(image_path: Path, *, size: int, out_path: Path) -> Path:
    """Cover-fit the image at ``image_path`` to a ``size`` square PNG at ``out_path``."""

    print(f"[resize] {image_path} -> {size}x{size}")
    data = resize_square(PathInput(path=Path(image_path)), size)

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(data)
    print(f"[resize] done -> {out_path}")
    return out_path
