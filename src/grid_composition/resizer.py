"""Square cover-fit resize of a single image."""

from __future__ import annotations

from image_io.codec import render_cover
from image_io.inputs import Input, resolve_input


def resize_square(image: Input, size: int) -> bytes:
    """Cover-fit ``image`` into a ``size`` x ``size`` PNG (center crop, no letterbox)."""

    if size <= 0:
        raise ValueError("size must be > 0")
    return render_cover(resolve_input(image), size)
