"""Pillow helpers: decode, cover-fit, composite and encode."""

from __future__ import annotations

import io
from typing import Tuple, Union

from PIL import Image, ImageColor, ImageOps

TRANSPORT_FORMAT = "PNG"
TRANSPARENT = (0, 0, 0, 0)

Color = Union[str, Tuple[int, int, int, int]]


def decode_image(data: bytes) -> Image.Image:
    """Decode encoded bytes into a loaded RGB or RGBA image.

    Raises ``PIL.UnidentifiedImageError`` when the bytes are not an image.
    """

    img = Image.open(io.BytesIO(data))
    img.load()
    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA")
    return img


def cover_fit(image: Image.Image, size: int) -> Image.Image:
    """Scale ``image`` to fill a ``size`` square and crop the overflow, centered."""

    return ImageOps.fit(
        image,
        (size, size),
        method=Image.Resampling.LANCZOS,
        centering=(0.5, 0.5),
    )


def encode_image(image: Image.Image, format: str = TRANSPORT_FORMAT) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=format)
    return buffer.getvalue()


def render_cover(data: bytes, size: int) -> bytes:
    """Decode, cover-fit to ``size`` x ``size`` and re-encode as PNG."""

    return encode_image(cover_fit(decode_image(data), size))


def parse_color(spec: Color) -> Tuple[int, int, int, int]:
    """Resolve a color string (``#rrggbb``, a CSS name, ``transparent``) to RGBA."""

    if isinstance(spec, tuple):
        return spec
    if spec.strip().lower() == "transparent":
        return TRANSPARENT
    return ImageColor.getcolor(spec, "RGBA")


def new_canvas(size: int, background: Color) -> Image.Image:
    return Image.new("RGBA", (size, size), parse_color(background))


def paste_tile(canvas: Image.Image, tile: Image.Image, position: Tuple[int, int]) -> None:
    """Alpha-composite ``tile`` onto ``canvas`` with its top-left at ``position``."""

    if tile.mode != "RGBA":
        tile = tile.convert("RGBA")
    canvas.alpha_composite(tile, dest=position)
