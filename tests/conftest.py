import io
from pathlib import Path

import pytest
from PIL import Image

COLORS = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
    (128, 128, 128),
    (255, 128, 0),
    (128, 0, 128),
]

ENV_KEYS = ("TILEGRID_BACKGROUND", "TILEGRID_MAX_WORKERS")


def png_bytes(width, height, color, mode="RGB"):
    img = Image.new(mode, (width, height), color=color)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def open_png(data):
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def close_to(pixel, expected, tol=1):
    return all(abs(a - b) <= tol for a, b in zip(pixel, expected))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown also removes values written by load_env_file
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def color_paths(tmp_path):
    """Four 100x100 solid-color PNGs on disk (red, green, blue, yellow)."""
    paths = []
    for i, color in enumerate(COLORS[:4]):
        path = tmp_path / f"generated-image-{i}.png"
        path.write_bytes(png_bytes(100, 100, color))
        paths.append(path)
    return paths


def encode_png(img):
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
