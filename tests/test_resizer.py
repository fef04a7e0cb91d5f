import pytest
from PIL import Image, UnidentifiedImageError

from grid_composition import resize_square
from image_io import BufferInput, InvalidInputError, PathInput

from conftest import close_to, encode_png, open_png, png_bytes


@pytest.mark.parametrize("source", [(300, 120), (80, 400), (150, 150), (20, 20), (1000, 999)])
def test_output_is_exact_square(source):
    out = resize_square(BufferInput(data=png_bytes(*source, (10, 200, 30))), 150)
    img = open_png(out)
    assert img.size == (150, 150)
    assert img.format == "PNG"


def test_cover_fit_not_letterboxed():
    img = Image.new("RGB", (400, 100), (255, 0, 0))
    img.paste((0, 0, 255), (150, 0, 250, 100))
    out = open_png(resize_square(BufferInput(data=encode_png(img)), 50))
    # center crop keeps only the blue band; no bars top or bottom
    assert close_to(out.getpixel((25, 0)), (0, 0, 255))
    assert close_to(out.getpixel((25, 49)), (0, 0, 255))


def test_resize_from_path(tmp_path):
    path = tmp_path / "wide.png"
    path.write_bytes(png_bytes(320, 200, (0, 0, 0)))
    assert open_png(resize_square(PathInput(path=path), 64)).size == (64, 64)


def test_resize_same_size_square_is_pixel_identical():
    source = Image.linear_gradient("L").resize((150, 150)).convert("RGB")
    out = open_png(resize_square(BufferInput(data=encode_png(source)), 150))
    assert out.size == (150, 150)
    assert out.convert("RGB").tobytes() == source.tobytes()


def test_resize_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        resize_square(PathInput(path=tmp_path / "nope.png"), 10)


def test_resize_rejects_non_positive_size():
    with pytest.raises(ValueError):
        resize_square(BufferInput(data=png_bytes(4, 4, (0, 0, 0))), 0)


def test_resize_rejects_non_input():
    with pytest.raises(InvalidInputError):
        resize_square("x.png", 10)


def test_resize_undecodable_buffer():
    with pytest.raises(UnidentifiedImageError):
        resize_square(BufferInput(data=b"junk"), 10)
