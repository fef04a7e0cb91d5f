"""Package for reading image inputs and talking to Pillow."""

from .errors import InvalidInputError, TileGridError
from .inputs import BufferInput, Input, PathInput, as_input, resolve_input

__all__ = [
    "BufferInput",
    "Input",
    "InvalidInputError",
    "PathInput",
    "TileGridError",
    "as_input",
    "resolve_input",
]
