"""Input variants and the reader that turns them into raw bytes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import InvalidInputError

INVALID_DATA_MESSAGE = "Invalid image data: must be a file path or byte buffer"

PATH_TYPES = (str, os.PathLike)
BUFFER_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class PathInput:
    """An image stored on disk. ``id`` is a caller label only."""

    path: Union[str, os.PathLike]
    id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.path, PATH_TYPES):
            raise InvalidInputError(INVALID_DATA_MESSAGE)


@dataclass(frozen=True)
class BufferInput:
    """An already-encoded image held in memory."""

    data: Union[bytes, bytearray, memoryview]
    id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.data, BUFFER_TYPES):
            raise InvalidInputError(INVALID_DATA_MESSAGE)


Input = Union[PathInput, BufferInput]


def as_input(data: object, id: str | None = None) -> Input:
    """Wrap a raw path or byte buffer in the matching input variant."""

    if isinstance(data, PATH_TYPES):
        return PathInput(path=data, id=id)
    if isinstance(data, BUFFER_TYPES):
        return BufferInput(data=data, id=id)
    raise InvalidInputError(INVALID_DATA_MESSAGE)


def resolve_input(item: Input) -> bytes:
    """Return the encoded bytes behind ``item``.

    Path inputs are read whole; read failures (missing file, permissions)
    propagate as the ``OSError`` raised by the filesystem. Buffers are
    returned as-is.
    """

    if isinstance(item, PathInput):
        return Path(item.path).read_bytes()
    if isinstance(item, BufferInput):
        return item.data
    raise InvalidInputError(INVALID_DATA_MESSAGE)
