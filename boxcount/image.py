"""Transfer of square grey-level images through record pipes."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Union

from .pipe import RECORD_SIZE, MessagePipe, open_pipe

IMAGE_SIDE = 128

Grid = List[List[int]]

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_value(record: Union[bytes, bytearray, str]) -> int:
    """Read a leading decimal integer the way ``atoi`` does; 0 if none."""
    text = record if isinstance(record, str) else bytes(record).decode("latin-1")
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def format_value(value: int, record_size: int = RECORD_SIZE) -> bytes:
    """Encode an integer as a NUL-terminated decimal record."""
    text = str(int(value)).encode("ascii")
    if len(text) >= record_size:
        raise ValueError(f"{value} does not fit in a record of {record_size} bytes")
    return text.ljust(record_size, b"\0")


def read_image(pipe: MessagePipe, side: int = IMAGE_SIDE) -> Grid:
    """Read ``side * side`` values, row by row, into a grid."""
    if side <= 0:
        raise ValueError(f"image side must be positive, got {side}")
    return [[parse_value(pipe.receive()) for _ in range(side)] for _ in range(side)]


def load_image(path, side: int = IMAGE_SIDE) -> Grid:
    """Read an image from the pipe file at ``path``."""
    with open_pipe(path, "i", RECORD_SIZE) as pipe:
        return read_image(pipe, side)


def write_image(pipe: MessagePipe, grid: Iterable[Sequence[int]]) -> None:
    """Send every value of the grid, row by row."""
    for row in grid:
        for value in row:
            pipe.send(format_value(value, pipe.record_size))


def save_image(path, grid: Iterable[Sequence[int]]) -> None:
    """Write an image to the pipe file at ``path``."""
    with open_pipe(path, "o", RECORD_SIZE) as pipe:
        write_image(pipe, grid)