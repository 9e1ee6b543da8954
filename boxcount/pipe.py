"""Message pipes over binary streams.

Two wire formats are supported:

* ``MessagePipe`` carries fixed-size records. Every message takes exactly
  ``record_size`` bytes and short messages are padded with NUL bytes.
* ``FramedPipe`` carries length-prefixed frames. A little-endian 32-bit
  length comes first, then the frame body. Outgoing frames are always
  ``frame_size`` bytes long.
"""

from __future__ import annotations

import struct
from typing import BinaryIO, Union

RECORD_SIZE = 10
FRAME_SIZE = 8

_HEADER = struct.Struct("<i")

Message = Union[bytes, bytearray, memoryview, str]


class PipeError(Exception):
    """Raised when a message cannot be written to or read from a pipe."""


def _as_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("latin-1")
    return bytes(message)


def _fit(message: Message, size: int) -> bytes:
    data = _as_bytes(message)
    if len(data) > size:
        raise PipeError(f"message of {len(data)} bytes does not fit in {size} bytes")
    return data.ljust(size, b"\0")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size) or b""
    if len(data) < size:
        raise PipeError(f"expected {size} bytes, got {len(data)}")
    return data


def _check_size(size: int, what: str) -> int:
    if size <= 0:
        raise ValueError(f"{what} must be positive, got {size}")
    return size


class MessagePipe:
    """A pipe of fixed-size records."""

    def __init__(self, stream: BinaryIO, record_size: int = RECORD_SIZE) -> None:
        self.stream = stream
        self.record_size = _check_size(record_size, "record size")

    def send(self, message: Message) -> None:
        """Write one record, padding it with NUL bytes."""
        self.stream.write(_fit(message, self.record_size))
        self.stream.flush()

    def receive(self) -> bytes:
        """Read one whole record."""
        return _read_exact(self.stream, self.record_size)

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "MessagePipe":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FramedPipe:
    """A pipe of length-prefixed frames."""

    def __init__(self, stream: BinaryIO, frame_size: int = FRAME_SIZE) -> None:
        self.stream = stream
        self.frame_size = _check_size(frame_size, "frame size")

    def send(self, message: Message) -> None:
        """Write the length header, then the NUL-padded frame body."""
        body = _fit(message, self.frame_size)
        self.stream.write(_HEADER.pack(self.frame_size))
        self.stream.flush()
        self.stream.write(body)
        self.stream.flush()

    def receive(self) -> bytes:
        """Read one frame, using the length announced in its header."""
        (size,) = _HEADER.unpack(_read_exact(self.stream, _HEADER.size))
        if size < 0:
            raise PipeError(f"invalid frame length {size}")
        return _read_exact(self.stream, size)

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "FramedPipe":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _open_stream(name, mode: str) -> BinaryIO:
    return open(name, "wb" if mode == "o" else "rb")


def open_pipe(name, mode: str, record_size: int = RECORD_SIZE) -> MessagePipe:
    """Open a record pipe: mode ``'o'`` writes, anything else reads."""
    _check_size(record_size, "record size")
    return MessagePipe(_open_stream(name, mode), record_size)


def open_framed_pipe(name, mode: str, frame_size: int = FRAME_SIZE) -> FramedPipe:
    """Open a framed pipe: mode ``'o'`` writes, anything else reads."""
    _check_size(frame_size, "frame size")
    return FramedPipe(_open_stream(name, mode), frame_size)