"""Pair of commands exchanging one framed message through a pipe file."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .pipe import FRAME_SIZE, PipeError, open_framed_pipe

DEFAULT_PIPE = "pipe.pp"
EXPECTED = "T"


def _text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("latin-1")


def server_main(argv: Optional[Sequence[str]] = None) -> int:
    """Send one message into the pipe file."""
    parser = argparse.ArgumentParser(prog="boxcount-server")
    parser.add_argument("pipe", nargs="?", default=DEFAULT_PIPE)
    parser.add_argument("--message", default=EXPECTED)
    args = parser.parse_args(argv)

    try:
        with open_framed_pipe(args.pipe, "o", FRAME_SIZE) as pipe:
            pipe.send(args.message)
    except (OSError, PipeError) as error:
        print(f"cannot send message: {error}", file=sys.stderr)
        return 1
    print(args.message)
    return 0


def client_main(argv: Optional[Sequence[str]] = None) -> int:
    """Receive one message from the pipe file and check it."""
    parser = argparse.ArgumentParser(prog="boxcount-client")
    parser.add_argument("pipe", nargs="?", default=DEFAULT_PIPE)
    parser.add_argument("--expect", default=EXPECTED)
    args = parser.parse_args(argv)

    try:
        with open_framed_pipe(args.pipe, "i", FRAME_SIZE) as pipe:
            message = _text(pipe.receive())
    except (OSError, PipeError) as error:
        print(f"cannot receive message: {error}", file=sys.stderr)
        return 1

    matched = message == args.expect
    if not matched:
        print("error: unexpected message")
    print(message)
    return 0 if matched else 1


if __name__ == "__main__":
    sys.exit(server_main())