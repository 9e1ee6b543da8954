import io

import pytest

from boxcount.pipe import (
    FramedPipe,
    MessagePipe,
    PipeError,
    open_framed_pipe,
    open_pipe,
)


def test_framed_wire_format():
    buf = io.BytesIO()
    FramedPipe(buf, 8).send(b"T")
    assert buf.getvalue() == b"\x08\x00\x00\x00T\x00\x00\x00\x00\x00\x00\x00"


def test_framed_round_trip():
    buf = io.BytesIO()
    pipe = FramedPipe(buf, 8)
    pipe.send(b"hello")
    buf.seek(0)
    assert pipe.receive() == b"hello".ljust(8, b"\0")


def test_framed_uses_header_length_on_receive():
    pipe = FramedPipe(io.BytesIO(b"\x03\x00\x00\x00abcdef"), 8)
    assert pipe.receive() == b"abc"


def test_framed_message_too_long():
    with pytest.raises(PipeError):
        FramedPipe(io.BytesIO(), 8).send(b"123456789")


def test_framed_truncated_header():
    with pytest.raises(PipeError):
        FramedPipe(io.BytesIO(b"\x08\x00"), 8).receive()


def test_framed_truncated_body():
    with pytest.raises(PipeError):
        FramedPipe(io.BytesIO(b"\x08\x00\x00\x00abc"), 8).receive()


def test_framed_negative_length():
    with pytest.raises(PipeError):
        FramedPipe(io.BytesIO(b"\xff\xff\xff\xff"), 8).receive()


def test_message_record_is_padded():
    buf = io.BytesIO()
    MessagePipe(buf, 10).send(b"42")
    data = buf.getvalue()
    assert len(data) == 10
    assert data.startswith(b"42")
    assert data[2:] == b"\0" * 8


def test_message_str_and_bytes_agree():
    a, b = io.BytesIO(), io.BytesIO()
    MessagePipe(a, 10).send("7")
    MessagePipe(b, 10).send(b"7")
    assert a.getvalue() == b.getvalue()


def test_message_too_long():
    with pytest.raises(PipeError):
        MessagePipe(io.BytesIO(), 4).send(b"12345")


def test_message_receive_at_end():
    with pytest.raises(PipeError):
        MessagePipe(io.BytesIO(b"abc"), 10).receive()


def test_invalid_record_size():
    with pytest.raises(ValueError):
        MessagePipe(io.BytesIO(), 0)
    with pytest.raises(ValueError):
        FramedPipe(io.BytesIO(), -1)


def test_context_manager_closes_stream():
    buf = io.BytesIO()
    with MessagePipe(buf, 10) as pipe:
        pipe.send(b"1")
    assert buf.closed


def test_open_pipe_file_round_trip(tmp_path):
    path = tmp_path / "pipe.pp"
    messages = [b"1", b"255", b"-3"]
    with open_pipe(path, "o", 10) as pipe:
        for message in messages:
            pipe.send(message)
    with open_pipe(path, "i", 10) as pipe:
        received = [pipe.receive().rstrip(b"\0") for _ in messages]
    assert received == messages
    assert path.stat().st_size == 10 * len(messages)


def test_open_framed_pipe_file_round_trip(tmp_path):
    path = tmp_path / "pipe.pp"
    with open_framed_pipe(path, "o", 8) as pipe:
        pipe.send(b"T")
    with open_framed_pipe(path, "i", 8) as pipe:
        assert pipe.receive().rstrip(b"\0") == b"T"