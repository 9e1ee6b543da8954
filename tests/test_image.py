import io

import pytest

from boxcount.image import (
    format_value,
    load_image,
    parse_value,
    read_image,
    save_image,
    write_image,
)
from boxcount.pipe import MessagePipe, PipeError


def test_parse_value_atoi_rules():
    assert parse_value(b"  -12abc") == -12
    assert parse_value("+7") == 7
    assert parse_value(b"\0\0\0") == 0
    assert parse_value(b"x12") == 0


def test_format_value_pads_with_nul():
    assert format_value(255, 10) == b"255" + b"\0" * 7


def test_format_value_too_long():
    with pytest.raises(ValueError):
        format_value(1234567890, 10)


@pytest.mark.parametrize("value", [0, 1, 255, -40, 123456789])
def test_format_parse_round_trip(value):
    assert parse_value(format_value(value, 10)) == value


def test_write_read_round_trip():
    grid = [[0, 255, 3], [4, 5, 255], [255, 7, 8]]
    buf = io.BytesIO()
    write_image(MessagePipe(buf, 10), grid)
    buf.seek(0)
    assert read_image(MessagePipe(buf, 10), 3) == grid


def test_read_image_short_stream():
    buf = io.BytesIO()
    write_image(MessagePipe(buf, 10), [[1, 2], [3]])
    buf.seek(0)
    with pytest.raises(PipeError):
        read_image(MessagePipe(buf, 10), 2)


def test_read_image_bad_side():
    with pytest.raises(ValueError):
        read_image(MessagePipe(io.BytesIO(), 10), 0)


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "pipe.pp"
    grid = [[(r * 4 + c) * 10 for c in range(4)] for r in range(4)]
    save_image(path, grid)
    assert load_image(path, 4) == grid


def test_load_default_side(tmp_path):
    path = tmp_path / "pipe.pp"
    grid = [[255] * 128 for _ in range(128)]
    save_image(path, grid)
    loaded = load_image(path)
    assert loaded == grid