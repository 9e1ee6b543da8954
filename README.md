# boxcount

`boxcount` estimates the fractal dimension of a square grey-level image
by box counting. Pixel values run from 0 (black) to 255 (white). A box
counts as occupied when any pixel in it is not white (not 255).

The image is read from a file of fixed-size records. Each record is
10 bytes long and holds one pixel value as a decimal number padded with
NUL bytes. Values come row by row.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
boxcount [PIPE] [--side N] [--box-size N] [--grid-size X] [--dump]
```

This reads a `side` × `side` image from the record file `PIPE` (default
`pipe.pp`, default side 128). It splits the image into four quadrants
and counts the occupied boxes of `--box-size` pixels (default 16) in each
quadrant, one worker thread per quadrant. Then it prints:

```
R0: <n>	 R1: <n>	 R2: <n>	 R3: <n>
Boxes with a non-white pixel = <total>
Fractal dimension = <log(total) / log(1 / sqrt(grid-size))>
```

`--grid-size` defaults to 64. When no box is occupied, the dimension is
reported as `undefined`. `--dump` prints every pixel value first, as
`imagem[<index>]: <value>`. The command exits with status 1, and a message
on standard error, when the image cannot be read or analysed. Examples
are a missing file, a short file, or an odd or zero side.

Two small commands try out the length-prefixed pipe. Each frame is a
little-endian 32-bit length followed by an 8-byte body:

```
boxcount-pipe-server [PIPE] [--message TEXT]   # writes TEXT (default "T")
boxcount-pipe-client [PIPE] [--expect TEXT]    # reads it back and checks it
```

The client prints the message it received. If the message is not the
expected one, it prints `error: unexpected message` first and exits
with 1.

## Library use

```python
from boxcount.counting import count_parallel, fractal_dimension
from boxcount.cli import analyse

grid = [[255] * 128 for _ in range(128)]
grid[0][0] = 0

counts = count_parallel(grid, 16)   # (1, 0, 0, 0)
result = analyse(grid, 16, 64)      # BoxCountResult(counts, total, dimension)
print(result.report())
```

`boxcount.counting`:

- `has_pixel(grid, top, left, bottom, right)` tells whether any non-white
  pixel lies in the region. The grid is indexed `grid[x][y]`, with `x` in
  `[left, right)` and `y` in `[top, bottom)`.
- `count_boxes(grid, top, left, bottom, right, box_width, box_height)`
  counts the occupied boxes that tile a region.
- `split_quadrants(grid)` splits a square grid of even side into four
  quadrants.
- `count_quadrant(quadrant, box_size)` counts the occupied boxes in one
  quadrant.
- `count_parallel(grid, box_size)` returns the four quadrant counts.
- `fractal_dimension(total, grid_size)` computes
  `log(total) / log(1 / sqrt(grid_size))`. It raises `ValueError` when
  `total` is not positive, or when `grid_size` is not positive or is 1.

`boxcount.cli.analyse(grid, box_size, grid_size)` returns a
`BoxCountResult` with `counts`, `total` and `dimension`. `dimension` is
`None` when nothing is occupied. `report()` gives the text the command
prints.

`boxcount.pipe`:

- `open_pipe(name, mode, record_size)` gives a `MessagePipe` of
  fixed-size records.
- `open_framed_pipe(name, mode, frame_size)` gives a `FramedPipe` of
  length-prefixed frames.

Mode `'o'` writes and any other mode reads. Both pipes are context
managers. A short read, or a message too long for its record or frame,
raises `PipeError`.

`boxcount.image`:

- `load_image(path, side)` reads a grid from a record file, and
  `save_image(path, grid)` writes one.
- `read_image(pipe, side)` and `write_image(pipe, grid)` do the same on a
  `MessagePipe` that is already open.
- `parse_value(record)` reads a leading integer the way C's `atoi` does,
  giving 0 when there is none.
- `format_value(value, record_size)` encodes one record.

## What it does not do

`boxcount` does not read image formats such as BMP or PNG, and it does
not display images. An image must first be turned into the record format
above, for example with `save_image`. The pipes are plain files opened
for reading or writing. The package does not create operating-system
named pipes, and it does not synchronise a writer and a reader that run
at the same time.