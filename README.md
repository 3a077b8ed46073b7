# fdlines

`fdlines` reads from raw file descriptors one line at a time. It calls `os.read` in
small fixed-size chunks and keeps the bytes that follow a newline for the next call.
Because of this it works on pipes and terminals as well as on regular files.

Lines are returned as `bytes`. No decoding is done.

## Installation

```
pip install fdlines
```

## Usage

The simplest entry point is `fdlines.reader.get_next_line`. Pass it an open file
descriptor. Each call returns the next line as `bytes`, including its trailing
newline. At end of input it returns `None`. If the data does not end with a newline,
the last line is returned without one.

```python
import os
from fdlines.reader import get_next_line

fd = os.open("notes.txt", os.O_RDONLY)
try:
    while (line := get_next_line(fd)) is not None:
        print(line.decode(), end="")
finally:
    os.close(fd)
```

`get_next_line` uses one process-wide `LineReader` with the default settings: a
buffer size of 4 bytes and descriptors from 0 up to 1023. That reader keeps separate
leftover bytes for each descriptor, so reads from several descriptors can be
interleaved without their data getting mixed.

### Using a `LineReader` directly

Create your own `LineReader` when you want a different chunk size, a different
descriptor range, or a single shared store:

```python
from fdlines.reader import LineReader

reader = LineReader(buffer_size=64, max_fd=1024, shared=False)

line = reader.read_line(fd)      # next line, or None at end of input
for line in reader.lines(fd):    # yields lines until end of input
    ...
reader.pending(fd)               # bytes read from fd but not yet returned (b"" if none)
reader.reset(fd)                 # discard those bytes
```

- `buffer_size` sets the largest number of bytes requested in each `os.read` call.
  Default: `DEFAULT_BUFFER_SIZE` (4).
- `max_fd` sets the upper bound on descriptor numbers. With `shared=False`, only
  descriptors in `0 <= fd < max_fd` are accepted. Default: `DEFAULT_MAX_FD` (1024).
- With `shared=True`, one leftover store serves every descriptor and `max_fd` is
  ignored. Only negative descriptors are rejected.

Once end of input is reached, the leftover bytes for that descriptor are cleared.

### Errors

- `ValueError` is raised when `buffer_size` is not positive.
- `ValueError` is raised when `max_fd` is not positive and `shared` is false.
- `ValueError` is raised by `read_line`, `lines`, `pending` and `reset` for a
  negative descriptor. With `shared=False` it is also raised for a descriptor at or
  above `max_fd`.
- If `os.read` raises `OSError`, the reader discards the bytes it was keeping for
  that descriptor and then lets the error propagate.

## What it does not do

`fdlines` is a library only. It installs no command-line program. It does not open
or close descriptors for you, and it does not decode text.