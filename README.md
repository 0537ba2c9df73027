# ftlib

A small collection of general-purpose helpers, organised by topic. Most of
them follow the behaviour of the classic C library routines of the same
name, with Python types: positions come back as indices (or `None` when
nothing is found), and functions that would fill a caller's buffer return
their result instead.

- `ftlib.chars`: ASCII character tests and case conversion (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`). Each
  accepts an integer code or a one-character string; the case converters
  return the same kind they were given.
- `ftlib.memory`: helpers for `bytes`/`bytearray` (`bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`). `memmove` copies
  between two offsets inside one buffer, overlap included.
- `ftlib.numbers`: integer parsing and formatting with 32-bit semantics
  (`atoi`, `itoa`, `nbdigits_base`, `uitoa_base`).
- `ftlib.strings`: string helpers (`strlen`, `strlcpy`, `strlcat`, `strchr`,
  `strrchr`, `strncmp`, `strcmp`, `strnstr`, `substr`, `strjoin`, `strtrim`,
  `strdup`, `strmapi`, `striteri`). `strlcpy` and `strlcat` return a
  `(text, attempted_length)` pair.
- `ftlib.splitting`: `split` and the quote-aware `split_quotes`.
- `ftlib.linked`: a singly linked `LinkedList` of `Node` objects with
  `add_front`, `add_back`, `last`, `iterate`, `map`, `pop_front`, `clear`,
  `len()` and iteration.
- `ftlib.output`: writing characters, strings and numbers to a text stream,
  standard output by default (`put_char`, `put_str`, `put_endl`, `put_nbr`,
  `put_nbr_base`). Each returns the number of characters written.
- `ftlib.printf`: a small printf with `%c %s %p %d %i %u %x %X` and a width
  for `%d`/`%i` (`format_string`, `printf`, `dprintf`). Any other character
  after `%` is printed as itself, so `%%` gives `%`.
- `ftlib.lines`: line-by-line reading from raw file descriptors
  (`LineReader`, `get_next_line`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftlib.numbers import atoi, uitoa_base
from ftlib.splitting import split, split_quotes
from ftlib.printf import format_string

atoi("   -42abc")                        # -42
uitoa_base(255, "0123456789abcdef")      # "ff"
split("  a b  c ", " ")                  # ["a", "b", "c"]
split_quotes('say "hello world"', " ")   # ["say", "hello world"]
format_string("%5d|%-4d|%x", 42, 7, 255) # "   42|7   |ff"
```

Reading lines from a file descriptor:

```python
import os
from ftlib.lines import LineReader

reader = LineReader(buffer_size=10)
fd = os.open("notes.txt", os.O_RDONLY)
while (line := reader.read_line(fd)) is not None:
    print(line.decode(), end="")
os.close(fd)
```

Lines are returned as `bytes` and keep their trailing newline. `None` marks
the end of the input. A `LineReader` keeps unread data separately for each
descriptor; `get_next_line(fd)` uses one shared reader.

## What it does not do

`ftlib` is a library only: it installs no command-line program, and it has
no graphics, windowing or game functionality of its own.