import os

import pytest

from ftlib.lines import LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


def _read_all(reader, fd):
    lines = []
    while True:
        line = reader.read_line(fd)
        if line is None:
            return lines
        lines.append(line)


SAMPLES = [
    b"",
    b"one line without newline",
    b"a\nbb\nccc\n",
    b"\n\n\n",
    b"first\nsecond line that is rather long\nlast",
    b"x" * 57 + b"\n" + b"y" * 3,
]


@pytest.mark.parametrize("buffer_size", [1, 3, 10, 100])
@pytest.mark.parametrize("data", SAMPLES)
def test_lines_reassemble_input(data, buffer_size):
    fd = _pipe_with(data)
    try:
        lines = _read_all(LineReader(buffer_size), fd)
    finally:
        os.close(fd)
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_end_of_input_keeps_returning_none():
    fd = _pipe_with(b"only\n")
    reader = LineReader()
    try:
        assert reader.read_line(fd) == b"only\n"
        assert reader.read_line(fd) is None
        assert reader.read_line(fd) is None
    finally:
        os.close(fd)


def test_descriptors_keep_separate_state():
    fd_a = _pipe_with(b"a1\na2\n")
    fd_b = _pipe_with(b"b1\nb2\n")
    reader = LineReader(2)
    try:
        assert reader.read_line(fd_a) == b"a1\n"
        assert reader.read_line(fd_b) == b"b1\n"
        assert reader.read_line(fd_a) == b"a2\n"
        assert reader.read_line(fd_b) == b"b2\n"
        assert reader.read_line(fd_a) is None
    finally:
        os.close(fd_a)
        os.close(fd_b)


def test_reads_from_file(tmp_path):
    path = tmp_path / "text.txt"
    data = b"alpha\nbeta\ngamma"
    path.write_bytes(data)
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = [get_next_line(fd), get_next_line(fd), get_next_line(fd), get_next_line(fd)]
    finally:
        os.close(fd)
    assert lines[:3] == data.splitlines(keepends=True)
    assert lines[3] is None


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0)


@pytest.mark.parametrize("fd", [-1, 1024, 5000])
def test_descriptor_out_of_range(fd):
    with pytest.raises(ValueError):
        LineReader().read_line(fd)


def test_read_error_is_raised():
    read_end, write_end = os.pipe()
    os.close(write_end)
    os.close(read_end)
    with pytest.raises(OSError):
        LineReader().read_line(read_end)