import io

import pytest

from minitalk.lines import LineReader

TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 5, 42, 1000])
def test_lines_join_back_to_input(chunk_size):
    reader = LineReader(io.StringIO(TEXT), chunk_size)
    lines = list(reader)
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


def test_each_line_keeps_its_newline():
    reader = LineReader(io.StringIO("a\nb\n"), 4)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b\n"
    assert reader.read_line() is None


def test_exhausted_reader_keeps_returning_none():
    reader = LineReader(io.StringIO("only"), 2)
    assert reader.read_line() == "only"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    reader = LineReader(io.StringIO(""), 8)
    assert reader.read_line() is None
    assert list(LineReader(io.StringIO(""), 8)) == []


def test_blank_lines_are_returned():
    reader = LineReader(io.StringIO("\n\n\n"), 1)
    assert list(reader) == ["\n", "\n", "\n"]


@pytest.mark.parametrize("chunk_size", [1, 7, 64])
def test_binary_stream(chunk_size):
    data = b"alpha\nbeta\ngamma"
    lines = list(LineReader(io.BytesIO(data), chunk_size))
    assert lines == data.splitlines(keepends=True)
    assert all(isinstance(line, bytes) for line in lines)


def test_default_chunk_size_reads_long_lines():
    long_line = "x" * 500 + "\n"
    reader = LineReader(io.StringIO(long_line * 3))
    assert list(reader) == [long_line] * 3


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_invalid_chunk_size(chunk_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a\n"), chunk_size)


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls == 1:
            return "partial"
        raise OSError("read failed")


def test_read_error_propagates_and_discards_buffer():
    stream = _FailingStream()
    reader = LineReader(stream, 16)
    with pytest.raises(OSError):
        reader.read_line()
    with pytest.raises(OSError):
        reader.read_line()
    assert stream.calls == 3


def test_reads_resume_after_new_data():
    stream = io.StringIO()
    reader = LineReader(stream, 4)
    assert reader.read_line() is None
    stream.write("later\n")
    stream.seek(0)
    assert reader.read_line() == "later\n"