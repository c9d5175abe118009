import io

import pytest

from cubparse.linereader import LineReader, read_lines

TEXT = "NO ./north.png\nSO ./south.png\n\n111\n101\n111"


@pytest.mark.parametrize("size", [1, 3, 5, 42, 1000])
def test_text_round_trip(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 42])
def test_bytes_round_trip(size):
    data = TEXT.encode()
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_read_line_sequence_then_none():
    reader = LineReader(io.StringIO("a\nb"), 2)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b"
    assert reader.read_line() is None


def test_nul_ends_a_line():
    lines = list(LineReader(io.StringIO("ab\0cd\n"), 3))
    assert lines == ["ab", "cd\n"]


def test_leading_nul_ends_input():
    reader = LineReader(io.StringIO("\0abc\n"))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_bad_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text(TEXT, encoding="utf-8")
    assert read_lines(str(path)) == TEXT.splitlines(keepends=True)


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(str(tmp_path / "missing.cub"))