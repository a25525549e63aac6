# tests/test_file.py
from __future__ import annotations

import pytest

from strbuf.core import file as F
from strbuf.core.result import Status


@pytest.fixture
def write_file(tmp_path):
    def _write(content: bytes):
        path = tmp_path / "input.txt"
        path.write_bytes(content)
        return path
    return _write


def read_all(path):
    lines = []
    with F.open_line_file(path) as line_file:
        while True:
            line = F.next_line(line_file)
            if not line.ok:
                assert line.status is Status.END_OF_INPUT
                break
            lines.append(line.value.to_bytes())
    return lines


@pytest.mark.parametrize(
    "content,expected",
    [
        (b"one\ntwo\nthree\n", [b"one", b"two", b"three"]),
        (b"one\ntwo", [b"one", b"two"]),
        (b"\n\n", [b"", b""]),
        (b"", []),
        (b"crlf\r\nnext\r\n", [b"crlf\r", b"next\r"]),
    ],
)
def test_next_line_strips_one_line_feed(write_file, content, expected):
    assert read_all(write_file(content)) == expected


def test_cursor_advances_past_each_line(write_file):
    path = write_file(b"ab\ncde\n")
    with F.open_line_file(path) as line_file:
        F.next_line(line_file)
        assert line_file.cursor == 3
        F.next_line(line_file)
        assert line_file.cursor == 7
        assert F.next_line(line_file).status is Status.END_OF_INPUT
        assert line_file.cursor == 7


@pytest.mark.parametrize("size", [F.INITIAL_LINE_WINDOW - 1, F.INITIAL_LINE_WINDOW, 5000])
def test_long_lines_grow_the_read_window(write_file, size):
    long_line = b"x" * size
    assert read_all(write_file(long_line + b"\nshort\n")) == [long_line, b"short"]


def test_next_line_without_open_handle():
    assert F.next_line(None).status is Status.NULL_FILE
    assert F.next_line(F.LineFile(None)).status is Status.NULL_FILE


def test_closed_handle_reports_null_file(write_file):
    path = write_file(b"a\n")
    with F.open_line_file(path) as line_file:
        handle = line_file.handle
    assert line_file.handle is None
    assert handle.closed
    assert F.next_line(line_file).status is Status.NULL_FILE


def test_lines_from_path(write_file):
    path = write_file(b"a,b\nc\n")
    lines = F.lines_from_path(path).value
    assert lines.to_bytes_list() == [b"a,b", b"c"]


def test_lines_from_path_empty_file_gives_empty_list(write_file):
    lines = F.lines_from_path(write_file(b"")).value
    assert lines.count == 0


def test_lines_from_missing_path(tmp_path):
    assert F.lines_from_path(tmp_path / "missing.txt").status is Status.NULL_FILE
