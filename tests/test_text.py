# tests/test_text.py
from __future__ import annotations

import pytest

from strbuf.core import buffer as B
from strbuf.core.result import Ordering, Status
from strbuf.utils import text as T


def buf(content: bytes):
    return B.from_bytes(content).value


def test_case_conversion_is_ascii_only():
    b = buf(b"Hello, World! \xe9")
    T.to_upper(b)
    assert b.to_bytes() == b"HELLO, WORLD! \xe9"
    T.to_lower(b)
    assert b.to_bytes() == b"hello, world! \xe9"


@pytest.mark.parametrize(
    "func,content,expected",
    [
        (T.trim_leading, b"  ab  ", b"ab  "),
        (T.trim_trailing, b"  ab  ", b"  ab"),
        (T.trim, b"  ab  ", b"ab"),
        (T.trim, b"    ", b""),
        (T.trim, b"ab", b"ab"),
        (T.trim, b"", b""),
        (T.trim, b"\tab\t", b"\tab\t"),
    ],
)
def test_trimming_removes_spaces_and_clears_tail(func, content, expected):
    b = buf(content)
    assert func(b).ok
    assert b.to_bytes() == expected
    assert not any(b.data[b.length:])


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (b"abc", b"abc", Ordering.EQUAL),
        (b"abc", b"abd", Ordering.LESS),
        (b"abd", b"abc", Ordering.GREATER),
        (b"ab", b"abc", Ordering.LESS),
        (b"", b"", Ordering.EQUAL),
        (b"a\0b", b"a\0c", Ordering.LESS),
    ],
)
def test_compare_is_bytewise(a, b, expected):
    assert T.compare(buf(a), buf(b)).value is expected


def test_compare_error_on_missing_operand():
    released = buf(b"x")
    B.release(released)
    assert T.compare(None, buf(b"x")).status is Status.COMPARE_ERROR
    assert T.compare(buf(b"x"), released).status is Status.COMPARE_ERROR


def test_text_ops_report_missing_buffer():
    assert T.to_upper(None).status is Status.NULL_BUFFER
    assert T.trim(None).status is Status.NULL_BUFFER


def test_text_helpers_exported_from_utils_package():
    from strbuf import utils

    b = buf(b"  Mixed  ")
    utils.trim(b)
    utils.to_upper(b)
    assert b.to_bytes() == b"MIXED"
    assert utils.compare(b, buf(b"MIXED")).value is Ordering.EQUAL
    assert {"trim_leading", "trim_trailing", "to_lower", "compare"} <= set(utils.__all__)
