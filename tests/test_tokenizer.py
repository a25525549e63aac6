# tests/test_tokenizer.py
from __future__ import annotations

import pytest

from strbuf.core import buffer as B
from strbuf.core.result import Status
from strbuf.core.tokenizer import split_by_delimiters


def split(text: bytes, delimiters: bytes = b",", toggles: bytes = b'"'):
    source = B.from_bytes(text).value
    result = split_by_delimiters(source, delimiters, toggles)
    assert result.ok
    return result.value.to_bytes_list()


# ─────────────────────────────────────────────────────────────────────────────
# Delimiter handling
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,expected",
    [
        (b"a,b,c", [b"a", b"b", b"c"]),
        (b"a,,b", [b"a", b"", b"b"]),
        (b"a,", [b"a", b""]),
        (b",a", [b"", b"a"]),
        (b",", [b"", b""]),
        (b",,", [b"", b"", b""]),
        (b"", [b""]),
        (b"abc", [b"abc"]),
    ],
)
def test_split_on_single_delimiter(text, expected):
    assert split(text) == expected


def test_any_delimiter_in_set_ends_a_token():
    assert split(b"a,b;c d", delimiters=b",; ") == [b"a", b"b", b"c", b"d"]


def test_no_delimiters_yields_whole_source():
    assert split(b"a,b", delimiters=b"") == [b"a,b"]


# ─────────────────────────────────────────────────────────────────────────────
# Ignore regions
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,expected",
    [
        (b'"a,b",c', [b"a,b", b"c"]),
        (b'c,"a,b"', [b"c", b"a,b"]),
        (b'"",x', [b"", b"x"]),
        (b'"a""b",c', [b'a"b', b"c"]),
        (b'"say ""hi"", ok",next', [b'say "hi", ok', b"next"]),
        (b'ab"c,d"e,f', [b"abc,de", b"f"]),
    ],
)
def test_quoted_tokens(text, expected):
    assert split(text) == expected


def test_unterminated_region_closes_at_end_of_input():
    assert split(b'a,"b,c') == [b"a", b"b,c"]


def test_multiple_toggle_bytes_share_one_region_state():
    assert split(b"'a,b',\"c,d\"", toggles=b"'\"") == [b"a,b", b"c,d"]


def test_no_toggles_treats_quotes_as_content():
    assert split(b'"a,b"', toggles=b"") == [b'"a', b'b"']


# ─────────────────────────────────────────────────────────────────────────────
# Ownership & validation
# ─────────────────────────────────────────────────────────────────────────────

def test_tokens_do_not_alias_source():
    source = B.from_bytes(b"abc,def").value
    tokens = split_by_delimiters(source, b",", b'"').value

    B.set_byte(source, 0, ord("X"))
    assert tokens.to_bytes_list() == [b"abc", b"def"]
    assert all(token.data is not source.data for token in tokens)
    assert source.to_bytes() == b"Xbc,def"


def test_long_tokens_are_not_truncated():
    long_token = b"x" * 10000
    assert split(long_token + b",y") == [long_token, b"y"]


def test_delimiter_sets_accept_buffers():
    source = B.from_bytes(b"1|2").value
    delimiters = B.from_bytes(b"|").value
    toggles = B.from_bytes(b"'").value
    assert split_by_delimiters(source, delimiters, toggles).value.to_bytes_list() == [b"1", b"2"]


def test_invalid_inputs():
    source = B.from_bytes(b"a").value
    assert split_by_delimiters(None, b",", b'"').status is Status.NULL_BUFFER
    assert split_by_delimiters(source, None, b'"').status is Status.NULL_BUFFER
    assert split_by_delimiters(source, b",", None).status is Status.NULL_BUFFER

    B.release(source)
    assert split_by_delimiters(source, b",", b'"').status is Status.NULL_STORE
