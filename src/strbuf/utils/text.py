"""
Case conversion, space trimming and comparison for buffers.
"""

from typing import Optional

from ..core import buffer as bufops
from ..core.buffer import ByteBuffer
from ..core.result import Ordering, Result, Status

SPACE = ord(' ')


def to_upper(buf: Optional[ByteBuffer]) -> Result[None]:
    """Uppercase ASCII letters in place."""

    length = bufops.length_of(buf)
    if not length.ok:
        return Result.failure(length.status)

    buf.data[:buf.length] = buf.data[:buf.length].upper()

    return Result.success()


def to_lower(buf: Optional[ByteBuffer]) -> Result[None]:
    """Lowercase ASCII letters in place."""

    length = bufops.length_of(buf)
    if not length.ok:
        return Result.failure(length.status)

    buf.data[:buf.length] = buf.data[:buf.length].lower()

    return Result.success()


def trim_leading(buf: Optional[ByteBuffer]) -> Result[None]:
    """Remove leading spaces."""

    length = bufops.length_of(buf)
    if not length.ok:
        return Result.failure(length.status)

    index = 0
    while index < buf.length and buf.data[index] == SPACE:
        index += 1

    if index == 0:
        return Result.success()

    return bufops.remove_range(buf, 0, index - 1)


def trim_trailing(buf: Optional[ByteBuffer]) -> Result[None]:
    """Remove trailing spaces."""

    length = bufops.length_of(buf)
    if not length.ok:
        return Result.failure(length.status)

    index = buf.length
    while index > 0 and buf.data[index - 1] == SPACE:
        index -= 1

    if index == buf.length:
        return Result.success()

    return bufops.remove_range(buf, index, buf.length - 1)


def trim(buf: Optional[ByteBuffer]) -> Result[None]:
    trimmed = trim_leading(buf)
    if not trimmed.ok:
        return trimmed

    return trim_trailing(buf)


def compare(a: Optional[ByteBuffer], b: Optional[ByteBuffer]) -> Result[Ordering]:
    """Compare the logical content of two buffers byte by byte."""

    if a is None or b is None or a.data is None or b.data is None:
        return Result.failure(Status.COMPARE_ERROR)

    left = a.to_bytes()
    right = b.to_bytes()

    if left == right:
        return Result.success(Ordering.EQUAL)

    return Result.success(Ordering.LESS if left < right else Ordering.GREATER)
