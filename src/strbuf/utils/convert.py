"""
Conversions between buffers and int64 / double values.
"""

from typing import Final, Optional

from ..core import buffer as bufops
from ..core.buffer import ByteBuffer
from ..core.result import Result, Status

INT64_MIN: Final[int] = -(2 ** 63)
INT64_MAX: Final[int] = 2 ** 63 - 1
FLOAT_FRACTION_DIGITS: Final[int] = 16

DIGITS: Final[bytes] = b'0123456789'


def from_int64(value: int) -> Result[ByteBuffer]:
    """Format a signed 64-bit integer as decimal text."""

    if not INT64_MIN <= value <= INT64_MAX:
        return Result.failure(Status.CONVERT_INT)

    return bufops.from_bytes(str(value).encode('ascii'))


def from_double(value: float) -> Result[ByteBuffer]:
    """Format a double with a fixed number of fraction digits."""

    return bufops.from_bytes(f"{value:.{FLOAT_FRACTION_DIGITS}f}".encode('ascii'))


def to_int64(buf: Optional[ByteBuffer]) -> Result[int]:
    """
    Parse a buffer as a signed 64-bit integer.

    The text is accepted only if formatting the parsed value gives back the
    exact same bytes, which rules out leading zeros, signs like ``+``,
    whitespace and ``-0``.

    Args:
        buf: Buffer holding decimal text

    Returns:
        Result[int]: The value, or CONVERT_INT
    """

    if buf is None:
        return Result.failure(Status.NULL_BUFFER)

    if buf.data is None:
        return Result.failure(Status.NULL_STORE)

    text = buf.to_bytes()

    try:
        value = int(text)
    except ValueError:
        return Result.failure(Status.CONVERT_INT)

    if not INT64_MIN <= value <= INT64_MAX or str(value).encode('ascii') != text:
        return Result.failure(Status.CONVERT_INT)

    return Result.success(value)


def is_decimal_text(text: bytes) -> bool:
    """
    Check the ``[-][digits].[digits]`` shape accepted for doubles.

    Exactly one dot, at least one digit on either side, an optional minus
    sign only in first position, and nothing else.
    """

    dots = 0
    digits = 0
    minus = 0

    for index, current in enumerate(text):
        if current == ord('.'):
            dots += 1
        elif current in DIGITS:
            digits += 1
        elif current == ord('-') and index == 0:
            minus += 1
        else:
            return False

    return dots == 1 and digits > 0 and minus <= 1


def to_double(buf: Optional[ByteBuffer]) -> Result[float]:
    """Parse a buffer as a double after structural validation."""

    if buf is None:
        return Result.failure(Status.NULL_BUFFER)

    if buf.data is None:
        return Result.failure(Status.NULL_STORE)

    text = buf.to_bytes()
    if not is_decimal_text(text):
        return Result.failure(Status.CONVERT_FLOAT)

    return Result.success(float(text))
