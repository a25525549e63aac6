"""
Delimiter splitting with quote-style ignore regions.
"""

import logging
from typing import FrozenSet, Optional, Tuple, Union

from . import buffer as bufops
from . import buffer_list as listops
from .buffer import ByteBuffer
from .buffer_list import BufferList
from .result import Result, Status

log = logging.getLogger(__name__)

ByteSet = Union[ByteBuffer, bytes, bytearray]


def _byte_set(src: Optional[ByteSet]) -> Tuple[Optional[Status], FrozenSet[int]]:
    if src is None:
        return Status.NULL_BUFFER, frozenset()

    if isinstance(src, ByteBuffer):
        if src.data is None:
            return Status.NULL_STORE, frozenset()
        return None, frozenset(src.to_bytes())

    return None, frozenset(bytes(src))


def _find_token_end(data: bytes, pos: int, delimiters: FrozenSet[int],
                    toggles: FrozenSet[int], inside: bool) -> Optional[int]:
    """Return the index of the delimiter closing the token, or None at end of input."""

    while pos < len(data):
        current = data[pos]

        if current in delimiters and not inside:
            return pos

        if current in toggles:
            inside = not inside

        pos += 1

    return None


def _unquote(data: bytes, toggles: FrozenSet[int], inside: bool) -> bytearray:
    """
    Copy a token range, dropping region toggles.

    A toggle repeated twice inside an open region is written once as a literal
    and the region stays open.
    """

    segment = bytearray()
    index = 0

    while index < len(data):
        current = data[index]

        if current not in toggles:
            segment.append(current)
            index += 1
            continue

        if inside and index + 1 < len(data) and data[index + 1] == current:
            segment.append(current)
            index += 2
            continue

        inside = not inside
        index += 1

    return segment


def split_by_delimiters(source: Optional[ByteBuffer], delimiters: Optional[ByteSet],
                        ignore_toggles: Optional[ByteSet]) -> Result[BufferList]:
    """
    Split ``source`` into tokens on any of the ``delimiters`` bytes.

    Delimiters inside a region opened by one of the ``ignore_toggles`` bytes
    do not split. Empty tokens are kept, so ``n`` delimiters always produce
    ``n + 1`` tokens; an empty source yields a single empty token. A region
    still open at the end of input closes there.

    Args:
        source: Buffer to split; it is not modified
        delimiters: Bytes that end a token
        ignore_toggles: Bytes that open and close an ignore region

    Returns:
        Result[BufferList]: One independently owned buffer per token
    """

    if source is None:
        return Result.failure(Status.NULL_BUFFER)

    if source.data is None:
        return Result.failure(Status.NULL_STORE)

    error, delimiter_set = _byte_set(delimiters)
    if error:
        return Result.failure(error)

    error, toggle_set = _byte_set(ignore_toggles)
    if error:
        return Result.failure(error)

    data = source.to_bytes()
    tokens = listops.construct(1).value
    pos = 0

    while True:
        start = pos
        quoted = pos < len(data) and data[pos] in toggle_set
        if quoted:
            pos += 1

        end = _find_token_end(data, pos, delimiter_set, toggle_set, quoted)
        stop = end is None
        if stop:
            end = len(data)

        segment = _unquote(data[pos:end], toggle_set, quoted) if end > start else b''

        token = bufops.from_bytes(segment).value
        pushed = listops.push(tokens, token)
        bufops.release(token)

        if not pushed.ok:
            listops.release(tokens)
            return Result.failure(pushed.status)

        if stop:
            break

        pos = end + 1

    log.debug("Split %d bytes into %d tokens", len(data), tokens.count)

    return Result.success(tokens)
