"""
Buffer module for growable byte strings with a trailing zero sentinel.

A ByteBuffer owns a bytearray of at least ``capacity + 1`` bytes. The byte at
``length`` is always zero, as is everything after it, so ``c_view()`` can be
handed to consumers expecting null-terminated data.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .result import Result, Status

log = logging.getLogger(__name__)

ByteSource = Union['ByteBuffer', bytes, bytearray, memoryview]


@dataclass(eq=False)
class ByteBuffer:
    """Owned byte sequence with tracked length and capacity."""

    data: Optional[bytearray] = None
    length: int = 0
    capacity: int = 0

    def is_initialized(self) -> bool:
        return self.data is not None

    def to_bytes(self) -> bytes:
        """Return a copy of the logical content."""

        if self.data is None:
            return b''

        return bytes(self.data[:self.length])

    def c_view(self) -> bytes:
        """Return the content followed by its zero sentinel."""

        if self.data is None:
            return b''

        return bytes(self.data[:self.length + 1])

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        if self.data is None:
            return 'ByteBuffer(<released>)'

        return f'ByteBuffer({self.to_bytes()!r}, capacity={self.capacity})'


def _check_buffer(buf: Optional[ByteBuffer]) -> Optional[Status]:
    if buf is None:
        return Status.NULL_BUFFER

    if buf.data is None:
        return Status.NULL_STORE

    return None


def _source_bytes(src: Optional[ByteSource]) -> Tuple[Optional[Status], bytes]:
    """Resolve a buffer or bytes-like source into its logical bytes."""

    if src is None:
        return Status.NULL_BUFFER, b''

    if isinstance(src, ByteBuffer):
        if src.data is None:
            return Status.NULL_STORE, b''
        return None, src.to_bytes()

    return None, bytes(src)


# Construction

def construct(capacity: int) -> Result[ByteBuffer]:
    """Create an empty buffer able to hold ``capacity`` bytes without growing."""

    if capacity < 0:
        return Result.failure(Status.INVALID_COUNT)

    return Result.success(ByteBuffer(bytearray(capacity + 1), 0, capacity))


def from_bytes(src: Optional[ByteSource], n: Optional[int] = None) -> Result[ByteBuffer]:
    """
    Create a buffer holding a copy of the first ``n`` bytes of ``src``.

    Args:
        src: Bytes-like object or another ByteBuffer
        n: Number of bytes to copy, defaults to all of ``src``

    Returns:
        Result[ByteBuffer]: The new buffer, sized exactly to its content
    """

    error, data = _source_bytes(src)
    if error:
        return Result.failure(error)

    if n is None:
        n = len(data)

    if n < 0:
        return Result.failure(Status.INVALID_COUNT)

    if n > len(data):
        return Result.failure(Status.OUT_OF_RANGE)

    buf = construct(n).value
    buf.data[:n] = data[:n]
    buf.length = n

    return Result.success(buf)


def from_cstr(src: Optional[Union[bytes, bytearray]]) -> Result[ByteBuffer]:
    """Create a buffer from null-terminated data, stopping at the first zero byte."""

    if src is None:
        return Result.failure(Status.NULL_BUFFER)

    return from_bytes(bytes(src).split(b'\0', 1)[0])


def from_buffer(other: Optional[ByteBuffer]) -> Result[ByteBuffer]:
    """Create an independent full copy of another buffer."""

    error = _check_buffer(other)
    if error:
        return Result.failure(error)

    return from_bytes(other.data, other.length)


def from_subrange(other: Optional[ByteBuffer], start: int, end: int) -> Result[ByteBuffer]:
    """Create a buffer from the inclusive byte range ``[start, end]`` of another."""

    error = _check_buffer(other)
    if error:
        return Result.failure(error)

    if not 0 <= start <= end < other.length:
        return Result.failure(Status.OUT_OF_RANGE)

    return from_bytes(other.data[start:end + 1])


def release(buf: Optional[ByteBuffer]) -> Result[None]:
    """Free the storage and reset the buffer to the released state."""

    if buf is None:
        return Result.failure(Status.NULL_BUFFER)

    buf.data = None
    buf.length = 0
    buf.capacity = 0

    return Result.success()


def reinit(buf: Optional[ByteBuffer], source: Union[int, ByteSource]) -> Result[None]:
    """
    Release ``buf`` and rebuild it in place.

    ``source`` is either a capacity or the content to copy. On failure the
    buffer stays released.
    """

    if buf is None:
        return Result.failure(Status.NULL_BUFFER)

    release(buf)

    if isinstance(source, int):
        rebuilt = construct(source)
    else:
        rebuilt = from_bytes(source)

    if not rebuilt.ok:
        return Result.failure(rebuilt.status)

    fresh = rebuilt.value
    buf.data, buf.length, buf.capacity = fresh.data, fresh.length, fresh.capacity

    return Result.success()


# Capacity management

def resize(buf: Optional[ByteBuffer], new_capacity: int) -> Result[None]:
    """
    Change the capacity of a buffer.

    Shrinking never reallocates: the length is truncated and every byte past
    the new length is cleared. Growing reallocates to exactly
    ``new_capacity + 1`` bytes.
    """

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    if new_capacity < 0:
        return Result.failure(Status.INVALID_COUNT)

    if new_capacity <= buf.capacity:
        new_length = min(buf.length, new_capacity)
        buf.data[new_length:] = bytes(len(buf.data) - new_length)
        buf.length = new_length
        buf.capacity = new_capacity
        return Result.success()

    store = bytearray(new_capacity + 1)
    store[:buf.length] = buf.data[:buf.length]
    log.debug("Reallocated buffer from %d to %d bytes", buf.capacity, new_capacity)

    buf.data = store
    buf.capacity = new_capacity
    buf.data[buf.length] = 0

    return Result.success()


def clear(buf: Optional[ByteBuffer]) -> Result[None]:
    """Zero the whole store and set the length to 0, keeping the capacity."""

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    buf.data[:] = bytes(len(buf.data))
    buf.length = 0

    return Result.success()


# Insertion

def _insert(buf: ByteBuffer, at: int, src: bytes) -> None:
    n = len(src)
    new_length = buf.length + n

    if new_length > buf.capacity:
        store = bytearray(new_length + 1)
        store[:at] = buf.data[:at]
        store[at:at + n] = src
        store[at + n:new_length] = buf.data[at:buf.length]
        log.debug("Reallocated buffer from %d to %d bytes", buf.capacity, new_length)

        buf.data = store
        buf.capacity = new_length
    else:
        buf.data[at + n:new_length] = buf.data[at:buf.length]
        buf.data[at:at + n] = src

    buf.length = new_length
    buf.data[buf.length] = 0


def insert_range(buf: Optional[ByteBuffer], at: int, src: Optional[ByteSource],
                 n: Optional[int] = None) -> Result[None]:
    """
    Insert the first ``n`` bytes of ``src`` at offset ``at``.

    Args:
        buf: Buffer to modify
        at: Insertion offset, between 0 and the buffer length inclusive
        src: Bytes-like object or ByteBuffer to insert from
        n: Number of bytes to insert, defaults to all of ``src``

    Returns:
        Result[None]: OK, or the reason nothing was changed
    """

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    error, data = _source_bytes(src)
    if error:
        return Result.failure(error)

    if n is None:
        n = len(data)

    if n <= 0:
        return Result.failure(Status.INVALID_COUNT)

    if n > len(data) or not 0 <= at <= buf.length:
        return Result.failure(Status.OUT_OF_RANGE)

    _insert(buf, at, data[:n])

    return Result.success()


def insert_byte(buf: Optional[ByteBuffer], at: int, value: int) -> Result[None]:
    """Insert a single byte. Inserting a zero byte is a no-op."""

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    if not 0 <= value <= 255 or not 0 <= at <= buf.length:
        return Result.failure(Status.OUT_OF_RANGE)

    if value == 0:
        return Result.success()

    return insert_range(buf, at, bytes([value]))


def insert_bytes(buf: Optional[ByteBuffer], at: int, src: Optional[ByteSource]) -> Result[None]:
    return insert_range(buf, at, src)


def insert_buffer(buf: Optional[ByteBuffer], at: int, other: Optional[ByteBuffer]) -> Result[None]:
    error = _check_buffer(other)
    if error:
        return Result.failure(error)

    return insert_range(buf, at, other)


def append_byte(buf: Optional[ByteBuffer], value: int) -> Result[None]:
    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    return insert_byte(buf, buf.length, value)


def append_bytes(buf: Optional[ByteBuffer], src: Optional[ByteSource]) -> Result[None]:
    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    return insert_range(buf, buf.length, src)


def append_buffer(buf: Optional[ByteBuffer], other: Optional[ByteBuffer]) -> Result[None]:
    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    return insert_buffer(buf, buf.length, other)


# Removal and replacement

def remove_range(buf: Optional[ByteBuffer], start: int, end: int) -> Result[None]:
    """Remove the inclusive range ``[start, end]`` and clear the vacated tail."""

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    if not 0 <= start <= end < buf.length:
        return Result.failure(Status.OUT_OF_RANGE)

    old_length = buf.length
    removed = end - start + 1

    buf.data[start:old_length - removed] = buf.data[end + 1:old_length]
    buf.length = old_length - removed
    buf.data[buf.length:old_length] = bytes(removed)

    return Result.success()


def replace(buf: Optional[ByteBuffer], new_contents: Optional[ByteSource],
            start: int, end: int) -> Result[None]:
    """
    Replace the inclusive range ``[start, end]`` with ``new_contents``.

    Not transactional: if the insertion fails after the removal, the buffer
    is left with the range removed.
    """

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    error, data = _source_bytes(new_contents)
    if error:
        return Result.failure(error)

    removed = remove_range(buf, start, end)
    if not removed.ok:
        return removed

    if not data:
        return Result.success()

    return insert_range(buf, start, data)


# Searching

def find(within: Optional[ByteBuffer], needle: Optional[ByteSource],
         from_index: int = 0) -> Result[int]:
    """Return the lowest index >= ``from_index`` where ``needle`` occurs."""

    error = _check_buffer(within)
    if error:
        return Result.failure(error)

    error, pattern = _source_bytes(needle)
    if error:
        return Result.failure(error)

    if not pattern:
        return Result.failure(Status.INVALID_COUNT)

    if not 0 <= from_index < within.length:
        return Result.failure(Status.OUT_OF_RANGE)

    index = within.data.find(pattern, from_index, within.length)
    if index < 0:
        return Result.failure(Status.NO_MATCH)

    return Result.success(index)


def find_last(within: Optional[ByteBuffer], needle: Optional[ByteSource],
              from_index: int = 0) -> Result[int]:
    """Return the last occurrence of ``needle`` at or after ``from_index``."""

    found = find(within, needle, from_index)
    if not found.ok:
        return found

    last = found.value
    while last + 1 < within.length:
        found = find(within, needle, last + 1)
        if not found.ok:
            break
        last = found.value

    return Result.success(last)


def find_replace(buf: Optional[ByteBuffer], old: Optional[ByteSource],
                 new: Optional[ByteSource], from_index: int = 0) -> Result[int]:
    """Replace the first occurrence of ``old`` and return where it was found."""

    error, replacement = _source_bytes(new)
    if error:
        return Result.failure(error)

    found = find(buf, old, from_index)
    if not found.ok:
        return found

    _, pattern = _source_bytes(old)
    position = found.value
    replaced = replace(buf, replacement, position, position + len(pattern) - 1)
    if not replaced.ok:
        return Result.failure(replaced.status)

    return Result.success(position)


def find_replace_all(buf: Optional[ByteBuffer], old: Optional[ByteSource],
                     new: Optional[ByteSource], from_index: int = 0) -> Result[int]:
    """
    Replace every occurrence of ``old`` at or after ``from_index``.

    Searching resumes after each inserted replacement.

    Returns:
        Result[int]: Number of replacements made
    """

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    for src in (old, new):
        error, _ = _source_bytes(src)
        if error:
            return Result.failure(error)

    _, pattern = _source_bytes(old)
    _, replacement = _source_bytes(new)

    if not pattern:
        return Result.failure(Status.INVALID_COUNT)

    if not 0 <= from_index < buf.length:
        return Result.failure(Status.OUT_OF_RANGE)

    count = 0
    pos = from_index

    while pos < buf.length:
        found = find(buf, pattern, pos)
        if not found.ok:
            break

        position = found.value
        replaced = replace(buf, replacement, position, position + len(pattern) - 1)
        if not replaced.ok:
            return Result.failure(replaced.status)

        pos = position + len(replacement)
        count += 1

    return Result.success(count)


# Accessors

def get(buf: Optional[ByteBuffer], index: int) -> Result[int]:
    """Get the byte at ``index``."""

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    if not 0 <= index < buf.length:
        return Result.failure(Status.OUT_OF_RANGE)

    return Result.success(buf.data[index])


def set_byte(buf: Optional[ByteBuffer], index: int, value: int) -> Result[None]:
    """Overwrite the byte at ``index``."""

    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    if not 0 <= index < buf.length or not 0 <= value <= 255:
        return Result.failure(Status.OUT_OF_RANGE)

    buf.data[index] = value

    return Result.success()


def first(buf: Optional[ByteBuffer]) -> Result[int]:
    return get(buf, 0)


def last(buf: Optional[ByteBuffer]) -> Result[int]:
    if buf is None:
        return Result.failure(Status.NULL_BUFFER)

    return get(buf, buf.length - 1)


def length_of(buf: Optional[ByteBuffer]) -> Result[int]:
    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    return Result.success(buf.length)


def capacity_of(buf: Optional[ByteBuffer]) -> Result[int]:
    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    return Result.success(buf.capacity)


def is_empty(buf: Optional[ByteBuffer]) -> Result[bool]:
    error = _check_buffer(buf)
    if error:
        return Result.failure(error)

    return Result.success(buf.length == 0)
