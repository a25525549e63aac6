"""
Growable, owning list of ByteBuffer values.
"""

import logging
from typing import Iterator, List, Optional

from . import buffer as bufops
from .buffer import ByteBuffer
from .result import Result, Status

log = logging.getLogger(__name__)


class BufferList:
    """Owning container of buffers with capacity doubling on push."""

    def __init__(self) -> None:
        self.slots: Optional[List[Optional[ByteBuffer]]] = None
        self.count = 0
        self.capacity = 0

    def is_initialized(self) -> bool:
        return self.slots is not None

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[ByteBuffer]:
        for index in range(self.count):
            yield self.slots[index]

    def to_bytes_list(self) -> List[bytes]:
        """Return the content of every element as bytes."""

        return [item.to_bytes() for item in self]

    def __repr__(self) -> str:
        if self.slots is None:
            return 'BufferList(<released>)'

        return f'BufferList({self.to_bytes_list()!r}, capacity={self.capacity})'


def construct(capacity: int) -> Result[BufferList]:
    """Create an empty list with room for ``capacity`` buffers."""

    if capacity <= 0:
        return Result.failure(Status.INVALID_COUNT)

    blist = BufferList()
    blist.slots = [None] * capacity
    blist.capacity = capacity

    return Result.success(blist)


def release(blist: Optional[BufferList]) -> Result[None]:
    """Release every element, then the backing slots."""

    if blist is None:
        return Result.failure(Status.NULL_LIST)

    if blist.slots is not None:
        for item in blist.slots[:blist.count]:
            bufops.release(item)

    blist.slots = None
    blist.count = 0
    blist.capacity = 0

    return Result.success()


def resize(blist: Optional[BufferList], new_capacity: int) -> Result[None]:
    """
    Reallocate the backing slots, keeping existing elements.

    A non-positive capacity releases the list. Elements past the new capacity
    are released.
    """

    if blist is None:
        return Result.failure(Status.NULL_LIST)

    if new_capacity <= 0:
        return release(blist)

    if blist.slots is None:
        fresh = construct(new_capacity).value
        blist.slots, blist.capacity = fresh.slots, fresh.capacity
        return Result.success()

    kept = min(blist.count, new_capacity)
    for item in blist.slots[kept:blist.count]:
        bufops.release(item)

    slots: List[Optional[ByteBuffer]] = [None] * new_capacity
    slots[:kept] = blist.slots[:kept]
    log.debug("Resized buffer list from %d to %d slots", blist.capacity, new_capacity)

    blist.slots = slots
    blist.count = kept
    blist.capacity = new_capacity

    return Result.success()


def push(blist: Optional[BufferList], buf: Optional[ByteBuffer]) -> Result[None]:
    """
    Append a copy of ``buf``.

    The caller keeps ownership of ``buf`` and must release it separately.
    An uninitialized list starts with capacity 1; a full list doubles.
    """

    if blist is None:
        return Result.failure(Status.NULL_LIST)

    copied = bufops.from_buffer(buf)
    if not copied.ok:
        return Result.failure(copied.status)

    if blist.slots is None:
        resize(blist, 1)
    elif blist.count >= blist.capacity:
        resize(blist, blist.capacity * 2)

    assert blist.count < blist.capacity

    blist.slots[blist.count] = copied.value
    blist.count += 1

    return Result.success()


def get(blist: Optional[BufferList], index: int) -> Result[ByteBuffer]:
    """Return a reference to the element at ``index``."""

    if blist is None:
        return Result.failure(Status.NULL_LIST)

    if blist.slots is None:
        return Result.failure(Status.NULL_STORE)

    if not 0 <= index < blist.count:
        return Result.failure(Status.OUT_OF_RANGE)

    return Result.success(blist.slots[index])
