"""
Line-oriented reading of binary files into buffers.
"""

import logging
import os
from contextlib import contextmanager
from typing import BinaryIO, Final, Iterator, Optional, Union

from . import buffer as bufops
from . import buffer_list as listops
from .buffer import ByteBuffer
from .buffer_list import BufferList
from .result import Result, Status

log = logging.getLogger(__name__)

INITIAL_LINE_WINDOW: Final[int] = 256


class LineFile:
    """An open binary file plus the offset of the next unread line."""

    def __init__(self, handle: Optional[BinaryIO], cursor: int = 0) -> None:
        self.handle = handle
        self.cursor = cursor

    def is_open(self) -> bool:
        return self.handle is not None and not getattr(self.handle, 'closed', False)

    def close(self) -> None:
        """Close the underlying handle."""

        if self.handle is None:
            return

        self.handle.close()
        self.handle = None


@contextmanager
def open_line_file(path: Union[str, 'os.PathLike[str]']) -> Iterator[LineFile]:
    """Open ``path`` for binary line reading and close it on exit."""

    line_file = LineFile(open(path, 'rb'))
    try:
        yield line_file
    finally:
        line_file.close()


def next_line(file: Optional[LineFile]) -> Result[ByteBuffer]:
    """
    Read the line starting at the file cursor.

    The read window starts at INITIAL_LINE_WINDOW bytes and doubles until it
    holds a line feed or reaches the end of the file. One trailing line feed
    is stripped; a carriage return before it is kept. The cursor moves past
    everything consumed, line feed included.

    Returns:
        Result[ByteBuffer]: The line, END_OF_INPUT once the file is exhausted,
        or NULL_FILE for a missing or closed handle
    """

    if file is None or not file.is_open():
        return Result.failure(Status.NULL_FILE)

    window = INITIAL_LINE_WINDOW

    while True:
        file.handle.seek(file.cursor)
        chunk = file.handle.read(window)

        newline = chunk.find(b'\n')
        if newline >= 0:
            chunk = chunk[:newline + 1]
            break

        if len(chunk) < window:
            break

        window *= 2

    if not chunk:
        return Result.failure(Status.END_OF_INPUT)

    if window > INITIAL_LINE_WINDOW:
        log.debug("Line at offset %d needed a %d byte window", file.cursor, window)

    file.cursor += len(chunk)

    if chunk.endswith(b'\n'):
        chunk = chunk[:-1]

    return bufops.from_bytes(chunk)


def lines_from_file(file: Optional[LineFile]) -> Result[BufferList]:
    """Read every remaining line of ``file`` into a list."""

    if file is None or not file.is_open():
        return Result.failure(Status.NULL_FILE)

    lines = listops.construct(1).value

    while True:
        line = next_line(file)
        if not line.ok:
            break

        listops.push(lines, line.value)
        bufops.release(line.value)

    if line.status is not Status.END_OF_INPUT:
        listops.release(lines)
        return Result.failure(line.status)

    return Result.success(lines)


def lines_from_path(path: Union[str, 'os.PathLike[str]']) -> Result[BufferList]:
    """Read every line of the file at ``path``; unreadable paths give NULL_FILE."""

    try:
        with open_line_file(path) as line_file:
            return lines_from_file(line_file)
    except OSError as e:
        log.warning("Cannot read %s: %s", path, e)
        return Result.failure(Status.NULL_FILE)
