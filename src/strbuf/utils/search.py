"""
Search and replace over a ByteBuffer.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core import buffer as bufops
from ..core.buffer import ByteBuffer
from ..core.result import Result, Status
from .hex_utils import parse_hex_string

log = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Represents a search result with position and match information."""

    position: int
    length: int
    match: bytes


class SearchEngine:
    """Handles byte, hex and text searches in a buffer."""

    def __init__(self, buffer: ByteBuffer) -> None:
        self.buffer = buffer
        self.cursor_pos = 0
        self.last_search: Optional[Tuple[bytes, bool]] = None

    def _haystack(self, case_sensitive: bool) -> Result[ByteBuffer]:
        if case_sensitive:
            return Result.success(self.buffer)

        copy = bufops.from_buffer(self.buffer)
        if copy.ok:
            copy.value.data[:] = copy.value.data.lower()

        return copy

    def _make_result(self, found: Result[int], length: int) -> Result[SearchResult]:
        if not found.ok:
            return Result.failure(found.status)

        position = found.value
        match = bytes(self.buffer.data[position:position + length])

        return Result.success(SearchResult(position, length, match))

    def find_bytes(self, pattern: bytes, start_pos: int = 0,
                   case_sensitive: bool = True) -> Result[SearchResult]:
        """Search for a byte pattern, optionally ignoring ASCII case."""

        haystack = self._haystack(case_sensitive)
        if not haystack.ok:
            return Result.failure(haystack.status)

        needle = pattern if case_sensitive else pattern.lower()
        found = bufops.find(haystack.value, needle, start_pos)

        if not case_sensitive:
            bufops.release(haystack.value)

        return self._make_result(found, len(pattern))

    def find_hex(self, pattern: str, start_pos: int = 0) -> Result[SearchResult]:
        """Search for a hex pattern such as ``"FF 00 A5"``."""

        hex_bytes = parse_hex_string(pattern)
        if hex_bytes is None:
            return Result.failure(Status.INVALID_COUNT)

        return self.find_bytes(hex_bytes, start_pos)

    def find_text(self, text: str, case_sensitive: bool = True,
                  start_pos: int = 0) -> Result[SearchResult]:
        """Search for ASCII text."""

        return self.find_bytes(text.encode('ascii', errors='replace'), start_pos, case_sensitive)

    def find_next(self, pattern: bytes, case_sensitive: bool = True,
                  start_pos: Optional[int] = None) -> Result[SearchResult]:
        """
        Find the next occurrence of a pattern.

        Args:
            pattern (bytes): The pattern to search for
            case_sensitive (bool): Whether to perform case-sensitive search
            start_pos (int): Position to start searching from (defaults to the cursor)

        Returns:
            Result[SearchResult]: The match, or NO_MATCH
        """

        self.last_search = (pattern, case_sensitive)

        if start_pos is None:
            start_pos = self.cursor_pos

        return self.find_bytes(pattern, start_pos, case_sensitive)

    def find_previous(self) -> Result[SearchResult]:
        """Find the last occurrence of the previous search that starts before the cursor."""

        if not self.last_search:
            return Result.failure(Status.NO_MATCH)

        pattern, case_sensitive = self.last_search
        if self.cursor_pos <= 0:
            return Result.failure(Status.NO_MATCH)

        haystack = self._haystack(case_sensitive)
        if not haystack.ok:
            return Result.failure(haystack.status)

        # matches may start before the cursor and end after it
        visible = min(self.cursor_pos + len(pattern) - 1, self.buffer.length)
        window = bufops.from_bytes(haystack.value.data, visible)

        if not case_sensitive:
            bufops.release(haystack.value)

        if not window.ok:
            return Result.failure(window.status)

        needle = pattern if case_sensitive else pattern.lower()
        found = bufops.find_last(window.value, needle, 0)
        bufops.release(window.value)

        return self._make_result(found, len(pattern))

    def find_all(self, pattern: bytes, case_sensitive: bool = True) -> List[SearchResult]:
        """
        Find all occurrences of a pattern, overlapping ones included.

        Args:
            pattern (bytes): The pattern to search for
            case_sensitive (bool): Whether to perform case-sensitive search

        Returns:
            List[SearchResult]: All search results found
        """

        if not pattern:
            return []

        self.last_search = (pattern, case_sensitive)

        haystack = self._haystack(case_sensitive)
        if not haystack.ok:
            return []

        needle = pattern if case_sensitive else pattern.lower()
        results = []
        pos = 0

        while pos < self.buffer.length:
            found = bufops.find(haystack.value, needle, pos)
            if not found.ok:
                break

            result = self._make_result(found, len(pattern)).value
            results.append(result)
            pos = result.position + 1

        if not case_sensitive:
            bufops.release(haystack.value)

        return results

    def replace_next(self, pattern: bytes, replacement: bytes) -> Result[int]:
        """Replace the next occurrence at or after the cursor and move the cursor past it."""

        replaced = bufops.find_replace(self.buffer, pattern, replacement, self.cursor_pos)
        if not replaced.ok:
            return replaced

        self.cursor_pos = replaced.value + len(replacement)

        return replaced

    def replace_all(self, pattern: bytes, replacement: bytes) -> Result[int]:
        """
        Replace all occurrences of a pattern.

        Returns:
            Result[int]: Number of replacements made
        """

        if self.buffer.length == 0:
            return Result.success(0)

        count = bufops.find_replace_all(self.buffer, pattern, replacement, 0)
        if count.ok:
            log.debug("Replaced %d occurrences of %r", count.value, pattern)

        return count
