"""
Utility functions for hex views of buffers.
"""

from typing import Final, List, Optional, Tuple

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import HexdumpLexer

from ..core.buffer import ByteBuffer

BYTES_PER_LINE: Final[int] = 16


def parse_hex_string(hex_str: str) -> Optional[bytes]:
    """
    Parse a hex string into bytes.

    Args:
        hex_str (str): String of hex values (e.g. "FF 00 A5")

    Returns:
        bytes: Parsed bytes or None if invalid
    """

    clean_str = ''.join(hex_str.split())
    if not all(c in '0123456789ABCDEFabcdef' for c in clean_str):
        return None

    try:
        return bytes.fromhex(clean_str)
    except ValueError:
        return None


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}x}"


def get_byte_range(buf: ByteBuffer, start: int, length: int) -> Tuple[bytes, int]:
    """
    Get a range of a buffer's content and the number of bytes returned.

    Args:
        buf (ByteBuffer): Source buffer
        start (int): Starting offset
        length (int): Number of bytes to get

    Returns:
        Tuple[bytes, int]: The bytes and actual length returned
    """

    end = max(start, min(start + length, buf.length))
    return buf.to_bytes()[start:end], end - start


def hex_dump(buf: ByteBuffer, bytes_per_line: int = BYTES_PER_LINE) -> str:
    """Render a buffer's content in the ``hexdump -C`` layout."""

    bytes_per_line = max(1, bytes_per_line)
    lines: List[str] = []

    for offset in range(0, buf.length, bytes_per_line):
        chunk, _ = get_byte_range(buf, offset, bytes_per_line)

        hex_part = ' '.join(f"{b:02x}" for b in chunk)
        hex_part = hex_part.ljust(bytes_per_line * 3 - 1)
        ascii_part = ''.join(chr(b) if 32 <= b <= 126 else '.' for b in chunk)

        lines.append(f"{format_offset(offset)}  {hex_part}  |{ascii_part}|")

    lines.append(format_offset(buf.length))

    return '\n'.join(lines) + '\n'


def highlight_dump(dump: str) -> str:
    """Colourize hex dump text for a terminal."""

    return highlight(dump, HexdumpLexer(), TerminalFormatter())
