"""
Utility package for conversions, text helpers, searching and hex views.
"""

from .convert import (
    from_int64,
    from_double,
    to_int64,
    to_double,
    is_decimal_text
)
from .hex_utils import (
    parse_hex_string,
    format_offset,
    get_byte_range,
    hex_dump,
    highlight_dump
)
from .search import SearchEngine, SearchResult
from .text import (
    to_upper,
    to_lower,
    trim_leading,
    trim_trailing,
    trim,
    compare
)

__all__ = [
    'from_int64',
    'from_double',
    'to_int64',
    'to_double',
    'is_decimal_text',
    'parse_hex_string',
    'format_offset',
    'get_byte_range',
    'hex_dump',
    'highlight_dump',
    'SearchEngine',
    'SearchResult',
    'to_upper',
    'to_lower',
    'trim_leading',
    'trim_trailing',
    'trim',
    'compare'
]
