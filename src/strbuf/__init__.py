"""
strbuf: growable byte strings with a quote-aware delimiter tokenizer.
"""

from .core import (
    BufferList,
    ByteBuffer,
    LineFile,
    Ordering,
    Result,
    ResultAccessError,
    Status,
    open_line_file,
    split_by_delimiters,
)

__version__ = '0.1.0'

__all__ = [
    'BufferList',
    'ByteBuffer',
    'LineFile',
    'Ordering',
    'Result',
    'ResultAccessError',
    'Status',
    'open_line_file',
    'split_by_delimiters',
]
