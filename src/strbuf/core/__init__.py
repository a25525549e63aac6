"""
Core package for byte buffers and tokenization.

This package implements the ByteBuffer type and the operations that mutate
it, the BufferList container, the delimiter tokenizer and line-oriented file
reading. Every operation reports its outcome through a Result.
"""

from .buffer import ByteBuffer
from .buffer_list import BufferList
from .file import LineFile, open_line_file
from .result import Ordering, Result, ResultAccessError, Status
from .tokenizer import split_by_delimiters

__all__ = [
    'ByteBuffer',
    'BufferList',
    'LineFile',
    'open_line_file',
    'Ordering',
    'Result',
    'ResultAccessError',
    'Status',
    'split_by_delimiters',
]
