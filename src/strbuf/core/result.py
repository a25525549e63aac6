"""
Tagged results returned by every buffer, list, tokenizer and conversion operation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


class Status(Enum):
    """Outcome tag carried by every Result."""

    OK = 'ok'
    NULL_BUFFER = 'null buffer'
    NULL_LIST = 'null list'
    NULL_FILE = 'null file handle'
    NULL_STORE = 'null backing store'
    OUT_OF_RANGE = 'index out of range'
    INVALID_COUNT = 'invalid count'
    CONVERT_INT = 'cannot convert to int64'
    CONVERT_FLOAT = 'cannot convert to double'
    COMPARE_ERROR = 'cannot compare'
    NO_MATCH = 'no match found'
    END_OF_INPUT = 'end of input'


class Ordering(Enum):
    """Result of a lexicographic comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class ResultAccessError(RuntimeError):
    """Raised when the payload of a failed Result is read."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    A status tag plus, on success, exactly one payload.

    The payload is only reachable through ``value`` (or ``unwrap_or``), and
    ``value`` refuses to hand it out unless the status is ``Status.OK``.
    """

    status: Status
    _payload: Optional[T] = field(default=None, repr=False)

    @classmethod
    def success(cls, payload: Any = None) -> 'Result[Any]':
        """Build a successful result."""

        return cls(Status.OK, payload)

    @classmethod
    def failure(cls, status: Status) -> 'Result[Any]':
        """Build a failed result with the given status."""

        assert status is not Status.OK, "failure() needs an error status"
        return cls(status)

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @property
    def value(self) -> T:
        """The payload; raises ResultAccessError unless the result is OK."""

        if self.status is not Status.OK:
            raise ResultAccessError(f"Result has no payload: {self.status.value}")

        return self._payload  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the payload on success, otherwise ``default``."""

        if self.status is not Status.OK:
            return default

        return self._payload  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.ok
