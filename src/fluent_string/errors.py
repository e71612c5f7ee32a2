"""Exception classes for fluent_string.

Two tiers of failure:

- Misuse (bad positions, non-text input) raises immediately and is not
  meant to be recovered from: BoundaryError, InvalidTextError.
- Reservation failure on the fallible ``try_reserve*`` operations raises
  TryReserveError, which callers are expected to catch.

Exhaustion on the non-fallible reserve paths raises the built-in MemoryError.
"""

from __future__ import annotations


class FluentStringError(Exception):
    """Base exception for all fluent_string errors.

    Subclass this for specific error categories.
    """

    pass


class BoundaryError(FluentStringError, IndexError):
    """Position or range outside the buffer.

    Raised by insert, insert_str, replace_range and truncate when a position
    falls outside ``[0, len]`` or a range is reversed. Positions are never
    clamped.
    """

    def __init__(self, message: str, position: int | None = None, length: int | None = None) -> None:
        """Initialize boundary error.

        Args:
            message: Description of the violation
            position: Offending position (optional)
            length: Buffer length at the time of the call (optional)
        """
        self.position = position
        self.length = length
        super().__init__(message)


class InvalidTextError(FluentStringError, ValueError):
    """Input that would leave the buffer holding something other than text.

    Raised for character arguments that are not exactly one character and
    for content containing surrogate code points.
    """

    pass


class TryReserveError(FluentStringError):
    """A reservation could not be satisfied.

    Only raised by try_reserve and try_reserve_exact.
    """

    def __init__(self, additional: int, length: int, limit: int) -> None:
        """Initialize reservation error.

        Args:
            additional: Number of extra characters requested
            length: Buffer length at the time of the request
            limit: Maximum capacity in effect
        """
        self.additional = additional
        self.length = length
        self.limit = limit
        super().__init__(
            f"cannot grow by {additional} characters "
            f"(length {length}, capacity limit {limit})"
        )
