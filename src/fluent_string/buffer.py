"""Growable, mutable text buffer.

TextBuffer is the mutable counterpart of ``str``: a sequence of characters
that can be inserted into, appended to, spliced and truncated in place, with
an explicit capacity that grows and shrinks under caller control.

Like a list-backed StringBuilder, content is kept as a list of characters and
joined on demand. Every mutation primitive here returns None; the chaining
surface lives in ``fluent_string.fluent``.

Positions:
    Positions are character indices. Every integer in ``[0, len(buf)]`` is a
    boundary. Negative positions and positions past the end raise
    BoundaryError; they are never clamped or wrapped.

Capacity:
    Capacity is counted in characters and is always ``>= len(buf)``. Growth
    caused by inserting content is amortized (at least doubling). The limits
    come from the active BufferConfig.

Thread Safety:
    Not synchronized. A buffer must not be mutated from two threads at once.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

from fluent_string.config import get_buffer_config
from fluent_string.errors import BoundaryError, InvalidTextError, TryReserveError
from fluent_string.utils.logger import get_logger

logger = get_logger(__name__)

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _check_text(text: object) -> str:
    if not isinstance(text, str):
        msg = f"expected str, got {type(text).__name__}"
        raise TypeError(msg)
    match = _SURROGATE_RE.search(text)
    if match is not None:
        msg = f"surrogate code point U+{ord(match.group()):04X} at {match.start()} is not text"
        raise InvalidTextError(msg)
    return text


def _check_char(ch: object) -> str:
    if isinstance(ch, str) and len(ch) != 1:
        msg = f"expected a single character, got {len(ch)} characters"
        raise InvalidTextError(msg)
    return _check_text(ch)


def _check_amount(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)
    return value


def _check_position(name: str, value: object, length: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if not 0 <= value <= length:
        msg = f"{name} {value} is out of bounds for length {length}"
        raise BoundaryError(msg, position=value, length=length)
    return value


class TextBuffer:
    """Growable text buffer with in-place mutation.

    Usage:
            >>> buf = TextBuffer("hey")
            >>> buf.push_str(" you")
            >>> buf.insert(0, "<")
            >>> str(buf)
            '<hey you'
            >>> buf.truncate(4)
            >>> buf == "<hey"
            True

    Thread Safety:
        Not synchronized. Callers own exclusive access while mutating.

    """

    __slots__ = ("_capacity", "_chars")

    def __init__(self, text: str = "") -> None:
        """Initialize buffer holding a copy of ``text``.

        Capacity starts equal to the length of ``text``.

        Raises:
            MemoryError: If text is longer than the configured max_capacity
        """
        _check_text(text)
        limit = get_buffer_config().max_capacity
        if len(text) > limit:
            msg = f"capacity {len(text)} exceeds limit {limit}"
            raise MemoryError(msg)
        self._chars: list[str] = list(text)
        self._capacity: int = len(self._chars)

    @classmethod
    def with_capacity(cls, capacity: int) -> TextBuffer:
        """Create an empty buffer with room for ``capacity`` characters.

        Raises:
            MemoryError: If capacity exceeds the configured max_capacity
        """
        _check_amount("capacity", capacity)
        limit = get_buffer_config().max_capacity
        if capacity > limit:
            msg = f"capacity {capacity} exceeds limit {limit}"
            raise MemoryError(msg)
        buf = cls()
        buf._capacity = capacity
        return buf

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Number of characters the buffer can hold without growing."""
        return self._capacity

    def as_str(self) -> str:
        return "".join(self._chars)

    def is_empty(self) -> bool:
        return not self._chars

    def startswith(self, prefix: str | tuple[str, ...]) -> bool:
        return self.as_str().startswith(prefix)

    def endswith(self, suffix: str | tuple[str, ...]) -> bool:
        return self.as_str().endswith(suffix)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"TextBuffer({self.as_str()!r}, capacity={self._capacity})"

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and item in self.as_str()

    def __getitem__(self, key: int | slice) -> str:
        if isinstance(key, slice):
            return "".join(self._chars[key])
        return self._chars[key]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self._chars == other._chars
        if isinstance(other, str):
            return self.as_str() == other
        return NotImplemented

    # ------------------------------------------------------------------
    # Content mutation
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Remove all content. Capacity is unchanged."""
        self._chars.clear()

    def insert(self, idx: int, ch: str) -> None:
        """Insert a single character at ``idx``.

        Raises:
            BoundaryError: If idx is outside [0, len]
            InvalidTextError: If ch is not exactly one character
        """
        _check_position("idx", idx, len(self._chars))
        _check_char(ch)
        self._grow_for(1)
        self._chars.insert(idx, ch)

    def insert_str(self, idx: int, string: str) -> None:
        """Insert ``string`` at ``idx``, shifting later content right.

        Raises:
            BoundaryError: If idx is outside [0, len]
        """
        _check_position("idx", idx, len(self._chars))
        _check_text(string)
        self._grow_for(len(string))
        self._chars[idx:idx] = string

    def push(self, ch: str) -> None:
        """Append a single character."""
        _check_char(ch)
        self._grow_for(1)
        self._chars.append(ch)

    def push_str(self, string: str) -> None:
        """Append ``string``."""
        _check_text(string)
        self._grow_for(len(string))
        self._chars.extend(string)

    def replace_range(self, span: slice | range, replace_with: str) -> None:
        """Replace the characters addressed by ``span`` with ``replace_with``.

        Args:
            span: ``slice(start, stop)`` or ``range(start, stop)``. A None
                start or stop on a slice leaves that end open.
            replace_with: Replacement text (may be empty)

        Raises:
            BoundaryError: If the span is reversed or leaves [0, len]
            ValueError: If the span has a step other than 1
        """
        length = len(self._chars)
        if isinstance(span, range):
            step, start, stop = span.step, span.start, span.stop
        elif isinstance(span, slice):
            step = span.step
            start = 0 if span.start is None else span.start
            stop = length if span.stop is None else span.stop
        else:
            msg = f"span must be a slice or range, got {type(span).__name__}"
            raise TypeError(msg)
        if step not in (None, 1):
            msg = f"span step must be 1, got {step}"
            raise ValueError(msg)
        _check_position("start", start, length)
        _check_position("stop", stop, length)
        if start > stop:
            msg = f"range start {start} is after range end {stop}"
            raise BoundaryError(msg, position=start, length=length)
        _check_text(replace_with)

        growth = len(replace_with) - (stop - start)
        if growth > 0:
            self._grow_for(growth)
        self._chars[start:stop] = replace_with

    def retain(self, predicate: Callable[[str], bool]) -> None:
        """Keep only the characters for which ``predicate`` returns true.

        The predicate is called exactly once per character, in order, so it
        may carry state (a counter, a toggle). Order of survivors is kept.
        """
        self._chars[:] = [ch for ch in self._chars if predicate(ch)]

    def truncate(self, new_len: int) -> None:
        """Drop everything past ``new_len``. No-op if new_len >= len.

        Raises:
            BoundaryError: If new_len is negative
        """
        if isinstance(new_len, bool) or not isinstance(new_len, int):
            msg = f"new_len must be an int, got {type(new_len).__name__}"
            raise TypeError(msg)
        if new_len < 0:
            msg = f"new_len {new_len} is out of bounds for length {len(self._chars)}"
            raise BoundaryError(msg, position=new_len, length=len(self._chars))
        del self._chars[new_len:]

    # ------------------------------------------------------------------
    # Capacity
    # ------------------------------------------------------------------

    def reserve(self, additional: int) -> None:
        """Ensure room for at least ``additional`` more characters.

        May over-allocate to amortize repeated growth.

        Raises:
            MemoryError: If the request exceeds the configured max_capacity
        """
        _check_amount("additional", additional)
        self._reserve(additional, exact=False, fallible=False)

    def reserve_exact(self, additional: int) -> None:
        """Ensure room for exactly ``additional`` more characters.

        Raises:
            MemoryError: If the request exceeds the configured max_capacity
        """
        _check_amount("additional", additional)
        self._reserve(additional, exact=True, fallible=False)

    def try_reserve(self, additional: int) -> None:
        """As reserve, but raises TryReserveError instead of MemoryError."""
        _check_amount("additional", additional)
        self._reserve(additional, exact=False, fallible=True)

    def try_reserve_exact(self, additional: int) -> None:
        """As reserve_exact, but raises TryReserveError instead of MemoryError."""
        _check_amount("additional", additional)
        self._reserve(additional, exact=True, fallible=True)

    def shrink_to(self, min_capacity: int) -> None:
        """Lower capacity toward ``min_capacity``, never below the length."""
        _check_amount("min_capacity", min_capacity)
        if self._capacity > min_capacity:
            self._set_capacity(max(len(self._chars), min_capacity))

    def shrink_to_fit(self) -> None:
        """Lower capacity to the current length."""
        if self._capacity > len(self._chars):
            self._set_capacity(len(self._chars))

    def _grow_for(self, additional: int) -> None:
        self._reserve(additional, exact=False, fallible=False)

    def _reserve(self, additional: int, *, exact: bool, fallible: bool) -> None:
        length = len(self._chars)
        if self._capacity - length >= additional:
            return

        config = get_buffer_config()
        required = length + additional
        if required > config.max_capacity:
            logger.debug(
                "reservation of %d failed (length=%d, limit=%d)",
                additional,
                length,
                config.max_capacity,
            )
            if fallible:
                raise TryReserveError(additional, length, config.max_capacity)
            msg = (
                f"cannot grow by {additional} characters "
                f"(length {length}, capacity limit {config.max_capacity})"
            )
            raise MemoryError(msg)

        if exact:
            new_capacity = required
        else:
            new_capacity = max(required, 2 * self._capacity, config.min_non_zero_capacity)
            new_capacity = min(new_capacity, config.max_capacity)
        self._set_capacity(new_capacity)

    def _set_capacity(self, capacity: int) -> None:
        logger.debug("capacity %d -> %d (length=%d)", self._capacity, capacity, len(self._chars))
        self._capacity = capacity
