"""Chainable mutation surface over TextBuffer.

Every TextBuffer mutation primitive returns None, which forces one statement
per edit. FluentString re-exposes each primitive so it returns the receiver,
letting edits be chained into a single expression:

    >>> fluent("my string").push_str(" is a bit longer now").insert_str(
    ...     12, ", maybe,"
    ... ).truncate(33) == "my string is, maybe, a bit longer"
    True

Two variants share the capability and differ only in who owns the storage:

- FluentBuffer owns a private TextBuffer.
- FluentRef is a handle over a caller's TextBuffer; the caller's variable
  sees every edit made through the chain.

The conditional combinators (push_if, push_str_if, truncate_if) are defined
once on FluentString and work on both variants.

Thread Safety:
    No locking. A FluentRef needs exclusive access to its buffer for the
    duration of the chain.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Self

from fluent_string.buffer import TextBuffer


class FluentString:
    """Chainable capability shared by FluentBuffer and FluentRef.

    Each method calls the TextBuffer primitive of the same name on the
    underlying storage and returns ``self``. Errors from the primitive
    propagate unchanged.

    Not instantiated directly; use FluentBuffer, FluentRef or fluent().
    """

    __slots__ = ("_buf",)

    _buf: TextBuffer

    def __init__(self, *args: object, **kwargs: object) -> None:
        # Variants provide their own storage; the base has none to chain over
        msg = f"{type(self).__name__} cannot be instantiated directly; use FluentBuffer, FluentRef or fluent()"
        raise TypeError(msg)

    @property
    def buffer(self) -> TextBuffer:
        """The TextBuffer this value operates on."""
        return self._buf

    # ------------------------------------------------------------------
    # Read surface (delegated)
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._buf.capacity

    def as_str(self) -> str:
        return self._buf.as_str()

    def is_empty(self) -> bool:
        return self._buf.is_empty()

    def startswith(self, prefix: str | tuple[str, ...]) -> bool:
        return self._buf.startswith(prefix)

    def endswith(self, suffix: str | tuple[str, ...]) -> bool:
        return self._buf.endswith(suffix)

    def __len__(self) -> int:
        return len(self._buf)

    def __bool__(self) -> bool:
        return bool(self._buf)

    def __str__(self) -> str:
        return self._buf.as_str()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._buf.as_str()!r}, capacity={self._buf.capacity})"

    def __iter__(self) -> Iterator[str]:
        return iter(self._buf)

    def __contains__(self, item: object) -> bool:
        return item in self._buf

    def __getitem__(self, key: int | slice) -> str:
        return self._buf[key]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FluentString):
            return self._buf == other._buf
        return self._buf.__eq__(other)

    # ------------------------------------------------------------------
    # Chainable primitives
    # ------------------------------------------------------------------

    def clear(self) -> Self:
        """Remove all content.

        Returns:
            self for method chaining
        """
        self._buf.clear()
        return self

    def insert(self, idx: int, ch: str) -> Self:
        """Insert one character at ``idx``.

        Args:
            idx: Position in [0, len]
            ch: Single character

        Returns:
            self for method chaining

        Raises:
            BoundaryError: If idx is outside [0, len]
        """
        self._buf.insert(idx, ch)
        return self

    def insert_str(self, idx: int, string: str) -> Self:
        """Insert ``string`` at ``idx``.

        Returns:
            self for method chaining

        Raises:
            BoundaryError: If idx is outside [0, len]
        """
        self._buf.insert_str(idx, string)
        return self

    def push(self, ch: str) -> Self:
        """Append one character.

        Returns:
            self for method chaining
        """
        self._buf.push(ch)
        return self

    def push_str(self, string: str) -> Self:
        """Append ``string``.

        Returns:
            self for method chaining
        """
        self._buf.push_str(string)
        return self

    def replace_range(self, span: slice | range, replace_with: str) -> Self:
        """Splice ``replace_with`` over the characters addressed by ``span``.

        Args:
            span: ``slice(start, stop)`` or ``range(start, stop)``; slice
                ends may be None for an open-ended span
            replace_with: Replacement text

        Returns:
            self for method chaining

        Raises:
            BoundaryError: If the span is reversed or out of bounds
        """
        self._buf.replace_range(span, replace_with)
        return self

    def reserve(self, additional: int) -> Self:
        """Ensure room for at least ``additional`` more characters.

        Returns:
            self for method chaining
        """
        self._buf.reserve(additional)
        return self

    def reserve_exact(self, additional: int) -> Self:
        """Ensure room for exactly ``additional`` more characters.

        Returns:
            self for method chaining
        """
        self._buf.reserve_exact(additional)
        return self

    def retain(self, predicate: Callable[[str], bool]) -> Self:
        """Keep only characters for which ``predicate`` returns true.

        The predicate runs once per character, in order.

        Returns:
            self for method chaining
        """
        self._buf.retain(predicate)
        return self

    def shrink_to(self, min_capacity: int) -> Self:
        """Lower capacity toward ``min_capacity``, never below the length.

        Returns:
            self for method chaining
        """
        self._buf.shrink_to(min_capacity)
        return self

    def shrink_to_fit(self) -> Self:
        """Lower capacity to the current length.

        Returns:
            self for method chaining
        """
        self._buf.shrink_to_fit()
        return self

    def truncate(self, new_len: int) -> Self:
        """Drop everything past ``new_len``; no-op if new_len >= len.

        Returns:
            self for method chaining
        """
        self._buf.truncate(new_len)
        return self

    def try_reserve(self, additional: int) -> Self:
        """As reserve, but a failed reservation is recoverable.

        Returns:
            self for method chaining

        Raises:
            TryReserveError: If the reservation cannot be satisfied
        """
        self._buf.try_reserve(additional)
        return self

    def try_reserve_exact(self, additional: int) -> Self:
        """As reserve_exact, but a failed reservation is recoverable.

        Returns:
            self for method chaining

        Raises:
            TryReserveError: If the reservation cannot be satisfied
        """
        self._buf.try_reserve_exact(additional)
        return self

    # ------------------------------------------------------------------
    # Conditional combinators
    # ------------------------------------------------------------------

    def push_if(self, ch: str, predicate: Callable[[Self, str], bool]) -> Self:
        """Append ``ch`` only if ``predicate(self, ch)`` is true.

        The predicate sees the buffer as it was before the push.

        Example:
            >>> words = FluentBuffer()
            >>> for word in ["a", "b"]:
            ...     _ = words.push_if(",", lambda s, _c: bool(s)).push_str(word)
            >>> str(words)
            'a,b'

        Returns:
            self for method chaining
        """
        if predicate(self, ch):
            return self.push(ch)
        return self

    def push_str_if(self, string: str, predicate: Callable[[Self, str], bool]) -> Self:
        """Append ``string`` only if ``predicate(self, string)`` is true.

        Returns:
            self for method chaining
        """
        if predicate(self, string):
            return self.push_str(string)
        return self

    def truncate_if(self, predicate: Callable[[Self], int | None]) -> Self:
        """Truncate to the length ``predicate(self)`` returns, if any.

        A None result leaves the buffer unchanged.

        Example:
            >>> fluent("hey you").truncate_if(
            ...     lambda s: len(s) - 4 if s.endswith(" you") else None
            ... ) == "hey"
            True

        Returns:
            self for method chaining
        """
        new_len = predicate(self)
        if new_len is None:
            return self
        return self.truncate(new_len)


class FluentBuffer(FluentString):
    """Owned fluent text buffer.

    Holds its own TextBuffer; constructing one from a str copies the text.

    Usage:
            >>> FluentBuffer("this is a string").replace_range(
            ...     slice(7, 9), " not your"
            ... ).build()
            'this is not your string'

    """

    __slots__ = ()

    def __init__(self, text: str = "") -> None:
        """Initialize with a private copy of ``text``."""
        self._buf = TextBuffer(text)

    @classmethod
    def with_capacity(cls, capacity: int) -> Self:
        """Create an empty owned buffer with room for ``capacity`` characters."""
        return cls.from_buffer(TextBuffer.with_capacity(capacity))

    @classmethod
    def from_buffer(cls, buffer: TextBuffer) -> Self:
        """Take over ``buffer`` as this value's storage.

        The caller hands the buffer over and should not keep mutating it.
        """
        if not isinstance(buffer, TextBuffer):
            msg = f"expected TextBuffer, got {type(buffer).__name__}"
            raise TypeError(msg)
        obj = cls.__new__(cls)
        obj._buf = buffer
        return obj

    def into_buffer(self) -> TextBuffer:
        """Hand the underlying storage back out at the end of a chain."""
        return self._buf

    def build(self) -> str:
        """Return the final text."""
        return self._buf.as_str()


class FluentRef(FluentString):
    """Mutable handle over a caller-owned TextBuffer.

    Edits go straight to the referenced buffer:

            >>> buf = TextBuffer("hey")
            >>> _ = FluentRef(buf).push(",").push_str(" you")
            >>> str(buf)
            'hey, you'

    The handle does not copy or own the storage.
    """

    __slots__ = ()

    def __init__(self, buffer: TextBuffer) -> None:
        """Initialize handle over ``buffer``."""
        if not isinstance(buffer, TextBuffer):
            msg = f"expected TextBuffer, got {type(buffer).__name__}"
            raise TypeError(msg)
        self._buf = buffer


def fluent(target: str | TextBuffer) -> FluentBuffer | FluentRef:
    """Start a chain over ``target``.

    Args:
        target: A str (copied into a new owned FluentBuffer) or a TextBuffer
            (wrapped in a FluentRef so edits land in it)

    Returns:
        FluentBuffer for str input, FluentRef for TextBuffer input

    Raises:
        TypeError: For any other input
    """
    if isinstance(target, TextBuffer):
        return FluentRef(target)
    if isinstance(target, str):
        return FluentBuffer(target)
    msg = f"cannot chain over {type(target).__name__}"
    raise TypeError(msg)
