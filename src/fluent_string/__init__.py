"""
fluent_string — Chainable mutation for growable text buffers

A mutable text buffer whose edits can be chained into one expression, plus
conditional combinators for building delimited text without trailing
separators.

Quick Start:
    >>> from fluent_string import fluent
    >>> fluent("my string").push_str(" is a bit longer now").insert_str(
    ...     12, ", maybe,"
    ... ).truncate(33).build()
    'my string is, maybe, a bit longer'

    >>> # Edit a buffer you already hold, in place
    >>> from fluent_string import TextBuffer
    >>> buf = TextBuffer("hey")
    >>> _ = fluent(buf).push_if(",", lambda s, _c: bool(s)).push_str(" you")
    >>> str(buf)
    'hey, you'

Configuration:
    >>> from fluent_string import BufferConfig, buffer_config_context
    >>> with buffer_config_context(BufferConfig(max_capacity=1024)):
    ...     reserved = fluent("").try_reserve(16)
    >>> reserved.capacity
    16
"""

from fluent_string.buffer import TextBuffer
from fluent_string.config import (
    BufferConfig,
    buffer_config_context,
    get_buffer_config,
    reset_buffer_config,
    set_buffer_config,
)
from fluent_string.errors import (
    BoundaryError,
    FluentStringError,
    InvalidTextError,
    TryReserveError,
)
from fluent_string.fluent import FluentBuffer, FluentRef, FluentString, fluent

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Buffer
    "TextBuffer",
    # Fluent capability
    "FluentString",
    "FluentBuffer",
    "FluentRef",
    "fluent",
    # Errors
    "FluentStringError",
    "BoundaryError",
    "InvalidTextError",
    "TryReserveError",
    # Configuration (ContextVar-based)
    "BufferConfig",
    "get_buffer_config",
    "set_buffer_config",
    "reset_buffer_config",
    "buffer_config_context",
]
