"""ContextVar-based buffer configuration for fluent_string.

Holds the capacity policy shared by every TextBuffer in the current context:
the largest capacity a buffer may reach and the floor used for amortized
growth.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from fluent_string.config import BufferConfig, buffer_config_context

    with buffer_config_context(BufferConfig(max_capacity=1024)):
        buf.try_reserve(4096)  # raises TryReserveError

"""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BufferConfig:
    """Immutable buffer configuration.

    Attributes:
        max_capacity: Largest capacity (in characters) a buffer may reach.
            Requests past it fail with TryReserveError on the fallible
            reserve operations and MemoryError everywhere else.
        min_non_zero_capacity: Smallest capacity amortized growth will
            allocate once a buffer grows at all.

    """

    max_capacity: int = sys.maxsize
    min_non_zero_capacity: int = 8

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BufferConfig":
        """Create BufferConfig from dictionary.

        Only includes keys that are valid BufferConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                BufferConfig attribute names.

        Returns:
            New BufferConfig instance with values from dict.

        Example:
            >>> config = BufferConfig.from_dict({"max_capacity": 64, "extra": 1})
            >>> config.max_capacity
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BufferConfig = BufferConfig()

_buffer_config: ContextVar[BufferConfig] = ContextVar(
    "buffer_config",
    default=_DEFAULT_CONFIG,
)


def get_buffer_config() -> BufferConfig:
    """Get current buffer configuration (thread-local)."""
    return _buffer_config.get()


def set_buffer_config(config: BufferConfig) -> None:
    """Set buffer configuration for current context.

    Args:
        config: BufferConfig instance to use for this context.

    """
    _buffer_config.set(config)


def reset_buffer_config() -> None:
    """Reset to default configuration."""
    _buffer_config.set(_DEFAULT_CONFIG)


@contextmanager
def buffer_config_context(config: BufferConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: BufferConfig to use within the context.

    Yields:
        None

    Example:
        >>> from fluent_string import TextBuffer
        >>> with buffer_config_context(BufferConfig(max_capacity=16)):
        ...     TextBuffer().try_reserve(32)
        Traceback (most recent call last):
        ...
        fluent_string.errors.TryReserveError: cannot grow by 32 characters (length 0, capacity limit 16)

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _buffer_config.get()
    _buffer_config.set(config)
    try:
        yield
    finally:
        _buffer_config.set(previous)


__all__ = [
    "BufferConfig",
    "get_buffer_config",
    "set_buffer_config",
    "reset_buffer_config",
    "buffer_config_context",
]
