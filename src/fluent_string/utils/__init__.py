"""Utility modules for fluent_string.

Provides:
- logger: get_logger for logging
"""

from fluent_string.utils.logger import get_logger

__all__ = [
    "get_logger",
]
