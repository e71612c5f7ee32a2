"""Shared fixtures for fluent_string tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from fluent_string import FluentBuffer, FluentRef, FluentString, TextBuffer, reset_buffer_config


@pytest.fixture(params=["owned", "ref"])
def make(request: pytest.FixtureRequest) -> Callable[[str], FluentString]:
    """Build either variant over the given text."""
    if request.param == "owned":
        return FluentBuffer
    return lambda text: FluentRef(TextBuffer(text))


@pytest.fixture(params=["owned", "ref"])
def make_with_capacity(request: pytest.FixtureRequest) -> Callable[[int], FluentString]:
    """Build either variant, empty, with the given capacity."""
    if request.param == "owned":
        return FluentBuffer.with_capacity
    return lambda capacity: FluentRef(TextBuffer.with_capacity(capacity))


@pytest.fixture
def clean_config() -> Iterator[None]:
    """Restore the default buffer config after the test."""
    reset_buffer_config()
    yield
    reset_buffer_config()
