"""Tests for fluent_string utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_bare_names(self) -> None:
        from fluent_string.utils.logger import get_logger

        assert get_logger("capacity").name == "fluent_string.capacity"

    def test_keeps_package_names(self) -> None:
        from fluent_string.utils import get_logger

        assert get_logger("fluent_string").name == "fluent_string"
        assert get_logger("fluent_string.buffer").name == "fluent_string.buffer"

    def test_returns_stdlib_logger(self) -> None:
        from fluent_string.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)


class TestBufferLogging:
    """TextBuffer reports capacity changes at DEBUG."""

    def test_growth_logged(self, caplog) -> None:
        from fluent_string import TextBuffer

        with caplog.at_level(logging.DEBUG, logger="fluent_string.buffer"):
            TextBuffer().push("a")
        assert any("capacity 0 -> 8" in r.getMessage() for r in caplog.records)

    def test_reservation_failure_logged(self, caplog) -> None:
        import pytest

        from fluent_string import BufferConfig, TextBuffer, TryReserveError, buffer_config_context

        with caplog.at_level(logging.DEBUG, logger="fluent_string.buffer"):
            with buffer_config_context(BufferConfig(max_capacity=2)):
                with pytest.raises(TryReserveError):
                    TextBuffer().try_reserve(3)
        assert any("reservation of 3 failed" in r.getMessage() for r in caplog.records)

    def test_quiet_when_no_change(self, caplog) -> None:
        from fluent_string import TextBuffer

        buf = TextBuffer.with_capacity(10)
        with caplog.at_level(logging.DEBUG, logger="fluent_string.buffer"):
            buf.push_str("abc")
            buf.reserve(2)
        assert not caplog.records
