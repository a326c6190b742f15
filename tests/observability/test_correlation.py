"""
Test suite for correlation ID context and log record enrichment.

System role: Verification of request tracing helpers
"""

import logging

from studio.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from studio.observability.logger import CorrelationIdFilter


class TestCorrelationContext:
    """Test suite for correlation ID helpers."""

    def test_set_should_keep_given_id(self) -> None:
        assert set_correlation_id("abc") == "abc"
        assert get_correlation_id() == "abc"
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_set_without_id_should_generate_one(self) -> None:
        generated = set_correlation_id()
        assert generated
        assert get_correlation_id() == generated
        clear_correlation_id()

    def test_filter_should_stamp_record(self) -> None:
        record = logging.LogRecord("studio", logging.INFO, __file__, 1, "msg", None, None)
        set_correlation_id("req-42")

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-42"
        clear_correlation_id()
