"""
Test suite for logging configuration and correlation IDs.
"""

import logging

from entity_gateway.observability import (
    clear_correlation_id,
    configure_logging,
    get_correlation_id,
    set_correlation_id,
)
from entity_gateway.observability.logger import CorrelationIdFilter


def test_set_correlation_id_generates_when_missing():
    value = set_correlation_id()

    assert value
    assert get_correlation_id() == value
    clear_correlation_id()
    assert get_correlation_id() == ""


def test_set_correlation_id_keeps_given_value():
    assert set_correlation_id("req-1") == "req-1"
    clear_correlation_id()


def test_filter_attaches_correlation_id():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    set_correlation_id("req-2")

    assert CorrelationIdFilter().filter(record) is True
    assert record.correlation_id == "req-2"
    clear_correlation_id()


def test_configure_logging_sets_level_and_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug")
        configure_logging("warning")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
