"""
Tests for the console and logging helpers.
"""

import logging

from core.logging import log_debug, log_warning
from core.utils import ccapture, make_bar


def test_make_bar_fills_proportionally():
    """Test that the gauge fills in proportion to the pool."""
    bar = ccapture(make_bar(5, 10))
    assert bar.count("▮") == 5
    assert bar.count("▯") == 5


def test_make_bar_full_and_empty_pools():
    """Test the full gauge and the gauge of a pool with no capacity."""
    assert ccapture(make_bar(10, 10, length=4)).count("▮") == 4
    assert ccapture(make_bar(0, 0, length=4)).count("▯") == 4


def test_log_helpers_append_context(caplog):
    """Test that the context dictionary is appended to the message."""
    with caplog.at_level(logging.DEBUG, logger="resolver"):
        log_warning("Roster too small", {"size": 1})
        log_debug("Plain message")
    messages = [record.getMessage() for record in caplog.records]
    assert "Roster too small (size=1)" in messages
    assert "Plain message" in messages
