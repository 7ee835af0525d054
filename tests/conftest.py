"""
Pytest configuration for statesharp tests.

This module contains fixtures shared across the test packages.
"""

import pytest

from statesharp import get, modify
from statesharp.common.trace import trace_logger


@pytest.fixture(scope="function", autouse=True)
def reset_trace_logger():
    """Restore the trace logger level around each test."""
    level = trace_logger.logger.level
    yield
    trace_logger.set_level(level)


@pytest.fixture
def initial_states():
    """A spread of integer states to run computations from."""
    return [0, 1, -4, 100]


@pytest.fixture
def counter_program():
    """Increment a counter twice, then read it."""
    return (
        modify(lambda n: n + 1)
        >> (lambda _: modify(lambda n: n + 1))
        >> (lambda _: get())
    )
