"""
Tests for the top-level statesharp package.
"""

import logging

import statesharp


def test_null_handler_installed():
    """Test that the package logger has a NullHandler attached."""
    handlers = logging.getLogger("statesharp").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_public_names():
    """Test that every name in __all__ is importable from the package."""
    for name in statesharp.__all__:
        assert hasattr(statesharp, name)
