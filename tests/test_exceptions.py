"""Tests for custom exceptions."""

import pytest

from claude_notifier.utils.exceptions import (
    ConfigurationError,
    MenuError,
    NotifierError,
    TerminalError,
)


def test_notifier_error_is_base():
    """Test NotifierError is base exception for all claude-notifier errors."""
    assert issubclass(ConfigurationError, NotifierError)
    assert issubclass(TerminalError, NotifierError)
    assert issubclass(MenuError, NotifierError)


def test_exceptions_with_message():
    """Test exceptions can carry messages."""
    err = TerminalError("config command requires an interactive terminal")
    assert str(err) == "config command requires an interactive terminal"

    err = MenuError("menu has no items")
    assert "no items" in str(err)


def test_catch_specific_exception():
    """Test that specific exceptions can be caught."""
    with pytest.raises(ConfigurationError):
        raise ConfigurationError("test")

    with pytest.raises(NotifierError):
        raise MenuError("also caught by base")
