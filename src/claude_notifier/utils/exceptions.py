"""Custom exceptions for claude-notifier.

This module defines a hierarchy of exceptions for different error types:
- NotifierError: Base exception for all claude-notifier errors
- ConfigurationError: Configuration related errors
- TerminalError: The terminal cannot host an interactive menu
- MenuError: Invalid input handed to a selection menu
"""


class NotifierError(Exception):
    """Base exception for all claude-notifier errors.

    All claude-notifier exceptions inherit from this class, allowing
    callers to catch all of them with a single except clause.
    """

    pass


class ConfigurationError(NotifierError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unknown icon variant
    - Unknown sound name
    """

    pass


class TerminalError(NotifierError):
    """Raised when an interactive terminal is required but not available."""

    pass


class MenuError(NotifierError):
    """Raised for menus that cannot be shown, e.g. with no items."""

    pass
