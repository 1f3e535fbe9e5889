"""claude-notifier - Desktop notifications for Claude Code."""

from importlib.metadata import version

__version__ = version("claude-notifier")

from claude_notifier.tui import MenuItem, select_menu
from claude_notifier.utils.config import Config

__all__ = [
    "Config",
    "MenuItem",
    "select_menu",
]
