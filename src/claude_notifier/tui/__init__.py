"""Interactive terminal selection menu."""

from claude_notifier.tui.keys import KeyDecoder, KeyEvent
from claude_notifier.tui.menu import SelectionController, select_menu
from claude_notifier.tui.models import MenuItem, MenuStatus, SelectionState
from claude_notifier.tui.renderer import MenuRenderer
from claude_notifier.tui.terminal import FdByteSource, RawMode

__all__ = [
    "FdByteSource",
    "KeyDecoder",
    "KeyEvent",
    "MenuItem",
    "MenuRenderer",
    "MenuStatus",
    "RawMode",
    "SelectionController",
    "SelectionState",
    "select_menu",
]
