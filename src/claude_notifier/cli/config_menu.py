"""Interactive configuration menus.

The main menu and each submenu are separate ``select_menu`` calls: a
submenu runs (and gives the terminal back) before the main menu is drawn
again.
"""

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Optional

from claude_notifier.cli.ui import icon_display_name, sound_display_name
from claude_notifier.tui import MenuItem, select_menu
from claude_notifier.utils.config import Config
from claude_notifier.utils.constants import (
    SOUND_MENU_HINT,
    SYSTEM_SOUNDS,
    SYSTEM_SOUNDS_DIR,
    Icon,
    Sound,
)
from claude_notifier.utils.debug import debug_sound

# select_menu, or a stand-in with the same signature
SelectFn = Callable[..., Optional[str]]

MAIN_MENU_TITLE = "Claude Notifier Configuration"
MAIN_MENU_ENTRIES = [
    ("Icon color", "icon"),
    ("Notification sound", "sound"),
    ("Headless mode notifications", "headless"),
    ("Done", "done"),
]


def preview_sound(sound: str) -> None:
    """Play a system sound without waiting for it to finish.

    "default" and "none" have nothing to preview. Needs macOS afplay;
    elsewhere this is a no-op.
    """
    if sound in (Sound.DEFAULT, Sound.NONE):
        return

    player = shutil.which("afplay")
    path = Path(SYSTEM_SOUNDS_DIR) / f"{sound}.aiff"
    if player is None or not path.exists():
        debug_sound("cannot preview", sound=sound, player=player)
        return

    subprocess.Popen(
        [player, str(path)],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    debug_sound("previewing", sound=sound)


def icon_submenu(config: Config, select: SelectFn = select_menu) -> None:
    """Pick the notification icon color."""
    current = config.icon
    initial_index = Icon.ALL.index(current) if current in Icon.ALL else 0
    items = [
        MenuItem(icon_display_name(icon), icon, is_current=icon == current)
        for icon in Icon.ALL
    ]

    selected = select(
        "Icon Color", items, initial_index, escape_timeout=config.escape_timeout
    )
    if selected is not None:
        config.set_icon(selected)


def sound_submenu(config: Config, select: SelectFn = select_menu) -> None:
    """Pick the notification sound. Space plays the highlighted one."""
    current = config.sound
    initial_index = SYSTEM_SOUNDS.index(current) if current in SYSTEM_SOUNDS else 0
    items = [
        MenuItem(sound_display_name(sound), sound, is_current=sound == current)
        for sound in SYSTEM_SOUNDS
    ]

    selected = select(
        "Notification Sound",
        items,
        initial_index,
        on_preview=preview_sound,
        hint=SOUND_MENU_HINT,
        escape_timeout=config.escape_timeout,
    )
    if selected is not None:
        config.set_sound(selected)


def headless_submenu(config: Config, select: SelectFn = select_menu) -> None:
    """Toggle notifications for headless (claude -p) sessions."""
    current = config.notify_in_headless_mode
    items = [
        MenuItem("Enabled", "true", is_current=current),
        MenuItem("Disabled", "false", is_current=not current),
    ]

    selected = select(
        "Headless Mode Notifications",
        items,
        0 if current else 1,
        escape_timeout=config.escape_timeout,
    )
    if selected is not None:
        config.set_notify_in_headless_mode(selected == "true")


SUBMENUS = {
    "icon": icon_submenu,
    "sound": sound_submenu,
    "headless": headless_submenu,
}


def run_config_menu(config: Config, select: SelectFn = select_menu) -> None:
    """Main configuration loop. Edits ``config`` in place; does not save.

    Returns on "Done" or Escape. After a submenu the main menu comes back
    with the same entry highlighted.
    """
    values = [value for _, value in MAIN_MENU_ENTRIES]
    selected_index = 0

    while True:
        items = [MenuItem(label, value) for label, value in MAIN_MENU_ENTRIES]
        choice = select(
            MAIN_MENU_TITLE,
            items,
            selected_index,
            escape_timeout=config.escape_timeout,
        )
        if choice is None or choice == "done":
            return

        selected_index = values.index(choice)
        SUBMENUS[choice](config, select)
