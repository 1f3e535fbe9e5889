"""CLI command handlers."""

import sys

from claude_notifier.utils.config import Config, get_notifier_dir
from claude_notifier.utils.debug import debug_config, reload_config
from claude_notifier.utils.exceptions import TerminalError


def stdin_is_interactive() -> bool:
    """True if stdin is a terminal the menu can read keys from."""
    return sys.stdin.isatty()


def cmd_config(args):
    """Run the interactive configuration menu, then save any changes."""
    from claude_notifier.cli import config_menu
    from claude_notifier.cli.ui import console, icon_display_name

    if not stdin_is_interactive():
        raise TerminalError("config command requires an interactive terminal")

    config = Config(get_notifier_dir())
    before = config.to_dict()

    config_menu.run_config_menu(config)

    if config.to_dict() == before:
        console.print("[dim]No changes[/dim]")
        return

    config.save()
    debug_config("saved config", path=config.config_file)
    console.print(f"[green]✓[/green] Saved config to {config.config_file}")
    if config.icon != before["icon"]:
        console.print(f"Icon set to [cyan]{icon_display_name(config.icon)}[/cyan]")


def cmd_config_show(args):
    """Show current settings."""
    from claude_notifier.cli.ui import print_settings

    print_settings(Config(get_notifier_dir()))


def cmd_debug_on(args):
    """Enable debug logging."""
    config = Config(get_notifier_dir())
    config.set_debug(True)
    reload_config()
    print("Debug mode enabled")


def cmd_debug_off(args):
    """Disable debug logging."""
    config = Config(get_notifier_dir())
    config.set_debug(False)
    reload_config()
    print("Debug mode disabled")
