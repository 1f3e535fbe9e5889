"""UI utilities for CLI - console and settings display."""

from rich.console import Console

from claude_notifier.utils.config import Config
from claude_notifier.utils.constants import Icon, Sound

console = Console(highlight=False)


def sound_display_name(sound: str) -> str:
    """Human label for a sound name."""
    if sound == Sound.DEFAULT:
        return "Default (system sound)"
    if sound == Sound.NONE:
        return "None (silent)"
    return sound


def icon_display_name(icon: str) -> str:
    """Human label for an icon variant."""
    label = icon.capitalize()
    if icon == Icon.DEFAULT:
        label += " (default)"
    return label


def section_header(title: str, width: int = 40):
    """Print a dim section header like ── Settings ──"""
    padding = (width - len(title) - 4) // 2
    left = "─" * padding
    right = "─" * (width - len(title) - 4 - padding)
    console.print(f"[dim]{left} {title} {right}[/dim]")


def print_settings(config: Config):
    """Print current settings, one per line."""
    headless = config.notify_in_headless_mode
    headless_color = "green" if headless else "yellow"

    section_header("Settings")
    console.print(f"[bold]Icon:[/bold] [cyan]{icon_display_name(config.icon)}[/cyan]")
    console.print(
        f"[bold]Sound:[/bold] [cyan]{sound_display_name(config.sound)}[/cyan]"
    )
    console.print(
        f"[bold]Headless notifications:[/bold] "
        f"[{headless_color}]{'on' if headless else 'off'}[/{headless_color}]"
    )
    console.print(f"[bold]Debug:[/bold] {'on' if config.debug else 'off'}")
    console.print(f"[dim]Config file: {config.config_file}[/dim]")
