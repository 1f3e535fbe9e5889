"""Debug logging utility."""

import sys
from datetime import datetime

from claude_notifier.utils.config import Config, get_notifier_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_notifier_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_file = _get_config().log_file
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _echo(line: str):
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug(category: str, message: str, echo: bool = True, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'tui', 'config', 'sound'
        message: Debug message
        echo: Also print to stderr. The menu passes False so log lines
            never land inside the painted region.
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[claude-notifier:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)
    if echo:
        _echo(line)


def debug_tui(message: str, **kwargs):
    """Log menu-related debug message (file only)."""
    debug("tui", message, echo=False, **kwargs)


def debug_config(message: str, **kwargs):
    """Log config-related debug message."""
    debug("config", message, **kwargs)


def debug_sound(message: str, **kwargs):
    """Log sound-preview debug message (file only, runs inside the menu)."""
    debug("sound", message, echo=False, **kwargs)


def log_error(category: str, message: str, exc: Exception = None, echo: bool = True):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'tui', 'config'
        message: Error message
        exc: Optional exception to include traceback
        echo: Also print to stderr
    """
    import traceback

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[claude-notifier:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    # Always log to file (errors should never be silent)
    _log_to_file(line)
    if echo:
        _echo(line)
