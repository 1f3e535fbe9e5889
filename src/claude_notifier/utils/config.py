"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from claude_notifier.utils.constants import (
    DEFAULT_ESCAPE_TIMEOUT_MS,
    SYSTEM_SOUNDS,
    Icon,
    Sound,
)
from claude_notifier.utils.exceptions import ConfigurationError


def get_notifier_dir() -> Path:
    """Get the claude-notifier data directory (XDG-compliant)."""
    if env_dir := os.environ.get("CLAUDE_NOTIFIER_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "claude-notifier"


def _timeout_ms(value) -> float:
    """Escape timeout from config.json, or the default if it isn't a number."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return DEFAULT_ESCAPE_TIMEOUT_MS


class Config:
    """Application configuration."""

    # Keys written to config.json, in addition to "env"
    PERSISTED = (
        "icon",
        "sound",
        "notify_in_headless_mode",
        "debug",
        "escape_timeout_ms",
    )

    def __init__(self, notifier_dir: Optional[Path] = None):
        """Load config from directory."""
        self.notifier_dir = notifier_dir or get_notifier_dir()
        self._config_file = self.notifier_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.icon = Icon.DEFAULT
        self.sound = Sound.DEFAULT
        # Headless sessions (claude -p) stay quiet unless enabled
        self.notify_in_headless_mode = False
        self.debug = False
        self.escape_timeout_ms = DEFAULT_ESCAPE_TIMEOUT_MS
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.icon = data.get("icon", Icon.DEFAULT)
                self.sound = data.get("sound", Sound.DEFAULT)
                self.notify_in_headless_mode = data.get(
                    "notify_in_headless_mode", False
                )
                self.debug = data.get("debug", False)
                self.escape_timeout_ms = _timeout_ms(data.get("escape_timeout_ms"))
                env = data.get("env", {})
                self.env = env if isinstance(env, dict) else {}
            except (json.JSONDecodeError, IOError, AttributeError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first config.env, then shell CLAUDE_NOTIFIER_* vars."""
        prefix = "CLAUDE_NOTIFIER_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both CLAUDE_NOTIFIER_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name not in self.PERSISTED:
                    continue
                # Convert value based on current attribute type
                current = getattr(self, attr_name)
                value = str(value)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, (int, float)):
                    try:
                        setattr(self, attr_name, type(current)(value))
                    except ValueError:
                        pass
                else:
                    setattr(self, attr_name, value)

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        before = {key: getattr(self, key) for key in self.PERSISTED}
        apply_env_dict(shell_env)

        # Shell overrides last one session: key -> (file value, override value)
        self._session_overrides = {
            key: (before[key], getattr(self, key))
            for key in self.PERSISTED
            if getattr(self, key) != before[key]
        }

    def to_dict(self) -> dict:
        """Settings as a plain dict (the config.json payload).

        A value that still equals its shell override is written back as the
        file value, so CLAUDE_NOTIFIER_* variables never end up persisted.
        """
        data = {}
        for key in self.PERSISTED:
            value = getattr(self, key)
            if key in self._session_overrides:
                file_value, override = self._session_overrides[key]
                if value == override:
                    value = file_value
            data[key] = value
        data["env"] = self.env
        return data

    def save(self):
        """Save config to file."""
        self.notifier_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(
            json.dumps(self.to_dict(), indent=2, sort_keys=True) + "\n"
        )

    def set_icon(self, icon: str):
        """Select an icon variant (not persisted until save())."""
        if icon not in Icon.ALL:
            raise ConfigurationError(f"Unknown icon variant: {icon}")
        self.icon = icon
        self._session_overrides.pop("icon", None)

    def set_sound(self, sound: str):
        """Select a notification sound (not persisted until save())."""
        if sound not in SYSTEM_SOUNDS:
            raise ConfigurationError(f"Unknown sound: {sound}")
        self.sound = sound
        self._session_overrides.pop("sound", None)

    def set_notify_in_headless_mode(self, enabled: bool):
        """Toggle headless notifications (not persisted until save())."""
        self.notify_in_headless_mode = enabled
        self._session_overrides.pop("notify_in_headless_mode", None)

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self._session_overrides.pop("debug", None)
        self.save()

    @property
    def escape_timeout(self) -> float:
        """Escape-sequence timeout in seconds."""
        return max(self.escape_timeout_ms, 0) / 1000

    @property
    def config_file(self) -> Path:
        """Path to config.json."""
        return self._config_file

    @property
    def log_file(self) -> Path:
        """Path to debug log."""
        return self.notifier_dir / "debug.log"
