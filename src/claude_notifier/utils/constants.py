"""Constants used throughout claude-notifier."""

# How long to wait for the rest of an escape sequence (in milliseconds).
# Tuned for local terminal emulators; raise it for high-latency sessions.
DEFAULT_ESCAPE_TIMEOUT_MS = 50

MENU_HINT = "(↑/↓ navigate, Enter select, Esc back)"
SOUND_MENU_HINT = "(↑/↓ navigate, Space preview, Enter select, Esc back)"


class Icon:
    """Notification icon variants."""

    BROWN = "brown"
    BLUE = "blue"
    GREEN = "green"

    DEFAULT = BROWN
    ALL = (BROWN, BLUE, GREEN)


class Sound:
    """Notification sound names."""

    DEFAULT = "default"
    NONE = "none"


SYSTEM_SOUNDS = [
    Sound.DEFAULT,
    Sound.NONE,
    "Basso",
    "Blow",
    "Bottle",
    "Frog",
    "Funk",
    "Glass",
    "Hero",
    "Morse",
    "Ping",
    "Pop",
    "Purr",
    "Sosumi",
    "Submarine",
    "Tink",
]

SYSTEM_SOUNDS_DIR = "/System/Library/Sounds"
