"""Decode raw terminal bytes into menu key events."""

from enum import Enum
from typing import Optional

from readchar import key

from claude_notifier.tui.terminal import ByteSource, FdByteSource
from claude_notifier.utils.constants import DEFAULT_ESCAPE_TIMEOUT_MS
from claude_notifier.utils.debug import debug_tui

CSI_INTRODUCER = "["
TIMED_OUT = -1

_ENTER_KEYS = frozenset({key.ENTER, key.CR, key.LF})


class KeyEvent(Enum):
    """Logical keys understood by the selection menu."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    SPACE = "space"
    OTHER = "other"


_ARROWS = {
    key.UP: KeyEvent.UP,
    key.DOWN: KeyEvent.DOWN,
}


class KeyDecoder:
    """Turns a blocking byte stream into KeyEvents.

    A lone ESC and the first byte of an arrow key (``ESC [ A``) look the
    same. After ESC the decoder waits at most ``escape_timeout`` seconds
    for each continuation byte; if none shows up the keypress was a plain
    Escape. The continuation bytes may arrive in separate reads.
    """

    def __init__(
        self,
        source: Optional[ByteSource] = None,
        escape_timeout: float = DEFAULT_ESCAPE_TIMEOUT_MS / 1000,
    ):
        self.source = source if source is not None else FdByteSource()
        self.escape_timeout = escape_timeout

    def next(self) -> KeyEvent:
        """Block until one key has been read and return it."""
        byte = self.source.read_byte()
        if byte is None:
            return KeyEvent.OTHER

        char = chr(byte)
        if char == key.ESC:
            return self._read_escape_sequence()
        if char in _ENTER_KEYS:
            return KeyEvent.ENTER
        if char == key.SPACE:
            return KeyEvent.SPACE
        return KeyEvent.OTHER

    def _read_continuation(self) -> Optional[int]:
        """Next byte of an escape sequence.

        Returns TIMED_OUT if nothing arrived within escape_timeout, None if
        the read itself failed.
        """
        if not self.source.wait_for_byte(self.escape_timeout):
            return TIMED_OUT
        return self.source.read_byte()

    def _read_escape_sequence(self) -> KeyEvent:
        second = self._read_continuation()
        if second == TIMED_OUT:
            return KeyEvent.ESCAPE
        if second is None:
            return KeyEvent.OTHER
        if chr(second) != CSI_INTRODUCER:
            debug_tui("unrecognized escape sequence", byte=hex(second))
            return KeyEvent.OTHER

        final = self._read_continuation()
        if final == TIMED_OUT:
            return KeyEvent.ESCAPE
        if final is None:
            return KeyEvent.OTHER

        sequence = key.ESC + CSI_INTRODUCER + chr(final)
        event = _ARROWS.get(sequence, KeyEvent.OTHER)
        if event is KeyEvent.OTHER:
            debug_tui("ignoring CSI sequence", final=hex(final))
        return event
