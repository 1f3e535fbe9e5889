"""Raw terminal mode and raw byte input.

``RawMode`` scopes the terminal's raw input mode to one menu invocation;
``FdByteSource`` reads single bytes from a file descriptor and answers
"is a byte available within N seconds" for escape-sequence resolution.
"""

import os
import selectors
import sys
import termios
import tty
from typing import Optional, Protocol

from claude_notifier.utils.debug import debug_tui

# Opaque result of termios.tcgetattr(); None when attributes were unreadable
TerminalModeSnapshot = Optional[list]


class RawMode:
    """Context manager that puts a terminal into raw input mode.

    Canonical mode and echo are switched off and reads return as soon as
    one byte is available. The original attributes are restored when the
    ``with`` block exits, however it exits.

    Terminal attribute failures are not raised: the menu keeps working in
    whatever mode the terminal is in (typically still echoing).

    Usage::

        with RawMode(sys.stdin.fileno()):
            byte = os.read(fd, 1)
    """

    def __init__(self, fd: Optional[int] = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._snapshot: TerminalModeSnapshot = None
        self._enabled = False

    @property
    def snapshot(self) -> TerminalModeSnapshot:
        return self._snapshot

    def enable(self) -> TerminalModeSnapshot:
        """Switch to raw mode and return the captured original attributes."""
        try:
            self._snapshot = termios.tcgetattr(self.fd)
            raw = termios.tcgetattr(self.fd)
        except (termios.error, OSError) as e:
            debug_tui("tcgetattr failed, raw mode unavailable", fd=self.fd, error=e)
            self._snapshot = None
            return None

        raw[tty.LFLAG] &= ~(termios.ICANON | termios.ECHO)
        raw[tty.CC][termios.VMIN] = 1
        raw[tty.CC][termios.VTIME] = 0

        self._enabled = True
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        except (termios.error, OSError) as e:
            debug_tui("tcsetattr failed, staying in cooked mode", fd=self.fd, error=e)
        return self._snapshot

    def disable(self, snapshot: TerminalModeSnapshot = None) -> None:
        """Restore the attributes captured by enable(). Runs at most once."""
        if not self._enabled:
            return
        self._enabled = False

        original = snapshot if snapshot is not None else self._snapshot
        if original is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, original)
        except (termios.error, OSError) as e:
            debug_tui("failed to restore terminal attributes", fd=self.fd, error=e)

    def __enter__(self) -> "RawMode":
        self.enable()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disable()


class ByteSource(Protocol):
    """Blocking single-byte input with a bounded availability check."""

    def read_byte(self) -> Optional[int]:
        """Block for one byte. None on EOF or a failed read."""
        ...

    def wait_for_byte(self, timeout: float) -> bool:
        """Return True if a byte can be read within ``timeout`` seconds."""
        ...


class FdByteSource:
    """Byte source over a raw file descriptor.

    Uses ``os.read`` rather than ``sys.stdin.read`` so that nothing is
    buffered behind the selector's back: a buffered reader would swallow
    the tail of an escape sequence and the availability check would then
    time out on bytes that already arrived.
    """

    def __init__(self, fd: Optional[int] = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._selector: Optional[selectors.BaseSelector] = selectors.DefaultSelector()
        try:
            self._selector.register(self.fd, selectors.EVENT_READ)
        except (OSError, ValueError) as e:
            # epoll refuses regular files; those are always readable
            debug_tui("fd not pollable, treating as always ready", fd=self.fd, error=e)
            self._selector.close()
            self._selector = None

    def read_byte(self) -> Optional[int]:
        try:
            data = os.read(self.fd, 1)
        except OSError as e:
            debug_tui("read failed", fd=self.fd, error=e)
            return None
        if len(data) != 1:
            return None
        return data[0]

    def wait_for_byte(self, timeout: float) -> bool:
        if self._selector is None:
            return True
        try:
            return bool(self._selector.select(timeout=timeout))
        except OSError as e:
            debug_tui("select failed", fd=self.fd, error=e)
            return False

    def close(self) -> None:
        if self._selector is not None:
            self._selector.unregister(self.fd)
            self._selector.close()
            self._selector = None

    def __enter__(self) -> "FdByteSource":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
