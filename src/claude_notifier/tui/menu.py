"""Interactive single-choice menu.

Reads keys, moves the highlight, and returns the chosen item's value
(``None`` on Escape). Runs entirely on the calling thread; a submenu
opened after a selection is a separate, complete ``select_menu`` call.
"""

import sys
from typing import Callable, ContextManager, Optional, Sequence

from claude_notifier.tui.keys import KeyDecoder, KeyEvent
from claude_notifier.tui.models import MenuItem, SelectionState
from claude_notifier.tui.renderer import MenuRenderer
from claude_notifier.tui.terminal import FdByteSource, RawMode
from claude_notifier.utils.constants import DEFAULT_ESCAPE_TIMEOUT_MS, MENU_HINT
from claude_notifier.utils.debug import debug_tui, log_error
from claude_notifier.utils.exceptions import MenuError

PreviewCallback = Callable[[str], None]


class SelectionController:
    """Drives the read-key / update / repaint loop for one menu."""

    def __init__(
        self,
        title: str,
        decoder: KeyDecoder,
        renderer: MenuRenderer,
        terminal: ContextManager,
        hint: str = MENU_HINT,
    ):
        """Wire up a menu.

        Args:
            title: Heading shown above the items
            decoder: Source of key events
            renderer: Paints the menu block
            terminal: Context manager holding raw mode for the duration of run()
            hint: Key help shown under the title
        """
        self.title = title
        self.hint = hint
        self.decoder = decoder
        self.renderer = renderer
        self.terminal = terminal

    def run(
        self,
        items: Sequence[MenuItem],
        initial_index: int = 0,
        on_preview: Optional[PreviewCallback] = None,
    ) -> Optional[str]:
        """Show the menu until Enter or Escape.

        Args:
            items: Menu entries, at least one
            initial_index: Entry highlighted first
            on_preview: Called with the highlighted value when Space is pressed

        Returns:
            Value of the confirmed item, or None if the menu was cancelled
        """
        if not items:
            raise MenuError("menu has no items")

        state = SelectionState(index=initial_index, count=len(items))
        debug_tui("menu opened", title=self.title, items=len(items), index=state.index)

        with self.terminal:
            self._paint(items, state)
            try:
                while state.active:
                    self.handle_key(self.decoder.next(), items, state, on_preview)
            finally:
                self.renderer.clear()

        debug_tui("menu closed", title=self.title, status=state.status.value)
        return state.value

    def handle_key(
        self,
        event: KeyEvent,
        items: Sequence[MenuItem],
        state: SelectionState,
        on_preview: Optional[PreviewCallback] = None,
    ) -> None:
        """Apply one key event to ``state``, repainting if the highlight moved."""
        if event is KeyEvent.UP:
            state.move_up()
            self._paint(items, state)
        elif event is KeyEvent.DOWN:
            state.move_down()
            self._paint(items, state)
        elif event is KeyEvent.SPACE:
            if on_preview is not None:
                self._preview(on_preview, items[state.index].value)
        elif event is KeyEvent.ENTER:
            state.confirm(items[state.index].value)
        elif event is KeyEvent.ESCAPE:
            state.cancel()
        # KeyEvent.OTHER: nothing changed, nothing to repaint

    def _paint(self, items: Sequence[MenuItem], state: SelectionState) -> None:
        self.renderer.paint(self.title, self.hint, items, state.index)

    def _preview(self, on_preview: PreviewCallback, value: str) -> None:
        try:
            on_preview(value)
        except Exception as e:
            # A broken preview must not take the menu (and raw mode) down with it
            log_error("tui", f"preview failed for {value!r}", e, echo=False)


def select_menu(
    title: str,
    items: Sequence[MenuItem],
    initial_index: int = 0,
    on_preview: Optional[PreviewCallback] = None,
    hint: str = MENU_HINT,
    escape_timeout: float = DEFAULT_ESCAPE_TIMEOUT_MS / 1000,
) -> Optional[str]:
    """Show a menu on the controlling terminal (stdin/stdout).

    The caller must make sure stdin is a TTY.

    Returns:
        Selected item's value, or None if cancelled with Escape
    """
    if not items:
        raise MenuError("menu has no items")

    fd = sys.stdin.fileno()
    with FdByteSource(fd) as source:
        controller = SelectionController(
            title,
            decoder=KeyDecoder(source, escape_timeout=escape_timeout),
            renderer=MenuRenderer(),
            terminal=RawMode(fd),
            hint=hint,
        )
        return controller.run(items, initial_index, on_preview)
