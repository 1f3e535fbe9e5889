"""Inline menu rendering.

The menu owns a fixed block of lines below the cursor. Every repaint moves
the cursor back to the top of that block, clears to the end of the screen
and draws again, so nothing scrolls and the rest of the terminal is left
alone. On a terminal too short for every item, only a window of items
around the highlight is drawn. The block is::

    <blank>
    Title
    (hint)
    <blank>
      ❯ item one ✓
        item two
    <blank>
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from claude_notifier.tui.models import MenuItem

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_TO_END = "\033[J"

POINTER = "❯"
CURRENT_MARKER = " ✓"

# Blank, title, hint, blank, trailing blank
CHROME_LINES = 5


def cursor_up(lines: int) -> str:
    """Move the cursor up ``lines`` lines."""
    return f"\033[{lines}A"


class MenuRenderer:
    """Paints a selection menu in place.

    Tracks how many lines the previous paint produced so the next paint
    (or the final clear) erases exactly that region.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)
        self._lines_drawn = 0
        self._cursor_hidden = False

    @property
    def lines_drawn(self) -> int:
        return self._lines_drawn

    @staticmethod
    def line_count(item_count: int) -> int:
        return CHROME_LINES + item_count

    def max_visible_items(self) -> int:
        """Items that fit while the block stays below the top screen row."""
        # One row is left for the cursor after the trailing blank line
        return max(self.console.height - CHROME_LINES - 1, 1)

    def visible_window(
        self, items: Sequence[MenuItem], highlighted_index: int
    ) -> tuple[Sequence[MenuItem], int]:
        """Slice of ``items`` around the highlight that fits the terminal.

        Returns the slice and the highlight's index within it.
        """
        limit = self.max_visible_items()
        if len(items) <= limit:
            return items, highlighted_index
        start = max(0, min(highlighted_index - limit // 2, len(items) - limit))
        return items[start : start + limit], highlighted_index - start

    def _write(self, sequence: str) -> None:
        self.console.file.write(sequence)
        self.console.file.flush()

    def _erase(self) -> None:
        if self._lines_drawn:
            self._write(cursor_up(self._lines_drawn) + CLEAR_TO_END)
            self._lines_drawn = 0

    def build_lines(
        self,
        title: str,
        hint: str,
        items: Sequence[MenuItem],
        highlighted_index: int,
    ) -> list[str]:
        """Rich markup for every line of the menu block."""
        lines = ["", f"[bold]{escape(title)}[/bold]", f"[dim]{escape(hint)}[/dim]", ""]
        for i, item in enumerate(items):
            label = escape(item.label)
            if i == highlighted_index:
                pointer = f"[cyan]{POINTER}[/cyan]"
                label = f"[cyan]{label}[/cyan]"
            else:
                pointer = " "
            marker = f"[green]{CURRENT_MARKER}[/green]" if item.is_current else ""
            lines.append(f"  {pointer} {label}{marker}")
        lines.append("")
        return lines

    def paint(
        self,
        title: str,
        hint: str,
        items: Sequence[MenuItem],
        highlighted_index: int,
    ) -> None:
        """Draw the menu, replacing whatever the previous paint drew."""
        if self._lines_drawn:
            self._erase()
        if not self._cursor_hidden:
            self._write(HIDE_CURSOR)
            self._cursor_hidden = True

        items, highlighted_index = self.visible_window(items, highlighted_index)
        lines = self.build_lines(title, hint, items, highlighted_index)
        for line in lines:
            # One menu line must stay one screen line or the erase step
            # would leave residue behind
            self.console.print(line, no_wrap=True, crop=True, overflow="ellipsis")
        self._lines_drawn = len(lines)

    def clear(self) -> None:
        """Erase the menu and show the cursor again."""
        self._erase()
        self._write(SHOW_CURSOR)
        self._cursor_hidden = False
