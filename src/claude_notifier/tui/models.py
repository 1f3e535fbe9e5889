"""Data types for the selection menu."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class MenuItem:
    """One selectable line of a menu."""

    label: str
    value: str  # Returned to the caller when this item is confirmed
    is_current: bool = False  # Shows the "current setting" marker


class MenuStatus(Enum):
    """Lifecycle of one menu invocation."""

    ACTIVE = "active"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass
class SelectionState:
    """Highlighted position within a menu of ``count`` items.

    ``index`` always stays in ``[0, count)``; moving past either end wraps.
    """

    index: int
    count: int
    status: MenuStatus = MenuStatus.ACTIVE
    value: Optional[str] = None

    def __post_init__(self):
        if self.count < 1:
            raise ValueError("a menu needs at least one item")
        self.index = min(max(self.index, 0), self.count - 1)

    @property
    def active(self) -> bool:
        return self.status is MenuStatus.ACTIVE

    def move_up(self) -> None:
        self.index = (self.index - 1 + self.count) % self.count

    def move_down(self) -> None:
        self.index = (self.index + 1) % self.count

    def confirm(self, value: str) -> None:
        self.status = MenuStatus.CONFIRMED
        self.value = value

    def cancel(self) -> None:
        self.status = MenuStatus.CANCELLED
        self.value = None
