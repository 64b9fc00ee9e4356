"""Inventory panel with a fixed grid of item slots."""

from __future__ import annotations

from dataclasses import dataclass, field

SLOT_SIZE = 64.0
SLOT_SPACE = 40.0
SLOTS_PER_ROW = 5
SLOTS_PER_COLUMN = 3
SLOT_MARGIN = 50.0
CLOSED_X = -1000.0


@dataclass
class Inventory:
    """A panel that centres itself on screen when open and lays out its slots."""

    x: float = 0.0
    y: float = 0.0
    width: int = 600
    height: int = 400
    is_open: bool = False
    slots: list[tuple[float, float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.slots:
            self.slots = self.slot_positions()

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def update(self, camera_width: float) -> None:
        """Show or hide the panel and move every slot with it."""
        self.x = camera_width / 2 - self.width / 2 if self.is_open else CLOSED_X
        self.slots = self.slot_positions()

    def slot_positions(self) -> list[tuple[float, float]]:
        """Top-left corners of the slots, row by row."""
        step = SLOT_SIZE + SLOT_SPACE
        return [
            (self.x + step * column + SLOT_MARGIN, self.y + step * row + SLOT_MARGIN)
            for row in range(SLOTS_PER_COLUMN)
            for column in range(SLOTS_PER_ROW)
        ]