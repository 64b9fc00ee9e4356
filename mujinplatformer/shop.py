"""Shop panel and the items it lays out."""

from __future__ import annotations

from dataclasses import dataclass, field

OPEN_X = 0.0
CLOSED_X = -1000.0
ITEM_OFFSET = 100.0
ITEM_SPACING = 100.0


@dataclass
class Item:
    """A purchasable item placed along the shop panel."""

    id_name: str
    price: float
    x: float = 0.0


@dataclass
class Shop:
    """A panel that slides on screen when open and lines up its items."""

    x: float = 50.0
    y: float = 50.0
    width: int = 600
    height: int = 400
    is_open: bool = False
    items: list[Item] = field(default_factory=list)

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def update(self) -> None:
        """Move the panel to its open or hidden place and lay out the items."""
        self.x = OPEN_X if self.is_open else CLOSED_X
        for item, position in zip(self.items, self.item_positions(len(self.items))):
            item.x = position

    def item_positions(self, count: int) -> list[float]:
        start = self.x + ITEM_OFFSET
        return [start + ITEM_SPACING * index for index in range(count)]