"""Axis-aligned rectangle collision detection and resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its top-left corner and size."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def overlaps(self, other: Rect) -> bool:
        """Return True when the two rectangles share some area."""
        return check_collision(self, other)


class ColSide(IntEnum):
    """Side of the moving rectangle that hit the other one."""

    NONE = 0
    TOP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


@dataclass
class Body:
    """A moving thing with a position, size, velocity and ground contact."""

    x: float
    y: float
    width: int = 0
    height: int = 0
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    on_ground: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(int(self.x), int(self.y), self.width, self.height)


def check_collision(rec_a: Rect, rec_b: Rect) -> bool:
    """Return True when the rectangles overlap; touching edges do not count."""
    return not (
        rec_a.x >= rec_b.right
        or rec_a.right <= rec_b.x
        or rec_a.y >= rec_b.bottom
        or rec_a.bottom <= rec_b.y
    )


class Collision:
    """Remembers the last detected hit so that it can be resolved."""

    def __init__(self) -> None:
        self.side = ColSide.NONE
        self.overlap: tuple[int, int] = (0, 0)
        self.stored_rect: Rect | None = None
        self.is_sideways = False
        self.is_collision = False

    def check_sideways(self, moving: Rect, other: Rect) -> bool:
        """Detect a hit and record its overlap and the side that was struck."""
        if not check_collision(moving, other):
            return False

        self.stored_rect = other
        overlap_x = min(moving.right, other.right) - max(moving.x, other.x)
        overlap_y = min(moving.bottom, other.bottom) - max(moving.y, other.y)
        self.overlap = (overlap_x, overlap_y)

        if overlap_x < overlap_y:
            self.is_sideways = True
            self.side = ColSide.RIGHT if moving.x < other.x else ColSide.LEFT
        else:
            self.side = ColSide.TOP if moving.y > other.y else ColSide.DOWN

        self.is_collision = True
        return True

    def move_from_collision(self, body: Body) -> None:
        """Push the body out of the last recorded overlap."""
        overlap_x, overlap_y = self.overlap
        if self.side is ColSide.RIGHT:
            body.x -= overlap_x
        elif self.side is ColSide.LEFT:
            body.x += overlap_x
        elif self.side is ColSide.DOWN:
            body.y -= overlap_y
            body.on_ground = True
        elif self.side is ColSide.TOP:
            body.y += overlap_y
            body.velocity_y = 0

    def move_from_outer_bounds(self, body: Body, world_width: float, screen_width: float) -> bool:
        """Keep the body inside the horizontal world limits; True if it was moved."""
        limit = world_width + screen_width
        if body.x < 0:
            body.x = 0
            return True
        if body.x + body.width > limit:
            body.x = limit - body.width
            return True
        return False

    def reset(self) -> None:
        """Forget the last recorded hit."""
        self.is_collision = False
        self.is_sideways = False
        self.side = ColSide.NONE