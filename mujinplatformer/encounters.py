"""Contact rules between the player, enemies, terrain and pickups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .collision import Body, Collision, ColSide, Rect, check_collision

LIFT_STEP = 32
STOMP_BOUNCE = -20.0
STOMP_DAMAGE = 10
CONTACT_DAMAGE = 5
GEM_POINTS = 100


@dataclass(frozen=True)
class ContactResult:
    """What happens when the player touches an enemy."""

    stomped: bool
    player_velocity_y: float | None = None
    player_on_ground: bool = False
    player_damage: float = 0.0
    enemy_damage: float = 0.0
    enemy_velocity_x: float | None = None
    shell: bool = False


def lift_out_of_colliders(body: Body, colliders: Iterable[Rect]) -> int:
    """Raise the body in fixed steps until it overlaps none of the colliders.

    Returns the number of steps taken.
    """
    rects = list(colliders)
    lifts = 0
    while any(check_collision(body.rect, rect) for rect in rects):
        body.y -= LIFT_STEP
        lifts += 1
    return lifts


def resolve_against(collision: Collision, body: Body, colliders: Iterable[Rect]) -> list[ColSide]:
    """Push the body out of each collider in turn; return the sides that were hit."""
    sides = []
    for rect in colliders:
        if collision.check_sideways(body.rect, rect):
            collision.move_from_collision(body)
            sides.append(collision.side)
        collision.reset()
    return sides


def bounce_off_wall(velocity_x: float, side: ColSide) -> float:
    """Reverse a walker that ran into a wall on the side it is heading to."""
    if (velocity_x < 0 and side is ColSide.LEFT) or (velocity_x > 0 and side is ColSide.RIGHT):
        return -velocity_x
    return velocity_x


def enemy_contact(side: ColSide, is_koopa: bool) -> ContactResult:
    """Outcome of the player touching an enemy from the given side."""
    if side is not ColSide.DOWN:
        return ContactResult(stomped=False, player_damage=CONTACT_DAMAGE)
    if is_koopa:
        return ContactResult(
            stomped=True,
            player_velocity_y=STOMP_BOUNCE,
            player_on_ground=True,
            enemy_velocity_x=0.0,
            shell=True,
        )
    return ContactResult(
        stomped=True,
        player_velocity_y=STOMP_BOUNCE,
        player_on_ground=True,
        player_damage=CONTACT_DAMAGE,
        enemy_damage=STOMP_DAMAGE,
    )


def collect_gems(player: Rect, gems: Iterable[Rect]) -> tuple[int, list[Rect]]:
    """Return the points earned and the gems the player did not touch."""
    points = 0
    remaining = []
    for gem in gems:
        if check_collision(player, gem):
            points += GEM_POINTS
        else:
            remaining.append(gem)
    return points, remaining


def touches_any(player: Rect, rects: Iterable[Rect]) -> bool:
    """True when the player overlaps at least one of the rectangles."""
    return any(check_collision(rect, player) for rect in rects)