"""Per-frame rules of the gameplay screen: chasing, camera, picking and input."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .screens import SCALE_SPEED

CHASE_DISTANCE = 300
SHOOT_DISTANCE = 200
CLOUD_WRAP_FRACTION = 1.0 / 3.0

Box = Sequence[float]


def chase_velocity(enemy_x: float, player_x: float, current: float) -> float:
    """Horizontal velocity of an enemy that turns toward a nearby player."""
    if player_x < enemy_x < player_x + CHASE_DISTANCE:
        return -1.0
    if player_x - CHASE_DISTANCE < enemy_x < player_x:
        return 1.0
    return current


def in_shoot_range(enemy_x: float, player_x: float) -> bool:
    """True when a shooter is close enough on either side to throw at the player."""
    return (
        player_x < enemy_x < player_x + SHOOT_DISTANCE
        or player_x - SHOOT_DISTANCE < enemy_x < player_x
    )


def camera_follow(player_x: float, camera_width: float) -> float:
    """Camera x that centres the player horizontally."""
    return player_x - camera_width / 2


def clamp_camera(camera_x: float, world_width: float, camera_width: float) -> float:
    """Keep the camera from showing past the left or right edge of the world."""
    if camera_x < 0:
        camera_x = 0.0
    if camera_x > world_width - camera_width:
        camera_x = world_width - camera_width
    return camera_x


def wrap_cloud(x: float, width: float, world_width: float) -> float:
    """Send a cloud that has drifted fully off the left edge back into the world."""
    if x + width < 0:
        return world_width * CLOUD_WRAP_FRACTION
    return x


def _contains(box: Box, x: float, y: float) -> bool:
    bx, by, bw, bh = box
    return bx < x < bx + bw and by < y < by + bh


def pick_entity(boxes: Iterable[Iterable[Box]], x: float, y: float) -> Box | None:
    """Select the box under a point from groups of (x, y, w, h) boxes.

    Within a group the first hit wins; a hit in a later group replaces one
    found in an earlier group.
    """
    selected = None
    for group in boxes:
        hit = next((box for box in group if _contains(box, x, y)), None)
        if hit is not None:
            selected = hit
    return selected


def stage_label(stage: int) -> str:
    """Text of the stage label after a stage change."""
    return f"stage{stage}"


def scale_mouse(
    x: float,
    y: float,
    camera_w: float,
    camera_h: float,
    screen_w: float,
    screen_h: float,
) -> tuple[float, float]:
    """Convert window mouse coordinates to camera-sized coordinates."""
    if screen_w == 0 or screen_h == 0:
        raise ValueError("screen dimensions must be non-zero")
    return x * camera_w / screen_w, y * camera_h / screen_h


def zoom(scale: float, wheel_y: float, step: float = SCALE_SPEED) -> float:
    """New camera scale after a mouse-wheel movement."""
    if wheel_y > 0:
        return scale + step
    if wheel_y < 0:
        return scale - step
    return scale


def fell_out(y: float, camera_y: float, world_height: float) -> bool:
    """True when something has dropped below the bottom of the world."""
    return y > camera_y + world_height