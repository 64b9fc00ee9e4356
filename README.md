# mujinplatformer

The rules of a side-scrolling platformer in plain Python, with no rendering,
sound or input layer attached. Each module holds one part of the game. The
functions take plain numbers, rectangles and flags, and they return what should
happen next. You can drive them from any front end or test them on their own.

## Modules

- `mujinplatformer.collision`
  - `Rect` is an integer rectangle. `Rect.overlaps` and `check_collision` test
    for overlap; edges that only touch do not count.
  - `Body` is a moving thing with a position, a size, a velocity and an
    `on_ground` flag.
  - `Collision.check_sideways` records the overlap and the side that was struck
    (`ColSide`).
  - `Collision.move_from_collision` pushes a `Body` back out.
  - `Collision.move_from_outer_bounds` keeps a body between 0 and the world
    width plus the screen width.
  - `Collision.reset` forgets the last hit.
- `mujinplatformer.encounters`
  - `lift_out_of_colliders` raises a body in steps of 32 until it is clear.
  - `resolve_against` pushes a body out of a list of colliders.
  - `bounce_off_wall` reverses a walker that hits a wall.
  - `enemy_contact` returns a `ContactResult` for a stomp or a hit from the
    side.
  - `collect_gems` and `touches_any` handle pickups and hit tests.
- `mujinplatformer.characters`
  - `Meter` and `LivingCharacter` hold health, mana and stamina. Damage is
    reduced by defence, and only players carry mana and stamina.
  - `Score` keeps the running score and its label text.
  - `Sword` places a 48×48 hitbox in front of its wielder and produces a
    `Slice` when it attacks.
  - `Projectile` flies until it has covered its range.
- `mujinplatformer.behaviours` has the per-frame state machines:
  - `PlayerBrain`, `SkeletonBrain` (with a giant variant) and `KoopaBrain`.
    They return a `Step` that names the animation to play, the velocity to
    set, and whether to strike or fire.
  - `Gem` and `PlatformBlock`.
  - `facing_flipped`.
- `mujinplatformer.particles`: `ParticleSpawner` builds up a fractional budget
  and spawns rain, snow or drifting light `Particle`s around the player. It
  gives budget back as particles expire.
- `mujinplatformer.shop` and `mujinplatformer.inventory`: the `Shop` and
  `Inventory` panels open and close, and lay out their items and their 5×3 grid
  of slots.
- `mujinplatformer.screens`
  - `App` holds a `MainMenu` and a `GameplayScreen` and reports the current
    screen.
  - Screens signal a change through `ScreenState` and `ScreenIndex`. Once the
    menu is left, its start button resumes the game instead of starting one.
  - `MenuBackground` sways in depth over time.
- `mujinplatformer.world`: the frame rules for the gameplay screen.
  - Enemies chase the player (`chase_velocity`) and shoot when in range
    (`in_shoot_range`).
  - The camera follows the player and is clamped to the world
    (`camera_follow`, `clamp_camera`).
  - Clouds wrap around (`wrap_cloud`), and `fell_out` detects falls out of the
    world.
  - `pick_entity` picks the box under the mouse.
  - `scale_mouse` scales mouse coordinates, and `zoom` handles the mouse wheel.
  - `stage_label` gives the stage label text.

## Example

```python
from mujinplatformer.collision import Body, Collision, Rect

collision = Collision()
player = Body(x=0, y=0, width=32, height=32)
ground = Rect(0, 30, 200, 32)

if collision.check_sideways(player.rect, ground):
    collision.move_from_collision(player)
print(player.y, player.on_ground)  # -2 True
```

## What this package does not do

This package has no command to run and no window. It does not draw, play
sounds or read the keyboard.

It does not load or generate level tile maps; you supply the collider
rectangles yourself. It also does not cycle weather, set background colours,
check pipe triggers or spawn enemies for a stage. A front end has to decide
when to create players, enemies, gems and particles, and where to place them.

## Tests

```
pip install -e .[test]
pytest
```