"""Health, mana and stamina meters, scoring, melee slices and projectiles."""

from __future__ import annotations

from dataclasses import dataclass, field

from .collision import Rect

FULL_METER = 100.0
PLAYER_BAR_SIZE = (100, 10)
PLAYER_SMALL_BAR_SIZE = (100, 5)
ENEMY_BAR_SIZE = (50, 5)
HITBOX_SIZE = 48
BASE_ATTACK_DAMAGE = 10


@dataclass
class Meter:
    """A bar holding a current value out of a maximum."""

    value: float = FULL_METER
    maximum: float = FULL_METER

    def fraction(self) -> float:
        return self.value / self.maximum

    def bar_width(self, width: float, scale: float) -> float:
        """Width of the filled part of a bar drawn at the given size."""
        return width * scale * self.fraction()


class LivingCharacter:
    """Something that can be hurt; players also carry mana and stamina."""

    def __init__(self, is_player: bool = False, defence: int = 0) -> None:
        self.is_player = is_player
        self.defence = defence
        self.took_damage = False
        self.health = Meter()
        self.mana: Meter | None = Meter() if is_player else None
        self.stamina: Meter | None = Meter() if is_player else None
        self.bar_size = PLAYER_BAR_SIZE if is_player else ENEMY_BAR_SIZE

    def apply_damage(self, damage: float) -> bool:
        """Take damage reduced by defence; True once health has run out."""
        self.took_damage = True
        self.health.value -= damage * 100 / (100 + self.defence)
        return self.health.value <= 0

    def apply_mana(self, mana: float) -> bool:
        """Spend mana; True when there was none left to spend."""
        if self.mana is None:
            return False
        if self.mana.value <= 0:
            return True
        self.mana.value -= mana
        return False

    def exhaust(self, stamina: float) -> bool:
        """Spend stamina; True (and nothing spent) if it would run out."""
        if self.stamina is None:
            return False
        if self.stamina.value - stamina <= 0:
            return True
        self.stamina.value -= stamina
        return False

    def recover(self, stamina: float) -> bool:
        """Regain stamina; True when it was already full."""
        if self.stamina is None:
            return False
        if self.stamina.value >= FULL_METER:
            return True
        self.stamina.value += stamina
        return False

    def begin_frame(self) -> None:
        """Clear the per-frame damage flag."""
        self.took_damage = False

    def is_dead(self) -> bool:
        return self.health.value <= 0


class Score:
    """A running score with the text shown on its label."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self._label = "score 0"

    def add(self, points: int) -> int:
        self.value += points
        self._label = f"score{self.value}"
        return self.value

    def label(self) -> str:
        return self._label


@dataclass(frozen=True)
class Slice:
    """A short-lived damaging area left by a sword swing."""

    rect: Rect
    damage: int
    enemy: bool = False


class Sword:
    """A melee weapon whose hitbox sits in front of its wielder."""

    def __init__(self, enemy: bool = False) -> None:
        self.enemy = enemy
        self.attack_damage = BASE_ATTACK_DAMAGE
        self.hitbox = Rect(0, 0, HITBOX_SIZE, HITBOX_SIZE)

    def update_hitbox(self, collider: Rect, flipped: bool) -> Rect:
        """Place the hitbox beside the collider on the side being faced."""
        x = collider.x - self.hitbox.w if flipped else collider.right
        self.hitbox = Rect(x, collider.y, self.hitbox.w, self.hitbox.h)
        return self.hitbox

    def attack(self) -> Slice:
        return Slice(self.hitbox, self.attack_damage, self.enemy)

    def level_up(self, amount: int) -> int:
        self.attack_damage += amount
        return self.attack_damage


@dataclass
class _Flight:
    distance: int = 0
    expired: bool = False


class Projectile:
    """A shot that travels until it has covered its range."""

    def __init__(self, range_: int, speed: int, direction: tuple[float, float]) -> None:
        self.range = range_
        self.speed = speed
        self.velocity = direction
        self._flight = _Flight()

    @property
    def distance(self) -> int:
        return self._flight.distance

    @property
    def expired(self) -> bool:
        return self._flight.expired

    def advance(self, delta_time: float) -> bool:
        """Add this frame's travel; True once the projectile is spent."""
        self._flight.distance = int(self._flight.distance + self.speed * delta_time)
        if self._flight.distance > self.range:
            self._flight.expired = True
        return self._flight.expired