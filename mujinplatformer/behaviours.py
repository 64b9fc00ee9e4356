"""Per-frame state machines for the player, enemies, gems and blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SKELETON_STRIKE_FRAME = 6
KOOPA_SHOOT_FRAME = 6
PLAYER_STRIKE_FRAME = 1

GIANT_HEALTH = 200.0
GIANT_SPEED_FACTOR = 2

MYSTERY_BOX_ANIMATION = "QuestionMark"

SKELETON_SLASH_SOUND = "Sounds/enemySlash.wav"
KOOPA_SHOOT_SOUND = "Sounds/enemyThrowProjectile.wav"
PLAYER_SLASH_SOUND = "Sounds/slash.wav"
PLAYER_SKILL_SOUND = "Sounds/skillSlash.wav"
GEM_SOUND = "Sounds/coin_collect.wav"


@dataclass
class Step:
    """What one frame of a behaviour asks the owning entity to do."""

    animation: str | None = None
    velocity_x: float | None = None
    flipped: bool | None = None
    strike: bool = False
    ability: bool = False
    sound: str | None = None


def facing_flipped(velocity_x: float, current: bool) -> bool:
    """Face left when moving left, right when moving right, else keep facing."""
    if velocity_x < 0:
        return True
    if velocity_x > 0:
        return False
    return current


class SkeletonAction(IntEnum):
    IDLE = 0
    WALK = 1
    ATTACK = 2


_SKELETON_ANIMATIONS = {
    SkeletonAction.IDLE: "SkeletonIdle",
    SkeletonAction.WALK: "SkeletonWalk",
    SkeletonAction.ATTACK: "SkeletonAttack",
}


class SkeletonBrain:
    """A walking swordsman that stops to swing when the player is near."""

    def __init__(self, giant: bool = False) -> None:
        self.giant = giant
        self.attack_animation = False
        self.action = SkeletonAction.IDLE
        self.speed_factor = GIANT_SPEED_FACTOR if giant else 1
        self.max_health = GIANT_HEALTH if giant else 100.0

    def activate_attack(self) -> str | None:
        """Begin a swing unless one is under way; return the animation started."""
        if self.attack_animation:
            return None
        self.attack_animation = True
        self.action = SkeletonAction.ATTACK
        return _SKELETON_ANIMATIONS[SkeletonAction.ATTACK]

    def update(
        self,
        velocity_x: float,
        animation_finished: bool,
        frame_index: int,
        times_played: int,
    ) -> Step:
        step = Step()
        if self.attack_animation and animation_finished:
            self.attack_animation = False
            self.action = SkeletonAction.IDLE
            velocity_x = 1.0
            step.velocity_x = velocity_x

        if self.action is SkeletonAction.ATTACK:
            if frame_index == SKELETON_STRIKE_FRAME and times_played == 1:
                step.strike = True
                step.sound = SKELETON_SLASH_SOUND
            return step
        if velocity_x != 0:
            if self.action is SkeletonAction.WALK:
                return step
            self.action = SkeletonAction.WALK

        step.animation = _SKELETON_ANIMATIONS[self.action]
        return step


class KoopaAction(IntEnum):
    IDLE = 0
    WALK = 1
    ATTACK = 2


_KOOPA_ANIMATIONS = {
    KoopaAction.IDLE: "GreenKoopaTroopaIdle",
    KoopaAction.WALK: "GreenKoopaTroopaWalk",
    KoopaAction.ATTACK: "GreenKoopaTroopaAttack",
}

KOOPA_SHELL_ANIMATION = "GreenShell"


class KoopaBrain:
    """A walker that throws projectiles and hides in its shell when stomped."""

    def __init__(self) -> None:
        self.attack_animation = False
        self.in_shell = False
        self.action = KoopaAction.WALK

    def activate_shoot(self) -> str | None:
        """Begin a throw unless one is under way; return the animation started."""
        if self.attack_animation:
            return None
        self.attack_animation = True
        self.action = KoopaAction.ATTACK
        return _KOOPA_ANIMATIONS[KoopaAction.ATTACK]

    def stomp(self) -> Step:
        """Retreat into the shell after being jumped on."""
        self.in_shell = True
        return Step(animation=KOOPA_SHELL_ANIMATION, velocity_x=0.0)

    def update(
        self,
        velocity_x: float,
        animation_finished: bool,
        frame_index: int,
        times_played: int,
    ) -> Step:
        step = Step()
        if self.in_shell and animation_finished:
            self.in_shell = False
            step.flipped = False
            velocity_x = -1.0
            step.velocity_x = velocity_x

        if self.attack_animation and animation_finished:
            self.attack_animation = False
            self.action = KoopaAction.IDLE
            velocity_x = 1.0
            step.velocity_x = velocity_x

        if self.action is KoopaAction.ATTACK:
            if frame_index == KOOPA_SHOOT_FRAME and times_played == 1:
                step.strike = True
                step.sound = KOOPA_SHOOT_SOUND
            return step
        if velocity_x != 0:
            if self.action is KoopaAction.WALK:
                return step
            self.action = KoopaAction.WALK

        step.animation = _KOOPA_ANIMATIONS[self.action]
        return step


class PlayerAction(IntEnum):
    IDLE = 0
    WALK = 1
    RUN = 2
    JUMP = 3
    ATTACK = 4
    ABILITY_1 = 5


_PLAYER_ANIMATIONS = {
    PlayerAction.IDLE: "P1Idle",
    PlayerAction.WALK: "P1Walk",
    PlayerAction.RUN: "P1Walk",
    PlayerAction.JUMP: "P1Jump",
    PlayerAction.ATTACK: "P1Attack",
}

PLAYER_ABILITY_ANIMATION = "P1Ability1"


class PlayerBrain:
    """Chooses the player's animation and fires sword strikes on cue."""

    def __init__(self) -> None:
        self.attack_animation = False
        self.action = PlayerAction.IDLE

    def start_attack(self) -> Step | None:
        if self.attack_animation:
            return None
        self.attack_animation = True
        self.action = PlayerAction.ATTACK
        return Step(animation=_PLAYER_ANIMATIONS[PlayerAction.ATTACK], sound=PLAYER_SLASH_SOUND)

    def start_ability(self) -> Step | None:
        if self.attack_animation:
            return None
        self.attack_animation = True
        self.action = PlayerAction.ABILITY_1
        return Step(animation=PLAYER_ABILITY_ANIMATION, sound=PLAYER_SKILL_SOUND)

    def update(
        self,
        on_ground: bool,
        velocity_x: float,
        animation_finished: bool,
        frame_index: int,
        times_played: int,
    ) -> Step:
        step = Step()
        if self.attack_animation and animation_finished:
            self.attack_animation = False
            self.action = PlayerAction.IDLE

        strike_cue = frame_index == PLAYER_STRIKE_FRAME and times_played == 1
        if self.action is PlayerAction.ATTACK:
            step.strike = strike_cue
            return step
        if self.action is PlayerAction.ABILITY_1:
            step.ability = strike_cue
            return step

        if not on_ground:
            wanted = PlayerAction.JUMP
        elif velocity_x == 0:
            wanted = PlayerAction.IDLE
        else:
            wanted = PlayerAction.WALK
        if self.action is wanted:
            return step
        self.action = wanted

        step.animation = _PLAYER_ANIMATIONS[self.action]
        return step


@dataclass
class Gem:
    """A spinning coin that bounces once when released and then vanishes."""

    animation: str = "CoinFlip"
    locked: bool = False

    def start_bounce(self) -> Step:
        self.locked = True
        return Step(animation="CoinBounce", sound=GEM_SOUND)

    def should_destroy(self, bounce_finished: bool) -> bool:
        return bounce_finished and self.locked


@dataclass
class PlatformBlock:
    """A block that bounces the frame after it is struck from below."""

    pending: bool = False

    def hit(self) -> None:
        self.pending = True

    def update(self) -> str | None:
        if not self.pending:
            return None
        self.pending = False
        return "BlockBounce"