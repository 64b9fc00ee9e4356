"""Weather particle spawners: rain, snow and drifting lights."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


class ParticleKind(Enum):
    RAIN = "rain"
    SNOW = "snow"
    LIGHT = "light"


@dataclass(frozen=True)
class _Settings:
    max_particles: int
    rate: float
    size: tuple[int, int]
    velocity: tuple[float, float] | None
    color: tuple[int, int, int, int]


_SETTINGS = {
    ParticleKind.RAIN: _Settings(50, 0.2, (2, 20), (-0.5, 5.0), (0, 255, 255, 255)),
    ParticleKind.SNOW: _Settings(20, 0.2, (10, 10), (0.0, 2.0), (255, 255, 255, 255)),
    ParticleKind.LIGHT: _Settings(20, 0.1, (0, 0), None, (255, 255, 255, 200)),
}

LIGHT_DRIFT = 0.2


@dataclass
class Particle:
    """One spawned particle."""

    kind: ParticleKind
    x: float
    y: float
    width: int
    height: int
    velocity_x: float
    velocity_y: float
    color: tuple[int, int, int, int]
    finished: bool = False


class ParticleSpawner:
    """Builds up a fractional particle budget and spawns one per whole unit."""

    def __init__(
        self,
        kind: ParticleKind,
        camera_width: float,
        camera_height: float,
        rng: random.Random | None = None,
    ) -> None:
        self.kind = kind
        self.camera_width = camera_width
        self.camera_height = camera_height
        self.rng = rng or random.Random()
        self.settings = _SETTINGS[kind]
        self.count = 0.0

    @property
    def max_particles(self) -> int:
        return self.settings.max_particles

    def update(self, player_x: float) -> Particle | None:
        """Advance the budget; return a new particle when one is due."""
        settings = self.settings
        previous = int(self.count)
        if self.count + settings.rate <= settings.max_particles:
            self.count += settings.rate
        if int(self.count) <= previous or self.count >= settings.max_particles:
            return None

        x = self.rng.uniform(player_x - self.camera_width, player_x + self.camera_width)
        if settings.velocity is None:
            y = self.rng.uniform(0, self.camera_height)
            velocity = (
                self.rng.uniform(-LIGHT_DRIFT, LIGHT_DRIFT),
                self.rng.uniform(-LIGHT_DRIFT, LIGHT_DRIFT),
            )
        else:
            y = 0.0
            velocity = settings.velocity
        return Particle(
            kind=self.kind,
            x=x,
            y=y,
            width=settings.size[0],
            height=settings.size[1],
            velocity_x=velocity[0],
            velocity_y=velocity[1],
            color=settings.color,
        )

    def expire(self, particles: list[Particle]) -> list[Particle]:
        """Return the particles still alive, releasing budget for each one dropped."""
        survivors = []
        for particle in particles:
            if self._is_done(particle):
                self.count -= 1
            else:
                survivors.append(particle)
        return survivors

    def _is_done(self, particle: Particle) -> bool:
        if self.kind is ParticleKind.LIGHT:
            return particle.finished
        return particle.y > self.camera_height