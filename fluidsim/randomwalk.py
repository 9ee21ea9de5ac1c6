"""Particles that circle their common centre at constant speed."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from fluidsim.color import Color
from fluidsim.vector import Vector

logger = logging.getLogger(__name__)

_PI = 3.14159265


@dataclass
class Particle:
    """Position, velocity, display colour and mass of one particle."""

    position: Vector = field(default_factory=Vector)
    velocity: Vector = field(default_factory=Vector)
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0, 1.0))
    mass: float = 1.0


def random_ball_particle(rng: random.Random) -> Particle:
    """Draw a particle inside the unit ball with a random colour and small velocity."""
    s = 2.0 * rng.random() - 1.0
    ss = math.sqrt(1.0 - s * s)
    theta = 2.0 * _PI * rng.random()
    position = Vector(ss * math.cos(theta), s, ss * math.sin(theta))
    position = position * (rng.random() ** (1.0 / 6.0))
    color = Color(rng.random(), rng.random(), rng.random(), 0.0)
    velocity = Vector(rng.random() - 0.5, rng.random() - 0.5, rng.random() - 0.5)
    return Particle(position=position, velocity=velocity, color=color)


class RandomWalkSystem:
    """A particle cloud whose velocities are kept perpendicular to the line to its centre."""

    def __init__(
        self,
        rng: random.Random | None = None,
        count: int = 20,
        emit_count: int = 10,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.count = count
        self.emit_count = emit_count
        self.emit = False
        self.particles: list[Particle] = []
        self.reset()

    def reset(self) -> None:
        """Replace every particle with a fresh random one."""
        self.particles = [random_ball_particle(self.rng) for _ in range(self.count)]

    def toggle_emit(self) -> bool:
        """Switch particle emission on or off and return the new state."""
        self.emit = not self.emit
        return self.emit

    def solve(self, dt: float) -> None:
        """Advance positions, turn velocities around the centre, then emit if enabled."""
        for particle in self.particles:
            particle.position = particle.position + particle.velocity * dt

        if self.particles:
            center = Vector()
            for particle in self.particles:
                center = center + particle.position
            center = center / len(self.particles)

            for particle in self.particles:
                offset = particle.position - center
                if offset.is_zero():
                    continue
                n = offset.unit_vector()
                speed = particle.velocity.magnitude()
                turned = particle.velocity - n * n.dot(particle.velocity)
                turned_speed = turned.magnitude()
                if turned_speed == 0:
                    continue
                particle.velocity = turned * (speed / turned_speed)

        if self.emit:
            self.particles.extend(random_ball_particle(self.rng) for _ in range(self.emit_count))
            logger.info("Total Points %d", len(self.particles))