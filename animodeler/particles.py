"""A simple particle system driven by gravity and air drag."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Protocol

from animodeler.vectors import Vec3

MAX_PARTICLE = 500
SPAWN_NUM = 5
GRAVITY = Vec3(0.0, -9.8, 0.0)
DRAG = 0.001
DROPPED_FRAME_THRESHOLD = 0.04

logger = logging.getLogger(__name__)


class _RandomSource(Protocol):
    def random(self) -> float: ...


def get_random(low: float, high: float, rng: _RandomSource | None = None) -> float:
    """A uniformly distributed number between ``low`` and ``high``."""
    source = rng if rng is not None else random
    return low + (high - low) * source.random()


@dataclass
class Particle:
    """A point mass with its position, velocity and accumulated force."""

    mass: float = 0.0
    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    force: Vec3 = field(default_factory=Vec3)


class ParticleSystem:
    """A fixed pool of particles evolved with Euler steps.

    New particles reuse the pool slots in turn, overwriting the oldest ones
    once the pool is full.
    """

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self.rng = rng
        self.particles = [Particle() for _ in range(MAX_PARTICLE)]
        self.particle_num = 0
        self.simulate = False
        self.dirty = False
        self.bake_fps = 0.0
        self.bake_start_time = 0.0
        self.bake_end_time = -1.0
        self.prev_t = 0.0
        self.baked: dict[float, list[Vec3]] = {}

    def start_simulation(self, t: float) -> None:
        """Start simulating; a negative bake end time marks a running simulation."""
        self.bake_end_time = -1.0
        self.simulate = True
        self.dirty = True

    def stop_simulation(self, t: float) -> None:
        self.simulate = False
        self.dirty = True

    def reset_simulation(self, t: float) -> None:
        self.simulate = False
        self.dirty = True

    def compute_forces_and_update_particles(self, t: float) -> None:
        """Advance every live particle from the previous time to ``t``."""
        if not self.simulate:
            return
        dt = t - self.prev_t
        for particle in self.particles:
            if particle.mass <= 0.0:
                continue
            particle.force = particle.mass * GRAVITY - DRAG * particle.velocity
            particle.velocity += dt * (particle.force / particle.mass)
            particle.position += dt * particle.velocity
        if dt > DROPPED_FRAME_THRESHOLD:
            logger.warning("dropped frame: %f", dt)
        self.prev_t = t

    def visible_particles(self) -> list[Vec3]:
        """Positions of the particles to draw; none while not simulating."""
        if not self.simulate:
            return []
        return [Vec3(*p.position) for p in self.particles if p.mass > 0.0]

    def bake_particles(self, t: float) -> None:
        """Record the positions of the live particles at time ``t``."""
        self.baked[t] = [Vec3(*p.position) for p in self.particles if p.mass > 0.0]

    def clear_baked(self) -> None:
        self.baked.clear()

    def add_particle_starting_at(self, point: Vec3) -> None:
        """Emit one unit-mass particle at ``point`` with a small sideways speed."""
        if not self.simulate:
            return
        if self.particle_num >= MAX_PARTICLE:
            self.particle_num = 0
        x = get_random(-0.5, 0.5, self.rng)
        z = get_random(-0.5, 0.5, self.rng)
        self.particles[self.particle_num] = Particle(
            1.0, Vec3(*point), Vec3(x, 0.0, z), Vec3(0.0, 0.0, 0.0)
        )
        self.particle_num += 1

    def spawn_particles(self, point: Vec3) -> None:
        """Emit a burst of particles at a world-space point."""
        for _ in range(SPAWN_NUM):
            self.add_particle_starting_at(point)