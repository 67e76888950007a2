from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .constants import CHARGE_SIZE_SCALE
from .Vec2 import Vec2


@dataclass(frozen=True)
class ParticleState:
    """Frozen copy of one particle. Nothing here aliases the live particle."""
    position: Vec2
    velocity: Vec2
    acceleration: Vec2
    charge: float
    lazy: bool
    trail: Tuple[Vec2, ...]

    @classmethod
    def from_particle(cls, p):
        return cls(
            position=p.pos.copy(),
            velocity=p.vel.copy(),
            acceleration=p.acc.copy(),
            charge=p.charge,
            lazy=p.lazy,
            trail=tuple(t.copy() for t in p.trail),
        )

    @property
    def size(self):
        return abs(self.charge) * CHARGE_SIZE_SCALE

    @property
    def sign(self):
        return (self.charge > 0) - (self.charge < 0)


def capture_particles(particles):
    return tuple(ParticleState.from_particle(p) for p in particles)


@dataclass(frozen=True, eq=False)
class Frame:
    """Everything the renderer needs for one tick."""
    particles: Tuple[ParticleState, ...]
    cells: np.ndarray
    cell_size: float
    running: bool
    recording: bool
    replaying: bool
    field_strength: float
    trace_enabled: bool
    tick: int
    replay_index: Optional[int] = None

    @property
    def particle_count(self):
        return len(self.particles)

    def status_line(self):
        return (f"Charges: {self.particle_count} | Running: {self.running} | "
                f"Recording: {self.recording} | Replay Mode: {self.replaying} | "
                f"Field: {self.field_strength:.1f}")
