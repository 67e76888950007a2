from collections import deque

from .constants import CHARGE_SIZE_SCALE, MAX_SPEED, TRAIL_LENGTH
from .forces import compute_field_at
from .Vec2 import Vec2


class Particle:
    def __init__(self, pos, charge=1.0, lazy=False, vel=None):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        if vel is None:
            self.vel = Vec2(0.0, 0.0)
        else:
            self.vel = vel.copy() if isinstance(vel, Vec2) else Vec2(vel[0], vel[1])
        self.acc = Vec2(0.0, 0.0)
        self.charge = float(charge)
        self.lazy = bool(lazy)
        self.trail = deque(maxlen=TRAIL_LENGTH)

    @property
    def size(self):
        return abs(self.charge) * CHARGE_SIZE_SCALE

    def apply_force(self, force):
        self.acc = self.acc + force

    def field_at(self, target_pos):
        return compute_field_at(self.pos, target_pos, self.charge)

    def update(self, trace=False):
        # explicit Euler; the speed cap is applied after the move
        self.vel = self.vel + self.acc
        self.pos = self.pos + self.vel
        self.acc = Vec2(0.0, 0.0)
        self.vel.limit_in_place(MAX_SPEED)
        if trace:
            self.add_trail()

    def add_trail(self):
        self.trail.append(self.pos.copy())

    def __repr__(self):
        return f"Particle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}), charge={self.charge}, lazy={self.lazy})"

    def __str__(self):
        return self.__repr__()
