import logging

from .config import Tunables
from .constants import FIELD_STRENGTH_MAX, FIELD_STRENGTH_STEP, LAZY_INTERVAL
from .field import FieldGrid
from .forces import apply_coulomb_forces, apply_field_rotation
from .Particle import Particle
from .presets.catalog import get_preset
from .snapshot import capture_particles
from .Vec2 import Vec2

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, width, height, cell_size=20, tunables=None):
        self.width = width
        self.height = height
        self.field = FieldGrid(width, height, cell_size)
        self.tunables = (tunables or Tunables()).clamped(self.max_trap_radius)

        self.particles = []
        self.tick_counter = 0
        self.running = False

    @property
    def max_trap_radius(self):
        return min(self.width, self.height) / 2

    @property
    def trap_center(self):
        return Vec2(self.width / 2, self.height / 2)

    def add_particle(self, particle):
        self.particles.append(particle)
        return particle

    def spawn_charge(self, x, y, charge, lazy=False):
        return self.add_particle(Particle(Vec2(x, y), charge=charge, lazy=lazy))

    def set_field_cell(self, col, row, kind):
        return self.field.set_cell(col, row, kind)

    def paint_field(self, x, y, kind):
        return self.field.set_cell_at(x, y, kind)

    def apply_preset(self, kind):
        preset = get_preset(kind)
        preset.apply(self.field, self.trap_center, self.tunables.trap_radius)
        logger.info("Applied %s preset (radius=%.1f)", preset.name, self.tunables.trap_radius)
        return preset

    def clear(self):
        self.particles = []
        self.field.clear()
        self.tick_counter = 0

    def step(self):
        """
        Advance the simulation by one tick.

        Order matters: forces, then the field kick at the pre-move position,
        then integration, then auto-adjust. Does nothing while paused.
        """
        if not self.running:
            return False
        self.tick_counter += 1

        t = self.tunables
        apply_coulomb_forces(self.particles, t.charge_multiplier)
        apply_field_rotation(self.particles, self.field, t.field_strength)

        for p in self.particles:
            # lazy particles still accumulate acceleration on skipped ticks
            if not p.lazy or self.tick_counter % LAZY_INTERVAL == 0:
                p.update(t.trace_enabled)
            if t.trace_enabled:
                p.add_trail()

        self._auto_adjust()
        return True

    def escaped_particles(self):
        center = self.trap_center
        radius = self.tunables.trap_radius
        return [p for p in self.particles if p.pos.distance_to(center) > radius]

    def _auto_adjust(self):
        # tighten only: no rule ever lowers the field strength
        if not self.escaped_particles():
            return
        before = self.tunables.field_strength
        self.tunables.field_strength = min(before + FIELD_STRENGTH_STEP, FIELD_STRENGTH_MAX)
        if self.tunables.field_strength != before:
            logger.debug("Charge outside trap, field strength %.2f -> %.2f", before, self.tunables.field_strength)

    def capture(self):
        return capture_particles(self.particles)
