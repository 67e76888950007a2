import logging
from dataclasses import replace

from .engine import Engine
from .recorder import Recorder
from .snapshot import Frame

logger = logging.getLogger(__name__)


class Session:
    """
    The command surface the presentation layer talks to.

    Wraps one Engine and one Recorder and enforces the rules between them:
    pausing stops a recording, recording needs a running simulation, and
    replay pauses the simulation and excludes both until it finishes.
    """

    def __init__(self, width, height, cell_size=20, tunables=None):
        self.engine = Engine(width, height, cell_size=cell_size, tunables=tunables)
        self.recorder = Recorder()
        self._last_frame = None

    # --- read-only state ---

    @property
    def running(self):
        return self.engine.running

    @property
    def recording(self):
        return self.recorder.recording

    @property
    def replaying(self):
        return self.recorder.replaying

    @property
    def tunables(self):
        return self.engine.tunables

    @property
    def particle_count(self):
        return len(self.engine.particles)

    # --- commands ---

    def spawn_charge(self, x, y, charge, lazy=False):
        return self.engine.spawn_charge(x, y, charge, lazy)

    def set_field_cell(self, col, row, kind):
        return self.engine.set_field_cell(col, row, kind)

    def paint_field(self, x, y, kind):
        return self.engine.paint_field(x, y, kind)

    def apply_preset(self, kind):
        return self.engine.apply_preset(kind)

    def set_tunables(self, **values):
        merged = replace(self.engine.tunables, **values)
        self.engine.tunables = merged.clamped(self.engine.max_trap_radius)
        return self.engine.tunables

    def clear_all(self):
        self.engine.clear()
        self.recorder.reset()
        logger.info("Cleared charges, field and recorded ticks.")

    def toggle_running(self):
        if self.replaying:
            logger.debug("Ignoring run toggle during replay")
            return self.running
        self.engine.running = not self.engine.running
        if not self.engine.running:
            # a recording never outlives a pause
            self.recorder.stop_recording()
        logger.info("Simulation %s.", "running" if self.running else "paused")
        return self.running

    def toggle_recording(self):
        if self.recording:
            self.recorder.stop_recording()
        elif self.running:
            self.recorder.start_recording()
        else:
            logger.debug("Ignoring record request while paused")
        return self.recording

    def start_replay(self):
        if not self.recorder.start_replay():
            return False
        self.engine.running = False
        return True

    # --- frame clock ---

    def tick(self):
        """Advance one frame and return what should be drawn for it."""
        if self.replaying:
            index, entry = self.recorder.tick_replay()
            self._last_frame = self._frame(entry, replaying=True, replay_index=index)
            return self._last_frame

        if self.engine.step() and self.recording:
            self.recorder.capture(self.engine.particles)
        self._last_frame = self._frame(self.engine.capture())
        return self._last_frame

    def snapshot(self):
        """Current frame without advancing anything."""
        if self.replaying and self._last_frame is not None:
            return self._last_frame
        return self._frame(self.engine.capture())

    def _frame(self, particles, replaying=False, replay_index=None):
        t = self.engine.tunables
        return Frame(
            particles=particles,
            cells=self.engine.field.cells,
            cell_size=self.engine.field.cell_size,
            running=self.running,
            recording=self.recording,
            replaying=replaying,
            field_strength=t.field_strength,
            trace_enabled=t.trace_enabled,
            tick=self.engine.tick_counter,
            replay_index=replay_index,
        )
