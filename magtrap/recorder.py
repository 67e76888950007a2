import logging
from enum import Enum

from .snapshot import capture_particles

logger = logging.getLogger(__name__)


class RecorderState(Enum):
    IDLE = "idle"
    RECORDING = "recording"
    REPLAYING = "replaying"


class Recorder:
    """
    In-memory tick log with one-shot playback.

    Each log entry is a tuple of ParticleState copies taken at capture time,
    so later mutation of the live particles never reaches the log.
    """

    def __init__(self):
        self.log = []
        self.cursor = 0
        self.state = RecorderState.IDLE

    @property
    def recording(self):
        return self.state is RecorderState.RECORDING

    @property
    def replaying(self):
        return self.state is RecorderState.REPLAYING

    def __len__(self):
        return len(self.log)

    def start_recording(self):
        if self.replaying:
            logger.debug("Ignoring record request during replay")
            return False
        self.log = []
        self.state = RecorderState.RECORDING
        logger.info("Recording started.")
        return True

    def stop_recording(self):
        if not self.recording:
            return False
        self.state = RecorderState.IDLE
        logger.info("Recording stopped (%d ticks).", len(self.log))
        return True

    def capture(self, particles):
        if not self.recording:
            return None
        entry = capture_particles(particles)
        self.log.append(entry)
        return entry

    def start_replay(self):
        if not self.log:
            logger.debug("Replay requested with an empty log")
            return False
        if self.recording:
            self.stop_recording()
        self.state = RecorderState.REPLAYING
        self.cursor = 0
        logger.info("Replaying %d ticks.", len(self.log))
        return True

    def tick_replay(self):
        if not self.replaying:
            return None
        index = self.cursor
        entry = self.log[index]
        self.cursor += 1
        if self.cursor >= len(self.log):
            # single pass, then hand control back to the live simulation
            self.cursor = 0
            self.state = RecorderState.IDLE
            logger.info("Replay finished.")
        return index, entry

    def reset(self):
        """Empty the log. A recording in progress keeps going into the fresh log; a replay ends."""
        self.log = []
        self.cursor = 0
        if self.replaying:
            self.state = RecorderState.IDLE
