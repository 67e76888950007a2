import numpy as np

from ..constants import RING_HALF_WIDTH
from ..field import FieldCell
from .preset import Preset


class RingTrap(Preset):
    """
    A narrow annulus of coils around the trap centre.

    Cells below the centre line (positive angle on a y-down canvas) turn one
    way and the rest turn the other, so a charge crossing the ring is bent
    back towards the middle.
    """
    name = "ring"

    def __init__(self, half_width=RING_HALF_WIDTH):
        self.half_width = float(half_width)

    def mark(self, grid, center, radius):
        xs, ys = grid.cell_centers()
        dx = xs - center.x
        dy = ys - center.y
        d = np.hypot(dx, dy)
        # strict on both sides
        in_ring = (d > radius - self.half_width) & (d < radius + self.half_width)
        angle = np.arctan2(dy, dx)
        kinds = np.where(angle > 0, FieldCell.CLOCKWISE, FieldCell.COUNTERCLOCKWISE)
        grid.fill_mask(in_ring, kinds)
