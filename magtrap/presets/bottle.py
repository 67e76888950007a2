import numpy as np

from ..constants import BOTTLE_THICKNESS
from ..field import FieldCell
from .preset import Preset


class MagneticBottle(Preset):
    """Checkerboard coils in a thick border around every edge of the grid."""
    name = "bottle"

    def __init__(self, thickness=BOTTLE_THICKNESS):
        self.thickness = int(thickness)

    def mark(self, grid, center, radius):
        rows, cols = np.indices((grid.rows, grid.cols))
        t = self.thickness
        border = (cols < t) | (cols > grid.cols - 1 - t) | (rows < t) | (rows > grid.rows - 1 - t)
        kinds = np.where((cols + rows) % 2 == 0, FieldCell.CLOCKWISE, FieldCell.COUNTERCLOCKWISE)
        grid.fill_mask(border, kinds)
