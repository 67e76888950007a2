from ..field import FieldCell
from .preset import Preset


class MirrorTrap(Preset):
    name = "mirror"

    def mark(self, grid, center, radius):
        # top row first so a single-row grid ends up counterclockwise
        for col in range(grid.cols):
            grid.set_cell(col, 0, FieldCell.CLOCKWISE)
        for col in range(grid.cols):
            grid.set_cell(col, grid.rows - 1, FieldCell.COUNTERCLOCKWISE)
