import math
from enum import IntEnum

import numpy as np

from .Vec2 import Vec2


class FieldCell(IntEnum):
    EMPTY = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


class FieldGrid:
    """
    Fixed-size grid of coil cells laid over the canvas.

    Dimensions come from the canvas size and cell size at construction and
    never change. Every lookup and edit is bounds-checked; anything outside
    the grid is ignored rather than wrapped.
    """

    def __init__(self, width, height, cell_size=20):
        self.cell_size = float(cell_size)
        self.cols = max(1, int(width // cell_size))
        self.rows = max(1, int(height // cell_size))
        # stored row-major, grid[row, col]
        self._grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    @property
    def cells(self):
        return self._grid.copy()

    def in_bounds(self, col, row):
        return 0 <= col < self.cols and 0 <= row < self.rows

    def index_at(self, x, y):
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        col = int(math.floor(x / self.cell_size))
        row = int(math.floor(y / self.cell_size))
        if not self.in_bounds(col, row):
            return None
        return col, row

    def cell_at(self, x, y):
        idx = self.index_at(x, y)
        if idx is None:
            return None
        col, row = idx
        return FieldCell(int(self._grid[row, col]))

    def get_cell(self, col, row):
        if not self.in_bounds(col, row):
            return None
        return FieldCell(int(self._grid[row, col]))

    def set_cell(self, col, row, kind):
        kind = FieldCell(kind)
        if not self.in_bounds(col, row):
            return False
        self._grid[row, col] = kind
        return True

    def set_cell_at(self, x, y, kind):
        idx = self.index_at(x, y)
        if idx is None:
            return False
        return self.set_cell(idx[0], idx[1], kind)

    def cell_center(self, col, row):
        return Vec2(col * self.cell_size + self.cell_size / 2, row * self.cell_size + self.cell_size / 2)

    def cell_centers(self):
        """Return (xs, ys) arrays of cell-centre coordinates, each shaped (rows, cols)."""
        half = self.cell_size / 2
        xs = np.arange(self.cols) * self.cell_size + half
        ys = np.arange(self.rows) * self.cell_size + half
        return np.meshgrid(xs, ys)

    def count(self, kind):
        return int(np.count_nonzero(self._grid == FieldCell(kind)))

    def clear(self):
        self._grid.fill(FieldCell.EMPTY)

    def fill_mask(self, mask, kind):
        """Set every cell where `mask` is true. `kind` may be a FieldCell or an int array of codes."""
        self._grid[mask] = np.asarray(kind, dtype=np.int8)[mask] if np.ndim(kind) else FieldCell(kind)

    def __repr__(self):
        return f"FieldGrid(cols={self.cols}, rows={self.rows}, cell_size={self.cell_size})"
