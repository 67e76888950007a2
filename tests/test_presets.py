"""Preset coil layouts: ring trap, magnetic bottle and mirror trap."""

from __future__ import annotations

import math

import pytest

from magtrap.engine import Engine
from magtrap.field import FieldCell
from magtrap.presets.catalog import PresetKind, get_preset


@pytest.fixture
def engine():
    return Engine(800, 600, cell_size=20)


@pytest.mark.parametrize("radius", [60.0, 150.0, 280.0])
def test_ring_marks_only_the_annulus(engine, radius):
    engine.tunables.trap_radius = radius
    engine.apply_preset(PresetKind.RING)
    grid = engine.field
    center = engine.trap_center
    marked = 0
    for row in range(grid.rows):
        for col in range(grid.cols):
            c = grid.cell_center(col, row)
            d = math.hypot(c.x - center.x, c.y - center.y)
            kind = grid.get_cell(col, row)
            if d < radius - 10 or d > radius + 10:
                assert kind == FieldCell.EMPTY
            else:
                marked += 1
                angle = math.atan2(c.y - center.y, c.x - center.x)
                expected = FieldCell.CLOCKWISE if angle > 0 else FieldCell.COUNTERCLOCKWISE
                assert kind == expected
    assert marked > 0
    assert marked == grid.count(FieldCell.CLOCKWISE) + grid.count(FieldCell.COUNTERCLOCKWISE)


def test_bottle_border_checkerboard(engine):
    engine.apply_preset("bottle")
    grid = engine.field
    assert grid.get_cell(0, 0) == FieldCell.CLOCKWISE
    assert grid.get_cell(1, 0) == FieldCell.COUNTERCLOCKWISE
    assert grid.get_cell(1, 1) == FieldCell.CLOCKWISE
    assert grid.get_cell(39, 29) == FieldCell.CLOCKWISE
    assert grid.get_cell(38, 5) == FieldCell.COUNTERCLOCKWISE
    assert grid.get_cell(2, 2) == FieldCell.EMPTY
    assert grid.get_cell(37, 5) == FieldCell.EMPTY
    border = 40 * 30 - 36 * 26
    assert grid.count(FieldCell.EMPTY) == 36 * 26
    assert grid.count(FieldCell.CLOCKWISE) + grid.count(FieldCell.COUNTERCLOCKWISE) == border


def test_mirror_marks_first_and_last_rows(engine):
    engine.apply_preset(PresetKind.MIRROR)
    cells = engine.field.cells
    assert (cells[0] == FieldCell.CLOCKWISE).all()
    assert (cells[-1] == FieldCell.COUNTERCLOCKWISE).all()
    assert (cells[1:-1] == FieldCell.EMPTY).all()


def test_presets_clear_previous_cells(engine):
    engine.set_field_cell(10, 10, FieldCell.CLOCKWISE)
    engine.apply_preset(PresetKind.MIRROR)
    assert engine.field.get_cell(10, 10) == FieldCell.EMPTY


def test_unknown_preset_raises():
    with pytest.raises(ValueError):
        get_preset("donut")
