"""Renderer output on an off-screen surface."""

from __future__ import annotations

import pygame
import pytest

from magtrap.app import constants, renderer
from magtrap.field import FieldCell
from magtrap.session import Session


@pytest.fixture
def surface():
    return pygame.Surface((100, 100))


def test_charge_colors(surface):
    s = Session(100, 100)
    s.spawn_charge(30, 30, 1.0)
    s.spawn_charge(70, 70, -0.5, lazy=True)
    frame = s.snapshot()
    assert renderer.charge_color(frame.particles[0]) == constants.RED
    assert renderer.charge_color(frame.particles[1]) == constants.DARK_BLUE

    renderer.draw_frame(surface, frame)
    assert tuple(surface.get_at((33, 33)))[:3] == constants.RED
    assert tuple(surface.get_at((72, 72)))[:3] == constants.DARK_BLUE


def test_coil_cells_are_tinted(surface):
    s = Session(100, 100)
    s.set_field_cell(0, 0, FieldCell.CLOCKWISE)
    renderer.draw_frame(surface, s.snapshot())
    assert tuple(surface.get_at((10, 10)))[:3] != constants.WHITE
    assert tuple(surface.get_at((50, 50)))[:3] == constants.WHITE


def test_trails_drawn_only_when_traced(surface):
    s = Session(100, 100)
    s.set_tunables(trace_enabled=True)
    p = s.spawn_charge(50, 10, 0.5)
    for x in range(10, 90, 10):
        p.pos.x = float(x)
        p.add_trail()
    p.pos.x = 95.0
    renderer.draw_frame(surface, s.snapshot())
    assert tuple(surface.get_at((45, 10)))[:3] == constants.TRAIL_COLOR
