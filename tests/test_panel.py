"""Shared-dict sync between the control panel and the simulation loop."""

from __future__ import annotations

import pytest

from magtrap.app.panel import COMMAND_FLAGS, apply_shared, publish_frame, seed_shared
from magtrap.session import Session


@pytest.fixture
def session():
    return Session(800, 600, cell_size=20)


@pytest.fixture
def shared(session):
    d = {}
    seed_shared(d, session)
    return d


def test_seed_shared_populates_every_key(session, shared):
    assert shared['field_strength'] == session.tunables.field_strength
    assert shared['trap_radius'] == session.tunables.trap_radius
    assert shared['max_trap_radius'] == session.engine.max_trap_radius
    assert all(shared[flag] is False for flag in COMMAND_FLAGS)


def test_slider_edit_survives_a_frame_without_auto_adjust(session, shared):
    session.toggle_running()
    session.spawn_charge(400, 300, 1.0)
    shared['field_strength'] = 4.0
    applied = apply_shared(session, shared)
    assert applied == 4.0

    # the panel moves the slider again while the loop is mid-frame
    shared['field_strength'] = 7.5
    frame = session.tick()
    publish_frame(shared, frame, applied)

    assert shared['field_strength'] == 7.5
    assert shared['status'] == frame.status_line()
    apply_shared(session, shared)
    assert session.tunables.field_strength == 7.5


def test_auto_adjusted_strength_is_published(session, shared):
    session.toggle_running()
    session.spawn_charge(10, 10, 1.0)
    applied = apply_shared(session, shared)
    frame = session.tick()
    publish_frame(shared, frame, applied)
    assert frame.field_strength == pytest.approx(applied + 0.1)
    assert shared['field_strength'] == frame.field_strength


def test_command_flags_are_consumed(session, shared):
    session.spawn_charge(400, 300, 1.0)
    shared['toggle_running'] = True
    shared['preset_ring'] = True
    apply_shared(session, shared)
    assert session.running is True
    assert session.engine.field.cells.any()
    assert shared['toggle_running'] is False
    assert shared['preset_ring'] is False

    shared['clear_all'] = True
    apply_shared(session, shared)
    assert session.particle_count == 0
    assert shared['clear_all'] is False


def test_out_of_range_slider_values_are_clamped(session, shared):
    shared['field_strength'] = 99.0
    assert apply_shared(session, shared) == 10.0
