import math

from .constants import K, MIN_DIST_SQ
from .field import FieldCell
from .Vec2 import Vec2


def compute_field_at(source_pos, target_pos, source_charge):
    """
    Inverse-square field that a charge at `source_pos` induces at `target_pos`.

    Points along source -> target, with signed length K * q / d², where d² is
    floored at MIN_DIST_SQ. Multiply by the target's charge to get a force.
    """
    disp = Vec2(target_pos.x - source_pos.x, target_pos.y - source_pos.y)
    dist_sq = max(disp.length_sq(), MIN_DIST_SQ)
    return disp.with_length(K * source_charge / dist_sq)


def apply_coulomb_forces(particles, multiplier=1.0):
    """
    Accumulate the pairwise electrostatic force on every particle.

    Each ordered pair is visited once, so both sides of a pair get their own
    explicitly computed force. Self-pairs are skipped by identity.
    """
    for a in particles:
        for b in particles:
            if a is b:
                continue
            force = a.field_at(b.pos)
            b.apply_force(force * (b.charge * multiplier))


def rotation_angle_for(kind, field_strength, charge):
    """Velocity kick in radians for a particle of `charge` sitting on a cell of `kind`."""
    if kind == FieldCell.CLOCKWISE:
        return math.radians(field_strength * charge)
    if kind == FieldCell.COUNTERCLOCKWISE:
        return math.radians(-field_strength * charge)
    return 0.0


def apply_field_rotation(particles, grid, field_strength):
    """Rotate each particle's velocity according to the coil under its current position."""
    for p in particles:
        kind = grid.cell_at(p.pos.x, p.pos.y)
        if kind is None or kind == FieldCell.EMPTY:
            continue
        p.vel.rotate_in_place(rotation_angle_for(kind, field_strength, p.charge))
