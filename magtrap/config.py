from dataclasses import dataclass, replace

from .constants import CHARGE_MULTIPLIER_RANGE, FIELD_STRENGTH_RANGE, MIN_TRAP_RADIUS


def _clamp(value, lo, hi):
    return max(lo, min(hi, float(value)))


@dataclass
class Tunables:
    """
    Per-frame values owned by the control panel.

    The engine reads these every tick; only the auto-adjust rule writes back
    (to `field_strength`).
    """
    field_strength: float = 3.0
    charge_multiplier: float = 1.0
    trap_radius: float = 150.0
    trace_enabled: bool = False

    def clamped(self, max_radius=None):
        """Return a copy with every value forced into its declared range."""
        hi_radius = float('inf') if max_radius is None else max(MIN_TRAP_RADIUS, float(max_radius))
        return replace(
            self,
            field_strength=_clamp(self.field_strength, *FIELD_STRENGTH_RANGE),
            charge_multiplier=_clamp(self.charge_multiplier, *CHARGE_MULTIPLIER_RANGE),
            trap_radius=_clamp(self.trap_radius, MIN_TRAP_RADIUS, hi_radius),
            trace_enabled=bool(self.trace_enabled),
        )

    def to_dict(self):
        return {
            'field_strength': self.field_strength,
            'charge_multiplier': self.charge_multiplier,
            'trap_radius': self.trap_radius,
            'trace_enabled': self.trace_enabled,
        }
