from enum import Enum

from .bottle import MagneticBottle
from .mirror import MirrorTrap
from .ring import RingTrap


class PresetKind(str, Enum):
    RING = "ring"
    BOTTLE = "bottle"
    MIRROR = "mirror"


_PRESETS = {
    PresetKind.RING: RingTrap,
    PresetKind.BOTTLE: MagneticBottle,
    PresetKind.MIRROR: MirrorTrap,
}


def get_preset(kind):
    """Return a preset instance for a PresetKind or its string name."""
    try:
        kind = PresetKind(kind)
    except ValueError:
        raise ValueError(f"unknown preset {kind!r}; expected one of {[k.value for k in PresetKind]}") from None
    return _PRESETS[kind]()
