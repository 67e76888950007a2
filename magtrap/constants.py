# --- Electrostatics ---
K = 1000.0                 # Coulomb-like constant (arbitrary units)
MIN_DIST_SQ = 25.0         # squared distance floor, keeps the field finite near a source

# --- Integration ---
MAX_SPEED = 10.0           # units per tick
TRAIL_LENGTH = 50
LAZY_INTERVAL = 5          # lazy particles integrate every Nth tick
CHARGE_SIZE_SCALE = 20     # rendered diameter per unit of |charge|

# --- Auto-adjust ---
FIELD_STRENGTH_STEP = 0.1
FIELD_STRENGTH_MAX = 10.0

# --- Presets ---
RING_HALF_WIDTH = 10.0     # annulus spans radius +/- this, in world units
BOTTLE_THICKNESS = 2       # cells

# --- Tunable ranges ---
FIELD_STRENGTH_RANGE = (0.0, FIELD_STRENGTH_MAX)
CHARGE_MULTIPLIER_RANGE = (0.5, 5.0)
MIN_TRAP_RADIUS = 50.0
