# --- Constants ---
WIDTH, HEIGHT = 800, 600
FPS = 60
CELL_SIZE = 20

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
DARK_RED = (128, 0, 0)       # lazy positive
DARK_BLUE = (0, 0, 128)      # lazy negative

CLOCKWISE_COLOR = (0, 255, 255, 150)         # cyan coil
COUNTERCLOCKWISE_COLOR = (255, 0, 255, 150)  # magenta coil
GRID_COLOR = (200, 200, 200)
TRAIL_COLOR = (100, 100, 100)
REPLAY_TRAIL_COLOR = (50, 50, 50)
