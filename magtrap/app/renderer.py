import pygame

from magtrap.app import constants
from magtrap.field import FieldCell

_COIL_COLORS = {
    FieldCell.CLOCKWISE: constants.CLOCKWISE_COLOR,
    FieldCell.COUNTERCLOCKWISE: constants.COUNTERCLOCKWISE_COLOR,
}


def charge_color(state):
    if state.charge > 0:
        return constants.DARK_RED if state.lazy else constants.RED
    return constants.DARK_BLUE if state.lazy else constants.BLUE


def draw_field(screen, cells, cell_size):
    """Coil cells as translucent squares, plus the grid lines."""
    size = int(cell_size)
    rows, cols = cells.shape
    overlay = pygame.Surface((cols * size, rows * size), pygame.SRCALPHA)
    for row in range(rows):
        for col in range(cols):
            rect = (col * size, row * size, size, size)
            color = _COIL_COLORS.get(int(cells[row, col]))
            if color is not None:
                overlay.fill(color, rect)
    screen.blit(overlay, (0, 0))
    for row in range(rows):
        for col in range(cols):
            pygame.draw.rect(screen, constants.GRID_COLOR, (col * size, row * size, size, size), 1)


def draw_trail(screen, trail, color):
    if len(trail) > 1:
        pygame.draw.lines(screen, color, False, [(p.x, p.y) for p in trail], 1)


def draw_charge(screen, state):
    x, y = int(state.position.x), int(state.position.y)
    half = state.size / 2
    pygame.draw.circle(screen, charge_color(state), (x, y), max(1, int(half)))
    # "+" for positive charges, "-" for negative ones
    pygame.draw.line(screen, constants.WHITE, (x - half, y), (x + half, y))
    if state.charge > 0:
        pygame.draw.line(screen, constants.WHITE, (x, y - half), (x, y + half))


def draw_frame(screen, frame):
    screen.fill(constants.WHITE)
    draw_field(screen, frame.cells, frame.cell_size)
    trail_color = constants.REPLAY_TRAIL_COLOR if frame.replaying else constants.TRAIL_COLOR
    for state in frame.particles:
        if frame.trace_enabled:
            draw_trail(screen, state.trail, trail_color)
        draw_charge(screen, state)


def draw_info(screen, frame, font):
    surf = font.render(frame.status_line(), True, constants.BLACK)
    screen.blit(surf, (10, screen.get_height() - surf.get_height() - 8))
