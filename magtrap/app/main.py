import logging

import pygame
from magtrap.app.constants import CELL_SIZE, FPS, HEIGHT, WIDTH
from magtrap.app.panel import apply_shared, publish_frame, seed_shared
from magtrap.app import renderer
from magtrap.field import FieldCell
from magtrap.session import Session

from multiprocessing import Process, Manager
from magtrap.app import gui_controller as gui_ctrl

logger = logging.getLogger(__name__)

SPAWN_KEYS = {pygame.K_1: 1.0, pygame.K_2: -1.0}
PAINT_KEYS = {pygame.K_3: FieldCell.CLOCKWISE, pygame.K_4: FieldCell.COUNTERCLOCKWISE, pygame.K_0: FieldCell.EMPTY}


def spawn_from_key(session, key, mods, pos):
    """'1'/'2' spawn a positive/negative charge at the cursor; Shift makes it lazy, Alt halves it."""
    sign = SPAWN_KEYS.get(key)
    if sign is None:
        return None
    magnitude = 0.5 if mods & pygame.KMOD_ALT else 1.0
    lazy = bool(mods & pygame.KMOD_SHIFT)
    return session.spawn_charge(pos[0], pos[1], sign * magnitude, lazy=lazy)


def paint_held_keys(session, pressed, pos):
    for key, kind in PAINT_KEYS.items():
        if pressed[key]:
            session.paint_field(pos[0], pos[1], kind)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Magnetic Charge Trap")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 22)

    session = Session(WIDTH, HEIGHT, cell_size=CELL_SIZE)

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict()
    seed_shared(_shared, session)
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    session.toggle_running()
                elif not session.replaying:
                    spawn_from_key(session, event.key, event.mod, pygame.mouse.get_pos())

        if not session.replaying:
            paint_held_keys(session, pygame.key.get_pressed(), pygame.mouse.get_pos())

        try:
            applied_strength = apply_shared(session, _shared)
            if _shared.get('__exit__', False):
                running = False
        except (EOFError, BrokenPipeError, ConnectionError):
            logger.warning("Control panel connection lost; continuing without it")
            _shared = {}
            applied_strength = session.tunables.field_strength

        frame = session.tick()

        try:
            publish_frame(_shared, frame, applied_strength)
        except (EOFError, BrokenPipeError, ConnectionError):
            _shared = {}

        renderer.draw_frame(screen, frame)
        renderer.draw_info(screen, frame, font)
        pygame.display.flip()
        clock.tick(FPS)

    # cleanup: signal GUI to exit and join
    try:
        _shared['__exit__'] = True
        _gui_proc.join(timeout=1.0)
    except (EOFError, BrokenPipeError, ConnectionError):
        pass

    pygame.quit()


if __name__ == "__main__":
    main()
