# __main__.py - entry point
import os
import logging

import pygame

from klondike import settings as S
from klondike import ui as U
from klondike.scenes.game import KlondikeGameScene

logger = logging.getLogger(__name__)


def _configure_logging():
    level_name = os.environ.get("KLONDIKE_LOG_LEVEL", "WARNING").strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def _initial_window_size():
    info = pygame.display.Info()
    # Keep a safety margin so the window never hides under taskbar
    margin_w, margin_h = 120, 140
    w = min(U.SCREEN_W, max(640, info.current_w - margin_w))
    h = min(U.SCREEN_H, max(480, info.current_h - margin_h))
    return w, h


def main():
    _configure_logging()
    S.load_settings()

    # Center window and init
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    w, h = _initial_window_size()
    U.SCREEN_W, U.SCREEN_H = w, h
    screen = pygame.display.set_mode((w, h))
    pygame.display.set_caption("Klondike Solitaire")
    U.setup_fonts()
    clock = pygame.time.Clock()

    scene = KlondikeGameScene(app=None)
    logger.info("Window %dx%d ready", w, h)

    running = True
    while running:
        dt = clock.tick(60) / 1000.0
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
                break
            scene.handle_event(e)
        if scene.quit_requested:
            running = False
        if scene.next_scene is not None:
            scene = scene.next_scene
        scene.update(dt)
        scene.draw(screen)
        pygame.display.flip()
    pygame.quit()


if __name__ == "__main__":
    main()
