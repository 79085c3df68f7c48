# main.py
import logging

import pygame  # type: ignore

from .config import CAPTION, CFG
from .controls import TouchSteering, handle_event
from .game import Game
from .render import draw_game
from .scheduler import PygameScheduler

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((CFG.width, CFG.height), pygame.RESIZABLE)
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    scheduler = PygameScheduler()
    dirty = True

    def on_render(_game):
        nonlocal dirty
        dirty = True

    game = Game(CFG, scheduler=scheduler, on_render=on_render)
    touch = TouchSteering()
    running = True
    logger.info("Grid %dx%d, snake length %d", game.grid.size, game.grid.size, len(game.snake))

    while running:
        # 1) input + timer events, dispatched one at a time
        for event in pygame.event.get():
            if scheduler.dispatch(event):
                continue
            if event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                dirty = True
                continue
            if not handle_event(game, event, touch):
                running = False
                break

        # 2) render only when the game changed
        if dirty:
            draw_game(screen, font, game)
            pygame.display.flip()
            dirty = False
        clock.tick(60)

    scheduler.cancel()
    pygame.quit()

if __name__ == "__main__":
    main()
