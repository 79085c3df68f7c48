# controls.py
from __future__ import annotations
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import Direction
from .game import Game

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class TouchSteering:
    """
    Turns taps into turns relative to the previous tap: while moving sideways a tap
    above/below steers up/down, while moving vertically a tap left/right steers left/right.
    Coordinates are pygame's normalized finger positions in [0, 1].
    """

    def __init__(self, x: float = 0.5, y: float = 0.5):
        self.last: Tuple[float, float] = (x, y)

    def steer(self, current: Direction, x: float, y: float) -> Direction:
        lx, ly = self.last
        self.last = (x, y)
        if current in (Direction.LEFT, Direction.RIGHT):
            return Direction.UP if y < ly else Direction.DOWN
        return Direction.LEFT if x < lx else Direction.RIGHT


def handle_event(game: Game, event: pygame.event.Event, touch: TouchSteering) -> bool:
    """Apply one input event to the game. Return False to quit."""
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_SPACE:
            game.toggle()
            return True
        cand: Optional[Direction] = KEY_DIRECTIONS.get(event.key)
        if cand is not None:
            game.set_direction(cand)

    elif event.type == pygame.MOUSEBUTTONDOWN:
        if not game.running:
            game.start()

    elif event.type == pygame.FINGERDOWN:
        if game.running:
            game.set_direction(touch.steer(game.direction, event.x, event.y))

    return True
