# game.py
from __future__ import annotations
import enum
import logging
import time
from typing import Callable, List, Optional, Tuple

import numpy as np  # type: ignore

from .config import (
    BODY_EVEN, BODY_ODD, FOOD, HEAD,
    CFG, Config, Direction, is_opposite,
)
from .food import Clock, Food
from .grid import Grid, Position, Shape
from .scheduler import ManualScheduler, Scheduler
from .snake import Snake

logger = logging.getLogger(__name__)

DEFAULT_DIRECTION = Direction.RIGHT

CellState = Tuple[Position, Tuple[int, int, int], Shape]


class Status(enum.Enum):
    STARTING = "starting"
    RUNNING = "running"
    PAUSING = "pausing"
    RESTARTING = "restarting"


class Game:
    """
    Owns the grid, the snake and the active foods, and advances them one tick at a time.

    Ticks come from ``scheduler`` while the game is running; ``on_render`` is called with
    the game whenever there is something new to paint.
    """

    def __init__(
        self,
        config: Config = CFG,
        scheduler: Optional[Scheduler] = None,
        clock: Clock = time.monotonic,
        rng: Optional[np.random.Generator] = None,
        on_render: Optional[Callable[["Game"], None]] = None,
    ):
        self.config = config
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.clock = clock
        self._own_rng = rng is None
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.on_render = on_render
        self._init_state()
        self.update_grid()

    def _init_state(self) -> None:
        cfg = self.config
        self.grid = Grid(cfg.grid_size)
        self.snake = Snake(cfg.snake_length, self.grid.size, cfg.snake_offset)
        self._foods: List[Food] = []
        self._direction = DEFAULT_DIRECTION  # last heading the snake moved in
        self._pending = DEFAULT_DIRECTION
        self.status = Status.STARTING
        self.score = 0

    # ---------- Read-only views ----------
    @property
    def running(self) -> bool:
        return self.status is Status.RUNNING

    @property
    def direction(self) -> Direction:
        """Heading for the next step."""
        return self._pending

    @property
    def foods(self) -> List[Food]:
        """Foods that are still on the board (eaten ones linger until the next sweep)."""
        return [f for f in self._foods if not f.expired]

    def snapshot(self) -> Tuple[CellState, ...]:
        return tuple((c.position, c.color, c.shape) for c in self.grid)

    # ---------- Lifecycle ----------
    def start(self) -> None:
        if self.status is Status.RUNNING:
            return
        if self.status is Status.RESTARTING:
            self.reset()
        self.status = Status.RUNNING
        self.scheduler.start(self.config.tick_ms, self.tick)
        logger.info("Game started (tick every %d ms)", self.config.tick_ms)
        self.render()

    def stop(self) -> None:
        self.scheduler.cancel()
        if self.status is not Status.RESTARTING:
            self.status = Status.PAUSING
        logger.info("Game stopped (%s)", self.status.value)
        self.render()

    def toggle(self) -> None:
        if self.running:
            self.stop()
        else:
            self.start()

    def reset(self) -> None:
        self.scheduler.cancel()
        if self._own_rng:
            self.rng = np.random.default_rng(self.config.seed)
        self._init_state()
        self.update_grid()
        logger.info("Game reset")

    def set_direction(self, direction: Direction) -> None:
        """Queue a heading for the next step; reversing the last step is ignored."""
        if is_opposite(direction, self._direction):
            return
        self._pending = direction

    # ---------- Tick ----------
    def tick(self) -> None:
        self.update_foods()
        self.spawn_food()
        # Commit direction once per tick
        self._direction = self._pending
        self.snake.step(self._direction, self.grid.size)

        if self.snake.collides:
            logger.info("Game over at %s, score %d", self.snake.head, self.score)
            self.stop()
            self.status = Status.RESTARTING
            self.render()
            return

        self.feed()
        self.update_grid()
        self.render()

    def update_foods(self) -> None:
        """Drop expired (and eaten) foods."""
        before = len(self._foods)
        self._foods = [f for f in self._foods if not f.expired]
        if len(self._foods) != before:
            logger.debug("Swept %d food(s)", before - len(self._foods))

    def spawn_food(self) -> Optional[Food]:
        chance = self.config.spawn_probability(len(self._foods))
        if chance <= 0.0 or self.rng.random() >= chance:
            return None

        size = self.grid.size
        position = Position(int(self.rng.integers(size)), int(self.rng.integers(size)))
        low, high = self.config.food_ttl_range
        ttl = int(self.rng.integers(low, high + 1)) * self.config.expiration_multiplier
        food = Food(position, ttl=ttl, clock=self.clock)
        self._foods.append(food)
        logger.debug("Spawned %r", food)
        return food

    def add_food(self, position: Tuple[int, int], ttl: float = 10.0) -> Food:
        """Place a food directly, bypassing the spawn roll."""
        food = Food(self.grid.wrap(*position), ttl=ttl, clock=self.clock)
        self._foods.append(food)
        return food

    def feed(self) -> None:
        head = self.snake.head
        for food in self.foods:
            if food.position == head:
                self.snake.mark_growth()
                food.expire()
                self.score += 1
                logger.debug("Ate food at %s, score %d", head, self.score)

    def update_grid(self) -> None:
        """Repaint every cell from the snake and the foods."""
        self.grid.clear()
        for food in self.foods:
            cell = self.grid.lookup(*food.position)
            if cell is None:
                continue
            cell.paint(food.color, Shape.DISC)

        last = len(self.snake) - 1
        for index, segment in enumerate(self.snake.segments):
            cell = self.grid.lookup(*segment.position)
            if cell is None:
                continue
            if index == 0:
                cell.paint(HEAD, Shape.BLOCK)
                continue
            if index == last and segment.append:
                color = FOOD  # swallowed food, not yet grown into
            else:
                color = BODY_EVEN if index % 2 == 0 else BODY_ODD
            cell.paint(color, Shape.BLOCK)

    def render(self) -> None:
        if self.on_render is not None:
            self.on_render(self)
