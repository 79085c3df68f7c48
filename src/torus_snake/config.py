from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# ----- Window -----
WIDTH, HEIGHT = 600, 600
CAPTION = "Snake"

# ----- Colors -----
BG         = (255, 255, 255)
FOOD       = (255, 112, 10)
HEAD       = (9, 44, 9)
BODY_EVEN  = (29, 119, 29)
BODY_ODD   = (49, 199, 49)
TEXT       = (240, 240, 250)
OVERLAY    = (0, 0, 0, 140)  # RGBA


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.value[0] == -b.value[0] and a.value[1] == -b.value[1]


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    # presentation only
    width: int = WIDTH
    height: int = HEIGHT

    tick_ms: int = 100
    grid_size: int = 24
    snake_length: int = 4
    snake_offset: Tuple[int, int] = (3, 3)

    # chance per tick of a spawn, indexed by the number of active foods
    spawn_probabilities: Tuple[float, ...] = (0.085, 0.0055, 0.0025)
    spawn_multiplier: float = 1.0

    # food lifetime in whole seconds, inclusive
    food_ttl_range: Tuple[int, int] = (8, 12)
    expiration_multiplier: float = 1.0

    seed: Optional[int] = None

    def __post_init__(self):
        # Clamped rather than rejected: the snake needs room to exist.
        object.__setattr__(self, "grid_size", max(3, int(self.grid_size)))
        object.__setattr__(self, "snake_length", max(1, int(self.snake_length)))
        object.__setattr__(self, "spawn_probabilities", tuple(self.spawn_probabilities))

        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.spawn_multiplier < 0:
            raise ValueError(f"spawn_multiplier must be >= 0, got {self.spawn_multiplier}")
        if self.expiration_multiplier < 0:
            raise ValueError(
                f"expiration_multiplier must be >= 0, got {self.expiration_multiplier}"
            )

        previous = 1.0
        for p in self.spawn_probabilities:
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"Spawn probability out of range: {p}")
            if p > previous:
                raise ValueError(
                    "spawn_probabilities must not increase with the food count: "
                    f"{self.spawn_probabilities}"
                )
            previous = p

        low, high = self.food_ttl_range
        if low < 0 or high < low:
            raise ValueError(f"Invalid food_ttl_range: {self.food_ttl_range}")

    def spawn_probability(self, food_count: int) -> float:
        """Chance of spawning a food this tick given ``food_count`` active foods."""
        if food_count < 0 or food_count >= len(self.spawn_probabilities):
            return 0.0
        return min(1.0, self.spawn_probabilities[food_count] * self.spawn_multiplier)


CFG = Config()
