from __future__ import annotations
import time
from typing import Callable, Tuple

from .config import FOOD
from .grid import Position

Clock = Callable[[], float]


class Food:
    """A food item that disappears ``ttl`` seconds after it was created."""

    def __init__(
        self,
        position: Position,
        ttl: float = 10.0,
        color: Tuple[int, int, int] = FOOD,
        clock: Clock = time.monotonic,
    ):
        self.position = position
        self.color = color
        self._clock = clock
        self.expires_at = clock() + ttl

    @property
    def expired(self) -> bool:
        return self._clock() >= self.expires_at

    def expire(self) -> None:
        """Force expiry; the next sweep drops this food."""
        self.expires_at = float("-inf")

    def __repr__(self) -> str:
        return f"Food(position={self.position}, expires_at={self.expires_at:.2f})"
