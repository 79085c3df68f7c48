"""Snake body and movement: head at index 0, tail last."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import Direction
from .grid import Position


@dataclass
class Segment:
    position: Position
    append: bool = False  # keep this segment on the next step (deferred growth)


class Snake:
    def __init__(
        self,
        length: int = 4,
        size: int = 24,
        offset: Tuple[int, int] = (3, 3),
        segments: Optional[Sequence[Tuple[int, int]]] = None,
    ):
        if segments is not None:
            # explicit layout, head first
            if not segments:
                raise ValueError("A snake needs at least one segment")
            self.segments: List[Segment] = [Segment(Position(*p)) for p in segments]
            return

        # Never longer than a row, so the horizontal spawn layout can't overlap itself.
        length = min(max(1, int(length)), size)
        ox, oy = offset
        # Head at offset.x + length - 1, body trailing to the left.
        self.segments = [
            Segment(Position((ox + length - 1 - i) % size, oy % size)) for i in range(length)
        ]

    # ---------- Accessors ----------
    def __len__(self) -> int:
        return len(self.segments)

    @property
    def head(self) -> Position:
        return self.segments[0].position

    @property
    def tail(self) -> Position:
        return self.segments[-1].position

    @property
    def body(self) -> List[Position]:
        return [s.position for s in self.segments[1:]]

    @property
    def positions(self) -> List[Position]:
        return [s.position for s in self.segments]

    @property
    def growing(self) -> bool:
        return self.segments[-1].append

    @property
    def collides(self) -> bool:
        """True when the head sits on any other segment."""
        head = self.head
        return any(s.position == head for s in self.segments[1:])

    # ---------- Movement ----------
    def mark_growth(self) -> None:
        """Keep the current tail on the next step. Calling twice still grows by one."""
        self.segments[-1].append = True

    def step(self, direction: Direction, size: int) -> Position:
        """
        Move one cell in ``direction`` on a ``size`` x ``size`` torus.
        Returns the new head position.
        """
        dx, dy = direction.value
        hx, hy = self.head
        new_head = Position((hx + dx) % size, (hy + dy) % size)

        self.segments.insert(0, Segment(new_head))
        tail = self.segments[-1]
        if tail.append:
            tail.append = False
        else:
            self.segments.pop()
        return new_head
