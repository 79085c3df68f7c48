"""Square lattice of cells whose look is recomputed from game state every tick."""

from __future__ import annotations
from dataclasses import dataclass
import enum
from typing import Iterator, List, NamedTuple, Optional, Tuple

from .config import BG

MIN_SIZE = 3


class Position(NamedTuple):
    x: int
    y: int


class Shape(enum.Enum):
    BLOCK = "block"
    DISC = "disc"


@dataclass
class Cell:
    position: Position
    color: Tuple[int, int, int] = BG
    shape: Shape = Shape.BLOCK

    def paint(self, color: Tuple[int, int, int], shape: Shape) -> None:
        self.color = color
        self.shape = shape


class Grid:
    """
    Fixed ``size`` x ``size`` lattice, one Cell per integer coordinate.
    Cells are stored row-major so ``lookup`` is an index computation.
    """

    def __init__(self, size: int = 24):
        self.size = max(MIN_SIZE, int(size))
        self.cells: List[Cell] = [
            Cell(Position(x, y)) for y in range(self.size) for x in range(self.size)
        ]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def lookup(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at (x, y), or None when the coordinate is off the grid."""
        if not self.contains(x, y):
            return None
        return self.cells[y * self.size + x]

    def wrap(self, x: int, y: int) -> Position:
        return Position(x % self.size, y % self.size)

    def clear(self) -> None:
        for cell in self.cells:
            cell.paint(BG, Shape.BLOCK)

