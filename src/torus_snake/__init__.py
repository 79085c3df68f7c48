"""Snake on a wrap-around grid: simulation core plus pygame adapters."""

from .config import CFG, Config, Direction
from .food import Food
from .game import Game, Status
from .grid import Cell, Grid, Position, Shape
from .scheduler import ManualScheduler, PygameScheduler, Scheduler
from .snake import Segment, Snake

__all__ = [
    "CFG",
    "Cell",
    "Config",
    "Direction",
    "Food",
    "Game",
    "Grid",
    "ManualScheduler",
    "Position",
    "PygameScheduler",
    "Scheduler",
    "Segment",
    "Shape",
    "Snake",
    "Status",
]
