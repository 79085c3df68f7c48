# render.py
from __future__ import annotations
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import BG, OVERLAY, TEXT
from .game import Game, Status
from .grid import Position, Shape

# ---------- Helpers ----------
def board_rect(screen: pygame.Surface) -> pygame.Rect:
    """Largest centered square that fits the surface."""
    w, h = screen.get_size()
    side = min(w, h)
    return pygame.Rect((w - side) // 2, (h - side) // 2, side, side)

def cell_rect(board: pygame.Rect, size: int, pos: Position) -> pygame.Rect:
    # Edges from integer division so neighbouring cells tile without gaps.
    left = board.left + pos.x * board.width // size
    top = board.top + pos.y * board.height // size
    right = board.left + (pos.x + 1) * board.width // size
    bottom = board.top + (pos.y + 1) * board.height // size
    return pygame.Rect(left, top, right - left, bottom - top)

def draw_cell(
    screen: pygame.Surface,
    rect: pygame.Rect,
    color: Tuple[int, int, int],
    shape: Shape,
) -> None:
    if shape is Shape.DISC:
        pygame.draw.rect(screen, BG, rect)
        pygame.draw.circle(screen, color, rect.center, min(rect.width, rect.height) // 2)
    else:
        pygame.draw.rect(screen, color, rect)

# ---------- Draw ----------
def draw_board(screen: pygame.Surface, game: Game) -> pygame.Rect:
    board = board_rect(screen)
    size = game.grid.size
    for pos, color, shape in game.snapshot():
        draw_cell(screen, cell_rect(board, size, pos), color, shape)
    return board

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines) -> None:
    # Dim with translucent overlay
    w, h = screen.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, (0, 0))

    top = h // 2 - 16 * (len(lines) - 1)
    for i, line in enumerate(lines):
        txt = font.render(line, True, TEXT)
        screen.blit(txt, txt.get_rect(center=(w // 2, top + 32 * i)))

def draw_game(screen: pygame.Surface, font: Optional[pygame.font.Font], game: Game) -> None:
    screen.fill((0, 0, 0))
    draw_board(screen, game)
    if font is None:
        return

    score = font.render(f"Score: {game.score}", True, TEXT)
    screen.blit(score, (8, 6))

    if game.status is Status.STARTING:
        draw_overlay(screen, font, ["SNAKE", "Press SPACE or click to start"])
    elif game.status is Status.PAUSING:
        draw_overlay(screen, font, ["PAUSED", "Press SPACE to resume"])
    elif game.status is Status.RESTARTING:
        draw_overlay(screen, font, ["GAME OVER", f"Score: {game.score}", "Press SPACE to restart"])
