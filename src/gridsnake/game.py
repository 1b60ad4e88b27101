# src/gridsnake/game.py
from typing import Tuple
import pygame # type: ignore

from .config import (
    CELL_SIZE, HUD_HEIGHT,
    BG, GRID, HEAD, BODY, FOOD, TEXT, MUTED, WARN, DEAD,
    GameStatus, Mode,
)
from .engine import Snapshot

# ---------- Helpers ----------
def board_size(snap: Snapshot) -> Tuple[int, int]:
    side = snap.grid_size * CELL_SIZE
    return side, side + HUD_HEIGHT

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, HUD_HEIGHT + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, GRID, rect, 1)

def draw_food(screen: pygame.Surface, gx: int, gy: int) -> None:
    center = (gx * CELL_SIZE + CELL_SIZE // 2, HUD_HEIGHT + gy * CELL_SIZE + CELL_SIZE // 2)
    pygame.draw.circle(screen, FOOD, center, max(2, CELL_SIZE // 3))

def _centered(screen: pygame.Surface, font: pygame.font.Font, text: str, color, dy: int) -> None:
    w, h = screen.get_size()
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=(w // 2, HUD_HEIGHT + (h - HUD_HEIGHT) // 2 + dy)))

# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)
    for y in range(snap.grid_size):
        for x in range(snap.grid_size):
            draw_cell(screen, x, y, BG)

    # food is hidden under the snake when the board is full
    if snap.food not in snap.snake:
        draw_food(screen, *snap.food)

    for i, (x, y) in enumerate(snap.snake):
        draw_cell(screen, x, y, HEAD if i == 0 else BODY)

    # HUD
    mode = "Wall Pass" if snap.mode == Mode.TOROIDAL else "Walls"
    hud = font.render(f"Score: {snap.score}   High Score: {snap.high_score}   [{mode}]", True, TEXT)
    screen.blit(hud, (8, (HUD_HEIGHT - hud.get_height()) // 2))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Status text on top of the board for every state except PLAYING."""
    if snap.status == GameStatus.IDLE:
        _centered(screen, font, "Press Enter to start", TEXT, -16)
        _centered(screen, font, "Arrows/WASD to steer, Space to pause, M for wall pass", MUTED, 12)
    elif snap.status == GameStatus.PAUSED:
        _centered(screen, font, "Game Paused", WARN, -16)
        _centered(screen, font, "Press Space to resume", MUTED, 12)
    elif snap.status == GameStatus.GAME_OVER:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((255, 255, 255, 150))  # RGBA
        screen.blit(overlay, (0, 0))
        _centered(screen, font, "Game Over!", DEAD, -28)
        _centered(screen, font, f"Final Score: {snap.score}", TEXT, 0)
        if snap.score == snap.high_score and snap.score > 0:
            _centered(screen, font, "New Record!", HEAD, 24)
        _centered(screen, font, "Press R to reset", MUTED, 48)
