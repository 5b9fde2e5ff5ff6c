"""
vpong.render
============
pygame drawing for the field and the game-over overlay.

The renderer is only ever *informed*: it receives a :class:`Snapshot` and
never touches the simulation state.
"""

from __future__ import annotations

import numpy as np
import pygame
import pygame.surfarray

from vpong.constants import *
from vpong.state import Side, Snapshot

DASH = 4


# ---------------------------------------------------------------------------
# Surface ➔ RGB helper (RecordVideo expects uint8 RGB, shape (H, W, 3))
# ---------------------------------------------------------------------------
def rgb(surface: pygame.Surface) -> np.ndarray:
    arr = pygame.surfarray.array3d(surface)      # (W, H, 3)
    return np.transpose(arr, (1, 0, 2))          # (H, W, 3)


def _dashed_midline(surface: pygame.Surface) -> None:
    y = HEIGHT // 2
    for x in range(0, WIDTH, DASH * 2):
        pygame.draw.line(surface, GREY, (x, y), (min(x + DASH, WIDTH), y))


def draw_field(surface: pygame.Surface, snap: Snapshot,
               font: pygame.font.Font | None = None) -> None:
    surface.fill(BLACK)

    # player paddle (bottom), computer paddle (top)
    pygame.draw.rect(surface, WHITE, pygame.Rect(
        round(snap.player_paddle_x), PLAYER_PADDLE_Y, PADDLE_WIDTH, PADDLE_HEIGHT))
    pygame.draw.rect(surface, WHITE, pygame.Rect(
        round(snap.computer_paddle_x), COMPUTER_PADDLE_Y, PADDLE_WIDTH, PADDLE_HEIGHT))

    _dashed_midline(surface)
    pygame.draw.circle(surface, WHITE, (round(snap.ball_x), round(snap.ball_y)), BALL_RADIUS)

    if font is not None:
        ptxt = font.render(str(snap.player_score), True, WHITE)
        ctxt = font.render(str(snap.computer_score), True, WHITE)
        surface.blit(ptxt, (20, HEIGHT // 2 + 50 - ptxt.get_height()))
        surface.blit(ctxt, (20, HEIGHT // 2 - 30 - ctxt.get_height()))


def play_again_rect() -> pygame.Rect:
    """Hit-box of the "Play Again" button; the host uses it for clicks."""
    rect = pygame.Rect(0, 0, 160, 44)
    rect.center = (WIDTH // 2, HEIGHT // 2 + 40)
    return rect


def draw_game_over(surface: pygame.Surface, winner: Side,
                   title_font: pygame.font.Font,
                   button_font: pygame.font.Font) -> None:
    surface.fill(BLACK)

    title = title_font.render(f"{winner.label} Wins!", True, WHITE)
    surface.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 40)))

    button = play_again_rect()
    pygame.draw.rect(surface, WHITE, button, width=2, border_radius=5)
    label = button_font.render("Play Again", True, WHITE)
    surface.blit(label, label.get_rect(center=button.center))
