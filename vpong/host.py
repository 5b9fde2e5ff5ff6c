"""
vpong.host
==========
Thin pygame driver around :class:`vpong.game.Game`.

Mouse motion feeds the player paddle, every frame runs one ``tick`` and
draws the snapshot; while the game is over the overlay is shown until the
player clicks "Play Again" (or presses Space / Enter).
"""

from __future__ import annotations

import logging
import os

import pygame

from vpong.constants import HEIGHT, PADDLE_DIFF, WIDTH
from vpong.game import Game
from vpong.render import draw_field, draw_game_over, play_again_rect
from vpong.state import Phase

logger = logging.getLogger(__name__)


def pointer_to_paddle_x(pointer_x: float, canvas_offset: float = 0) -> float:
    """Pointer x in host coordinates → paddle x (centred under the pointer).

    Clamping is left to :meth:`Game.set_player_paddle_x`.
    """
    return pointer_x - canvas_offset - PADDLE_DIFF


def detect_screen_width() -> int:
    """Width of the desktop pygame reports; used for profile auto-selection."""
    os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
    pygame.display.init()
    return pygame.display.Info().current_w


def run(game: Game, *, fps: int = 60, max_frames: int | None = None) -> int:
    """Open a window and play until it is closed.

    Returns the number of games that finished.
    """
    os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("vpong")
    clock = pygame.time.Clock()
    score_font = pygame.font.SysFont("couriernew", 32)
    title_font = pygame.font.SysFont("couriernew", 40, bold=True)
    button_font = pygame.font.SysFont("couriernew", 24)

    game.start_game()
    finished, frames, running = 0, 0, True
    try:
        while running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        running = False
                    elif e.key in (pygame.K_SPACE, pygame.K_RETURN) \
                            and game.phase is Phase.GAME_OVER:
                        game.start_game()
                elif e.type == pygame.MOUSEMOTION and game.phase is Phase.PLAYING:
                    game.set_player_paddle_x(pointer_to_paddle_x(e.pos[0]))
                elif e.type == pygame.MOUSEBUTTONDOWN \
                        and game.phase is Phase.GAME_OVER \
                        and play_again_rect().collidepoint(e.pos):
                    game.start_game()

            if game.phase is Phase.PLAYING:
                # cursor hidden while the paddle follows it
                pygame.mouse.set_visible(False)
                result = game.tick()
                if result.winner is not None:
                    finished += 1
                    logger.info("Game %d over, %s won", finished, result.winner.label)

            snap = game.snapshot()
            if snap.phase is Phase.GAME_OVER:
                pygame.mouse.set_visible(True)
                draw_game_over(screen, snap.winner, title_font, button_font)
            else:
                draw_field(screen, snap, score_font)

            pygame.display.flip()
            clock.tick(fps)

            frames += 1
            if max_frames is not None and frames >= max_frames:
                logger.info("Stopping after %d frames", frames)
                running = False
    finally:
        pygame.display.quit()
        pygame.quit()

    return finished
