from __future__ import annotations

from vpong.constants import HEIGHT, RESET_SPEED, WIDTH
from vpong.state import SimulationState


def advance(state: SimulationState) -> None:
    """Move the ball one tick.

    The ball travels straight up/down until the player has moved *and* the
    player paddle has touched it since the last reset.
    """
    ball = state.ball
    ball.y += -ball.vy
    if state.player_has_moved and state.ball_in_play:
        ball.x += ball.vx


def reset_to_center(state: SimulationState) -> None:
    """Re-serve from the centre toward the player. ``vx`` and scores untouched."""
    ball = state.ball
    ball.x = WIDTH / 2
    ball.y = HEIGHT / 2
    ball.vy = -RESET_SPEED
    state.ball_in_play = False
