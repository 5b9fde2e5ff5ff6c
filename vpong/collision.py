"""
vpong.collision
===============
Boundary and paddle resolution, run once per tick right after
:func:`vpong.ball.advance`.

Order matters and is fixed: side walls, player (bottom) band, computer (top)
band.  Only the player paddle speeds the rally up, angles the ball, and can
push the AI into its escalated speed; the computer paddle just returns the
ball straight.
"""

from __future__ import annotations

import logging

from vpong.ball import reset_to_center
from vpong.constants import (
    DEFLECTION_FACTOR,
    ESCALATED_AI_SPEED,
    HEIGHT,
    MAX_BALL_SPEED,
    PADDLE_DIFF,
    PADDLE_WIDTH,
    WIDTH,
)
from vpong.score import award
from vpong.state import SimulationState, Side

logger = logging.getLogger(__name__)


def _over_paddle(x: float, paddle_x: float) -> bool:
    return paddle_x <= x < paddle_x + PADDLE_WIDTH


def bounce_walls(state: SimulationState) -> None:
    ball = state.ball
    # no position correction: the ball may sit outside for a frame
    if ball.x < 0 and ball.vx < 0:
        ball.vx = -ball.vx
    if ball.x > WIDTH and ball.vx > 0:
        ball.vx = -ball.vx


def deflection(ball_x: float, paddle_x: float) -> float:
    """Horizontal speed from the contact offset to the paddle centre."""
    trajectory_x = ball_x - (paddle_x + PADDLE_DIFF)
    return trajectory_x * DEFLECTION_FACTOR


def resolve_player_paddle(state: SimulationState) -> Side | None:
    ball = state.ball
    if ball.y < HEIGHT - PADDLE_DIFF:
        return None

    if _over_paddle(ball.x, state.player_paddle_x):
        state.ball_in_play = True
        if state.player_has_moved:
            ball.vy -= 1
            if ball.vy < -MAX_BALL_SPEED:
                ball.vy = -MAX_BALL_SPEED
                state.ai_speed = ESCALATED_AI_SPEED
        ball.vy = -ball.vy
        ball.vx = deflection(ball.x, state.player_paddle_x)
        return None

    if ball.y > HEIGHT:
        reset_to_center(state)
        award(state, Side.COMPUTER)
        return Side.COMPUTER
    return None


def resolve_computer_paddle(state: SimulationState) -> Side | None:
    ball = state.ball
    if ball.y > PADDLE_DIFF:
        return None

    if _over_paddle(ball.x, state.computer_paddle_x):
        if state.player_has_moved:
            ball.vy += 1
            if ball.vy > MAX_BALL_SPEED:
                ball.vy = MAX_BALL_SPEED
        ball.vy = -ball.vy
        return None

    if ball.y < 0:
        reset_to_center(state)
        award(state, Side.PLAYER)
        return Side.PLAYER
    return None


def resolve(state: SimulationState) -> Side | None:
    """Run all checks for this tick and return the side that scored, if any."""
    bounce_walls(state)
    scored = resolve_player_paddle(state)
    scored = resolve_computer_paddle(state) or scored
    if scored is not None:
        logger.debug(
            "%s scores (%d-%d)", scored.label,
            state.player_score, state.computer_score,
        )
    return scored
