from __future__ import annotations

import numpy as np

from vpong.constants import PADDLE_DIFF, PADDLE_WIDTH, WIDTH
from vpong.state import SimulationState


def track(state: SimulationState) -> None:
    """Chase the ball's x at ``state.ai_speed`` once the player has moved."""
    if not state.player_has_moved:
        return

    if state.computer_paddle_x + PADDLE_DIFF < state.ball.x:
        state.computer_paddle_x += state.ai_speed
    else:
        state.computer_paddle_x -= state.ai_speed

    state.computer_paddle_x = float(
        np.clip(state.computer_paddle_x, 0, WIDTH - PADDLE_WIDTH)
    )
