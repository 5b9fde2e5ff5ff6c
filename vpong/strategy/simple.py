from __future__ import annotations
from typing import TYPE_CHECKING

from .base import StepStrategy
from vpong.constants import *

if TYPE_CHECKING:
    from vpong.env import VPongEnv


class SimpleStepStrategy(StepStrategy):
    """Sparse reward: +1 for every player point, -1 for every computer point."""

    def move_paddle(self, env: "VPongEnv", action: int) -> None:
        if action not in (0, 1, 2):
            raise ValueError(f"Invalid action {action!r}, expected 0, 1 or 2")

        # 0 = stay (does not count as a first move), 1 = left, 2 = right
        if action == 1:
            env.game.set_player_paddle_x(env.game.state.player_paddle_x - AGENT_PADDLE_STEP)
        elif action == 2:
            env.game.set_player_paddle_x(env.game.state.player_paddle_x + AGENT_PADDLE_STEP)

    def point_reward(self, env: "VPongEnv", gained: tuple[int, int]) -> float:
        player, computer = gained
        return float(player - computer)
