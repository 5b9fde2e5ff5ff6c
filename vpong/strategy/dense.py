from __future__ import annotations
from typing import TYPE_CHECKING

from .simple import SimpleStepStrategy
from vpong.constants import *

if TYPE_CHECKING:
    from vpong.env import VPongEnv


class DenseRewardStepStrategy(SimpleStepStrategy):
    """Adds dense shaping: small positive reward when the player paddle sits
    under the ball."""

    def __init__(self, cfg=None):
        super().__init__(cfg)
        self.alignment_scale = self.cfg.get("alignment_bonus", DENSE_ALIGNMENT_SCALE)

    def point_reward(self, env: "VPongEnv", gained: tuple[int, int]) -> float:
        state = env.game.state
        paddle_center = state.player_paddle_x + PADDLE_DIFF
        alignment = 1 - abs(paddle_center - state.ball.x) / WIDTH
        return super().point_reward(env, gained) + self.alignment_scale * alignment
