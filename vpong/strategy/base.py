from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vpong.env import VPongEnv


class StepStrategy(ABC):
    """
    One env step = move the player paddle, run exactly one ``Game.tick``,
    turn what happened into a reward.

    Subclasses decide how an action moves the paddle (:meth:`move_paddle`)
    and what a tick is worth (:meth:`point_reward`); the idle counter and
    episode end are tracked here.
    """

    def __init__(self, cfg: dict | None = None):
        self.cfg = cfg or {}

    @abstractmethod
    def move_paddle(self, env: "VPongEnv", action: int) -> None:
        ...

    @abstractmethod
    def point_reward(self, env: "VPongEnv", gained: tuple[int, int]) -> float:
        """Reward for a tick in which (player, computer) gained *gained* points."""

    def tick(self, env: "VPongEnv") -> tuple[int, int]:
        state = env.game.state
        before = (state.player_score, state.computer_score)
        result = env.game.tick()
        gained = (state.player_score - before[0], state.computer_score - before[1])

        if any(gained):
            env.steps_since_last_point = 0
        else:
            env.steps_since_last_point += 1
        env.last_winner = result.winner
        return gained

    def execute(self, env: "VPongEnv", action: int):
        """Run one timestep and return (obs, reward, terminated, truncated, info)."""
        self.move_paddle(env, action)
        reward = self.point_reward(env, self.tick(env))

        terminated = env.last_winner is not None
        truncated = env.steps_since_last_point > env.max_idle_steps

        if env.render_mode == "human":
            env.render()

        return env._get_obs(), reward, terminated, truncated, env._get_info()
