"""
vpong.env
=========
Gymnasium environment around :class:`vpong.game.Game` for agents that play
the bottom (player) paddle against the built-in computer paddle.

Key features
------------
* Vector (6-float) observations: paddles, ball position and velocity, all
  normalised to roughly ``[-1, 1]``.
* ``Discrete(3)`` actions: stay, left, right (``AGENT_PADDLE_STEP`` px).
* Reward logic is delegated to a :class:`StepStrategy` chosen with
  ``variant`` in the env config (``simple`` or ``dense``).
* One episode is one full game (first to ``WINNING_SCORE``); it truncates
  after ``max_idle_steps`` ticks without a point.
"""

from __future__ import annotations

import os

import gymnasium as gym
import numpy as np
import pygame
import pygame.surfarray
from gymnasium.spaces import Box, Discrete

from vpong.constants import *
from vpong.game import Game
from vpong.render import draw_field, rgb
from vpong.strategy import make as make_strategy


class VPongEnv(gym.Env):
    metadata = {
        "render_modes": ["none", "human", "rgb_array"],
        "render_fps": 60,
    }

    # ----------------------------------------------------------------------
    # ctor
    # ----------------------------------------------------------------------
    def __init__(self, cfg: dict | None = None):
        super().__init__()
        pygame.surfarray.use_arraytype("numpy")
        cfg = cfg or {}

        # --- rendering ----------------------------------------------------
        self.render_mode    = cfg.get("render_mode", "none")
        self.show_labels    = bool(cfg.get("show_labels", True))
        self.max_idle_steps = int(cfg.get("max_idle_steps", 3600))

        self._init_pygame_surfaces()

        # --- gym spaces ---------------------------------------------------
        self.action_space = Discrete(3)
        self.observation_space = Box(
            low = np.array([-1]*6, dtype=np.float32),
            high= np.array([1]*6,  dtype=np.float32),
            dtype=np.float32,
        )

        # --- game + strategy (step logic) ---------------------------------
        self.game = Game(cfg.get("profile", "normal"))
        self.step_strategy = make_strategy(cfg.get("variant", "simple"), cfg)

        # filled by reset()
        self.steps_since_last_point = 0
        self.last_winner = None

    # ----------------------------------------------------------------------
    # pygame init
    # ----------------------------------------------------------------------
    def _init_pygame_surfaces(self):
        if self.render_mode == "human":
            os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
            pygame.init()
            self.screen  = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption("vpong")
            self.clock   = pygame.time.Clock()
            self._screen = self.screen          # draw directly to display
            self.score_font = pygame.font.SysFont("couriernew", 32)
        else:
            self.screen = None
            self._screen = pygame.Surface((WIDTH, HEIGHT))
            self.clock = None
            self.score_font = None

    # ----------------------------------------------------------------------
    # observation & info helpers
    # ----------------------------------------------------------------------
    def _get_obs(self) -> np.ndarray:
        s = self.game.state
        half_w, half_h = WIDTH / 2, HEIGHT / 2
        obs = np.array(
            [
                (s.player_paddle_x + PADDLE_DIFF - half_w) / half_w,
                (s.computer_paddle_x + PADDLE_DIFF - half_w) / half_w,
                (s.ball.x - half_w) / half_w,
                (s.ball.y - half_h) / half_h,
                s.ball.vx / (DEFLECTION_FACTOR * PADDLE_DIFF),
                s.ball.vy / MAX_BALL_SPEED,
            ],
            dtype=np.float32,
        )
        # the ball may sit just past a wall for a frame
        return np.clip(obs, -1.0, 1.0)

    def _get_info(self):
        s = self.game.state
        return {
            "player_score": s.player_score,
            "computer_score": s.computer_score,
            "distance_to_ball": abs(s.player_paddle_x + PADDLE_DIFF - s.ball.x),
        }

    # ----------------------------------------------------------------------
    # reset / step
    # ----------------------------------------------------------------------
    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)
        self.game.start_game()
        self.steps_since_last_point = 0
        self.last_winner = None
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        return self.step_strategy.execute(self, int(action))

    # ----------------------------------------------------------------------
    # render
    # ----------------------------------------------------------------------
    def render(self):
        if self.render_mode == "human":
            for e in pygame.event.get():
                if e.type == pygame.QUIT or (
                    e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE
                ):
                    self.close()
                    raise SystemExit

        font = self.score_font if self.show_labels else None
        draw_field(self._screen, self.game.snapshot(), font)

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
        elif self.render_mode == "rgb_array":
            return rgb(self._screen).copy()

    # ----------------------------------------------------------------------
    # close
    # ----------------------------------------------------------------------
    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
