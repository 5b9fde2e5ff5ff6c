"""
vpong.state
===========
The single mutable aggregate every simulation component works on.

A fresh :class:`SimulationState` is built for every game (replays included);
components receive it by reference and mutate it in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from vpong.constants import HEIGHT, PADDLE_START_X, WIDTH
from vpong.profiles import SpeedProfile


class Phase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Side(Enum):
    PLAYER = "Player 1"
    COMPUTER = "Computer"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class Ball:
    x: float = WIDTH / 2
    y: float = HEIGHT / 2
    vx: float = 0.0
    vy: float = 0.0


@dataclass
class SimulationState:
    ball: Ball = field(default_factory=Ball)
    player_paddle_x: float = PADDLE_START_X
    computer_paddle_x: float = PADDLE_START_X

    # gates AI activation and horizontal drift; never cleared within a game
    player_has_moved: bool = False
    # set on player-paddle contact, cleared on every reset
    ball_in_play: bool = False

    player_score: int = 0
    computer_score: int = 0

    # escalates to ESCALATED_AI_SPEED once the ball is pinned at max speed
    ai_speed: float = 0.0

    phase: Phase = Phase.IDLE
    winner: Side | None = None

    @classmethod
    def fresh(cls, profile: SpeedProfile) -> "SimulationState":
        return cls(ai_speed=profile.ai_speed)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer once per tick."""

    ball_x: float
    ball_y: float
    player_paddle_x: float
    computer_paddle_x: float
    player_score: int
    computer_score: int
    phase: Phase
    winner: Side | None = None

    @classmethod
    def of(cls, state: SimulationState) -> "Snapshot":
        return cls(
            ball_x=state.ball.x,
            ball_y=state.ball.y,
            player_paddle_x=state.player_paddle_x,
            computer_paddle_x=state.computer_paddle_x,
            player_score=state.player_score,
            computer_score=state.computer_score,
            phase=state.phase,
            winner=state.winner,
        )
