"""
vpong.game
==========
Life-cycle state machine: Idle → Playing → GameOver → (play again) → Playing.

The host drives it with one :meth:`Game.tick` per display frame and keeps
scheduling frames only while the returned ``should_continue`` is true.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

import numpy as np

from vpong import ball, collision, opponent, score
from vpong.constants import PADDLE_WIDTH, WIDTH
from vpong.profiles import SpeedProfile, make as make_profile
from vpong.state import Phase, SimulationState, Side, Snapshot

logger = logging.getLogger(__name__)


class TickResult(NamedTuple):
    should_continue: bool
    winner: Side | None = None


class Game:
    """Owns the simulation state of one session.

    *profile* is a :class:`SpeedProfile` or its registry name; hosts pick it
    once at start-up, typically via :func:`vpong.profiles.classify_display`.
    """

    def __init__(self, profile: SpeedProfile | str):
        if isinstance(profile, str):
            profile = make_profile(profile)
        self.profile = profile
        self._state = SimulationState.fresh(profile)

    # ------------------------------------------------------------------
    # accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self._state)

    # ------------------------------------------------------------------
    # transitions
    # ------------------------------------------------------------------
    def start_game(self) -> None:
        """Start (or restart) a game on a brand-new state."""
        state = SimulationState.fresh(self.profile)
        ball.reset_to_center(state)
        # opening serve comes from the profile, later serves use RESET_SPEED
        state.ball.vy = -self.profile.initial_speed
        state.ball.vx = -self.profile.initial_speed
        state.phase = Phase.PLAYING
        self._state = state
        logger.info("New game started (%s profile)", self.profile.name)

    def tick(self) -> TickResult:
        state = self._state
        if state.phase is not Phase.PLAYING:
            return TickResult(False)

        ball.advance(state)
        collision.resolve(state)
        opponent.track(state)

        winner = score.check_win(state)
        if winner is not None:
            state.phase = Phase.GAME_OVER
            state.winner = winner
            logger.info(
                "%s wins %d-%d", winner.label,
                state.player_score, state.computer_score,
            )
            return TickResult(False, winner)
        return TickResult(True)

    # ------------------------------------------------------------------
    # input
    # ------------------------------------------------------------------
    def set_player_paddle_x(self, x: float) -> None:
        """Place the player paddle, clamped to the field. NaN is ignored."""
        if math.isnan(x):
            return
        self._state.player_paddle_x = float(np.clip(x, 0, WIDTH - PADDLE_WIDTH))
        self._state.player_has_moved = True
