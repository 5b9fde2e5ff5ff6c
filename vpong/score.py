from __future__ import annotations

from vpong.constants import WINNING_SCORE
from vpong.state import SimulationState, Side


def award(state: SimulationState, side: Side) -> None:
    if side is Side.PLAYER:
        state.player_score += 1
    else:
        state.computer_score += 1


def check_win(state: SimulationState) -> Side | None:
    """Return the side that has reached ``WINNING_SCORE``, if any."""
    if state.player_score >= WINNING_SCORE:
        return Side.PLAYER
    if state.computer_score >= WINNING_SCORE:
        return Side.COMPUTER
    return None
