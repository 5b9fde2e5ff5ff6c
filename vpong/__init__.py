from vpong.game import Game, TickResult
from vpong.state import Phase, Side, SimulationState, Snapshot

__all__ = ["Game", "TickResult", "Phase", "Side", "SimulationState", "Snapshot"]
