import os

# headless pygame for the render / env tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from vpong.constants import HEIGHT, PADDLE_START_X, WIDTH
from vpong.game import Game
from vpong.profiles import make
from vpong.state import Phase, SimulationState


def place_ball(state: SimulationState, x: float, y: float, vx: float = 0.0, vy: float = 0.0):
    """Put the ball somewhere specific without going through the physics."""
    state.ball.x, state.ball.y = x, y
    state.ball.vx, state.ball.vy = vx, vy
    return state


@pytest.fixture
def state():
    """Fresh compact-profile state with the ball parked at the centre."""
    s = SimulationState.fresh(make("compact"))
    s.phase = Phase.PLAYING
    assert (s.ball.x, s.ball.y) == (WIDTH / 2, HEIGHT / 2)
    assert s.player_paddle_x == s.computer_paddle_x == PADDLE_START_X
    return s


@pytest.fixture
def game():
    """Compact-profile game that has already been started."""
    g = Game("compact")
    g.start_game()
    return g
