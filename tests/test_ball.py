from vpong.ball import advance, reset_to_center
from vpong.constants import HEIGHT, RESET_SPEED, WIDTH

from conftest import place_ball


def test_advance_moves_against_vy(state):
    """``y += -vy``: a negative vy moves the ball down toward the player."""
    place_ball(state, 250, 315, vx=3, vy=-2)
    advance(state)
    assert state.ball.y == 317
    assert state.ball.x == 250  # no drift before the first move / contact


def test_advance_drifts_only_after_move_and_contact(state):
    place_ball(state, 250, 315, vx=3, vy=2)

    state.player_has_moved = True
    advance(state)
    assert state.ball.x == 250

    state.player_has_moved, state.ball_in_play = False, True
    advance(state)
    assert state.ball.x == 250

    state.player_has_moved = True
    advance(state)
    assert state.ball.x == 253
    assert state.ball.y == 315 - 3 * 2


def test_reset_to_center_keeps_vx_and_scores(state):
    place_ball(state, 12, 640, vx=-4.5, vy=5)
    state.ball_in_play = True
    state.player_score, state.computer_score = 2, 3

    reset_to_center(state)

    assert (state.ball.x, state.ball.y) == (WIDTH / 2, HEIGHT / 2)
    assert state.ball.vy == -RESET_SPEED
    assert state.ball.vx == -4.5
    assert state.ball_in_play is False
    assert (state.player_score, state.computer_score) == (2, 3)
