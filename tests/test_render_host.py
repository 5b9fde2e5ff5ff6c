import logging

import numpy as np
import pygame
import pytest

from vpong.constants import BLACK, HEIGHT, WHITE, WIDTH
from vpong.game import Game
from vpong.host import pointer_to_paddle_x, run
from vpong.render import draw_field, draw_game_over, play_again_rect, rgb
from vpong.state import Phase, Side

from conftest import place_ball


@pytest.mark.parametrize("pointer, offset, expected", [(300, 0, 275), (300, 100, 175), (10, 0, -15)])
def test_pointer_to_paddle_x(pointer, offset, expected):
    assert pointer_to_paddle_x(pointer, offset) == expected


def test_draw_field_places_ball_and_paddles(game):
    surface = pygame.Surface((WIDTH, HEIGHT))
    game.set_player_paddle_x(100)
    draw_field(surface, game.snapshot())

    assert tuple(surface.get_at((250, 315)))[:3] == WHITE          # ball
    assert tuple(surface.get_at((120, HEIGHT - 15)))[:3] == WHITE  # player paddle
    assert tuple(surface.get_at((240, 15)))[:3] == WHITE           # computer paddle
    assert tuple(surface.get_at((10, 100)))[:3] == BLACK


def test_rgb_is_height_by_width():
    frame = rgb(pygame.Surface((WIDTH, HEIGHT)))
    assert frame.shape == (HEIGHT, WIDTH, 3)
    assert not np.any(frame)


def test_draw_game_over_shows_button():
    pygame.font.init()
    font = pygame.font.Font(None, 32)
    surface = pygame.Surface((WIDTH, HEIGHT))

    draw_game_over(surface, Side.COMPUTER, font, font)

    button = play_again_rect()
    assert tuple(surface.get_at((button.centerx, button.top)))[:3] == WHITE


class ScriptedGame(Game):
    """Game whose first match ends on the first tick; *on_tick* injects host events."""

    def __init__(self, on_tick=None):
        super().__init__("compact")
        self.starts = self.ticks = 0
        self.on_tick = on_tick

    def start_game(self):
        super().start_game()
        self.starts += 1
        if self.starts == 1:
            self.state.player_score = 6
            place_ball(self.state, 10, 1, vy=3)   # leaves through the top

    def tick(self):
        result = super().tick()
        self.ticks += 1
        if self.on_tick is not None:
            self.on_tick(self, result)
        return result


def _post_once(event):
    posted = []

    def hook(game, result):
        if not posted:
            pygame.event.post(event)
            posted.append(event)
    return hook


def test_run_play_again_click_starts_new_game():
    click = pygame.event.Event(
        pygame.MOUSEBUTTONDOWN, pos=play_again_rect().center, button=1)
    game = ScriptedGame(_post_once(click))

    finished = run(game, fps=0, max_frames=5)

    assert finished == 1
    assert game.starts == 2
    assert game.phase is Phase.PLAYING
    assert game.state.player_score == 0


@pytest.mark.parametrize("key", [pygame.K_SPACE, pygame.K_RETURN])
def test_run_play_again_key_starts_new_game(key):
    game = ScriptedGame(_post_once(pygame.event.Event(pygame.KEYDOWN, key=key)))
    run(game, fps=0, max_frames=5)
    assert game.starts == 2 and game.phase is Phase.PLAYING


def test_click_outside_button_keeps_game_over():
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=1)
    game = ScriptedGame(_post_once(click))

    assert run(game, fps=0, max_frames=5) == 1
    assert game.starts == 1
    assert game.phase is Phase.GAME_OVER


def test_run_returns_on_escape():
    game = ScriptedGame()
    game.starts = 1     # skip the scripted ending, play a normal game

    def press_escape(g, result):
        if g.ticks == 1:
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))

    game.on_tick = press_escape
    assert run(game, fps=0, max_frames=1000) == 0
    assert game.ticks <= 2


def test_run_logs_finished_game_instead_of_printing(caplog, capsys):
    caplog.set_level(logging.INFO, logger="vpong.host")

    assert run(ScriptedGame(), fps=0, max_frames=3) == 1

    assert "Game 1 over, Player 1 won" in caplog.text
    assert capsys.readouterr().out == ""
