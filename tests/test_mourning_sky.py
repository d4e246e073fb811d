import pygame
import pytest

from mysterymanor.minigames import LAUNCH_POINT, clock_text
from mysterymanor.mourning_sky import MourningSky
from mysterymanor.screen import AssetError, Stage


def test_fresh_game_state():
    game = MourningSky()
    assert game.hits_text == "Hits: 00"
    assert game.time_text == "Time: 0:00"
    assert game.rock == (820.0, 1340.0)


def test_idle_frame_sends_rock_to_launch_point():
    game = MourningSky()
    start_x = game.bird.x
    assert game.step(3.0) is False
    assert game.rock == LAUNCH_POINT
    assert game.bird.x == start_x + game.bird_speed


def test_clock_counts_elapsed_time():
    game = MourningSky()
    game.step(75.0)
    assert game.time_text == clock_text(75.0)
    assert game.time_remaining == game.time_limit - 75.0


def test_rock_hitting_bird_scores():
    game = MourningSky()
    game.rock = (180.0, 260.0)
    game.target = (180.0, 0.0)
    game.shot = True
    assert game.step(1.0) is True
    assert game.hits == 1
    assert game.hits_text == "Hits: 1"
    assert game.bird_speed == 10.0
    assert game.shot is False


def test_rock_passing_its_aim_misses():
    game = MourningSky()
    game.rock = (500.0, 10.0)
    game.target = (500.0, 5.0)
    game.shot = True
    assert game.step(1.0) is False
    assert game.hits == 0
    assert game.shot is False
    assert game.rock == (820.0, 1340.0)


def test_click_starts_a_throw():
    game = MourningSky()
    game.step(1.0, (840, 0))
    assert game.shot is True
    assert game.rock[1] < LAUNCH_POINT[1]


def test_time_running_out_loses():
    game = MourningSky()
    game.step(game.time_limit + 1)
    assert game.game_over is True
    assert game.has_won is False
    assert game.time_remaining == 0.0


def test_three_hits_win_without_moving():
    game = MourningSky()
    game.hits = 3
    bird = game.bird
    assert game.step(1.0) is False
    assert game.has_won is True and game.game_over is True
    assert game.bird == bird


def test_play_without_pictures_raises(tmp_path):
    stage = Stage(pygame.Surface((16, 16)), tmp_path)
    with pytest.raises(AssetError):
        MourningSky().play(stage)