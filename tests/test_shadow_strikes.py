import pygame
import pytest

from mysterymanor.minigames import LAUNCH_POINT, Box, clock_text
from mysterymanor.screen import AssetError, Stage
from mysterymanor.shadow_strikes import ShadowStrikes


def test_fresh_game_state():
    game = ShadowStrikes()
    assert game.goals_text == "Goals: 00"
    assert game.time_text == "Time: 0:00"
    assert game.ball == LAUNCH_POINT


def test_idle_frame_keeps_ball_at_launch_and_moves_goalie():
    game = ShadowStrikes()
    start_x = game.goalie.x
    assert game.step(1.0) is False
    assert game.ball == LAUNCH_POINT
    assert game.goalie.x == start_x + game.goalie_speed
    assert game.time_text == clock_text(game.time_limit - 1.0)


def test_ball_reaching_aim_in_goal_scores():
    game = ShadowStrikes()
    game.ball = (800.0, 501.0)
    game.target = (800.0, 500.0)
    game.shot = True
    assert game.step(1.0) is True
    assert game.goals == 1
    assert game.goals_text == "Goals: 1"
    assert game.goalie_speed == 10.0
    assert game.ball == LAUNCH_POINT
    assert game.shot is False


def test_goalie_saves_the_ball():
    game = ShadowStrikes()
    game.goalie = Box(700.0, 600.0, 200.0, 250.0)
    game.ball = (750.0, 700.0)
    game.target = (800.0, 500.0)
    game.shot = True
    assert game.step(1.0) is False
    assert game.goals == 0
    assert game.ball == LAUNCH_POINT


def test_ball_leaving_top_of_field_is_reset():
    game = ShadowStrikes()
    game.ball = (840.0, 5.0)
    game.target = (840.0, 0.0)
    game.shot = True
    assert game.step(1.0) is False
    assert game.goals == 0
    assert game.shot is False
    assert game.ball == LAUNCH_POINT


def test_click_starts_a_shot():
    game = ShadowStrikes()
    game.step(1.0, (840, 0))
    assert game.shot is True
    assert game.ball[1] < LAUNCH_POINT[1]


def test_time_running_out_loses():
    game = ShadowStrikes()
    game.step(game.time_limit)
    assert game.game_over is True
    assert game.has_won is False
    assert game.time_remaining == 0.0


def test_three_goals_win_and_freeze_the_game():
    game = ShadowStrikes()
    game.goals = 3
    game.step(1.0)
    assert game.game_over is True and game.has_won is True
    goalie = game.goalie
    assert game.step(2.0) is False
    assert game.goalie == goalie


def test_play_without_pictures_raises(tmp_path):
    stage = Stage(pygame.Surface((16, 16)), tmp_path)
    with pytest.raises(AssetError):
        ShadowStrikes().play(stage)