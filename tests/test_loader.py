import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from mysterymanor.loader import LOADING_TEXT, GameLoader, LoadingScreen
from mysterymanor.screen import AssetError, Outcome, Stage


@pytest.fixture(autouse=True)
def _pygame():
    pygame.display.init()
    pygame.font.init()
    pygame.display.set_mode((1, 1))
    pygame.event.clear()
    yield
    pygame.display.quit()


class _Clock:
    """Returns the given times in turn, then asks the window to close."""

    def __init__(self, times):
        self.times = list(times)

    def __call__(self):
        if len(self.times) > 1:
            return self.times.pop(0)
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        return self.times[0]


def _stage(tmp_path, *pictures):
    pics = tmp_path / "Pics"
    pics.mkdir()
    for name in pictures:
        pygame.image.save(pygame.Surface((8, 8)), str(pics / name))
    return Stage(pygame.Surface((1600, 1600)), tmp_path)


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (0.0, LoadingScreen.COVER),
        (2.0, LoadingScreen.COVER),
        (2.5, LoadingScreen.LOADING),
        (12.0, LoadingScreen.LOADING),
        (12.5, LoadingScreen.START),
    ],
)
def test_stage_at(elapsed, expected):
    assert GameLoader().stage_at(elapsed) is expected


def test_click_on_start_button_completes(tmp_path):
    stage = _stage(tmp_path, "coverPicture.png")
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(800, 800), button=1))
    assert GameLoader(clock=_Clock([0.0])).run(stage) is Outcome.COMPLETED


def test_click_elsewhere_does_not_start(tmp_path):
    stage = _stage(tmp_path, "coverPicture.png")
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert GameLoader(clock=_Clock([0.0])).run(stage) is Outcome.CLOSED


def test_right_click_on_button_does_not_start(tmp_path):
    stage = _stage(tmp_path, "coverPicture.png")
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(800, 800), button=3))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert GameLoader(clock=_Clock([0.0])).run(stage) is Outcome.CLOSED


def test_missing_cover_picture_raises(tmp_path):
    stage = _stage(tmp_path)
    with pytest.raises(AssetError):
        GameLoader(clock=_Clock([0.0])).run(stage)


def test_loading_text_is_typed(tmp_path):
    stage = _stage(tmp_path, "coverPicture.png")
    loader = GameLoader(clock=_Clock([0.0, 3.0, 4.0, 5.0]))
    assert loader.run(stage) is Outcome.CLOSED
    assert LOADING_TEXT.startswith(loader.typewriter.shown)
    assert loader.typewriter.shown == "Lo"


def test_nothing_typed_while_cover_shows(tmp_path):
    stage = _stage(tmp_path, "coverPicture.png")
    loader = GameLoader(clock=_Clock([0.0, 0.5, 1.0, 2.0]))
    assert loader.run(stage) is Outcome.CLOSED
    assert loader.typewriter.index == 0