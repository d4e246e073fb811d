import shutil
from pathlib import Path

import pygame
import pytest

from mysterymanor.screen import AssetError, Stage, create_stage


@pytest.fixture
def stage(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    created = create_stage(tmp_path)
    yield created
    pygame.quit()


def save_picture(root, name, size):
    folder = Path(root) / "Pics"
    folder.mkdir(exist_ok=True)
    pygame.image.save(pygame.Surface(size), str(folder / name))


def test_create_stage_opens_window(stage):
    assert stage.surface.get_size() == (1600, 1600)
    assert pygame.display.get_caption()[0] == "Murder Mystery!!!"
    assert stage.closed is False


def test_picture_is_loaded_and_cached(stage, tmp_path):
    save_picture(tmp_path, "tile.png", (4, 3))
    first = stage.picture("tile.png")
    assert first.get_size() == (4, 3)
    assert stage.picture("tile.png") is first


def test_missing_picture_raises(tmp_path):
    offscreen = Stage(pygame.Surface((8, 8)), tmp_path)
    with pytest.raises(AssetError):
        offscreen.picture("absent.png")


def test_font_is_loaded_and_cached(stage, tmp_path):
    bundled = Path(pygame.__file__).parent / pygame.font.get_default_font()
    shutil.copy(bundled, tmp_path / "face.ttf")
    face = stage.font("face.ttf", 20)
    assert stage.font("face.ttf", 20) is face
    assert face.get_height() > 0


def test_missing_font_raises(stage):
    with pytest.raises(AssetError):
        stage.font("arial.ttf", 50)


def test_events_return_posted_event(stage):
    pygame.event.post(pygame.event.Event(pygame.USEREVENT))
    types = [event.type for event in stage.events()]
    assert pygame.USEREVENT in types
    assert stage.closed is False


def test_quit_event_closes_stage(stage):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert stage.pause(0) is False
    assert stage.closed is True