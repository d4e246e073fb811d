"""The game window, its assets and its event pump."""

from __future__ import annotations

import enum
import time
from pathlib import Path

import pygame

WIDTH = 1600
HEIGHT = 1600
TITLE = "Murder Mystery!!!"
PICTURE_DIR = "Pics"


class AssetError(OSError):
    """A picture, font or text file could not be loaded."""


class Outcome(enum.Enum):
    """How a scene ended."""

    COMPLETED = "completed"
    FAILED = "failed"
    CLOSED = "closed"


class Stage:
    """A drawing surface together with the directory holding the assets."""

    def __init__(self, surface: pygame.Surface, root) -> None:
        self.surface = surface
        self.root = Path(root)
        self.closed = False
        self._pictures: dict[str, pygame.Surface] = {}
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def picture(self, name: str) -> pygame.Surface:
        """Load a picture from the picture directory, once."""
        if name not in self._pictures:
            path = self.root / PICTURE_DIR / name
            if not path.is_file():
                raise AssetError(f"Error loading {name} from {PICTURE_DIR}")
            try:
                image = pygame.image.load(str(path))
            except pygame.error as exc:
                raise AssetError(f"Error loading {name} from {PICTURE_DIR}") from exc
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
            self._pictures[name] = image
        return self._pictures[name]

    def font(self, name: str, size: int) -> pygame.font.Font:
        """Load a font file from the asset directory, once per size."""
        key = (name, size)
        if key not in self._fonts:
            path = self.root / name
            if not path.is_file():
                raise AssetError(f"Error loading font {name}")
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                self._fonts[key] = pygame.font.Font(str(path), size)
            except (pygame.error, OSError) as exc:
                raise AssetError(f"Error loading font {name}") from exc
        return self._fonts[key]

    def events(self) -> list[pygame.event.Event]:
        """Fetch pending events, noting a request to close the window."""
        pending = pygame.event.get()
        if any(event.type == pygame.QUIT for event in pending):
            self.closed = True
        return pending

    def present(self) -> None:
        """Show what has been drawn, when drawing to the window."""
        if pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def pause(self, seconds: float) -> bool:
        """Show the frame and hold it; returns whether the window is still open."""
        self.present()
        deadline = time.monotonic() + seconds
        while True:
            self.events()
            remaining = deadline - time.monotonic()
            if self.closed or remaining <= 0:
                break
            time.sleep(min(remaining, 0.02))
        return not self.closed


def create_stage(root) -> Stage:
    """Open the game window and return a stage drawing to it."""
    pygame.init()
    surface = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    return Stage(surface, root)