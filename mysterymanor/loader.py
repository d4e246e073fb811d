"""The opening screen: cover picture, a typed loading line and a start button."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable
from dataclasses import dataclass, field

import pygame

from .minigames import Box
from .screen import AssetError, Outcome, Stage
from .typewriter import Typewriter

FONT_NAME = "PixelifySans-Medium.ttf"
FONT_SIZE = 50
COVER_PICTURE = "coverPicture.png"
LOADING_TEXT = "Loading...."
COVER_SECONDS = 2.0
LOADING_SECONDS = 12.0
TYPING_INTERVAL = 0.15
FRAME_RATE = 60

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


class LoadingScreen(enum.Enum):
    """What the loader shows at a given moment."""

    COVER = "cover"
    LOADING = "loading"
    START = "start"


def _font(stage: Stage, size: int) -> pygame.font.Font:
    try:
        return stage.font(FONT_NAME, size)
    except AssetError:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, size)


@dataclass
class GameLoader:
    """The first scene, left by clicking the start button."""

    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    start_button: Box = field(default_factory=lambda: Box(750.0, 750.0, 185.0, 100.0))
    typewriter: Typewriter = field(default_factory=lambda: Typewriter(LOADING_TEXT))

    def stage_at(self, elapsed: float) -> LoadingScreen:
        """The screen shown ``elapsed`` seconds after the loader started."""
        if elapsed <= COVER_SECONDS:
            return LoadingScreen.COVER
        if elapsed <= LOADING_SECONDS:
            return LoadingScreen.LOADING
        return LoadingScreen.START

    def _clicked_start(self, event: pygame.event.Event) -> bool:
        return (
            event.type == pygame.MOUSEBUTTONDOWN
            and event.button == 1
            and self.start_button.contains(*event.pos)
        )

    def run(self, stage: Stage) -> Outcome:
        """Show the loader until the start button is clicked or the window closes."""
        cover = stage.picture(COVER_PICTURE)
        font = _font(stage, FONT_SIZE)
        ticker = pygame.time.Clock()
        start = self.clock()
        next_letter = COVER_SECONDS

        while not stage.closed:
            events = stage.events()
            if any(self._clicked_start(event) for event in events):
                return Outcome.COMPLETED
            if stage.closed:
                break

            elapsed = self.clock() - start
            surface = stage.surface
            surface.fill(_BLACK)
            surface.blit(cover, (0, 0))

            screen = self.stage_at(elapsed)
            if screen is LoadingScreen.LOADING:
                if elapsed > next_letter:
                    self.typewriter.advance()
                    next_letter = elapsed + TYPING_INTERVAL
                surface.blit(font.render(self.typewriter.shown, True, _WHITE), (700, 1300))
            elif screen is LoadingScreen.START:
                button = self.start_button
                pygame.draw.rect(surface, _BLACK, (button.x, button.y, button.width, button.height))
                surface.blit(font.render("START", True, _WHITE), (770, 770))

            stage.present()
            ticker.tick(FRAME_RATE)
        return Outcome.CLOSED