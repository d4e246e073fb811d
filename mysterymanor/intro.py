"""The story introduction: pictures and letters typed out over timed phases."""

from __future__ import annotations

import time
from bisect import bisect_left
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from itertools import accumulate

import pygame

from .screen import AssetError, Outcome, Stage
from .typewriter import Typewriter

FONT_NAME = "PixelifySans-Medium.ttf"
FONT_SIZE = 70
TEXT_DIR = "TextFiles"
TEXT_POSITION = (280, 400)
FRAME_RATE = 60
DURATIONS = (2.0, 20.0, 2.0, 24.0, 2.0, 24.0, 2.0, 24.0, 2.0, 26.0, 2.0, 30.0)
PHASE_COUNT = 10

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


@dataclass(frozen=True)
class _Phase:
    picture: str | None = None
    text_file: str | None = None
    interval: float = 0.0


_PHASES = (
    _Phase(picture="house.png"),
    _Phase(text_file="intro.txt", interval=0.10),
    _Phase(picture="letter1.png"),
    _Phase(text_file="intro2.txt", interval=0.10),
    _Phase(),
    _Phase(text_file="intro3.txt", interval=0.10),
    _Phase(picture="letter.png"),
    _Phase(text_file="riddle.txt", interval=0.15),
    _Phase(picture="letter.png"),
    _Phase(text_file="riddle2.txt", interval=0.15),
)


def phase_times(durations: Sequence[float]) -> tuple[float, ...]:
    """Start times of the phases: zero, then the running sum of the durations."""
    return tuple(accumulate(durations[:-1], initial=0.0)) if durations else ()


def _font(stage: Stage, size: int) -> pygame.font.Font:
    try:
        return stage.font(FONT_NAME, size)
    except AssetError:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, size)


def _read_text(stage: Stage, name: str) -> str:
    try:
        return (stage.root / TEXT_DIR / name).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return ""


def _blit_lines(surface: pygame.Surface, font: pygame.font.Font, text: str) -> None:
    x, y = TEXT_POSITION
    for line in text.split("\n"):
        surface.blit(font.render(line, True, _WHITE), (x, y))
        y += font.get_linesize()


@dataclass
class Intro:
    """The timed introduction played before the first level."""

    durations: tuple[float, ...] = DURATIONS
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    times: tuple[float, ...] = field(init=False)
    typewriter: Typewriter = field(default_factory=lambda: Typewriter(""), init=False)

    def __post_init__(self) -> None:
        self.durations = tuple(self.durations)
        if len(self.durations) <= PHASE_COUNT:
            raise ValueError(
                f"the introduction needs at least {PHASE_COUNT + 1} durations, "
                f"got {len(self.durations)}"
            )
        self.times = phase_times(self.durations)

    def phase_at(self, elapsed: float) -> int | None:
        """The phase (1 to 10) under way at ``elapsed`` seconds, or None once over."""
        phase = bisect_left(self.times, elapsed, 1, PHASE_COUNT + 1)
        return phase if phase <= PHASE_COUNT else None

    def run(self, stage: Stage) -> Outcome:
        """Play the introduction until it ends or the window closes."""
        font = _font(stage, FONT_SIZE)
        ticker = pygame.time.Clock()
        start = self.clock()
        next_letter = self.times[1]
        background: pygame.Surface | None = None
        text_file: str | None = None
        self.typewriter = Typewriter("")

        while not stage.closed:
            stage.events()
            if stage.closed:
                break

            elapsed = self.clock() - start
            number = self.phase_at(elapsed)
            if number is None:
                return Outcome.COMPLETED
            phase = _PHASES[number - 1]

            if phase.picture is not None:
                background = stage.picture(phase.picture)

            surface = stage.surface
            surface.fill(_BLACK)
            if background is not None:
                surface.blit(background, (0, 0))

            if phase.text_file is None:
                self.typewriter.reset()
                text_file = None
                next_letter = self.times[number]
            else:
                if text_file != phase.text_file:
                    text_file = phase.text_file
                    self.typewriter = Typewriter(_read_text(stage, text_file))
                if elapsed > next_letter:
                    self.typewriter.advance()
                    next_letter += phase.interval
                _blit_lines(surface, font, self.typewriter.shown)

            stage.present()
            ticker.tick(FRAME_RATE)
        return Outcome.CLOSED