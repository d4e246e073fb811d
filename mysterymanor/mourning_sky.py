"""Mourning Sky: bring down a bird three times with a sling."""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace

import pygame

from .minigames import (
    LAUNCH_POINT,
    Box,
    check_collision,
    clock_text,
    move_target,
    projectile_step,
)
from .screen import AssetError, Outcome, Stage

HITS_TO_WIN = 3
SPEED_STEP = 5.0
ROCK_SIZE = 40.0
BIRD_LEFT = 10
BIRD_RIGHT = 1580
FIELD_HEIGHT = 1600
FRAME_RATE = 60

_SLING = Box(800.0, 1400.0, 150.0, 150.0)
_WHITE = (255, 255, 255)


def _font(stage: Stage, size: int) -> pygame.font.Font:
    try:
        return stage.font("arial.ttf", size)
    except AssetError:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, size)


@dataclass
class MourningSky:
    """State of one round of bird shooting."""

    time_limit: float = 90.0
    hits: int = 0
    bird: Box = field(default_factory=lambda: Box(150.0, 200.0, 100.0, 100.0))
    bird_speed: float = 5.0
    moving_left: bool = False
    rock: tuple[float, float] = (820.0, 1340.0)
    target: tuple[float, float] = (0.0, 0.0)
    shot: bool = False
    game_over: bool = False
    has_won: bool = False
    time_remaining: float = 0.0
    time_text: str = "Time: 0:00"

    @property
    def hits_text(self) -> str:
        return f"Hits: {self.hits}" if self.hits else "Hits: 00"

    def _rock_box(self) -> Box:
        return Box(self.rock[0], self.rock[1], ROCK_SIZE, ROCK_SIZE)

    def _reset_rock(self) -> None:
        self.shot = False
        self.rock = (820.0, 1340.0)

    def step(self, elapsed: float, click: tuple[float, float] | None = None) -> bool:
        """Advance one frame; returns whether the bird was hit."""
        if self.game_over:
            return False

        self.time_remaining = self.time_limit - elapsed
        if self.time_remaining <= 0:
            self.game_over = True
            self.time_remaining = 0.0
            self.has_won = False
        self.time_text = clock_text(elapsed)

        if self.hits >= HITS_TO_WIN:
            self.has_won = True
            self.game_over = True
            return False

        x, self.moving_left = move_target(
            BIRD_LEFT, BIRD_RIGHT, self.bird.x, self.moving_left, self.bird_speed, 0
        )
        self.bird = replace(self.bird, x=x)

        if click is not None:
            self.target = (float(click[0]), float(click[1]))
            self.shot = True
        self.rock = projectile_step(*self.target, self.rock, self.shot)

        if check_collision(self._rock_box(), self.bird):
            self._reset_rock()
            self.bird_speed += SPEED_STEP
            self.hits += 1
            return True

        rx, ry = self.rock
        if ry <= self.target[1] or ry <= 0 or rx <= 0 or ry >= FIELD_HEIGHT:
            self._reset_rock()
        return False

    def play(self, stage: Stage) -> Outcome:
        """Run the game in the window until it is won or the window closes."""
        background = stage.picture("sunnyField.png")
        bird_image = pygame.transform.scale(
            stage.picture("bird.png"), (int(self.bird.width), int(self.bird.height))
        )
        rock_image = pygame.transform.scale(
            stage.picture("rock.png"), (int(ROCK_SIZE), int(ROCK_SIZE))
        )
        sling_image = pygame.transform.scale(
            stage.picture("sling.png"), (int(_SLING.width), int(_SLING.height))
        )
        font = _font(stage, 50)
        ticker = pygame.time.Clock()
        start = time.monotonic()

        while not stage.closed:
            stage.events()
            if stage.closed:
                break
            if not self.game_over:
                click = pygame.mouse.get_pos() if pygame.mouse.get_pressed()[0] else None
                hit = self.step(time.monotonic() - start, click)
                if self.has_won:
                    return Outcome.COMPLETED
                surface = stage.surface
                surface.fill(_WHITE)
                surface.blit(background, (0, 0))
                surface.blit(bird_image, (self.bird.x, self.bird.y))
                surface.blit(rock_image, self.rock)
                if hit:
                    surface.blit(font.render("HIT!!!", True, _WHITE), (800, 800))
                else:
                    surface.blit(sling_image, (_SLING.x, _SLING.y))
                surface.blit(font.render(self.hits_text, True, _WHITE), (100, 100))
                surface.blit(font.render(self.time_text, True, _WHITE), (1300, 100))
                if hit:
                    stage.pause(0.5)
                else:
                    stage.present()
            # A lost round leaves the last frame up until the window closes.
            ticker.tick(FRAME_RATE)
        return Outcome.CLOSED