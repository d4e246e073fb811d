"""Shadow Strikes: score three goals past a quickening goalkeeper."""

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

GOALS_TO_WIN = 3
SPEED_STEP = 5.0
BALL_SIZE = 100.0
GOALIE_LEFT = 320
GOALIE_RIGHT = 1280
FIELD_WIDTH = 1600
FRAME_RATE = 60

_GOAL_AREA = (300.0, 1366.0, 406.0, 856.0)
_WHITE = (255, 255, 255)
_GREEN = (0, 255, 0)


def _font(stage: Stage, size: int) -> pygame.font.Font:
    try:
        return stage.font("arial.ttf", size)
    except AssetError:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, size)


@dataclass
class ShadowStrikes:
    """State of one penalty shoot-out."""

    time_limit: float = 90.0
    goals: int = 0
    goalie: Box = field(default_factory=lambda: Box(320.0, 600.0, 200.0, 250.0))
    goalie_speed: float = 5.0
    moving_left: bool = False
    ball: tuple[float, float] = LAUNCH_POINT
    target: tuple[float, float] = (0.0, 0.0)
    shot: bool = False
    game_over: bool = False
    has_won: bool = False
    time_remaining: float = 0.0
    time_text: str = "Time: 0:00"

    @property
    def goals_text(self) -> str:
        return f"Goals: {self.goals}" if self.goals else "Goals: 00"

    def _ball_box(self) -> Box:
        return Box(self.ball[0], self.ball[1], BALL_SIZE, BALL_SIZE)

    def _reset_ball(self) -> None:
        self.shot = False
        self.ball = LAUNCH_POINT

    def step(self, elapsed: float, click: tuple[float, float] | None = None) -> bool:
        """Advance one frame; returns whether a goal was scored."""
        if self.game_over:
            return False

        self.time_remaining = self.time_limit - elapsed
        if self.time_remaining <= 0:
            self.game_over = True
            self.time_remaining = 0.0
            self.has_won = False
        self.time_text = clock_text(self.time_remaining)

        if self.goals >= GOALS_TO_WIN:
            self.has_won = True
            self.game_over = True

        x, self.moving_left = move_target(
            GOALIE_LEFT, GOALIE_RIGHT, self.goalie.x, self.moving_left, self.goalie_speed, 0
        )
        self.goalie = replace(self.goalie, x=x)

        if click is not None:
            self.target = (float(click[0]), float(click[1]))
            self.shot = True
        self.ball = projectile_step(*self.target, self.ball, self.shot)

        stopped = check_collision(self._ball_box(), self.goalie)
        tx, ty = self.target
        left, right, top, bottom = _GOAL_AREA
        if left < tx < right and top < ty < bottom:
            if stopped:
                self._reset_ball()
            elif self.ball[1] <= ty:
                self._reset_ball()
                self.goalie_speed += SPEED_STEP
                self.goals += 1
                return True
        elif stopped or self.ball[1] <= 0 or self.ball[0] <= 0 or self.ball[0] >= FIELD_WIDTH:
            self._reset_ball()
        return False

    def play(self, stage: Stage) -> Outcome:
        """Run the game in the window until it is won, lost or closed."""
        background = stage.picture("field.png")
        goalie_image = pygame.transform.scale(
            stage.picture("goalie.png"), (int(self.goalie.width), int(self.goalie.height))
        )
        ball_image = pygame.transform.scale(
            stage.picture("ball.png"), (int(BALL_SIZE), int(BALL_SIZE))
        )
        font = _font(stage, 50)
        banner_font = _font(stage, 100)
        ticker = pygame.time.Clock()
        start = time.monotonic()

        while not stage.closed:
            stage.events()
            if stage.closed:
                break
            if not self.game_over:
                click = pygame.mouse.get_pos() if pygame.mouse.get_pressed()[0] else None
                scored = self.step(time.monotonic() - start, click)
                surface = stage.surface
                surface.fill(_WHITE)
                surface.blit(background, (0, 0))
                surface.blit(ball_image, self.ball)
                surface.blit(goalie_image, (self.goalie.x, self.goalie.y))
                if scored:
                    surface.blit(banner_font.render("GOAL!!!", True, _GREEN), (800, 800))
                surface.blit(font.render(self.goals_text, True, _WHITE), (100, 200))
                surface.blit(font.render(self.time_text, True, _WHITE), (1300, 200))
                if scored:
                    stage.pause(0.5)
                else:
                    stage.present()
                ticker.tick(FRAME_RATE)
            else:
                name = "Congratulations.png" if self.has_won else "gameover.png"
                stage.surface.blit(stage.picture(name), (0, 0))
                stage.pause(2)
                return Outcome.COMPLETED if self.has_won else Outcome.FAILED
        return Outcome.CLOSED