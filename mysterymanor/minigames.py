"""Geometry shared by the mini games: moving targets and thrown projectiles."""

from __future__ import annotations

import math
from dataclasses import dataclass

LAUNCH_POINT = (840.0, 1320.0)
PROJECTILE_SPEED = 15.0


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Box) -> bool:
        """Whether the two boxes overlap with a non-empty area."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies inside; the right and bottom edges are outside."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def moved(self, dx: float, dy: float) -> Box:
        """A copy shifted by the given offset."""
        return Box(self.x + dx, self.y + dy, self.width, self.height)


def move_target(
    l_bound: float,
    r_bound: float,
    x: float,
    moving_left: bool,
    speed: float,
    direction: int,
) -> tuple[float, bool]:
    """Slide a target back and forth between two bounds.

    Returns the new horizontal position and whether it now moves left.
    ``direction`` is 0 for left and 1 for right and is used only when the
    target sits outside its bounds.
    """
    if x >= l_bound and not moving_left:
        direction = 1
        if x >= r_bound:
            moving_left = True
            direction = 0
    elif x <= r_bound and moving_left:
        direction = 0
        if x <= l_bound:
            moving_left = False
            direction = 1

    return (x - speed if direction == 0 else x + speed), moving_left


def projectile_step(
    mouse_x: float,
    mouse_y: float,
    position: tuple[float, float],
    is_shot: bool,
) -> tuple[float, float]:
    """Advance a projectile one frame towards the aimed point.

    A projectile that has not been shot waits at the launch point.
    """
    if not is_shot:
        return LAUNCH_POINT
    reach = math.hypot(mouse_x + LAUNCH_POINT[0], mouse_y + LAUNCH_POINT[1])
    if reach == 0:
        return position
    rate_x = (mouse_x - LAUNCH_POINT[0]) / reach
    rate_y = (LAUNCH_POINT[1] - mouse_y) / reach
    return (
        position[0] + rate_x * PROJECTILE_SPEED,
        position[1] - rate_y * PROJECTILE_SPEED,
    )


def check_collision(first: Box, second: Box) -> bool:
    """Whether two boxes overlap."""
    return first.intersects(second)


def clock_text(seconds: float) -> str:
    """Whole minutes and seconds as shown on the mini-game clocks."""
    total = int(seconds)
    minutes = abs(total) // 60 * (1 if total >= 0 else -1)
    rest = total - minutes * 60
    return f"Time | {minutes} : {rest}"