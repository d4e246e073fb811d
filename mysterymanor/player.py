"""The detective's lives and points."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LIVES = 5
DEFAULT_POINTS = 50


@dataclass
class Player:
    """Lives and points carried from one level to the next."""

    lives: int = DEFAULT_LIVES
    points: int = DEFAULT_POINTS

    def add_points(self, amount: int) -> None:
        """Award points."""
        self.points += amount

    def deduct_points(self, amount: int) -> None:
        """Take points away; the total may go below zero."""
        self.points -= amount

    def lose_life(self) -> None:
        """Lose one life, never going below zero."""
        if self.lives > 0:
            self.lives -= 1