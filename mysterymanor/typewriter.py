"""Text that appears one character at a time."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Typewriter:
    """Reveals a text progressively, one character per call to ``advance``.

    Each step shows the characters before the current position and then moves
    the position on, so the first step shows nothing and the final character
    is never shown.
    """

    text: str
    index: int = 0
    shown: str = field(default="", init=False)

    @property
    def finished(self) -> bool:
        """Whether further steps leave the shown text unchanged."""
        return self.index >= len(self.text)

    def advance(self) -> str:
        """Move one character on and return the text now shown."""
        if self.index < len(self.text):
            self.shown = self.text[: self.index]
            self.index += 1
        return self.shown

    def reset(self) -> None:
        """Start again from an empty display."""
        self.index = 0
        self.shown = ""