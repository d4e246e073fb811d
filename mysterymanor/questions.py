"""Multiple-choice questions."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Question:
    """A question, its options and which option is right."""

    text: str
    options: tuple[str, ...]
    correct_index: int = 0
    vertical: bool = False
    _checked: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        if not self.options:
            raise ValueError("a question needs at least one option")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"correct index {self.correct_index} is outside the "
                f"{len(self.options)} options"
            )

    def _option(self, index: int) -> str:
        if not 0 <= index < len(self.options):
            raise IndexError(f"no option {index}")
        return self.options[index]

    def is_correct(self, index: int) -> bool:
        """Whether the option at ``index`` is the right answer."""
        self._option(index)
        return index == self.correct_index

    def initial(self, index: int) -> str:
        """The first character of an option, as collected into the anagram."""
        return self._option(index)[:1]