"""The first level: a riddle, nine questions, a passcode and a penalty shoot-out."""

from __future__ import annotations

import enum
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field

import pygame

from .minigames import Box
from .player import Player
from .questions import Question
from .screen import AssetError, Outcome, Stage
from .shadow_strikes import ShadowStrikes

PASSCODE = "WIRE-SHAFT"
ANSWER_REWARD = 5
HINT_COST = 25
PASSCODE_REWARD = 80
TIME_LIMIT = 300.0
FONT_NAME = "PixelifySans-Medium.ttf"
RIDDLE_DIR = "Textfiles"
RIDDLE_FILE = "riddleGame.txt"
RIDDLE_FALLBACK = "Error: Could not load riddle."
FRAME_RATE = 60

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_RED = (255, 0, 0)
_GREEN = (0, 255, 0)

_START_BUTTON = Box(600.0, 980.0, 400.0, 160.0)
_TIMER_BOX = Box(1390.0, 40.0, 210.0, 75.0)
_POINTS_BOX = Box(700.0, 40.0, 210.0, 75.0)
_ANAGRAM_BOX = Box(500.0, 1300.0, 600.0, 80.0)
_INPUT_BOX = Box(250.0, 500.0, 585.0, 140.0)
_GAME_BUTTON = Box(1300.0, 1500.0, 250.0, 80.0)
_BULB_POSITION = (1400, 1000)
_QUESTION_POSITION = (150, 350)


class Phase(enum.Enum):
    """The part of the level under way."""

    START = "start"
    RIDDLE = "riddle"
    QUESTIONS = "questions"
    PASSCODE = "passcode"
    MINIGAME = "minigame"
    COMPLETE = "complete"


def default_questions() -> list[Question]:
    """The nine questions whose right answers spell out the passcode."""
    return [
        Question(
            "Who moves unseen, slipping between light and shadow?",
            ("Echo", " Sentinel", " Phantom", "Guardian"),
            0,
        ),
        Question(
            "Who silently shapes the fate of others, unseen but \npowerful?",
            ("Whisperer", "Monarch", "Shadowbinder", "Watcher"),
            0,
        ),
        Question(
            "Who hides their true self, crafting an identity of \ndeception?",
            ("Actor", "Illusionist", "Magician", "Impostor"),
            3,
        ),
        Question(
            "Who leaves no footprints yet changes everything they\n touch?",
            ("Whisperer", "Reaper", "Rogue", "Shadow"),
            2,
        ),
        Question(
            'Does "Twilight" move unseen, in a place between darkness\n and light?',
            ("True", "False"),
            0,
            vertical=True,
        ),
        Question(
            "Where do only the knowing find their way, a hidden path\n or door?",
            ("Main Entrance", "Hidden Gate", "Open Road", "Secret Passage"),
            1,
        ),
        Question(
            "What place muffles sound, allowing unseen movement?",
            ("Silent Hall", "Echo Chamber", "Whispering Forest", "Thunderous Cave"),
            0,
        ),
        Question(
            "What place holds no traces, yet its presence is felt?",
            ("Forgotten Path", "Empty Room", "Haunted Mansion", "Desert"),
            0,
        ),
        Question(
            "Who guards the truth with silence, seen by none but\n known by few?",
            ("Archivist", "Oracle", "Shade", "Watcher"),
            0,
        ),
    ]


def _pad(value: int) -> str:
    return f"0{value}" if value < 10 else str(value)


def countdown_text(seconds: float) -> str:
    """Whole minutes and seconds, each padded to two digits."""
    total = int(seconds)
    minutes = int(total / 60)
    rest = total - minutes * 60
    return f"Time | {_pad(minutes)}:{_pad(rest)}"


def _font(stage: Stage, size: int) -> pygame.font.Font:
    try:
        return stage.font(FONT_NAME, size)
    except AssetError:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, size)


def _scaled(image: pygame.Surface, factor: float) -> pygame.Surface:
    width, height = image.get_size()
    return pygame.transform.scale(
        image, (max(1, int(width * factor)), max(1, int(height * factor)))
    )


def _read_riddle(stage: Stage) -> str:
    try:
        return (stage.root / RIDDLE_DIR / RIDDLE_FILE).read_text(
            encoding="utf-8", errors="replace"
        )
    except OSError:
        return RIDDLE_FALLBACK


def _blit_lines(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    position: tuple[float, float],
    colour: tuple[int, int, int],
) -> pygame.Rect:
    x, y = position
    area = pygame.Rect(int(x), int(y), 0, 0)
    for line in text.split("\n"):
        rendered = font.render(line, True, colour)
        rect = surface.blit(rendered, (x, y))
        area.union_ip(rect)
        y += font.get_linesize()
    return area


def _draw_box(
    surface: pygame.Surface,
    box: Box,
    fill: tuple[int, int, int],
    outline: tuple[int, int, int] | None = None,
) -> None:
    rect = pygame.Rect(int(box.x), int(box.y), int(box.width), int(box.height))
    pygame.draw.rect(surface, fill, rect)
    if outline is not None:
        pygame.draw.rect(surface, outline, rect.inflate(4, 4), 2)


def _option_position(question: Question, index: int) -> tuple[int, int]:
    if question.vertical:
        return 200, 550 + index * 100
    return 200 + (index % 2) * 600, 600 + (index // 2) * 120


@dataclass
class _Assets:
    fonts: dict[int, pygame.font.Font]
    heart: pygame.Surface
    bulb: pygame.Surface | None
    riddle: str


@dataclass
class _Layout:
    riddle_rect: pygame.Rect | None = None
    option_rects: list[pygame.Rect] = field(default_factory=list)
    bulb_rect: pygame.Rect | None = None
    hint_rect: pygame.Rect | None = None
    hint_image: pygame.Surface | None = None
    time_text: str = countdown_text(TIME_LIMIT)


@dataclass
class Level1:
    """State of the first level and the rules that move it on."""

    player: Player = field(default_factory=Player)
    questions: list[Question] = field(default_factory=default_questions)
    phase: Phase = Phase.START
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    current: int = 0
    anagram: str = ""
    first_attempt_wrong: bool = False
    wrong_attempts: int = 0
    show_hint: bool = False
    passcode: str = ""
    can_type: bool = False

    def __post_init__(self) -> None:
        self.questions = list(self.questions)
        if not self.questions:
            raise ValueError("the level needs at least one question")

    @property
    def question(self) -> Question:
        """The question currently asked."""
        return self.questions[min(self.current, len(self.questions) - 1)]

    def _require(self, phase: Phase) -> None:
        if self.phase is not phase:
            raise RuntimeError(f"not possible during the {self.phase.value} phase")

    def answer(self, index: int) -> bool:
        """Pick an option of the current question; returns whether it was right.

        A right answer on the first try earns points; every wrong answer from
        the second on costs a life.
        """
        self._require(Phase.QUESTIONS)
        question = self.question
        if question.is_correct(index):
            if not self.first_attempt_wrong:
                self.player.add_points(ANSWER_REWARD)
            self.anagram += question.initial(index)
            self.current += 1
            self.first_attempt_wrong = False
            self.wrong_attempts = 0
            if self.current >= len(self.questions):
                self.phase = Phase.PASSCODE
            return True
        self.wrong_attempts += 1
        if self.wrong_attempts >= 2:
            self.player.lose_life()
        self.first_attempt_wrong = True
        return False

    def buy_hint(self) -> int | None:
        """Pay for a hint; returns the hint's number, or None if none was bought."""
        if self.show_hint or self.player.points < HINT_COST:
            return None
        self.player.deduct_points(HINT_COST)
        self.show_hint = True
        return min(self.current + 1, len(self.questions))

    def type_char(self, char: str) -> None:
        """Type one character of the passcode; a backspace removes the last one."""
        self._require(Phase.PASSCODE)
        if char == "\b":
            self.passcode = self.passcode[:-1]
        elif len(char) == 1 and ord(char) < 128 and char != "\r":
            self.passcode += char

    def submit_passcode(self) -> bool:
        """Check the typed passcode; a wrong one leads to the penalty shoot-out."""
        self._require(Phase.PASSCODE)
        if self.passcode == PASSCODE:
            self.player.add_points(PASSCODE_REWARD)
            self.phase = Phase.COMPLETE
            return True
        self.phase = Phase.MINIGAME
        return False

    # Drawing

    def _draw_status(
        self, surface: pygame.Surface, assets: _Assets, layout: _Layout
    ) -> None:
        small = assets.fonts[35]
        _draw_box(surface, _TIMER_BOX, _BLACK)
        surface.blit(small.render(layout.time_text, True, _WHITE), (1400, 45))
        _draw_box(surface, _POINTS_BOX, _BLACK)
        surface.blit(
            small.render(f"Points: {self.player.points}", True, _WHITE), (710, 45)
        )
        _draw_box(surface, _ANAGRAM_BOX, _BLACK)
        surface.blit(assets.fonts[30].render(self.anagram, True, _WHITE), (715, 1315))

    def _draw_hearts(self, surface: pygame.Surface, assets: _Assets) -> None:
        for number in range(self.player.lives):
            surface.blit(assets.heart, (10 + number * 45, 15))

    def _draw_questions(
        self,
        stage: Stage,
        assets: _Assets,
        layout: _Layout,
        highlight: tuple[int, tuple[int, int, int]] | None = None,
    ) -> None:
        surface = stage.surface
        surface.fill(_BLACK)
        surface.blit(stage.picture("lvl1.png"), (0, 0))
        if self.show_hint:
            if layout.hint_image is not None and layout.hint_rect is not None:
                surface.blit(layout.hint_image, layout.hint_rect.topleft)
            self._draw_hearts(surface, assets)
            self._draw_status(surface, assets, layout)
            layout.option_rects = []
            return
        if assets.bulb is not None:
            layout.bulb_rect = surface.blit(assets.bulb, _BULB_POSITION)
        self._draw_hearts(surface, assets)
        self._draw_status(surface, assets, layout)
        question = self.question
        font = assets.fonts[40]
        _blit_lines(surface, font, question.text, _QUESTION_POSITION, _WHITE)
        rects = []
        for index, option in enumerate(question.options):
            colour = _WHITE
            if highlight is not None and highlight[0] == index:
                colour = highlight[1]
            rendered = assets.fonts[50].render(option, True, colour)
            rects.append(surface.blit(rendered, _option_position(question, index)))
        layout.option_rects = rects

    def _draw_passcode(self, stage: Stage, assets: _Assets, layout: _Layout) -> None:
        surface = stage.surface
        surface.fill(_BLACK)
        surface.blit(stage.picture("passcode.png"), (0, 0))
        self._draw_hearts(surface, assets)
        self._draw_status(surface, assets, layout)
        _draw_box(surface, _INPUT_BOX, _WHITE, outline=_BLACK)
        surface.blit(assets.fonts[70].render(self.passcode, True, _BLACK), (280, 520))

    def _draw_button_screen(
        self,
        stage: Stage,
        picture: str,
        button: Box,
        fill: tuple[int, int, int],
        label: pygame.Surface,
        label_position: tuple[int, int],
    ) -> None:
        surface = stage.surface
        surface.fill(_BLACK)
        surface.blit(stage.picture(picture), (0, 0))
        _draw_box(surface, button, fill)
        surface.blit(label, label_position)

    def _load_hint(self, stage: Stage, number: int, layout: _Layout) -> None:
        name = f"question{number}hint.png"
        try:
            image = stage.picture(name)
        except AssetError:
            print(f"Failed to load hint image: {name}", file=sys.stderr)
            layout.hint_image = None
            layout.hint_rect = None
            return
        width, height = stage.surface.get_size()
        scale = min(width * 0.6 / image.get_width(), height * 0.6 / image.get_height())
        scaled = _scaled(image, scale)
        rect = scaled.get_rect()
        rect.center = (width // 2, height // 2)
        layout.hint_image = scaled
        layout.hint_rect = rect

    def _click(
        self, stage: Stage, assets: _Assets, layout: _Layout, pos: tuple[int, int]
    ) -> Outcome | None:
        x, y = pos
        if self.phase is Phase.START and _START_BUTTON.contains(x, y):
            self.phase = Phase.RIDDLE
        elif self.phase is Phase.RIDDLE and not (
            layout.riddle_rect is not None and layout.riddle_rect.collidepoint(pos)
        ):
            self.phase = Phase.QUESTIONS
            self._timer_start = self.clock()

        if self.phase is Phase.QUESTIONS:
            on_bulb = (
                not self.show_hint
                and layout.bulb_rect is not None
                and layout.bulb_rect.collidepoint(pos)
            )
            if on_bulb:
                number = self.buy_hint()
                if number is not None:
                    stage.surface.blit(
                        assets.fonts[35].render(f"-{HINT_COST}", True, _RED),
                        _BULB_POSITION,
                    )
                    stage.pause(0.5)
                    self._load_hint(stage, number, layout)
            elif self.show_hint and not (
                layout.hint_rect is not None and layout.hint_rect.collidepoint(pos)
            ):
                self.show_hint = False

            for index, rect in enumerate(layout.option_rects):
                if rect.collidepoint(pos):
                    colour = _GREEN if self.question.is_correct(index) else _RED
                    self._draw_questions(stage, assets, layout, (index, colour))
                    stage.pause(0.5)
                    self.answer(index)
                    break

        if self.phase is Phase.PASSCODE and _INPUT_BOX.contains(x, y):
            self.can_type = True

        if self.phase is Phase.MINIGAME and _GAME_BUTTON.contains(x, y):
            if self._game_picture == 1:
                self._game_picture = 2
                self._game_label = "     Play"
            else:
                return ShadowStrikes().play(stage)
        return None

    def _key(self, event: pygame.event.Event) -> bool:
        """Handle typing; returns whether the right passcode was submitted."""
        if self.phase is not Phase.PASSCODE or not self.can_type:
            return False
        if event.type == pygame.TEXTINPUT:
            for char in event.text:
                self.type_char(char)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                self.type_char("\b")
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return self.submit_passcode()
        return False

    def run(self, stage: Stage) -> Outcome:
        """Play the level until it is won, lost or the window closes."""
        assets = _Assets(
            fonts={size: _font(stage, size) for size in (30, 35, 40, 50, 60, 70, 80)},
            heart=_scaled(stage.picture("heart.png"), 0.1),
            bulb=None,
            riddle=_read_riddle(stage),
        )
        try:
            assets.bulb = _scaled(stage.picture("lightBulbIcon.png"), 0.2)
        except AssetError:
            print("Failed to load lightbulb image!", file=sys.stderr)
        layout = _Layout()
        self._timer_start = self.clock()
        self._game_picture = 1
        self._game_label = "try again"
        ticker = pygame.time.Clock()

        while not stage.closed:
            events = stage.events()
            if stage.closed:
                break
            for event in events:
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    outcome = self._click(stage, assets, layout, event.pos)
                    if outcome is not None:
                        return outcome
                elif self._key(event):
                    stage.surface.blit(stage.picture("Congratulations.png"), (0, 0))
                    stage.pause(2)
                    return Outcome.COMPLETED
            if stage.closed:
                break

            layout.time_text = countdown_text(
                TIME_LIMIT - (self.clock() - self._timer_start)
            )
            if self.player.lives == 0:
                stage.surface.fill(_BLACK)
                stage.surface.blit(stage.picture("gameover.png"), (0, 0))
                stage.pause(2)
                return Outcome.FAILED

            if self.phase is Phase.START:
                label = assets.fonts[80].render("START", True, _WHITE)
                self._draw_button_screen(
                    stage, "level1.png", _START_BUTTON, _BLACK, label, (670, 1005)
                )
            elif self.phase is Phase.RIDDLE:
                stage.surface.fill(_BLACK)
                stage.surface.blit(stage.picture("lvl1.png"), (0, 0))
                layout.riddle_rect = _blit_lines(
                    stage.surface, assets.fonts[60], assets.riddle, (250, 400), _WHITE
                )
            elif self.phase is Phase.QUESTIONS:
                self._draw_questions(stage, assets, layout)
            elif self.phase is Phase.PASSCODE:
                self._draw_passcode(stage, assets, layout)
            elif self.phase is Phase.MINIGAME:
                label = assets.fonts[50].render(self._game_label, True, _RED)
                self._draw_button_screen(
                    stage,
                    f"{self._game_picture}.png",
                    _GAME_BUTTON,
                    _WHITE,
                    label,
                    (1310, 1510),
                )
            else:
                return Outcome.COMPLETED

            stage.present()
            ticker.tick(FRAME_RATE)
        return Outcome.CLOSED