import pytest

from mysterymanor.typewriter import Typewriter


def test_first_step_shows_nothing():
    writer = Typewriter("abc")
    assert writer.advance() == ""
    assert writer.index == 1


def test_steps_reveal_prefixes():
    writer = Typewriter("abc")
    shown = [writer.advance() for _ in range(3)]
    assert shown == ["", "a", "ab"]


def test_last_character_is_never_shown():
    writer = Typewriter("abc")
    for _ in range(10):
        writer.advance()
    assert writer.shown == "ab"
    assert writer.finished


@pytest.mark.parametrize("text", ["", "x", "Loading....", "line one\nline two"])
def test_shown_is_always_a_prefix(text):
    writer = Typewriter(text)
    for _ in range(len(text) + 3):
        assert text.startswith(writer.advance())
    assert writer.index == len(text)


def test_empty_text_stays_empty():
    writer = Typewriter("")
    assert writer.advance() == ""
    assert writer.finished


def test_reset_starts_again():
    writer = Typewriter("hello")
    for _ in range(4):
        writer.advance()
    writer.reset()
    assert writer.index == 0
    assert writer.shown == ""
    assert writer.advance() == ""
    assert writer.advance() == "h"