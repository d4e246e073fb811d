import pytest

from mysterymanor.questions import Question


def make_question():
    return Question(
        "Who moves unseen, slipping between light and shadow?",
        ("Echo", " Sentinel", " Phantom", "Guardian"),
        0,
        False,
    )


def test_options_are_stored_as_tuple():
    question = Question("q", ["True", "False"], 0, True)
    assert question.options == ("True", "False")
    assert question.vertical is True


def test_is_correct_only_for_the_right_index():
    question = make_question()
    assert question.is_correct(0) is True
    assert [question.is_correct(i) for i in range(1, 4)] == [False, False, False]


def test_initial_is_first_character():
    question = make_question()
    assert question.initial(0) == "E"
    assert question.initial(3) == "G"


def test_initial_keeps_leading_space():
    question = make_question()
    assert question.initial(1) == " "


def test_out_of_range_option_raises():
    question = make_question()
    with pytest.raises(IndexError):
        question.is_correct(4)
    with pytest.raises(IndexError):
        question.initial(-1)


def test_correct_index_must_name_an_option():
    with pytest.raises(ValueError):
        Question("q", ("a", "b"), 2)


def test_options_must_not_be_empty():
    with pytest.raises(ValueError):
        Question("q", (), 0)