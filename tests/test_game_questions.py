from __future__ import annotations

import dataclasses

import pytest

from quiz_manager.game.questions import (
    MultipleChoiceQuestion,
    OpenEndedQuestion,
    QuestionKind,
    TrueFalseQuestion,
    parse_bool,
)


def test_open_ended_check_is_case_insensitive() -> None:
    question = OpenEndedQuestion("Capital of France?", "Paris")

    assert question.check_answer("PARIS") is True
    assert question.check_answer("paris") is True
    assert question.check_answer("PARIS") == question.check_answer("paris")
    assert question.check_answer("Lyon") is False


def test_open_ended_ignores_case_without_folding_letters() -> None:
    question = OpenEndedQuestion("German for street?", "Straße")

    assert question.check_answer("STRASSE") is False
    assert question.check_answer("STRAßE") is True
    assert question.check_answer("straße") is True


def test_open_ended_keeps_stored_case() -> None:
    question = OpenEndedQuestion("Capital of France?", "Paris")

    assert question.correct_answer_text() == "Paris"
    assert question.kind is QuestionKind.OPEN_ENDED
    assert question.kind.label == "Open-Ended"


def test_multiple_choice_correct_answer_text_uses_index() -> None:
    question = MultipleChoiceQuestion("Pick C", ("A", "B", "C", "D"), 2)

    assert question.correct_answer_text() == "C"
    assert question.kind.label == "Multiple Choice"


def test_multiple_choice_compares_against_choice_text() -> None:
    question = MultipleChoiceQuestion(
        "Colour of grass?", ("Red", "Green", "Blue", "Yellow"), 1
    )

    assert question.check_answer("green") is True
    assert question.check_answer("GREEN") is True
    assert question.check_answer("2") is False
    assert question.check_answer("Blue") is False


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("true", True),
        ("TRUE", True),
        (" True ", True),
        ("false", False),
        ("maybe", False),
        ("", False),
        ("yes", False),
    ],
)
def test_true_false_check_answer(candidate: str, expected: bool) -> None:
    question = TrueFalseQuestion("The sky is blue.", True)

    assert question.check_answer(candidate) is expected


def test_true_false_false_statement() -> None:
    question = TrueFalseQuestion("Fish can fly.", False)

    assert question.check_answer("False") is True
    assert question.check_answer("true") is False
    assert question.correct_answer_text() == "False"
    assert question.kind.label == "True or False"


def test_true_false_correct_answer_text_true() -> None:
    assert TrueFalseQuestion("x", True).correct_answer_text() == "True"


def test_missing_input_never_counts() -> None:
    questions = [
        OpenEndedQuestion("q", "a"),
        MultipleChoiceQuestion("q", ("a", "b"), 0),
        TrueFalseQuestion("q", False),
    ]

    assert not any(question.check_answer(None) for question in questions)


def test_parse_bool() -> None:
    assert parse_bool(" False ") is False
    assert parse_bool("tRuE") is True
    assert parse_bool("yes") is None
    assert parse_bool(None) is None


def test_questions_are_immutable() -> None:
    question = OpenEndedQuestion("q", "a")

    with pytest.raises(dataclasses.FrozenInstanceError):
        question.text = "changed"  # type: ignore[misc]
