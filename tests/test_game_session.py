from __future__ import annotations

from datetime import timedelta

import pytest

from quiz_manager.game.questions import (
    MultipleChoiceQuestion,
    OpenEndedQuestion,
    TrueFalseQuestion,
)
from quiz_manager.game.session import PlayResult, QuizSession


def make_provider(answers: list[str]):
    iterator = iter(answers)

    def _provider() -> str:
        return next(iterator)

    return _provider


def make_clock(*readings: float):
    iterator = iter(readings)
    return lambda: next(iterator)


@pytest.mark.parametrize(
    "answer, score",
    [("true", 1), ("false", 0), ("TRUE", 1), ("maybe", 0)],
)
def test_play_true_false(answer: str, score: int) -> None:
    session = QuizSession([TrueFalseQuestion("Water is wet.", True)])

    result = session.play(make_provider([answer]))

    assert isinstance(result, PlayResult)
    assert result.score == score
    assert result.total == 1


def test_play_multiple_choice_by_choice_text() -> None:
    session = QuizSession(
        [
            MultipleChoiceQuestion(
                "Colour of grass?", ("Red", "Green", "Blue", "Yellow"), 1
            )
        ]
    )

    result = session.play(make_provider(["green"]))

    assert result.score == 1
    assert result.total == 1


def test_play_measures_elapsed_with_clock() -> None:
    session = QuizSession(
        [OpenEndedQuestion("q", "a")],
        clock=make_clock(100.0, 165.5),
    )

    result = session.play(make_provider(["a"]))

    assert result.elapsed == timedelta(seconds=65.5)


def test_play_records_canonical_answers_and_responses() -> None:
    session = QuizSession(
        [
            OpenEndedQuestion("Capital of France?", "Paris"),
            TrueFalseQuestion("Fish can fly.", False),
        ]
    )

    result = session.play(make_provider(["PARIS", "yes"]))

    assert result.score == 1
    assert session.recorded_answers == ("Paris", "False")
    first, second = result.responses
    assert first.given == "PARIS"
    assert first.correct_answer == "Paris"
    assert first.is_correct is True
    assert second.kind == "True or False"
    assert second.is_correct is False


def test_play_calls_hook_before_each_read() -> None:
    events: list[str] = []
    questions = [OpenEndedQuestion("one", "1"), OpenEndedQuestion("two", "2")]
    session = QuizSession(questions)

    def provider() -> str:
        events.append("read")
        return "x"

    def hook(position, question) -> None:
        events.append(f"show {position} {question.text}")

    session.play(provider, on_question=hook)

    assert events == ["show 0 one", "read", "show 1 two", "read"]


def test_play_on_empty_store() -> None:
    session = QuizSession()

    result = session.play(make_provider([]))

    assert result.score == 0
    assert result.total == 0
    assert result.responses == ()


def test_repeated_plays_replace_recorded_answers_by_default() -> None:
    session = QuizSession(
        [OpenEndedQuestion("a", "1"), OpenEndedQuestion("b", "2")]
    )

    session.play(make_provider(["1", "2"]))
    session.play(make_provider(["x", "y"]))

    assert session.recorded_answers == ("1", "2")
    assert len(session.correct_answers()) == 2


def test_delete_after_play_keeps_review_aligned() -> None:
    session = QuizSession(
        [OpenEndedQuestion("one", "1"), OpenEndedQuestion("two", "2")]
    )
    session.play(make_provider(["1", "2"]))

    assert session.delete(0) is True

    assert session.recorded_answers == ("2",)
    assert session.correct_answers() == [("two", "Open-Ended", "2")]


def test_replace_after_play_updates_recorded_answer() -> None:
    session = QuizSession(
        [OpenEndedQuestion("one", "1"), OpenEndedQuestion("two", "2")]
    )
    session.play(make_provider(["1", "2"]))

    session.replace(1, TrueFalseQuestion("Sky is blue.", True))

    assert session.correct_answers() == [
        ("one", "Open-Ended", "1"),
        ("Sky is blue.", "True or False", "True"),
    ]


def test_delete_of_unplayed_question_leaves_recorded_answers() -> None:
    session = QuizSession([OpenEndedQuestion("one", "1")])
    session.play(make_provider(["1"]))
    session.add(OpenEndedQuestion("two", "2"))

    assert session.delete(1) is True
    assert session.delete(7) is False

    assert session.recorded_answers == ("1",)


def test_accumulate_answers_keeps_growing_but_review_stays_aligned() -> None:
    session = QuizSession(
        [OpenEndedQuestion("a", "1"), OpenEndedQuestion("b", "2")],
        accumulate_answers=True,
    )

    session.play(make_provider(["1", "2"]))
    session.replace(0, OpenEndedQuestion("a2", "changed"))
    session.play(make_provider(["x", "y"]))

    assert session.recorded_answers == ("1", "2", "changed", "2")
    entries = session.correct_answers()
    assert [entry.answer for entry in entries] == ["1", "2"]


def test_interrupted_play_keeps_previous_answers() -> None:
    session = QuizSession(
        [OpenEndedQuestion("a", "1"), OpenEndedQuestion("b", "2")]
    )
    session.play(make_provider(["1", "2"]))
    session.add(OpenEndedQuestion("c", "3"))

    def interrupted() -> str:
        raise EOFError

    with pytest.raises(EOFError):
        session.play(interrupted)

    assert session.recorded_answers == ("1", "2")


def test_correct_answers_after_play_in_store_order() -> None:
    session = QuizSession(
        [
            MultipleChoiceQuestion("Pick C", ("A", "B", "C", "D"), 2),
            TrueFalseQuestion("Sky is blue.", True),
        ]
    )

    session.play(make_provider(["wrong", "false"]))
    entries = session.correct_answers()

    assert len(entries) == 2
    assert entries[0] == ("Pick C", "Multiple Choice", "C")
    assert entries[1] == ("Sky is blue.", "True or False", "True")


def test_mutation_pass_throughs() -> None:
    session = QuizSession()
    session.add(OpenEndedQuestion("q", "a"))

    assert session.replace(0, OpenEndedQuestion("q2", "b")) is True
    assert session.delete(5) is False
    assert session.delete(0) is True
    assert len(session.store) == 0
