"""Question variants and their answer-checking rules.

Three immutable question kinds share one capability set:

* ``check_answer(candidate)`` decides whether a typed answer counts,
* ``kind`` reports the :class:`QuestionKind` tag (its ``label`` is what the
  console shows), and
* ``correct_answer_text()`` returns the canonical answer used for review.

String comparisons ignore case; stored text keeps whatever case the author
typed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "QuestionKind",
    "MultipleChoiceQuestion",
    "OpenEndedQuestion",
    "TrueFalseQuestion",
    "Question",
    "parse_bool",
]


class QuestionKind(Enum):
    """Supported question kinds and their display labels."""

    MULTIPLE_CHOICE = "Multiple Choice"
    OPEN_ENDED = "Open-Ended"
    TRUE_FALSE = "True or False"

    @property
    def label(self) -> str:
        return self.value


def parse_bool(raw: str | None) -> bool | None:
    """Return ``True``/``False`` for a boolean literal, ``None`` otherwise."""

    if raw is None:
        return None
    normalized = raw.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


def _same_text(candidate: str | None, expected: str) -> bool:
    if candidate is None:
        return False
    return candidate.lower() == expected.lower()


@dataclass(frozen=True)
class MultipleChoiceQuestion:
    """A prompt with ordered choices; ``correct_index`` is 0-based."""

    text: str
    choices: tuple[str, ...]
    correct_index: int

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.MULTIPLE_CHOICE

    def check_answer(self, candidate: str | None) -> bool:
        return _same_text(candidate, self.correct_answer_text())

    def correct_answer_text(self) -> str:
        return self.choices[self.correct_index]


@dataclass(frozen=True)
class OpenEndedQuestion:
    """A prompt answered with free text."""

    text: str
    correct_answer: str

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.OPEN_ENDED

    def check_answer(self, candidate: str | None) -> bool:
        return _same_text(candidate, self.correct_answer)

    def correct_answer_text(self) -> str:
        return self.correct_answer


@dataclass(frozen=True)
class TrueFalseQuestion:
    """A statement the player marks true or false."""

    text: str
    correct_answer: bool

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.TRUE_FALSE

    def check_answer(self, candidate: str | None) -> bool:
        parsed = parse_bool(candidate)
        if parsed is None:
            return False
        return parsed == self.correct_answer

    def correct_answer_text(self) -> str:
        return "True" if self.correct_answer else "False"


Question = Union[MultipleChoiceQuestion, OpenEndedQuestion, TrueFalseQuestion]
