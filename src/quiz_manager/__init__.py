"""Interactive console quiz manager."""

from .game import (
    MultipleChoiceQuestion,
    OpenEndedQuestion,
    PlayResult,
    QuestionKind,
    QuestionStore,
    QuizSession,
    TrueFalseQuestion,
)

__all__ = [
    "MultipleChoiceQuestion",
    "OpenEndedQuestion",
    "PlayResult",
    "QuestionKind",
    "QuestionStore",
    "QuizSession",
    "TrueFalseQuestion",
]
