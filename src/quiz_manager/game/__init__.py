from .questions import (
    MultipleChoiceQuestion,
    OpenEndedQuestion,
    Question,
    QuestionKind,
    TrueFalseQuestion,
    parse_bool,
)
from .store import QuestionStore
from .review import ReviewEntry, correct_answers
from .session import (
    PlayResult,
    QuestionResponse,
    QuizSession,
)
from .authoring import (
    AuthoringError,
    author_question,
    parse_kind,
    parse_position,
)
from .view import format_elapsed
from .shell import QuizShell

__all__ = [
    "MultipleChoiceQuestion",
    "OpenEndedQuestion",
    "Question",
    "QuestionKind",
    "TrueFalseQuestion",
    "parse_bool",
    "QuestionStore",
    "ReviewEntry",
    "correct_answers",
    "PlayResult",
    "QuestionResponse",
    "QuizSession",
    "AuthoringError",
    "author_question",
    "parse_kind",
    "parse_position",
    "format_elapsed",
    "QuizShell",
]
