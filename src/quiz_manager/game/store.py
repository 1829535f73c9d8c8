"""Ordered, position-addressed question storage."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .questions import Question

logger = logging.getLogger(__name__)


class QuestionStore:
    """Dense list of questions indexed ``0..len-1``.

    ``delete`` and ``replace`` ignore indices outside the store and report
    whether anything changed; they never raise.
    """

    def __init__(self, questions: Iterable[Question] = ()) -> None:
        self._questions: list[Question] = list(questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(tuple(self._questions))

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._questions)

    def add(self, question: Question) -> None:
        self._questions.append(question)
        logger.debug(
            "Question added",
            extra={
                "index": len(self._questions) - 1,
                "kind": question.kind.name,
            },
        )

    def delete(self, index: int) -> bool:
        if not self._in_range(index):
            logger.debug("Delete ignored", extra={"index": index})
            return False
        del self._questions[index]
        logger.debug("Question deleted", extra={"index": index})
        return True

    def replace(self, index: int, question: Question) -> bool:
        if not self._in_range(index):
            logger.debug("Replace ignored", extra={"index": index})
            return False
        self._questions[index] = question
        logger.debug(
            "Question replaced",
            extra={"index": index, "kind": question.kind.name},
        )
        return True

    def at(self, index: int) -> Question:
        if not self._in_range(index):
            raise IndexError(f"No question at index {index}")
        return self._questions[index]

    def get(self, index: int) -> Question | None:
        if not self._in_range(index):
            return None
        return self._questions[index]
