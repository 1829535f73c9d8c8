"""Quiz session: owns the question store, runs play-throughs, keeps answers.

A play-through walks the store in order, reads exactly one line of input per
question, scores it and records the canonical correct answer so it can be
revealed later. Rendering is left to the caller through the ``on_question``
hook; the session itself only returns structured results.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Optional

from .questions import Question
from .review import ReviewEntry, correct_answers
from .store import QuestionStore

logger = logging.getLogger(__name__)

InputProvider = Callable[[], str]
QuestionHook = Callable[[int, Question], None]
Clock = Callable[[], float]


@dataclass(frozen=True)
class QuestionResponse:
    """What the player typed for one question and how it was scored."""

    position: int
    text: str
    kind: str
    given: str
    correct_answer: str
    is_correct: bool


@dataclass(frozen=True)
class PlayResult:
    """Outcome of a single play-through."""

    score: int
    total: int
    elapsed: timedelta
    responses: tuple[QuestionResponse, ...] = ()


class QuizSession:
    """Single-user quiz state shared by the menu shell.

    By default each play-through replaces the recorded answers, and deleting
    or replacing a question updates the matching recorded entry so review
    stays aligned with the store. With ``accumulate_answers`` the list is
    appended to across plays instead and never edited, and review keeps
    reading the entries of the first play.
    """

    def __init__(
        self,
        questions: Iterable[Question] = (),
        *,
        accumulate_answers: bool = False,
        clock: Clock = time.monotonic,
    ) -> None:
        self.store = QuestionStore(questions)
        self.accumulate_answers = accumulate_answers
        self._clock = clock
        self._recorded: list[str] = []

    @property
    def recorded_answers(self) -> tuple[str, ...]:
        return tuple(self._recorded)

    def add(self, question: Question) -> None:
        self.store.add(question)

    def delete(self, index: int) -> bool:
        removed = self.store.delete(index)
        if removed and self._tracks_store(index):
            del self._recorded[index]
        return removed

    def replace(self, index: int, question: Question) -> bool:
        replaced = self.store.replace(index, question)
        if replaced and self._tracks_store(index):
            self._recorded[index] = question.correct_answer_text()
        return replaced

    def _tracks_store(self, index: int) -> bool:
        # Accumulated answers stay append-only.
        return not self.accumulate_answers and index < len(self._recorded)

    def play(
        self,
        answer_source: InputProvider,
        *,
        on_question: Optional[QuestionHook] = None,
    ) -> PlayResult:
        """Ask every stored question once and score the answers.

        Exceptions raised by ``answer_source`` (EOF, Ctrl-C) propagate and
        leave the recorded answers as they were before the call.
        """

        started = self._clock()
        score = 0
        recorded: list[str] = []
        responses: list[QuestionResponse] = []

        for position, question in enumerate(self.store):
            if on_question is not None:
                on_question(position, question)
            given = answer_source()
            is_correct = question.check_answer(given)
            if is_correct:
                score += 1
            answer_text = question.correct_answer_text()
            recorded.append(answer_text)
            responses.append(
                QuestionResponse(
                    position=position,
                    text=question.text,
                    kind=question.kind.label,
                    given="" if given is None else given,
                    correct_answer=answer_text,
                    is_correct=is_correct,
                )
            )

        elapsed = timedelta(seconds=max(self._clock() - started, 0.0))

        if self.accumulate_answers:
            self._recorded.extend(recorded)
        else:
            self._recorded = recorded

        result = PlayResult(
            score=score,
            total=len(self.store),
            elapsed=elapsed,
            responses=tuple(responses),
        )
        logger.info(
            "Play-through finished",
            extra={
                "score": result.score,
                "total": result.total,
                "elapsed_seconds": round(elapsed.total_seconds(), 3),
            },
        )
        return result

    def correct_answers(self) -> list[ReviewEntry]:
        return correct_answers(self.store, self._recorded)
