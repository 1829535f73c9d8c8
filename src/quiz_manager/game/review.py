"""Pair each stored question with the answer recorded during play."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from .store import QuestionStore


class ReviewEntry(NamedTuple):
    text: str
    kind: str
    answer: str


def correct_answers(
    store: QuestionStore, recorded: Sequence[str]
) -> list[ReviewEntry]:
    """Return review entries in store order.

    Positions without a recorded answer (nothing played yet, or questions
    added after the last play) are left out instead of failing the report.
    """

    entries: list[ReviewEntry] = []
    for index, question in enumerate(store):
        if index >= len(recorded):
            continue
        entries.append(
            ReviewEntry(question.text, question.kind.label, recorded[index])
        )
    return entries
