"""Field-by-field question authoring for the console shell.

Each builder prompts for one field at a time and only returns a question once
every field validated. Invalid input raises :class:`AuthoringError` carrying
the message to show the user; nothing is added to the store in that case.
"""

from __future__ import annotations

from typing import Callable

from .questions import (
    MultipleChoiceQuestion,
    OpenEndedQuestion,
    Question,
    QuestionKind,
    TrueFalseQuestion,
    parse_bool,
)

ReadLine = Callable[[], str]
Prompt = Callable[[str], None]

DEFAULT_CHOICE_COUNT = 4

_KIND_MENU = {
    "1": QuestionKind.MULTIPLE_CHOICE,
    "2": QuestionKind.OPEN_ENDED,
    "3": QuestionKind.TRUE_FALSE,
}


class AuthoringError(ValueError):
    """Raised when typed input cannot become a valid question."""


def kind_menu() -> list[tuple[str, QuestionKind]]:
    return list(_KIND_MENU.items())


def parse_kind(raw: str | None) -> QuestionKind:
    kind = _KIND_MENU.get((raw or "").strip())
    if kind is None:
        raise AuthoringError("Invalid option. Please try again.")
    return kind


def parse_position(raw: str | None) -> int:
    """Turn a 1-based position typed by the user into a 0-based index.

    Only the integer format is validated; whether the index exists is the
    store's decision.
    """

    try:
        position = int((raw or "").strip())
    except ValueError as exc:
        raise AuthoringError(
            "Invalid index. Please enter a valid integer."
        ) from exc
    return position - 1


def author_question(
    kind: QuestionKind,
    read_line: ReadLine,
    prompt: Prompt,
    *,
    choice_count: int = DEFAULT_CHOICE_COUNT,
) -> Question:
    if kind is QuestionKind.MULTIPLE_CHOICE:
        return author_multiple_choice(
            read_line, prompt, choice_count=choice_count
        )
    if kind is QuestionKind.OPEN_ENDED:
        return author_open_ended(read_line, prompt)
    return author_true_false(read_line, prompt)


def author_multiple_choice(
    read_line: ReadLine,
    prompt: Prompt,
    *,
    choice_count: int = DEFAULT_CHOICE_COUNT,
) -> MultipleChoiceQuestion:
    text = _ask(read_line, prompt, "Enter the question:")
    prompt(f"Enter the choices (Max {choice_count}):")
    choices: list[str] = []
    for number in range(1, choice_count + 1):
        choices.append(_ask(read_line, prompt, f"Enter choice {number}:"))
    raw_index = _ask(
        read_line,
        prompt,
        f"Enter the number of the correct choice (1-{choice_count}):",
    )
    try:
        number = int(raw_index.strip())
    except ValueError as exc:
        raise AuthoringError("Invalid correct choice index.") from exc
    if not 1 <= number <= choice_count:
        raise AuthoringError("Invalid correct choice index.")
    return MultipleChoiceQuestion(text, tuple(choices), number - 1)


def author_open_ended(
    read_line: ReadLine, prompt: Prompt
) -> OpenEndedQuestion:
    text = _ask(read_line, prompt, "Enter the question:")
    answer = _ask(read_line, prompt, "Enter the correct answer:")
    return OpenEndedQuestion(text, answer)


def author_true_false(
    read_line: ReadLine, prompt: Prompt
) -> TrueFalseQuestion:
    text = _ask(read_line, prompt, "Enter the question:")
    raw = _ask(read_line, prompt, "Enter the correct answer (true/false):")
    answer = parse_bool(raw)
    if answer is None:
        raise AuthoringError("Invalid input. Please enter true or false.")
    return TrueFalseQuestion(text, answer)


def _ask(read_line: ReadLine, prompt: Prompt, message: str) -> str:
    prompt(message)
    return read_line()
