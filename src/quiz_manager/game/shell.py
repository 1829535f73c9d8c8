"""Numbered-menu console loop driving a :class:`QuizSession`."""

from __future__ import annotations

import logging
from typing import Callable

from rich.console import Console
from rich.panel import Panel

from . import view
from .authoring import (
    DEFAULT_CHOICE_COUNT,
    AuthoringError,
    author_question,
    kind_menu,
    parse_kind,
    parse_position,
)
from .questions import Question
from .session import InputProvider, QuizSession

logger = logging.getLogger(__name__)

EXIT_OPTION = "7"

# StopIteration covers scripted providers running dry in tests.
_INTERRUPTS = (EOFError, KeyboardInterrupt, StopIteration)


class QuizShell:
    """Read menu choices and dispatch them until the user exits."""

    def __init__(
        self,
        session: QuizSession,
        console: Console,
        input_provider: InputProvider,
        *,
        choice_count: int = DEFAULT_CHOICE_COUNT,
    ) -> None:
        self.session = session
        self.console = console
        self._read = input_provider
        self.choice_count = choice_count
        self._handlers: dict[str, Callable[[], None]] = {
            "1": self.add_question,
            "2": self.delete_question,
            "3": self.edit_question,
            "4": self.play,
            "5": self.show_correct_answers,
            "6": self.list_questions,
        }

    def run(self) -> int:
        while True:
            view.render_menu(self.console)
            try:
                choice = self._read().strip()
            except _INTERRUPTS:
                self.console.print("\n[bold yellow]Goodbye.[/]")
                return 0
            if choice == EXIT_OPTION:
                logger.debug("Exit requested")
                return 0
            handler = self._handlers.get(choice)
            if handler is None:
                self._error("Invalid option. Please try again.")
                continue
            try:
                handler()
            except _INTERRUPTS:
                logger.info("Action interrupted", extra={"option": choice})
                self.console.print("\n[bold yellow]Cancelled.[/]")

    def _prompt(self, message: str) -> None:
        self.console.print(message)

    def _error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")

    def _author(self) -> Question:
        view.render_kind_menu(self.console, kind_menu())
        kind = parse_kind(self._read())
        return author_question(
            kind,
            self._read,
            self._prompt,
            choice_count=self.choice_count,
        )

    def add_question(self) -> None:
        try:
            question = self._author()
        except AuthoringError as exc:
            self._error(str(exc))
            return
        self.session.add(question)
        self.console.print("[green]Question added successfully.[/green]")

    def delete_question(self) -> None:
        self._prompt("Enter the number of the question to delete:")
        try:
            index = parse_position(self._read())
        except AuthoringError as exc:
            self._error(str(exc))
            return
        if self.session.delete(index):
            self.console.print("[green]Question deleted successfully.[/green]")
        else:
            self._error(f"No question at position {index + 1}.")

    def edit_question(self) -> None:
        self._prompt("Enter the number of the question to edit:")
        try:
            index = parse_position(self._read())
        except AuthoringError as exc:
            self._error(str(exc))
            return
        if self.session.store.get(index) is None:
            self._error(f"No question at position {index + 1}.")
            return
        try:
            question = self._author()
        except AuthoringError as exc:
            self._error(str(exc))
            return
        self.session.replace(index, question)
        self.console.print("[green]Question edited successfully.[/green]")

    def play(self) -> None:
        total = len(self.session.store)
        if not total:
            self.console.print(
                Panel(
                    "Question bank is empty.",
                    title="Quiz",
                    border_style="yellow",
                )
            )
            return
        result = self.session.play(
            self._read,
            on_question=lambda position, question: view.render_question(
                self.console, position, total, question
            ),
        )
        view.render_play_result(self.console, result)

    def show_correct_answers(self) -> None:
        view.render_correct_answers(
            self.console, self.session.correct_answers()
        )

    def list_questions(self) -> None:
        view.render_question_list(self.console, self.session.store)
