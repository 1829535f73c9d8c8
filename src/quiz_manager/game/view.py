"""Rich rendering for the quiz manager console."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .questions import MultipleChoiceQuestion, Question, QuestionKind
from .review import ReviewEntry
from .session import PlayResult
from .store import QuestionStore

MENU_OPTIONS: tuple[tuple[str, str], ...] = (
    ("1", "Add a new question"),
    ("2", "Delete a question"),
    ("3", "Edit a question"),
    ("4", "Play the quiz"),
    ("5", "Show correct answers"),
    ("6", "List questions"),
    ("7", "Exit"),
)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_elapsed(elapsed: timedelta) -> str:
    """Format as whole minutes and remaining whole seconds."""

    total = max(int(elapsed.total_seconds()), 0)
    minutes, seconds = divmod(total, 60)
    return f"{_plural(minutes, 'minute')} {_plural(seconds, 'second')}"


def render_menu(console: Console) -> None:
    console.print()
    console.print(Text("Select an option:", style="bold"))
    for key, label in MENU_OPTIONS:
        console.print(f"  [cyan]{key}[/]. {label}")


def render_kind_menu(
    console: Console, options: Sequence[tuple[str, QuestionKind]]
) -> None:
    console.print(Text("Select the type of question:", style="bold"))
    for key, kind in options:
        console.print(f"  [cyan]{key}[/]. {kind.label}")


def render_question(
    console: Console, position: int, total: int, question: Question
) -> None:
    header = Text.assemble(
        (f"Question {position + 1}", "bold cyan"),
        (f" / {total}", "dim"),
    )
    console.print()
    console.rule(header)
    console.print(
        Text.assemble(
            (f"[{question.kind.label}] ", "magenta"),
            (question.text, "bold"),
        )
    )
    if isinstance(question, MultipleChoiceQuestion):
        table = Table(show_header=False, box=box.SIMPLE, expand=True)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Choice")
        for number, choice in enumerate(question.choices, start=1):
            table.add_row(str(number), Text(choice))
        console.print(table)
        console.print(Text("Type the text of your choice.", style="dim"))
    elif question.kind is QuestionKind.TRUE_FALSE:
        console.print(Text("Answer true or false.", style="dim"))


def render_play_result(console: Console, result: PlayResult) -> None:
    console.print()
    console.rule(Text("Quiz Summary", style="bold magenta"))
    console.print(f"Your score: {result.score}/{result.total}")
    console.print(f"Time taken: {format_elapsed(result.elapsed)}")
    if not result.responses:
        return
    table = Table(title="Responses", box=box.SIMPLE, expand=True)
    table.add_column("#", justify="right")
    table.add_column("Question", overflow="fold")
    table.add_column("Your answer")
    table.add_column("Correct answer")
    table.add_column("Result", justify="center")
    for response in result.responses:
        outcome = (
            Text("correct", style="green")
            if response.is_correct
            else Text("wrong", style="red")
        )
        table.add_row(
            str(response.position + 1),
            Text(response.text),
            Text(response.given or "-"),
            Text(response.correct_answer),
            outcome,
        )
    console.print(table)


def render_correct_answers(
    console: Console, entries: Sequence[ReviewEntry]
) -> None:
    if not entries:
        console.print(
            Panel(
                "No recorded answers yet. Play the quiz first.",
                title="Correct Answers",
                border_style="yellow",
            )
        )
        return
    table = Table(title="Correct Answers", box=box.SIMPLE, expand=True)
    table.add_column("#", justify="right")
    table.add_column("Question", overflow="fold")
    table.add_column("Type")
    table.add_column("Answer")
    for number, entry in enumerate(entries, start=1):
        table.add_row(
            str(number), Text(entry.text), entry.kind, Text(entry.answer)
        )
    console.print(table)


def render_question_list(console: Console, store: QuestionStore) -> None:
    if not len(store):
        console.print(
            Panel(
                "Question bank is empty.",
                title="Questions",
                border_style="yellow",
            )
        )
        return
    table = Table(title="Questions", box=box.SIMPLE, expand=True)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Type")
    table.add_column("Question", overflow="fold")
    for number, question in enumerate(store, start=1):
        table.add_row(str(number), question.kind.label, Text(question.text))
    console.print(table)
