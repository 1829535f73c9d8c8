"""CLI entry point for the interactive quiz manager."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from quiz_manager.core import workspace as workspace_mod
from quiz_manager.core.logging import configure_logger
from quiz_manager.core.workspace import WorkspaceError

from .config import (
    CONFIG_FILENAME,
    ConfigOverrides,
    QuizConfigError,
    load_config,
    write_default_config,
)
from .game import QuizSession, QuizShell

LOGGER_NAME = "quiz_manager"


def _package_version() -> str:
    try:
        return metadata.version("quiz-manager")
    except metadata.PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-manager",
        description=(
            "Author multiple-choice, open-ended and true/false questions, "
            "then play the quiz and review the correct answers."
        ),
        epilog=(
            "Run `quiz-manager config init` to scaffold the default "
            f"{CONFIG_FILENAME} template."
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=(
            "Path to a TOML config file (defaults to the workspace config "
            "directory)."
        ),
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        help=(
            "Override the workspace root holding config and logs (defaults "
            "to QUIZ_MANAGER_HOME or ~/.quiz-manager)."
        ),
    )
    parser.add_argument(
        "--choices",
        type=int,
        dest="choice_count",
        help="Number of choices prompted per multiple-choice question.",
    )
    parser.add_argument(
        "--accumulate-answers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=(
            "Keep recorded answers across play-throughs "
            "(--no-accumulate-answers turns a config file setting off)."
        ),
    )
    parser.add_argument(
        "--log-level",
        help="Set the logging level for the run (defaults to INFO).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Mirror log output to stderr.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args_list = list(argv) if argv is not None else list(sys.argv[1:])

    if args_list[:1] == ["config"]:
        return _handle_config(args_list[1:])

    parser = _build_parser()
    args = parser.parse_args(args_list)

    overrides = ConfigOverrides(
        choice_count=args.choice_count,
        accumulate_answers=args.accumulate_answers,
        log_level=args.log_level,
    )
    try:
        load_result = load_config(
            config_path=args.config,
            overrides=overrides,
            workspace_path=args.workspace,
        )
    except QuizConfigError as exc:
        parser.error(str(exc))

    config = load_result.config
    logger, log_path = configure_logger(
        LOGGER_NAME,
        log_dir=load_result.layout.path_for("logs"),
        level=config.log_level,
        verbose=args.verbose,
    )
    logger.info(
        "quiz-manager started",
        extra={
            "config_path": load_result.config_path,
            "choice_count": config.choice_count,
            "accumulate_answers": config.accumulate_answers,
        },
    )

    console = Console()
    session = QuizSession(accumulate_answers=config.accumulate_answers)
    shell = QuizShell(
        session,
        console,
        lambda: console.input("> "),
        choice_count=config.choice_count,
    )
    code = shell.run()
    logger.info("quiz-manager exited", extra={"log_path": log_path})
    return code


def _build_config_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-manager config",
        description="Manage the quiz-manager configuration file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser(
        "init",
        help=f"Write the default {CONFIG_FILENAME} template.",
    )
    init_parser.add_argument(
        "--path",
        type=Path,
        help=(
            "Destination for the config TOML (defaults to the workspace "
            "config directory)."
        ),
    )
    init_parser.add_argument(
        "--workspace",
        type=Path,
        help="Workspace root used to resolve the default config path.",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the destination if a config already exists.",
    )
    return parser


def _handle_config(argv: Sequence[str]) -> int:
    args = _build_config_parser().parse_args(list(argv))

    try:
        target = _resolve_config_target(args)
    except WorkspaceError as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1

    try:
        written = write_default_config(target, overwrite=args.force)
    except QuizConfigError as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1

    sys.stdout.write(f"Wrote quiz-manager config to {written}\n")
    return 0


def _resolve_config_target(args: argparse.Namespace) -> Path:
    if args.path is not None:
        candidate = args.path.expanduser()
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate

    layout = workspace_mod.ensure_workspace(path=args.workspace)
    return layout.path_for("config") / CONFIG_FILENAME


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
