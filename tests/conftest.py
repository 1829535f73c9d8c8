from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest
from rich.console import Console

TESTS_DIR = Path(__file__).resolve().parent
SRC = TESTS_DIR.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def console() -> Console:
    """Recording console for asserting rendered output."""

    return Console(record=True, width=100, force_terminal=True)


@pytest.fixture(autouse=True)
def _isolate_workspace(tmp_path, monkeypatch) -> Iterator[None]:
    monkeypatch.setenv("QUIZ_MANAGER_HOME", str(tmp_path / "quiz-home"))
    for key in (
        "QUIZ_MANAGER_CONFIG",
        "QUIZ_MANAGER_CHOICE_COUNT",
        "QUIZ_MANAGER_ACCUMULATE_ANSWERS",
        "QUIZ_MANAGER_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    yield
    logger = logging.getLogger("quiz_manager")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
