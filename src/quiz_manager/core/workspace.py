"""Per-user workspace holding the quiz manager config and logs."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

WORKSPACE_ENV = "QUIZ_MANAGER_HOME"
DEFAULT_WORKSPACE = Path.home() / ".quiz-manager"

_SUBDIRS = ("config", "logs")


class WorkspaceError(RuntimeError):
    """Raised when the workspace directories cannot be prepared."""


@dataclass(frozen=True)
class WorkspaceLayout:
    """Resolved workspace root and its subdirectories."""

    home: Path
    directories: Mapping[str, Path]

    def path_for(self, key: str) -> Path:
        try:
            return self.directories[key]
        except KeyError as exc:
            raise KeyError(f"Unknown workspace directory '{key}'.") from exc


def ensure_workspace(
    *,
    env: Mapping[str, str] | None = None,
    path: Path | None = None,
) -> WorkspaceLayout:
    """Create (if needed) and return the workspace layout.

    An explicit ``path`` or ``QUIZ_MANAGER_HOME`` is used as-is; the default
    home location falls back to the temp directory when it is not writable.
    """

    env_map = os.environ if env is None else env
    base, explicit = _resolve_base(env_map, path)

    candidates = [base]
    if not explicit:
        candidates.append(Path(tempfile.gettempdir()) / "quiz-manager")

    last_error: Exception | None = None
    for candidate in candidates:
        try:
            return _materialize(candidate)
        except PermissionError as exc:
            last_error = exc
    message = f"Unable to prepare workspace at {base}"
    raise WorkspaceError(message) from last_error


def _resolve_base(
    env: Mapping[str, str], override: Path | None
) -> tuple[Path, bool]:
    if override is not None:
        return override.expanduser().resolve(), True
    custom = (env.get(WORKSPACE_ENV) or "").strip()
    if custom:
        return Path(custom).expanduser().resolve(), True
    return DEFAULT_WORKSPACE, False


def _materialize(base: Path) -> WorkspaceLayout:
    if base.exists() and not base.is_dir():
        raise WorkspaceError(
            f"Configured workspace exists and is not a directory: {base}"
        )
    directories: dict[str, Path] = {}
    for name in _SUBDIRS:
        target = base / name
        if target.exists() and not target.is_dir():
            raise WorkspaceError(
                f"Expected workspace directory for '{name}' but found a "
                f"file: {target}"
            )
        target.mkdir(parents=True, exist_ok=True)
        directories[name] = target
    return WorkspaceLayout(
        home=base,
        directories=MappingProxyType(directories),
    )
