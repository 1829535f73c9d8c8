"""Configuration loader for the quiz manager console."""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from quiz_manager.core import config as core_config
from quiz_manager.core import workspace as workspace_mod

CONFIG_FILENAME = "quiz_manager.toml"
CONFIG_ENV = "QUIZ_MANAGER_CONFIG"
ENV_PREFIX = "QUIZ_MANAGER_"
TEMPLATE_RESOURCE = "template.toml"

_DEFAULT_CHOICE_COUNT = 4
_MIN_CHOICE_COUNT = 2
_DEFAULT_ACCUMULATE = False
_DEFAULT_LOG_LEVEL = "INFO"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


class QuizConfigError(RuntimeError):
    """Raised when configuration parsing or validation fails."""


@dataclass(frozen=True)
class QuizConfig:
    """Fully resolved settings for one console run."""

    choice_count: int
    accumulate_answers: bool
    log_level: str


@dataclass(frozen=True)
class ConfigOverrides:
    """CLI-sourced overrides applied on top of env and file values."""

    choice_count: Optional[int] = None
    accumulate_answers: Optional[bool] = None
    log_level: Optional[str] = None


@dataclass(frozen=True)
class LoadResult:
    """Resolved config plus the workspace it was loaded from."""

    config: QuizConfig
    layout: workspace_mod.WorkspaceLayout
    config_path: Optional[Path]


def load_config(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[ConfigOverrides] = None,
    env: Optional[Mapping[str, str]] = None,
    workspace_path: Optional[Path] = None,
) -> LoadResult:
    """Load configuration applying precedence CLI > env > TOML > defaults.

    A missing default config file is fine; a missing file that was asked for
    explicitly (``--config`` or ``QUIZ_MANAGER_CONFIG``) is an error.
    """

    overrides = overrides or ConfigOverrides()
    env_map = os.environ if env is None else env

    try:
        layout = workspace_mod.ensure_workspace(
            env=env_map, path=workspace_path
        )
    except workspace_mod.WorkspaceError as exc:
        raise QuizConfigError(str(exc)) from exc

    default_path = layout.path_for("config") / CONFIG_FILENAME
    requested = _resolve_config_path(config_path, env_map, default_path)

    table = _default_table()
    loaded_path: Optional[Path] = None
    if requested.is_file():
        try:
            core_config.merge_defaults(table, core_config.load_toml(requested))
        except core_config.TomlConfigError as exc:
            raise QuizConfigError(str(exc)) from exc
        loaded_path = requested
    elif requested.exists():
        raise QuizConfigError(f"Config path is not a file: {requested}")
    elif requested != default_path:
        raise QuizConfigError(f"Config file not found: {requested}")

    choice_count = _validate_choice_count(
        _pick_first(
            overrides.choice_count,
            _env_int(env_map, "CHOICE_COUNT"),
            table["authoring"]["choice_count"],
        )
    )
    accumulate = _pick_first(
        overrides.accumulate_answers,
        _env_bool(env_map, "ACCUMULATE_ANSWERS"),
        table["session"]["accumulate_answers"],
    )
    if not isinstance(accumulate, bool):
        raise QuizConfigError("session.accumulate_answers must be a boolean.")
    log_level = _validate_log_level(
        _pick_first(
            overrides.log_level,
            _env_string(env_map, "LOG_LEVEL"),
            table["logging"]["level"],
        )
    )

    config = QuizConfig(
        choice_count=choice_count,
        accumulate_answers=accumulate,
        log_level=log_level,
    )
    return LoadResult(config=config, layout=layout, config_path=loaded_path)


def read_template() -> str:
    """Return the packaged default config template."""

    resource = resources.files("quiz_manager").joinpath(TEMPLATE_RESOURCE)
    return resource.read_text(encoding="utf-8")


def write_default_config(path: Path, *, overwrite: bool = False) -> Path:
    try:
        return core_config.write_toml_template(
            path, template=read_template(), overwrite=overwrite
        )
    except core_config.TomlConfigError as exc:
        raise QuizConfigError(str(exc)) from exc


def _default_table() -> MutableMapping[str, MutableMapping[str, object]]:
    return {
        "authoring": {"choice_count": _DEFAULT_CHOICE_COUNT},
        "session": {"accumulate_answers": _DEFAULT_ACCUMULATE},
        "logging": {"level": _DEFAULT_LOG_LEVEL},
    }


def _resolve_config_path(
    config_path: Optional[Path],
    env_map: Mapping[str, str],
    default_path: Path,
) -> Path:
    if config_path is not None:
        return config_path.expanduser()
    candidate = (env_map.get(CONFIG_ENV) or "").strip()
    if candidate:
        return Path(candidate).expanduser()
    return default_path


def _validate_choice_count(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise QuizConfigError("authoring.choice_count must be an integer.")
    if value < _MIN_CHOICE_COUNT:
        raise QuizConfigError(
            f"authoring.choice_count must be at least {_MIN_CHOICE_COUNT}."
        )
    return value


def _validate_log_level(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise QuizConfigError("logging.level must be a non-empty string.")
    return value.strip().upper()


def _env_string(env_map: Mapping[str, str], key: str) -> Optional[str]:
    raw = env_map.get(f"{ENV_PREFIX}{key}")
    if raw is None:
        return None
    return raw.strip() or None


def _env_int(env_map: Mapping[str, str], key: str) -> Optional[int]:
    raw = _env_string(env_map, key)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise QuizConfigError(
            f"{ENV_PREFIX}{key} must be an integer, got '{raw}'."
        ) from exc


def _env_bool(env_map: Mapping[str, str], key: str) -> Optional[bool]:
    raw = _env_string(env_map, key)
    if raw is None:
        return None
    lowered = raw.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise QuizConfigError(
        f"{ENV_PREFIX}{key} must be a boolean, got '{raw}'."
    )


def _pick_first(*candidates: object) -> object:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None
