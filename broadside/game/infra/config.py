"""Application configuration and env loading."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from broadside.game.core.models import Difficulty

logger = logging.getLogger(__name__)

DEFAULT_AI_REPLY_DELAY_SECONDS = 0.5


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Immutable session settings sourced from environment."""

    difficulty: Difficulty = Difficulty.NORMAL
    ai_reply_delay_seconds: float = DEFAULT_AI_REPLY_DELAY_SECONDS
    seed: int | None = None


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order:
    1) appdata/config/.env.app
    2) appdata/config/.env.app.local
    3) .env
    4) .env.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_settings() -> GameSettings:
    """Build session settings from ``BROADSIDE_*`` env vars."""
    return GameSettings(
        difficulty=_difficulty("BROADSIDE_DIFFICULTY", Difficulty.NORMAL),
        ai_reply_delay_seconds=max(
            0.0, _float("BROADSIDE_AI_DELAY_SECONDS", DEFAULT_AI_REPLY_DELAY_SECONDS)
        ),
        seed=_optional_int("BROADSIDE_SEED"),
    )


def _difficulty(name: str, default: Difficulty) -> Difficulty:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return Difficulty(raw.strip().lower())
    except ValueError:
        logger.warning("config_invalid name=%s value=%s default=%s", name, raw, default)
        return default


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("config_invalid name=%s value=%s default=%s", name, raw, default)
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("config_invalid name=%s value=%s", name, raw)
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
