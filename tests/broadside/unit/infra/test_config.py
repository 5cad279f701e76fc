from __future__ import annotations

import os

from broadside.game.core.models import Difficulty
from broadside.game.infra.config import (
    DEFAULT_AI_REPLY_DELAY_SECONDS,
    GameSettings,
    load_default_env_files,
    load_env_file,
    load_settings,
)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\nB='two'\n#comment\nINVALID\nC=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("C", "already")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)
    load_env_file(str(env_file))
    assert os.environ.get("A") == "1"
    assert os.environ.get("B") == "two"
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("C") == "already"


def test_load_env_file_missing_is_noop(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("BROADSIDE_SEED", raising=False)
    load_env_file(str(tmp_path / ".env.missing"))
    assert os.environ.get("BROADSIDE_SEED") is None


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    app_env = tmp_path / ".env.app"
    app_local_env = tmp_path / ".env.app.local"
    app_env.write_text("A=app\nB=app\n", encoding="utf-8")
    app_local_env.write_text("B=app_local\n", encoding="utf-8")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)

    load_default_env_files(paths=(str(app_env), str(app_local_env)))
    assert os.environ.get("A") == "app"
    assert os.environ.get("B") == "app_local"


def test_load_settings_defaults(monkeypatch) -> None:
    for name in ("BROADSIDE_DIFFICULTY", "BROADSIDE_AI_DELAY_SECONDS", "BROADSIDE_SEED"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == GameSettings()
    assert GameSettings().ai_reply_delay_seconds == DEFAULT_AI_REPLY_DELAY_SECONDS


def test_load_settings_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("BROADSIDE_DIFFICULTY", "Easy")
    monkeypatch.setenv("BROADSIDE_AI_DELAY_SECONDS", "0.1")
    monkeypatch.setenv("BROADSIDE_SEED", "42")
    settings = load_settings()
    assert settings.difficulty is Difficulty.EASY
    assert settings.ai_reply_delay_seconds == 0.1
    assert settings.seed == 42


def test_load_settings_falls_back_on_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("BROADSIDE_DIFFICULTY", "nightmare")
    monkeypatch.setenv("BROADSIDE_AI_DELAY_SECONDS", "soon")
    monkeypatch.setenv("BROADSIDE_SEED", "abc")
    settings = load_settings()
    assert settings.difficulty is Difficulty.NORMAL
    assert settings.ai_reply_delay_seconds == DEFAULT_AI_REPLY_DELAY_SECONDS
    assert settings.seed is None


def test_negative_delay_is_clamped(monkeypatch) -> None:
    monkeypatch.setenv("BROADSIDE_AI_DELAY_SECONDS", "-2")
    assert load_settings().ai_reply_delay_seconds == 0.0
