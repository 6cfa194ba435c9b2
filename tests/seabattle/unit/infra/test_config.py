from __future__ import annotations

import os

from seabattle.game.ai.hunt_target import SkillTier
from seabattle.game.infra.config import (
    DEFAULT_AI_DELAY_SECONDS,
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
    monkeypatch.setenv("A", "")
    monkeypatch.setenv("B", "")
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
    monkeypatch.delenv("SEABATTLE_SKILL", raising=False)
    load_env_file(str(tmp_path / ".env.missing"))
    assert "SEABATTLE_SKILL" not in os.environ


def test_load_default_env_files_local_wins(tmp_path, monkeypatch) -> None:
    base = tmp_path / ".env"
    local = tmp_path / ".env.local"
    base.write_text("SEABATTLE_SKILL=easy\nSEABATTLE_SEED=1\n", encoding="utf-8")
    local.write_text('SEABATTLE_SKILL="hard"\n', encoding="utf-8")
    monkeypatch.setenv("SEABATTLE_SKILL", "")
    monkeypatch.setenv("SEABATTLE_SEED", "")

    load_default_env_files(paths=(str(base), str(local)))
    assert os.environ.get("SEABATTLE_SKILL") == "hard"
    assert os.environ.get("SEABATTLE_SEED") == "1"


def test_load_settings_defaults(monkeypatch) -> None:
    for name in ("SEABATTLE_SKILL", "SEABATTLE_AI_DELAY_SECONDS", "SEABATTLE_SEED"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == GameSettings()
    assert load_settings().ai_delay_seconds == DEFAULT_AI_DELAY_SECONDS


def test_load_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SEABATTLE_SKILL", " Hard ")
    monkeypatch.setenv("SEABATTLE_AI_DELAY_SECONDS", "0")
    monkeypatch.setenv("SEABATTLE_SEED", "42")
    settings = load_settings()
    assert settings.skill is SkillTier.HARD
    assert settings.ai_delay_seconds == 0.0
    assert settings.seed == 42


def test_load_settings_falls_back_on_invalid_values(monkeypatch, caplog) -> None:
    monkeypatch.setenv("SEABATTLE_SKILL", "godlike")
    monkeypatch.setenv("SEABATTLE_AI_DELAY_SECONDS", "soon")
    monkeypatch.setenv("SEABATTLE_SEED", "abc")
    with caplog.at_level("WARNING"):
        settings = load_settings()
    assert settings == GameSettings()
    assert caplog.text.count("config_invalid") == 3


def test_negative_delay_is_clamped(monkeypatch) -> None:
    monkeypatch.setenv("SEABATTLE_AI_DELAY_SECONDS", "-2")
    assert load_settings().ai_delay_seconds == 0.0
