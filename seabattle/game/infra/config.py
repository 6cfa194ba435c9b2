"""Application configuration and env loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from seabattle.game.ai.hunt_target import SkillTier

logger = logging.getLogger(__name__)

DEFAULT_AI_DELAY_SECONDS = 0.5


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Runtime-tunable knobs; board size and fleet are fixed constants."""

    skill: SkillTier = SkillTier.NORMAL
    ai_delay_seconds: float = DEFAULT_AI_DELAY_SECONDS
    seed: int | None = None


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
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
    """Load `.env` then `.env.local`; later files win."""
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_settings() -> GameSettings:
    """Build settings from SEABATTLE_* environment variables."""
    return GameSettings(
        skill=_skill("SEABATTLE_SKILL", SkillTier.NORMAL),
        ai_delay_seconds=max(0.0, _float("SEABATTLE_AI_DELAY_SECONDS", DEFAULT_AI_DELAY_SECONDS)),
        seed=_optional_int("SEABATTLE_SEED"),
    )


def _skill(name: str, default: SkillTier) -> SkillTier:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    try:
        return SkillTier(raw)
    except ValueError:
        logger.warning("config_invalid name=%s value=%r using=%s", name, raw, default.value)
        return default


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("config_invalid name=%s value=%r using=%s", name, raw, default)
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("config_invalid name=%s value=%r using=None", name, raw)
        return None
