"""Process-level setup shared by every presentation adapter."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from seabattle.game.app.battle import BattleController
from seabattle.game.infra.config import GameSettings, load_default_env_files, load_settings
from seabattle.game.infra.logging import setup_logging
from seabattle.runtime.scheduler import Scheduler

logger = logging.getLogger(__name__)


def bootstrap(*, env_paths: Sequence[str] | None = None) -> GameSettings:
    """Load env files, configure logging and return game settings."""
    load_default_env_files(paths=env_paths)
    setup_logging()
    settings = load_settings()
    logger.info(
        "settings skill=%s ai_delay_seconds=%.2f seed=%s",
        settings.skill.value,
        settings.ai_delay_seconds,
        settings.seed,
    )
    return settings


def create_controller(
    settings: GameSettings, *, scheduler: Scheduler | None = None
) -> BattleController:
    """Build a battle controller for a host that drives `scheduler` from its loop."""
    return BattleController.from_settings(settings, scheduler=scheduler)
