"""Computer targeting strategies."""

from seabattle.game.ai.hunt_target import (
    HuntTargetAI,
    SkillTier,
    TargetingState,
    TargetMode,
    build_ai_strategy,
    init_targeting,
    next_shot,
    record_outcome,
)
from seabattle.game.ai.strategy import AIStrategy

__all__ = [
    "AIStrategy",
    "HuntTargetAI",
    "SkillTier",
    "TargetMode",
    "TargetingState",
    "build_ai_strategy",
    "init_targeting",
    "next_shot",
    "record_outcome",
]
