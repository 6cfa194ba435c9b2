"""Hunt/target AI with skill tiers.

The engine keeps two sources of shots:

* a candidate pool of every coordinate, shuffled once per game and consumed
  from the end like a stack;
* a FIFO hunt queue seeded with the orthogonal neighbours of every hit that
  did not sink a ship.

A coordinate moved into the hunt queue is dropped from the pool, so no cell
is ever counted by both sources. Removal from the pool is lazy: a membership
bitmap is cleared and stale stack entries are skipped when popped.

The skill tier decides how often a pending hunt target wins over the pool:
never (easy), on a coin flip (normal) or always (hard).
"""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import StrEnum

import numpy as np

from seabattle.game.ai.strategy import AIStrategy
from seabattle.game.core.board import Board, neighbors
from seabattle.game.core.models import BOARD_SIZE, Coord, ShotOutcome

logger = logging.getLogger(__name__)


class SkillTier(StrEnum):
    """AI difficulty."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def hunt_bias(self) -> float:
        return HUNT_BIAS[self]


HUNT_BIAS: dict[SkillTier, float] = {
    SkillTier.EASY: 0.0,
    SkillTier.NORMAL: 0.5,
    SkillTier.HARD: 1.0,
}


class TargetMode(StrEnum):
    """Targeting state machine states."""

    SEARCH = "SEARCH"
    HUNT = "HUNT"


@dataclass(slots=True)
class TargetingState:
    """Per-game AI targeting state."""

    skill: SkillTier
    rng: random.Random
    size: int = BOARD_SIZE
    candidate_pool: list[Coord] = field(default_factory=list)
    in_pool: np.ndarray = field(
        default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.bool_)
    )
    fired: np.ndarray = field(
        default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.bool_)
    )
    hunt_queue: deque[Coord] = field(default_factory=deque)
    queued: set[Coord] = field(default_factory=set)
    hunt_active: bool = False

    @property
    def mode(self) -> TargetMode:
        return TargetMode.HUNT if self.hunt_active else TargetMode.SEARCH

    @property
    def candidates_remaining(self) -> int:
        """Cells still reachable through the pool."""
        return int(np.count_nonzero(self.in_pool & ~self.fired))

    def pool_contains(self, coord: Coord) -> bool:
        return bool(self.in_pool[coord.row, coord.col])

    def reset(self) -> None:
        """Start over with a freshly shuffled pool and no hunt targets."""
        self.candidate_pool = [Coord(r, c) for r in range(self.size) for c in range(self.size)]
        self.rng.shuffle(self.candidate_pool)
        self.in_pool = np.ones((self.size, self.size), dtype=np.bool_)
        self.fired = np.zeros((self.size, self.size), dtype=np.bool_)
        self.hunt_queue.clear()
        self.queued.clear()
        self.hunt_active = False


def init_targeting(skill: SkillTier, rng: random.Random) -> TargetingState:
    """Create targeting state for a new game."""
    state = TargetingState(skill=SkillTier(skill), rng=rng)
    state.reset()
    return state


def next_shot(state: TargetingState, board: Board) -> Coord | None:
    """Pick the next coordinate to fire at `board`.

    Returns None once every cell has been fired upon.
    """
    bias = state.skill.hunt_bias
    if bias > 0.0 and state.hunt_active:
        if not state.hunt_queue:
            _end_hunt(state)
        elif bias >= 1.0 or state.rng.random() < bias:
            coord = _take_from_hunt_queue(state, board)
            if coord is not None:
                return coord

    coord = _take_from_pool(state, board)
    if coord is not None:
        return coord

    # Queued cells left the pool when enqueued; drain them before giving up.
    coord = _take_from_hunt_queue(state, board)
    if coord is None:
        logger.info("targeting_exhausted skill=%s", state.skill.value)
    return coord


def record_outcome(state: TargetingState, row: int, col: int, outcome: ShotOutcome) -> None:
    """Feed the result of a shot back into the targeting state."""
    state.fired[row, col] = True
    state.in_pool[row, col] = False
    if outcome.already_hit:
        return

    if outcome.hit and not outcome.sunk:
        if state.skill.hunt_bias <= 0.0:
            return
        for cell in neighbors(row, col, state.size):
            if state.fired[cell.row, cell.col] or cell in state.queued:
                continue
            state.hunt_queue.append(cell)
            state.queued.add(cell)
            state.in_pool[cell.row, cell.col] = False
        if not state.hunt_active:
            logger.debug("targeting_mode mode=HUNT origin=(%d, %d)", row, col)
        state.hunt_active = True
    elif not state.hunt_queue:
        _end_hunt(state)


def _take_from_hunt_queue(state: TargetingState, board: Board) -> Coord | None:
    while state.hunt_queue:
        coord = state.hunt_queue.popleft()
        state.queued.discard(coord)
        if _already_fired(state, board, coord):
            continue
        state.in_pool[coord.row, coord.col] = False
        return coord
    _end_hunt(state)
    return None


def _take_from_pool(state: TargetingState, board: Board) -> Coord | None:
    while state.candidate_pool:
        coord = state.candidate_pool.pop()
        if not state.in_pool[coord.row, coord.col]:
            continue
        state.in_pool[coord.row, coord.col] = False
        if _already_fired(state, board, coord):
            continue
        return coord
    return None


def _already_fired(state: TargetingState, board: Board, coord: Coord) -> bool:
    return bool(state.fired[coord.row, coord.col]) or board.was_shot(coord.row, coord.col)


def _end_hunt(state: TargetingState) -> None:
    if state.hunt_active:
        logger.debug("targeting_mode mode=SEARCH")
    state.hunt_queue.clear()
    state.queued.clear()
    state.hunt_active = False


class HuntTargetAI(AIStrategy):
    """Skill-tiered hunt/target AI."""

    def __init__(self, rng: random.Random, skill: SkillTier = SkillTier.NORMAL) -> None:
        self._state = init_targeting(skill, rng)

    @property
    def state(self) -> TargetingState:
        return self._state

    @property
    def skill(self) -> SkillTier:
        return self._state.skill

    def choose_shot(self, board: Board) -> Coord | None:
        return next_shot(self._state, board)

    def notify_result(self, coord: Coord, outcome: ShotOutcome) -> None:
        record_outcome(self._state, coord.row, coord.col, outcome)


def resolve_skill(value: str | SkillTier | None, default: SkillTier = SkillTier.NORMAL) -> SkillTier:
    """Map a free-form difficulty label onto a tier."""
    if isinstance(value, SkillTier):
        return value
    if value is None:
        return default
    normalized = value.strip().lower()
    aliases = {"lowest": SkillTier.EASY, "middle": SkillTier.NORMAL, "highest": SkillTier.HARD}
    if normalized in aliases:
        return aliases[normalized]
    try:
        return SkillTier(normalized)
    except ValueError:
        return default


def build_ai_strategy(skill: str | SkillTier | None, rng: random.Random) -> HuntTargetAI:
    """Construct AI strategy from selected difficulty."""
    return HuntTargetAI(rng, resolve_skill(skill))
