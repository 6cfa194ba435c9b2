from __future__ import annotations

import random

import numpy as np
import pytest

from seabattle.game.ai.strategy import AIStrategy
from seabattle.game.core.board import NO_SHIP, Board
from seabattle.game.core.models import Coord, ShotOutcome
from seabattle.game.core.rules import GameSession, create_session, place_player_ship, start_battle

# Bows of the standard fleet, one ship per even row.
PLAYER_LAYOUT: tuple[Coord, ...] = (Coord(0, 0), Coord(2, 0), Coord(4, 0), Coord(6, 0), Coord(8, 0))


class ScriptedAI(AIStrategy):
    """Fires at a fixed list of cells, then reports exhaustion."""

    def __init__(self, shots: list[Coord]) -> None:
        self._shots = list(shots)
        self.results: list[tuple[Coord, ShotOutcome]] = []

    def choose_shot(self, board: Board) -> Coord | None:
        if not self._shots:
            return None
        return self._shots.pop(0)

    def notify_result(self, coord: Coord, outcome: ShotOutcome) -> None:
        self.results.append((coord, outcome))


class FixedCoinRandom(random.Random):
    """Random source whose `random()` always returns `coin`."""

    coin = 0.0

    def random(self) -> float:
        return self.coin

    # Keeps shuffle/randrange on the real bit generator instead of `random()`.
    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


def water_cell(board: Board) -> Coord:
    row, col = np.argwhere(board.ships == NO_SHIP)[0]
    return Coord(int(row), int(col))


def place_layout(session: GameSession) -> None:
    for bow in PLAYER_LAYOUT:
        assert place_player_ship(session, bow, horizontal=True) is not None


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def battle_session(seeded_rng: random.Random) -> GameSession:
    session = create_session("hard", seeded_rng)
    place_layout(session)
    assert start_battle(session)
    return session
