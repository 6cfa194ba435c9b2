"""Fleet construction and status helpers."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from seabattle.game.core.board import Board
from seabattle.game.core.errors import PlacementExhausted
from seabattle.game.core.models import DEFAULT_FLEET, Fleet

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 1000


@dataclass(frozen=True, slots=True)
class ShipStatus:
    """Read-only row of a fleet status panel."""

    name: str
    size: int
    hits: int
    sunk: bool


def place_fleet_randomly(
    board: Board,
    fleet: Fleet,
    rng: random.Random,
    *,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> None:
    """Place the standard fleet at random non-overlapping positions.

    Ships go down in fixed order. Each ship gets at most `max_attempts` random
    bow/orientation samples; running out raises `PlacementExhausted`.
    """
    for name, size in DEFAULT_FLEET:
        for _ in range(max_attempts):
            horizontal = rng.random() < 0.5
            row = rng.randrange(board.size)
            col = rng.randrange(board.size)
            if board.can_place(row, col, size, horizontal):
                board.place_ship(row, col, size, horizontal, fleet, name)
                break
        else:
            logger.error("fleet_placement_exhausted ship=%s attempts=%d", name, max_attempts)
            raise PlacementExhausted(name, max_attempts)


def random_fleet(rng: random.Random) -> tuple[Board, Fleet]:
    """Create a fresh board with a randomly placed standard fleet."""
    board = Board()
    fleet = Fleet()
    place_fleet_randomly(board, fleet, rng)
    return board, fleet


def is_fleet_destroyed(fleet: Fleet) -> bool:
    """Return whether every ship is sunk (true for an empty fleet)."""
    return all(ship.sunk for ship in fleet)


def ships_remaining(fleet: Fleet) -> int:
    return sum(1 for ship in fleet if not ship.sunk)


def fleet_status(fleet: Fleet) -> list[ShipStatus]:
    """Return per-ship damage rows in placement order."""
    return [ShipStatus(ship.name, ship.size, ship.hits, ship.sunk) for ship in fleet]
