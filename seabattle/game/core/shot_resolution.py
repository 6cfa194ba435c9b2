"""Shot outcome evaluation (miss/hit/sunk/repeat)."""

from __future__ import annotations

from seabattle.game.core.board import Board
from seabattle.game.core.models import Coord, Fleet, ShotOutcome


def apply_shot(board: Board, row: int, col: int, fleet: Fleet) -> ShotOutcome:
    """Resolve a shot at (row, col) against a board and its fleet."""
    return board.apply_shot(row, col, fleet)


def resolve_shot(board: Board, fleet: Fleet, coord: Coord) -> ShotOutcome:
    """Coord-based variant of `apply_shot`."""
    return board.apply_shot(coord.row, coord.col, fleet)
