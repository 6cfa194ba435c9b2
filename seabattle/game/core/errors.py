"""Game engine error kinds."""

from __future__ import annotations


class SeaBattleError(Exception):
    """Base class for engine errors."""


class PlacementExhausted(SeaBattleError, RuntimeError):
    """Random fleet placement ran out of attempts for a ship."""

    def __init__(self, ship_name: str, attempts: int) -> None:
        super().__init__(f"Could not place ship {ship_name} after {attempts} attempts")
        self.ship_name = ship_name
        self.attempts = attempts


class InvalidCoordinate(SeaBattleError, ValueError):
    """A row/col pair lies outside the board."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"Coordinate ({row}, {col}) is outside the {size}x{size} board")
        self.row = row
        self.col = col


class InvalidPlacement(SeaBattleError, ValueError):
    """A ship run leaves the board or overlaps another ship."""
