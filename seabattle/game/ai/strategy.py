"""AI strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from seabattle.game.core.board import Board
from seabattle.game.core.models import Coord, ShotOutcome


class AIStrategy(ABC):
    """Contract for anything that picks shots against an opposing board."""

    @abstractmethod
    def choose_shot(self, board: Board) -> Coord | None:
        """Return next coordinate to fire, or None when nothing is left."""

    @abstractmethod
    def notify_result(self, coord: Coord, outcome: ShotOutcome) -> None:
        """Update strategy state with shot result."""
