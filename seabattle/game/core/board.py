"""Board state representation and mutation helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from seabattle.game.core.errors import InvalidCoordinate, InvalidPlacement
from seabattle.game.core.models import (
    BOARD_SIZE,
    Coord,
    Fleet,
    Ship,
    ShotOutcome,
    Tile,
    cells_for_run,
    default_ship_name,
)

logger = logging.getLogger(__name__)

NO_SHIP = -1

_MISS = ShotOutcome(already_hit=False, hit=False, sunk=False, ship=None)
_REPEAT = ShotOutcome(already_hit=True, hit=False, sunk=False, ship=None)

# Up, down, left, right.
_DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(slots=True)
class Board:
    """Numpy-backed board state.

    `ships` holds the owning ship id per cell (`NO_SHIP` for water) and `shots`
    flags cells that have been fired upon. Ship records themselves live in the
    owning `Fleet`; the board only stores ids into it.
    """

    size: int = BOARD_SIZE
    ships: np.ndarray = field(
        default_factory=lambda: np.full((BOARD_SIZE, BOARD_SIZE), NO_SHIP, dtype=np.int16)
    )
    shots: np.ndarray = field(
        default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.bool_)
    )

    def __post_init__(self) -> None:
        if self.ships.shape != (self.size, self.size):
            self.ships = np.full((self.size, self.size), NO_SHIP, dtype=np.int16)
        if self.shots.shape != (self.size, self.size):
            self.shots = np.zeros((self.size, self.size), dtype=np.bool_)

    def in_bounds(self, row: int, col: int) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def require_in_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise InvalidCoordinate(row, col, self.size)

    def tile(self, row: int, col: int) -> Tile:
        """Return a snapshot of one cell."""
        self.require_in_bounds(row, col)
        ship_id = int(self.ships[row, col])
        return Tile(
            has_ship=ship_id != NO_SHIP,
            hit=bool(self.shots[row, col]),
            ship_id=None if ship_id == NO_SHIP else ship_id,
        )

    def tiles(self) -> list[list[Tile]]:
        """Return all cells row-major."""
        return [[self.tile(r, c) for c in range(self.size)] for r in range(self.size)]

    def was_shot(self, row: int, col: int) -> bool:
        """Return whether this cell was previously targeted."""
        self.require_in_bounds(row, col)
        return bool(self.shots[row, col])

    @property
    def shots_fired(self) -> int:
        return int(np.count_nonzero(self.shots))

    @property
    def occupied_cells(self) -> int:
        return int(np.count_nonzero(self.ships != NO_SHIP))

    def can_place(self, row: int, col: int, size: int, horizontal: bool) -> bool:
        """Return whether a run is in bounds and free of other ships."""
        if size <= 0:
            return False
        for cell in cells_for_run(row, col, size, horizontal):
            if not self.in_bounds(cell.row, cell.col):
                return False
            if self.ships[cell.row, cell.col] != NO_SHIP:
                return False
        return True

    def place_ship(
        self,
        row: int,
        col: int,
        size: int,
        horizontal: bool,
        fleet: Fleet,
        name: str | None = None,
    ) -> Ship:
        """Place a ship on the board and register it in `fleet`."""
        if not self.can_place(row, col, size, horizontal):
            raise InvalidPlacement(
                f"Cannot place ship of size {size} at ({row}, {col}), "
                f"{'horizontal' if horizontal else 'vertical'}."
            )
        ship_id = len(fleet)
        cells = cells_for_run(row, col, size, horizontal)
        for cell in cells:
            self.ships[cell.row, cell.col] = ship_id
        ship = Ship(id=ship_id, size=size, name=name or default_ship_name(size), cells=tuple(cells))
        fleet.append(ship)
        logger.debug("ship_placed id=%d name=%s bow=(%d, %d) size=%d", ship_id, ship.name, row, col, size)
        return ship

    def apply_shot(self, row: int, col: int, fleet: Fleet) -> ShotOutcome:
        """Apply a shot and report what it struck."""
        self.require_in_bounds(row, col)
        if self.shots[row, col]:
            return _REPEAT

        self.shots[row, col] = True
        ship_id = int(self.ships[row, col])
        if ship_id == NO_SHIP:
            return _MISS

        ship = fleet.get(ship_id)
        if ship is None or ship.sunk:
            # Only reachable if a sunk ship is struck again; report the hit without counting it.
            return ShotOutcome(already_hit=False, hit=True, sunk=False, ship=ship)
        sunk = ship.register_hit()
        return ShotOutcome(already_hit=False, hit=True, sunk=sunk, ship=ship)


def create_board() -> Board:
    """Create an empty board."""
    return Board()


def can_place_ship(board: Board, row: int, col: int, size: int, horizontal: bool) -> bool:
    """Return whether a ship fits at the given bow and orientation."""
    return board.can_place(row, col, size, horizontal)


def place_ship(
    board: Board,
    row: int,
    col: int,
    size: int,
    horizontal: bool,
    fleet: Fleet,
    name: str | None = None,
) -> Ship:
    """Place a ship; the run must satisfy `can_place_ship`."""
    return board.place_ship(row, col, size, horizontal, fleet, name)


def neighbors(row: int, col: int, size: int = BOARD_SIZE) -> list[Coord]:
    """Return orthogonally adjacent in-bounds cells (up, down, left, right)."""
    result: list[Coord] = []
    for dr, dc in _DIRECTIONS:
        rr = row + dr
        cc = col + dc
        if 0 <= rr < size and 0 <= cc < size:
            result.append(Coord(rr, cc))
    return result
