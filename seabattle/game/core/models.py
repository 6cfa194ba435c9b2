"""Core domain models used by game logic."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

BOARD_SIZE = 10

SHIP_SIZES: tuple[int, ...] = (5, 4, 3, 3, 2)
SHIP_NAMES: tuple[str, ...] = ("Carrier", "Battleship", "Cruiser", "Submarine", "Destroyer")

DEFAULT_FLEET: tuple[tuple[str, int], ...] = tuple(zip(SHIP_NAMES, SHIP_SIZES, strict=True))


class ShotResult(StrEnum):
    """Result of a single shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    REPEAT = "REPEAT"
    INVALID = "INVALID"


class Turn(StrEnum):
    """Current turn owner."""

    PLAYER = "PLAYER"
    AI = "AI"


class GamePhase(StrEnum):
    """Lifecycle phase of a game session."""

    PLACEMENT = "PLACEMENT"
    IN_PROGRESS = "IN_PROGRESS"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Tile:
    """State of a single board cell."""

    has_ship: bool = False
    hit: bool = False
    ship_id: int | None = None


@dataclass(slots=True)
class Ship:
    """A placed ship and its damage."""

    id: int
    size: int
    name: str
    cells: tuple[Coord, ...]
    hits: int = 0
    sunk: bool = False

    def register_hit(self) -> bool:
        """Count one hit and return whether this hit sank the ship."""
        if self.sunk:
            return False
        self.hits += 1
        if self.hits >= self.size:
            self.sunk = True
            return True
        return False


@dataclass(slots=True)
class Fleet:
    """Ordered ships of one side; index equals ship id."""

    ships: list[Ship] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.ships)

    def __iter__(self) -> Iterator[Ship]:
        return iter(self.ships)

    def __getitem__(self, ship_id: int) -> Ship:
        return self.ships[ship_id]

    def get(self, ship_id: int) -> Ship | None:
        """Return ship by id, or None when the id is unknown."""
        if 0 <= ship_id < len(self.ships):
            return self.ships[ship_id]
        return None

    def append(self, ship: Ship) -> None:
        if ship.id != len(self.ships):
            raise ValueError(f"ship id {ship.id} does not match fleet slot {len(self.ships)}")
        self.ships.append(ship)


@dataclass(frozen=True, slots=True)
class ShotOutcome:
    """Outcome of applying a shot to a board."""

    already_hit: bool
    hit: bool
    sunk: bool
    ship: Ship | None

    @property
    def result(self) -> ShotResult:
        if self.already_hit:
            return ShotResult.REPEAT
        if self.sunk:
            return ShotResult.SUNK
        if self.hit:
            return ShotResult.HIT
        return ShotResult.MISS


def cells_for_run(row: int, col: int, size: int, horizontal: bool) -> list[Coord]:
    """Compute the cells a ship of `size` covers from its bow."""
    if horizontal:
        return [Coord(row, col + i) for i in range(size)]
    return [Coord(row + i, col) for i in range(size)]


def default_ship_name(size: int) -> str:
    return f"Ship ({size})"
