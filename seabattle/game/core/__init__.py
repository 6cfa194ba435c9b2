"""Board, fleet and shot-resolution primitives."""

from seabattle.game.core.board import Board, can_place_ship, create_board, neighbors, place_ship
from seabattle.game.core.errors import (
    InvalidCoordinate,
    InvalidPlacement,
    PlacementExhausted,
    SeaBattleError,
)
from seabattle.game.core.fleet import (
    fleet_status,
    is_fleet_destroyed,
    place_fleet_randomly,
    ships_remaining,
)
from seabattle.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET,
    SHIP_NAMES,
    SHIP_SIZES,
    Coord,
    Fleet,
    GamePhase,
    Ship,
    ShotOutcome,
    ShotResult,
    Tile,
    Turn,
)
from seabattle.game.core.shot_resolution import apply_shot

__all__ = [
    "BOARD_SIZE",
    "DEFAULT_FLEET",
    "SHIP_NAMES",
    "SHIP_SIZES",
    "Board",
    "Coord",
    "Fleet",
    "GamePhase",
    "InvalidCoordinate",
    "InvalidPlacement",
    "PlacementExhausted",
    "SeaBattleError",
    "Ship",
    "ShotOutcome",
    "ShotResult",
    "Tile",
    "Turn",
    "apply_shot",
    "can_place_ship",
    "create_board",
    "fleet_status",
    "is_fleet_destroyed",
    "neighbors",
    "place_fleet_randomly",
    "place_ship",
    "ships_remaining",
]
