"""Rule validation and turn resolution logic."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from seabattle.game.ai.hunt_target import HuntTargetAI, SkillTier, build_ai_strategy
from seabattle.game.ai.strategy import AIStrategy
from seabattle.game.core.board import Board
from seabattle.game.core.errors import InvalidPlacement
from seabattle.game.core.fleet import is_fleet_destroyed, place_fleet_randomly
from seabattle.game.core.models import (
    DEFAULT_FLEET,
    Coord,
    Fleet,
    GamePhase,
    Ship,
    ShotOutcome,
    ShotResult,
    Turn,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameSession:
    """Runtime game session state."""

    player_board: Board
    player_fleet: Fleet
    ai_board: Board
    ai_fleet: Fleet
    ai: AIStrategy
    phase: GamePhase = GamePhase.PLACEMENT
    turn: Turn = Turn.PLAYER
    winner: Turn | None = None
    draw: bool = False
    player_shots: int = 0
    ai_shots: int = 0
    last_message: str = ""
    history: list[str] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER


def create_session(skill: SkillTier | str, rng: random.Random) -> GameSession:
    """Create a session with the computer fleet placed and the player fleet empty."""
    ai_board = Board()
    ai_fleet = Fleet()
    place_fleet_randomly(ai_board, ai_fleet, rng)
    ai = build_ai_strategy(skill, rng)
    session = GameSession(
        player_board=Board(),
        player_fleet=Fleet(),
        ai_board=ai_board,
        ai_fleet=ai_fleet,
        ai=ai,
    )
    _announce(session, f"Place your ships by clicking your board. Next size: {DEFAULT_FLEET[0][1]}")
    if isinstance(ai, HuntTargetAI):
        logger.info("session_created skill=%s", ai.skill.value)
    return session


def next_ship_to_place(session: GameSession) -> tuple[str, int] | None:
    """Return (name, size) of the next player ship, or None when all are placed."""
    index = len(session.player_fleet)
    if index >= len(DEFAULT_FLEET):
        return None
    return DEFAULT_FLEET[index]


def placement_done(session: GameSession) -> bool:
    return next_ship_to_place(session) is None


def place_player_ship(session: GameSession, coord: Coord, horizontal: bool) -> Ship | None:
    """Place the next ship of the standard fleet for the player.

    Returns None and leaves the board untouched when the spot is illegal.
    """
    if session.phase is not GamePhase.PLACEMENT:
        return None
    upcoming = next_ship_to_place(session)
    if upcoming is None:
        return None
    name, size = upcoming
    try:
        ship = session.player_board.place_ship(
            coord.row, coord.col, size, horizontal, session.player_fleet, name
        )
    except InvalidPlacement:
        session.last_message = "Cannot place ship there. Try another spot."
        return None

    following = next_ship_to_place(session)
    if following is None:
        _announce(session, "All ships placed. Click Start Game to begin.")
    else:
        session.last_message = f"Place next ship of size {following[1]}"
    return ship


def randomize_player_fleet(session: GameSession, rng: random.Random) -> None:
    """Replace the player's fleet with a random standard placement."""
    if session.phase is not GamePhase.PLACEMENT:
        return
    session.player_board = Board()
    session.player_fleet = Fleet()
    place_fleet_randomly(session.player_board, session.player_fleet, rng)
    _announce(session, "All ships placed. Click Start Game to begin.")


def start_battle(session: GameSession) -> bool:
    """Leave placement and hand the first turn to the player."""
    if session.phase is not GamePhase.PLACEMENT:
        return False
    if not placement_done(session):
        session.last_message = "Finish placing all your ships before starting."
        return False
    session.phase = GamePhase.IN_PROGRESS
    session.turn = Turn.PLAYER
    _announce(session, "Your turn: fire on Enemy Waters.")
    logger.info("battle_started")
    return True


def player_fire(session: GameSession, coord: Coord) -> ShotResult:
    """Resolve player shot at the AI board."""
    if session.phase is not GamePhase.IN_PROGRESS or session.turn is not Turn.PLAYER:
        return ShotResult.INVALID

    outcome = session.ai_board.apply_shot(coord.row, coord.col, session.ai_fleet)
    if outcome.already_hit:
        return ShotResult.REPEAT

    session.player_shots += 1
    if outcome.sunk and outcome.ship is not None:
        _announce(session, f"You sunk the enemy {outcome.ship.name}!")
    else:
        _announce(session, f"You fired at ({coord.row}, {coord.col}): {outcome.result.value.lower()}.")

    if is_fleet_destroyed(session.ai_fleet):
        _finish(session, Turn.PLAYER, "You win! All enemy ships have been sunk.")
        return outcome.result

    session.turn = Turn.AI
    return outcome.result


def ai_fire(session: GameSession) -> ShotResult:
    """Let the AI pick and resolve its shot at the player board."""
    if session.phase is not GamePhase.IN_PROGRESS or session.turn is not Turn.AI:
        return ShotResult.INVALID

    coord = session.ai.choose_shot(session.player_board)
    if coord is None:
        _finish(session, None, "Draw! No more positions to fire.")
        return ShotResult.INVALID

    outcome = session.player_board.apply_shot(coord.row, coord.col, session.player_fleet)
    session.ai.notify_result(coord, outcome)
    if outcome.already_hit:
        # Strategies filter fired cells, so this means a broken strategy.
        logger.warning("ai_repeat_shot coord=(%d, %d)", coord.row, coord.col)
        return ShotResult.REPEAT

    session.ai_shots += 1
    _report_ai_shot(session, coord, outcome)

    if is_fleet_destroyed(session.player_fleet):
        _finish(session, Turn.AI, "You lose! All your ships have been sunk.")
        return outcome.result

    session.turn = Turn.PLAYER
    return outcome.result


def _report_ai_shot(session: GameSession, coord: Coord, outcome: ShotOutcome) -> None:
    if outcome.sunk and outcome.ship is not None:
        _announce(session, f"The enemy sunk your {outcome.ship.name}!")
    else:
        _announce(session, f"Enemy fired at ({coord.row}, {coord.col}): {outcome.result.value.lower()}.")


def _finish(session: GameSession, winner: Turn | None, message: str) -> None:
    session.phase = GamePhase.GAME_OVER
    session.winner = winner
    session.draw = winner is None
    _announce(session, message)
    logger.info(
        "game_over winner=%s player_shots=%d ai_shots=%d",
        winner.value if winner is not None else "DRAW",
        session.player_shots,
        session.ai_shots,
    )


def _announce(session: GameSession, message: str) -> None:
    session.last_message = message
    session.history.append(message)
