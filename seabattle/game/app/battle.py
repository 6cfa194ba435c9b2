"""Battle flow orchestration separated from presentation logic."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from seabattle.game.ai.hunt_target import SkillTier
from seabattle.game.ai.strategy import AIStrategy
from seabattle.game.core.models import Coord, GamePhase, Ship, ShotOutcome, ShotResult, Turn
from seabattle.game.core.rules import (
    GameSession,
    ai_fire,
    create_session,
    place_player_ship,
    player_fire,
    randomize_player_fleet,
    start_battle,
)
from seabattle.game.infra.config import GameSettings
from seabattle.runtime.scheduler import Scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlayerTurnResult:
    """Outcome of a player action (player shot + scheduled or immediate AI reply)."""

    shot_result: ShotResult
    status: str
    winner: Turn | None
    ai_pending: bool = False


class BattleController:
    """Owns one game session and paces the computer's replies."""

    def __init__(
        self,
        *,
        rng: random.Random,
        skill: SkillTier | str = SkillTier.NORMAL,
        ai_delay_seconds: float = 0.0,
        scheduler: Scheduler | None = None,
    ) -> None:
        if ai_delay_seconds < 0.0:
            raise ValueError("ai_delay_seconds must be >= 0")
        self._rng = rng
        self._skill = skill
        self._ai_delay_seconds = ai_delay_seconds
        self._scheduler = scheduler if scheduler is not None else Scheduler()
        self._ai_handle: int | None = None
        self._session = create_session(skill, rng)

    @classmethod
    def from_settings(cls, settings: GameSettings, scheduler: Scheduler | None = None) -> BattleController:
        return cls(
            rng=random.Random(settings.seed),
            skill=settings.skill,
            ai_delay_seconds=settings.ai_delay_seconds,
            scheduler=scheduler,
        )

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def ai_delay_seconds(self) -> float:
        return self._ai_delay_seconds

    @property
    def ai_pending(self) -> bool:
        return self._ai_handle is not None

    def place_ship(self, coord: Coord, horizontal: bool) -> Ship | None:
        return place_player_ship(self._session, coord, horizontal)

    def randomize_fleet(self) -> None:
        randomize_player_fleet(self._session, self._rng)

    def start(self) -> bool:
        return start_battle(self._session)

    def restart(self) -> None:
        """Drop the current game (and any pending AI reply) and set up a new one."""
        if self._ai_handle is not None:
            self._scheduler.cancel(self._ai_handle)
            self._ai_handle = None
        self._session = create_session(self._skill, self._rng)
        logger.info("session_restarted")

    def fire(self, coord: Coord) -> PlayerTurnResult:
        """Apply the player's shot and queue the AI's answer."""
        session = self._session
        result = player_fire(session, coord)
        if result in {ShotResult.INVALID, ShotResult.REPEAT}:
            return PlayerTurnResult(
                shot_result=result,
                status="Invalid target. Choose another enemy cell.",
                winner=session.winner,
                ai_pending=self.ai_pending,
            )

        if session.is_over:
            return PlayerTurnResult(shot_result=result, status=session.last_message, winner=session.winner)

        self._schedule_ai_turn(result)
        return PlayerTurnResult(
            shot_result=result,
            status=session.last_message,
            winner=session.winner,
            ai_pending=self.ai_pending,
        )

    def tick(self, delta_seconds: float) -> int:
        """Advance pacing time; returns number of AI turns that ran."""
        return self._scheduler.advance(delta_seconds)

    def _schedule_ai_turn(self, player_result: ShotResult) -> None:
        if self._ai_delay_seconds <= 0.0:
            self._run_ai_turn()
            return
        if player_result is not ShotResult.SUNK:
            self._session.last_message = "Enemy is firing..."
        self._ai_handle = self._scheduler.call_later(self._ai_delay_seconds, self._run_ai_turn)

    def _run_ai_turn(self) -> None:
        self._ai_handle = None
        session = self._session
        if session.turn is not Turn.AI or session.is_over:
            return
        result = ai_fire(session)
        logger.debug("ai_turn result=%s shots=%d", result.value, session.ai_shots)


def autoplay(controller: BattleController, player_ai: AIStrategy) -> GameSession:
    """Play the human side with `player_ai` until the game ends."""
    session = controller.session
    if session.phase is GamePhase.PLACEMENT:
        controller.randomize_fleet()
        controller.start()

    cells = session.ai_board.size * session.ai_board.size
    for _ in range(cells):
        if session.is_over:
            break
        coord = player_ai.choose_shot(session.ai_board)
        if coord is None:
            break
        turn = controller.fire(coord)
        player_ai.notify_result(coord, _outcome_from_result(turn.shot_result))
        if controller.ai_pending:
            controller.tick(controller.ai_delay_seconds)
    return session


def _outcome_from_result(result: ShotResult) -> ShotOutcome:
    return ShotOutcome(
        already_hit=result is ShotResult.REPEAT,
        hit=result in {ShotResult.HIT, ShotResult.SUNK},
        sunk=result is ShotResult.SUNK,
        ship=None,
    )
