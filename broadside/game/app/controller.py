"""Session controller for placement, turn order, and game over."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

from broadside.game.ai.selection import build_ai_strategy
from broadside.game.ai.targeting import AIMode
from broadside.game.app.controller_state import ControllerState
from broadside.game.app.scheduler import Scheduler
from broadside.game.app.state_machine import GamePhase, next_phase
from broadside.game.app.stats import GameStats
from broadside.game.core.board import Board, create_empty_board
from broadside.game.core.fleet import random_fleet
from broadside.game.core.models import (
    FLEET_ROSTER,
    Coord,
    Difficulty,
    Orientation,
    Ship,
    ShipSpec,
    ShotResult,
    Turn,
)
from broadside.game.core.placement import can_place_ship, place_ship, ship_cells
from broadside.game.core.rules import GameSession, ai_fire, player_fire
from broadside.game.infra.config import GameSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class SessionSnapshot:
    """View-ready copy of the session state."""

    phase: GamePhase
    turn: Turn
    difficulty: Difficulty
    orientation: Orientation
    current_ship: ShipSpec | None
    player_board: Board
    player_ships: tuple[Ship, ...]
    ai_board: Board
    ai_ships: tuple[Ship, ...]
    stats: GameStats
    status: str
    winner: Turn | None
    ai_turn_pending: bool
    ai_mode: AIMode | None


class GameController:
    """Owns both sides' state and runs one game at a time."""

    def __init__(
        self,
        rng: random.Random,
        settings: GameSettings | None = None,
        scheduler: Scheduler | None = None,
        roster: tuple[ShipSpec, ...] = FLEET_ROSTER,
    ) -> None:
        self._rng = rng
        self._settings = settings if settings is not None else GameSettings()
        self._scheduler = scheduler if scheduler is not None else Scheduler()
        self._roster = roster
        self._state = self._fresh_state(self._settings.difficulty)

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def difficulty(self) -> Difficulty:
        return self._state.difficulty

    @property
    def status(self) -> str:
        return self._state.status

    @property
    def stats(self) -> GameStats:
        return self._state.stats

    @property
    def session(self) -> GameSession | None:
        return self._state.session

    @property
    def winner(self) -> Turn | None:
        session = self._state.session
        return session.winner if session is not None else None

    @property
    def ai_turn_pending(self) -> bool:
        return self._state.pending_reply_task is not None

    @property
    def ai_reply_delay_seconds(self) -> float:
        return self._settings.ai_reply_delay_seconds

    def current_ship(self) -> ShipSpec | None:
        """Next roster ship awaiting placement, if any."""
        if self._state.phase is not GamePhase.PLACEMENT:
            return None
        index = len(self._state.player_ships)
        return self._roster[index] if index < len(self._roster) else None

    def snapshot(self) -> SessionSnapshot:
        """Return an immutable view of the current session."""
        state = self._state
        session = state.session
        if session is not None:
            player_board, player_ships = session.player_board, session.player_ships
            ai_board, ai_ships = session.ai_board, session.ai_ships
        else:
            player_board, player_ships = state.player_board, state.player_ships
            ai_board, ai_ships = create_empty_board(state.player_board.size), ()
        stats = GameStats(
            player=replace(state.stats.player),
            ai=replace(state.stats.ai),
            turns=state.stats.turns,
        )
        return SessionSnapshot(
            phase=state.phase,
            turn=session.turn if session is not None else Turn.PLAYER,
            difficulty=state.difficulty,
            orientation=state.orientation,
            current_ship=self.current_ship(),
            player_board=player_board,
            player_ships=player_ships,
            ai_board=ai_board,
            ai_ships=ai_ships,
            stats=stats,
            status=state.status,
            winner=self.winner,
            ai_turn_pending=self.ai_turn_pending,
            ai_mode=state.ai_strategy.state.mode if state.ai_strategy is not None else None,
        )

    def set_difficulty(self, difficulty: Difficulty) -> bool:
        """Change difficulty; allowed only before the first ship is placed."""
        if self._state.phase is not GamePhase.PLACEMENT or self._state.player_ships:
            return False
        self._state.difficulty = difficulty
        logger.info("difficulty_selected difficulty=%s", difficulty)
        return True

    def toggle_orientation(self) -> Orientation:
        self._state.orientation = self._state.orientation.toggled()
        return self._state.orientation

    def placement_preview(self, coord: Coord) -> tuple[list[Coord], bool]:
        """In-bounds cells the current ship would cover at ``coord`` and validity."""
        spec = self.current_ship()
        if spec is None:
            return [], False
        board = self._state.player_board
        horizontal = self._state.orientation.is_horizontal
        cells = [
            cell
            for cell in ship_cells(coord.row, coord.col, spec.length, horizontal)
            if board.in_bounds(cell)
        ]
        return cells, can_place_ship(board, coord.row, coord.col, spec.length, horizontal)

    def place_next_ship(self, coord: Coord) -> bool:
        """Place the current roster ship with its bow at ``coord``."""
        spec = self.current_ship()
        if spec is None:
            return False
        state = self._state
        horizontal = state.orientation.is_horizontal
        if not can_place_ship(state.player_board, coord.row, coord.col, spec.length, horizontal):
            state.status = f"Cannot place your {spec.name} at {coord.label}."
            return False

        state.player_board, state.player_ships = place_ship(
            state.player_board, state.player_ships, spec, coord.row, coord.col, horizontal
        )
        logger.debug(
            "ship_placed name=%s bow=%s orientation=%s", spec.name, coord.label, state.orientation
        )

        upcoming = self.current_ship()
        if upcoming is None:
            self._start_battle("All ships placed! Fire at the enemy board.")
        else:
            state.status = _placement_prompt(upcoming)
        return True

    def randomize_placement(self) -> bool:
        """Randomly place the player's whole fleet and start the battle."""
        if self._state.phase is not GamePhase.PLACEMENT:
            return False
        size = self._state.player_board.size
        self._state.player_board, self._state.player_ships = random_fleet(
            self._rng, size=size, roster=self._roster
        )
        self._start_battle("Ships randomly placed! Fire at the enemy board.")
        return True

    def fire(self, coord: Coord) -> ShotResult:
        """Resolve a player shot at the enemy board."""
        state = self._state
        session = state.session
        if state.phase is not GamePhase.BATTLE or session is None:
            return ShotResult.INVALID
        if self.ai_turn_pending:
            return ShotResult.INVALID

        report = player_fire(session, coord)
        if not report.accepted:
            if report.result is ShotResult.REPEAT:
                state.status = f"{coord.label} was already targeted. Choose another cell."
            return report.result

        state.stats.record_shot(Turn.PLAYER, report.result)
        state.status = session.last_message
        logger.debug("player_shot coord=%s result=%s", coord.label, report.result)

        if session.winner is not None:
            self._finish()
            return report.result

        delay = self._settings.ai_reply_delay_seconds
        if delay <= 0.0:
            self._run_ai_turn()
        else:
            state.pending_reply_task = self._scheduler.call_later(delay, self._run_ai_turn)
        return report.result

    def advance(self, delta_seconds: float) -> int:
        """Advance the pacing clock, running a due computer reply."""
        return self._scheduler.advance(delta_seconds)

    def reset(self) -> None:
        """Discard the current game and start a fresh placement phase."""
        if self._state.pending_reply_task is not None:
            self._scheduler.cancel(self._state.pending_reply_task)
        self._state = self._fresh_state(self._state.difficulty)
        logger.info("session_reset difficulty=%s", self._state.difficulty)

    def _fresh_state(self, difficulty: Difficulty) -> ControllerState:
        state = ControllerState(difficulty=difficulty)
        state.status = _placement_prompt(self._roster[0])
        return state

    def _start_battle(self, status: str) -> None:
        state = self._state
        ai_board, ai_ships = random_fleet(
            self._rng, size=state.player_board.size, roster=self._roster
        )
        state.session = GameSession(
            player_board=state.player_board,
            player_ships=state.player_ships,
            ai_board=ai_board,
            ai_ships=ai_ships,
        )
        state.ai_strategy = build_ai_strategy(state.difficulty, self._rng)
        state.phase = next_phase(state.phase)
        state.status = status
        logger.info("battle_started difficulty=%s", state.difficulty)

    def _run_ai_turn(self) -> None:
        state = self._state
        state.pending_reply_task = None
        session = state.session
        strategy = state.ai_strategy
        if state.phase is not GamePhase.BATTLE or session is None or strategy is None:
            return
        if session.turn is not Turn.AI:
            return

        coord = strategy.choose_shot(session.player_board)
        report = ai_fire(session, coord)
        if not report.accepted:
            raise RuntimeError(f"AI chose an unavailable cell {coord.label}: {report.result}.")

        strategy.notify_result(coord, report.result, report.sunk_ship, session.player_board.size)
        state.stats.record_shot(Turn.AI, report.result)
        state.status = session.last_message
        logger.debug(
            "ai_shot coord=%s result=%s mode=%s", coord.label, report.result, strategy.state.mode
        )

        if session.winner is not None:
            self._finish()

    def _finish(self) -> None:
        state = self._state
        state.phase = next_phase(state.phase)
        logger.info(
            "game_over winner=%s turns=%d player_accuracy=%.1f ai_accuracy=%.1f",
            self.winner,
            state.stats.turns,
            state.stats.player.accuracy,
            state.stats.ai.accuracy,
        )


def _placement_prompt(spec: ShipSpec) -> str:
    return f"Place your {spec.name} ({spec.length} cells)."


