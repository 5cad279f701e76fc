"""Rule validation and turn resolution logic."""

from __future__ import annotations

from dataclasses import dataclass, field

from broadside.game.core.board import Board
from broadside.game.core.models import Coord, Ship, ShotResult, Turn
from broadside.game.core.shot_resolution import ShotOutcome, all_ships_sunk, process_shot


@dataclass(slots=True)
class GameSession:
    """Runtime battle state for both sides."""

    player_board: Board
    player_ships: tuple[Ship, ...]
    ai_board: Board
    ai_ships: tuple[Ship, ...]
    turn: Turn = Turn.PLAYER
    winner: Turn | None = None
    last_message: str = "Battle started. Your turn."
    history: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ShotReport:
    """What a fire call did, as seen by the controller."""

    coord: Coord
    result: ShotResult
    sunk_ship: Ship | None = None

    @property
    def accepted(self) -> bool:
        return self.result not in (ShotResult.INVALID, ShotResult.REPEAT)


def player_fire(session: GameSession, coord: Coord) -> ShotReport:
    """Resolve player shot at the AI board."""
    rejected = _reject(session, session.ai_board, coord, Turn.PLAYER)
    if rejected is not None:
        return rejected

    outcome = process_shot(session.ai_board, session.ai_ships, coord.row, coord.col)
    session.ai_board = outcome.board
    session.ai_ships = outcome.ships
    session.turn = Turn.AI

    if outcome.result is ShotResult.SUNK:
        _log(session, f"You sank the enemy {outcome.sunk_ship_name}!")
    elif outcome.result is ShotResult.HIT:
        _log(session, f"Hit at {coord.label}!")
    else:
        _log(session, f"Miss at {coord.label}.")

    if all_ships_sunk(session.ai_ships):
        session.winner = Turn.PLAYER
        session.turn = Turn.PLAYER
        _log(session, "You win! All enemy ships sunk!")
    return _report(coord, outcome)


def ai_fire(session: GameSession, coord: Coord) -> ShotReport:
    """Resolve AI shot at the player board."""
    rejected = _reject(session, session.player_board, coord, Turn.AI)
    if rejected is not None:
        return rejected

    outcome = process_shot(session.player_board, session.player_ships, coord.row, coord.col)
    session.player_board = outcome.board
    session.player_ships = outcome.ships
    session.turn = Turn.PLAYER

    if outcome.result is ShotResult.SUNK:
        _log(session, f"AI sank your {outcome.sunk_ship_name}!")
    elif outcome.result is ShotResult.HIT:
        _log(session, f"AI hit at {coord.label}!")
    else:
        _log(session, f"AI missed at {coord.label}.")

    if all_ships_sunk(session.player_ships):
        session.winner = Turn.AI
        session.turn = Turn.AI
        _log(session, "AI wins! All your ships are sunk!")
    return _report(coord, outcome)


def _reject(session: GameSession, board: Board, coord: Coord, shooter: Turn) -> ShotReport | None:
    if session.winner is not None or session.turn is not shooter:
        return ShotReport(coord, ShotResult.INVALID)
    if not board.in_bounds(coord):
        return ShotReport(coord, ShotResult.INVALID)
    if not board.is_unfired(coord):
        return ShotReport(coord, ShotResult.REPEAT)
    return None


def _report(coord: Coord, outcome: ShotOutcome) -> ShotReport:
    return ShotReport(coord=coord, result=outcome.result, sunk_ship=outcome.sunk_ship)


def _log(session: GameSession, message: str) -> None:
    session.last_message = message
    session.history.append(message)
