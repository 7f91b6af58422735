"""Stateful game facade for a single local game.

Wraps the pure-functional engine: holds the current GameState, applies
moves through process_action(), and hands the presentation layer frozen
snapshots plus the event log of each move.
"""

import logging
from dataclasses import dataclass, field

from chain_reaction.schemas.game_engine import (
    CellView,
    GameSettings,
    GameSnapshot,
    GameState,
    MoveError,
    PlayerView,
)

from .engine import (
    AnyGameEvent,
    CascadeEvent,
    CellCharged,
    CellExploded,
    PlaceAction,
    process_action,
    process_start_game,
)
from .start_game import build_game_settings, initialize_game

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Outcome of Game.apply_move().

    Rejected moves carry a reason and leave the game untouched.
    """

    accepted: bool
    reason: MoveError | None = None
    error_message: str | None = None
    events: list[AnyGameEvent] = field(default_factory=list)

    @property
    def explosion_events(self) -> list[CascadeEvent]:
        """Cascade events in resolution order, for staged animation."""
        return [e for e in self.events if isinstance(e, (CellExploded, CellCharged))]


class Game:
    """A running game between 2-4 players on one device."""

    def __init__(
        self,
        player_count: int,
        rows: int | None = None,
        cols: int | None = None,
        capacity: int = 4,
        seed: int | None = None,
        explode_on_conversion_at_threshold: bool = False,
    ):
        settings = build_game_settings(
            player_count,
            rows=rows,
            cols=cols,
            capacity=capacity,
            seed=seed,
            explode_on_conversion_at_threshold=explode_on_conversion_at_threshold,
        )
        self._start(initialize_game(settings))

    @classmethod
    def from_settings(cls, settings: GameSettings) -> "Game":
        game = cls.__new__(cls)
        game._start(initialize_game(settings))
        return game

    @classmethod
    def from_state(cls, state: GameState) -> "Game":
        """Resume from an existing state without emitting opening events."""
        game = cls.__new__(cls)
        game._state = state.model_copy(deep=True)
        game.opening_events = []
        logger.info(
            "Game resumed: turn=%d, current_player=%d",
            state.turn_number,
            state.current_player_id,
        )
        return game

    def _start(self, state: GameState) -> None:
        result = process_start_game(state)
        self._state = result.state
        self.opening_events: list[AnyGameEvent] = result.events

    @property
    def state(self) -> GameState:
        """Deep copy of the current state; mutating it does not affect the game."""
        return self._state.model_copy(deep=True)

    @property
    def current_player(self) -> int:
        return self._state.current_player_id

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def winner(self) -> int | None:
        return self._state.winner

    def apply_move(self, player: int, row: int, col: int) -> MoveResult:
        """Place a tile for ``player`` at (row, col) and resolve the cascade.

        Returns:
            MoveResult; when not accepted, ``reason`` names the MoveError.
        """
        result = process_action(self._state, PlaceAction(row=row, col=col), player)
        if not result.success:
            return MoveResult(
                accepted=False,
                reason=MoveError(result.error_code),
                error_message=result.error_message,
            )

        self._state = result.state
        return MoveResult(accepted=True, events=result.events)

    def snapshot(self) -> GameSnapshot:
        """Frozen view of the board and turn state for rendering."""
        state = self._state
        return GameSnapshot(
            rows=state.board.rows,
            cols=state.board.cols,
            capacity=state.board.capacity,
            grid=tuple(
                tuple(CellView(owner=cell.owner, power=cell.power) for cell in row)
                for row in state.board.cells
            ),
            players=tuple(
                PlayerView(
                    player_id=p.player_id,
                    name=p.name,
                    color=p.color,
                    has_moved_first=p.has_moved_first,
                    alive=p.alive,
                )
                for p in state.players
            ),
            player_order=tuple(state.player_order),
            current_player_id=state.current_player_id,
            alive_players=tuple(p.player_id for p in state.players if p.alive),
            game_over=state.game_over,
            winner=state.winner,
            turn_number=state.turn_number,
        )
