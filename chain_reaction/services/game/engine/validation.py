"""Validation layer for game actions and ProcessResult pattern.

Separates validation from processing logic:
- validate_action() checks if an action is valid given current state
- ProcessResult replaces exceptions for control flow
"""

import logging
from dataclasses import dataclass, field

from chain_reaction.schemas.game_engine import GameState, MoveError

from .actions import GameAction, PlaceAction
from .board import in_bounds
from .events import AnyGameEvent
from .legal_moves import is_legal_placement

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Result of processing a game action.

    Replaces exceptions for control flow, providing explicit success/failure
    with error codes suitable for client localization.
    """

    state: GameState | None = None
    events: list[AnyGameEvent] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        state: GameState,
        events: list[AnyGameEvent] | None = None,
    ) -> "ProcessResult":
        """Create a successful result with new state and events."""
        return cls(
            state=state,
            events=events or [],
            success=True,
        )

    @classmethod
    def failure(cls, code: str, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            state=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of validating an action before processing."""

    is_valid: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: str, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )


def validate_action(
    state: GameState,
    action: GameAction,
    player_id: int,
) -> ValidationResult:
    """Validate an action before processing.

    Checks, in order:
    - The game is not over
    - It's the correct player's turn
    - The target cell is on the board
    - The placement rule allows the target cell

    Args:
        state: Current game state.
        action: The action to validate.
        player_id: The player attempting the action.

    Returns:
        ValidationResult indicating success or failure with error details.
    """
    action_type = type(action).__name__
    logger.debug(
        "Validating action: type=%s, player=%d, phase=%s",
        action_type,
        player_id,
        state.phase.value,
    )

    if state.game_over:
        logger.warning("Validation failed: GAME_ALREADY_OVER, winner=%s", state.winner)
        return ValidationResult.error(
            MoveError.GAME_ALREADY_OVER,
            "Game has already finished",
        )

    if state.current_player_id != player_id:
        logger.warning(
            "Validation failed: NOT_YOUR_TURN, current=%d, attempted=%d",
            state.current_player_id,
            player_id,
        )
        return ValidationResult.error(
            MoveError.NOT_YOUR_TURN,
            "It's not your turn",
        )

    if isinstance(action, PlaceAction):
        if not in_bounds(state.board, action.row, action.col):
            logger.warning(
                "Validation failed: OUT_OF_BOUNDS, target=(%d, %d), board=%dx%d",
                action.row,
                action.col,
                state.board.rows,
                state.board.cols,
            )
            return ValidationResult.error(
                MoveError.OUT_OF_BOUNDS,
                f"({action.row}, {action.col}) is outside the board",
            )

        player = next(p for p in state.players if p.player_id == player_id)
        cell = state.board.cells[action.row][action.col]
        if not is_legal_placement(cell, player):
            logger.warning(
                "Validation failed: ILLEGAL_MOVE, target=(%d, %d), owner=%s, first_move=%s",
                action.row,
                action.col,
                cell.owner,
                not player.has_moved_first,
            )
            if not player.has_moved_first:
                message = "First placement must be on an empty cell"
            else:
                message = "You can only reinforce your own cells"
            return ValidationResult.error(MoveError.ILLEGAL_MOVE, message)

    logger.debug("Action validated successfully: type=%s", action_type)
    return ValidationResult.ok()
