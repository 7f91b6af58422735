"""Game engine module - pure functional game logic.

This module provides the core game engine with:
- Action types for explicit user inputs
- Event types for the presentation layer (cascade replay, turn changes)
- ProcessResult pattern for error handling
- Board, cascade and turn logic split by concern

Usage:
    from chain_reaction.services.game.engine import (
        process_action,
        ProcessResult,
        PlaceAction,
    )

    # Process an action
    result = process_action(state, PlaceAction(row=0, col=0), player_id)

    if result.success:
        new_state = result.state
        events = result.events  # Replay these to animate the move
    else:
        # Handle error
        print(f"Error: {result.error_code} - {result.error_message}")
"""

# Actions - explicit user inputs
from .actions import GameAction, PlaceAction

# Board queries
from .board import (
    capacity,
    cell_counts,
    create_empty_board,
    get_cell,
    in_bounds,
    iter_positions,
    neighbors,
    owned_cells,
    total_power,
)

# Cascade resolution
from .cascade import CascadeResult, dequeue_limit, resolve_cascade

# Events - for the presentation layer
from .events import (
    AnyGameEvent,
    CascadeEvent,
    CellCharged,
    CellExploded,
    GameEnded,
    GameEvent,
    GameStarted,
    PlayerEliminated,
    TilePlaced,
    TurnEnded,
    TurnStarted,
)
from .exceptions import InvariantViolation, OutOfBounds

# Legal moves
from .legal_moves import get_legal_moves, has_any_legal_moves, is_legal_placement

# Main processing
from .process import process_action, process_start_game

# Turn management
from .turns import (
    check_eliminations,
    check_win_condition,
    create_player_order,
    get_next_turn,
    setup_complete,
)

# Result types
from .validation import ProcessResult, ValidationResult, validate_action

__all__ = [
    # Actions
    "GameAction",
    "PlaceAction",
    # Board
    "capacity",
    "cell_counts",
    "create_empty_board",
    "get_cell",
    "in_bounds",
    "iter_positions",
    "neighbors",
    "owned_cells",
    "total_power",
    # Cascade
    "CascadeResult",
    "dequeue_limit",
    "resolve_cascade",
    # Events
    "GameEvent",
    "AnyGameEvent",
    "CascadeEvent",
    "GameStarted",
    "TilePlaced",
    "CellExploded",
    "CellCharged",
    "PlayerEliminated",
    "TurnEnded",
    "TurnStarted",
    "GameEnded",
    # Exceptions
    "InvariantViolation",
    "OutOfBounds",
    # Processing
    "process_action",
    "process_start_game",
    # Turns
    "check_eliminations",
    "check_win_condition",
    "create_player_order",
    "get_next_turn",
    "setup_complete",
    # Validation
    "ProcessResult",
    "ValidationResult",
    "validate_action",
    # Legal moves
    "get_legal_moves",
    "has_any_legal_moves",
    "is_legal_placement",
]
