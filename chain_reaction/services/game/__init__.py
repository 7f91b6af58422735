"""Game service module.

Provides:
- Game initialization (start_game.py)
- Stateful game facade (session.py)
- In-memory game registry (store.py)
- Game engine processing (engine/)
"""

# Re-export from engine for convenience
from .engine import (
    GameAction,
    InvariantViolation,
    OutOfBounds,
    PlaceAction,
    ProcessResult,
    process_action,
)
from .session import Game, MoveResult
from .start_game import (
    BOARD_SIZES,
    build_game_settings,
    initialize_game,
    validate_game_settings,
)

__all__ = [
    # Initialization
    "BOARD_SIZES",
    "build_game_settings",
    "initialize_game",
    "validate_game_settings",
    # Facade
    "Game",
    "MoveResult",
    # Engine
    "GameAction",
    "InvariantViolation",
    "OutOfBounds",
    "PlaceAction",
    "ProcessResult",
    "process_action",
]
