"""Pydantic schemas for game HTTP operations."""

from pydantic import BaseModel, Field

from chain_reaction.schemas.game_engine import GameSnapshot, MoveError
from chain_reaction.services.game.engine import AnyGameEvent


class CreateGameRequest(BaseModel):
    """Request body for creating a game."""

    player_count: int = Field(
        ...,
        ge=2,
        le=4,
        description="Number of players (2-4)",
    )
    rows: int | None = Field(
        None, ge=1, le=32, description="Board rows (default depends on player count)"
    )
    cols: int | None = Field(
        None, ge=1, le=32, description="Board columns (default depends on player count)"
    )
    capacity: int | None = Field(
        None, ge=2, description="Explosion threshold (default from settings)"
    )
    seed: int | None = Field(None, description="Seed for the turn order shuffle")
    explode_on_conversion_at_threshold: bool | None = Field(
        None, description="Ruleset flag (default from settings)"
    )


class CreateGameResponse(BaseModel):
    """Response from game creation."""

    game_id: str = Field(..., description="UUID of the game")
    snapshot: GameSnapshot
    events: list[AnyGameEvent] = Field(
        default_factory=list, description="Opening events (game_started, turn_started)"
    )


class MoveRequest(BaseModel):
    """Request body for placing a tile."""

    player_id: int = Field(..., description="Player making the move")
    row: int = Field(..., description="Target row (0-based)")
    col: int = Field(..., description="Target column (0-based)")


class MoveResponse(BaseModel):
    """Outcome of a move; rejected moves are reported here, not as HTTP errors."""

    accepted: bool
    reason: MoveError | None = None
    error_message: str | None = None
    events: list[AnyGameEvent] = Field(default_factory=list)
    snapshot: GameSnapshot
