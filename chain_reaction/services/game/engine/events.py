"""Game event types - emitted during state transitions for the presentation layer.

Events describe what happened during a move, enabling:
- Incremental UI updates (only redraw what changed)
- Staged cascade animations (wave numbers are delay multipliers)
- Replay of a move's resolution

The logical state is already final when events are returned; discarding
them never affects the rules.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from chain_reaction.schemas.game_engine import Position


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: str
    seq: int = 0  # Sequence number assigned during processing


class GameStarted(GameEvent):
    """A new game has been set up and is waiting for the first move."""

    event_type: Literal["game_started"] = "game_started"
    player_order: list[int] = Field(..., description="Player IDs in turn order")
    first_player_id: int
    rows: int
    cols: int


class TilePlaced(GameEvent):
    """A player placed a tile on an empty cell or reinforced their own."""

    event_type: Literal["tile_placed"] = "tile_placed"
    player_id: int
    row: int
    col: int
    power: int = Field(..., description="Cell power after placement")
    first_move: bool


class CellExploded(GameEvent):
    """A cell reached capacity, reset, and pushed power into its neighbours."""

    event_type: Literal["cell_exploded"] = "cell_exploded"
    row: int
    col: int
    wave: int = Field(..., ge=0, description="BFS depth of this explosion")
    player_id: int | None = Field(..., description="Owner at the time of the explosion")
    power: int = Field(..., description="Power released by the explosion")


class CellCharged(GameEvent):
    """A neighbour received +1 power (and the exploding owner) from an explosion."""

    event_type: Literal["cell_charged"] = "cell_charged"
    row: int
    col: int
    wave: int = Field(..., ge=0, description="Wave of the explosion that charged this cell")
    player_id: int | None
    power: int = Field(..., description="Cell power after the charge")
    previous_owner: int | None
    captured_from: Position | None = Field(
        None,
        description="Source cell when ownership changed (fly-in cue), None for a local reinforcement",
    )
    armed: bool = Field(
        ..., description="True if this charge queued the cell to explode in the next wave"
    )


class PlayerEliminated(GameEvent):
    """A player no longer owns any cell and is skipped from now on."""

    event_type: Literal["player_eliminated"] = "player_eliminated"
    player_id: int


class TurnEnded(GameEvent):
    """A player's turn has ended."""

    event_type: Literal["turn_ended"] = "turn_ended"
    player_id: int
    next_player_id: int


class TurnStarted(GameEvent):
    """A new turn has begun."""

    event_type: Literal["turn_started"] = "turn_started"
    player_id: int
    turn_number: int


class GameEnded(GameEvent):
    """The game has finished."""

    event_type: Literal["game_ended"] = "game_ended"
    winner_id: int


# Events that make up the replay log of a single cascade
CascadeEvent = CellExploded | CellCharged

# Union of all event types for type checking
AnyGameEvent = Annotated[
    GameStarted
    | TilePlaced
    | CellExploded
    | CellCharged
    | PlayerEliminated
    | TurnEnded
    | TurnStarted
    | GameEnded,
    Field(discriminator="event_type"),
]
