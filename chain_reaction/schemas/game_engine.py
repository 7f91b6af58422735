from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# Game phases
class GamePhase(str, Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


# Reasons a move can be rejected
class MoveError(str, Enum):
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"
    GAME_ALREADY_OVER = "GAME_ALREADY_OVER"


# Data models for game entities
# Defined pre-initialization based on player setup
class PlayerAttributes(BaseModel):
    name: str
    color: str


class Ruleset(BaseModel):
    capacity: int = Field(4, ge=2, description="Power at which a cell explodes")
    explode_on_conversion_at_threshold: bool = Field(
        False,
        description="Captured cells left one below capacity explode in the same cascade",
    )

    @property
    def first_move_power(self) -> int:
        return self.capacity - 1


class GameSettings(BaseModel):
    num_players: int
    rows: int
    cols: int
    ruleset: Ruleset = Field(default_factory=Ruleset)
    player_attributes: list[PlayerAttributes] | None = None
    seed: int | None = None


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    col: int


# Board state
class Cell(BaseModel):
    owner: int | None = None
    power: int = 0


class Board(BaseModel):
    rows: int
    cols: int
    capacity: int
    cells: list[list[Cell]]


class Player(PlayerAttributes):
    player_id: int
    has_moved_first: bool = False
    alive: bool = True


# Game state for snapshots and game flow
class GameState(BaseModel):
    """Core game state - contains only actual state, no inputs.

    Moves are handled via explicit action types in
    chain_reaction.services.game.engine.actions, keeping state clean and
    serializable.
    """

    phase: GamePhase
    board: Board
    players: list[Player]
    ruleset: Ruleset
    player_order: list[int]
    turn_index: int = 0
    current_player_id: int
    winner: int | None = None
    turn_number: int = 0  # Accepted moves so far
    event_seq: int = 0  # Next sequence number for events (monotonically increasing)

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.FINISHED


# Read-only views handed to the presentation layer
class CellView(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: int | None
    power: int


class PlayerView(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_id: int
    name: str
    color: str
    has_moved_first: bool
    alive: bool


class GameSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: int
    cols: int
    capacity: int
    grid: tuple[tuple[CellView, ...], ...]
    players: tuple[PlayerView, ...]
    player_order: tuple[int, ...]
    current_player_id: int
    alive_players: tuple[int, ...]
    game_over: bool
    winner: int | None
    turn_number: int
