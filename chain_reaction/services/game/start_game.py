import logging
import random

from chain_reaction.schemas.game_engine import (
    GamePhase,
    GameSettings,
    GameState,
    Player,
    PlayerAttributes,
    Ruleset,
)
from chain_reaction.services.game.engine import create_empty_board, create_player_order

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 4

# Seat colors and names, indexed by player id
DEFAULT_PLAYER_ATTRIBUTES = [
    PlayerAttributes(name="Red", color="#FF0000"),
    PlayerAttributes(name="Green", color="#00FF00"),
    PlayerAttributes(name="Blue", color="#0000FF"),
    PlayerAttributes(name="Yellow", color="#FFFF00"),
]

# Board dimensions (rows, cols) used when a game is created without explicit size
BOARD_SIZES: dict[int, tuple[int, int]] = {
    2: (6, 6),
    3: (7, 7),
    4: (8, 8),
}


def validate_game_settings(game_settings: GameSettings) -> None:
    """Validate game settings before initializing a game."""
    if not MIN_PLAYERS <= game_settings.num_players <= MAX_PLAYERS:
        raise ValueError(
            f"Between {MIN_PLAYERS} and {MAX_PLAYERS} players are required, "
            f"got {game_settings.num_players}."
        )
    if game_settings.rows < 1 or game_settings.cols < 1:
        raise ValueError("Board must have at least one row and one column.")
    if game_settings.rows * game_settings.cols < game_settings.num_players:
        raise ValueError("Board needs at least one cell per player.")

    if game_settings.player_attributes is None:
        return

    if len(game_settings.player_attributes) != game_settings.num_players:
        raise ValueError("Number of player attributes must match the number of players.")

    # Ensure each player has a unique name and color
    player_names: set[str] = set()
    player_colors: set[str] = set()
    for player in game_settings.player_attributes:
        if player.name in player_names:
            raise ValueError(f"Duplicate player name found: {player.name}")
        if player.color in player_colors:
            raise ValueError(f"Duplicate player color found: {player.color}")
        player_names.add(player.name)
        player_colors.add(player.color)


def build_game_settings(
    num_players: int,
    rows: int | None = None,
    cols: int | None = None,
    capacity: int = 4,
    seed: int | None = None,
    explode_on_conversion_at_threshold: bool = False,
) -> GameSettings:
    """Build GameSettings, filling in the board size from BOARD_SIZES.

    Raises:
        ValueError: If no default size exists for num_players and none was given.
    """
    if rows is None or cols is None:
        if num_players not in BOARD_SIZES:
            raise ValueError(f"No default board size for {num_players} players.")
        default_rows, default_cols = BOARD_SIZES[num_players]
        rows = default_rows if rows is None else rows
        cols = default_cols if cols is None else cols

    return GameSettings(
        num_players=num_players,
        rows=rows,
        cols=cols,
        ruleset=Ruleset(
            capacity=capacity,
            explode_on_conversion_at_threshold=explode_on_conversion_at_threshold,
        ),
        seed=seed,
    )


def _initialize_players(game_settings: GameSettings) -> list[Player]:
    """Initialize players; ids follow seat order, turn order is shuffled separately."""
    attributes = game_settings.player_attributes or DEFAULT_PLAYER_ATTRIBUTES

    return [
        Player(
            player_id=index,
            name=attributes[index].name,
            color=attributes[index].color,
        )
        for index in range(game_settings.num_players)
    ]


def initialize_game(game_settings: GameSettings) -> GameState:
    """
    Validate game settings and return an initialized GameState.

    Args:
        game_settings: The settings for the game including number of players,
                      board size, ruleset and an optional seed for the turn order.

    Returns:
        An initialized GameState waiting for the first player's move.

    Raises:
        ValueError: If game settings are invalid.
    """
    validate_game_settings(game_settings)

    rng = random.Random(game_settings.seed)
    player_order = create_player_order(game_settings.num_players, rng)
    players = _initialize_players(game_settings)
    board = create_empty_board(
        game_settings.rows,
        game_settings.cols,
        game_settings.ruleset.capacity,
    )

    logger.info(
        "Game initialized: players=%d, board=%dx%d, capacity=%d, order=%s",
        game_settings.num_players,
        game_settings.rows,
        game_settings.cols,
        game_settings.ruleset.capacity,
        player_order,
    )

    return GameState(
        phase=GamePhase.IN_PROGRESS,
        board=board,
        players=players,
        ruleset=game_settings.ruleset,
        player_order=player_order,
        turn_index=0,
        current_player_id=player_order[0],
    )
