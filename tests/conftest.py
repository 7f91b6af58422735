"""Shared fixtures for game engine tests."""

import pytest

from chain_reaction.schemas.game_engine import (
    Board,
    Cell,
    GamePhase,
    GameState,
    Player,
    Ruleset,
)

# Fixed player ids for deterministic testing
PLAYER_0 = 0
PLAYER_1 = 1
PLAYER_2 = 2
PLAYER_3 = 3

PLAYER_NAMES = ["Red", "Green", "Blue", "Yellow"]
PLAYER_COLORS = ["#FF0000", "#00FF00", "#0000FF", "#FFFF00"]


def create_board(
    rows: int,
    cols: int,
    cells: dict[tuple[int, int], tuple[int, int]] | None = None,
    capacity: int = 4,
) -> Board:
    """Helper to create a board.

    Args:
        cells: Mapping of (row, col) -> (owner, power) for non-empty cells.
    """
    board = Board(
        rows=rows,
        cols=cols,
        capacity=capacity,
        cells=[[Cell() for _ in range(cols)] for _ in range(rows)],
    )
    for (row, col), (owner, power) in (cells or {}).items():
        board.cells[row][col] = Cell(owner=owner, power=power)
    return board


def create_player(player_id: int, has_moved_first: bool = True, alive: bool = True) -> Player:
    """Helper to create a player."""
    return Player(
        player_id=player_id,
        name=PLAYER_NAMES[player_id],
        color=PLAYER_COLORS[player_id],
        has_moved_first=has_moved_first,
        alive=alive,
    )


def create_state(
    board: Board,
    players: list[Player],
    player_order: list[int] | None = None,
    turn_index: int = 0,
    ruleset: Ruleset | None = None,
) -> GameState:
    """Helper to create an in-progress game state.

    The current player is player_order[turn_index].
    """
    if player_order is None:
        player_order = [p.player_id for p in players]
    if ruleset is None:
        ruleset = Ruleset(capacity=board.capacity)
    return GameState(
        phase=GamePhase.IN_PROGRESS,
        board=board,
        players=players,
        ruleset=ruleset,
        player_order=player_order,
        turn_index=turn_index,
        current_player_id=player_order[turn_index],
    )


def board_cells(state: GameState) -> list[list[tuple[int | None, int]]]:
    """Grid of (owner, power) pairs for compact assertions."""
    return [[(cell.owner, cell.power) for cell in row] for row in state.board.cells]


@pytest.fixture
def two_player_new_game() -> GameState:
    """Two-player 1x2 game where nobody has placed yet, player 0 to move."""
    return create_state(
        create_board(1, 2),
        [
            create_player(PLAYER_0, has_moved_first=False),
            create_player(PLAYER_1, has_moved_first=False),
        ],
    )


@pytest.fixture
def two_player_midgame() -> GameState:
    """Two-player 3x3 game after setup, player 0 to move.

    Player 0 owns (0, 0) with power 2 and (1, 1) with power 3;
    player 1 owns (2, 2) with power 1 and (1, 2) with power 2.
    """
    board = create_board(
        3,
        3,
        {
            (0, 0): (PLAYER_0, 2),
            (1, 1): (PLAYER_0, 3),
            (2, 2): (PLAYER_1, 1),
            (1, 2): (PLAYER_1, 2),
        },
    )
    return create_state(board, [create_player(PLAYER_0), create_player(PLAYER_1)])


@pytest.fixture
def four_player_midgame() -> GameState:
    """Four-player 4x4 game after setup, turn order [2, 0, 3, 1], player 2 to move.

    Every player owns one corner at power 1, except player 3 who owns two cells.
    """
    board = create_board(
        4,
        4,
        {
            (0, 0): (PLAYER_0, 1),
            (0, 3): (PLAYER_1, 1),
            (3, 0): (PLAYER_2, 1),
            (3, 3): (PLAYER_3, 1),
            (2, 3): (PLAYER_3, 1),
        },
    )
    players = [create_player(pid) for pid in (PLAYER_0, PLAYER_1, PLAYER_2, PLAYER_3)]
    return create_state(board, players, player_order=[2, 0, 3, 1])
