"""Board geometry and queries.

The board is a passive store: these helpers read it, and only the cascade
and placement logic write cell fields.
"""

import logging
from collections.abc import Iterator

from chain_reaction.schemas.game_engine import Board, Cell

from .exceptions import OutOfBounds

logger = logging.getLogger(__name__)

# Orthogonal offsets in the order neighbours are visited: up, down, left, right
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def create_empty_board(rows: int, cols: int, capacity: int) -> Board:
    """Create a rows x cols board with every cell unowned and at zero power."""
    logger.debug("Creating empty board: rows=%d, cols=%d, capacity=%d", rows, cols, capacity)
    return Board(
        rows=rows,
        cols=cols,
        capacity=capacity,
        cells=[[Cell() for _ in range(cols)] for _ in range(rows)],
    )


def in_bounds(board: Board, row: int, col: int) -> bool:
    return 0 <= row < board.rows and 0 <= col < board.cols


def get_cell(board: Board, row: int, col: int) -> Cell:
    """Return the cell at (row, col).

    Raises:
        OutOfBounds: If the coordinate lies outside the grid.
    """
    if not in_bounds(board, row, col):
        raise OutOfBounds(row, col, board.rows, board.cols)
    return board.cells[row][col]


def neighbors(board: Board, row: int, col: int) -> list[tuple[int, int]]:
    """Existing orthogonal neighbours of (row, col).

    Corners have 2, edges 3 and interior cells 4.

    Raises:
        OutOfBounds: If (row, col) itself lies outside the grid.
    """
    if not in_bounds(board, row, col):
        raise OutOfBounds(row, col, board.rows, board.cols)
    return [
        (row + dr, col + dc)
        for dr, dc in NEIGHBOR_OFFSETS
        if in_bounds(board, row + dr, col + dc)
    ]


def capacity(board: Board, row: int, col: int) -> int:
    """Power at which the cell at (row, col) explodes.

    Uniform across the board; position-dependent thresholds would go here.
    """
    return board.capacity


def iter_positions(board: Board) -> Iterator[tuple[int, int]]:
    """Yield every coordinate in row-major order."""
    for row in range(board.rows):
        for col in range(board.cols):
            yield row, col


def owned_cells(board: Board, player_id: int) -> list[tuple[int, int]]:
    return [
        (row, col)
        for row, col in iter_positions(board)
        if board.cells[row][col].owner == player_id
    ]


def cell_counts(board: Board) -> dict[int, int]:
    """Number of owned cells per player (players owning nothing are absent)."""
    counts: dict[int, int] = {}
    for row, col in iter_positions(board):
        owner = board.cells[row][col].owner
        if owner is not None:
            counts[owner] = counts.get(owner, 0) + 1
    return counts


def total_power(board: Board) -> int:
    return sum(cell.power for row in board.cells for cell in row)
