"""Legal placement calculation."""

from chain_reaction.schemas.game_engine import Board, Cell, Player, Position

from .board import iter_positions


def is_legal_placement(cell: Cell, player: Player) -> bool:
    """Determine whether ``player`` may place on ``cell``.

    A placement is legal if:
    - The player has not made a first move and the cell is unowned
    - The player has made a first move and already owns the cell
    """
    if not player.has_moved_first:
        return cell.owner is None
    return cell.owner == player.player_id


def get_legal_moves(board: Board, player: Player) -> list[Position]:
    """List every cell the player may place on, in row-major order."""
    return [
        Position(row=row, col=col)
        for row, col in iter_positions(board)
        if is_legal_placement(board.cells[row][col], player)
    ]


def has_any_legal_moves(board: Board, player: Player) -> bool:
    """Quick check if the player has any legal placement.

    Cheaper than get_legal_moves() when only existence matters.
    """
    return any(
        is_legal_placement(board.cells[row][col], player)
        for row, col in iter_positions(board)
    )
