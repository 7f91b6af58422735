"""Explosion cascade resolution.

Drains every over-capacity cell with a wave-labelled breadth-first sweep:
- Wave 0 is every armed cell found in a row-major scan
- A cell armed by a wave-N explosion explodes in wave N+1
- Exploding resets the cell and gives each existing neighbour +1 power and
  the exploding owner (capturing opponent cells)
"""

import logging
from collections import deque
from dataclasses import dataclass, field

from chain_reaction.schemas.game_engine import Board, Position, Ruleset

from .board import capacity, iter_positions, neighbors
from .events import CascadeEvent, CellCharged, CellExploded
from .exceptions import InvariantViolation

logger = logging.getLogger(__name__)


@dataclass
class CascadeResult:
    """Result of draining a board to quiescence."""

    events: list[CascadeEvent] = field(default_factory=list)
    dequeues: int = 0
    waves: int = 0


def dequeue_limit(board: Board) -> int:
    """Hard cap on explosions in one cascade before it is treated as a defect."""
    return board.rows * board.cols * board.capacity * (board.rows + board.cols)


def resolve_cascade(
    board: Board,
    ruleset: Ruleset,
    max_dequeues: int | None = None,
) -> CascadeResult:
    """Explode cells until no cell is at or above capacity.

    Mutates ``board`` in place; callers pass a working copy so a state they
    already hold is never touched.

    A cell waiting in the queue is never queued twice. If it is charged
    again before its turn comes, it explodes once and its whole power is
    reset.

    With ``ruleset.explode_on_conversion_at_threshold`` set, a cell captured
    from another player whose power lands exactly one below capacity is
    armed as well.

    Args:
        board: Board to stabilise (mutated).
        ruleset: Rules in effect for this game.
        max_dequeues: Explosion budget; defaults to dequeue_limit(board).

    Returns:
        CascadeResult with explosion/charge events in resolution order.

    Raises:
        InvariantViolation: If the budget is exhausted.
    """
    limit = max_dequeues if max_dequeues is not None else dequeue_limit(board)
    result = CascadeResult()

    queue: deque[tuple[int, int, int]] = deque()
    armed: set[tuple[int, int]] = set()

    for row, col in iter_positions(board):
        if board.cells[row][col].power >= capacity(board, row, col):
            queue.append((row, col, 0))
            armed.add((row, col))

    if not queue:
        return result

    logger.debug("Cascade starting: %d cell(s) armed in wave 0", len(queue))

    while queue:
        if result.dequeues >= limit:
            logger.error(
                "Cascade exceeded %d explosions with %d still queued",
                limit,
                len(queue),
            )
            raise InvariantViolation(f"Cascade did not settle within {limit} explosions")

        row, col, wave = queue.popleft()
        armed.discard((row, col))
        result.dequeues += 1
        result.waves = max(result.waves, wave + 1)

        cell = board.cells[row][col]
        exploding_owner = cell.owner
        released = cell.power
        cell.power = 0
        cell.owner = None

        logger.debug(
            "Explosion: cell=(%d, %d), wave=%d, owner=%s, power=%d",
            row,
            col,
            wave,
            exploding_owner,
            released,
        )
        result.events.append(
            CellExploded(
                row=row,
                col=col,
                wave=wave,
                player_id=exploding_owner,
                power=released,
            )
        )

        source = Position(row=row, col=col)
        for nr, nc in neighbors(board, row, col):
            neighbor = board.cells[nr][nc]
            previous_owner = neighbor.owner
            threshold = capacity(board, nr, nc)

            neighbor.power += 1
            neighbor.owner = exploding_owner
            changed_hands = previous_owner != exploding_owner

            should_arm = neighbor.power >= threshold
            if (
                ruleset.explode_on_conversion_at_threshold
                and previous_owner is not None
                and changed_hands
                and neighbor.power == threshold - 1
            ):
                should_arm = True

            newly_armed = should_arm and (nr, nc) not in armed
            if newly_armed:
                queue.append((nr, nc, wave + 1))
                armed.add((nr, nc))

            result.events.append(
                CellCharged(
                    row=nr,
                    col=nc,
                    wave=wave,
                    player_id=exploding_owner,
                    power=neighbor.power,
                    previous_owner=previous_owner,
                    captured_from=source if changed_hands else None,
                    armed=newly_armed,
                )
            )

    logger.debug(
        "Cascade settled: explosions=%d, waves=%d",
        result.dequeues,
        result.waves,
    )
    return result
