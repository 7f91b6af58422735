"""Turn sequencing, elimination and win detection."""

import logging
import random

from chain_reaction.schemas.game_engine import Board, Player

from .board import cell_counts
from .exceptions import InvariantViolation

logger = logging.getLogger(__name__)


def create_player_order(num_players: int, rng: random.Random) -> list[int]:
    """Uniformly random permutation of player ids 0..num_players-1.

    ``random.Random.shuffle`` is a Fisher-Yates shuffle; passing a seeded
    generator makes the order reproducible.
    """
    order = list(range(num_players))
    rng.shuffle(order)
    logger.debug("Player order generated: %s", order)
    return order


def setup_complete(players: list[Player]) -> bool:
    """True once every player has made their first placement."""
    return all(player.has_moved_first for player in players)


def check_eliminations(board: Board, players: list[Player]) -> tuple[list[Player], list[int]]:
    """Mark players that own no cells as eliminated.

    Nobody can be eliminated until every player has placed their first
    tile. Elimination is permanent.

    Args:
        board: Board after the cascade has settled.
        players: Current players.

    Returns:
        Tuple of (updated players, ids newly eliminated by this check).
    """
    if not setup_complete(players):
        logger.debug("Elimination check skipped: setup phase still running")
        return players, []

    counts = cell_counts(board)
    updated: list[Player] = []
    eliminated: list[int] = []
    for player in players:
        owned = counts.get(player.player_id, 0)
        if player.alive and owned == 0:
            logger.info("Player eliminated: player=%d", player.player_id)
            eliminated.append(player.player_id)
            updated.append(player.model_copy(update={"alive": False}))
        else:
            updated.append(player)

    return updated, eliminated


def check_win_condition(players: list[Player]) -> int | None:
    """Return the winner's id if exactly one player is still alive."""
    alive = [player.player_id for player in players if player.alive]
    logger.debug("Win check: alive=%s", alive)
    if len(alive) == 1:
        logger.info("Winner detected: player=%d", alive[0])
        return alive[0]
    return None


def get_next_turn(
    turn_index: int,
    player_order: list[int],
    players: list[Player],
) -> tuple[int, int]:
    """Advance the turn cursor to the next live player.

    Args:
        turn_index: Current cursor into player_order.
        player_order: Fixed turn order of player ids.
        players: Players with their alive flags.

    Returns:
        Tuple of (new turn_index, player id whose turn it is).

    Raises:
        InvariantViolation: If no live player exists.
    """
    alive = {player.player_id for player in players if player.alive}
    num_players = len(player_order)

    index = turn_index
    for _ in range(num_players):
        index = (index + 1) % num_players
        candidate = player_order[index]
        if candidate in alive:
            logger.debug(
                "Turn order calculation: current_index=%d, next_index=%d, next_player=%d",
                turn_index,
                index,
                candidate,
            )
            return index, candidate
        logger.debug("Skipping eliminated player=%d", candidate)

    logger.error("No live player to advance to: order=%s", player_order)
    raise InvariantViolation("No player is alive to take the next turn")
