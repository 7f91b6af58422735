"""REST endpoints for local games."""

import logging

from fastapi import APIRouter, HTTPException, Response, status

from chain_reaction.config import get_settings
from chain_reaction.schemas.game_engine import GameSnapshot
from chain_reaction.schemas.games import (
    CreateGameRequest,
    CreateGameResponse,
    MoveRequest,
    MoveResponse,
)
from chain_reaction.services.game.session import Game
from chain_reaction.services.game.start_game import build_game_settings
from chain_reaction.services.game.store import get_game_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["games"])


def _get_game_or_404(game_id: str) -> Game:
    game = get_game_store().get_game(game_id)
    if game is None:
        logger.warning("Game %s not found", game_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game not found",
        )
    return game


@router.post("", response_model=CreateGameResponse, status_code=status.HTTP_201_CREATED)
def create_game(request: CreateGameRequest):
    """Create a new game.

    Omitted options fall back to the board-size table (rows/cols) and to
    the application settings (capacity, ruleset flag). A full store makes
    room by dropping a finished or the least recently used game.

    Args:
        request: Game creation parameters (player_count: 2-4).

    Returns:
        CreateGameResponse with the game id, initial snapshot and opening events.

    Raises:
        HTTPException 422: If the settings are invalid (e.g. board too small).
    """
    settings = get_settings()
    logger.info("POST /games - player_count: %d", request.player_count)

    try:
        game_settings = build_game_settings(
            request.player_count,
            rows=request.rows,
            cols=request.cols,
            capacity=request.capacity or settings.DEFAULT_CAPACITY,
            seed=request.seed,
            explode_on_conversion_at_threshold=(
                request.explode_on_conversion_at_threshold
                if request.explode_on_conversion_at_threshold is not None
                else settings.EXPLODE_ON_CONVERSION_AT_THRESHOLD
            ),
        )
        result = get_game_store().create_game(game_settings)
    except ValueError as e:
        logger.warning("Game creation rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    return CreateGameResponse(
        game_id=result.game_id,
        snapshot=result.game.snapshot(),
        events=result.game.opening_events,
    )


@router.get("/{game_id}", response_model=GameSnapshot)
def get_game(game_id: str):
    """Return the current snapshot of a game."""
    return _get_game_or_404(game_id).snapshot()


@router.post("/{game_id}/moves", response_model=MoveResponse)
def apply_move(game_id: str, request: MoveRequest):
    """Apply a move for the given player.

    Rejected moves (wrong turn, illegal cell, off the board, game over) are
    returned with accepted=false and a reason; the game is left unchanged.
    """
    game = _get_game_or_404(game_id)
    logger.info(
        "POST /games/%s/moves - player: %d, cell: (%d, %d)",
        game_id,
        request.player_id,
        request.row,
        request.col,
    )

    with get_game_store().lock:
        result = game.apply_move(request.player_id, request.row, request.col)
        snapshot = game.snapshot()

    if not result.accepted:
        logger.info("Move rejected for game %s: %s", game_id, result.reason)

    return MoveResponse(
        accepted=result.accepted,
        reason=result.reason,
        error_message=result.error_message,
        events=result.events,
        snapshot=snapshot,
    )


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: str):
    """Discard a game."""
    if not get_game_store().delete_game(game_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Game not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
