"""Main entry point for game action processing.

This module provides the primary interface for processing game actions:
- process_action(): Validates and applies a placement, resolves the cascade,
  checks elimination and victory, and advances the turn
- process_start_game(): Announces a freshly initialized game
- Returns ProcessResult with new state and events
"""

import logging

from chain_reaction.schemas.game_engine import GamePhase, GameState

from .actions import GameAction, PlaceAction
from .cascade import resolve_cascade
from .events import (
    AnyGameEvent,
    GameEnded,
    GameStarted,
    PlayerEliminated,
    TilePlaced,
    TurnEnded,
    TurnStarted,
)
from .turns import check_eliminations, check_win_condition, get_next_turn
from .validation import ProcessResult, validate_action

logger = logging.getLogger(__name__)


def process_action(
    state: GameState,
    action: GameAction,
    player_id: int,
) -> ProcessResult:
    """Process a game action and return the result.

    This is the main entry point for all game actions. It:
    1. Validates the action is legal given current state
    2. Applies it to a copy of the state (the input is never mutated)
    3. Assigns sequence numbers to events
    4. Returns ProcessResult with new state and events

    Args:
        state: Current game state.
        action: The action to process.
        player_id: The player attempting the action.

    Returns:
        ProcessResult containing:
        - success: Whether the action was processed successfully
        - state: The new game state (if successful)
        - events: List of events that occurred (with seq numbers)
        - error_code/error_message: Error details (if failed)

    Example:
        >>> result = process_action(state, PlaceAction(row=2, col=3), player_id)
        >>> if result.success:
        ...     new_state = result.state
        ...     for event in result.events:
        ...         animate(event)  # event.seq is set
        ... else:
        ...     show_error(result.error_code, result.error_message)
    """
    action_type = type(action).__name__
    logger.info(
        "Processing action: type=%s, player=%d, turn=%d",
        action_type,
        player_id,
        state.turn_number,
    )
    logger.debug("Action details: %s", action)

    validation = validate_action(state, action, player_id)
    if not validation.is_valid:
        logger.warning(
            "Action validation failed: code=%s, message=%s, player=%d, action=%s",
            validation.error_code,
            validation.error_message,
            player_id,
            action_type,
        )
        return ProcessResult.failure(
            validation.error_code or "VALIDATION_ERROR",
            validation.error_message or "Invalid action",
        )

    if isinstance(action, PlaceAction):
        result = process_place(state, action.row, action.col, player_id)
    else:
        logger.error("Unknown action type received: %s", action_type)
        return ProcessResult.failure(
            "UNKNOWN_ACTION",
            f"Unknown action type: {type(action).__name__}",
        )

    result = _assign_event_sequences(result)
    logger.info(
        "Action processed successfully: type=%s, player=%d, events_generated=%d",
        action_type,
        player_id,
        len(result.events),
    )
    logger.debug("Generated events: %s", [type(e).__name__ for e in result.events])
    return result


def process_place(state: GameState, row: int, col: int, player_id: int) -> ProcessResult:
    """Place or reinforce a tile and resolve everything that follows.

    Expects an already validated move.

    Args:
        state: Current game state.
        row: Target row.
        col: Target column.
        player_id: The moving player.

    Returns:
        ProcessResult with the settled state and events.
    """
    new_state = state.model_copy(deep=True)
    board = new_state.board
    cell = board.cells[row][col]
    player = next(p for p in new_state.players if p.player_id == player_id)
    events: list[AnyGameEvent] = []

    first_move = not player.has_moved_first
    if first_move:
        cell.owner = player_id
        cell.power = new_state.ruleset.first_move_power
        player.has_moved_first = True
    else:
        cell.power += 1

    logger.debug(
        "Tile placed: player=%d, cell=(%d, %d), power=%d, first_move=%s",
        player_id,
        row,
        col,
        cell.power,
        first_move,
    )
    events.append(
        TilePlaced(
            player_id=player_id,
            row=row,
            col=col,
            power=cell.power,
            first_move=first_move,
        )
    )

    cascade = resolve_cascade(board, new_state.ruleset)
    events.extend(cascade.events)
    if cascade.dequeues:
        logger.info(
            "Cascade resolved: player=%d, explosions=%d, waves=%d",
            player_id,
            cascade.dequeues,
            cascade.waves,
        )

    players, eliminated = check_eliminations(board, new_state.players)
    events.extend(PlayerEliminated(player_id=pid) for pid in eliminated)

    update: dict = {
        "players": players,
        "turn_number": new_state.turn_number + 1,
    }

    winner = check_win_condition(players)
    if winner is not None:
        logger.info("Game finished: winner=%d, turns=%d", winner, update["turn_number"])
        events.append(GameEnded(winner_id=winner))
        update["phase"] = GamePhase.FINISHED
        update["winner"] = winner
    else:
        turn_index, next_player_id = get_next_turn(
            new_state.turn_index, new_state.player_order, players
        )
        events.append(TurnEnded(player_id=player_id, next_player_id=next_player_id))
        events.append(TurnStarted(player_id=next_player_id, turn_number=update["turn_number"]))
        update["turn_index"] = turn_index
        update["current_player_id"] = next_player_id

    return ProcessResult.ok(new_state.model_copy(update=update), events)


def process_start_game(state: GameState) -> ProcessResult:
    """Announce a freshly initialized game.

    Args:
        state: State returned by initialize_game().

    Returns:
        ProcessResult with the unchanged state and the opening events.
    """
    logger.info("Starting game with %d players", len(state.players))
    events: list[AnyGameEvent] = [
        GameStarted(
            player_order=list(state.player_order),
            first_player_id=state.current_player_id,
            rows=state.board.rows,
            cols=state.board.cols,
        ),
        TurnStarted(player_id=state.current_player_id, turn_number=state.turn_number),
    ]
    logger.info(
        "Game started: first_player=%d, player_order=%s",
        state.current_player_id,
        state.player_order,
    )
    return _assign_event_sequences(ProcessResult.ok(state, events))


def _assign_event_sequences(result: ProcessResult) -> ProcessResult:
    """Assign monotonically increasing sequence numbers to events.

    Updates each event's seq field and increments the state's event_seq counter.
    """
    if result.state is None or not result.events:
        return result

    current_seq = result.state.event_seq
    for event in result.events:
        event.seq = current_seq
        current_seq += 1

    new_state = result.state.model_copy(update={"event_seq": current_seq})

    return ProcessResult.ok(new_state, result.events)
