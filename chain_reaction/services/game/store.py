"""In-memory registry of running games for the HTTP layer."""

import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass

from chain_reaction.config import get_settings
from chain_reaction.schemas.game_engine import GameSettings

from .session import Game

logger = logging.getLogger(__name__)


@dataclass
class CreateGameResult:
    """Result of create_game operation."""

    game_id: str
    game: Game
    evicted_game_id: str | None = None


class GameStore:
    """Keeps games in process memory, keyed by a random id.

    FastAPI runs sync endpoints on a thread pool, so access to the registry
    and to each game goes through one lock.

    Games are kept in least-recently-used order. When the store is full a
    new game replaces the oldest finished game, or the least recently used
    one if every game is still running.
    """

    def __init__(self, max_games: int):
        if max_games < 1:
            raise ValueError("max_games must be at least 1")
        self._max_games = max_games
        self._games: OrderedDict[str, Game] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id: str) -> bool:
        return game_id in self._games

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    def create_game(self, settings: GameSettings) -> CreateGameResult:
        """Start a new game and register it, evicting one if the store is full.

        Raises:
            ValueError: If the settings are invalid.
        """
        game = Game.from_settings(settings)
        game_id = str(uuid.uuid4())

        with self._lock:
            evicted_id = None
            if len(self._games) >= self._max_games:
                evicted_id = self._evict()
            self._games[game_id] = game

        logger.info("Game %s created (%d active)", game_id, len(self._games))
        return CreateGameResult(game_id=game_id, game=game, evicted_game_id=evicted_id)

    def _evict(self) -> str:
        # Caller holds the lock
        victim = next(
            (game_id for game_id, game in self._games.items() if game.game_over),
            next(iter(self._games)),
        )
        finished = self._games.pop(victim).game_over
        logger.info(
            "Game store full: evicted %s game %s",
            "finished" if finished else "least recently used",
            victim,
        )
        return victim

    def get_game(self, game_id: str) -> Game | None:
        with self._lock:
            game = self._games.get(game_id)
            if game is not None:
                self._games.move_to_end(game_id)
            return game

    def delete_game(self, game_id: str) -> bool:
        with self._lock:
            removed = self._games.pop(game_id, None) is not None
        if removed:
            logger.info("Game %s deleted", game_id)
        return removed

    def clear(self) -> None:
        with self._lock:
            count = len(self._games)
            self._games.clear()
        logger.debug("Game store cleared: %d game(s) dropped", count)


_game_store: GameStore | None = None


def get_game_store() -> GameStore:
    """Get the singleton GameStore instance."""
    global _game_store
    if _game_store is None:
        _game_store = GameStore(max_games=get_settings().MAX_ACTIVE_GAMES)
    return _game_store
