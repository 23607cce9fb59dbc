"""
Game Service

Keeps one GameSession per game id and wires every session to the shared
stats service.
"""

import threading
import uuid
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional

from ..models.game import GameState
from .dictionary import Dictionary
from .game_session import GameSession


class GameService:
    """
    Session registry used by the HTTP controllers and WebSocket handlers.

    This class handles:
    - Game session management with unique game IDs
    - Per-game locking, since a GameSession only supports one caller at a time
    - State snapshots that keep the answer hidden until the game is over
    """

    def __init__(self, dictionary: Dictionary, stats=None):
        self.dictionary = dictionary
        self.stats = stats
        self.games: Dict[str, GameSession] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        self._session_listeners: list = []

    def add_session_listener(self, listener: Callable[[str, GameSession], None]) -> None:
        """Registers a callback invoked with (game_id, session) on every change of any session."""
        self._session_listeners.append(listener)

    def create_new_game(self, custom_word: Optional[str] = None) -> Optional[str]:
        """
        Creates a new game session.

        Args:
            custom_word: Optional target word; a random one is chosen otherwise

        Returns:
            str: Unique game ID, or None if the custom word was rejected
        """
        session = GameSession(self.dictionary, self.stats)
        if custom_word is not None and not session.set_custom_word(custom_word):
            return None

        game_id = str(uuid.uuid4())
        for listener in self._session_listeners:
            session.add_listener(lambda changed, listener=listener: listener(game_id, changed))

        with self._registry_lock:
            self.games[game_id] = session
            self._locks[game_id] = threading.Lock()
        return game_id

    @contextmanager
    def session(self, game_id: str) -> Iterator[Optional[GameSession]]:
        """
        Yields the session for a game while holding its lock, or None if the
        game does not exist.
        """
        with self._registry_lock:
            session = self.games.get(game_id)
            lock = self._locks.get(game_id)

        if session is None or lock is None:
            yield None
            return

        with lock:
            yield session

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        with self.session(game_id) as session:
            if session is None:
                return None
            return session.snapshot(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._registry_lock:
            if game_id in self.games:
                del self.games[game_id]
                self._locks.pop(game_id, None)
                return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Dictionary, stats=None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, stats)
    return _game_service
