"""
Stats Service

Records completed games and aggregates win/loss counts, the average number
of guesses per game and the fastest-times leaderboard.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from ..config.game_settings import LEADERBOARD_SIZE
from ..exceptions import PersistenceError
from ..models.stats import StatsSummary

WINS_KEY = 'wins'
LOSSES_KEY = 'losses'
GAMES_KEY = 'games'
INCORRECT_KEY = 'incorrectGuesses'
DURATIONS_KEY = 'durations'

logger = logging.getLogger(__name__)


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class StatsService:
    """
    Append-only game statistics over an injected key-value store.

    Appends and reads share one lock, so a reader never observes the counters
    of a game whose log entries are not yet written.
    """

    def __init__(self, store, leaderboard_size: int = LEADERBOARD_SIZE):
        self.store = store
        self.leaderboard_size = leaderboard_size
        self._lock = threading.Lock()

    def record_result(self, won: bool, incorrect_guess_count: int) -> None:
        """
        Records the outcome of a game.

        Args:
            won: Whether the player found the word
            incorrect_guess_count: Guesses made during the game

        Raises:
            PersistenceError: If the backing store fails
        """
        with self._lock:
            self._apply(self._result_updates(won, incorrect_guess_count))

    def record_duration(self, duration_millis: int) -> None:
        """Appends the time taken to finish a game, in milliseconds."""
        with self._lock:
            self._apply(self._duration_updates(duration_millis))

    def record_game(self, won: bool, incorrect_guess_count: int, duration_millis: int) -> None:
        """
        Records outcome and duration of one completed game as a single append.

        Either every key is updated or, when the store fails part-way, the
        keys already written are put back to their previous values.
        """
        with self._lock:
            updates = self._result_updates(won, incorrect_guess_count)
            updates.update(self._duration_updates(duration_millis))
            self._apply(updates)

    def summary(self) -> StatsSummary:
        """
        Aggregates everything recorded so far.

        Raises:
            PersistenceError: If the backing store fails
        """
        with self._lock:
            wins = self._read_int(WINS_KEY)
            losses = self._read_int(LOSSES_KEY)
            games = self._read_int(GAMES_KEY)
            incorrect = self._read_list(INCORRECT_KEY)
            durations = self._read_list(DURATIONS_KEY)

        average = sum(incorrect) / len(incorrect) if incorrect else 0.0
        top_durations = sorted(durations)[:self.leaderboard_size]

        return StatsSummary(
            wins=wins,
            losses=losses,
            games_played=games,
            average_incorrect_guesses=average,
            top_durations=top_durations,
            top_durations_seconds=[duration / 1000 for duration in top_durations]
        )

    def _result_updates(self, won: bool, incorrect_guess_count: int) -> Dict[str, Any]:
        counter_key = WINS_KEY if won else LOSSES_KEY
        incorrect = self._read_list(INCORRECT_KEY)
        incorrect.append(int(incorrect_guess_count))
        return {
            counter_key: self._read_int(counter_key) + 1,
            GAMES_KEY: self._read_int(GAMES_KEY) + 1,
            INCORRECT_KEY: incorrect,
        }

    def _duration_updates(self, duration_millis: int) -> Dict[str, Any]:
        durations = self._read_list(DURATIONS_KEY)
        durations.append(int(duration_millis))
        return {DURATIONS_KEY: durations}

    def _apply(self, updates: Dict[str, Any]) -> None:
        previous = {key: self._read(key) for key in updates}
        written = []
        try:
            for key, value in updates.items():
                self._write(key, value)
                written.append(key)
        except PersistenceError:
            for key in reversed(written):
                try:
                    self.store.set(key, previous[key])
                except Exception as e:
                    logger.error("Could not restore '%s' after a failed write: %s", key, e)
            raise

    def _read(self, key: str) -> Any:
        try:
            return self.store.get(key)
        except Exception as e:
            raise PersistenceError(f"Failed to read '{key}': {e}") from e

    def _write(self, key: str, value: Any) -> None:
        try:
            self.store.set(key, value)
        except Exception as e:
            raise PersistenceError(f"Failed to write '{key}': {e}") from e

    def _read_int(self, key: str) -> int:
        return _as_int(self._read(key))

    def _read_list(self, key: str) -> List[int]:
        values = self._read(key)
        if values is None:
            return []
        if not isinstance(values, (list, tuple)):
            raise PersistenceError(f"Stored '{key}' is not a list: {values!r}")
        # Older stores keep every entry as a string
        return [_as_int(value) for value in values]


# Global service instance
_stats_service = None


def get_stats_service() -> Optional[StatsService]:
    """Get the global stats service instance."""
    return _stats_service


def initialize_stats_service(store, leaderboard_size: int = LEADERBOARD_SIZE) -> StatsService:
    """Initialize the global stats service instance."""
    global _stats_service
    _stats_service = StatsService(store, leaderboard_size)
    return _stats_service
