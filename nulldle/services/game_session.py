"""
Game Session

State machine for a single game: target word, guess history, current input
and the win/loss outcome. A session is owned by one caller and is not
thread-safe.
"""

import logging
import time
from typing import Callable, List, Optional, Tuple

from ..config.game_settings import INVALID_WORD_MESSAGE, MAX_ATTEMPTS, WORD_LENGTH
from ..exceptions import InvalidWordError, PersistenceError
from ..models.game import GameState, GameStatus, Guess
from .dictionary import Dictionary, normalize_word
from .scorer import evaluate

logger = logging.getLogger(__name__)

Listener = Callable[["GameSession"], None]


def _now_millis() -> int:
    return int(time.monotonic() * 1000)


class GameSession:
    """
    One Wordle game.

    The writable surface is update_current_input, submit_guess,
    start_new_game and set_custom_word. Every one of them notifies the
    registered listeners once it changed the session.
    """

    def __init__(self, dictionary: Dictionary, stats=None, target_word: Optional[str] = None,
                 clock: Callable[[], int] = _now_millis):
        self.dictionary = dictionary
        self.stats = stats
        self._clock = clock
        self._listeners: List[Listener] = []

        self._target_word = ""
        self._guesses: List[Guess] = []
        self._current_input = ""
        self._status = GameStatus.IN_PROGRESS
        self._error_message: Optional[str] = None
        self._started_at = 0

        if target_word is not None and self._accepts_target(target_word):
            self._reset(normalize_word(target_word))
        else:
            self._reset(self.dictionary.random_word())

    # Observers

    @property
    def target_word(self) -> str:
        return self._target_word

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def current_input(self) -> str:
        return self._current_input

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def has_won(self) -> bool:
        return self._status is GameStatus.WON

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def started_at(self) -> int:
        return self._started_at

    @property
    def attempts_remaining(self) -> int:
        return MAX_ATTEMPTS - len(self._guesses)

    def snapshot(self, game_id: str) -> GameState:
        """Builds the view-layer state, revealing the answer only once the game is over."""
        return GameState(
            game_id=game_id,
            status=self._status.value,
            current_input=self._current_input,
            max_attempts=MAX_ATTEMPTS,
            attempts_used=len(self._guesses),
            is_over=self.is_over,
            has_won=self.has_won,
            guesses=[guess.word for guess in self._guesses],
            guess_results=[guess.as_pairs() for guess in self._guesses],
            error_message=self._error_message,
            answer=self._target_word if self.is_over else None
        )

    # Listeners

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("State listener %r failed", listener)

    # Operations

    def update_current_input(self, text: str) -> None:
        """
        Replaces the letters typed so far. Ignored once the game is over or
        when the text is longer than a word.
        """
        if self.is_over:
            return
        if len(text) > WORD_LENGTH:
            return
        self._current_input = text.lower()
        self._notify()

    def submit_guess(self) -> Optional[Guess]:
        """
        Scores the current input and advances the game.

        Returns:
            The evaluated Guess, or None when the game is over or the input
            is not a complete word

        Raises:
            InvalidWordError: If the input is not in the dictionary. The
                guesses and the current input are left untouched.
        """
        if self.is_over:
            return None
        if len(self._current_input) != WORD_LENGTH:
            return None

        word = normalize_word(self._current_input)
        if not self.dictionary.is_valid(word):
            self._error_message = INVALID_WORD_MESSAGE
            self._notify()
            raise InvalidWordError(word, INVALID_WORD_MESSAGE)

        self._error_message = None
        guess = evaluate(self._target_word, word)
        self._guesses.append(guess)
        self._current_input = ""

        if word == self._target_word:
            self._status = GameStatus.WON
        elif len(self._guesses) >= MAX_ATTEMPTS:
            self._status = GameStatus.LOST

        if self.is_over:
            self._record_completed_game()

        self._notify()
        return guess

    def start_new_game(self) -> None:
        """Starts over with a random target word."""
        self._reset(self.dictionary.random_word())
        self._notify()

    def reset_game(self) -> None:
        self.start_new_game()

    def set_custom_word(self, word: str) -> bool:
        """
        Starts over with a chosen target word.

        Returns:
            True if the word was accepted, False if it is not a dictionary
            word of the right length (the session is then left as it was)
        """
        if not self._accepts_target(word):
            return False
        self._reset(normalize_word(word))
        self._notify()
        return True

    def _accepts_target(self, word: str) -> bool:
        normalized = normalize_word(word)
        return len(normalized) == WORD_LENGTH and self.dictionary.is_valid(normalized)

    def _reset(self, target_word: str) -> None:
        self._target_word = target_word
        self._guesses = []
        self._current_input = ""
        self._status = GameStatus.IN_PROGRESS
        self._error_message = None
        self._started_at = self._clock()

    def _record_completed_game(self) -> None:
        if self.stats is None:
            return
        duration = self._clock() - self._started_at
        try:
            self.stats.record_game(self.has_won, len(self._guesses), duration)
        except PersistenceError as e:
            logger.warning("Could not save game statistics: %s", e)
