"""
Dictionary Service

Holds the set of valid five-letter words, answers membership queries and
supplies random target words.
"""

import logging
import os
import random
from typing import IO, Iterable, Iterator, List, Optional, Union

from ..config.game_settings import WORD_LENGTH
from ..exceptions import EmptyDictionaryError, LoadError

logger = logging.getLogger(__name__)


def normalize_word(word: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return word.strip().lower()


class Dictionary:
    """
    Valid word list for the game.

    Words keep the order of their source for random selection, while
    membership tests go through a backing set.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, rng: Optional[random.Random] = None):
        self._words: List[str] = []
        self._lookup = set()
        self._rng = rng or random.Random()

        for word in words or ():
            normalized = normalize_word(word)
            if len(normalized) != WORD_LENGTH:
                continue
            self._words.append(normalized)
            self._lookup.add(normalized)

    @classmethod
    def from_words(cls, words: Iterable[str], rng: Optional[random.Random] = None) -> "Dictionary":
        """Builds a dictionary from an in-memory word list."""
        return cls(words, rng=rng)

    @classmethod
    def load(cls, source: Union[str, "os.PathLike[str]", IO[str]],
             rng: Optional[random.Random] = None) -> "Dictionary":
        """
        Loads a newline-delimited word list.

        Args:
            source: Path to a UTF-8 text file, or an already opened text stream
            rng: Optional random generator used by random_word()

        Returns:
            Dictionary holding every five-letter entry of the source

        Raises:
            LoadError: If the source cannot be read or decoded
        """
        try:
            if hasattr(source, 'read'):
                content = source.read()
            else:
                with open(source, 'r', encoding='utf-8') as f:
                    content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Unable to read word list {source!r}: {e}") from e

        if not isinstance(content, str):
            raise LoadError(f"Word list {source!r} did not produce text")

        dictionary = cls(content.splitlines(), rng=rng)
        logger.info("Loaded %d words from %r", len(dictionary), source)
        return dictionary

    def is_valid(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return normalize_word(word) in self._lookup

    def random_word(self) -> str:
        """
        Picks a uniformly random entry.

        Raises:
            EmptyDictionaryError: If the dictionary holds no words
        """
        if not self._words:
            raise EmptyDictionaryError("Cannot pick a random word from an empty dictionary")
        return self._rng.choice(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)
