"""
Nulldle Exceptions

Error taxonomy shared by the dictionary, the game session and the stats store.
"""


class NulldleError(Exception):
    """Base class for all game errors."""


class LoadError(NulldleError):
    """The word list source could not be read or parsed."""


class EmptyDictionaryError(NulldleError):
    """A random word was requested from a dictionary with no entries."""


class InvalidWordError(NulldleError):
    """A submitted guess is not in the dictionary."""

    def __init__(self, word: str, message: str = "Not a valid word! Try again."):
        super().__init__(message)
        self.word = word
        self.message = message


class PersistenceError(NulldleError):
    """Statistics could not be read from or written to the backing store."""
