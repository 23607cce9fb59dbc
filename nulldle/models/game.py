"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter feedback for a submitted guess."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class GameStatus(Enum):
    """Lifecycle state of a game session."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class LetterResult:
    """A single guessed letter and its evaluated status."""
    letter: str
    status: LetterStatus


@dataclass(frozen=True)
class Guess:
    """A complete five-letter attempt and its per-letter evaluation."""
    letters: Tuple[LetterResult, ...]

    def __post_init__(self):
        if len(self.letters) != 5:
            raise ValueError(f"A guess holds exactly 5 letters, got {len(self.letters)}")

    @property
    def word(self) -> str:
        return "".join(result.letter for result in self.letters)

    @property
    def is_correct(self) -> bool:
        return all(result.status is LetterStatus.CORRECT for result in self.letters)

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Letter/status pairs with the status as a string for JSON serialization."""
        return [(result.letter, result.status.value) for result in self.letters]


@dataclass
class GameState:
    """Read-only snapshot of a session handed to the view layer."""
    game_id: str
    status: str
    current_input: str
    max_attempts: int
    attempts_used: int
    is_over: bool
    has_won: bool
    guesses: List[str] = field(default_factory=list)
    guess_results: List[List[Tuple[str, str]]] = field(default_factory=list)
    error_message: Optional[str] = None
    answer: Optional[str] = None  # Only included when game is over
