"""
Game Configuration Constants Module

All game parameters are centralized here to enable easy modification.
"""

import os
from typing import Final

WORD_LENGTH: Final[int] = 5
"""
Number of letters in every target word and guess.
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

LEADERBOARD_SIZE: Final[int] = 5
"""
How many of the fastest completion times the stats summary reports.
"""

INVALID_WORD_MESSAGE: Final[str] = "Not a valid word! Try again."

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)
