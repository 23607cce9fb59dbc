"""
Statistics Data Models

Contains the aggregate view of completed games.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class StatsSummary:
    """Aggregated win/loss counts and the fastest-times leaderboard."""
    wins: int = 0
    losses: int = 0
    games_played: int = 0
    average_incorrect_guesses: float = 0.0
    top_durations: List[int] = field(default_factory=list)  # milliseconds, ascending
    top_durations_seconds: List[float] = field(default_factory=list)
