"""
Guess Scorer

Implements the Wordle letter evaluation algorithm.
"""

from collections import Counter
from typing import List, Optional

from ..models.game import Guess, LetterResult, LetterStatus


def evaluate(target: str, guess: str) -> Guess:
    """
    Scores a guess against the target word.

    Exact position matches are consumed first so that a letter repeated in
    the guess never earns more CORRECT/PRESENT marks than the target holds.

    Args:
        target: The hidden word
        guess: The submitted word, same length as the target

    Returns:
        Guess with one LetterResult per position
    """
    target = target.lower()
    guess = guess.lower()
    if len(target) != len(guess):
        raise ValueError(f"Guess '{guess}' and target differ in length")

    remaining = Counter(target)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            statuses[i] = LetterStatus.CORRECT
            remaining[letter] -= 1

    # Second pass: present letters and misses, in index order
    for i, letter in enumerate(guess):
        if statuses[i] is not None:
            continue
        if remaining[letter] > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[letter] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return Guess(tuple(LetterResult(letter, status) for letter, status in zip(guess, statuses)))
