"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameStatus, Guess, LetterResult, LetterStatus
from .stats import StatsSummary

__all__ = ['GameState', 'GameStatus', 'Guess', 'LetterResult', 'LetterStatus', 'StatsSummary']
