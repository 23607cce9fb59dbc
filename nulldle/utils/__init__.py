"""
Utilities Package

Contains utility modules.
"""

from .game_logger import game_logger

__all__ = ['game_logger']
