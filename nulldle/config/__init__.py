"""
Configuration Package

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_WORD_LIST_PATH, INVALID_WORD_MESSAGE, LEADERBOARD_SIZE, MAX_ATTEMPTS, WORD_LENGTH,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_ATTEMPTS', 'LEADERBOARD_SIZE', 'INVALID_WORD_MESSAGE',
    'DEFAULT_WORD_LIST_PATH'
]
