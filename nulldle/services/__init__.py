"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import Dictionary
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .kv_store import InMemoryKeyValueStore, MongoKeyValueStore
from .scorer import evaluate
from .stats_service import StatsService, get_stats_service, initialize_stats_service

__all__ = [
    'Dictionary', 'evaluate', 'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service',
    'StatsService', 'get_stats_service', 'initialize_stats_service',
    'InMemoryKeyValueStore', 'MongoKeyValueStore'
]
