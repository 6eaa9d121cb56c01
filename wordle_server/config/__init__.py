"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, cors_origins
from .game_settings import (
    DEFAULT_ROOM_CAPACITY, MAX_ROUNDS, MIN_ROOM_CAPACITY, MULTIPLAYER_MAX_ROUNDS, WORD_LENGTH,
    get_word_statistics, points_for_rank, read_word_file
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'cors_origins',
    # Game rules
    'WORD_LENGTH', 'MAX_ROUNDS', 'MULTIPLAYER_MAX_ROUNDS', 'DEFAULT_ROOM_CAPACITY', 'MIN_ROOM_CAPACITY',
    'read_word_file', 'points_for_rank', 'get_word_statistics'
]
