"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import error_body, game_endpoint, socket_endpoint, status_for
from .helpers import get_user_identity, require_fields
from .game_logger import game_logger

__all__ = [
    'error_body', 'game_endpoint', 'socket_endpoint', 'status_for',
    'get_user_identity', 'require_fields', 'game_logger'
]
