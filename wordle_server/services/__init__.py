"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate_guess, normalize_guess, update_letter_status
from .game_service import GameService
from .lobby_service import LobbyService
from .ranking import rank_players
from .store import EntityStore, RoomStore, SessionStore

__all__ = [
    'evaluate_guess', 'normalize_guess', 'update_letter_status',
    'GameService', 'LobbyService', 'rank_players',
    'EntityStore', 'RoomStore', 'SessionStore'
]
