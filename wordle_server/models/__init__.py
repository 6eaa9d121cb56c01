"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .dictionary import Dictionary
from .game import GameOutcome, GameSession, GameState, GuessRecord, LetterStatus, LetterVerdict
from .room import Player, PlayerState, Room, RoomGuessResult, RoomState, RoomStatus

__all__ = [
    'Dictionary',
    'GameOutcome', 'GameSession', 'GameState', 'GuessRecord', 'LetterStatus', 'LetterVerdict',
    'Player', 'PlayerState', 'Room', 'RoomGuessResult', 'RoomState', 'RoomStatus'
]
