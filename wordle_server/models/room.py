"""
Room Data Models

Contains the multiplayer room, its players and their client-facing views.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MULTIPLAYER_MAX_ROUNDS
from .game import GuessRecord, LetterVerdict, new_letter_status


class RoomStatus(Enum):
    WAITING = "WAITING"
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"


@dataclass
class Player:
    player_id: str
    display_name: str
    history: List[GuessRecord] = field(default_factory=list)
    won: bool = False
    win_timestamp: Optional[datetime] = None
    rank: int = 0  # 0 = unranked
    points: int = 0
    letter_status: Dict[str, str] = field(default_factory=new_letter_status)

    @property
    def rounds_used(self) -> int:
        return len(self.history)

    @property
    def finished(self) -> bool:
        return self.won or self.rounds_used >= MULTIPLAYER_MAX_ROUNDS

    def reset(self):
        """Back to a fresh round: no guesses, no win, no placement."""
        self.history = []
        self.won = False
        self.win_timestamp = None
        self.rank = 0
        self.points = 0
        self.letter_status = new_letter_status()


@dataclass
class Room:
    """
    Multiplayer room. ``players`` keeps join order and unique ids;
    ``target_word`` is only set once a round has been started.
    """
    room_id: str
    name: str
    creator_id: str
    capacity: int
    players: List[Player] = field(default_factory=list)
    status: RoomStatus = RoomStatus.WAITING
    target_word: Optional[str] = None
    first_winner_id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def find_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def is_full(self) -> bool:
        return len(self.players) >= self.capacity

    def round_over(self) -> bool:
        return self.first_winner_id is not None or all(p.finished for p in self.players)


@dataclass
class PlayerState:
    """Client-facing view of one player."""
    player_id: str
    display_name: str
    rounds_used: int
    finished: bool
    won: bool
    win_timestamp: Optional[str]
    rank: int
    points: int
    guesses: Optional[List[str]] = None
    guess_results: Optional[List[List[Dict[str, str]]]] = None
    letter_status: Optional[Dict[str, str]] = None
    target_word: Optional[str] = None  # Only included when the room is finished


@dataclass
class RoomState:
    """Client-facing view of a room; never carries the word before FINISHED."""
    room_id: str
    name: str
    creator_id: str
    capacity: int
    status: str
    created_at: str
    first_winner_id: Optional[str]
    players: List[PlayerState]
    target_word: Optional[str] = None


@dataclass
class RoomGuessResult:
    """
    One guess in a room as seen at the moment it was applied.

    ``round_ended`` is True only for the guess that finished the round, so
    exactly one caller announces the end of each round.
    """
    verdicts: Tuple[LetterVerdict, ...]
    player: PlayerState
    room: RoomState
    round_ended: bool = False
