"""
Game Data Models

Contains all single player game data structures and enums.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Tuple

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class LetterStatus(Enum):
    """Letter evaluation status. UNUSED only appears in keyboard maps."""
    HIT = "HIT"
    PRESENT = "PRESENT"
    MISS = "MISS"
    UNUSED = "UNUSED"


class GameOutcome(Enum):
    ACTIVE = "ACTIVE"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class LetterVerdict:
    letter: str
    status: LetterStatus

    def to_dict(self) -> Dict[str, str]:
        return {"letter": self.letter, "status": self.status.value}


@dataclass(frozen=True)
class GuessRecord:
    """One round: the normalized guess and its positional verdicts."""
    guess: str
    verdicts: Tuple[LetterVerdict, ...]

    def results(self) -> List[Dict[str, str]]:
        return [verdict.to_dict() for verdict in self.verdicts]


def new_letter_status() -> Dict[str, str]:
    return {letter: LetterStatus.UNUSED.value for letter in ALPHABET}


@dataclass
class GameSession:
    """
    Server-side single player game.

    ``target_word`` is fixed at creation; ``history`` and ``outcome`` only
    change through ``GameService.make_guess``.
    """
    game_id: str
    target_word: str
    max_rounds: int
    history: List[GuessRecord] = field(default_factory=list)
    outcome: GameOutcome = GameOutcome.ACTIVE
    letter_status: Dict[str, str] = field(default_factory=new_letter_status)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def rounds_used(self) -> int:
        return len(self.history)

    @property
    def game_over(self) -> bool:
        return self.outcome is not GameOutcome.ACTIVE


@dataclass
class GameState:
    """Client-facing snapshot of a single player game."""
    game_id: str
    current_round: int
    max_rounds: int
    outcome: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Dict[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
    message: Optional[str] = None
