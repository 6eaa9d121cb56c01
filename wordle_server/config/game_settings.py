"""
Game Configuration Constants Module

This module defines all game configuration constants. All game parameters
are centralized here to enable easy modification. It also owns reading the
raw word file; turning those candidates into a playable dictionary is the
job of ``models.dictionary``.
"""

import json
import os
from typing import Final, Iterable, List, Optional, Tuple

WORD_LENGTH: Final[int] = 5

# Default number of guesses for a single player game
MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per single player game.
Callers may ask for a different limit when creating a game.
"""

# Fixed per-player guess limit inside a multiplayer room
MULTIPLAYER_MAX_ROUNDS: Final[int] = 6

DEFAULT_ROOM_CAPACITY: Final[int] = 4
MIN_ROOM_CAPACITY: Final[int] = 2

# Points awarded by final rank (1st, 2nd, 3rd); everyone below gets DEFAULT_POINTS
POINTS_BY_RANK: Final[Tuple[int, ...]] = (10, 7, 5)
DEFAULT_POINTS: Final[int] = 2

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)


def read_word_file(path: Optional[str] = None) -> List[str]:
    """
    Load raw word candidates from disk.

    ``.json`` files must contain an array of strings; any other file is
    read as one word per line. No filtering happens here.

    Raises:
        FileNotFoundError: If the word file is not found
        ValueError: If a JSON file does not hold an array
    """
    path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.endswith('.json'):
                words = json.load(f)
                if not isinstance(words, list):
                    raise ValueError("JSON file must contain an array of words")
                return [str(word) for word in words]
            return [line.strip() for line in f if line.strip()]
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")


def points_for_rank(rank: int) -> int:
    """Points for a 1-indexed final rank."""
    if 1 <= rank <= len(POINTS_BY_RANK):
        return POINTS_BY_RANK[rank - 1]
    return DEFAULT_POINTS


def get_word_statistics(words: Iterable[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and
        most_common_letters
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
