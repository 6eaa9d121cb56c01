"""
Guess Evaluator

Pure functions shared by single player games and multiplayer rooms:
normalizing raw guesses, scoring a guess against a target, and folding
results into a keyboard letter map.
"""

import re
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.game_settings import WORD_LENGTH
from ..exceptions import InvalidFormat, UnknownWord
from ..models.game import LetterStatus, LetterVerdict

_GUESS_PATTERN = re.compile(r'^[A-Z]{%d}$' % WORD_LENGTH)

# Keyboard map only moves forward through this order
_STATUS_PRIORITY = {
    LetterStatus.UNUSED.value: 0,
    LetterStatus.MISS.value: 1,
    LetterStatus.PRESENT.value: 2,
    LetterStatus.HIT.value: 3,
}


def evaluate_guess(target: str, guess: str) -> Tuple[LetterVerdict, ...]:
    """
    Implements the Wordle letter evaluation algorithm.

    Both words must already be normalized. Exact matches are consumed
    first; each remaining guess letter then takes the leftmost unconsumed
    target letter equal to it, so a target letter satisfies at most one
    guess letter.
    """
    result: List[Optional[LetterStatus]] = []

    # Working copies to track letter consumption
    target_chars: List[Optional[str]] = list(target)

    # First pass: exact position matches (HIT)
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result.append(LetterStatus.HIT)
            target_chars[i] = None
        else:
            result.append(None)

    # Second pass: present letters (PRESENT) and misses (MISS)
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in target_chars:
            result[i] = LetterStatus.PRESENT
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = LetterStatus.MISS

    return tuple(LetterVerdict(letter, status) for letter, status in zip(guess, result))


def normalize_guess(raw, dictionary) -> str:
    """
    Trim and uppercase a raw guess, then check it against the dictionary.

    Raises:
        InvalidFormat: Not exactly 5 letters A-Z
        UnknownWord: Well formed but not a dictionary word
    """
    if not isinstance(raw, str):
        raise InvalidFormat()

    guess = raw.strip().upper()
    if len(guess) != WORD_LENGTH:
        raise InvalidFormat()
    if not _GUESS_PATTERN.match(guess):
        raise InvalidFormat("Your guess must contain only letters.")

    if guess not in dictionary:
        raise UnknownWord(guess)

    return guess


def update_letter_status(letter_status: Dict[str, str], verdicts: Sequence[LetterVerdict]) -> None:
    """Upgrade keyboard letter status in place; a status never goes back."""
    for verdict in verdicts:
        current = letter_status.get(verdict.letter, LetterStatus.UNUSED.value)
        if _STATUS_PRIORITY[verdict.status.value] > _STATUS_PRIORITY[current]:
            letter_status[verdict.letter] = verdict.status.value
