"""
Dictionary Model

Immutable, case-normalized set of valid words handed to the game services.
"""

import re
from typing import FrozenSet, Iterable, Iterator, Tuple

from ..config.game_settings import WORD_LENGTH
from ..exceptions import EmptyDictionary

_WORD_PATTERN = re.compile(r'^[A-Z]{%d}$' % WORD_LENGTH)


class Dictionary:
    """
    Read-only word set.

    Words are kept both as a frozenset for membership checks and as a
    sorted tuple so random draws are reproducible for a seeded rng.
    """

    __slots__ = ('_words', '_ordered')

    def __init__(self, words: Iterable[str]):
        self._words: FrozenSet[str] = frozenset(words)
        self._ordered: Tuple[str, ...] = tuple(sorted(self._words))
        if not self._words:
            raise EmptyDictionary()

    @classmethod
    def from_words(cls, candidates: Iterable[str]) -> 'Dictionary':
        """
        Build a dictionary from raw candidates, keeping only 5-letter
        alphabetic words after trimming and uppercasing.

        Raises:
            EmptyDictionary: If no candidate survives filtering
        """
        kept = set()
        for candidate in candidates:
            if not isinstance(candidate, str):
                continue
            word = candidate.strip().upper()
            if _WORD_PATTERN.match(word):
                kept.add(word)
        return cls(kept)

    def random_word(self, rng) -> str:
        """Draw a word uniformly using ``rng.choice``."""
        return rng.choice(self._ordered)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._ordered

    def __contains__(self, word) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self):
        return f"Dictionary({len(self)} words)"
