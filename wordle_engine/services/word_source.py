"""
Word Source

The immutable vocabulary used to pick targets and to accept guesses.
"""

import random
from typing import Iterable, Optional

from ..config.game_settings import load_word_list
from .errors import EmptyVocabularyError


class WordSource:
    """
    Read-only word list.

    Targets are drawn uniformly with ``rng``; pass ``random.Random(seed)``
    for reproducible games.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        self._words = tuple(dict.fromkeys(word.strip().lower() for word in words))
        self._lookup = frozenset(self._words)
        self._rng = rng or random.Random()

    @classmethod
    def from_file(cls, path: str, rng: Optional[random.Random] = None) -> 'WordSource':
        return cls(load_word_list(path), rng=rng)

    @property
    def words(self):
        return self._words

    def __len__(self):
        return len(self._words)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and word.lower() in self._lookup

    def random_word(self) -> str:
        """Picks a word uniformly from the whole vocabulary."""
        if not self._words:
            raise EmptyVocabularyError()
        return self._words[self._rng.randrange(len(self._words))]
