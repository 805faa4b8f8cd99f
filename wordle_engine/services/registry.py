"""
Game Registry

In-memory collection of live games, shared by every request thread.
"""

import uuid
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from ..config.game_settings import MAX_GUESSES
from ..models.game import Game, utc_now
from ..utils.locks import ReadWriteLock
from .errors import GameNotFoundError
from .word_source import WordSource

T = TypeVar('T')


class GameRegistry:
    """
    Owns every Game, keyed by game id.

    Reads (get, list_all, snapshot) share the lock; create, mutate and
    restore take it exclusively. Callers only ever receive copies, so a Game
    can only change through ``mutate``. Nothing here does I/O.
    """

    def __init__(self,
                 clock: Callable[[], datetime] = utc_now,
                 max_guesses: int = MAX_GUESSES):
        self._games: Dict[str, Game] = {}
        self._lock = ReadWriteLock()
        self._clock = clock
        self.max_guesses = max_guesses

    def __len__(self):
        with self._lock.read_locked():
            return len(self._games)

    def __contains__(self, game_id) -> bool:
        with self._lock.read_locked():
            return game_id in self._games

    def create(self, word_source: WordSource) -> str:
        """
        Starts a new game with a random target word.

        Returns:
            str: The new game's id

        Raises:
            EmptyVocabularyError: If the word source has no words
        """
        target_word = word_source.random_word()
        game = Game(
            game_id=str(uuid.uuid4()),
            target_word=target_word,
            created_at=self._clock(),
            max_guesses=self.max_guesses,
        )

        with self._lock.write_locked():
            self._games[game.game_id] = game
        return game.game_id

    def get(self, game_id: str) -> Optional[Game]:
        """Returns a copy of the game, or None if the id is unknown."""
        with self._lock.read_locked():
            game = self._games.get(game_id)
            return game.copy() if game else None

    def mutate(self, game_id: str, fn: Callable[[Game], T]) -> T:
        """
        Runs ``fn`` on the stored game while holding the lock exclusively.

        Returns:
            Whatever ``fn`` returns

        Raises:
            GameNotFoundError: If the id is unknown
        """
        with self._lock.write_locked():
            game = self._games.get(game_id)
            if game is None:
                raise GameNotFoundError(game_id)
            return fn(game)

    def list_all(self) -> List[Game]:
        """Copies of all games, most recently created first."""
        games = self.snapshot()
        games.sort(key=lambda g: g.created_at, reverse=True)
        return games

    def snapshot(self) -> List[Game]:
        with self._lock.read_locked():
            return [game.copy() for game in self._games.values()]

    def restore(self, games: Iterable[Game]) -> int:
        """
        Replaces the registry contents with previously saved games.

        The guess limit is not saved, so restored games take this registry's.
        """
        restored = {}
        for game in games:
            game = game.copy()
            game.max_guesses = self.max_guesses
            restored[game.game_id] = game
        with self._lock.write_locked():
            self._games = restored
        return len(restored)
