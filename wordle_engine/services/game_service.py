"""
Game Service

The engine's entry point: creates games, validates and applies guesses,
and keeps the saved copy of the registry up to date.
"""

import logging
import threading
from typing import List, Optional

from ..models.game import Game, GameSummary, GameView
from ..utils.game_logger import game_logger
from .errors import (
    GameAlreadyCompleteError, InvalidGuessLengthError, NotAWordError, PersistenceError
)
from .registry import GameRegistry
from .storage import GameStorage
from .word_source import WordSource


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game creation with a random target word
    - Guess validation against the word list and the game's state
    - Game views that only reveal the answer once a game is over
    - Saving the registry after every change

    Every change happens in memory first. Saving runs after the registry
    lock is released; a failed save is logged and the next change writes
    the full registry again.
    """

    def __init__(self,
                 word_source: WordSource,
                 storage: Optional[GameStorage] = None,
                 registry: Optional[GameRegistry] = None):
        self.word_source = word_source
        self.storage = storage
        self.registry = registry if registry is not None else GameRegistry()
        self.persistence_ok = True
        self._save_lock = threading.Lock()

    def load_saved_games(self) -> int:
        """
        Restores the registry from storage at startup.

        A missing save file starts an empty registry; an unreadable one is
        logged and also starts empty.

        Returns:
            int: Number of games restored
        """
        if self.storage is None:
            return 0

        try:
            games = self.storage.load()
        except PersistenceError as e:
            game_logger.log_system_event(
                'load_failed', level=logging.WARNING, error=e,
                path=str(self.storage.path), recovery='starting with no games'
            )
            return 0

        if games is None:
            game_logger.log_system_event('no_saved_games', path=str(self.storage.path))
            return 0

        count = self.registry.restore(games)
        game_logger.log_system_event('games_restored', path=str(self.storage.path), count=count)
        return count

    def create_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session

        Raises:
            EmptyVocabularyError: If there are no words to choose from
        """
        game_id = self.registry.create(self.word_source)
        game_logger.log_game_event(game_id, 'game_created', vocabulary_size=len(self.word_source))
        self._save()
        return game_id

    def get_game(self, game_id: str) -> Optional[GameView]:
        """
        Returns the current game state (without revealing an unsolved answer).

        Returns:
            GameView or None if game not found
        """
        game = self.registry.get(game_id)
        return game.to_view() if game else None

    def list_games(self) -> List[GameSummary]:
        """Summaries of every game, newest first."""
        return [game.to_summary() for game in self.registry.list_all()]

    def submit_guess(self, game_id: str, guess: str) -> GameView:
        """
        Validates a guess and appends it to the game.

        Args:
            game_id: Unique game identifier
            guess: The guessed word, any case, surrounding whitespace ignored

        Returns:
            GameView: The updated game state

        Raises:
            GameNotFoundError: If the game does not exist
            GameAlreadyCompleteError: If the game is already over
            InvalidGuessLengthError: If the guess length differs from the target's
            NotAWordError: If the guess is not in the word list
        """
        normalized_guess = (guess or '').strip().lower()

        def apply(game: Game) -> GameView:
            self._validate_guess(game, normalized_guess)
            game.add_guess(normalized_guess)
            return game.to_view()

        view = self.registry.mutate(game_id, apply)

        if view.is_victory:
            game_logger.log_game_event(
                game_id, 'game_won', rounds_used=view.guess_count, target_word=view.answer
            )
        elif view.is_loss:
            game_logger.log_game_event(
                game_id, 'game_lost', rounds_used=view.guess_count, target_word=view.answer
            )

        self._save()
        return view

    def _validate_guess(self, game: Game, guess: str) -> None:
        if game.is_complete:
            raise GameAlreadyCompleteError(game.game_id)

        if len(guess) != len(game.target_word):
            raise InvalidGuessLengthError(guess, len(game.target_word))

        if not guess.isalpha() or guess not in self.word_source:
            raise NotAWordError(guess)

    def _save(self) -> bool:
        """Writes the registry to storage. Failures are logged, never raised."""
        if self.storage is None:
            return True

        with self._save_lock:
            games = self.registry.snapshot()
            try:
                self.storage.save(games)
            except PersistenceError as e:
                self.persistence_ok = False
                game_logger.log_system_event(
                    'save_failed', level=logging.ERROR, error=e,
                    path=str(self.storage.path), games=len(games),
                    recovery='serving from memory, retrying on next change'
                )
                return False

            if not self.persistence_ok:
                game_logger.log_system_event('save_recovered', path=str(self.storage.path))
            self.persistence_ok = True
            return True
