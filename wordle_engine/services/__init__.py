"""
Services Package

Contains all business logic and service classes.
"""

from .errors import (
    GameError, GameNotFoundError, InvalidGuessLengthError, NotAWordError,
    GameAlreadyCompleteError, EmptyVocabularyError, PersistenceError
)
from .word_source import WordSource
from .registry import GameRegistry
from .storage import GameStorage
from .game_service import GameService

__all__ = [
    'GameError', 'GameNotFoundError', 'InvalidGuessLengthError', 'NotAWordError',
    'GameAlreadyCompleteError', 'EmptyVocabularyError', 'PersistenceError',
    'WordSource', 'GameRegistry', 'GameStorage', 'GameService'
]
