"""
Utilities Package

Contains the structured game logger and locking helpers.
"""

from .game_logger import game_logger, GameLogger
from .locks import ReadWriteLock

__all__ = ['game_logger', 'GameLogger', 'ReadWriteLock']
