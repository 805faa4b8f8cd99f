"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .letters import LetterStatus, LetterVerdict, score_guess
from .game import Game, GameView, GameSummary

__all__ = ['LetterStatus', 'LetterVerdict', 'score_guess', 'Game', 'GameView', 'GameSummary']
