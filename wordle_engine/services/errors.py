"""
Game Errors

Failures surfaced by the engine. Each carries the HTTP status the
controllers answer with.
"""


class GameError(Exception):
    """Base class for all engine errors."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GameNotFoundError(GameError):
    status_code = 404

    def __init__(self, game_id: str):
        super().__init__("Game not found")
        self.game_id = game_id


class InvalidGuessLengthError(GameError):
    def __init__(self, guess: str, expected: int):
        super().__init__(f"Guess must be exactly {expected} letters")
        self.guess = guess
        self.expected = expected


class NotAWordError(GameError):
    def __init__(self, guess: str):
        super().__init__(f"'{guess}' is not a valid word")
        self.guess = guess


class GameAlreadyCompleteError(GameError):
    status_code = 409

    def __init__(self, game_id: str):
        super().__init__("Game is already over")
        self.game_id = game_id


class EmptyVocabularyError(GameError):
    status_code = 503

    def __init__(self):
        super().__init__("No words available to start a game")


class PersistenceError(GameError):
    status_code = 500
