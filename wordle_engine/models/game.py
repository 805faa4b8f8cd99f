"""
Game Data Models

Contains the game entity and the read-only views handed to the HTTP layer.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..config.game_settings import KEYBOARD_LETTERS, MAX_GUESSES
from ..utils.game_logger import game_logger
from .letters import LetterStatus, LetterVerdict, empty_row, score_guess

SHORT_ID_LENGTH = 8

_FRACTION = re.compile(r"\.(\d+)")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def short_id(game_id: str) -> str:
    """Abbreviated game id for listings."""
    return game_id[:SHORT_ID_LENGTH]


@dataclass
class GameView:
    """Client-facing game state. The answer is only set once the game is complete."""
    game_id: str
    short_id: str
    guesses: List[str]
    rows: List[List[List[str]]]  # [letter, status] pairs for JSON serialization
    keyboard: Dict[str, str]
    guess_count: int
    max_guesses: int
    is_complete: bool
    is_victory: bool
    is_loss: bool
    created_at: str
    answer: Optional[str] = None


@dataclass
class GameSummary:
    """One row of the game listing."""
    game_id: str
    short_id: str
    last_guess: Optional[str]
    guess_count: int
    max_guesses: int
    is_complete: bool
    is_victory: bool
    is_loss: bool
    created_at: str
    answer: Optional[str] = None


@dataclass
class Game:
    """
    A single puzzle.

    ``guesses`` is the only mutable state and is append-only. Completion,
    victory, loss and the keyboard state are all derived from it on demand.
    """
    game_id: str
    target_word: str
    guesses: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    max_guesses: int = MAX_GUESSES

    @property
    def short_id(self) -> str:
        return short_id(self.game_id)

    @property
    def is_victory(self) -> bool:
        return self.target_word in self.guesses

    @property
    def is_loss(self) -> bool:
        return len(self.guesses) >= self.max_guesses and not self.is_victory

    @property
    def is_complete(self) -> bool:
        return self.is_victory or len(self.guesses) >= self.max_guesses

    def add_guess(self, word: str) -> None:
        """Appends a guess. The caller validates the word; a finished game ignores it."""
        if self.is_complete:
            game_logger.logger.warning(
                f"Ignoring guess '{word}' for completed game {self.game_id}"
            )
            return
        self.guesses.append(word)

    def guesses_padded_to_max(self) -> List[List[LetterVerdict]]:
        """Scored rows for every guess slot, unused slots filled with placeholders."""
        rows = [score_guess(guess, self.target_word) for guess in self.guesses[:self.max_guesses]]
        while len(rows) < self.max_guesses:
            rows.append(empty_row(len(self.target_word)))
        return rows

    def aggregate_keyboard_state(self) -> Dict[str, LetterStatus]:
        """Best-known status of every keyboard letter across all guesses so far."""
        keyboard = {letter: LetterStatus.UNKNOWN for letter in KEYBOARD_LETTERS}
        for guess in self.guesses:
            for verdict in score_guess(guess, self.target_word):
                current = keyboard.get(verdict.character, LetterStatus.UNKNOWN)
                if verdict.status.rank > current.rank:
                    keyboard[verdict.character] = verdict.status
        return keyboard

    def copy(self) -> 'Game':
        return Game(
            game_id=self.game_id,
            target_word=self.target_word,
            guesses=list(self.guesses),
            created_at=self.created_at,
            max_guesses=self.max_guesses,
        )

    def to_view(self) -> GameView:
        complete = self.is_complete
        return GameView(
            game_id=self.game_id,
            short_id=self.short_id,
            guesses=list(self.guesses),
            rows=[[verdict.as_pair() for verdict in row] for row in self.guesses_padded_to_max()],
            keyboard={letter: status.value for letter, status in self.aggregate_keyboard_state().items()},
            guess_count=len(self.guesses),
            max_guesses=self.max_guesses,
            is_complete=complete,
            is_victory=self.is_victory,
            is_loss=self.is_loss,
            created_at=self.created_at.isoformat(),
            answer=self.target_word if complete else None,
        )

    def to_summary(self) -> GameSummary:
        complete = self.is_complete
        return GameSummary(
            game_id=self.game_id,
            short_id=self.short_id,
            last_guess=self.guesses[-1] if self.guesses else None,
            guess_count=len(self.guesses),
            max_guesses=self.max_guesses,
            is_complete=complete,
            is_victory=self.is_victory,
            is_loss=self.is_loss,
            created_at=self.created_at.isoformat(),
            answer=self.target_word if complete else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Persisted record form."""
        return {
            "id": self.game_id,
            "word": self.target_word,
            "guesses": list(self.guesses),
            "created": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], now: Optional[datetime] = None) -> 'Game':
        """
        Rebuilds a game from its persisted record.

        Records written before timestamps were stored have no ``created``
        field; those get ``now`` (or the current time).

        Raises:
            ValueError: If the record is missing fields or has the wrong types
        """
        if not isinstance(data, dict):
            raise ValueError(f"Game record must be an object, got {type(data).__name__}")

        game_id = data.get("id")
        word = data.get("word")
        guesses = data.get("guesses", [])
        if not isinstance(game_id, str) or not game_id:
            raise ValueError(f"Game record has an invalid id: {game_id!r}")
        if not isinstance(word, str) or not _is_lowercase_word(word):
            raise ValueError(f"Game {game_id} has an invalid word: {word!r}")
        if not isinstance(guesses, list) or not all(
            isinstance(g, str) and len(g) == len(word) and _is_lowercase_word(g) for g in guesses
        ):
            raise ValueError(f"Game {game_id} has invalid guesses: {guesses!r}")

        created = data.get("created")
        if created is None:
            created_at = now or utc_now()
        elif isinstance(created, str):
            created_at = parse_timestamp(created)
        else:
            raise ValueError(f"Game {game_id} has an invalid timestamp: {created!r}")

        return cls(game_id=game_id, target_word=word, guesses=list(guesses), created_at=created_at)


def _is_lowercase_word(word: str) -> bool:
    return bool(word) and word.isascii() and word.isalpha() and word.islower()


def parse_timestamp(value: str) -> datetime:
    """
    Parses an ISO-8601 timestamp, treating naive values as UTC.

    Fractional seconds are padded or truncated to microseconds, so
    nanosecond timestamps load on every supported Python.

    Raises:
        ValueError: If the value is not an ISO-8601 timestamp
    """
    value = value.strip().replace("Z", "+00:00")
    value = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], value, count=1)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
