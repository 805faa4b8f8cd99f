"""
Game Storage

Saves and loads the full set of games as a single JSON document:

    {"games": [{"id": ..., "word": ..., "guesses": [...], "created": ...}]}
"""

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from ..models.game import Game, utc_now
from .errors import PersistenceError


class GameStorage:
    """
    File-backed persistence for the game registry.

    ``save`` writes a temporary file next to the target and renames it over
    the old one, so a reader sees either the previous document or the new
    one, never a partial write.
    """

    def __init__(self, path: str, clock: Callable[[], datetime] = utc_now):
        self.path = Path(path)
        self._clock = clock

    def save(self, games: List[Game]) -> None:
        """
        Writes every game to disk.

        Raises:
            PersistenceError: If serialization or any file operation fails
        """
        try:
            payload = json.dumps({"games": [game.to_dict() for game in games]})
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Error serializing games: {e}") from e

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(f"Error writing {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

    def load(self) -> Optional[List[Game]]:
        """
        Reads the saved games.

        Returns:
            The saved games, or None when nothing has been saved yet

        Raises:
            PersistenceError: If the file cannot be read or is not a valid save
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                contents = f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PersistenceError(f"Error reading {self.path}: {e}") from e

        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Error deserializing {self.path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("games"), list):
            raise PersistenceError(f"{self.path} does not contain a games list")

        now = self._clock()
        try:
            return [Game.from_dict(record, now=now) for record in data["games"]]
        except ValueError as e:
            raise PersistenceError(f"Invalid game record in {self.path}: {e}") from e
