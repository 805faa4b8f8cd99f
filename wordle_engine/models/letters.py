"""
Letter Scoring

Letter evaluation values and the scoring function that compares one guess
against the target word.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Set


class LetterStatus(Enum):
    """Letter evaluation status, ranked so the best-known state wins a merge."""
    CORRECT = "CORRECT"
    WRONG_POSITION = "WRONG_POSITION"
    ABSENT = "ABSENT"
    UNKNOWN = "UNKNOWN"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {
    LetterStatus.CORRECT: 3,
    LetterStatus.WRONG_POSITION: 2,
    LetterStatus.ABSENT: 1,
    LetterStatus.UNKNOWN: 0,
}

PLACEHOLDER_CHARACTER = "-"


@dataclass(frozen=True)
class LetterVerdict:
    """One scored cell of a guess row."""
    character: str
    status: LetterStatus

    def as_pair(self) -> List[str]:
        return [self.character, self.status.value]


def score_guess(guess: str, target: str) -> List[LetterVerdict]:
    """
    Scores each letter of ``guess`` against ``target``.

    A letter in the right position is CORRECT. Otherwise it is WRONG_POSITION
    if the target contains it and no earlier letter of this guess already
    claimed it as WRONG_POSITION, else ABSENT. CORRECT matches never take
    part in claiming, so "smell" against "slate" scores the first 'l' as
    WRONG_POSITION and the second as ABSENT.

    Raises:
        ValueError: If the words differ in length
    """
    guess = guess.lower()
    target = target.lower()
    if len(guess) != len(target):
        raise ValueError(
            f"Cannot score a {len(guess)}-letter guess against a {len(target)}-letter word"
        )

    claimed: Set[str] = set()
    verdicts = []
    for position, letter in enumerate(guess):
        if target[position] == letter:
            status = LetterStatus.CORRECT
        elif letter in target and letter not in claimed:
            claimed.add(letter)
            status = LetterStatus.WRONG_POSITION
        else:
            status = LetterStatus.ABSENT
        verdicts.append(LetterVerdict(letter, status))

    return verdicts


def empty_row(length: int) -> List[LetterVerdict]:
    """Placeholder row for a guess slot that has not been used yet."""
    return [LetterVerdict(PLACEHOLDER_CHARACTER, LetterStatus.UNKNOWN) for _ in range(length)]
