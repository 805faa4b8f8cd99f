"""
Game Configuration Constants Module

Game rules and the word list loader. All game parameters are centralized
here so the engine and the HTTP layer agree on them.
"""

import json
from typing import Dict, Final, List

# Core Game Configuration Constants
MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
"""

WORD_LENGTH: Final[int] = 5

KEYBOARD_LETTERS: Final[str] = "qwertyuiopasdfghjklzxcvbnm"
"""
Every guessable letter, in on-screen keyboard order.
"""

KEYBOARD_ROWS: Final[List[str]] = [
    KEYBOARD_LETTERS[:10],
    KEYBOARD_LETTERS[10:19],
    KEYBOARD_LETTERS[19:],
]


def load_word_list(json_file_path: str, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words
        word_length: Required length of every word

    Returns:
        List[str]: Lowercase words in file order, duplicates removed

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed or contains invalid words
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    words: List[str] = []
    seen = set()
    for entry in word_list:
        if not isinstance(entry, str):
            raise ValueError(f"Word list entry {entry!r} is not a string")
        word = entry.strip().lower()
        if len(word) != word_length:
            raise ValueError(f"Word '{word}' is not {word_length} characters long")
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
        if word not in seen:
            seen.add(word)
            words.append(word)

    return words


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    Checks that every word has the right length, is alphabetic and
    lowercase, and that there are no duplicates.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and
        most_common_letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
