"""
Game Configuration Constants Module

This module defines all game rule constants and the bundled vocabulary.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List

from ..exceptions import WordSourceError

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in the solution and in every submitted guess.
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of submitted guesses per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

# Player-facing messages
TOO_SHORT_MESSAGE: Final[str] = "Too short!"
NOT_A_WORD_MESSAGE: Final[str] = "{word} isn't a word!"
WIN_MESSAGE: Final[str] = "You won!"
LOSS_MESSAGE: Final[str] = "You lost!"

DEFAULT_WORDS_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_sets(path: str = DEFAULT_WORDS_FILE) -> Dict[str, List[str]]:
    """
    Load the common and extended word lists from a JSON file.

    Returns:
        Dict with lowercase 'common' and 'extended' lists

    Raises:
        WordSourceError: If the file is missing, malformed or the common list is empty
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise WordSourceError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise WordSourceError(f"Invalid JSON in {os.path.basename(path)}: {e}")

    if not isinstance(data, dict):
        raise WordSourceError("Word file must contain an object with 'common' and 'extended' arrays")

    common = data.get('common')
    extended = data.get('extended', [])
    if not isinstance(common, list) or not isinstance(extended, list):
        raise WordSourceError("'common' and 'extended' must be arrays of words")

    if not all(isinstance(word, str) for word in common + extended):
        raise WordSourceError("Every entry in 'common' and 'extended' must be a string")

    if not common:
        raise WordSourceError("Common word list cannot be empty")

    return {
        'common': [word.strip().lower() for word in common],
        'extended': [word.strip().lower() for word in extended],
    }


# Curated word database loaded from the bundled JSON file
_WORD_SETS = load_word_sets()
COMMON_WORDS: Final[List[str]] = _WORD_SETS['common']
EXTENDED_WORDS: Final[List[str]] = _WORD_SETS['extended']


def validate_word_list_integrity(common: List[str] = COMMON_WORDS,
                                 extended: List[str] = EXTENDED_WORDS,
                                 word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Availability: the common list holds at least one word of word_length
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries within a list

    Returns:
        bool: True if word lists pass all validation checks

    Raises:
        WordSourceError: If any validation check fails with detailed error message
    """
    if not common:
        raise WordSourceError("Common word list cannot be empty")

    for name, words in (('common', common), ('extended', extended)):
        for index, word in enumerate(words):
            if not word.isalpha() or not word.isascii():
                raise WordSourceError(
                    f"Word at index {index} '{word}' in {name} list contains non-alphabetic characters"
                )

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise WordSourceError(f"Duplicate words found in {name} list: {duplicates}")

    if not any(len(word) == word_length for word in common):
        raise WordSourceError(
            f"The list of common words does not have any words that are {word_length} long!"
        )

    return True


def get_word_statistics(words: List[str] = COMMON_WORDS) -> dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    # Calculate letter frequency distribution
    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
