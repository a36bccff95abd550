"""
Guess Evaluation

Implements the Wordle letter evaluation algorithm.
"""

from collections import Counter
from typing import List, Optional

from ..models.game import LetterFeedback


def evaluate_guess(guess: str, solution: str) -> List[LetterFeedback]:
    """
    Colour each letter of a guess against the solution.

    Exact position matches are marked first and consume one occurrence of
    their letter. The remaining positions are then scanned left to right and
    marked PRESENT only while unconsumed occurrences of the letter remain, so
    a repeated letter is never credited more times than the solution holds it.

    Args:
        guess: The submitted word
        solution: The hidden word (same length as guess)

    Returns:
        List of LetterFeedback, one per position

    Raises:
        ValueError: If guess and solution differ in length
    """
    if len(guess) != len(solution):
        raise ValueError(
            f"Guess length {len(guess)} does not match solution length {len(solution)}"
        )

    guess = guess.lower()
    solution = solution.lower()

    result: List[Optional[LetterFeedback]] = [None] * len(guess)
    available = Counter(solution)

    # First pass: exact position matches
    for i, (letter, target) in enumerate(zip(guess, solution)):
        if letter == target:
            result[i] = LetterFeedback.CORRECT
            available[letter] -= 1

    # Second pass: misplaced letters, limited by what is left
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if available[letter] > 0:
            result[i] = LetterFeedback.PRESENT
            available[letter] -= 1
        else:
            result[i] = LetterFeedback.ABSENT

    return [status for status in result if status is not None]
