"""
Guess Buffer

Holds the letters of the attempt the player is currently typing.
"""

from typing import List


class GuessBuffer:
    """
    In-progress attempt, bounded by the word length.

    The buffer is frozen once the game ends; after that append and
    remove_last are silent no-ops.
    """

    def __init__(self, max_length: int):
        self.max_length = max_length
        self._letters: List[str] = []
        self._frozen = False

    def __len__(self) -> int:
        return len(self._letters)

    def __str__(self) -> str:
        return self.text

    @property
    def text(self) -> str:
        return ''.join(self._letters)

    @property
    def is_full(self) -> bool:
        return len(self._letters) >= self.max_length

    @property
    def frozen(self) -> bool:
        return self._frozen

    def append(self, ch: str) -> bool:
        """Add a letter. Returns False when the buffer is full or frozen."""
        if self._frozen or self.is_full:
            return False
        self._letters.append(ch.lower())
        return True

    def remove_last(self) -> bool:
        """Drop the last letter. Returns False when empty or frozen."""
        if self._frozen or not self._letters:
            return False
        self._letters.pop()
        return True

    def clear(self) -> None:
        if not self._frozen:
            self._letters.clear()

    def freeze(self) -> None:
        self._frozen = True
