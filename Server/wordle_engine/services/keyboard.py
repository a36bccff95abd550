"""
Keyboard Feedback

Folds per-letter evaluations into the colouring of the on-screen keyboard.
"""

from typing import Dict, Iterable, Optional, Tuple

from ..models.game import LetterFeedback


class KeyFeedbackMap:
    """Best feedback ever observed for each guessed letter."""

    def __init__(self):
        self._feedback: Dict[str, LetterFeedback] = {}

    def __contains__(self, letter: str) -> bool:
        return letter.lower() in self._feedback

    def __len__(self) -> int:
        return len(self._feedback)

    def get(self, letter: str) -> Optional[LetterFeedback]:
        return self._feedback.get(letter.lower())

    def update(self, letter: str, feedback: LetterFeedback) -> LetterFeedback:
        """
        Record feedback for a letter, keeping the highest ranked value.

        Status can only progress CORRECT > PRESENT > ABSENT; a lower ranked
        feedback never replaces a higher one.

        Returns:
            LetterFeedback now recorded for the letter
        """
        key = letter.lower()
        current = self._feedback.get(key, LetterFeedback.ABSENT)
        best = feedback if feedback.rank >= current.rank else current
        self._feedback[key] = best
        return best

    def update_all(self, evaluations: Iterable[Tuple[str, LetterFeedback]]) -> None:
        for letter, feedback in evaluations:
            self.update(letter, feedback)

    def as_dict(self) -> Dict[str, str]:
        return {letter: feedback.value for letter, feedback in sorted(self._feedback.items())}
