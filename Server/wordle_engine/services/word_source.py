"""
Word Source

Membership testing and solution selection over the "common" and
"extended" vocabularies.
"""

import random
from typing import FrozenSet, Iterable, Optional

from ..config.game_settings import load_word_sets
from ..exceptions import WordSourceError


class WordSource:
    """
    Vocabulary used by a game.

    Common words are candidate solutions; extended words are only accepted
    as guesses. Membership is case-insensitive over both sets.
    """

    def __init__(self,
                 common: Iterable[str],
                 extended: Iterable[str] = (),
                 rng: Optional[random.Random] = None):
        self.common: FrozenSet[str] = frozenset(word.strip().lower() for word in common)
        self.extended: FrozenSet[str] = frozenset(word.strip().lower() for word in extended)
        self._rng = rng or random.Random()

    @classmethod
    def from_json(cls, path: str, rng: Optional[random.Random] = None) -> "WordSource":
        """
        Load a word source from a JSON file of the form
        {"common": [...], "extended": [...]}.

        Raises:
            WordSourceError: If the file is missing, is not valid JSON or is not shaped like that
        """
        word_sets = load_word_sets(path)
        return cls(word_sets['common'], word_sets['extended'], rng=rng)

    def is_word(self, s: str) -> bool:
        word = s.lower()
        return word in self.common or word in self.extended

    def random_word(self, length: int) -> str:
        """
        Pick a uniformly random common word of the given length.

        Raises:
            WordSourceError: If no common word has that length
        """
        candidates = sorted(word for word in self.common if len(word) == length)
        if not candidates:
            raise WordSourceError(
                f"The list of common words does not have any words that are {length} long!"
            )
        return self._rng.choice(candidates)
