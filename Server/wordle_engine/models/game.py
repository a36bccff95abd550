"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from ..services.guess_buffer import GuessBuffer
    from ..services.keyboard import KeyFeedbackMap


class LetterFeedback(Enum):
    """Per-letter evaluation of a guess against the solution."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @property
    def rank(self) -> int:
        """Precedence used by the keyboard map: CORRECT > PRESENT > ABSENT."""
        return _FEEDBACK_RANK[self]


_FEEDBACK_RANK = {
    LetterFeedback.ABSENT: 0,
    LetterFeedback.PRESENT: 1,
    LetterFeedback.CORRECT: 2,
}


class GameStatus(Enum):
    """Lifecycle of a single game. WON and LOST are terminal."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class MessageKind(Enum):
    """Category of the message shown under the grid."""
    NONE = "NONE"
    ALERT = "ALERT"
    WIN = "WIN"
    LOSS = "LOSS"


class InputKind(Enum):
    """Classified keyboard input."""
    LETTER = "LETTER"
    ENTER = "ENTER"
    BACKSPACE = "BACKSPACE"
    IGNORED = "IGNORED"


@dataclass(frozen=True)
class RawKeyEvent:
    """A key press as reported by a browser keyboard event or the on-screen keyboard."""
    key: str = ""
    code: str = ""
    alt: bool = False
    ctrl: bool = False
    meta: bool = False

    @classmethod
    def from_dict(cls, data: Dict) -> "RawKeyEvent":
        """Build an event from a browser-style payload (key, code, altKey, ctrlKey, metaKey)."""
        return cls(
            key=str(data.get('key') or ''),
            code=str(data.get('code') or ''),
            alt=data.get('altKey') is True,
            ctrl=data.get('ctrlKey') is True,
            meta=data.get('metaKey') is True,
        )

    @classmethod
    def from_widget(cls, action: str, letter: Optional[str] = None) -> "RawKeyEvent":
        """
        Convert an on-screen keyboard action into a raw event.

        Args:
            action: One of 'keyclick', 'enter' or 'backspace'
            letter: The clicked letter for 'keyclick'

        Returns:
            RawKeyEvent that classifies the same way as the physical key would
        """
        if action == 'keyclick':
            return cls(key=letter or '')
        if action == 'enter':
            return cls(key='Enter', code='Enter')
        if action == 'backspace':
            return cls(key='Backspace', code='Backspace')
        return cls()


@dataclass(frozen=True)
class ClassifiedInput:
    """Result of input classification. `letter` is set only for LETTER."""
    kind: InputKind
    letter: Optional[str] = None

    @classmethod
    def letter_key(cls, ch: str) -> "ClassifiedInput":
        return cls(InputKind.LETTER, ch.lower())


ENTER = ClassifiedInput(InputKind.ENTER)
BACKSPACE = ClassifiedInput(InputKind.BACKSPACE)
IGNORED = ClassifiedInput(InputKind.IGNORED)


@dataclass(frozen=True)
class SubmittedAttempt:
    """A guess that passed validation, together with its evaluation."""
    word: str
    feedback: Tuple[LetterFeedback, ...]

    def as_pairs(self) -> List[Tuple[str, str]]:
        return [(letter, status.value) for letter, status in zip(self.word, self.feedback)]


@dataclass
class GameState:
    """
    Mutable state of one game session.

    Owned by the game service and passed explicitly to every engine
    operation. Once `status` is terminal nothing here changes again.
    """
    game_id: str
    solution: str
    word_length: int
    max_attempts: int
    buffer: "GuessBuffer"
    key_feedback: "KeyFeedbackMap"
    attempts: List[SubmittedAttempt] = field(default_factory=list)
    status: GameStatus = GameStatus.IN_PROGRESS
    message: str = ""
    message_kind: MessageKind = MessageKind.NONE

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - len(self.attempts)


@dataclass
class GameSnapshot:
    """Client-facing game state (answer only included when the game is over)."""
    game_id: str
    word_length: int
    max_attempts: int
    attempts: List[List[Tuple[str, str]]]  # Feedback as string for JSON serialization
    current_guess: str
    key_feedback: Dict[str, str]
    status: str
    message: str
    message_kind: str
    attempts_remaining: int
    game_over: bool
    won: bool
    answer: Optional[str] = None
