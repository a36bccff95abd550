"""
Game Engine

The guess state machine. Every operation receives the GameState it acts on;
the engine itself keeps no per-game state.
"""

from typing import Tuple

from ..config.game_settings import (
    LOSS_MESSAGE,
    MAX_ATTEMPTS,
    NOT_A_WORD_MESSAGE,
    TOO_SHORT_MESSAGE,
    WIN_MESSAGE,
    WORD_LENGTH,
)
from ..models.game import (
    ClassifiedInput,
    GameSnapshot,
    GameState,
    GameStatus,
    InputKind,
    MessageKind,
    SubmittedAttempt,
)
from .evaluation import evaluate_guess
from .guess_buffer import GuessBuffer
from .keyboard import KeyFeedbackMap
from .word_source import WordSource


class GameEngine:
    """
    Rules of a single-player game.

    This class handles:
    - Creating a fresh GameState with a random solution
    - Applying classified input (letters, backspace, enter) to a state
    - Guess validation, evaluation and keyboard feedback on submission
    - Win/loss detection and the terminal lock
    """

    def __init__(self,
                 word_source: WordSource,
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS):
        self.word_source = word_source
        self.word_length = word_length
        self.max_attempts = max_attempts

    def new_game(self, game_id: str) -> GameState:
        """
        Start a game with a randomly selected solution.

        Raises:
            WordSourceError: If the common list has no word of word_length
        """
        solution = self.word_source.random_word(self.word_length)
        return GameState(
            game_id=game_id,
            solution=solution.lower(),
            word_length=self.word_length,
            max_attempts=self.max_attempts,
            buffer=GuessBuffer(self.word_length),
            key_feedback=KeyFeedbackMap(),
        )

    def apply_input(self, state: GameState, action: ClassifiedInput) -> Tuple[GameState, GameSnapshot]:
        """
        Process one classified input to completion.

        Input received after the game is over, and IGNORED input, leave the
        state untouched.

        Returns:
            The (same) state and a snapshot taken after the transition
        """
        if not state.status.is_terminal:
            if action.kind is InputKind.LETTER and action.letter:
                self._type_letter(state, action.letter)
            elif action.kind is InputKind.BACKSPACE:
                state.buffer.remove_last()
            elif action.kind is InputKind.ENTER:
                self._submit(state)

        return state, self.snapshot(state)

    def _type_letter(self, state: GameState, letter: str) -> None:
        if state.message_kind is MessageKind.ALERT:
            self._set_message(state, "", MessageKind.NONE)
        state.buffer.append(letter)

    def _submit(self, state: GameState) -> None:
        guess = state.buffer.text

        if len(guess) != state.word_length:
            self._set_message(state, TOO_SHORT_MESSAGE, MessageKind.ALERT)
            return

        if not self.word_source.is_word(guess):
            self._set_message(state, NOT_A_WORD_MESSAGE.format(word=guess.upper()), MessageKind.ALERT)
            return

        feedback = evaluate_guess(guess, state.solution)
        state.attempts.append(SubmittedAttempt(word=guess, feedback=tuple(feedback)))
        state.key_feedback.update_all(zip(guess, feedback))
        state.buffer.clear()

        if guess == state.solution:
            state.status = GameStatus.WON
            self._set_message(state, WIN_MESSAGE, MessageKind.WIN)
        elif len(state.attempts) == state.max_attempts:
            state.status = GameStatus.LOST
            self._set_message(state, LOSS_MESSAGE, MessageKind.LOSS)
        else:
            self._set_message(state, "", MessageKind.NONE)

        if state.status.is_terminal:
            state.buffer.freeze()

    @staticmethod
    def _set_message(state: GameState, message: str, kind: MessageKind) -> None:
        state.message = message
        state.message_kind = kind

    @staticmethod
    def snapshot(state: GameState) -> GameSnapshot:
        """Read-only view of a game (without revealing the answer until it is over)."""
        game_over = state.status.is_terminal
        return GameSnapshot(
            game_id=state.game_id,
            word_length=state.word_length,
            max_attempts=state.max_attempts,
            attempts=[attempt.as_pairs() for attempt in state.attempts],
            current_guess=state.buffer.text,
            key_feedback=state.key_feedback.as_dict(),
            status=state.status.value,
            message=state.message,
            message_kind=state.message_kind.value,
            attempts_remaining=state.attempts_remaining,
            game_over=game_over,
            won=state.status is GameStatus.WON,
            answer=state.solution if game_over else None,
        )
