"""
Game Service

Owns the live game sessions and routes player input to the game engine.
"""

import threading
import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import (
    COMMON_WORDS,
    EXTENDED_WORDS,
    MAX_ATTEMPTS,
    WORD_LENGTH,
    load_word_sets,
    validate_word_list_integrity,
)
from ..exceptions import GameNotFoundError, InvalidGuessError
from ..models.game import BACKSPACE, ENTER, ClassifiedInput, GameSnapshot, GameState, RawKeyEvent
from ..utils.game_logger import game_logger
from .game_engine import GameEngine
from .input_classifier import classify_key
from .word_source import WordSource


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Solution selection and secure answer storage
    - Funnelling raw key events through the input classifier
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self,
                 word_source: Optional[WordSource] = None,
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS):
        if word_source is None:
            word_source = WordSource(COMMON_WORDS, EXTENDED_WORDS)
        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        self.engine = GameEngine(word_source, word_length, max_attempts)
        self._lock = threading.RLock()

    @property
    def word_source(self) -> WordSource:
        return self.engine.word_source

    def create_new_game(self, user_ip: str = "unknown") -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session

        Raises:
            WordSourceError: If no solution of the configured length exists
        """
        game_id = str(uuid.uuid4())
        state = self.engine.new_game(game_id)

        with self._lock:
            self.games[game_id] = state

        game_logger.log_game_created(game_id, user_ip, state.word_length, state.max_attempts)
        return game_id

    def _get(self, game_id: str) -> GameState:
        state = self.games.get(game_id)
        if state is None:
            raise GameNotFoundError(game_id)
        return state

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameSnapshot or None if game not found
        """
        with self._lock:
            state = self.games.get(game_id)
            if state is None:
                return None
            return self.engine.snapshot(state)

    def handle_input(self, game_id: str, action: ClassifiedInput, user_ip: str = "unknown") -> GameSnapshot:
        """
        Apply an already classified input to a game.

        A game_won / game_lost event is logged on the transition that ends the game.

        Raises:
            GameNotFoundError: If the game does not exist
        """
        with self._lock:
            state = self._get(game_id)
            was_over = state.status.is_terminal
            _, snapshot = self.engine.apply_input(state, action)

        game_logger.log_input(game_id, action, snapshot)
        if snapshot.game_over and not was_over:
            game_logger.log_game_finished(snapshot, user_ip, state.attempts[-1].word)
        return snapshot

    def handle_key_event(self, game_id: str, event: RawKeyEvent,
                         user_ip: str = "unknown") -> Tuple[ClassifiedInput, GameSnapshot]:
        """
        Classify a raw key press and apply it to a game.

        Returns:
            Tuple of (classified input, snapshot after the transition)

        Raises:
            GameNotFoundError: If the game does not exist
        """
        action = classify_key(event)
        return action, self.handle_input(game_id, action, user_ip)

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a whole-word guess before it is typed into a game.

        Dictionary membership is left to the engine, which reports unknown
        words the same way it does for keyboard input.

        Returns:
            Tuple of (is_valid, error_message)
        """
        with self._lock:
            state = self.games.get(game_id)
            if state is None:
                return False, "Game not found"

            if state.status.is_terminal:
                return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = guess.strip()

        if len(normalized_guess) != state.word_length:
            return False, f"Guess must be exactly {state.word_length} letters"

        if not normalized_guess.isalpha() or not normalized_guess.isascii():
            return False, "Guess must contain only letters"

        return True, ""

    def submit_word(self, game_id: str, guess: str, user_ip: str = "unknown") -> GameSnapshot:
        """
        Replace the current buffer with `guess` and press Enter.

        Each letter goes through the input classifier exactly as if it had
        been typed. The guess is validated under the same lock that applies
        it, so a game ended by another connection is reported, not touched.

        Raises:
            GameNotFoundError: If the game does not exist
            InvalidGuessError: If the game is over or the guess is malformed
        """
        with self._lock:
            state = self._get(game_id)
            is_valid, error = self.is_valid_guess(game_id, guess)
            if not is_valid:
                raise InvalidGuessError(error)

            for _ in range(len(state.buffer)):
                self.engine.apply_input(state, BACKSPACE)
            for ch in guess.strip():
                self.engine.apply_input(state, classify_key(RawKeyEvent(key=ch)))
            _, snapshot = self.engine.apply_input(state, ENTER)

        game_logger.log_input(game_id, ENTER, snapshot)
        if snapshot.game_over:
            game_logger.log_game_finished(snapshot, user_ip, state.attempts[-1].word)
        return snapshot

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_length: int = WORD_LENGTH,
                            max_attempts: int = MAX_ATTEMPTS,
                            words_file: Optional[str] = None) -> GameService:
    """
    Initialize the global game service instance.

    Raises:
        WordSourceError: If the word lists cannot provide a solution
    """
    global _game_service

    if words_file:
        word_sets = load_word_sets(words_file)
        common, extended = word_sets['common'], word_sets['extended']
    else:
        common, extended = COMMON_WORDS, EXTENDED_WORDS

    validate_word_list_integrity(common, extended, word_length)
    word_source = WordSource(common, extended)

    _game_service = GameService(word_source, word_length, max_attempts)
    return _game_service
