"""
Services Package

Contains all business logic and service classes.
"""

from .evaluation import evaluate_guess
from .game_engine import GameEngine
from .game_service import GameService, get_game_service, initialize_game_service
from .guess_buffer import GuessBuffer
from .input_classifier import classify_key
from .keyboard import KeyFeedbackMap
from .word_source import WordSource

__all__ = [
    'evaluate_guess', 'classify_key',
    'GameEngine', 'GuessBuffer', 'KeyFeedbackMap', 'WordSource',
    'GameService', 'get_game_service', 'initialize_game_service'
]
