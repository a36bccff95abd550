"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    ClassifiedInput,
    GameSnapshot,
    GameState,
    GameStatus,
    InputKind,
    LetterFeedback,
    MessageKind,
    RawKeyEvent,
    SubmittedAttempt,
)

__all__ = [
    'ClassifiedInput', 'GameSnapshot', 'GameState', 'GameStatus', 'InputKind',
    'LetterFeedback', 'MessageKind', 'RawKeyEvent', 'SubmittedAttempt'
]
