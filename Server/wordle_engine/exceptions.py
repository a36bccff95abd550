"""
Game Exceptions

Errors raised by the game engine and services.
"""


class WordSourceError(ValueError):
    """Raised when the word lists cannot supply what the game needs."""


class GameNotFoundError(KeyError):
    """Raised when a game id does not refer to an active session."""

    def __init__(self, game_id: str):
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Game not found: {self.game_id}"


class InvalidGuessError(ValueError):
    """Raised when a whole-word guess cannot be typed into a game."""
