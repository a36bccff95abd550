"""
Game Logger

One JSON object per line for every player request and every game
transition (created, input applied, won, lost, deleted).
"""

import logging
import json
from datetime import datetime
from typing import Any, Dict, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity


def summarise_state(state: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Reduce a serialised snapshot to what is worth keeping in the log."""
    if not isinstance(state, dict):
        return None

    summary = {
        'status': state.get('status'),
        'attempts': len(state.get('attempts') or []),
        'guess_length': len(state.get('current_guess') or ''),
        'message_kind': state.get('message_kind'),
    }
    # The hidden word is only written once the game has ended
    if state.get('game_over'):
        summary['answer'] = state.get('answer')
    return summary


class GameLogger:
    """
    Structured log of player requests and game transitions.

    Entries go to a dated file in `log_dir`; warnings and errors are also
    echoed to the console.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)
        self.log_file = self.log_dir / f"wordle_{datetime.now():%Y-%m-%d}.log"
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordle_engine')
        logger.setLevel(self.level)
        logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(message)s'))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self, level: int, event: str, game_id: Optional[str], **fields):
        entry = {
            'time': datetime.now().isoformat(timespec='milliseconds'),
            'level': logging.getLevelName(level),
            'event': event,
            'game_id': game_id,
            **fields
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_request(self, request, action: str, game_id: Optional[str] = None, **fields):
        """A player request arrived over HTTP or Socket.IO."""
        self._write(logging.INFO, 'request', game_id, action=action,
                    **get_user_identity(request), **fields)

    def log_response(self,
                     request,
                     action: str,
                     payload: Dict[str, Any],
                     status_code: int = 200,
                     game_id: Optional[str] = None):
        """
        The reply sent for a request.

        Rejected requests (4xx) are logged as warnings and server faults
        (5xx) as errors.
        """
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        self._write(level, 'response', game_id,
                    action=action,
                    status_code=status_code,
                    user_ip=get_user_identity(request)['user_ip'],
                    error=payload.get('error'),
                    state=summarise_state(payload.get('state')))

    def log_game_created(self, game_id: str, user_ip: Optional[str], word_length: int, max_attempts: int):
        self._write(logging.INFO, 'game_created', game_id, user_ip=user_ip or 'unknown',
                    word_length=word_length, max_attempts=max_attempts)

    def log_input(self, game_id: str, action, snapshot):
        """A classified key was applied to a game."""
        self._write(logging.DEBUG, 'key_input', game_id,
                    input=action.kind.value,
                    letter=action.letter,
                    status=snapshot.status,
                    guess_length=len(snapshot.current_guess),
                    message_kind=snapshot.message_kind)

    def log_game_finished(self, snapshot, user_ip: Optional[str], last_guess: Optional[str] = None):
        """Record game_won / game_lost for a snapshot of a finished game."""
        if not snapshot.game_over:
            return
        event = 'game_won' if snapshot.won else 'game_lost'
        self._write(logging.INFO, event, snapshot.game_id,
                    user_ip=user_ip or 'unknown',
                    attempts_used=len(snapshot.attempts),
                    max_attempts=snapshot.max_attempts,
                    answer=snapshot.answer,
                    final_guess=last_guess)

    def log_game_deleted(self, game_id: str, user_ip: Optional[str]):
        self._write(logging.INFO, 'game_deleted', game_id, user_ip=user_ip or 'unknown')

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        self._write(logging.ERROR, 'error', game_id,
                    action=action,
                    user_ip=get_user_identity(request)['user_ip'],
                    error_type=type(error).__name__,
                    error_message=str(error))


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
