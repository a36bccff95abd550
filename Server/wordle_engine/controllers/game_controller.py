"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from werkzeug.exceptions import HTTPException
from ..config.game_settings import get_word_statistics
from ..exceptions import GameNotFoundError, InvalidGuessError, WordSourceError
from ..models.game import RawKeyEvent
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _reply(action, payload, status_code=200, game_id=None):
    game_logger.log_response(request, action, payload, status_code, game_id)
    return jsonify(payload), status_code


def _not_found(action, game_id):
    return _reply(action, {'success': False, 'error': 'Game not found'}, 404, game_id)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    game_logger.log_request(request, 'new_game')
    try:
        game_id = game_service.create_new_game(request.remote_addr or 'unknown')
    except WordSourceError as e:
        # No solution can be drawn: configuration problem, not a client error
        game_logger.log_error(request, e, 'new_game')
        return _reply('new_game', {'success': False, 'error': str(e)}, 500)

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': asdict(game_service.get_game_state(game_id))
    }
    return _reply('new_game', response_data, game_id=game_id)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    game_logger.log_request(request, 'get_state', game_id)

    state = game_service.get_game_state(game_id)
    if state is None:
        return _not_found('get_state', game_id)

    return _reply('get_state', {'success': True, 'state': asdict(state)}, game_id=game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game_service
def key_event(game_id, game_service):
    """Apply a single key press (browser KeyboardEvent fields) to a game."""
    data = request.get_json(silent=True) or {}
    event = RawKeyEvent.from_dict(data)
    game_logger.log_request(request, 'key_event', game_id, key=event.key, code=event.code)

    try:
        action, state = game_service.handle_key_event(game_id, event, request.remote_addr or 'unknown')
    except GameNotFoundError:
        return _not_found('key_event', game_id)

    response_data = {
        'success': True,
        'input': action.kind.value,
        'state': asdict(state)
    }
    return _reply('key_event', response_data, game_id=game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service):
    """Type a whole word into a game and submit it."""
    data = request.get_json(silent=True)
    if not data or 'guess' not in data:
        return _reply('submit_guess', {'success': False, 'error': 'Guess is required'}, 400, game_id)

    guess = data['guess']
    game_logger.log_request(request, 'submit_guess', game_id, guess=guess)

    try:
        state = game_service.submit_word(game_id, guess, request.remote_addr or 'unknown')
    except GameNotFoundError:
        return _not_found('submit_guess', game_id)
    except InvalidGuessError as e:
        return _reply('submit_guess', {'success': False, 'error': str(e)}, 400, game_id)

    # An alert means the engine rejected the word and kept it in the buffer
    if state.message_kind == 'ALERT':
        error_response = {
            'success': False,
            'error': state.message,
            'state': asdict(state)
        }
        return _reply('submit_guess', error_response, 400, game_id)

    return _reply('submit_guess', {'success': True, 'state': asdict(state)}, game_id=game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    game_logger.log_request(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    if success:
        game_logger.log_game_deleted(game_id, request.remote_addr)

    return _reply('delete_game', {'success': success}, game_id=game_id)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    engine = game_service.engine
    candidates = sorted(w for w in game_service.word_source.common if len(w) == engine.word_length)

    return jsonify({
        'status': 'healthy',
        'active_games': len(game_service.games),
        'word_length': engine.word_length,
        'max_attempts': engine.max_attempts,
        'word_stats': get_word_statistics(candidates),
        'log_file': str(game_logger.log_file)
    })


@game_bp.errorhandler(Exception)
def handle_unexpected_error(error):
    """Report any uncaught error from this blueprint as JSON."""
    if isinstance(error, HTTPException):
        return error
    game_id = (request.view_args or {}).get('game_id')
    game_logger.log_error(request, error, request.endpoint or 'unknown', game_id)
    return _reply(request.endpoint or 'unknown', {'success': False, 'error': str(error)}, 500, game_id)
