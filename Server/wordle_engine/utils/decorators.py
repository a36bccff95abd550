"""
Service Decorators

Contains decorators that resolve the game service for HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    The service is passed to the endpoint as the `game_service` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """
    Decorator for WebSocket events addressed to an existing game.

    The event payload must carry a `game_id` of a live game; the handler
    receives the service and the id as keywords.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        if game_service.get_game_state(game_id) is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        kwargs['game_service'] = game_service
        kwargs['game_id'] = game_id
        return f(*args, **kwargs)

    return decorated_function
