"""
WebSocket Event Handlers

Streams key presses from the physical keyboard and the on-screen keyboard
widget into a game and pushes the updated state back to the client.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..exceptions import GameNotFoundError, WordSourceError
from ..models.game import RawKeyEvent
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _game_room(game_id):
    return f"game_{game_id}"


def _apply_key(game_service, game_id, event, action_name):
    """Run one raw key event through the game and emit the new state."""
    try:
        game_logger.log_request(request, action_name, game_id, key=event.key, code=event.code)

        action, state = game_service.handle_key_event(game_id, event, request.remote_addr or 'unknown')

        payload = {
            'game_id': game_id,
            'input': action.kind.value,
            'state': asdict(state)
        }
        emit('game_state', payload)
        # Other windows watching the same game
        emit('game_state', payload, to=_game_room(game_id), include_self=False)

    except GameNotFoundError as e:
        game_logger.log_error(request, e, action_name, game_id)
        emit('error', {'error': 'Game not found', 'game_id': game_id})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Handle WebSocket connection."""
        game_logger.log_request(request, 'connect')

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.log_request(request, 'disconnect')

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and join its room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        try:
            game_logger.log_request(request, 'new_game')
            game_id = game_service.create_new_game(request.remote_addr or 'unknown')
        except WordSourceError as e:
            game_logger.log_error(request, e, 'new_game')
            emit('error', {'error': str(e)})
            return

        join_room(_game_room(game_id))

        emit('game_state', {
            'game_id': game_id,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room for real-time updates."""
        join_room(_game_room(game_id))
        game_logger.log_request(request, 'join_game', game_id)

        emit('game_state', {
            'game_id': game_id,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Stop receiving updates for a game."""
        game_id = (data or {}).get('game_id')
        if game_id:
            leave_room(_game_room(game_id))
            game_logger.log_request(request, 'leave_game', game_id)

    @socketio.on('keydown')
    @websocket_game_required
    def handle_keydown(data, game_service=None, game_id=None):
        """Physical keyboard: payload carries KeyboardEvent key/code and modifier flags."""
        _apply_key(game_service, game_id, RawKeyEvent.from_dict(data), 'keydown')

    @socketio.on('keyclick')
    @websocket_game_required
    def handle_keyclick(data, game_service=None, game_id=None):
        """On-screen keyboard letter."""
        event = RawKeyEvent.from_widget('keyclick', data.get('letter'))
        _apply_key(game_service, game_id, event, 'keyclick')

    @socketio.on('enter')
    @websocket_game_required
    def handle_enter(data, game_service=None, game_id=None):
        """On-screen keyboard Enter key."""
        _apply_key(game_service, game_id, RawKeyEvent.from_widget('enter'), 'enter')

    @socketio.on('backspace')
    @websocket_game_required
    def handle_backspace(data, game_service=None, game_id=None):
        """On-screen keyboard Backspace key."""
        _apply_key(game_service, game_id, RawKeyEvent.from_widget('backspace'), 'backspace')
