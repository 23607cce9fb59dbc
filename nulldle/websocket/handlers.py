"""
WebSocket Event Handlers

Pushes a state_changed event to every client watching a game whenever the
game's session changes.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    game_service = get_game_service()
    if game_service:
        def broadcast_state(game_id, session):
            socketio.emit('state_changed', {
                'game_id': game_id,
                'state': asdict(session.snapshot(game_id))
            }, to=game_id)

        game_service.add_session_listener(broadcast_state)

    @socketio.on('join_game')
    def handle_join_game(data):
        """Subscribe this client to state changes of one game."""
        game_id = data.get('game_id') if isinstance(data, dict) else None
        game_service = get_game_service()
        state = game_service.get_game_state(game_id) if game_service and game_id else None

        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_id)
        game_logger.log_game_event(game_id, 'watcher_joined', request.remote_addr, sid=request.sid)
        emit('joined', {'game_id': game_id, 'state': asdict(state)})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Stop receiving state changes of a game."""
        game_id = data.get('game_id') if isinstance(data, dict) else None
        if game_id:
            leave_room(game_id)
            emit('left', {'game_id': game_id})
