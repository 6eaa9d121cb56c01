"""
WebSocket Event Handlers

Handles all WebSocket events for real-time multiplayer rooms, plus the
broadcast helpers the HTTP lobby controller shares.
"""

from dataclasses import asdict

from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from ..utils.decorators import socket_endpoint
from ..utils.game_logger import game_logger
from ..utils.helpers import require_fields


def room_channel(room_id):
    return f"room_{room_id}"


def broadcast_room_state(socketio, room_state):
    """Push the public room view to everyone subscribed to the room."""
    socketio.emit('room_state_update', {
        'success': True,
        'room': asdict(room_state)
    }, room=room_channel(room_state.room_id))


def broadcast_game_started(socketio, room_state):
    socketio.emit('game_started', {
        'room_id': room_state.room_id,
        'room': asdict(room_state)
    }, room=room_channel(room_state.room_id))
    game_logger.log_game_event(room_state.room_id, 'room_started', 'system',
                               players=[p.player_id for p in room_state.players])


def broadcast_guess(socketio, guess_result):
    """
    Tell the room a player guessed, without revealing the word they typed,
    then push the room view and the final result if this guess ended the round.

    Everything sent comes from the snapshot ``submit_guess`` took under the
    room lock, never from a later read of the room.
    """
    room_state = guess_result.room
    room_id = room_state.room_id

    socketio.emit('player_guessed', {
        'room_id': room_id,
        'player_id': guess_result.player.player_id,
        'pattern': [verdict.status.value for verdict in guess_result.verdicts]
    }, room=room_channel(room_id))
    broadcast_room_state(socketio, room_state)

    if guess_result.round_ended:
        ranking = sorted(room_state.players, key=lambda p: p.rank)
        socketio.emit('game_ended', {
            'room_id': room_id,
            'target_word': room_state.target_word,
            'first_winner_id': room_state.first_winner_id,
            'ranking': [
                {
                    'player_id': p.player_id,
                    'display_name': p.display_name,
                    'rank': p.rank,
                    'points': p.points
                }
                for p in ranking
            ]
        }, room=room_channel(room_id))
        game_logger.log_game_event(
            room_id, 'room_finished', 'system',
            target_word=room_state.target_word,
            first_winner_id=room_state.first_winner_id,
            ranking=[p.player_id for p in ranking]
        )


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug("WebSocket connected: %s", request.sid)

    @socketio.on('join_room')
    @socket_endpoint('join_room')
    def handle_join_room(data):
        """Subscribe to a room's real-time updates."""
        room_id = require_fields(data, 'room_id')['room_id']
        room_state = current_app.lobby_service.get_room_state(room_id)

        join_room(room_channel(room_id))
        game_logger.logger.info("WebSocket: %s subscribed to room %s", request.sid, room_id)

        emit('room_state_update', {
            'success': True,
            'room': asdict(room_state)
        })

    @socketio.on('leave_room')
    @socket_endpoint('leave_room')
    def handle_leave_room(data):
        """Unsubscribe from a room's updates."""
        room_id = require_fields(data, 'room_id')['room_id']
        leave_room(room_channel(room_id))
        emit('left_room', {'room_id': room_id})

    @socketio.on('start_game')
    @socket_endpoint('start_game')
    def handle_start_game(data):
        """Start the round in a waiting room."""
        room_id = require_fields(data, 'room_id')['room_id']
        room_state = current_app.lobby_service.start_room(room_id)
        broadcast_game_started(socketio, room_state)

    @socketio.on('submit_guess')
    @socket_endpoint('submit_guess')
    def handle_submit_guess(data):
        """Submit a guess via WebSocket."""
        fields = require_fields(data, 'room_id', 'player_id', 'guess')
        guess_result = current_app.lobby_service.submit_guess(
            fields['room_id'], fields['player_id'], fields['guess']
        )

        emit('guess_result', {
            'success': True,
            'result': [verdict.to_dict() for verdict in guess_result.verdicts],
            'player': asdict(guess_result.player)
        })
        broadcast_guess(socketio, guess_result)
