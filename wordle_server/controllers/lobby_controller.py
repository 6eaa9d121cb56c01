"""
Lobby Controller

Handles all lobby and multiplayer-related HTTP endpoints. Every room
mutation is also pushed to WebSocket subscribers of that room.
"""

from dataclasses import asdict

from flask import Blueprint, current_app, request

from ..utils.decorators import game_endpoint
from ..utils.helpers import require_fields
from ..websocket.handlers import (
    broadcast_game_started, broadcast_guess, broadcast_room_state
)

lobby_bp = Blueprint('lobby', __name__)


def _lobby_service():
    return current_app.lobby_service


@lobby_bp.route('/rooms', methods=['POST'])
@game_endpoint('create_room')
def create_room():
    """Create a room with the caller as its only player."""
    data = require_fields(request.get_json(silent=True), 'creator_id')

    room_state = _lobby_service().create_room(
        creator_id=data['creator_id'],
        name=data.get('name'),
        capacity=data.get('capacity'),
        creator_name=data.get('creator_name')
    )
    return {'success': True, 'room': asdict(room_state)}, 201


@lobby_bp.route('/rooms', methods=['GET'])
@game_endpoint('list_rooms')
def list_rooms():
    """Rooms that are waiting and have a free seat."""
    rooms = _lobby_service().list_waiting_rooms()
    return {'success': True, 'rooms': [asdict(room) for room in rooms]}


@lobby_bp.route('/rooms/<room_id>', methods=['GET'])
@game_endpoint('get_room')
def get_room(room_id):
    room_state = _lobby_service().get_room_state(room_id)
    return {'success': True, 'room': asdict(room_state)}


@lobby_bp.route('/rooms/<room_id>/join', methods=['POST'])
@game_endpoint('join_room')
def join_room(room_id):
    data = require_fields(request.get_json(silent=True), 'player_id')

    room_state = _lobby_service().join_room(room_id, data['player_id'], data.get('name'))
    broadcast_room_state(current_app.socketio, room_state)
    return {'success': True, 'room': asdict(room_state)}


@lobby_bp.route('/rooms/<room_id>/leave', methods=['POST'])
@game_endpoint('leave_room')
def leave_room(room_id):
    data = require_fields(request.get_json(silent=True), 'player_id')

    room_state = _lobby_service().leave_room(room_id, data['player_id'])
    if room_state is None:
        return {'success': True, 'room': None, 'closed': True}

    broadcast_room_state(current_app.socketio, room_state)
    return {'success': True, 'room': asdict(room_state), 'closed': False}


@lobby_bp.route('/rooms/<room_id>/start', methods=['POST'])
@game_endpoint('start_room')
def start_room(room_id):
    room_state = _lobby_service().start_room(room_id)
    broadcast_game_started(current_app.socketio, room_state)
    return {'success': True, 'room': asdict(room_state)}


@lobby_bp.route('/rooms/<room_id>/restart', methods=['POST'])
@game_endpoint('restart_room')
def restart_room(room_id):
    room_state = _lobby_service().restart_room(room_id)
    broadcast_game_started(current_app.socketio, room_state)
    return {'success': True, 'room': asdict(room_state)}


@lobby_bp.route('/rooms/<room_id>/guess', methods=['POST'])
@game_endpoint('room_guess')
def room_guess(room_id):
    """Submit a guess in a multiplayer room."""
    data = require_fields(request.get_json(silent=True), 'player_id', 'guess')

    guess_result = _lobby_service().submit_guess(room_id, data['player_id'], data['guess'])
    broadcast_guess(current_app.socketio, guess_result)

    return {
        'success': True,
        'result': [verdict.to_dict() for verdict in guess_result.verdicts],
        'player': asdict(guess_result.player)
    }


@lobby_bp.route('/rooms/<room_id>/players/<player_id>', methods=['GET'])
@game_endpoint('get_player_state')
def get_player_state(room_id, player_id):
    """A player's own view of the round."""
    player_state = _lobby_service().get_player_state(room_id, player_id)
    return {'success': True, 'player': asdict(player_state)}
