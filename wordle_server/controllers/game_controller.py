"""
Game Controller

Handles all single player HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, current_app, request

from ..utils.decorators import game_endpoint
from ..utils.game_logger import game_logger
from ..utils.helpers import require_fields

game_bp = Blueprint('game', __name__)


def _game_service():
    return current_app.game_service


@game_bp.route('/new_game', methods=['POST'])
@game_endpoint('new_game')
def new_game():
    """Create a new game session."""
    data = request.get_json(silent=True) or {}
    max_rounds = data.get('max_rounds', request.args.get('max_rounds', type=int))

    game_service = _game_service()
    game_id = game_service.create_new_game(max_rounds)
    state = game_service.get_game_state(game_id)

    return {
        'success': True,
        'game_id': game_id,
        'state': asdict(state)
    }


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@game_endpoint('get_state')
def get_state(game_id):
    """Get current game state."""
    state = _game_service().get_game_state(game_id)
    return {
        'success': True,
        'state': asdict(state)
    }


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@game_endpoint('submit_guess')
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    data = require_fields(request.get_json(silent=True), 'guess')

    verdicts, state = _game_service().make_guess(game_id, data['guess'])

    # Log special game events
    if state.game_over:
        game_logger.log_game_event(
            game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
            rounds_used=state.current_round, target_word=state.answer
        )

    return {
        'success': True,
        'result': [verdict.to_dict() for verdict in verdicts],
        'state': asdict(state)
    }


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@game_endpoint('delete_game')
def delete_game(game_id):
    """Delete a game session. Unknown ids are not an error."""
    deleted = _game_service().delete_game(game_id)
    if deleted:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
    return {
        'success': True,
        'deleted': deleted
    }


@game_bp.route('/health', methods=['GET'])
@game_endpoint('health_check')
def health_check():
    """Health check endpoint."""
    return {
        'status': 'healthy',
        'active_games': len(_game_service().games),
        'active_rooms': len(current_app.lobby_service.rooms),
        'dictionary_size': len(current_app.dictionary),
        'log_stats': game_logger.get_log_stats()
    }
