"""
Endpoint Decorators

Wrap HTTP routes and WebSocket handlers so game errors become client
responses in one place, with request/response logging around them.
"""

from functools import wraps

from flask import jsonify, request
from flask_socketio import emit
from werkzeug.exceptions import HTTPException

from ..exceptions import (
    CannotStart, EmptyDictionary, InvalidFormat, InvalidRequest, InvalidSettings, NotFound,
    PlayerFinished, RoomFull, RoomNotInProgress, RoomNotWaiting, SessionTerminal, UnknownWord,
    WordleError
)
from .game_logger import game_logger

STATUS_BY_ERROR = {
    NotFound: 404,
    InvalidFormat: 422,
    UnknownWord: 422,
    SessionTerminal: 409,
    RoomNotInProgress: 409,
    PlayerFinished: 409,
    RoomFull: 409,
    RoomNotWaiting: 409,
    CannotStart: 409,
    InvalidSettings: 400,
    InvalidRequest: 400,
    EmptyDictionary: 500,
}

INTERNAL_ERROR = {
    'success': False,
    'error': 'INTERNAL_ERROR',
    'message': 'An unexpected error occurred. Please try again.'
}


def status_for(error: WordleError) -> int:
    for cls in type(error).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 400


def error_body(error: WordleError) -> dict:
    return {'success': False, 'error': error.code, 'message': error.message}


def _entity_id(kwargs):
    return kwargs.get('game_id') or kwargs.get('room_id')


def game_endpoint(action):
    """
    Decorator for HTTP routes that call the game services.

    The route returns a dict (or a ``(dict, status)`` pair); the decorator
    adds logging and turns ``WordleError`` into a JSON error response.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            entity_id = _entity_id(kwargs)
            game_logger.log_user_action(request, action, entity_id)

            try:
                result = f(*args, **kwargs)
            except WordleError as error:
                body = error_body(error)
                game_logger.log_server_response(request, action, False, body, entity_id)
                return jsonify(body), status_for(error)
            except HTTPException:
                raise
            except Exception as error:
                game_logger.log_error(request, error, action, entity_id)
                return jsonify(INTERNAL_ERROR), 500

            response_data, status = result if isinstance(result, tuple) else (result, 200)
            game_logger.log_server_response(request, action, True, response_data, entity_id)
            return jsonify(response_data), status

        return decorated_function
    return decorator


def socket_endpoint(action):
    """Decorator for WebSocket handlers; errors are emitted back to the sender."""
    def decorator(f):
        @wraps(f)
        def decorated_function(data=None, *args, **kwargs):
            if not isinstance(data, dict):
                data = {}
            try:
                return f(data, *args, **kwargs)
            except WordleError as error:
                game_logger.logger.info("WebSocket %s rejected: %s", action, error.code)
                emit('error', {**error_body(error), 'action': action})
            except Exception as error:
                game_logger.log_error(request, error, action, data.get('room_id'))
                emit('error', {**INTERNAL_ERROR, 'action': action})

        return decorated_function
    return decorator
