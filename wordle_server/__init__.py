"""
Wordle Game Server Application Package

Single player Wordle sessions and multiplayer race rooms over HTTP and
WebSocket. The game engine lives in ``services`` and never does I/O; this
module wires it to Flask.
"""

import random

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from .config import Config, cors_origins, get_word_statistics, read_word_file


def build_dictionary(app_config):
    """Dictionary from an inline WORD_LIST or the WORD_LIST_PATH file."""
    from .models.dictionary import Dictionary

    words = app_config.get('WORD_LIST')
    if words is None:
        words = read_word_file(app_config.get('WORD_LIST_PATH'))
    return Dictionary.from_words(words)


def create_app(config_class=Config, dictionary=None, rng=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        dictionary: Prebuilt Dictionary; loaded from configuration when omitted
        rng: Random source with a ``choice`` method shared by both services

    Returns:
        Flask application instance and its SocketIO server

    Raises:
        EmptyDictionary: If no usable word could be loaded
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .utils.game_logger import game_logger
    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    # Build the game engine once and hand it to the transport layer
    from .services.game_service import GameService
    from .services.lobby_service import LobbyService

    if dictionary is None:
        dictionary = build_dictionary(app.config)
    rng = rng or random.Random()

    app.dictionary = dictionary
    app.game_service = GameService(dictionary, rng, default_max_rounds=app.config['MAX_ROUNDS'])
    app.lobby_service = LobbyService(dictionary, rng, default_capacity=app.config['DEFAULT_ROOM_CAPACITY'])

    stats = get_word_statistics(dictionary)
    game_logger.logger.info(
        "Dictionary loaded: %d words, most common letters %s",
        stats['total_words'], stats['most_common_letters']
    )

    # Initialize extensions
    origins = cors_origins(app.config.get('CORS_ORIGINS'))
    CORS(app, origins=origins)
    socketio = SocketIO(app, cors_allowed_origins=origins, logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.lobby_controller import lobby_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(lobby_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
