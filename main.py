"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It builds the application and starts the Flask-SocketIO server.
"""

import os

from wordle_server import create_app
from wordle_server.config import config
from wordle_server.exceptions import EmptyDictionary
from wordle_server.utils.game_logger import game_logger


def main():
    """Main function to build the app and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print(f"✓ Dictionary loaded with {len(app.dictionary)} words")
        print("✓ Flask application created successfully")
    except (EmptyDictionary, FileNotFoundError, ValueError) as e:
        print(f"✗ Cannot start: {e}")
        game_logger.logger.critical(f"Startup aborted: {e}")
        raise SystemExit(1)

    game_logger.logger.info("Wordle Server Starting")

    print(f"\nStarting Wordle Game Server on {config_class.HOST}:{config_class.PORT}")
    print(f"Debug mode: {config_class.DEBUG}")
    print("=" * 50)

    try:
        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")


if __name__ == '__main__':
    main()
