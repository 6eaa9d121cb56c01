"""
Game Logger Module for Wordle Server

This module provides logging for user actions, server responses, and game
events as JSON structured lines.
"""

import json
import logging
import logging.handlers
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .helpers import get_user_identity

LOGGER_NAME = 'wordle_game'
LOG_FILE_NAME = 'game_log.log'


class GameLogger:
    """
    Centralized logging system for Wordle game server.

    Features:
    - User action tracking with IP identification
    - Server response logging
    - Game event logging (wins, losses, room results)
    - JSON structured logs for easy parsing

    Engine modules log through child loggers (``wordle_game.<name>``) and
    end up in the same handlers.
    """

    def __init__(self):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.log_dir: Optional[Path] = None
        self.file_handler: Optional[logging.handlers.TimedRotatingFileHandler] = None

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        """
        Attach handlers. Called once per application by ``create_app``.

        An empty ``log_dir`` disables the daily log file.
        """
        self.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        self.logger.addHandler(console_handler)

        self.log_dir = Path(log_dir) if log_dir else None
        self.file_handler = None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            # Rolls over at midnight; older days keep a date suffix
            file_handler = logging.handlers.TimedRotatingFileHandler(
                self.log_dir / LOG_FILE_NAME, when='midnight', encoding='utf-8'
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(file_handler)
            self.file_handler = file_handler

        return self.logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Any],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        entity_id: Optional[str] = None,
                        **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'join_room')
            entity_id: Game or room identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'entity_id': entity_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, get_user_identity(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            entity_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Failed responses are expected conditions (bad guess, full room) and
        are logged at WARNING; unexpected errors go through ``log_error``.
        """
        details = {
            'entity_id': entity_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, get_user_identity(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_game_event(self,
                       entity_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, room results, etc.).

        Args:
            entity_id: Game or room identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'room_finished')
            user_ip: User's IP address
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip, 'player_id': None}

        details = {
            'entity_id': entity_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  entity_id: Optional[str] = None):
        """Log unexpected errors with full context and traceback."""
        details = {
            'entity_id': entity_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self.logger.error(log_message, exc_info=error)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Summarize large payloads so the log stays readable."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_round': state.get('current_round'),
                'max_rounds': state.get('max_rounds'),
                'outcome': state.get('outcome'),
                'guesses_count': len(state.get('guesses') or []),
                'answer_revealed': state.get('answer') is not None
            }

        if 'room' in sanitized and isinstance(sanitized['room'], dict):
            room = sanitized['room']
            sanitized['room'] = {
                'room_id': room.get('room_id'),
                'status': room.get('status'),
                'players_count': len(room.get('players') or []),
                'word_revealed': room.get('target_word') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events (useful for monitoring)."""
        if self.file_handler is None:
            return {'error': 'File logging disabled'}

        log_file = Path(self.file_handler.baseFilename)
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif '"ERROR"' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger()
