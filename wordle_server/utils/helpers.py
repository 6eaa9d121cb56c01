"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional

from flask import request

from ..exceptions import InvalidRequest


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    player_id = None
    view_args = getattr(request_obj, 'view_args', None) or {}
    if 'player_id' in view_args:
        player_id = view_args['player_id']
    elif hasattr(request_obj, 'get_json'):
        body = request_obj.get_json(silent=True)
        if isinstance(body, dict):
            player_id = body.get('player_id') or body.get('creator_id')

    return {
        'user_ip': user_ip,
        'player_id': player_id
    }


def require_fields(data: Optional[Dict[str, Any]], *fields: str) -> Dict[str, Any]:
    """
    Check a JSON body for required, non-blank fields.

    Raises:
        InvalidRequest: Naming the first missing field
    """
    if not isinstance(data, dict):
        data = {}
    for name in fields:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise InvalidRequest(name)
    return data
