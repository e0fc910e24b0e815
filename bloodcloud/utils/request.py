"""Helpers for reading API request bodies and session tokens."""

from flask import request
from werkzeug.datastructures import MultiDict


def get_payload():
    """Request body as a MultiDict, from JSON or form encoding."""
    if request.is_json:
        data = request.get_json(silent=True)
        return MultiDict(data if isinstance(data, dict) else {})
    return MultiDict(request.form)


def get_session_token(payload=None):
    """Token from the ``sessionToken`` body field or the request headers."""
    token = payload.get('sessionToken') if payload is not None else None
    if not token:
        auth_header = request.headers.get('Authorization', '')
        if auth_header.startswith('Bearer '):
            token = auth_header[len('Bearer '):].strip()
    if not token:
        token = request.headers.get('X-Session-Token')
    return token if isinstance(token, str) and token else None
