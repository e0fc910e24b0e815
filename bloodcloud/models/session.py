"""Session identities and the in-memory session store."""

import enum
import threading
from flask_login import UserMixin
from bloodcloud.utils.ids import generate_session_token


class Role(str, enum.Enum):
    """Authorization class of a session."""
    ADMIN = 'admin'
    STAFF = 'staff'


class SessionIdentity(UserMixin):
    """Who a session token belongs to."""

    def __init__(self, token, role, username):
        self.token = token
        self.role = role
        self.username = username

    def get_id(self):
        return self.token

    def to_dict(self):
        return {'username': self.username, 'userType': self.role.value}

    def __repr__(self):
        return f'<SessionIdentity {self.role.value}:{self.username}>'


class SessionStore:
    """Maps opaque session tokens to identities for the life of the process."""

    def __init__(self, token_factory=generate_session_token):
        self._token_factory = token_factory
        self._sessions = {}
        self._lock = threading.Lock()

    def create(self, role, username):
        """Issue a token unique among active sessions and record its identity."""
        with self._lock:
            token = self._token_factory()
            while token in self._sessions:
                token = self._token_factory()
            identity = SessionIdentity(token, role, username)
            self._sessions[token] = identity
            return identity

    def get(self, token):
        if not token:
            return None
        with self._lock:
            return self._sessions.get(token)

    def revoke(self, token):
        """Drop a token. Returns True if it was active."""
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def __contains__(self, token):
        with self._lock:
            return token in self._sessions

    def __len__(self):
        with self._lock:
            return len(self._sessions)
