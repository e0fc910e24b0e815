"""Admin and staff authentication over bearer session tokens."""

import logging
from bloodcloud.errors import InvalidCredentials, InvalidOrExpiredSession, RoleMismatch
from bloodcloud.models import Role

logger = logging.getLogger(__name__)


class CredentialTable:
    """Static username/password pairs, kept as bcrypt hashes."""

    def __init__(self, hasher, accounts):
        self._hasher = hasher
        self._hashes = {
            username: hasher.generate_password_hash(password)
            for username, password in accounts
        }
        # Compared against when the username is unknown, so both
        # failure paths cost one hash check.
        self._dummy_hash = hasher.generate_password_hash('unused-credential')

    def check(self, username, password):
        pw_hash = self._hashes.get(username)
        if pw_hash is None:
            self._hasher.check_password_hash(self._dummy_hash, password)
            return False
        return self._hasher.check_password_hash(pw_hash, password)


class AuthService:
    """Issues, verifies and revokes sessions for the two account tiers."""

    def __init__(self, session_store, credentials):
        self.sessions = session_store
        self._credentials = credentials

    @classmethod
    def from_config(cls, session_store, hasher, config):
        credentials = {
            Role.ADMIN: CredentialTable(
                hasher, [(config['ADMIN_USERNAME'], config['ADMIN_PASSWORD'])]),
            Role.STAFF: CredentialTable(hasher, config['STAFF_ACCOUNTS']),
        }
        return cls(session_store, credentials)

    def login(self, role, username, password):
        """Check credentials against the table for ``role``.

        Returns the new SessionIdentity; its ``token`` is the bearer
        credential. Unknown usernames and wrong passwords both raise
        InvalidCredentials.
        """
        if not self._credentials[role].check(username, password):
            logger.warning('Failed %s login for %r', role.value, username)
            raise InvalidCredentials()
        identity = self.sessions.create(role, username)
        logger.info('%s %r logged in', role.value.capitalize(), username)
        return identity

    def logout(self, token):
        """Revoke a token. Unknown or already revoked tokens are fine."""
        identity = self.sessions.get(token)
        if self.sessions.revoke(token):
            logger.info('%s %r logged out', identity.role.value.capitalize(), identity.username)

    def verify(self, token, role=None):
        """Return the identity for ``token``; ``role`` demands a specific tier."""
        identity = self.sessions.get(token)
        if identity is None:
            raise InvalidOrExpiredSession()
        if role is not None and identity.role is not role:
            raise RoleMismatch()
        return identity
