"""Service layer wiring."""

from flask import current_app
from bloodcloud.models import MessageStore, SessionStore
from .auth import AuthService, CredentialTable
from .contact import ContactService


def init_services(app, hasher):
    """Give the app its own stores and the services that use them."""
    app.extensions['auth_service'] = AuthService.from_config(
        SessionStore(), hasher, app.config)
    app.extensions['contact_service'] = ContactService(MessageStore())


def get_auth_service() -> AuthService:
    return current_app.extensions['auth_service']


def get_contact_service() -> ContactService:
    return current_app.extensions['contact_service']


__all__ = [
    'AuthService',
    'CredentialTable',
    'ContactService',
    'init_services',
    'get_auth_service',
    'get_contact_service',
]
