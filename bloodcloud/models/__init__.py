"""In-memory models package."""

from .session import Role, SessionIdentity, SessionStore
from .contact import ContactMessage, NewsletterSubscription, MessageStore

__all__ = [
    'Role',
    'SessionIdentity',
    'SessionStore',
    'ContactMessage',
    'NewsletterSubscription',
    'MessageStore',
]
